"""Static catalog of every LLM provider Ask-AI knows how to call.

Each entry is a :class:`~askai.models.provider.ProviderSpec`: endpoint,
auth header, request body template and answer-text paths.  The tuple order
is the default registry order -- the order answers appear in when a client
does not pick providers itself.

Most providers expose an OpenAI-style ``/chat/completions`` endpoint and
share ``_CHAT_BODY`` / ``_CHAT_TEXT_PATHS``; Gemini, Anthropic, Cohere and
the Bedrock Converse API each have their own shapes.

To add a provider: append a ProviderSpec here and add its credential (and
optional model override) field to ``askai.config.settings.Settings``.
"""

from __future__ import annotations

from askai.models.provider import ProviderSpec

# OpenAI-compatible chat completion request with a single user turn.
_CHAT_BODY = {
    "model": "{model}",
    "messages": [{"role": "user", "content": "{prompt}"}],
}

# Primary message content first, then the legacy completion text field.
_CHAT_TEXT_PATHS = [
    ("choices", 0, "message", "content"),
    ("choices", 0, "text"),
]

# Bedrock Converse request shared by all Bedrock-hosted models.
_CONVERSE_BODY = {
    "messages": [{"role": "user", "content": [{"text": "{prompt}"}]}],
    "inferenceConfig": {"maxTokens": 700, "temperature": 0.4},
}
_CONVERSE_URL = "https://bedrock-runtime.{region}.amazonaws.com/model/{model}/converse"


PROVIDER_CATALOG: tuple[ProviderSpec, ...] = (
    ProviderSpec(
        id="openai",
        name="OpenAI",
        url="https://api.openai.com/v1/chat/completions",
        credential_setting="openai_api_key",
        model_setting="openai_model",
        default_model="gpt-4o-mini",
        body_template={**_CHAT_BODY, "temperature": 0.7},
        text_paths=_CHAT_TEXT_PATHS,
    ),
    ProviderSpec(
        id="mistral",
        name="Mistral",
        url="https://api.mistral.ai/v1/chat/completions",
        credential_setting="mistral_api_key",
        model_setting="mistral_model",
        default_model="mistral-large-latest",
        body_template=_CHAT_BODY,
        text_paths=_CHAT_TEXT_PATHS,
    ),
    ProviderSpec(
        id="gemini",
        name="Google (Gemini)",
        url="https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent",
        credential_setting="gemini_api_key",
        model_setting="gemini_model",
        default_model="gemini-1.5-flash",
        auth_header="x-goog-api-key",
        auth_scheme="",
        body_template={"contents": [{"parts": [{"text": "{prompt}"}]}]},
        text_paths=[("candidates", 0, "content", "parts", 0, "text")],
    ),
    ProviderSpec(
        id="groq",
        name="Groq",
        url="https://api.groq.com/openai/v1/chat/completions",
        credential_setting="groq_api_key",
        model_setting="groq_model",
        default_model="llama-3.3-70b-versatile",
        body_template=_CHAT_BODY,
        text_paths=_CHAT_TEXT_PATHS,
        # Groq retires model ids regularly; these are tried in order when it does.
        fallback_models=["llama-3.1-8b-instant", "gemma2-9b-it"],
    ),
    ProviderSpec(
        id="deepseek",
        name="DeepSeek",
        url="https://api.deepseek.com/v1/chat/completions",
        credential_setting="deepseek_api_key",
        model_setting="deepseek_model",
        default_model="deepseek-chat",
        body_template=_CHAT_BODY,
        text_paths=_CHAT_TEXT_PATHS,
    ),
    ProviderSpec(
        id="anthropic",
        name="Claude",
        url="https://api.anthropic.com/v1/messages",
        credential_setting="anthropic_api_key",
        model_setting="anthropic_model",
        default_model="claude-3-5-haiku-latest",
        auth_header="x-api-key",
        auth_scheme="",
        extra_headers={"anthropic-version": "2023-06-01"},
        body_template={**_CHAT_BODY, "max_tokens": 1024},
        text_paths=[("content", 0, "text")],
    ),
    ProviderSpec(
        id="grok",
        name="Grok",
        url="https://api.x.ai/v1/chat/completions",
        credential_setting="xai_api_key",
        model_setting="grok_model",
        default_model="grok-2-latest",
        body_template=_CHAT_BODY,
        text_paths=_CHAT_TEXT_PATHS,
    ),
    ProviderSpec(
        id="cohere",
        name="Cohere",
        url="https://api.cohere.com/v2/chat",
        credential_setting="cohere_api_key",
        model_setting="cohere_model",
        default_model="command-r-plus",
        body_template=_CHAT_BODY,
        # v2 chat first, then the v1 top-level "text" field.
        text_paths=[("message", "content", 0, "text"), ("text",)],
    ),
    ProviderSpec(
        id="huggingface",
        name="Hugging Face",
        url="https://router.huggingface.co/v1/chat/completions",
        credential_setting="huggingface_api_key",
        model_setting="huggingface_model",
        default_model="meta-llama/Llama-3.1-8B-Instruct",
        body_template=_CHAT_BODY,
        text_paths=[*_CHAT_TEXT_PATHS, (0, "generated_text")],
    ),
    ProviderSpec(
        id="perplexity",
        name="Perplexity",
        url="https://api.perplexity.ai/chat/completions",
        credential_setting="perplexity_api_key",
        model_setting="perplexity_model",
        default_model="sonar",
        body_template=_CHAT_BODY,
        text_paths=_CHAT_TEXT_PATHS,
    ),
    ProviderSpec(
        id="bedrock_claude_sonnet",
        name="Claude Sonnet",
        group="Bedrock",
        url=_CONVERSE_URL,
        credential_setting="aws_bearer_token_bedrock",
        model_setting="bedrock_claude_sonnet_model_id",
        default_model="anthropic.claude-3-sonnet-20240229-v1:0",
        body_template=_CONVERSE_BODY,
        text_paths=[("output", "message", "content", 0, "text")],
    ),
    ProviderSpec(
        id="bedrock_nova_micro",
        name="Amazon Nova",
        group="Bedrock",
        url=_CONVERSE_URL,
        credential_setting="aws_bearer_token_bedrock",
        model_setting="bedrock_nova_micro_model_id",
        default_model="amazon.nova-micro-v1:0",
        body_template=_CONVERSE_BODY,
        text_paths=[("output", "message", "content", 0, "text")],
    ),
)


def catalog_by_id() -> dict[str, ProviderSpec]:
    """Return the catalog keyed by provider id, preserving catalog order."""
    return {spec.id: spec for spec in PROVIDER_CATALOG}
