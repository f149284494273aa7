"""Application settings loaded from environment variables via pydantic-settings.

# ─── HOW SETTINGS WORK ─────────────────────────────────────────────────
#
# Values are read from TWO sources (in priority order):
#
#   1. **Environment variables** -- e.g., OPENAI_API_KEY=sk-abc123
#   2. **.env file** -- key=value lines in the project root .env file
#
# Field name `openai_api_key` maps to env var `OPENAI_API_KEY`
# (pydantic-settings matches case-insensitively).
#
# Every provider has one credential field and, where the model can vary,
# one model-override field.  An empty credential means "not configured":
# that provider answers with a placeholder instead of calling out.
#
# A Settings instance is built once at startup and handed to every adapter;
# nothing mutates it afterwards.
# ──────────────────────────────────────────────────────────────────────
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Ask-AI application settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # === Standalone LLM providers ===
    openai_api_key: str = ""
    openai_model: str = ""
    mistral_api_key: str = ""
    mistral_model: str = ""
    gemini_api_key: str = ""
    gemini_model: str = ""
    groq_api_key: str = ""
    groq_model: str = ""
    deepseek_api_key: str = ""
    deepseek_model: str = ""
    anthropic_api_key: str = ""
    anthropic_model: str = ""
    xai_api_key: str = ""  # Grok
    grok_model: str = ""
    cohere_api_key: str = ""
    cohere_model: str = ""
    huggingface_api_key: str = ""
    huggingface_model: str = ""
    perplexity_api_key: str = ""
    perplexity_model: str = ""

    # === Amazon Bedrock (Converse API, bearer API key) ===
    aws_bearer_token_bedrock: str = ""
    aws_region: str = "eu-west-1"
    bedrock_claude_sonnet_model_id: str = ""
    bedrock_nova_micro_model_id: str = ""

    # === Fan-out policy ===
    request_timeout: float = 20.0  # seconds, per outbound call
    max_prompt_chars: int = 2000  # 0 disables truncation
    reject_empty_prompt: bool = False
    max_concurrent_calls: int = 0  # 0 = all providers at once

    # === AI directory ===
    directory_path: str = "data/ai_directory.json"

    # === App Config ===
    config_path: str = "config/config.yaml"
    cors_origins: str = "*"  # comma-separated
    app_host: str = "0.0.0.0"
    app_port: int = 3000
    app_env: str = "development"
    log_level: str = "INFO"

    def credential_for(self, field_name: str) -> str:
        """Return the stripped value of a credential field, or ``""``."""
        return str(getattr(self, field_name, "") or "").strip()

    def model_override(self, field_name: str | None) -> str:
        """Return the stripped model override for *field_name*, or ``""``."""
        if not field_name:
            return ""
        return str(getattr(self, field_name, "") or "").strip()

    def get_cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()] or ["*"]
