"""Configuration record describing one remote LLM provider.

A :class:`ProviderSpec` captures everything that differs between providers
-- endpoint, authentication header, request body shape, where the answer
text lives in the response -- so a single generic adapter
(``askai.providers.llm.http_provider.HTTPLLMProvider``) can talk to all of
them.  Specs are declared in ``askai.config.provider_catalog`` and may be
tuned per deployment through ``config/config.yaml``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProviderSpec(BaseModel):
    """Static description of one provider's request/response contract."""

    model_config = ConfigDict(frozen=True)

    # -- Identity --
    id: str = Field(description="Registry key, lower-case (e.g. 'openai').")
    name: str = Field(description="Display name shown to clients (e.g. 'OpenAI').")
    group: str = Field(default="Standalone", description="'Standalone' or 'Bedrock'.")

    # -- Endpoint --
    # May contain {model} and {region}; both are filled in per call.
    url: str

    # -- Credentials and model selection (names of Settings fields) --
    credential_setting: str
    model_setting: str | None = None
    default_model: str

    # -- Authentication header --
    auth_header: str = "Authorization"
    # "Bearer" renders "Bearer <key>"; empty string sends the raw key.
    auth_scheme: str = "Bearer"
    extra_headers: dict[str, str] = Field(default_factory=dict)

    # -- Request / response mapping --
    body_template: dict[str, Any]
    text_paths: list[tuple[str | int, ...]] = Field(
        description="Paths tried in order to locate the answer text."
    )

    # -- Call policy --
    fallback_models: list[str] = Field(
        default_factory=list,
        description="Alternate model ids tried in order when the primary is retired.",
    )
    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Per-call timeout in seconds; None uses the global setting.",
    )
