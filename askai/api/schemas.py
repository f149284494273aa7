"""Pydantic request/response schemas for the Ask-AI API.

# ─── HOW SCHEMAS WORK ─────────────────────────────────────────────────
#
# These models define the *shape* of every HTTP request and response body.
# FastAPI uses them for validation (bad JSON → 422), serialization
# (response_model=...), and the generated OpenAPI docs at /docs.
#
# Convention: Request schemas end with "Request", response schemas
# end with "Response".
#
# The /providers payload keeps the camelCase ``comingSoon`` key the web
# client already reads; it is produced through a serialization alias.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from askai.models.directory import DirectoryEntry
from askai.models.query import ProviderResult


class AskRequest(BaseModel):
    """Body of ``POST /ask``.

    Accepts what the web client sends: a null or missing prompt
    is an empty prompt, scalar prompts are stringified, and a ``providers``
    value that is not a list means "all providers".
    """

    prompt: str | None = Field(
        default=None, description="Free-form prompt; trimmed and length-capped."
    )
    providers: list[str] | None = Field(
        default=None,
        description="Optional provider ids to run, in answer order. Unknown ids are ignored.",
    )

    @field_validator("prompt", mode="before")
    @classmethod
    def _stringify_prompt(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("providers", mode="before")
    @classmethod
    def _stringify_providers(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return None
        return ["" if item is None else str(item) for item in value]


class AskResponse(BaseModel):
    """Unified answer list returned by ``POST /ask``."""

    prompt: str
    answers: list[ProviderResult]


class ProviderInfo(BaseModel):
    """One row of ``GET /providers``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    enabled: bool
    coming_soon: bool = Field(serialization_alias="comingSoon")
    group: str
    model: str | None = None


class ProvidersResponse(BaseModel):
    """List of registered LLM providers and whether each has a credential."""

    providers: list[ProviderInfo]


class HealthResponse(BaseModel):
    """Application health check response."""

    ok: bool = True
    version: str
    providers_configured: int
    providers_total: int


class DirectoryEntryResponse(BaseModel):
    """A directory entry as returned to clients."""

    name: str
    category: str
    summary: str
    use_cases: list[str]
    url: str | None = None
    tags: list[str] = Field(default_factory=list)

    @classmethod
    def from_entry(cls, entry: DirectoryEntry) -> DirectoryEntryResponse:
        return cls(
            name=entry.name,
            category=entry.category,
            summary=entry.summary,
            use_cases=list(entry.use_cases),
            url=entry.url,
            tags=list(entry.tags),
        )


class DirectorySearchResponse(BaseModel):
    """Result of ``GET /directory``."""

    count: int
    entries: list[DirectoryEntryResponse]


class DirectoryCategoriesResponse(BaseModel):
    categories: list[str]


class DirectoryReloadResponse(BaseModel):
    reloaded: bool = True
    count: int


class ErrorResponse(BaseModel):
    """Standard error response body."""

    error: str
    detail: str | None = None
