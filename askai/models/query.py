"""Request and response models for one fan-out round.

A round starts with a :class:`Query` (the prompt after trimming and the
optional length cap), produces one :class:`ProviderResult` per resolved
provider, and ends as an :class:`AggregateResponse`.  All three are frozen;
nothing here outlives a single request.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Query(BaseModel):
    """The prompt as it will be sent to every provider."""

    model_config = ConfigDict(frozen=True)

    prompt: str = Field(default="", description="Trimmed, possibly truncated prompt text.")
    truncated: bool = Field(
        default=False,
        description="True when the incoming prompt exceeded the length cap.",
    )

    @classmethod
    def from_raw(cls, raw: str | None, max_chars: int = 0) -> Query:
        """Build a query from untrusted input.

        Leading/trailing whitespace is removed first, then the text is cut to
        *max_chars* characters.  ``max_chars <= 0`` disables the cap.
        """
        text = (raw or "").strip()
        if max_chars > 0 and len(text) > max_chars:
            return cls(prompt=text[:max_chars], truncated=True)
        return cls(prompt=text)

    @property
    def is_empty(self) -> bool:
        return not self.prompt


class ProviderResult(BaseModel):
    """One provider's answer -- or the placeholder / classified error in its place."""

    model_config = ConfigDict(frozen=True)

    provider: str = Field(description="Display name of the provider, e.g. 'OpenAI'.")
    text: str = Field(description="Answer text, placeholder, or classified error.")


class AggregateResponse(BaseModel):
    """The unified answer list returned to the client."""

    model_config = ConfigDict(frozen=True)

    prompt: str
    answers: list[ProviderResult] = Field(default_factory=list)
