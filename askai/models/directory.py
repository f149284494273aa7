"""AI directory entry model.

The directory is a static, read-only list of AI companies and tools loaded
from a JSON file (``data/ai_directory.json`` by default).  It is served next
to the fan-out endpoint but shares nothing with it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DirectoryEntry(BaseModel):
    """A single company/tool listed in the AI directory."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str = Field(min_length=1)
    category: str = ""
    summary: str = ""
    use_cases: list[str] = Field(default_factory=list, alias="useCases")
    url: str | None = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("use_cases", "tags", mode="before")
    @classmethod
    def _split_strings(cls, value: object) -> object:
        # Hand-edited files sometimes carry "a, b, c" instead of a list.
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    def matches(self, needle: str) -> bool:
        """Case-insensitive substring match across name, category, summary and use cases.

        *needle* must already be lower-cased.
        """
        haystacks = [self.name, self.category, self.summary, *self.use_cases]
        return any(needle in h.lower() for h in haystacks)
