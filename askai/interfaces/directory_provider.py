"""Abstract base class for the AI directory data source."""

from __future__ import annotations

from abc import ABC, abstractmethod

from askai.models.directory import DirectoryEntry


# Concrete implementation: JSONDirectoryProvider
# Located in: askai/providers/directory/
class IDirectoryProvider(ABC):
    """Read-only lookup over a list of AI companies and tools."""

    @abstractmethod
    def list_entries(self) -> list[DirectoryEntry]:
        """Return every entry in source order.

        Raises
        ------
        askai.utils.errors.DirectoryError
            If the underlying source cannot be read.
        """

    @abstractmethod
    def search(
        self,
        query: str = "",
        category: str | None = None,
        limit: int | None = None,
    ) -> list[DirectoryEntry]:
        """Case-insensitive substring search across name, category, summary and use cases.

        An empty *query* matches everything.  *category*, when given, must
        match an entry's category exactly (ignoring case).
        """

    @abstractmethod
    def categories(self) -> list[str]:
        """Return the sorted distinct categories."""

    @abstractmethod
    def reload(self) -> int:
        """Re-read the source and return the number of entries now loaded."""
