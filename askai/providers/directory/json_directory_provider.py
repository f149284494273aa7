"""AI directory backed by a static JSON file.

The file holds either a bare list of entries or ``{"entries": [...]}``.
Each entry needs at least a ``name``; ``category``, ``summary``,
``use_cases`` (or ``useCases``), ``url`` and ``tags`` are optional.
Entries that fail validation are skipped with a warning so one typo does
not take the whole directory down.

The file is read lazily on first access and cached in memory until
:meth:`JSONDirectoryProvider.reload` is called.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from askai.interfaces.directory_provider import IDirectoryProvider
from askai.models.directory import DirectoryEntry
from askai.utils.errors import DirectoryError
from askai.utils.logging import get_logger


class JSONDirectoryProvider(IDirectoryProvider):
    """Read-only AI directory loaded from a JSON file on disk."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._entries: list[DirectoryEntry] | None = None
        # Guards the swap of the cached list during reload.
        self._lock = threading.Lock()
        self._logger = get_logger(__name__)

    # -- IDirectoryProvider ----------------------------------------------------

    def list_entries(self) -> list[DirectoryEntry]:
        entries = self._entries
        if entries is None:
            with self._lock:
                if self._entries is None:
                    self._entries = self._load()
                entries = self._entries
        return list(entries)

    def search(
        self,
        query: str = "",
        category: str | None = None,
        limit: int | None = None,
    ) -> list[DirectoryEntry]:
        needle = (query or "").strip().lower()
        wanted_category = (category or "").strip().lower()

        results: list[DirectoryEntry] = []
        for entry in self.list_entries():
            if wanted_category and entry.category.lower() != wanted_category:
                continue
            if needle and not entry.matches(needle):
                continue
            results.append(entry)
            if limit is not None and limit > 0 and len(results) >= limit:
                break
        return results

    def categories(self) -> list[str]:
        return sorted({e.category for e in self.list_entries() if e.category}, key=str.lower)

    def reload(self) -> int:
        entries = self._load()
        with self._lock:
            self._entries = entries
        self._logger.info("directory_reloaded", path=str(self._path), entries=len(entries))
        return len(entries)

    # -- Private helpers -------------------------------------------------------

    def _load(self) -> list[DirectoryEntry]:
        """Read and validate the JSON file."""
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise DirectoryError(message=f"Directory file not found: {self._path}") from exc
        except OSError as exc:
            raise DirectoryError(message=f"Cannot read directory file {self._path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise DirectoryError(message=f"Invalid JSON in {self._path}: {exc}") from exc

        items = _unwrap(raw)
        if items is None:
            raise DirectoryError(
                message=f"{self._path} must contain a list of entries or an 'entries' list"
            )

        entries: list[DirectoryEntry] = []
        for index, item in enumerate(items):
            try:
                entries.append(DirectoryEntry.model_validate(item))
            except ValidationError as exc:
                self._logger.warning(
                    "directory_entry_skipped",
                    path=str(self._path),
                    index=index,
                    error=str(exc.errors()[0]["msg"]) if exc.errors() else str(exc),
                )
        self._logger.debug("directory_loaded", path=str(self._path), entries=len(entries))
        return entries


def _unwrap(raw: Any) -> list[Any] | None:
    if isinstance(raw, list):
        return raw
    if isinstance(raw, dict) and isinstance(raw.get("entries"), list):
        return raw["entries"]
    return None
