"""Ordered registry of LLM provider adapters.

The registry owns the one fixed mapping from provider id to adapter and
answers the question "which adapters run for this request, in what order?".

Selection rules (:meth:`ProviderRegistry.resolve`):
    - ``None`` or an empty list  -> every registered adapter, registry order
    - otherwise                  -> ids trimmed + lower-cased, unknown ids
                                    dropped silently, duplicates collapsed,
                                    caller's order kept
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

import httpx

from askai.config.settings import Settings
from askai.interfaces.llm_provider import ILLMProvider
from askai.models.provider import ProviderSpec
from askai.providers.llm.http_provider import HTTPLLMProvider


def canonical_provider_id(raw: object) -> str:
    """Normalise a client-supplied provider id (trim + lower-case)."""
    return str(raw if raw is not None else "").strip().lower()


class ProviderRegistry:
    """Immutable, ordered id -> adapter map."""

    def __init__(self, providers: Iterable[ILLMProvider]) -> None:
        self._providers: dict[str, ILLMProvider] = {}
        for provider in providers:
            key = canonical_provider_id(provider.get_provider_name())
            if key in self._providers:
                raise ValueError(f"Duplicate provider id: {key}")
            self._providers[key] = provider

    @classmethod
    def from_specs(
        cls,
        specs: Iterable[ProviderSpec],
        settings: Settings,
        http_client: httpx.AsyncClient,
    ) -> ProviderRegistry:
        """Build one :class:`HTTPLLMProvider` per spec, in spec order."""
        return cls(HTTPLLMProvider(spec, settings, http_client) for spec in specs)

    def resolve(self, selection: Sequence[object] | None = None) -> list[ILLMProvider]:
        """Return the adapters to run for *selection*, in dispatch order."""
        if not selection:
            return list(self._providers.values())

        resolved: list[ILLMProvider] = []
        seen: set[str] = set()
        for raw in selection:
            key = canonical_provider_id(raw)
            if key in seen or key not in self._providers:
                continue
            seen.add(key)
            resolved.append(self._providers[key])
        return resolved

    def describe_all(self) -> list[dict[str, Any]]:
        return [provider.describe() for provider in self._providers.values()]

    def ids(self) -> list[str]:
        return list(self._providers)

    def configured_count(self) -> int:
        return sum(1 for p in self._providers.values() if p.is_available())

    def __len__(self) -> int:
        return len(self._providers)
