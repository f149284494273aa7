"""Unit tests for askai.services.provider_registry."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from askai.config.provider_catalog import PROVIDER_CATALOG
from askai.services.provider_registry import ProviderRegistry, canonical_provider_id


@pytest.fixture
def registry_of(fake_provider: Callable) -> Callable[..., ProviderRegistry]:
    def _build(*ids: str) -> ProviderRegistry:
        return ProviderRegistry(fake_provider(i) for i in ids)

    return _build


def _ids(providers) -> list[str]:
    return [p.get_provider_name() for p in providers]


class TestCanonicalId:
    def test_trims_and_lowercases(self) -> None:
        assert canonical_provider_id("  OpenAI ") == "openai"

    def test_none_and_non_strings(self) -> None:
        assert canonical_provider_id(None) == ""
        assert canonical_provider_id(42) == "42"


class TestResolve:
    def test_empty_selection_returns_all_in_registry_order(self, registry_of: Callable) -> None:
        registry = registry_of("a", "b", "c")
        assert _ids(registry.resolve(None)) == ["a", "b", "c"]
        assert _ids(registry.resolve([])) == ["a", "b", "c"]

    def test_caller_order_is_kept(self, registry_of: Callable) -> None:
        assert _ids(registry_of("a", "b", "c").resolve(["c", "a"])) == ["c", "a"]

    def test_unknown_ids_are_dropped(self, registry_of: Callable) -> None:
        registry = registry_of("openai", "groq")
        assert _ids(registry.resolve(["openai", "not-a-real-provider"])) == ["openai"]

    def test_all_unknown_resolves_to_nothing(self, registry_of: Callable) -> None:
        assert registry_of("openai").resolve(["nope"]) == []

    def test_normalises_and_dedupes(self, registry_of: Callable) -> None:
        registry = registry_of("openai", "groq")
        resolved = registry.resolve([" GROQ", "groq", "OpenAI", "groq "])
        assert _ids(resolved) == ["groq", "openai"]


class TestRegistry:
    def test_duplicate_ids_rejected(self, registry_of: Callable) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            registry_of("a", "A")

    def test_counts_and_metadata(self, fake_provider: Callable) -> None:
        registry = ProviderRegistry([fake_provider("a"), fake_provider("b", available=False)])
        assert len(registry) == 2
        assert registry.ids() == ["a", "b"]
        assert registry.configured_count() == 1
        assert [info["id"] for info in registry.describe_all()] == ["a", "b"]

    def test_from_specs_builds_full_catalog(self, make_settings: Callable) -> None:
        registry = ProviderRegistry.from_specs(
            PROVIDER_CATALOG,
            make_settings(openai_api_key="sk"),
            httpx.AsyncClient(),
        )
        assert registry.ids() == [spec.id for spec in PROVIDER_CATALOG]
        assert registry.configured_count() == 1

    def test_bedrock_token_enables_both_bedrock_models(self, make_settings: Callable) -> None:
        registry = ProviderRegistry.from_specs(
            PROVIDER_CATALOG,
            make_settings(aws_bearer_token_bedrock="br"),
            httpx.AsyncClient(),
        )
        enabled = [info["id"] for info in registry.describe_all() if info["enabled"]]
        assert enabled == ["bedrock_claude_sonnet", "bedrock_nova_micro"]
