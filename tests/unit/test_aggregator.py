"""Unit tests for the fan-out QueryAggregator."""

from __future__ import annotations

import time
from typing import Callable

import httpx
import pytest

from askai.config.provider_catalog import PROVIDER_CATALOG
from askai.services.aggregator import QueryAggregator
from askai.services.provider_registry import ProviderRegistry
from askai.utils.errors import PromptValidationError, ProviderCallError


def _aggregator(*providers, **kwargs) -> QueryAggregator:
    return QueryAggregator(ProviderRegistry(providers), **kwargs)


class TestFanOut:
    @pytest.mark.asyncio
    async def test_one_answer_per_resolved_provider(self, fake_provider: Callable) -> None:
        aggregator = _aggregator(
            fake_provider("a", reply="A!"), fake_provider("b", reply="B!"), fake_provider("c")
        )
        result = await aggregator.aggregate("Hello")
        assert [a.provider for a in result.answers] == ["A", "B", "C"]
        assert [a.text for a in result.answers] == ["A!", "B!", "ok"]
        assert result.prompt == "Hello"

    @pytest.mark.asyncio
    async def test_answers_follow_selection_order_not_completion_order(
        self, fake_provider: Callable
    ) -> None:
        aggregator = _aggregator(
            fake_provider("a", reply="A"), fake_provider("b", reply="B", delay=0.05)
        )
        result = await aggregator.aggregate("x", ["b", "a"])
        assert [a.text for a in result.answers] == ["B", "A"]

    @pytest.mark.asyncio
    async def test_calls_run_concurrently(self, fake_provider: Callable) -> None:
        aggregator = _aggregator(*(fake_provider(str(i), delay=0.1) for i in range(5)))
        start = time.perf_counter()
        await aggregator.aggregate("x")
        assert time.perf_counter() - start < 0.4

    @pytest.mark.asyncio
    async def test_unknown_provider_ids_are_ignored(self, fake_provider: Callable) -> None:
        aggregator = _aggregator(fake_provider("openai", name="OpenAI"), fake_provider("groq"))
        result = await aggregator.aggregate("x", ["openai", "not-a-real-provider"])
        assert len(result.answers) == 1
        assert result.answers[0].provider == "OpenAI"

    @pytest.mark.asyncio
    async def test_selection_with_no_known_ids_returns_empty_list(
        self, fake_provider: Callable
    ) -> None:
        result = await _aggregator(fake_provider("a")).aggregate("x", ["zzz"])
        assert result.answers == []

    @pytest.mark.asyncio
    async def test_same_request_gives_same_answers(self, fake_provider: Callable) -> None:
        aggregator = _aggregator(
            fake_provider("a", reply="A"),
            fake_provider("b", error=ProviderCallError("Request failed with status code 429")),
        )
        first = await aggregator.aggregate("x")
        second = await aggregator.aggregate("x")
        assert first == second


class TestFailureIsolation:
    @pytest.mark.asyncio
    async def test_provider_error_is_classified_and_others_still_answer(
        self, fake_provider: Callable
    ) -> None:
        aggregator = _aggregator(
            fake_provider("a", error=ProviderCallError("Request failed with status code 401")),
            fake_provider("b", reply="fine"),
        )
        result = await aggregator.aggregate("x")
        assert [a.text for a in result.answers] == ["Auth failed (check API key).", "fine"]

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_classified(self, fake_provider: Callable) -> None:
        result = await _aggregator(fake_provider("a", error=KeyError("choices"))).aggregate("x")
        assert result.answers[0].text == "Unexpected error: 'choices'"

    @pytest.mark.asyncio
    async def test_hung_provider_is_cut_off_at_its_timeout(self, fake_provider: Callable) -> None:
        aggregator = _aggregator(
            fake_provider("hung", delay=10, timeout=0.1),
            fake_provider("quick", reply="fast answer"),
        )
        start = time.perf_counter()
        result = await aggregator.aggregate("x")
        assert time.perf_counter() - start < 2
        assert [a.text for a in result.answers] == ["Provider unavailable.", "fast answer"]

    @pytest.mark.asyncio
    async def test_placeholder_for_unconfigured_catalog_provider(
        self, make_settings: Callable, mock_client: Callable
    ) -> None:
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(500)

        async with mock_client(handler) as client:
            registry = ProviderRegistry.from_specs(PROVIDER_CATALOG, make_settings(), client)
            result = await QueryAggregator(registry).aggregate("x", ["openai", "anthropic"])

        assert [a.text for a in result.answers] == [
            "OpenAI placeholder response (no API key set)",
            "Claude placeholder response (no API key set)",
        ]
        assert calls == []

    @pytest.mark.asyncio
    async def test_malformed_success_body_reports_no_content(
        self, make_settings: Callable, mock_client: Callable
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>ok</html>")

        async with mock_client(handler) as client:
            registry = ProviderRegistry.from_specs(
                PROVIDER_CATALOG, make_settings(openai_api_key="sk"), client
            )
            result = await QueryAggregator(registry).aggregate("x", ["openai"])

        assert [a.text for a in result.answers] == ["No content returned."]


class TestPromptPolicy:
    @pytest.mark.asyncio
    async def test_prompt_is_trimmed(self, fake_provider: Callable) -> None:
        provider = fake_provider("a")
        result = await _aggregator(provider).aggregate("   hi   ")
        assert result.prompt == "hi"
        assert provider.calls == ["hi"]

    @pytest.mark.asyncio
    async def test_long_prompt_is_truncated(self, fake_provider: Callable) -> None:
        provider = fake_provider("a")
        result = await _aggregator(provider).aggregate("x" * 2500)
        assert len(result.prompt) == 2000
        assert provider.calls == ["x" * 2000]

    @pytest.mark.asyncio
    async def test_truncation_can_be_disabled(self, fake_provider: Callable) -> None:
        provider = fake_provider("a")
        await _aggregator(provider, max_prompt_chars=0).aggregate("x" * 2500)
        assert len(provider.calls[0]) == 2500

    @pytest.mark.asyncio
    async def test_empty_prompt_is_forwarded_by_default(self, fake_provider: Callable) -> None:
        provider = fake_provider("a")
        result = await _aggregator(provider).aggregate("")
        assert result.prompt == ""
        assert provider.calls == [""]

    @pytest.mark.asyncio
    async def test_empty_prompt_rejected_when_configured(self, fake_provider: Callable) -> None:
        provider = fake_provider("a")
        aggregator = _aggregator(provider, reject_empty_prompt=True)
        with pytest.raises(PromptValidationError):
            await aggregator.aggregate("   ")
        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_none_prompt_treated_as_empty(self, fake_provider: Callable) -> None:
        result = await _aggregator(fake_provider("a")).aggregate(None)
        assert result.prompt == ""


class TestConcurrencyCap:
    @pytest.mark.asyncio
    async def test_max_concurrent_calls_bounds_parallelism(self, fake_provider: Callable) -> None:
        gauge = {"running": 0, "peak": 0}
        providers = [fake_provider(str(i), reply=str(i), delay=0.02, gauge=gauge) for i in range(6)]
        result = await _aggregator(*providers, max_concurrent_calls=2).aggregate("x")
        assert gauge["peak"] == 2
        assert [a.text for a in result.answers] == [str(i) for i in range(6)]
