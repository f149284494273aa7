"""Fan-out query aggregator.

Sends one prompt to every selected provider adapter at the same time and
returns exactly one answer per adapter, in dispatch order.

Per-adapter policy, applied independently to each provider:

    1. No credential          -> placeholder text, no network call
    2. Transport / HTTP error -> classify_error(message), e.g.
                                 "Rate limit or quota exceeded."
    3. No text in response    -> "No content returned."
    4. Hang                   -> cut off at the adapter's own timeout and
                                 reported as "Provider unavailable."

Nothing raised inside an adapter ever escapes :meth:`QueryAggregator.aggregate`;
a failing provider only changes its own ``text``.
"""

from __future__ import annotations

import asyncio
import time
from typing import Sequence

from askai.interfaces.llm_provider import ILLMProvider
from askai.models.query import AggregateResponse, ProviderResult, Query
from askai.services.provider_registry import ProviderRegistry
from askai.utils.concurrency import throttled_gather, with_deadline
from askai.utils.error_classifier import classify_error
from askai.utils.errors import AskAIError, PromptValidationError
from askai.utils.logging import get_logger

_logger = get_logger(__name__)


class QueryAggregator:
    """Run a prompt against many providers and merge their answers.

    Parameters
    ----------
    registry:
        The provider registry resolving client selections to adapters.
    max_prompt_chars:
        Prompts longer than this are truncated (not rejected).  ``0``
        disables the cap.
    reject_empty_prompt:
        When ``True`` an empty prompt raises :class:`PromptValidationError`;
        otherwise it is forwarded as-is.
    max_concurrent_calls:
        Upper bound on simultaneous outbound calls.  ``0`` runs every
        selected adapter at once.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        max_prompt_chars: int = 2000,
        reject_empty_prompt: bool = False,
        max_concurrent_calls: int = 0,
    ) -> None:
        self._registry = registry
        self._max_prompt_chars = max_prompt_chars
        self._reject_empty_prompt = reject_empty_prompt
        self._max_concurrent_calls = max_concurrent_calls

    def build_query(self, prompt: str | None) -> Query:
        """Normalise *prompt* according to the configured policy."""
        query = Query.from_raw(prompt, self._max_prompt_chars)
        if query.is_empty and self._reject_empty_prompt:
            raise PromptValidationError(message="Prompt is required")
        return query

    async def aggregate(
        self,
        prompt: str | None,
        selection: Sequence[object] | None = None,
    ) -> AggregateResponse:
        """Fan *prompt* out to the selected providers and collect every answer.

        Raises
        ------
        PromptValidationError
            Only when the prompt is empty and empty prompts are rejected.
        """
        query = self.build_query(prompt)
        adapters = self._registry.resolve(selection)

        semaphore = (
            asyncio.Semaphore(self._max_concurrent_calls)
            if self._max_concurrent_calls > 0
            else None
        )

        start = time.perf_counter()
        results = await throttled_gather(
            [self._ask_one(adapter, query.prompt) for adapter in adapters],
            semaphore=semaphore,
            return_exceptions=True,
        )

        answers: list[ProviderResult] = []
        for adapter, result in zip(adapters, results):
            if isinstance(result, ProviderResult):
                answers.append(result)
            else:
                # _ask_one already converts Exception; only BaseException
                # subclasses such as CancelledError can land here.
                answers.append(
                    ProviderResult(
                        provider=adapter.get_display_name(),
                        text=classify_error(str(result)),
                    )
                )

        _logger.info(
            "fanout_complete",
            providers=[a.get_provider_name() for a in adapters],
            requested=list(selection) if selection else None,
            prompt_chars=len(query.prompt),
            truncated=query.truncated,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return AggregateResponse(prompt=query.prompt, answers=answers)

    async def _ask_one(self, adapter: ILLMProvider, prompt: str) -> ProviderResult:
        """Run one adapter under its deadline and turn any failure into text."""
        name = adapter.get_display_name()
        try:
            text = await with_deadline(
                adapter.ask(prompt),
                timeout=adapter.timeout,
                provider_name=adapter.get_provider_name(),
            )
        except AskAIError as exc:
            return ProviderResult(provider=name, text=classify_error(exc.message))
        except Exception as exc:  # noqa: BLE001 -- adapter boundary
            _logger.error(
                "provider_unexpected_exception",
                provider=adapter.get_provider_name(),
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return ProviderResult(provider=name, text=classify_error(str(exc)))
        return ProviderResult(provider=name, text=text)
