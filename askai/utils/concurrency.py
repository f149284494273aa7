"""Shared concurrency primitives for the provider fan-out.

Two helpers are exposed:

1. **throttled_gather** -- ``asyncio.gather`` with an optional semaphore.
   Results come back in the same order as the input awaitables, no matter
   which one finishes first.  With no semaphore every awaitable runs at once.

2. **with_deadline** -- wraps one awaitable in ``asyncio.wait_for`` and turns
   an expired deadline into a :class:`~askai.utils.errors.ProviderCallError`
   whose message contains "timed out", so it classifies as
   "Provider unavailable." like any transport timeout.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, TypeVar

from askai.utils.errors import ProviderCallError

_T = TypeVar("_T")


async def throttled_gather(
    coros: list[Awaitable[_T]],
    semaphore: asyncio.Semaphore | None = None,
    return_exceptions: bool = True,
) -> list[_T | BaseException]:
    """Run awaitables concurrently with optional semaphore throttling.

    Parameters
    ----------
    coros:
        Awaitable objects to execute concurrently.
    semaphore:
        Optional semaphore bounding how many run at the same moment.
        ``None`` means unbounded.
    return_exceptions:
        If ``True``, exceptions are returned in the results list rather
        than being raised.  Mirrors ``asyncio.gather`` semantics.

    Returns
    -------
    list[_T | BaseException]
        Results in the same order as the input coroutines.
    """
    if semaphore is None:
        return await asyncio.gather(*coros, return_exceptions=return_exceptions)

    async def _wrapped(coro: Awaitable[_T]) -> _T:
        async with semaphore:
            return await coro

    tasks = [_wrapped(c) for c in coros]
    return await asyncio.gather(*tasks, return_exceptions=return_exceptions)


async def with_deadline(
    coro: Awaitable[_T],
    timeout: float,
    provider_name: str | None = None,
) -> _T:
    """Await *coro*, failing with a classified timeout after *timeout* seconds."""
    try:
        return await asyncio.wait_for(coro, timeout=timeout)
    except asyncio.TimeoutError as exc:
        raise ProviderCallError(
            message=f"Request timed out after {timeout:g}s",
            provider_name=provider_name,
        ) from exc
