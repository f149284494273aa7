"""FastAPI routes for the Ask-AI backend.

# ─── API ROUTE MAP ────────────────────────────────────────────────────
#
# Endpoint                 Method  Description
# ─────────────────────────────────────────────────────────────────────
# /                        GET     Liveness text
# /health                  GET     Health + provider credential counts
# /providers               GET     Registered providers and their status
# /ask                     POST    Fan a prompt out to providers
# /directory               GET     Search the AI directory
# /directory/categories    GET     Distinct directory categories
# /directory/reload        POST    Re-read the directory file
#
# DEPENDENCY INJECTION PATTERN:
# Services are built once in main.py's lifespan and stored on app.state.
# Each route declares them as Annotated[..., Depends(getter)] parameters.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from askai import __version__
from askai.api.schemas import (
    AskRequest,
    AskResponse,
    DirectoryCategoriesResponse,
    DirectoryEntryResponse,
    DirectoryReloadResponse,
    DirectorySearchResponse,
    HealthResponse,
    ProviderInfo,
    ProvidersResponse,
)
from askai.interfaces.directory_provider import IDirectoryProvider
from askai.services.aggregator import QueryAggregator
from askai.services.provider_registry import ProviderRegistry
from askai.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Dependency getters
# ---------------------------------------------------------------------------


def _get_aggregator(request: Request) -> QueryAggregator:
    return request.app.state.aggregator


def _get_registry(request: Request) -> ProviderRegistry:
    return request.app.state.provider_registry


def _get_directory(request: Request) -> IDirectoryProvider:
    return request.app.state.directory


# ---------------------------------------------------------------------------
# Health & root
# ---------------------------------------------------------------------------


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root() -> str:
    return "Ask-AI backend is running."


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Application health check",
)
async def health_check(
    registry: Annotated[ProviderRegistry, Depends(_get_registry)],
) -> HealthResponse:
    """Report liveness and how many providers have a credential configured."""
    return HealthResponse(
        ok=True,
        version=__version__,
        providers_configured=registry.configured_count(),
        providers_total=len(registry),
    )


@router.get(
    "/providers",
    response_model=ProvidersResponse,
    summary="List registered LLM providers",
)
async def list_providers(
    registry: Annotated[ProviderRegistry, Depends(_get_registry)],
) -> ProvidersResponse:
    """List every provider in registry order with its enabled/comingSoon flags."""
    return ProvidersResponse(
        providers=[ProviderInfo(**info) for info in registry.describe_all()]
    )


# ---------------------------------------------------------------------------
# Fan-out
# ---------------------------------------------------------------------------


@router.post(
    "/ask",
    response_model=AskResponse,
    summary="Ask every selected provider the same prompt",
)
async def ask(
    body: AskRequest,
    aggregator: Annotated[QueryAggregator, Depends(_get_aggregator)],
) -> AskResponse:
    """Fan the prompt out and return one answer per resolved provider.

    Provider failures are reported inside each answer's ``text``; the
    endpoint itself answers 200 unless the prompt is rejected by policy.
    """
    result = await aggregator.aggregate(body.prompt, body.providers)
    return AskResponse(prompt=result.prompt, answers=list(result.answers))


# ---------------------------------------------------------------------------
# AI directory
# ---------------------------------------------------------------------------


@router.get(
    "/directory",
    response_model=DirectorySearchResponse,
    summary="Search the AI directory",
)
async def search_directory(
    directory: Annotated[IDirectoryProvider, Depends(_get_directory)],
    q: Annotated[str, Query(max_length=200)] = "",
    category: Annotated[str | None, Query(max_length=100)] = None,
    limit: Annotated[int | None, Query(ge=1, le=500)] = None,
) -> DirectorySearchResponse:
    """Case-insensitive substring search over name, category, summary and use cases."""
    entries = directory.search(q, category=category, limit=limit)
    return DirectorySearchResponse(
        count=len(entries),
        entries=[DirectoryEntryResponse.from_entry(e) for e in entries],
    )


@router.get(
    "/directory/categories",
    response_model=DirectoryCategoriesResponse,
    summary="List directory categories",
)
async def directory_categories(
    directory: Annotated[IDirectoryProvider, Depends(_get_directory)],
) -> DirectoryCategoriesResponse:
    return DirectoryCategoriesResponse(categories=directory.categories())


@router.post(
    "/directory/reload",
    response_model=DirectoryReloadResponse,
    summary="Reload the directory file from disk",
)
async def reload_directory(
    directory: Annotated[IDirectoryProvider, Depends(_get_directory)],
) -> DirectoryReloadResponse:
    count = directory.reload()
    _logger.info("directory_reload_requested", count=count)
    return DirectoryReloadResponse(reloaded=True, count=count)
