"""Ask-AI FastAPI application entry point.

Wires together the provider registry, the fan-out aggregator and the AI
directory via dependency injection.  Loads configuration from ``.env`` and
``config/config.yaml``, configures structured logging, and exposes the
routes defined in ``askai.api.routes``.

Run locally with::

    python -m askai.main
    # or
    uvicorn askai.main:app --port 3000
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

import httpx
import structlog
import uvicorn
from fastapi import FastAPI

from askai import __version__
from askai.api.middleware import (
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    configure_cors,
)
from askai.api.routes import router as api_router
from askai.config.loader import load_config, resolve_provider_specs
from askai.config.provider_catalog import PROVIDER_CATALOG
from askai.config.settings import Settings
from askai.providers.directory.json_directory_provider import JSONDirectoryProvider
from askai.services.aggregator import QueryAggregator
from askai.services.provider_registry import ProviderRegistry
from askai.utils.logging import configure_logging, get_logger

# ---------------------------------------------------------------------------
# Module-level settings & logging
# ---------------------------------------------------------------------------

settings = Settings()

configure_logging(
    log_level=settings.log_level,
    json_output=(settings.app_env == "production"),
)
_logger: structlog.BoundLogger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Dependency assembly
# ---------------------------------------------------------------------------


def build_registry(
    app_settings: Settings,
    http_client: httpx.AsyncClient,
    config: dict[str, Any] | None = None,
) -> ProviderRegistry:
    """Create one adapter per catalog entry, filtered and ordered by *config*."""
    specs = resolve_provider_specs(PROVIDER_CATALOG, config)
    return ProviderRegistry.from_specs(specs, app_settings, http_client)


def _build_all(app_settings: Settings, config: dict[str, Any]) -> dict[str, Any]:
    """Construct every shared component for the application.

    Returns a flat dict of named components to be stored on ``app.state``.
    """
    # One pooled client for every provider; each call passes its own timeout.
    http_client = httpx.AsyncClient(timeout=app_settings.request_timeout)

    registry = build_registry(app_settings, http_client, config)
    aggregator = QueryAggregator(
        registry,
        max_prompt_chars=app_settings.max_prompt_chars,
        reject_empty_prompt=app_settings.reject_empty_prompt,
        max_concurrent_calls=app_settings.max_concurrent_calls,
    )
    directory = JSONDirectoryProvider(app_settings.directory_path)

    return {
        "settings": app_settings,
        "http_client": http_client,
        "provider_registry": registry,
        "aggregator": aggregator,
        "directory": directory,
    }


def _log_credentials(registry: ProviderRegistry) -> None:
    """Log which providers have a credential -- presence only, never the value."""
    _logger.info(
        "provider_credentials",
        **{info["id"]: info["enabled"] for info in registry.describe_all()},
    )


# ---------------------------------------------------------------------------
# FastAPI application factory
# ---------------------------------------------------------------------------


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    s = app_settings or settings

    @asynccontextmanager
    async def _lifespan(application: FastAPI):  # noqa: ANN202
        """Initialise shared components on startup, close the HTTP pool on shutdown."""
        config = load_config(settings=s)
        components = _build_all(s, config)
        for key, value in components.items():
            setattr(application.state, key, value)

        _logger.info(
            "app_startup",
            version=__version__,
            environment=s.app_env,
            providers=components["provider_registry"].ids(),
            configured=components["provider_registry"].configured_count(),
        )
        _log_credentials(components["provider_registry"])

        yield

        http_client: httpx.AsyncClient = components["http_client"]
        await http_client.aclose()
        _logger.info("app_shutdown", message="HTTP client closed")

    application = FastAPI(
        title="Ask-AI API",
        version=__version__,
        description=(
            "Send one prompt to many LLM providers at once and get every "
            "answer back in a single list."
        ),
        lifespan=_lifespan,
    )

    # -- Middleware (order matters: last added = first executed) --
    application.add_middleware(ErrorHandlingMiddleware)
    application.add_middleware(RequestLoggingMiddleware)
    configure_cors(application, allowed_origins=s.get_cors_origins())

    application.include_router(api_router)
    return application


app = create_app()

# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    uvicorn.run(
        "askai.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=(settings.app_env == "development"),
    )
