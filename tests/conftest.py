"""Shared pytest fixtures for the Ask-AI test suite."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from askai.config.settings import Settings
from askai.interfaces.llm_provider import ILLMProvider
from askai.utils.logging import configure_logging


def pytest_configure(config: pytest.Config) -> None:
    # Keep stdout free for CLI output assertions.
    configure_logging(log_level="WARNING", stream=sys.stderr)


# Every credential field, blanked so a developer's real keys never leak in.
_CREDENTIAL_FIELDS = (
    "openai_api_key",
    "mistral_api_key",
    "gemini_api_key",
    "groq_api_key",
    "deepseek_api_key",
    "anthropic_api_key",
    "xai_api_key",
    "cohere_api_key",
    "huggingface_api_key",
    "perplexity_api_key",
    "aws_bearer_token_bedrock",
)


def _build_settings(**overrides: Any) -> Settings:
    defaults: dict[str, Any] = {field: "" for field in _CREDENTIAL_FIELDS}
    defaults.update(
        {
            "aws_region": "eu-west-1",
            "request_timeout": 5.0,
            "config_path": "does-not-exist.yaml",
        }
    )
    defaults.update(overrides)
    return Settings(_env_file=None, **defaults)


class _FakeProvider(ILLMProvider):
    """In-memory adapter: answers *reply*, raises *error*, or sleeps *delay* first.

    When *gauge* is given, ``gauge["running"]`` and ``gauge["peak"]`` track
    how many fakes sharing it are inside :meth:`ask` at the same time.
    """

    def __init__(
        self,
        provider_id: str,
        name: str | None = None,
        reply: str = "ok",
        error: BaseException | None = None,
        delay: float = 0.0,
        timeout: float = 1.0,
        available: bool = True,
        gauge: dict[str, int] | None = None,
    ) -> None:
        self._id = provider_id
        self._name = name or provider_id.title()
        self._reply = reply
        self._error = error
        self._delay = delay
        self._timeout = timeout
        self._available = available
        self._gauge = gauge
        self.calls: list[str] = []

    async def ask(self, prompt: str) -> str:
        self.calls.append(prompt)
        if self._gauge is not None:
            self._gauge["running"] += 1
            self._gauge["peak"] = max(self._gauge["peak"], self._gauge["running"])
        try:
            if self._delay:
                await asyncio.sleep(self._delay)
        finally:
            if self._gauge is not None:
                self._gauge["running"] -= 1
        if self._error is not None:
            raise self._error
        return self._reply

    def describe(self) -> dict[str, Any]:
        return {
            "id": self._id,
            "name": self._name,
            "group": "Standalone",
            "enabled": self._available,
            "coming_soon": not self._available,
            "model": "fake-1",
        }

    def get_provider_name(self) -> str:
        return self._id

    def get_display_name(self) -> str:
        return self._name

    def is_available(self) -> bool:
        return self._available

    @property
    def timeout(self) -> float:
        return self._timeout


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Return a factory building Settings with no credentials and no .env file."""
    return _build_settings


@pytest.fixture
def mock_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Return a factory for AsyncClients whose requests are answered by a handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def fake_provider() -> Callable[..., ILLMProvider]:
    """Return a factory for in-memory ILLMProvider fakes."""
    return _FakeProvider


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> Settings:
    return _build_settings()


@pytest.fixture
def directory_entries() -> list[dict[str, Any]]:
    return [
        {
            "name": "OpenAI",
            "category": "Foundation models",
            "summary": "Maker of the GPT models.",
            "use_cases": ["chat assistants", "code generation"],
            "url": "https://openai.com",
        },
        {
            "name": "Groq",
            "category": "Inference infrastructure",
            "summary": "Low-latency inference cloud.",
            "useCases": "real-time chat, voice agents",
        },
        {
            "name": "Midjourney",
            "category": "Image generation",
            "summary": "Text-to-image service.",
            "use_cases": ["concept art"],
        },
    ]


@pytest.fixture
def directory_file(tmp_path: Path, directory_entries: list[dict[str, Any]]) -> Path:
    path = tmp_path / "ai_directory.json"
    path.write_text(json.dumps({"entries": directory_entries}), encoding="utf-8")
    return path
