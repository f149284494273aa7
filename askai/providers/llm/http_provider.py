"""Generic, data-driven HTTP adapter for LLM providers.

Implements :class:`ILLMProvider` for any provider described by a
:class:`~askai.models.provider.ProviderSpec`.  One class covers OpenAI,
Mistral, Gemini, Groq, DeepSeek, Claude, Grok, Cohere, Hugging Face,
Perplexity and the Bedrock Converse models; the differences between them
live entirely in that record (URL, auth header, body template, text paths).

Call sequence for :meth:`HTTPLLMProvider.ask`:

    no credential?  -> return placeholder text, no network call
    POST primary model
      ok             -> extract text via spec.text_paths
                        ("No content returned." if none or body is not JSON)
      retired model  -> POST each fallback model in order, first success wins
      other error    -> raise ProviderCallError (classified by the aggregator)

The ``httpx.AsyncClient`` is injected via the constructor so every adapter
shares one connection pool and tests can pass a client backed by
``httpx.MockTransport``.
"""

from __future__ import annotations

import time
from typing import Any
from urllib.parse import quote

import httpx

from askai.config.settings import Settings
from askai.interfaces.llm_provider import NO_CONTENT, ILLMProvider
from askai.models.provider import ProviderSpec
from askai.utils.error_classifier import is_retired_model_error
from askai.utils.errors import ProviderCallError
from askai.utils.logging import get_logger
from askai.utils.payload import (
    MODEL_TOKEN,
    PROMPT_TOKEN,
    error_detail,
    extract_text,
    render_template,
)

_MAX_DETAIL_CHARS = 300


class HTTPLLMProvider(ILLMProvider):
    """LLM provider adapter driven by a :class:`ProviderSpec`.

    Stateless apart from the values read from Settings at construction
    time, so one instance can serve any number of concurrent requests.
    """

    def __init__(
        self,
        spec: ProviderSpec,
        settings: Settings,
        http_client: httpx.AsyncClient,
    ) -> None:
        self._spec = spec
        self._http = http_client
        self._api_key = settings.credential_for(spec.credential_setting)
        self._model = settings.model_override(spec.model_setting) or spec.default_model
        self._region = settings.aws_region
        self._call_timeout = float(spec.timeout or settings.request_timeout)
        self._logger = get_logger(__name__)

    # ------------------------------------------------------------------
    # ILLMProvider implementation
    # ------------------------------------------------------------------

    async def ask(self, prompt: str) -> str:
        if not self.is_available():
            return self.placeholder_text()

        models = self._model_chain()
        for attempt, model in enumerate(models):
            try:
                return await self._call(prompt, model)
            except ProviderCallError as exc:
                is_last = attempt + 1 == len(models)
                if is_last or not is_retired_model_error(exc.message, exc.detail):
                    raise
                self._logger.warning(
                    "llm_model_fallback",
                    provider=self._spec.id,
                    rejected_model=model,
                    next_model=models[attempt + 1],
                    detail=exc.detail,
                )
        raise ProviderCallError("No model configured", provider_name=self._spec.id)

    def describe(self) -> dict[str, Any]:
        enabled = self.is_available()
        return {
            "id": self._spec.id,
            "name": self._spec.name,
            "group": self._spec.group,
            "enabled": enabled,
            "coming_soon": not enabled,
            "model": self._model,
        }

    def get_provider_name(self) -> str:
        return self._spec.id

    def get_display_name(self) -> str:
        return self._spec.name

    def is_available(self) -> bool:
        """Return ``True`` if an API key is configured (doesn't verify it works)."""
        return bool(self._api_key)

    @property
    def timeout(self) -> float:
        # Each model in the fallback chain gets its own call budget.
        return self._call_timeout * len(self._model_chain())

    @property
    def model(self) -> str:
        return self._model

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _model_chain(self) -> list[str]:
        """Primary model first, then fallbacks not equal to it, without duplicates."""
        chain = [self._model]
        for fallback in self._spec.fallback_models:
            if fallback not in chain:
                chain.append(fallback)
        return chain

    def _build_headers(self) -> dict[str, str]:
        auth_value = (
            f"{self._spec.auth_scheme} {self._api_key}"
            if self._spec.auth_scheme
            else self._api_key
        )
        return {
            "Content-Type": "application/json",
            self._spec.auth_header: auth_value,
            **self._spec.extra_headers,
        }

    def _build_url(self, model: str) -> str:
        # Bedrock model ids contain ':' and must be escaped inside the path.
        return self._spec.url.format(model=quote(model, safe=""), region=self._region)

    async def _call(self, prompt: str, model: str) -> str:
        """Perform one POST for *model* and return the extracted text."""
        url = self._build_url(model)
        body = render_template(
            self._spec.body_template,
            {PROMPT_TOKEN: prompt, MODEL_TOKEN: model},
        )

        start = time.perf_counter()
        try:
            response = await self._http.post(
                url,
                headers=self._build_headers(),
                json=body,
                timeout=self._call_timeout,
            )
        except httpx.TimeoutException as exc:
            raise self._failure(
                f"{type(exc).__name__}: timeout of {self._call_timeout:g}s exceeded",
                model,
                start,
            ) from exc
        except httpx.NetworkError as exc:
            # Raw socket text can contain host names; keep it out of the
            # classified message and in the log detail only.
            raise self._failure(
                f"{type(exc).__name__}: host unreachable",
                model,
                start,
                detail=str(exc) or None,
            ) from exc
        except httpx.HTTPError as exc:
            raise self._failure(f"{type(exc).__name__}: {exc}", model, start) from exc

        if response.is_error:
            detail = error_detail(_json_or_none(response)) or response.text[:_MAX_DETAIL_CHARS]
            raise self._failure(
                f"Request failed with status code {response.status_code}",
                model,
                start,
                status_code=response.status_code,
                detail=detail or None,
            )

        payload = _json_or_none(response)
        if payload is None:
            # A 2xx body we cannot parse has no answer in it.
            self._logger.warning(
                "llm_response_not_json",
                provider=self._spec.id,
                model=model,
                status=response.status_code,
                body=response.text[:_MAX_DETAIL_CHARS],
                duration_ms=_elapsed_ms(start),
            )
            return NO_CONTENT

        text = extract_text(payload, self._spec.text_paths)
        self._logger.info(
            "llm_call_succeeded",
            provider=self._spec.id,
            model=model,
            status=response.status_code,
            duration_ms=_elapsed_ms(start),
            empty=text is None,
        )
        return text if text is not None else NO_CONTENT

    def _failure(
        self,
        message: str,
        model: str,
        start: float,
        status_code: int | None = None,
        detail: str | None = None,
    ) -> ProviderCallError:
        self._logger.warning(
            "llm_call_failed",
            provider=self._spec.id,
            model=model,
            status=status_code,
            error=message,
            detail=detail,
            duration_ms=_elapsed_ms(start),
        )
        return ProviderCallError(
            message=message,
            provider_name=self._spec.id,
            status_code=status_code,
            detail=detail,
        )


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)
