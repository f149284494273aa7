"""Custom exception hierarchy for Ask-AI.

All application exceptions inherit from :class:`AskAIError`, which carries
an optional ``provider_name`` so error handlers can identify which external
service (e.g. "openai", "groq", "bedrock_nova_micro") caused the failure.

    AskAIError  (base -- catch-all for any Ask-AI error)
    +-- ConfigurationError     (startup / invalid config file)
    +-- ProviderCallError      (one outbound LLM call failed)
    +-- PromptValidationError  (inbound prompt rejected by policy)
    +-- DirectoryError         (AI directory file missing or invalid)

Only ``ProviderCallError`` is raised inside the fan-out path, and the
aggregator converts every one of them into a classified answer string.
The other three surface through the API error middleware.
"""

from __future__ import annotations


class AskAIError(Exception):
    """Base exception for all Ask-AI errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``provider_name`` identifying which external service triggered the
    error.  The ``__str__`` method prefixes the provider name in brackets
    for structured log output, e.g. ``[groq] Request failed with status code 429``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------

class ConfigurationError(AskAIError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# External provider errors
# ---------------------------------------------------------------------------

class ProviderCallError(AskAIError):
    """Raised when a single outbound provider call fails.

    ``message`` is the short transport-level description that the error
    classifier matches against (e.g. ``"Request failed with status code 401"``).
    ``status_code`` is the HTTP status when the provider answered at all, and
    ``detail`` holds the provider's own error text from the response body,
    which the fallback-model logic inspects for "model retired" wording.
    """

    def __init__(
        self,
        message: str = "Provider call failed",
        provider_name: str | None = None,
        status_code: int | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
        self._status_code = status_code
        self._detail = detail

    @property
    def status_code(self) -> int | None:
        return self._status_code

    @property
    def detail(self) -> str | None:
        return self._detail


# ---------------------------------------------------------------------------
# Inbound request errors
# ---------------------------------------------------------------------------

class PromptValidationError(AskAIError):
    """Raised when a prompt is rejected (only when empty prompts are disallowed)."""

    def __init__(
        self,
        message: str = "Prompt is required",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Directory errors
# ---------------------------------------------------------------------------

class DirectoryError(AskAIError):
    """Raised when the AI directory file cannot be read or parsed."""

    def __init__(
        self,
        message: str = "AI directory unavailable",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
