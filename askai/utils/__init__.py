"""Utility modules for Ask-AI.

- **concurrency** -- order-preserving gather with optional throttling and a
  per-call deadline that fails as a classified timeout.
- **error_classifier** -- ordered rule table mapping raw provider errors to
  short categories, plus the retired-model predicate used for fallbacks.
- **errors** -- exception hierarchy rooted at AskAIError.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
- **payload** -- body-template rendering and response text extraction.
"""

from askai.utils.concurrency import throttled_gather, with_deadline
from askai.utils.error_classifier import classify_error, is_retired_model_error
from askai.utils.errors import (
    AskAIError,
    ConfigurationError,
    DirectoryError,
    PromptValidationError,
    ProviderCallError,
)
from askai.utils.logging import configure_logging, get_logger
from askai.utils.payload import extract_text, render_template

__all__ = [
    "AskAIError",
    "ConfigurationError",
    "DirectoryError",
    "PromptValidationError",
    "ProviderCallError",
    "classify_error",
    "configure_logging",
    "extract_text",
    "get_logger",
    "is_retired_model_error",
    "render_template",
    "throttled_gather",
    "with_deadline",
]
