"""Helpers for building provider request bodies and reading their responses.

Provider schemas are described as data (see ``askai.config.provider_catalog``):

- a **body template** -- any JSON-compatible structure in which the exact
  string tokens ``"{prompt}"`` and ``"{model}"`` are replaced, and
- a list of **text paths** -- sequences of dict keys / list indexes that
  locate the answer text inside the JSON response, tried in order.

Nothing here knows about any particular provider.
"""

from __future__ import annotations

from typing import Any, Sequence

PathSegment = str | int
TextPath = Sequence[PathSegment]

PROMPT_TOKEN = "{prompt}"
MODEL_TOKEN = "{model}"


def render_template(template: Any, values: dict[str, str]) -> Any:
    """Return a deep copy of *template* with placeholder tokens substituted.

    Only strings that are *exactly* a token are replaced, so a prompt that
    itself contains ``{model}`` is never re-interpreted.
    """
    if isinstance(template, dict):
        return {key: render_template(value, values) for key, value in template.items()}
    if isinstance(template, list):
        return [render_template(item, values) for item in template]
    if isinstance(template, str):
        for token, value in values.items():
            if template == token:
                return value
        return template
    return template


def get_path(payload: Any, path: TextPath) -> Any:
    """Walk *path* through nested dicts/lists, returning ``None`` on any miss."""
    current = payload
    for segment in path:
        if isinstance(segment, int):
            if not isinstance(current, list) or not -len(current) <= segment < len(current):
                return None
            current = current[segment]
        else:
            if not isinstance(current, dict) or segment not in current:
                return None
            current = current[segment]
    return current


def extract_text(payload: Any, paths: Sequence[TextPath]) -> str | None:
    """Return the first non-blank string found at any of *paths*, stripped.

    ``None`` means the payload had no recognisable answer text.
    """
    for path in paths:
        value = get_path(payload, path)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def error_detail(payload: Any) -> str | None:
    """Pull a human-readable error message out of a provider error body.

    Covers the shapes used by the supported providers:
    ``{"error": {"message": ...}}``, ``{"error": "..."}``,
    ``{"message": ...}`` and ``{"detail": ...}``.
    """
    for path in (("error", "message"), ("error",), ("message",), ("detail",)):
        value = get_path(payload, path)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None
