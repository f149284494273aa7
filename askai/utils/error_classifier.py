"""Map raw provider error messages to short, provider-agnostic categories.

The fan-out endpoint never shows a client a stack trace or a provider's raw
error body.  Instead every failed call is reduced to one of five strings by
walking an ordered rule table; the first rule whose pattern matches the
message wins.  The table is plain data so it can be unit-tested without any
network traffic and extended without touching the aggregator.

    Priority  Pattern (case-insensitive)                         Category
    ───────────────────────────────────────────────────────────────────────
    1         401 | unauthor                                     Auth failed
    2         403 | forbid | not allowed | permission            Access denied
    3         429 | quota | rate | capacity                      Rate limit
    4         5xx | unavailable | timeout | timed out |          Provider unavailable
              ECONNRESET | ENETUNREACH | connection reset |
              unreachable
    -         (no match)                                         Unexpected error: <msg>

A second, independent predicate (:func:`is_retired_model_error`) decides
whether a failure means "this model id no longer exists", which is the only
condition under which an adapter retries against its fallback models.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

AUTH_FAILED = "Auth failed (check API key)."
ACCESS_DENIED = "Access denied (model/region)."
RATE_LIMITED = "Rate limit or quota exceeded."
PROVIDER_UNAVAILABLE = "Provider unavailable."
UNEXPECTED_PREFIX = "Unexpected error: "


@dataclass(frozen=True)
class ErrorRule:
    """One (predicate, category) pair of the classification table."""

    pattern: re.Pattern[str]
    category: str

    def matches(self, message: str) -> bool:
        return self.pattern.search(message) is not None


ERROR_RULES: tuple[ErrorRule, ...] = (
    ErrorRule(re.compile(r"401|unauthor", re.IGNORECASE), AUTH_FAILED),
    ErrorRule(
        re.compile(r"403|forbid|not\s*allowed|permission", re.IGNORECASE),
        ACCESS_DENIED,
    ),
    ErrorRule(re.compile(r"429|quota|rate|capacity", re.IGNORECASE), RATE_LIMITED),
    ErrorRule(
        re.compile(
            r"5\d\d|unavailable|timeout|timed out|ECONNRESET|ENETUNREACH"
            r"|connection reset|unreachable",
            re.IGNORECASE,
        ),
        PROVIDER_UNAVAILABLE,
    ),
)

# Wording providers use when a model id has been retired or was never valid.
_RETIRED_MODEL_RE = re.compile(
    r"decommission|deprecated|not\s+supported|no longer supported"
    r"|model_not_found|does not exist",
    re.IGNORECASE,
)


def classify_error(message: object, rules: tuple[ErrorRule, ...] = ERROR_RULES) -> str:
    """Return the category string for *message*.

    Pure function of the message text: the same input always yields the
    same output.  ``None`` is treated as an empty message.

    >>> classify_error("Request failed with status code 429")
    'Rate limit or quota exceeded.'
    >>> classify_error("foo bar")
    'Unexpected error: foo bar'
    """
    text = "" if message is None else str(message)
    for rule in rules:
        if rule.matches(text):
            return rule.category
    return f"{UNEXPECTED_PREFIX}{text}"


def is_retired_model_error(*texts: str | None) -> bool:
    """Return ``True`` if any of *texts* says the requested model is retired."""
    return any(text and _RETIRED_MODEL_RE.search(text) for text in texts)
