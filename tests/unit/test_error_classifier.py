"""Unit tests for askai.utils.error_classifier."""

from __future__ import annotations

import re

import pytest

from askai.utils.error_classifier import (
    ACCESS_DENIED,
    AUTH_FAILED,
    PROVIDER_UNAVAILABLE,
    RATE_LIMITED,
    ErrorRule,
    classify_error,
    is_retired_model_error,
)


class TestClassifyError:
    @pytest.mark.parametrize(
        "message, expected",
        [
            ("Request failed with status code 401", AUTH_FAILED),
            ("Unauthorized", AUTH_FAILED),
            ("Request failed with status code 403", ACCESS_DENIED),
            ("Model not allowed in this region", ACCESS_DENIED),
            ("Permission denied", ACCESS_DENIED),
            ("Request failed with status code 429", RATE_LIMITED),
            ("You exceeded your current quota", RATE_LIMITED),
            ("Model at capacity", RATE_LIMITED),
            ("Request failed with status code 503", PROVIDER_UNAVAILABLE),
            ("ReadTimeout: timeout of 20s exceeded", PROVIDER_UNAVAILABLE),
            ("Request timed out after 20s", PROVIDER_UNAVAILABLE),
            ("read ECONNRESET", PROVIDER_UNAVAILABLE),
            ("ConnectError: host unreachable", PROVIDER_UNAVAILABLE),
        ],
    )
    def test_known_categories(self, message: str, expected: str) -> None:
        assert classify_error(message) == expected

    def test_case_insensitive(self) -> None:
        assert classify_error("UNAUTHORIZED") == AUTH_FAILED
        assert classify_error("Service UNAVAILABLE") == PROVIDER_UNAVAILABLE

    def test_unmatched_message_is_prefixed(self) -> None:
        assert classify_error("foo bar") == "Unexpected error: foo bar"

    def test_none_is_empty_message(self) -> None:
        assert classify_error(None) == "Unexpected error: "

    def test_first_matching_rule_wins(self) -> None:
        # Mentions both 401 and 429; the auth rule is checked first.
        assert classify_error("401 after 429 retry") == AUTH_FAILED
        # 403 outranks the 5xx rule.
        assert classify_error("403 from 502 gateway") == ACCESS_DENIED

    def test_is_deterministic(self) -> None:
        message = "Request failed with status code 429"
        assert classify_error(message) == classify_error(message)

    def test_custom_rule_table(self) -> None:
        rules = (ErrorRule(re.compile("teapot"), "Short and stout."),)
        assert classify_error("I'm a teapot", rules=rules) == "Short and stout."
        assert classify_error("401", rules=rules) == "Unexpected error: 401"


class TestRetiredModel:
    @pytest.mark.parametrize(
        "text",
        [
            "The model `llama3-70b-8192` has been decommissioned",
            "This model is deprecated",
            "model_not_found",
            "The model gpt-9 does not exist",
            "Model is no longer supported",
        ],
    )
    def test_retired_wording(self, text: str) -> None:
        assert is_retired_model_error(text) is True

    def test_any_text_can_match(self) -> None:
        assert is_retired_model_error("Request failed with status code 400", "decommissioned")

    def test_ordinary_errors_do_not_match(self) -> None:
        assert not is_retired_model_error("Request failed with status code 429", "Rate limit")
        assert not is_retired_model_error(None, "")
