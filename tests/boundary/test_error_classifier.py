"""
Test suite for the rate-limit and error classifier.

Covers the three failure channels: non-2xx error bodies, 2xx bodies with an
error field, and exceptions raised by the transport.

System role: Verification of error normalization
"""

import httpx
import pytest

from study_gateway.boundary.gateway.error_classifier import (
    TIMEOUT_MESSAGE,
    classify_exception,
    classify_response,
    extract_error_fields,
)
from study_gateway.core.exceptions import (
    ACCOUNT_LIMIT_REACHED,
    DAILY_LIMIT_REACHED,
    EmptyResultError,
    RateLimitError,
    TransportError,
)
from study_gateway.models.completion import CompletionFailure, CompletionSuccess, FailureKind


class TestClassifyResponse:
    """Test suite for classify_response."""

    def test_success_should_carry_content(self) -> None:
        result = classify_response(200, {"content": "<p>Summary</p>"})

        assert isinstance(result, CompletionSuccess)
        assert result.unwrap() == "<p>Summary</p>"

    def test_structured_context_channel_should_yield_daily_limit(self) -> None:
        # Arrange
        body = {
            "error": "Edge Function returned a non-2xx status code",
            "context": {
                "code": DAILY_LIMIT_REACHED,
                "message": "Daily limit reached",
                "limit": 20,
                "remaining": 0,
                "resetAt": "2026-10-19T00:00:00Z",
            },
        }

        # Act
        result = classify_response(429, body)

        # Assert
        assert isinstance(result, CompletionFailure)
        assert result.kind == FailureKind.RATE_LIMIT
        error = result.to_exception()
        assert isinstance(error, RateLimitError)
        assert error.code == DAILY_LIMIT_REACHED
        assert error.limit == 20
        assert error.remaining == 0
        assert error.reset_at is not None and error.reset_at.hour == 0

    def test_error_shaped_success_channel_should_yield_daily_limit(self) -> None:
        """HTTP 200 carrying an error field is still a failure."""
        body = {"error": f"{DAILY_LIMIT_REACHED}: you have used 20/20 generations today"}

        result = classify_response(200, body)

        assert result.kind == FailureKind.RATE_LIMIT
        assert result.rate_limit.code.value == DAILY_LIMIT_REACHED

    def test_account_limit_should_win_when_both_codes_appear(self) -> None:
        body = {"error": f"{DAILY_LIMIT_REACHED} and {ACCOUNT_LIMIT_REACHED}"}

        result = classify_response(403, body)

        error = result.to_exception()
        assert error.code == ACCOUNT_LIMIT_REACHED
        assert error.is_account_limit
        assert "account" in error.user_message.lower()

    def test_unparseable_quota_fields_should_still_classify(self) -> None:
        body = {"code": DAILY_LIMIT_REACHED, "limit": "lots", "resetAt": "soon"}

        result = classify_response(429, body)

        assert result.kind == FailureKind.RATE_LIMIT
        assert result.rate_limit.limit is None

    @pytest.mark.parametrize("body", [{"content": ""}, {"content": "   "}, {}, None, "plain"])
    def test_missing_content_should_be_empty_result(self, body) -> None:
        result = classify_response(200, body)

        assert result.kind == FailureKind.EMPTY_RESULT
        with pytest.raises(EmptyResultError):
            result.unwrap("quiz")

    def test_transcription_reads_text_field(self) -> None:
        result = classify_response(200, {"text": "hello"}, content_key="text")

        assert result.unwrap() == "hello"

    def test_gateway_timeout_should_use_friendly_message(self) -> None:
        result = classify_response(504, "upstream request timeout")

        assert result.kind == FailureKind.TRANSPORT
        assert result.message == TIMEOUT_MESSAGE

    def test_other_errors_keep_original_message(self) -> None:
        result = classify_response(500, {"error": {"message": "Model overloaded"}})

        error = result.to_exception()
        assert isinstance(error, TransportError)
        assert error.message == "Model overloaded"
        assert error.status_code == 500


class TestClassifyException:
    """Test suite for classify_exception."""

    def test_exception_channel_should_yield_daily_limit(self) -> None:
        exc = RuntimeError(f"FunctionsHttpError: {DAILY_LIMIT_REACHED}")

        result = classify_exception(exc)

        assert result.kind == FailureKind.RATE_LIMIT
        assert result.to_exception().code == DAILY_LIMIT_REACHED

    def test_timeout_exception_should_use_friendly_message(self) -> None:
        result = classify_exception(httpx.ReadTimeout("read timed out"))

        assert result.message == TIMEOUT_MESSAGE

    def test_other_exceptions_keep_message(self) -> None:
        result = classify_exception(httpx.ConnectError("connection refused"))

        assert result.kind == FailureKind.TRANSPORT
        assert result.message == "connection refused"


def test_extract_error_fields_prefers_context_over_top_level() -> None:
    body = {"message": "outer", "context": {"message": "inner", "remaining": 3}}

    fields = extract_error_fields(body)

    assert fields["message"] == "inner"
    assert fields["remaining"] == 3
