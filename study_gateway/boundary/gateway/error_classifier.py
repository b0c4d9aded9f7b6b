"""
Rate-limit and error classifier.

The hosted function layer reports failures through three channels: a
non-2xx status with an error body (sometimes nested under "context"), a 2xx
body carrying an "error" field, or an exception raised by the transport. This
module folds all of them into one CompletionResult so callers never inspect
raw error shapes.

Rate limits are detected by code or by substring over the combined error
text; ACCOUNT_LIMIT_REACHED wins when both codes appear.

Dependencies: httpx, pydantic, study_gateway.models
System role: Error normalization between the gateway transport and services
"""

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from study_gateway.core.exceptions import ACCOUNT_LIMIT_REACHED, DAILY_LIMIT_REACHED
from study_gateway.models.completion import (
    CompletionFailure,
    CompletionResult,
    CompletionSuccess,
    FailureKind,
    RateLimitCode,
    RateLimitInfo,
)

logger = logging.getLogger(__name__)

# Order matters: the first code found wins.
RATE_LIMIT_CODES = (ACCOUNT_LIMIT_REACHED, DAILY_LIMIT_REACHED)

TIMEOUT_MESSAGE = (
    "Request timed out. The content may be too long. "
    "Please try with shorter content or try again later."
)
_TIMEOUT_MARKERS = ("timeout", "timed out", "504", "gateway timeout")


def detect_rate_limit_code(*texts: str | None) -> str | None:
    """Return the rate-limit code mentioned anywhere in texts, if any."""
    combined = " ".join(text for text in texts if text)
    for code in RATE_LIMIT_CODES:
        if code in combined:
            return code
    return None


def _is_timeout(text: str) -> bool:
    lowered = text.lower()
    return any(marker in lowered for marker in _TIMEOUT_MARKERS)


def extract_error_fields(body: Any) -> dict[str, Any]:
    """
    Pull code, message and quota fields out of an error body.

    Looks in a nested "context" object first, then a nested "error" object,
    then the top level.

    Args:
        body: Decoded error body (dict, string or None)

    Returns:
        dict: code, message, limit, remaining and reset_at (values may be None)
    """
    if not isinstance(body, dict):
        return {"code": None, "message": str(body) if body else None,
                "limit": None, "remaining": None, "reset_at": None}

    sources = [
        value for value in (body.get("context"), body.get("error"))
        if isinstance(value, dict)
    ]
    sources.append(body)

    def pick(*keys: str) -> Any:
        for source in sources:
            for key in keys:
                value = source.get(key)
                if value is not None and not isinstance(value, (dict, list)):
                    return value
        return None

    return {
        "code": pick("code"),
        "message": pick("message", "error"),
        "limit": pick("limit"),
        "remaining": pick("remaining"),
        "reset_at": pick("resetAt", "reset_at"),
    }


def _rate_limit_info(code: str, fields: dict[str, Any]) -> RateLimitInfo:
    message = fields.get("message")
    try:
        return RateLimitInfo(
            code=RateLimitCode(code),
            message=str(message) if message else None,
            limit=fields.get("limit"),
            remaining=fields.get("remaining"),
            reset_at=fields.get("reset_at"),
        )
    except PydanticValidationError:
        logger.warning(f"{__name__}:_rate_limit_info - unparseable quota fields for {code}")
        return RateLimitInfo(code=RateLimitCode(code), message=str(message) if message else None)


def _failure_from_error_body(status_code: int, body: Any) -> CompletionFailure:
    fields = extract_error_fields(body)
    raw_text = json.dumps(body, default=str) if isinstance(body, (dict, list)) else str(body or "")

    code = fields["code"] if fields["code"] in RATE_LIMIT_CODES else None
    code = code or detect_rate_limit_code(str(fields["message"] or ""), raw_text)
    if code:
        info = _rate_limit_info(code, fields)
        return CompletionFailure(
            kind=FailureKind.RATE_LIMIT,
            message=info.message or code,
            status_code=status_code,
            rate_limit=info,
        )

    message = str(fields["message"] or f"Request failed with status {status_code}")
    if status_code == 504 or _is_timeout(message):
        message = TIMEOUT_MESSAGE
    return CompletionFailure(kind=FailureKind.TRANSPORT, message=message, status_code=status_code)


def classify_response(status_code: int, body: Any, content_key: str = "content") -> CompletionResult:
    """
    Classify a completed HTTP exchange.

    Args:
        status_code: HTTP status of the function response
        body: Decoded response body
        content_key: Body field holding the result ("content" or "text")

    Returns:
        CompletionResult: Success with non-empty content, or a classified failure
    """
    if not 200 <= status_code < 300:
        return _failure_from_error_body(status_code, body)

    if isinstance(body, dict) and body.get("error"):
        return _failure_from_error_body(status_code, body)

    content = body.get(content_key) if isinstance(body, dict) else None
    if not isinstance(content, str) or not content.strip():
        return CompletionFailure(
            kind=FailureKind.EMPTY_RESULT,
            message=f"Response contained no {content_key}",
            status_code=status_code,
        )
    return CompletionSuccess(content=content)


def classify_exception(exc: Exception) -> CompletionFailure:
    """
    Classify an exception raised while calling a function.

    Args:
        exc: Transport or client exception

    Returns:
        CompletionFailure: Rate-limit failure when a quota code is mentioned,
        otherwise a transport failure keeping the original message
    """
    text = str(exc)
    code = detect_rate_limit_code(text)
    if code:
        return CompletionFailure(
            kind=FailureKind.RATE_LIMIT,
            message=text,
            rate_limit=RateLimitInfo(code=RateLimitCode(code), message="Rate limit reached"),
        )

    if isinstance(exc, httpx.TimeoutException) or _is_timeout(text):
        return CompletionFailure(kind=FailureKind.TRANSPORT, message=TIMEOUT_MESSAGE)

    return CompletionFailure(
        kind=FailureKind.TRANSPORT,
        message=text or type(exc).__name__,
    )
