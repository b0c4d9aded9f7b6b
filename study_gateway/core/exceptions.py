"""
Exception hierarchy for the study gateway.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from datetime import datetime
from typing import Any

DAILY_LIMIT_REACHED = "DAILY_LIMIT_REACHED"
ACCOUNT_LIMIT_REACHED = "ACCOUNT_LIMIT_REACHED"

PREVIEW_LENGTH = 200


class StudyGatewayException(Exception):
    """Base exception for all study gateway errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(StudyGatewayException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class UnsupportedLinkError(ValidationError):
    """Raised for links the link processor refuses to handle (e.g. YouTube)."""

    def __init__(self, url: str, link_type: str) -> None:
        super().__init__(
            "YouTube links are not supported. Please use a web article or Google Drive link.",
            field="url",
            details={"url": url, "link_type": link_type},
        )


class NotFoundError(StudyGatewayException):
    """Raised when a requested record does not exist."""

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(
            f"{resource} not found: {identifier}",
            {"resource": resource, "id": identifier},
        )


class CompletionError(StudyGatewayException):
    """Base exception for failures reported by the completion endpoint."""

    pass


class RateLimitError(CompletionError):
    """
    Raised when the user's generation quota is exhausted.

    Never retried. Propagates unchanged through every layer so the caller
    can show the quota message with its reset information.
    """

    def __init__(
        self,
        code: str,
        message: str | None = None,
        limit: int | None = None,
        remaining: int | None = None,
        reset_at: datetime | None = None,
    ) -> None:
        """
        Initialize rate limit error.

        Args:
            code: DAILY_LIMIT_REACHED or ACCOUNT_LIMIT_REACHED
            message: Message reported by the provider, if any
            limit: Quota size
            remaining: Calls left in the current window
            reset_at: When a daily quota resets
        """
        self.code = code
        self.limit = limit
        self.remaining = remaining
        self.reset_at = reset_at
        super().__init__(
            message or self._default_message(code),
            {
                "code": code,
                "limit": limit,
                "remaining": remaining,
                "reset_at": reset_at.isoformat() if reset_at else None,
            },
        )

    @staticmethod
    def _default_message(code: str) -> str:
        if code == ACCOUNT_LIMIT_REACHED:
            return "Account generation limit reached"
        return "Daily generation limit reached"

    @property
    def is_account_limit(self) -> bool:
        """True for lifetime quota exhaustion, False for the rolling daily quota."""
        return self.code == ACCOUNT_LIMIT_REACHED

    @property
    def user_message(self) -> str:
        """Message suitable for showing to the end user."""
        if self.is_account_limit:
            return (
                "You've used all AI generations included with your account. "
                "Upgrade to keep generating study content."
            )
        if self.reset_at is not None:
            return (
                "You've reached your daily AI generation limit. "
                f"It resets at {self.reset_at.strftime('%H:%M UTC')}."
            )
        return "You've reached your daily AI generation limit. Please try again tomorrow."


class EmptyResultError(CompletionError):
    """Raised when the provider answers successfully with no content."""

    def __init__(self, operation: str = "completion") -> None:
        super().__init__(
            f"No content returned from AI service ({operation})",
            {"operation": operation},
        )


class MalformedStructuredOutputError(CompletionError):
    """Raised when no parseable JSON can be extracted from a response."""

    def __init__(self, raw_text: str, reason: str | None = None) -> None:
        """
        Initialize malformed output error.

        Args:
            raw_text: Offending model output (only a preview is kept)
            reason: Parser error message
        """
        preview = raw_text[:PREVIEW_LENGTH]
        suffix = "..." if len(raw_text) > PREVIEW_LENGTH else ""
        self.preview = preview
        details = {"preview_length": len(preview)}
        if reason:
            details["reason"] = reason
        super().__init__(
            f"AI service returned invalid JSON. Response: {preview}{suffix}",
            details,
        )


class RefusalDetectedError(CompletionError):
    """Raised when the model declined the task instead of returning data."""

    def __init__(self, raw_text: str) -> None:
        preview = raw_text.strip()[:PREVIEW_LENGTH]
        self.preview = preview
        super().__init__(f"AI service declined the request: {preview}")


class TransportError(CompletionError):
    """Raised for network or HTTP-layer failures; keeps the original message."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, details)


class GenerationError(StudyGatewayException):
    """Raised by a generator when a non-quota failure occurs; names the operation."""

    def __init__(self, operation: str, cause: Exception, action: str | None = None) -> None:
        """
        Initialize generation error.

        Args:
            operation: Operation that failed (summary, flashcards, quiz, ...)
            cause: Underlying exception
            action: Verb phrase for the message, defaults to "generate <operation>"
        """
        cause_message = getattr(cause, "message", None) or str(cause)
        self.operation = operation
        self.cause = cause
        super().__init__(
            f"Failed to {action or 'generate ' + operation}: {cause_message}",
            {"operation": operation, "error_type": type(cause).__name__},
        )


class StorageError(StudyGatewayException):
    """Raised when object storage or persistence operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            operation: Operation that failed (upload, delete, save)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
