"""
Completion result envelope.

Every call through the completion client yields exactly one of two shapes,
tagged by ``status``: a success carrying non-empty content, or a failure
carrying a kind and, for quota failures, the structured rate-limit fields.
Callers match on the shape or call ``unwrap()`` to get content or the typed
exception.

Dependencies: pydantic, study_gateway.core.exceptions
System role: Uniform result type between the gateway boundary and services
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, NoReturn, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from study_gateway.core.exceptions import (
    ACCOUNT_LIMIT_REACHED,
    DAILY_LIMIT_REACHED,
    CompletionError,
    EmptyResultError,
    RateLimitError,
    TransportError,
)


class RateLimitCode(str, Enum):
    """Quota that was exhausted."""

    DAILY_LIMIT_REACHED = DAILY_LIMIT_REACHED
    ACCOUNT_LIMIT_REACHED = ACCOUNT_LIMIT_REACHED


class RateLimitInfo(BaseModel):
    """Structured quota details reported by the gateway."""

    model_config = ConfigDict(frozen=True)

    code: RateLimitCode
    message: str | None = None
    limit: int | None = Field(default=None, ge=0)
    remaining: int | None = Field(default=None, ge=0)
    reset_at: datetime | None = None

    def to_exception(self) -> RateLimitError:
        return RateLimitError(
            code=self.code.value,
            message=self.message,
            limit=self.limit,
            remaining=self.remaining,
            reset_at=self.reset_at,
        )


class FailureKind(str, Enum):
    """Failure categories the completion client can report."""

    RATE_LIMIT = "rate_limit"
    EMPTY_RESULT = "empty_result"
    TRANSPORT = "transport"


class CompletionSuccess(BaseModel):
    """Successful completion. Content is never empty."""

    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    content: str = Field(min_length=1)

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("completion content must not be blank")
        return value

    def unwrap(self, operation: str = "completion") -> str:
        return self.content


class CompletionFailure(BaseModel):
    """Failed completion, classified."""

    model_config = ConfigDict(frozen=True)

    status: Literal["failure"] = "failure"
    kind: FailureKind
    message: str
    status_code: int | None = None
    rate_limit: RateLimitInfo | None = None

    def to_exception(self, operation: str = "completion") -> CompletionError:
        """
        Build the typed exception for this failure.

        Args:
            operation: Name used in empty-result messages

        Returns:
            CompletionError: RateLimitError, EmptyResultError or TransportError
        """
        if self.kind == FailureKind.RATE_LIMIT and self.rate_limit is not None:
            return self.rate_limit.to_exception()
        if self.kind == FailureKind.EMPTY_RESULT:
            return EmptyResultError(operation)
        return TransportError(self.message, status_code=self.status_code)

    def unwrap(self, operation: str = "completion") -> NoReturn:
        raise self.to_exception(operation)


CompletionResult = Annotated[
    Union[CompletionSuccess, CompletionFailure],
    Field(discriminator="status"),
]
