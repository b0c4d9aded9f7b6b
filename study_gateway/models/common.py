"""
Common response models.

Error schemas shared by all routers.

Dependencies: pydantic
System role: Common API response structures
"""

from datetime import datetime

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: bool = False
    error: str = Field(description="Error message")
    details: dict | None = Field(default=None, description="Additional error context")


class RateLimitErrorResponse(BaseModel):
    """Body returned with HTTP 429 when a generation quota is exhausted."""

    code: str = Field(description="DAILY_LIMIT_REACHED or ACCOUNT_LIMIT_REACHED")
    message: str = Field(description="User-facing quota message")
    limit: int | None = None
    remaining: int | None = None
    reset_at: datetime | None = None
