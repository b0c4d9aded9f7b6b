"""
Gateway error handling utilities.

Decorator mapping the domain exception hierarchy to HTTPExceptions with
uniform status codes across every generation endpoint.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from study_gateway.core.exceptions import (
    CompletionError,
    GenerationError,
    NotFoundError,
    RateLimitError,
    StorageError,
    ValidationError,
)
from study_gateway.models.common import RateLimitErrorResponse

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def rate_limit_http_exception(e: RateLimitError) -> HTTPException:
    """429 carrying the structured quota fields."""
    body = RateLimitErrorResponse(
        code=e.code,
        message=e.user_message,
        limit=e.limit,
        remaining=e.remaining,
        reset_at=e.reset_at,
    )
    return HTTPException(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        detail=body.model_dump(mode="json"),
    )


def handle_gateway_errors(func: F) -> F:
    """
    Decorator to handle gateway errors and transform them into HTTPExceptions.

    - RateLimitError: 429 with code, message, limit, remaining, reset_at
    - ValidationError: 400
    - NotFoundError: 404
    - GenerationError, CompletionError: 502
    - StorageError: 503
    - anything else: 500
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except RateLimitError as e:
            logger.warning(f"{func.__name__} - rate limited: {e.code}")
            raise rate_limit_http_exception(e)

        except ValidationError as e:
            logger.warning(f"{func.__name__} - invalid request: {e.message}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except NotFoundError as e:
            logger.warning(f"{func.__name__} - {e.message}")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except (GenerationError, CompletionError) as e:
            logger.error(f"{func.__name__} - {type(e).__name__}: {e}")
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

        except StorageError as e:
            logger.error(f"{func.__name__} - {type(e).__name__}: {e}")
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message
            )

        except Exception as e:
            logger.exception(f"{func.__name__} - unexpected failure: {type(e).__name__}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"An internal error occurred: {str(e)}",
            )

    return wrapper  # type: ignore
