"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    chat_router,
    generation_router,
    health_router,
    media_router,
    notes_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(generation_router)
api_router.include_router(chat_router)
api_router.include_router(media_router)
api_router.include_router(notes_router)

__all__ = ["api_router"]
