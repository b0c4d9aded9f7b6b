"""API routers."""

from .chat import router as chat_router
from .generation import router as generation_router
from .health import router as health_router
from .media import router as media_router
from .notes import router as notes_router

__all__ = [
    "chat_router",
    "generation_router",
    "health_router",
    "media_router",
    "notes_router",
]
