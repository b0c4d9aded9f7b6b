"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_chat_service,
    get_language_service,
    get_media_service,
    get_note_generation_service,
    get_service_cache,
    get_study_content_service,
    get_summary_service,
)

__all__ = [
    "get_chat_service",
    "get_language_service",
    "get_media_service",
    "get_note_generation_service",
    "get_service_cache",
    "get_study_content_service",
    "get_summary_service",
]
