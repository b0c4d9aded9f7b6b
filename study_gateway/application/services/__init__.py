"""Service orchestrators."""

from .chat_service import ChatService
from .gateway_service import GatewayService
from .language_service import LanguageService
from .media_service import MediaService, detect_link_type
from .note_generation_service import NoteGenerationService
from .study_content_service import StudyContentService
from .summary_service import SummaryService

__all__ = [
    "ChatService",
    "GatewayService",
    "LanguageService",
    "MediaService",
    "NoteGenerationService",
    "StudyContentService",
    "SummaryService",
    "detect_link_type",
]
