"""ORM models."""

from study_gateway.boundary.db.models.conversation_model import (
    ChatMessageModel,
    ConversationModel,
)
from study_gateway.boundary.db.models.study_content_model import StudyContentModel

__all__ = ["ChatMessageModel", "ConversationModel", "StudyContentModel"]
