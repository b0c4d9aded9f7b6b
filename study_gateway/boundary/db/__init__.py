"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - StudyContentModel, ConversationModel, ChatMessageModel: Persisted entities
  - study_content_crud, conversation_crud: CRUD operation singletons

Dependencies: sqlalchemy, study_gateway.configs
System role: Database adapter for study content and tutor chats
"""

from study_gateway.boundary.db.base import Base, TimestampMixin, UUIDMixin
from study_gateway.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from study_gateway.boundary.db.models import (
    ChatMessageModel,
    ConversationModel,
    StudyContentModel,
)
from study_gateway.boundary.db.CRUD import (
    BaseCRUD,
    ConversationCRUD,
    StudyContentCRUD,
    conversation_crud,
    study_content_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "ChatMessageModel",
    "ConversationModel",
    "StudyContentModel",
    # CRUD classes
    "BaseCRUD",
    "ConversationCRUD",
    "StudyContentCRUD",
    # CRUD singletons
    "conversation_crud",
    "study_content_crud",
]
