"""CRUD operation classes and singletons."""

from study_gateway.boundary.db.CRUD.base_crud import BaseCRUD
from study_gateway.boundary.db.CRUD.conversation_crud import ConversationCRUD, conversation_crud
from study_gateway.boundary.db.CRUD.study_content_crud import StudyContentCRUD, study_content_crud

__all__ = [
    "BaseCRUD",
    "ConversationCRUD",
    "StudyContentCRUD",
    "conversation_crud",
    "study_content_crud",
]
