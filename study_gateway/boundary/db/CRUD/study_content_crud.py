"""
Study content CRUD operations.

Reads and field-wise upserts of the per-note study content row. Each content
type is saved on its own, so a failed flashcard run never overwrites a
summary that already succeeded.

Dependencies: sqlalchemy, study_gateway.boundary.db
System role: Persistence for generated study content
"""

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from study_gateway.boundary.db.CRUD.base_crud import BaseCRUD
from study_gateway.boundary.db.models.study_content_model import StudyContentModel

CONTENT_FIELDS = frozenset(
    {"summary", "flashcards", "quiz_questions", "exercises", "feynman_topics"}
)


class StudyContentCRUD(BaseCRUD[StudyContentModel]):
    """CRUD operations for StudyContentModel."""

    def __init__(self) -> None:
        super().__init__(StudyContentModel)

    async def get_by_note_id(self, session: AsyncSession, note_id: UUID) -> StudyContentModel | None:
        """
        Retrieve study content of a note.

        Args:
            session: Async database session
            note_id: Note UUID

        Returns:
            StudyContentModel if generated before, None otherwise
        """
        stmt = select(StudyContentModel).where(StudyContentModel.note_id == note_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert_fields(
        self,
        session: AsyncSession,
        note_id: UUID,
        **fields: Any,
    ) -> StudyContentModel:
        """
        Create the note's row if missing and set the given content fields.

        Fields not passed keep their stored values.

        Args:
            session: Async database session
            note_id: Note UUID
            **fields: Any of summary, flashcards, quiz_questions, exercises, feynman_topics

        Returns:
            StudyContentModel: Updated row

        Raises:
            ValueError: If an unknown field is passed
        """
        unknown = set(fields) - CONTENT_FIELDS
        if unknown:
            raise ValueError(f"Unknown study content fields: {sorted(unknown)}")

        record = await self.get_by_note_id(session, note_id)
        if record is None:
            return await self.create(session, note_id=note_id, **fields)

        for name, value in fields.items():
            setattr(record, name, value)
        await session.flush()
        await session.refresh(record)
        return record


study_content_crud = StudyContentCRUD()
