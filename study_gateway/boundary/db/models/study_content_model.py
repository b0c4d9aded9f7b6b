"""
Study content ORM model.

One row per note holding the generated summary and the JSON collections of
flashcards, quiz questions, exercises and Feynman topics.

Dependencies: sqlalchemy
System role: Persistence of generated study content
"""

import uuid

from sqlalchemy import JSON, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from study_gateway.boundary.db.base import Base, TimestampMixin, UUIDMixin


class StudyContentModel(UUIDMixin, TimestampMixin, Base):
    """
    Generated study content of a note.

    Attributes:
        note_id: Note the content belongs to (unique)
        summary: HTML summary, empty until generated
        flashcards: List of {front, back, hint}
        quiz_questions: List of {question, options, correct_answer, user_answer, hint, explanation}
        exercises: List of {question, solution, notes, hint}
        feynman_topics: List of {id, title, description}
    """

    __tablename__ = "study_content"

    note_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        unique=True,
        index=True,
        nullable=False,
    )
    summary: Mapped[str] = mapped_column(Text, default="", nullable=False)
    flashcards: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    quiz_questions: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    exercises: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    feynman_topics: Mapped[list] = mapped_column(JSON, default=list, nullable=False)

    def __repr__(self) -> str:
        return f"<StudyContentModel(note_id={self.note_id})>"
