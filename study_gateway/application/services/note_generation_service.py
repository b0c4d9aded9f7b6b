"""
Note study-content service.

Reads and writes the study content of a note and runs the unattended
generation triggered at note creation: every missing content type is
generated concurrently and saved as soon as it succeeds, in its own
session, so one failing type never blocks or rolls back the others.

Dependencies: sqlalchemy, study_gateway.boundary.db, study_gateway.application.services
System role: Background study-content generation and quiz answers
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from study_gateway.application.services.language_service import LanguageService
from study_gateway.application.services.study_content_service import StudyContentService
from study_gateway.application.services.summary_service import SummaryService
from study_gateway.boundary.db.CRUD.study_content_crud import study_content_crud
from study_gateway.boundary.db.models.study_content_model import StudyContentModel
from study_gateway.configs.generation import GenerationSettings
from study_gateway.core.exceptions import NotFoundError, RateLimitError, ValidationError
from study_gateway.models.generation import DocumentRef
from study_gateway.models.notes import GenerationReport, GenerationStatus
from study_gateway.models.study_content import (
    ContentType,
    DetailLevel,
    QuizQuestion,
    StudyContent,
)

logger = logging.getLogger(__name__)

# Column holding each content type
CONTENT_COLUMNS = {
    ContentType.SUMMARY: "summary",
    ContentType.FLASHCARDS: "flashcards",
    ContentType.QUIZ: "quiz_questions",
    ContentType.EXERCISES: "exercises",
    ContentType.FEYNMAN: "feynman_topics",
}


def to_study_content(record: StudyContentModel | None) -> StudyContent:
    """Convert a stored row to StudyContent; an absent row is empty content."""
    if record is None:
        return StudyContent()
    return StudyContent.model_validate(
        {
            "summary": record.summary or "",
            "flashcards": record.flashcards or [],
            "quiz_questions": record.quiz_questions or [],
            "exercises": record.exercises or [],
            "feynman_topics": record.feynman_topics or [],
        }
    )


def _dump(value: Any) -> Any:
    if isinstance(value, list):
        return [item.model_dump(mode="json") for item in value]
    return value


class NoteGenerationService:
    """Persistence-aware study content operations for notes."""

    def __init__(
        self,
        summary_service: SummaryService,
        study_content_service: StudyContentService,
        language_service: LanguageService,
        session_factory: async_sessionmaker[AsyncSession],
        settings: GenerationSettings,
    ) -> None:
        """
        Initialize note generation service.

        Args:
            summary_service: Summary generator
            study_content_service: Flashcard, quiz, exercise and Feynman generators
            language_service: Language detection
            session_factory: Factory for the short-lived sessions of each save
            settings: Generation settings
        """
        self.summary_service = summary_service
        self.study_content_service = study_content_service
        self.language_service = language_service
        self.session_factory = session_factory
        self.settings = settings

    async def get_study_content(self, note_id: UUID) -> StudyContent:
        async with self.session_factory() as session:
            record = await study_content_crud.get_by_note_id(session, note_id)
            return to_study_content(record)

    async def save_study_content(self, note_id: UUID, **fields: Any) -> StudyContent:
        """
        Persist content fields of a note, leaving the other fields untouched.

        Args:
            note_id: Note UUID
            **fields: Column name to value; item lists may hold pydantic models

        Returns:
            StudyContent: Stored content after the update
        """
        async with self.session_factory() as session:
            record = await study_content_crud.upsert_fields(
                session,
                note_id,
                **{name: _dump(value) for name, value in fields.items()},
            )
            await session.commit()
            return to_study_content(record)

    async def generate_all(
        self,
        note_id: UUID,
        content: str,
        documents: list[DocumentRef] | None = None,
    ) -> GenerationReport:
        """
        Generate every study content type the note is still missing.

        Flow:
        1. Skip notes whose content is too short
        2. Detect the language once
        3. Load existing content and pick the empty types
        4. Generate those types concurrently, saving each success at once

        Never raises for generation failures, rate limits included; they
        are logged and reported as failed.

        Args:
            note_id: Note UUID
            content: Note content including document text
            documents: Attached documents for the summary prompt

        Returns:
            GenerationReport: Outcome per content type
        """
        report = GenerationReport(note_id=note_id)
        if len((content or "").strip()) < self.settings.min_background_chars:
            logger.info(f"{__name__}:generate_all - SKIP note_id={note_id} content too short")
            report.results = {t: GenerationStatus.SKIPPED for t in ContentType}
            return report

        logger.info(f"{__name__}:generate_all - START note_id={note_id} chars={len(content)}")

        try:
            report.language = await self.language_service.detect_language(content)
        except RateLimitError as e:
            logger.warning(f"{__name__}:generate_all - language detection rate limited: {e.code}")

        existing = await self.get_study_content(note_id)
        missing = existing.missing_types()
        report.results = {
            t: GenerationStatus.SKIPPED for t in ContentType if t not in missing
        }
        if not missing:
            logger.info(f"{__name__}:generate_all - nothing to generate for note_id={note_id}")
            return report

        # Row exists before concurrent saves so none of them races on the insert
        await self.save_study_content(note_id)

        language = report.language
        generators: dict[ContentType, Callable[[], Awaitable[Any]]] = {
            ContentType.SUMMARY: lambda: self.summary_service.generate_summary(
                content, documents, DetailLevel.COMPREHENSIVE, language
            ),
            ContentType.FLASHCARDS: lambda: self.study_content_service.generate_flashcards(
                content, language=language
            ),
            ContentType.QUIZ: lambda: self.study_content_service.generate_quiz(
                content, language=language
            ),
            ContentType.EXERCISES: lambda: self.study_content_service.generate_exercises(
                content, language=language
            ),
            ContentType.FEYNMAN: lambda: self.study_content_service.generate_feynman_topics(
                content, language=language
            ),
        }

        statuses = await asyncio.gather(
            *(self._generate_one(note_id, t, generators[t]) for t in missing)
        )
        report.results.update(dict(zip(missing, statuses)))

        logger.info(
            f"{__name__}:generate_all - DONE note_id={note_id} "
            + " ".join(f"{t.value}={s.value}" for t, s in report.results.items())
        )
        return report

    async def _generate_one(
        self,
        note_id: UUID,
        content_type: ContentType,
        generate: Callable[[], Awaitable[Any]],
    ) -> GenerationStatus:
        try:
            value = await generate()
            if not value:
                logger.warning(f"{__name__}:generate_all - {content_type.value} produced nothing")
                return GenerationStatus.FAILED
            await self.save_study_content(note_id, **{CONTENT_COLUMNS[content_type]: value})
        except Exception as e:
            logger.error(
                f"{__name__}:generate_all - {content_type.value} failed: {type(e).__name__}: {e}"
            )
            return GenerationStatus.FAILED
        return GenerationStatus.GENERATED

    async def record_quiz_answer(self, note_id: UUID, index: int, answer: int) -> QuizQuestion:
        """
        Store the learner's answer to a quiz question.

        Args:
            note_id: Note UUID
            index: Position of the question in the quiz
            answer: Chosen option index (0-3)

        Returns:
            QuizQuestion: Updated question; is_correct compares option indices

        Raises:
            ValidationError: If answer is outside 0-3
            NotFoundError: If the note has no such quiz question
        """
        if not 0 <= answer <= 3:
            raise ValidationError("Answer must be an option index between 0 and 3", field="answer")

        async with self.session_factory() as session:
            record = await study_content_crud.get_by_note_id(session, note_id)
            if record is None:
                raise NotFoundError("Study content", str(note_id))

            questions = list(record.quiz_questions or [])
            if not 0 <= index < len(questions):
                raise NotFoundError("Quiz question", f"{note_id}/{index}")

            question = QuizQuestion.model_validate(questions[index])
            updated = question.model_copy(update={"user_answer": answer})
            questions[index] = updated.model_dump(mode="json")

            await study_content_crud.upsert_fields(session, note_id, quiz_questions=questions)
            await session.commit()

        logger.info(
            f"{__name__}:record_quiz_answer - note_id={note_id} index={index} "
            f"correct={updated.is_correct}"
        )
        return updated
