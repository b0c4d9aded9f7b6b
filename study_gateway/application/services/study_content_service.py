"""
Structured study content service.

Generates flashcards, quiz questions, exercises and Feynman topics from note
content. Every generator follows the same path: balanced truncation of the
input, one completion requesting exactly N items as JSON, refusal check,
JSON extraction, per-item validation, truncation to N.

Dependencies: pydantic, study_gateway.core, study_gateway.boundary.gateway
System role: Structured-content generators
"""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from study_gateway.application.services.gateway_service import GatewayService
from study_gateway.core.exceptions import (
    GenerationError,
    MalformedStructuredOutputError,
    RateLimitError,
    ValidationError,
)
from study_gateway.core.prompts.study_content_prompt import (
    build_exercises_messages,
    build_feynman_messages,
    build_flashcards_messages,
    build_quiz_messages,
)
from study_gateway.core.text.chunker import build_balanced_context
from study_gateway.core.text.structured_output import parse_json_items
from study_gateway.models.chat import ChatMessage
from study_gateway.models.study_content import Exercise, Flashcard, FeynmanTopic, QuizQuestion
from study_gateway.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=BaseModel)

# Set later by the learner, never by the model
USER_ANSWER_KEYS = ("userAnswer", "user_answer")


def _validate_items(
    records: list[Any],
    item_model: type[ItemT],
    count: int,
    operation: str,
    raw_text: str,
) -> list[ItemT]:
    """Validate records one by one, dropping malformed ones, and keep at most count."""
    items: list[ItemT] = []
    for position, record in enumerate(records):
        if isinstance(record, dict):
            record = {k: v for k, v in record.items() if k not in USER_ANSWER_KEYS}
        try:
            items.append(item_model.model_validate(record))
        except PydanticValidationError as e:
            logger.warning(
                f"{__name__}:{operation} - dropping item {position} ({e.error_count()} validation errors): "
                f"{safe_log_value(record, max_length=120)}"
            )

    if records and not items:
        raise MalformedStructuredOutputError(raw_text, reason=f"no valid {operation} items")

    if len(items) < count:
        logger.info(f"{__name__}:{operation} - requested {count}, received {len(items)}")
    return items[:count]


class StudyContentService(GatewayService):
    """Flashcard, quiz, exercise and Feynman topic generators."""

    def _prepare(self, content: str, budget: int, operation: str) -> str:
        if not content or not content.strip():
            raise ValidationError(f"Content is required to generate {operation}", field="content")
        return build_balanced_context(content, budget)

    async def _generate_items(
        self,
        operation: str,
        messages: list[ChatMessage],
        count: int,
        item_model: type[ItemT],
    ) -> list[ItemT]:
        logger.info(f"{__name__}:{operation} - START count={count}")
        try:
            raw = await self._complete(messages, self.settings.generator_temperature, operation)
            records = parse_json_items(raw)
            items = _validate_items(records, item_model, count, operation, raw)
        except RateLimitError:
            raise
        except Exception as e:
            logger.error(f"{__name__}:{operation} - {type(e).__name__}: {e}")
            raise GenerationError(operation, e) from e

        logger.info(f"{__name__}:{operation} - SUCCESS items={len(items)}")
        return items

    async def generate_flashcards(
        self,
        content: str,
        count: int | None = None,
        language: str = "en",
    ) -> list[Flashcard]:
        """
        Generate flashcards from note content.

        Args:
            content: Note content
            count: Requested number of cards (defaults to the configured count)
            language: ISO 639-1 code of the content

        Returns:
            list[Flashcard]: At most count cards

        Raises:
            RateLimitError: If the generation quota is exhausted
            GenerationError: For any other failure
        """
        count = count or self.settings.flashcard_count
        source = self._prepare(content, self.settings.flashcard_input_words, "flashcards")
        return await self._generate_items(
            "flashcards",
            build_flashcards_messages(source, count, language),
            count,
            Flashcard,
        )

    async def generate_quiz(
        self,
        content: str,
        count: int | None = None,
        language: str = "en",
    ) -> list[QuizQuestion]:
        """
        Generate multiple-choice quiz questions.

        Returned questions are unanswered. A refusal from the model surfaces
        as GenerationError wrapping RefusalDetectedError.
        """
        count = count or self.settings.quiz_count
        source = self._prepare(content, self.settings.quiz_input_words, "quiz")
        return await self._generate_items(
            "quiz",
            build_quiz_messages(source, count, language),
            count,
            QuizQuestion,
        )

    async def generate_exercises(
        self,
        content: str,
        count: int | None = None,
        language: str = "en",
    ) -> list[Exercise]:
        count = count or self.settings.exercise_count
        source = self._prepare(content, self.settings.exercise_input_words, "exercises")
        return await self._generate_items(
            "exercises",
            build_exercises_messages(source, count, language),
            count,
            Exercise,
        )

    async def generate_feynman_topics(
        self,
        content: str,
        count: int | None = None,
        language: str = "en",
    ) -> list[FeynmanTopic]:
        """
        Suggest concepts to explain with the Feynman technique.

        Topics are re-indexed "1".."n". Any failure other than an exhausted
        quota yields an empty list.

        Raises:
            RateLimitError: If the generation quota is exhausted
        """
        count = count or self.settings.feynman_count
        if not content or not content.strip():
            return []

        source = build_balanced_context(content, self.settings.feynman_input_words)
        logger.info(f"{__name__}:feynman - START count={count}")
        try:
            raw = await self._complete(
                build_feynman_messages(source, count, language),
                self.settings.generator_temperature,
                "feynman topics",
            )
            records = parse_json_items(raw)
        except RateLimitError:
            raise
        except Exception as e:
            logger.warning(f"{__name__}:feynman - degraded to no topics: {type(e).__name__}: {e}")
            return []

        topics = []
        for record in records:
            if not isinstance(record, dict):
                continue
            title = str(record.get("title") or "").strip() or f"Topic {len(topics) + 1}"
            description = str(record.get("description") or "").strip()
            topics.append(
                FeynmanTopic(id=str(len(topics) + 1), title=title, description=description)
            )
            if len(topics) == count:
                break

        logger.info(f"{__name__}:feynman - SUCCESS topics={len(topics)}")
        return topics
