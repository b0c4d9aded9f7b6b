"""
Study content domain models.

Flashcards, quiz questions, exercises and Feynman topics generated for a
note, plus the aggregate persisted per note. Item models accept both the
snake_case and camelCase keys models tend to emit.

Dependencies: pydantic
System role: Study content contracts shared by generators, storage and API
"""

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class DetailLevel(str, Enum):
    """Caller-selected summary depth."""

    CONCISE = "concise"
    STANDARD = "standard"
    COMPREHENSIVE = "comprehensive"


class ContentType(str, Enum):
    """Independently generated study content fields."""

    SUMMARY = "summary"
    FLASHCARDS = "flashcards"
    QUIZ = "quiz"
    EXERCISES = "exercises"
    FEYNMAN = "feynman"


class _StudyItem(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


class Flashcard(_StudyItem):
    """Question on the front, answer on the back."""

    front: str = Field(min_length=1)
    back: str = Field(min_length=1)
    hint: str | None = None


class QuizQuestion(_StudyItem):
    """Multiple-choice question with exactly four options."""

    question: str = Field(min_length=1)
    options: list[str] = Field(min_length=4, max_length=4)
    correct_answer: int = Field(
        ge=0,
        le=3,
        validation_alias=AliasChoices("correct_answer", "correctAnswer"),
    )
    user_answer: int | None = Field(
        default=None,
        ge=0,
        le=3,
        validation_alias=AliasChoices("user_answer", "userAnswer"),
    )
    hint: str | None = None
    explanation: str | None = None

    @property
    def is_answered(self) -> bool:
        return self.user_answer is not None

    @property
    def is_correct(self) -> bool:
        """True when the chosen option index equals the correct index."""
        return self.user_answer is not None and self.user_answer == self.correct_answer


class Exercise(_StudyItem):
    """Practice problem with a worked solution."""

    question: str = Field(min_length=1)
    solution: str = Field(min_length=1)
    notes: str = ""
    hint: str | None = None


class FeynmanTopic(_StudyItem):
    """Concept the learner should explain in simple words."""

    id: str
    title: str
    description: str = ""


class StudyContent(BaseModel):
    """All generated study content for one note. Fields fill in independently."""

    summary: str = ""
    flashcards: list[Flashcard] = Field(default_factory=list)
    quiz_questions: list[QuizQuestion] = Field(default_factory=list)
    exercises: list[Exercise] = Field(default_factory=list)
    feynman_topics: list[FeynmanTopic] = Field(default_factory=list)

    def missing_types(self) -> list[ContentType]:
        """Content types that have not been generated yet."""
        present = {
            ContentType.SUMMARY: bool(self.summary.strip()),
            ContentType.FLASHCARDS: bool(self.flashcards),
            ContentType.QUIZ: bool(self.quiz_questions),
            ContentType.EXERCISES: bool(self.exercises),
            ContentType.FEYNMAN: bool(self.feynman_topics),
        }
        return [content_type for content_type, done in present.items() if not done]
