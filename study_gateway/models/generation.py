"""
Generation API request/response models.

Defines Pydantic DTOs for the generation endpoints.

Dependencies: pydantic
System role: API data models for generation endpoints
"""

from pydantic import BaseModel, Field

from study_gateway.models.study_content import (
    DetailLevel,
    Exercise,
    FeynmanTopic,
    Flashcard,
    QuizQuestion,
)


class DocumentRef(BaseModel):
    """Name and type of a document attached to a note."""

    name: str
    type: str = Field(description="File type, e.g. pdf, audio, slides")


class SummaryRequest(BaseModel):
    """Request to summarize note content."""

    content: str = Field(min_length=1, description="Note text, transcripts and document text")
    documents: list[DocumentRef] = Field(default_factory=list)
    detail_level: DetailLevel = DetailLevel.STANDARD
    language: str = Field(default="en", description="ISO 639-1 code of the content")


class SummaryResponse(BaseModel):
    summary: str = Field(description="HTML summary")


class EditSummaryRequest(BaseModel):
    """Request to revise an existing summary."""

    summary: str = Field(min_length=1, description="Current HTML summary")
    instruction: str = Field(min_length=1, description="What to change")
    language: str = "en"


class TitleRequest(BaseModel):
    content: str = Field(min_length=1)
    documents: list[DocumentRef] = Field(default_factory=list)
    language: str = "en"


class TitleResponse(BaseModel):
    title: str


class StudyItemsRequest(BaseModel):
    """Request for a batch of flashcards, quiz questions, exercises or topics."""

    content: str = Field(min_length=1)
    count: int | None = Field(
        default=None,
        ge=1,
        le=50,
        description="Number of items; the generator default applies when omitted",
    )
    language: str = "en"


class FlashcardsResponse(BaseModel):
    flashcards: list[Flashcard]


class QuizResponse(BaseModel):
    questions: list[QuizQuestion]


class ExercisesResponse(BaseModel):
    exercises: list[Exercise]


class FeynmanTopicsResponse(BaseModel):
    topics: list[FeynmanTopic]


class LanguageRequest(BaseModel):
    content: str = Field(min_length=1)


class LanguageResponse(BaseModel):
    language: str = Field(description="ISO 639-1 code")
