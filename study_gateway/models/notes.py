"""
Note study-content API models.

Dependencies: pydantic
System role: API contracts for persisted study content
"""

from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field

from study_gateway.models.generation import DocumentRef
from study_gateway.models.study_content import ContentType, StudyContent


class GenerationStatus(str, Enum):
    """Outcome of one content type during background generation."""

    GENERATED = "generated"
    SKIPPED = "skipped"
    FAILED = "failed"


class GenerationReport(BaseModel):
    """Per-type outcome of a background generation run."""

    note_id: UUID
    language: str = "en"
    results: dict[ContentType, GenerationStatus] = Field(default_factory=dict)


class StudyContentResponse(StudyContent):
    """Persisted study content of a note."""

    note_id: UUID


class GenerateStudyContentRequest(BaseModel):
    """Request to generate all missing study content for a note."""

    content: str = Field(description="Note content including document text")
    documents: list[DocumentRef] = Field(default_factory=list)


class GenerationAcceptedResponse(BaseModel):
    note_id: UUID
    status: str = "accepted"


class QuizAnswerRequest(BaseModel):
    answer: int = Field(ge=0, le=3, description="Index of the chosen option")


class QuizAnswerResponse(BaseModel):
    index: int
    user_answer: int
    correct_answer: int
    is_correct: bool
