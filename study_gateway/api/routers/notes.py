"""
Note study-content API endpoints.

Routes:
- GET /notes/{note_id}/study-content - Stored study content
- POST /notes/{note_id}/study-content/generate - Generate missing content in the background
- PUT /notes/{note_id}/quiz/{index}/answer - Record a quiz answer

Dependencies: study_gateway.application.services.note_generation_service
System role: Note study-content HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, status

from study_gateway.api.deps import get_note_generation_service
from study_gateway.api.routers.router_utils import handle_gateway_errors
from study_gateway.application.services.note_generation_service import NoteGenerationService
from study_gateway.models.notes import (
    GenerateStudyContentRequest,
    GenerationAcceptedResponse,
    QuizAnswerRequest,
    QuizAnswerResponse,
    StudyContentResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("/{note_id}/study-content", response_model=StudyContentResponse)
@handle_gateway_errors
async def get_study_content(
    note_id: UUID,
    service: NoteGenerationService = Depends(get_note_generation_service),
) -> StudyContentResponse:
    """Stored study content; empty fields when nothing was generated yet."""
    content = await service.get_study_content(note_id)
    return StudyContentResponse(note_id=note_id, **content.model_dump())


@router.post(
    "/{note_id}/study-content/generate",
    response_model=GenerationAcceptedResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def generate_study_content(
    note_id: UUID,
    request: GenerateStudyContentRequest,
    background_tasks: BackgroundTasks,
    service: NoteGenerationService = Depends(get_note_generation_service),
) -> GenerationAcceptedResponse:
    """
    Queue generation of every missing content type for a note.

    Returns immediately; each content type is saved as soon as it is
    generated. Poll GET /notes/{note_id}/study-content for results.
    """
    logger.info(f"{__name__}:generate_study_content - queued note_id={note_id}")
    background_tasks.add_task(service.generate_all, note_id, request.content, request.documents)
    return GenerationAcceptedResponse(note_id=note_id)


@router.put("/{note_id}/quiz/{index}/answer", response_model=QuizAnswerResponse)
@handle_gateway_errors
async def answer_quiz_question(
    note_id: UUID,
    index: int,
    request: QuizAnswerRequest,
    service: NoteGenerationService = Depends(get_note_generation_service),
) -> QuizAnswerResponse:
    """
    Record the chosen option of a quiz question.

    Raises:
        HTTPException(404): Note has no such question
    """
    question = await service.record_quiz_answer(note_id, index, request.answer)
    return QuizAnswerResponse(
        index=index,
        user_answer=question.user_answer,
        correct_answer=question.correct_answer,
        is_correct=question.is_correct,
    )
