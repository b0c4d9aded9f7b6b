"""
Generation API endpoints.

Routes:
- POST /generate/summary - Summarize note content (chunked for long input)
- POST /generate/summary/edit - Revise a summary following an instruction
- POST /generate/title - Short note title
- POST /generate/flashcards - Flashcards
- POST /generate/quiz - Multiple-choice quiz
- POST /generate/exercises - Practice exercises
- POST /generate/feynman-topics - Concepts to explain in simple words
- POST /generate/language - Detect content language

Dependencies: study_gateway.application.services
System role: Study-content generation HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from study_gateway.api.deps import (
    get_language_service,
    get_study_content_service,
    get_summary_service,
)
from study_gateway.api.routers.router_utils import handle_gateway_errors
from study_gateway.application.services import (
    LanguageService,
    StudyContentService,
    SummaryService,
)
from study_gateway.models.generation import (
    EditSummaryRequest,
    ExercisesResponse,
    FeynmanTopicsResponse,
    FlashcardsResponse,
    LanguageRequest,
    LanguageResponse,
    QuizResponse,
    StudyItemsRequest,
    SummaryRequest,
    SummaryResponse,
    TitleRequest,
    TitleResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/generate", tags=["generation"])


@router.post("/summary", response_model=SummaryResponse)
@handle_gateway_errors
async def generate_summary(
    request: SummaryRequest,
    summary_service: SummaryService = Depends(get_summary_service),
) -> SummaryResponse:
    """
    Summarize note content as HTML.

    Content longer than one call's budget is summarized part by part and
    merged.

    Raises:
        HTTPException(400): Blank content
        HTTPException(429): Generation quota exhausted
        HTTPException(502): Model call failed
    """
    summary = await summary_service.generate_summary(
        content=request.content,
        documents=request.documents,
        detail_level=request.detail_level,
        language=request.language,
    )
    return SummaryResponse(summary=summary)


@router.post("/summary/edit", response_model=SummaryResponse)
@handle_gateway_errors
async def edit_summary(
    request: EditSummaryRequest,
    summary_service: SummaryService = Depends(get_summary_service),
) -> SummaryResponse:
    summary = await summary_service.edit_summary(
        summary=request.summary,
        instruction=request.instruction,
        language=request.language,
    )
    return SummaryResponse(summary=summary)


@router.post("/title", response_model=TitleResponse)
@handle_gateway_errors
async def generate_title(
    request: TitleRequest,
    summary_service: SummaryService = Depends(get_summary_service),
) -> TitleResponse:
    """Generate a note title; falls back to "New Note" unless rate limited."""
    title = await summary_service.generate_title(
        request.content, request.documents, request.language
    )
    return TitleResponse(title=title)


@router.post("/flashcards", response_model=FlashcardsResponse)
@handle_gateway_errors
async def generate_flashcards(
    request: StudyItemsRequest,
    service: StudyContentService = Depends(get_study_content_service),
) -> FlashcardsResponse:
    flashcards = await service.generate_flashcards(
        request.content, count=request.count, language=request.language
    )
    return FlashcardsResponse(flashcards=flashcards)


@router.post("/quiz", response_model=QuizResponse)
@handle_gateway_errors
async def generate_quiz(
    request: StudyItemsRequest,
    service: StudyContentService = Depends(get_study_content_service),
) -> QuizResponse:
    questions = await service.generate_quiz(
        request.content, count=request.count, language=request.language
    )
    return QuizResponse(questions=questions)


@router.post("/exercises", response_model=ExercisesResponse)
@handle_gateway_errors
async def generate_exercises(
    request: StudyItemsRequest,
    service: StudyContentService = Depends(get_study_content_service),
) -> ExercisesResponse:
    exercises = await service.generate_exercises(
        request.content, count=request.count, language=request.language
    )
    return ExercisesResponse(exercises=exercises)


@router.post("/feynman-topics", response_model=FeynmanTopicsResponse)
@handle_gateway_errors
async def generate_feynman_topics(
    request: StudyItemsRequest,
    service: StudyContentService = Depends(get_study_content_service),
) -> FeynmanTopicsResponse:
    """Suggest Feynman topics; an empty list when generation fails."""
    topics = await service.generate_feynman_topics(
        request.content, count=request.count, language=request.language
    )
    return FeynmanTopicsResponse(topics=topics)


@router.post("/language", response_model=LanguageResponse)
@handle_gateway_errors
async def detect_language(
    request: LanguageRequest,
    language_service: LanguageService = Depends(get_language_service),
) -> LanguageResponse:
    language = await language_service.detect_language(request.content)
    return LanguageResponse(language=language)
