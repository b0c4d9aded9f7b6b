"""
Media API endpoints.

Routes:
- POST /media/transcriptions - Transcribe an uploaded recording or stored audio
- POST /media/links - Extract text from a web page or Google Drive document

Dependencies: study_gateway.application.services.media_service
System role: Media ingestion HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile

from study_gateway.api.deps import get_media_service
from study_gateway.api.routers.router_utils import handle_gateway_errors
from study_gateway.application.services.media_service import MediaService
from study_gateway.models.media import LinkContent, ProcessLinkRequest, TranscriptionResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/media", tags=["media"])


@router.post("/transcriptions", response_model=TranscriptionResponse)
@handle_gateway_errors
async def transcribe_audio(
    file: UploadFile | None = File(default=None),
    storage_path: str | None = Form(default=None),
    user_id: UUID | None = Form(default=None),
    media_service: MediaService = Depends(get_media_service),
) -> TranscriptionResponse:
    """
    Transcribe audio.

    Either upload the recording as `file` or reference audio already in
    storage with `storage_path`. Large uploads need `user_id`.

    Raises:
        HTTPException(400): No audio, or large audio without user_id
        HTTPException(429): Generation quota exhausted
        HTTPException(502): Transcription failed
        HTTPException(503): Storage upload failed
    """
    audio = None
    mime_type = "audio/webm"
    if file is not None:
        audio = await file.read()
        mime_type = file.content_type or mime_type
        logger.info(f"{__name__}:transcribe_audio - received {len(audio)} bytes ({mime_type})")

    text = await media_service.transcribe_audio(
        audio=audio,
        mime_type=mime_type,
        storage_path=storage_path,
        user_id=user_id,
    )
    return TranscriptionResponse(text=text, storage_path=storage_path)


@router.post("/links", response_model=LinkContent)
@handle_gateway_errors
async def process_link(
    request: ProcessLinkRequest,
    media_service: MediaService = Depends(get_media_service),
) -> LinkContent:
    """Extract text from a link. YouTube links are rejected with 400."""
    return await media_service.process_web_link(request.url)
