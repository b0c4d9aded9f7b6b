"""Chat API endpoints.

Routes:
- POST /chat/completions - Answer the latest turn of a conversation
- POST /notes/{note_id}/chat - Tutor chat about a note with stored history

Dependencies: study_gateway.application.services.chat_service
System role: Chat messaging HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from study_gateway.api.deps import get_chat_service
from study_gateway.api.routers.router_utils import handle_gateway_errors
from study_gateway.application.services.chat_service import ChatService
from study_gateway.models.chat import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    NoteChatRequest,
    NoteChatResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


@router.post("/chat/completions", response_model=ChatCompletionResponse)
@handle_gateway_errors
async def chat_completion(
    request: ChatCompletionRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatCompletionResponse:
    """Forward the conversation (last turns plus optional note context) to the model."""
    content = await chat_service.chat_completion(
        messages=request.messages,
        context=request.context,
        model=request.model,
        temperature=request.temperature,
    )
    return ChatCompletionResponse(content=content)


@router.post("/notes/{note_id}/chat", response_model=NoteChatResponse)
@handle_gateway_errors
async def chat_with_note(
    note_id: UUID,
    request: NoteChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> NoteChatResponse:
    """
    Send a tutor chat message about a note.

    Flow:
    1. Load the user's conversation for the note with recent history
    2. Answer with the note content as context
    3. Store the message and the reply

    Raises:
        HTTPException(429): Generation quota exhausted
        HTTPException(502): Model call failed
    """
    conversation_id, reply = await chat_service.chat_with_note(
        user_id=request.user_id,
        note_id=note_id,
        message=request.message,
        context=request.context,
    )
    return NoteChatResponse(conversation_id=conversation_id, reply=reply)
