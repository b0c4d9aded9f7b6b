"""
Chat domain models and schemas.

Conversation messages, the immutable completion request sent to the hosted
endpoint, and request/response schemas for chat operations.

Dependencies: pydantic
System role: Chat API contracts
"""

from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ChatRole(str, Enum):
    """Author of a chat message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """Single message in a conversation; order carries meaning."""

    model_config = ConfigDict(frozen=True)

    role: ChatRole = Field(description="Message role: system, user or assistant")
    content: str = Field(description="Message content")


class CompletionRequest(BaseModel):
    """One call to the completion endpoint. Built per call, never mutated."""

    model_config = ConfigDict(frozen=True)

    messages: tuple[ChatMessage, ...] = Field(min_length=1)
    model: str = Field(min_length=1)
    temperature: float = Field(ge=0.0, le=1.0)

    def to_payload(self) -> dict:
        """Request body understood by the completion function."""
        return {
            "type": "chat",
            "messages": [message.model_dump(mode="json") for message in self.messages],
            "model": self.model,
            "temperature": self.temperature,
        }


class ChatCompletionRequest(BaseModel):
    """Request schema for a raw chat completion."""

    messages: list[ChatMessage] = Field(min_length=1, description="Conversation so far")
    context: str | None = Field(default=None, description="Note content to ground answers in")
    model: str | None = Field(default=None, description="Override the default model")
    temperature: float | None = Field(default=None, ge=0.0, le=1.0)


class ChatCompletionResponse(BaseModel):
    """Response schema for a raw chat completion."""

    content: str


class NoteChatRequest(BaseModel):
    """Request schema for the note tutor chat."""

    user_id: UUID = Field(description="Owner of the conversation")
    message: str = Field(min_length=1, description="User question or message")
    context: str | None = Field(default=None, description="Note content to ground answers in")


class NoteChatResponse(BaseModel):
    """Response schema for the note tutor chat."""

    conversation_id: UUID
    reply: str
