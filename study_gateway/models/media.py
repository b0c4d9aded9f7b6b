"""
Media ingestion models.

Link classification and request/response schemas for transcription and
web-link processing.

Dependencies: pydantic
System role: Media ingestion API contracts
"""

from enum import Enum

from pydantic import BaseModel, Field


class LinkType(str, Enum):
    """Kind of link submitted for text extraction."""

    YOUTUBE = "youtube"
    GOOGLE_DRIVE = "google-drive"
    WEB = "web"
    UNKNOWN = "unknown"


class ProcessLinkRequest(BaseModel):
    """Request schema for link processing."""

    url: str = Field(min_length=1, description="Web page or Google Drive URL")


class LinkContent(BaseModel):
    """Text extracted from a link."""

    title: str
    content: str
    url: str
    link_type: LinkType


class TranscriptionResponse(BaseModel):
    """Response schema for audio transcription."""

    text: str
    storage_path: str | None = Field(
        default=None,
        description="Object storage path the audio was read from, if any",
    )
