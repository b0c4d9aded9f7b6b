"""
Media ingestion service.

Audio transcription (inline for small recordings, via object storage for
large ones) and text extraction from web and Google Drive links.

Dependencies: study_gateway.boundary.gateway, study_gateway.boundary.storage
System role: Media ingestion orchestration layer
"""

import asyncio
import base64
import logging
from urllib.parse import urlparse
from uuid import UUID

from study_gateway.boundary.gateway.completion_client import CompletionClient
from study_gateway.boundary.storage.object_storage import ObjectStorageClient
from study_gateway.core.exceptions import (
    GenerationError,
    RateLimitError,
    StorageError,
    UnsupportedLinkError,
    ValidationError,
)
from study_gateway.models.media import LinkContent, LinkType

logger = logging.getLogger(__name__)

DEFAULT_LINK_TITLE = "Web Link"
DEFAULT_INLINE_AUDIO_MAX_BYTES = 2 * 1024 * 1024

YOUTUBE_HOSTS = ("youtube.com", "youtu.be")
GOOGLE_DRIVE_HOSTS = (
    "drive.google.com",
    "docs.google.com",
    "sheets.google.com",
    "slides.google.com",
    "forms.google.com",
)

AUDIO_TOO_LARGE_MESSAGE = (
    "Audio file is too large to transcribe. Please record a shorter clip."
)
AUDIO_TIMEOUT_MESSAGE = (
    "Transcription timed out. Please try a shorter recording or try again later."
)


def detect_link_type(url: str) -> LinkType:
    """Classify a URL by host: YouTube, Google Drive family, generic web or unknown.

    Scheme-less input such as "youtube.com/watch?v=..." is matched by host as
    well; only explicit http(s) URLs count as generic web links.
    """
    candidate = url.strip()
    parsed = urlparse(candidate)
    if "://" not in candidate:
        host = (urlparse("https://" + candidate).hostname or "").lower()
    else:
        host = (parsed.hostname or "").lower()

    if any(host == h or host.endswith("." + h) for h in YOUTUBE_HOSTS):
        return LinkType.YOUTUBE
    if host in GOOGLE_DRIVE_HOSTS:
        return LinkType.GOOGLE_DRIVE
    if parsed.scheme in ("http", "https") and host:
        return LinkType.WEB
    return LinkType.UNKNOWN


class MediaService:
    """Transcription and link processing."""

    def __init__(
        self,
        completion_client: CompletionClient,
        storage: ObjectStorageClient | None = None,
        inline_audio_max_bytes: int = DEFAULT_INLINE_AUDIO_MAX_BYTES,
    ) -> None:
        """
        Initialize media service.

        Args:
            completion_client: Shared completion client
            storage: Object storage for large audio (None disables uploads)
            inline_audio_max_bytes: Largest payload sent inline as base64
        """
        self.completion_client = completion_client
        self.storage = storage
        self.inline_audio_max_bytes = inline_audio_max_bytes

    async def transcribe_audio(
        self,
        audio: bytes | None = None,
        mime_type: str = "audio/webm",
        storage_path: str | None = None,
        user_id: UUID | None = None,
    ) -> str:
        """
        Transcribe a recording.

        Flow:
        1. A given storage_path is transcribed directly
        2. Audio above the inline limit is uploaded, transcribed by path,
           then removed from storage
        3. Smaller audio is sent inline as base64

        Args:
            audio: Raw audio bytes
            mime_type: Audio MIME type
            storage_path: Path of audio already in storage
            user_id: Owner folder for uploads (required for large audio)

        Returns:
            str: Transcript

        Raises:
            ValidationError: If no audio is given, or large audio has no owner
            StorageError: If the upload fails
            RateLimitError: If the generation quota is exhausted
            GenerationError: For any other failure
        """
        if storage_path:
            return await self._transcribe(storage_path=storage_path)

        if not audio:
            raise ValidationError("Audio or a storage path is required", field="audio")

        if len(audio) <= self.inline_audio_max_bytes:
            return await self._transcribe(
                audio_base64=base64.b64encode(audio).decode("ascii"),
                mime_type=mime_type,
            )

        if user_id is None:
            raise ValidationError("user_id is required to upload large audio", field="user_id")
        if self.storage is None:
            raise StorageError("Object storage is not configured", operation="upload")

        uploaded_path = await asyncio.to_thread(self.storage.upload_audio, user_id, audio, mime_type)
        try:
            return await self._transcribe(storage_path=uploaded_path)
        finally:
            try:
                await asyncio.to_thread(self.storage.delete, uploaded_path)
            except StorageError as e:
                logger.warning(f"{__name__}:transcribe_audio - cleanup failed: {e.message}")

    async def _transcribe(
        self,
        storage_path: str | None = None,
        audio_base64: str | None = None,
        mime_type: str | None = None,
    ) -> str:
        try:
            result = await self.completion_client.transcribe(
                storage_path=storage_path,
                audio_base64=audio_base64,
                mime_type=mime_type,
            )
            return result.unwrap("transcription").strip()
        except RateLimitError:
            raise
        except Exception as e:
            logger.error(f"{__name__}:_transcribe - {type(e).__name__}: {e}")
            text = str(e).lower()
            if "too large" in text or "413" in text:
                raise GenerationError(
                    "transcription", ValidationError(AUDIO_TOO_LARGE_MESSAGE), action="transcribe audio"
                ) from e
            if "timed out" in text or "timeout" in text:
                raise GenerationError(
                    "transcription", ValidationError(AUDIO_TIMEOUT_MESSAGE), action="transcribe audio"
                ) from e
            raise GenerationError("transcription", e, action="transcribe audio") from e

    async def process_web_link(self, url: str) -> LinkContent:
        """
        Extract the text of a web page or Google Drive document.

        Args:
            url: Link submitted by the user

        Returns:
            LinkContent: Title, extracted text, URL and link type

        Raises:
            ValidationError: If the URL is blank
            UnsupportedLinkError: For YouTube links
            RateLimitError: If the generation quota is exhausted
            GenerationError: For any other failure
        """
        if not url or not url.strip():
            raise ValidationError("URL is required", field="url")

        url = url.strip()
        link_type = detect_link_type(url)
        if link_type == LinkType.YOUTUBE:
            raise UnsupportedLinkError(url, link_type.value)

        logger.info(f"{__name__}:process_web_link - START type={link_type.value}")
        try:
            result, title = await self.completion_client.process_link(url, link_type)
            content = result.unwrap("link processing")
        except RateLimitError:
            raise
        except Exception as e:
            logger.error(f"{__name__}:process_web_link - {type(e).__name__}: {e}")
            raise GenerationError("link processing", e, action="process link") from e

        return LinkContent(
            title=title or DEFAULT_LINK_TITLE,
            content=content,
            url=url,
            link_type=link_type,
        )
