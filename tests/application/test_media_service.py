"""
Test suite for MediaService.

Tests link classification, inline versus uploaded transcription, storage
cleanup and link processing with mocked completion client and storage.

System role: Verification of media ingestion layer
"""

import base64
import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest

from study_gateway.application.services.media_service import (
    AUDIO_TOO_LARGE_MESSAGE,
    DEFAULT_LINK_TITLE,
    MediaService,
    detect_link_type,
)
from study_gateway.core.exceptions import (
    GenerationError,
    RateLimitError,
    StorageError,
    UnsupportedLinkError,
    ValidationError,
)
from study_gateway.models.completion import (
    CompletionFailure,
    CompletionSuccess,
    FailureKind,
)
from study_gateway.models.media import LinkType


@pytest.fixture
def mock_storage() -> MagicMock:
    storage = MagicMock()
    storage.upload_audio.return_value = "user/recording.webm"
    return storage


@pytest.fixture
def media_service(mock_completion_client: AsyncMock, mock_storage: MagicMock) -> MediaService:
    return MediaService(mock_completion_client, storage=mock_storage, inline_audio_max_bytes=16)


class TestDetectLinkType:
    """Test suite for detect_link_type."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://www.youtube.com/watch?v=abc", LinkType.YOUTUBE),
            ("https://youtu.be/abc", LinkType.YOUTUBE),
            ("https://m.youtube.com/watch?v=abc", LinkType.YOUTUBE),
            ("youtube.com/watch?v=abc", LinkType.YOUTUBE),
            ("www.youtu.be/abc", LinkType.YOUTUBE),
            ("drive.google.com/file/d/123/view", LinkType.GOOGLE_DRIVE),
            ("example.com/page", LinkType.UNKNOWN),
            ("https://drive.google.com/file/d/123/view", LinkType.GOOGLE_DRIVE),
            ("https://docs.google.com/document/d/123/edit", LinkType.GOOGLE_DRIVE),
            ("https://en.wikipedia.org/wiki/Mitosis", LinkType.WEB),
            ("http://example.com", LinkType.WEB),
            ("ftp://example.com/file", LinkType.UNKNOWN),
            ("not a url", LinkType.UNKNOWN),
        ],
    )
    def test_classification(self, url: str, expected: LinkType) -> None:
        assert detect_link_type(url) == expected

    def test_lookalike_host_is_not_youtube(self) -> None:
        assert detect_link_type("https://notyoutube.com/watch") == LinkType.WEB


class TestTranscribeAudio:
    """Test suite for MediaService.transcribe_audio."""

    @pytest.mark.asyncio
    async def test_small_audio_is_sent_inline(
        self,
        media_service: MediaService,
        mock_completion_client: AsyncMock,
        mock_storage: MagicMock,
    ) -> None:
        # Arrange
        mock_completion_client.transcribe.return_value = CompletionSuccess(content=" Hello class ")

        # Act
        text = await media_service.transcribe_audio(b"tiny", mime_type="audio/mp4")

        # Assert
        assert text == "Hello class"
        mock_completion_client.transcribe.assert_awaited_once_with(
            storage_path=None,
            audio_base64=base64.b64encode(b"tiny").decode("ascii"),
            mime_type="audio/mp4",
        )
        mock_storage.upload_audio.assert_not_called()

    @pytest.mark.asyncio
    async def test_large_audio_is_uploaded_then_deleted(
        self,
        media_service: MediaService,
        mock_completion_client: AsyncMock,
        mock_storage: MagicMock,
    ) -> None:
        # Arrange
        user_id = uuid.uuid4()
        audio = b"x" * 64
        mock_completion_client.transcribe.return_value = CompletionSuccess(content="Long lecture")

        # Act
        text = await media_service.transcribe_audio(audio, user_id=user_id)

        # Assert
        assert text == "Long lecture"
        mock_storage.upload_audio.assert_called_once_with(user_id, audio, "audio/webm")
        mock_completion_client.transcribe.assert_awaited_once_with(
            storage_path="user/recording.webm", audio_base64=None, mime_type=None
        )
        mock_storage.delete.assert_called_once_with("user/recording.webm")

    @pytest.mark.asyncio
    async def test_uploaded_audio_is_deleted_when_transcription_fails(
        self,
        media_service: MediaService,
        mock_completion_client: AsyncMock,
        mock_storage: MagicMock,
        transport_failure_result: CompletionFailure,
    ) -> None:
        mock_completion_client.transcribe.return_value = transport_failure_result

        with pytest.raises(GenerationError):
            await media_service.transcribe_audio(b"x" * 64, user_id=uuid.uuid4())

        mock_storage.delete.assert_called_once_with("user/recording.webm")

    @pytest.mark.asyncio
    async def test_cleanup_failure_does_not_hide_transcript(
        self,
        media_service: MediaService,
        mock_completion_client: AsyncMock,
        mock_storage: MagicMock,
    ) -> None:
        mock_completion_client.transcribe.return_value = CompletionSuccess(content="Transcript")
        mock_storage.delete.side_effect = StorageError("boom", operation="delete")

        assert await media_service.transcribe_audio(b"x" * 64, user_id=uuid.uuid4()) == "Transcript"

    @pytest.mark.asyncio
    async def test_existing_storage_path_skips_upload(
        self,
        media_service: MediaService,
        mock_completion_client: AsyncMock,
        mock_storage: MagicMock,
    ) -> None:
        mock_completion_client.transcribe.return_value = CompletionSuccess(content="From storage")

        text = await media_service.transcribe_audio(storage_path="user/existing.webm")

        assert text == "From storage"
        mock_storage.upload_audio.assert_not_called()
        mock_storage.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_large_audio_without_user_raises(self, media_service: MediaService) -> None:
        with pytest.raises(ValidationError):
            await media_service.transcribe_audio(b"x" * 64)

    @pytest.mark.asyncio
    async def test_large_audio_without_storage_raises(self, mock_completion_client: AsyncMock) -> None:
        service = MediaService(mock_completion_client, storage=None, inline_audio_max_bytes=16)

        with pytest.raises(StorageError):
            await service.transcribe_audio(b"x" * 64, user_id=uuid.uuid4())

    @pytest.mark.asyncio
    async def test_missing_audio_raises(self, media_service: MediaService) -> None:
        with pytest.raises(ValidationError):
            await media_service.transcribe_audio()

    @pytest.mark.asyncio
    async def test_payload_too_large_gets_friendly_message(
        self, media_service: MediaService, mock_completion_client: AsyncMock
    ) -> None:
        mock_completion_client.transcribe.return_value = CompletionFailure(
            kind=FailureKind.TRANSPORT, message="Payload too large", status_code=413
        )

        with pytest.raises(GenerationError) as exc_info:
            await media_service.transcribe_audio(b"tiny")

        assert AUDIO_TOO_LARGE_MESSAGE in exc_info.value.message

    @pytest.mark.asyncio
    async def test_rate_limit_propagates(
        self,
        media_service: MediaService,
        mock_completion_client: AsyncMock,
        rate_limited_result: CompletionFailure,
    ) -> None:
        mock_completion_client.transcribe.return_value = rate_limited_result

        with pytest.raises(RateLimitError):
            await media_service.transcribe_audio(b"tiny")


class TestProcessWebLink:
    """Test suite for MediaService.process_web_link."""

    @pytest.mark.asyncio
    async def test_web_link_returns_content(
        self, media_service: MediaService, mock_completion_client: AsyncMock
    ) -> None:
        # Arrange
        mock_completion_client.process_link.return_value = (
            CompletionSuccess(content="Mitosis is cell division."),
            "Mitosis - Wikipedia",
        )

        # Act
        link = await media_service.process_web_link(" https://en.wikipedia.org/wiki/Mitosis ")

        # Assert
        assert link.title == "Mitosis - Wikipedia"
        assert link.content == "Mitosis is cell division."
        assert link.url == "https://en.wikipedia.org/wiki/Mitosis"
        assert link.link_type == LinkType.WEB
        mock_completion_client.process_link.assert_awaited_once_with(
            "https://en.wikipedia.org/wiki/Mitosis", LinkType.WEB
        )

    @pytest.mark.asyncio
    async def test_missing_title_uses_default(
        self, media_service: MediaService, mock_completion_client: AsyncMock
    ) -> None:
        mock_completion_client.process_link.return_value = (CompletionSuccess(content="Text"), None)

        link = await media_service.process_web_link("https://drive.google.com/file/d/1/view")

        assert link.title == DEFAULT_LINK_TITLE
        assert link.link_type == LinkType.GOOGLE_DRIVE

    @pytest.mark.asyncio
    async def test_youtube_is_rejected_without_a_call(
        self, media_service: MediaService, mock_completion_client: AsyncMock
    ) -> None:
        with pytest.raises(UnsupportedLinkError):
            await media_service.process_web_link("https://youtu.be/abc")

        mock_completion_client.process_link.assert_not_called()

    @pytest.mark.asyncio
    async def test_scheme_less_youtube_is_rejected_without_a_call(
        self, media_service: MediaService, mock_completion_client: AsyncMock
    ) -> None:
        with pytest.raises(UnsupportedLinkError):
            await media_service.process_web_link("youtube.com/watch?v=abc")

        mock_completion_client.process_link.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_url_raises(self, media_service: MediaService) -> None:
        with pytest.raises(ValidationError):
            await media_service.process_web_link("   ")

    @pytest.mark.asyncio
    async def test_failure_is_wrapped(
        self,
        media_service: MediaService,
        mock_completion_client: AsyncMock,
        transport_failure_result: CompletionFailure,
    ) -> None:
        mock_completion_client.process_link.return_value = (transport_failure_result, None)

        with pytest.raises(GenerationError) as exc_info:
            await media_service.process_web_link("https://example.com/article")

        assert exc_info.value.message == "Failed to process link: Connection reset"
