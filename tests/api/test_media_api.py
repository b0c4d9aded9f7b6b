"""
Test suite for media API endpoints.

System role: Verification of media ingestion HTTP API
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from study_gateway.api.deps import get_media_service
from study_gateway.api.routers.media import router
from study_gateway.core.exceptions import StorageError, UnsupportedLinkError
from study_gateway.models.media import LinkContent, LinkType


@pytest.fixture
def mock_media_service() -> MagicMock:
    service = MagicMock()
    service.transcribe_audio = AsyncMock(return_value="Hello class")
    service.process_web_link = AsyncMock(
        return_value=LinkContent(
            title="Mitosis",
            content="Cell division",
            url="https://example.com/mitosis",
            link_type=LinkType.WEB,
        )
    )
    return service


@pytest.fixture
def client(mock_media_service: MagicMock) -> TestClient:
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_media_service] = lambda: mock_media_service
    return TestClient(app)


class TestMediaEndpoints:
    """Test suite for /media routes."""

    def test_transcribe_upload(self, client: TestClient, mock_media_service: MagicMock) -> None:
        # Act
        response = client.post(
            "/media/transcriptions",
            files={"file": ("clip.m4a", b"audio-bytes", "audio/mp4")},
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {"text": "Hello class", "storage_path": None}
        kwargs = mock_media_service.transcribe_audio.await_args.kwargs
        assert kwargs["audio"] == b"audio-bytes"
        assert kwargs["mime_type"] == "audio/mp4"

    def test_transcribe_storage_path(self, client: TestClient, mock_media_service: MagicMock) -> None:
        response = client.post("/media/transcriptions", data={"storage_path": "u/clip.webm"})

        assert response.json()["storage_path"] == "u/clip.webm"
        assert mock_media_service.transcribe_audio.await_args.kwargs["audio"] is None

    def test_storage_failure_returns_503(
        self, client: TestClient, mock_media_service: MagicMock
    ) -> None:
        mock_media_service.transcribe_audio.side_effect = StorageError("upload failed", operation="upload")

        response = client.post(
            "/media/transcriptions",
            files={"file": ("clip.webm", b"x", "audio/webm")},
        )

        assert response.status_code == 503

    def test_process_link(self, client: TestClient) -> None:
        response = client.post("/media/links", json={"url": "https://example.com/mitosis"})

        assert response.status_code == 200
        assert response.json()["link_type"] == "web"

    def test_youtube_link_returns_400(
        self, client: TestClient, mock_media_service: MagicMock
    ) -> None:
        mock_media_service.process_web_link.side_effect = UnsupportedLinkError(
            "https://youtu.be/x", "youtube"
        )

        response = client.post("/media/links", json={"url": "https://youtu.be/x"})

        assert response.status_code == 400
        assert "YouTube" in response.json()["detail"]
