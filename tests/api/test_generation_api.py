"""
Test suite for generation API endpoints.

Tests request validation, response shapes and the mapping of domain errors
to HTTP status codes, with services replaced through dependency overrides.

System role: Verification of generation HTTP API
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from study_gateway.api.deps import (
    get_language_service,
    get_study_content_service,
    get_summary_service,
)
from study_gateway.api.routers.generation import router
from study_gateway.core.exceptions import (
    ACCOUNT_LIMIT_REACHED,
    DAILY_LIMIT_REACHED,
    GenerationError,
    RateLimitError,
    ValidationError,
)
from study_gateway.models.study_content import DetailLevel, Flashcard, QuizQuestion


@pytest.fixture
def mock_summary_service() -> MagicMock:
    service = MagicMock()
    service.generate_summary = AsyncMock(return_value="<h2>Cells</h2>")
    service.edit_summary = AsyncMock(return_value="<h2>Cells, shorter</h2>")
    service.generate_title = AsyncMock(return_value="Cell Division")
    return service


@pytest.fixture
def mock_study_content_service() -> MagicMock:
    service = MagicMock()
    service.generate_flashcards = AsyncMock(
        return_value=[Flashcard(front="What is mitosis?", back="Nuclear division")]
    )
    service.generate_quiz = AsyncMock(
        return_value=[QuizQuestion(question="Q?", options=["a", "b", "c", "d"], correct_answer=1)]
    )
    service.generate_exercises = AsyncMock(return_value=[])
    service.generate_feynman_topics = AsyncMock(return_value=[])
    return service


@pytest.fixture
def mock_language_service() -> MagicMock:
    service = MagicMock()
    service.detect_language = AsyncMock(return_value="fr")
    return service


@pytest.fixture
def client(
    mock_summary_service: MagicMock,
    mock_study_content_service: MagicMock,
    mock_language_service: MagicMock,
) -> TestClient:
    """TestClient for an app with the generation router and mocked services."""
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_summary_service] = lambda: mock_summary_service
    app.dependency_overrides[get_study_content_service] = lambda: mock_study_content_service
    app.dependency_overrides[get_language_service] = lambda: mock_language_service
    return TestClient(app)


class TestGenerationEndpoints:
    """Test suite for successful generation requests."""

    def test_summary_forwards_options(self, client: TestClient, mock_summary_service: MagicMock) -> None:
        # Act
        response = client.post(
            "/generate/summary",
            json={
                "content": "Cells divide.",
                "documents": [{"name": "bio.pdf", "type": "pdf"}],
                "detail_level": "concise",
                "language": "de",
            },
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {"summary": "<h2>Cells</h2>"}
        kwargs = mock_summary_service.generate_summary.await_args.kwargs
        assert kwargs["detail_level"] == DetailLevel.CONCISE
        assert kwargs["language"] == "de"
        assert kwargs["documents"][0].name == "bio.pdf"

    def test_edit_summary(self, client: TestClient) -> None:
        response = client.post(
            "/generate/summary/edit",
            json={"summary": "<h2>Cells</h2>", "instruction": "Shorter"},
        )

        assert response.status_code == 200
        assert response.json()["summary"] == "<h2>Cells, shorter</h2>"

    def test_title(self, client: TestClient) -> None:
        response = client.post("/generate/title", json={"content": "Cells divide."})

        assert response.json() == {"title": "Cell Division"}

    def test_flashcards_forward_count(
        self, client: TestClient, mock_study_content_service: MagicMock
    ) -> None:
        response = client.post("/generate/flashcards", json={"content": "Cells", "count": 5})

        assert response.status_code == 200
        assert response.json()["flashcards"][0]["front"] == "What is mitosis?"
        mock_study_content_service.generate_flashcards.assert_awaited_once_with(
            "Cells", count=5, language="en"
        )

    def test_quiz_response_shape(self, client: TestClient) -> None:
        response = client.post("/generate/quiz", json={"content": "Cells"})

        question = response.json()["questions"][0]
        assert question["correct_answer"] == 1
        assert question["user_answer"] is None

    def test_feynman_topics_may_be_empty(self, client: TestClient) -> None:
        response = client.post("/generate/feynman-topics", json={"content": "Cells"})

        assert response.status_code == 200
        assert response.json() == {"topics": []}

    def test_language(self, client: TestClient) -> None:
        response = client.post("/generate/language", json={"content": "Bonjour"})

        assert response.json() == {"language": "fr"}

    def test_count_above_maximum_is_rejected(self, client: TestClient) -> None:
        response = client.post("/generate/quiz", json={"content": "Cells", "count": 500})

        assert response.status_code == 422


class TestGenerationErrors:
    """Test suite for domain error to HTTP status mapping."""

    def test_daily_rate_limit_returns_429_with_quota(
        self, client: TestClient, mock_summary_service: MagicMock
    ) -> None:
        # Arrange
        reset_at = datetime(2026, 1, 2, 0, 0, tzinfo=timezone.utc)
        mock_summary_service.generate_summary.side_effect = RateLimitError(
            DAILY_LIMIT_REACHED, limit=20, remaining=0, reset_at=reset_at
        )

        # Act
        response = client.post("/generate/summary", json={"content": "Cells"})

        # Assert
        assert response.status_code == 429
        detail = response.json()["detail"]
        assert detail["code"] == DAILY_LIMIT_REACHED
        assert detail["limit"] == 20
        assert detail["remaining"] == 0
        assert detail["reset_at"].startswith("2026-01-02T00:00:00")
        assert "00:00 UTC" in detail["message"]

    def test_account_rate_limit_returns_429(
        self, client: TestClient, mock_study_content_service: MagicMock
    ) -> None:
        mock_study_content_service.generate_flashcards.side_effect = RateLimitError(ACCOUNT_LIMIT_REACHED)

        response = client.post("/generate/flashcards", json={"content": "Cells"})

        assert response.status_code == 429
        assert response.json()["detail"]["code"] == ACCOUNT_LIMIT_REACHED

    def test_validation_error_returns_400(
        self, client: TestClient, mock_summary_service: MagicMock
    ) -> None:
        mock_summary_service.generate_summary.side_effect = ValidationError("Content is required")

        response = client.post("/generate/summary", json={"content": " "})

        assert response.status_code == 400
        assert response.json()["detail"] == "Content is required"

    def test_generation_error_returns_502(
        self, client: TestClient, mock_study_content_service: MagicMock
    ) -> None:
        mock_study_content_service.generate_quiz.side_effect = GenerationError(
            "quiz", ValueError("bad json")
        )

        response = client.post("/generate/quiz", json={"content": "Cells"})

        assert response.status_code == 502
        assert response.json()["detail"] == "Failed to generate quiz: bad json"

    def test_unexpected_error_returns_500(
        self, client: TestClient, mock_language_service: MagicMock
    ) -> None:
        mock_language_service.detect_language.side_effect = RuntimeError("boom")

        response = client.post("/generate/language", json={"content": "Bonjour"})

        assert response.status_code == 500

    def test_missing_content_is_rejected(self, client: TestClient) -> None:
        response = client.post("/generate/summary", json={})

        assert response.status_code == 422
