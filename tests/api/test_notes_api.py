"""
Test suite for note study-content API endpoints.

System role: Verification of note study-content HTTP API
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from study_gateway.api.deps import get_note_generation_service
from study_gateway.api.routers.notes import router
from study_gateway.core.exceptions import NotFoundError
from study_gateway.models.notes import GenerationReport
from study_gateway.models.study_content import QuizQuestion, StudyContent


@pytest.fixture
def mock_note_service() -> MagicMock:
    service = MagicMock()
    service.get_study_content = AsyncMock(return_value=StudyContent(summary="<p>S</p>"))
    service.generate_all = AsyncMock(side_effect=lambda note_id, *_: GenerationReport(note_id=note_id))
    service.record_quiz_answer = AsyncMock(
        return_value=QuizQuestion(
            question="Q?", options=["a", "b", "c", "d"], correct_answer=2, user_answer=2
        )
    )
    return service


@pytest.fixture
def client(mock_note_service: MagicMock) -> TestClient:
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_note_generation_service] = lambda: mock_note_service
    return TestClient(app)


class TestNotesEndpoints:
    """Test suite for /notes routes."""

    def test_get_study_content(self, client: TestClient) -> None:
        note_id = uuid.uuid4()

        response = client.get(f"/notes/{note_id}/study-content")

        assert response.status_code == 200
        body = response.json()
        assert body["note_id"] == str(note_id)
        assert body["summary"] == "<p>S</p>"
        assert body["flashcards"] == []

    def test_generate_runs_in_background(
        self, client: TestClient, mock_note_service: MagicMock
    ) -> None:
        # Arrange
        note_id = uuid.uuid4()

        # Act
        response = client.post(
            f"/notes/{note_id}/study-content/generate",
            json={"content": "Mitosis is cell division."},
        )

        # Assert
        assert response.status_code == 202
        assert response.json() == {"note_id": str(note_id), "status": "accepted"}
        mock_note_service.generate_all.assert_awaited_once_with(
            note_id, "Mitosis is cell division.", []
        )

    def test_answer_quiz_question(self, client: TestClient, mock_note_service: MagicMock) -> None:
        note_id = uuid.uuid4()

        response = client.put(f"/notes/{note_id}/quiz/0/answer", json={"answer": 2})

        assert response.status_code == 200
        assert response.json() == {
            "index": 0,
            "user_answer": 2,
            "correct_answer": 2,
            "is_correct": True,
        }
        mock_note_service.record_quiz_answer.assert_awaited_once_with(note_id, 0, 2)

    def test_answer_out_of_range_is_rejected(self, client: TestClient) -> None:
        response = client.put(f"/notes/{uuid.uuid4()}/quiz/0/answer", json={"answer": 7})

        assert response.status_code == 422

    def test_unknown_question_returns_404(
        self, client: TestClient, mock_note_service: MagicMock
    ) -> None:
        mock_note_service.record_quiz_answer.side_effect = NotFoundError("Quiz question", "x/9")

        response = client.put(f"/notes/{uuid.uuid4()}/quiz/9/answer", json={"answer": 1})

        assert response.status_code == 404
