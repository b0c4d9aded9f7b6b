"""
Test suite for the refusal heuristic and structured output parsing.

System role: Verification of the generators' shared parsing step
"""

from unittest.mock import patch

import pytest

from study_gateway.core.exceptions import MalformedStructuredOutputError, RefusalDetectedError
from study_gateway.core.text.refusal import looks_like_refusal
from study_gateway.core.text.structured_output import parse_json_items


class TestLooksLikeRefusal:
    """Test suite for looks_like_refusal."""

    @pytest.mark.parametrize(
        "text",
        [
            "I cannot access external files.",
            "I can't help with that.",
            "Unable to generate flashcards from this content.",
            "Since I am unable to open the document, here is nothing.",
            "Sorry, I cannot do that.",
            "An error occurred while generating.",
            "The model is unable to access the link.",
        ],
    )
    def test_should_flag_refusals(self, text: str) -> None:
        assert looks_like_refusal(text) is True

    @pytest.mark.parametrize(
        "text",
        [
            '[{"front": "What is an error?", "back": "A mistake"}]',
            '{"questions": []}',
            "",
            None,
        ],
    )
    def test_should_not_flag_data(self, text) -> None:
        assert looks_like_refusal(text) is False


class TestParseJsonItems:
    """Test suite for parse_json_items."""

    def test_refusal_should_fail_before_extraction(self) -> None:
        """Extraction is never attempted for refusal text."""
        # Arrange
        raw = "I cannot access external files."

        # Act / Assert
        with patch("study_gateway.core.text.structured_output.extract_json") as mock_extract:
            with pytest.raises(RefusalDetectedError):
                parse_json_items(raw)

        mock_extract.assert_not_called()

    def test_should_parse_array_wrapped_in_prose(self) -> None:
        raw = 'Here you go:\n```json\n[{"front": "a", "back": "b"}]\n```'

        assert parse_json_items(raw) == [{"front": "a", "back": "b"}]

    def test_should_unwrap_object_holding_a_list(self) -> None:
        raw = '{"flashcards": [{"front": "a", "back": "b"}]}'

        assert parse_json_items(raw) == [{"front": "a", "back": "b"}]

    def test_single_object_becomes_one_record(self) -> None:
        assert parse_json_items('{"title": "Entropy"}') == [{"title": "Entropy"}]

    def test_single_object_with_list_field_stays_one_record(self) -> None:
        raw = '{"question": "Q?", "options": ["a", "b", "c", "d"], "correctAnswer": 1}'

        assert parse_json_items(raw) == [
            {"question": "Q?", "options": ["a", "b", "c", "d"], "correctAnswer": 1}
        ]

    def test_single_key_holding_strings_is_not_unwrapped(self) -> None:
        assert parse_json_items('{"options": ["a", "b"]}') == [{"options": ["a", "b"]}]

    def test_malformed_output_should_carry_bounded_preview(self) -> None:
        # Arrange
        raw = "[" + "x" * 500

        # Act
        with pytest.raises(MalformedStructuredOutputError) as exc_info:
            parse_json_items(raw)

        # Assert
        assert len(exc_info.value.preview) <= 200
        assert "invalid JSON" in exc_info.value.message

    def test_scalar_json_is_malformed(self) -> None:
        with pytest.raises(MalformedStructuredOutputError):
            parse_json_items('"just a string"')
