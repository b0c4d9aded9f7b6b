"""
Structured output parsing.

Turns a structured-content completion into a list of JSON records: refusal
check first, then extraction, a parse probe, and coercion to a list.

Dependencies: json (stdlib), study_gateway.core
System role: Shared parsing step of the structured-content generators
"""

import json
from typing import Any

from study_gateway.core.exceptions import MalformedStructuredOutputError, RefusalDetectedError
from study_gateway.core.text.json_extractor import extract_json
from study_gateway.core.text.refusal import looks_like_refusal


def _as_records(parsed: Any, raw_text: str) -> list[Any]:
    if isinstance(parsed, list):
        return parsed
    if isinstance(parsed, dict):
        # {"flashcards": [...]} style wrapper: a single key holding a list of objects
        if len(parsed) == 1:
            (value,) = parsed.values()
            if isinstance(value, list) and value and all(isinstance(v, dict) for v in value):
                return value
        return [parsed]
    raise MalformedStructuredOutputError(raw_text, reason="expected a JSON array or object")


def parse_json_items(raw_text: str) -> list[Any]:
    """
    Parse a model response that should contain a JSON array of items.

    Args:
        raw_text: Model output

    Returns:
        list: Decoded records in response order

    Raises:
        RefusalDetectedError: If the response reads like an apology or refusal
        MalformedStructuredOutputError: If no parseable JSON array or object is found
    """
    if looks_like_refusal(raw_text):
        raise RefusalDetectedError(raw_text)

    candidate = extract_json(raw_text)
    try:
        parsed = json.loads(candidate)
    except ValueError as e:
        raise MalformedStructuredOutputError(candidate, reason=str(e)) from e

    return _as_records(parsed, candidate)
