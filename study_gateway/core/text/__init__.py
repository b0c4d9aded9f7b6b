"""
Text utilities: chunking, truncation, sanitizing and JSON extraction.

Pure functions, no I/O.
"""

from study_gateway.core.text.chunker import (
    build_balanced_context,
    count_words,
    split_into_chunks,
    truncate_words,
)
from study_gateway.core.text.json_extractor import extract_json, is_valid_json
from study_gateway.core.text.refusal import looks_like_refusal
from study_gateway.core.text.sanitizer import clean_title, sanitize_html_output
from study_gateway.core.text.structured_output import parse_json_items

__all__ = [
    "build_balanced_context",
    "clean_title",
    "count_words",
    "extract_json",
    "is_valid_json",
    "looks_like_refusal",
    "parse_json_items",
    "sanitize_html_output",
    "split_into_chunks",
    "truncate_words",
]
