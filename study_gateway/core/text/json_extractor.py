"""
JSON extraction from free-form model output.

Models wrap structured answers in prose ("Here is the JSON you requested:")
or in code fences. extract_json locates the JSON payload without ever
accepting invalid JSON as valid; callers still probe the result with
is_valid_json and report a preview when it fails.

Input that is already valid JSON is returned as-is, so an object containing
arrays is never narrowed to its first inner array. Otherwise, in order:
1. A fenced ```json / ``` block whose body parses.
2. The first balanced [...] span that parses.
3. The first balanced {...} span that parses.
4. The trimmed text unchanged.

Dependencies: json, re (stdlib)
System role: Structured output recovery for the content generators
"""

import json
import re

_FENCED_JSON = re.compile(r"```(?:json)?\s*([\s\S]*?)```", re.IGNORECASE)


def is_valid_json(text: str) -> bool:
    """Return True if text parses as JSON."""
    try:
        json.loads(text)
    except (TypeError, ValueError):
        return False
    return True


def find_balanced_span(text: str, open_char: str, close_char: str) -> str | None:
    """
    Return the substring from the first open_char to its matching close_char.

    Brackets inside string literals are ignored. A backslash skips the next
    character, so escaped quotes do not end a string.

    Args:
        text: Text to scan
        open_char: "[" or "{"
        close_char: "]" or "}"

    Returns:
        str | None: Balanced span, or None if there is no opener or it never closes
    """
    start = text.find(open_char)
    if start == -1:
        return None

    depth = 0
    in_string = False
    escape_next = False

    for index in range(start, len(text)):
        char = text[index]

        if escape_next:
            escape_next = False
            continue
        if char == "\\":
            escape_next = True
            continue
        if char == '"':
            in_string = not in_string
            continue
        if in_string:
            continue

        if char == open_char:
            depth += 1
        elif char == close_char:
            depth -= 1
            if depth == 0:
                return text[start:index + 1]

    return None


def extract_json(raw_text: str | None) -> str:
    """
    Best-effort extraction of a JSON array or object from model output.

    Never raises; validity is checked separately by the caller.

    Args:
        raw_text: Model output

    Returns:
        str: Extracted JSON text, or the trimmed input when nothing parses
    """
    trimmed = (raw_text or "").strip()
    if not trimmed:
        return trimmed

    if is_valid_json(trimmed):
        return trimmed

    fenced = _FENCED_JSON.search(trimmed)
    if fenced:
        candidate = fenced.group(1).strip()
        if is_valid_json(candidate):
            return candidate

    for open_char, close_char in (("[", "]"), ("{", "}")):
        candidate = find_balanced_span(trimmed, open_char, close_char)
        if candidate is not None and is_valid_json(candidate):
            return candidate

    return trimmed
