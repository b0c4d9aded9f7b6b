"""
Response sanitizer for free-form model output.

Strips the wrapping a model adds around HTML or plain-text answers: one layer
of code fencing, one layer of quoting, and stray quotes just inside paragraph
tags. A best-effort artifact cleanup, not an HTML sanitizer.

Dependencies: re (stdlib)
System role: Post-processing of summary and title completions
"""

import re

DEFAULT_TITLE = "New Note"
MAX_TITLE_CHARS = 35
MAX_TITLE_WORDS = 4

_FENCED_BLOCK = re.compile(
    r"^```(?:html|[\w+-]*(?=\n))?\s*([\s\S]*?)\s*```$",
    re.IGNORECASE,
)
_QUOTE_AFTER_OPEN_P = re.compile(r"<p>\s*[\"']")
_QUOTE_BEFORE_CLOSE_P = re.compile(r"[\"']\s*</p>")
_EDGE_BACKTICKS = re.compile(r"^`+|`+$")
_TRAILING_PUNCTUATION = re.compile(r"[.!?\s]+$")


def _strip_wrapping_quotes(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] and text[0] in ('"', "'"):
        return text[1:-1].strip()
    return text


def sanitize_html_output(raw_text: str | None) -> str:
    """
    Remove fencing and quoting artifacts from an HTML completion.

    Args:
        raw_text: Model output

    Returns:
        str: Cleaned text
    """
    text = (raw_text or "").strip()

    fenced = _FENCED_BLOCK.match(text)
    if fenced:
        text = fenced.group(1).strip()

    text = _strip_wrapping_quotes(text)

    text = _QUOTE_AFTER_OPEN_P.sub("<p>", text)
    text = _QUOTE_BEFORE_CLOSE_P.sub("</p>", text)
    return text


def clean_title(raw_title: str | None) -> str:
    """
    Normalize a generated title for a navigation bar.

    Strips quotes and backticks, keeps at most 35 characters without cutting
    a word in half, at most 4 words, and drops trailing punctuation.

    Args:
        raw_title: Model output

    Returns:
        str: Title, or "New Note" when nothing usable is left
    """
    title = _strip_wrapping_quotes((raw_title or "").strip())
    title = _EDGE_BACKTICKS.sub("", title).strip()

    if len(title) > MAX_TITLE_CHARS:
        title = title[:MAX_TITLE_CHARS].strip()
        words = title.split()
        if len(words) > 1:
            # last word may be cut off
            title = " ".join(words[:-1])

    words = title.split()
    if len(words) > MAX_TITLE_WORDS:
        title = " ".join(words[:MAX_TITLE_WORDS])

    title = _TRAILING_PUNCTUATION.sub("", title)
    return title or DEFAULT_TITLE
