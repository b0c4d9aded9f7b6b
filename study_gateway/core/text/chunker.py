"""
Word-bounded chunking and truncation.

Splits long note content into segments that fit a single completion call and
trims generator input to a word budget. Splitting happens only on whitespace,
so a chunk never ends mid-word.

Dependencies: re (stdlib)
System role: Input sizing for the summary orchestrator and generators
"""

import re

TRUNCATION_MARKER = "[truncated]"

_DOCUMENT_HEADER = re.compile(r"^---\s*Document:\s*(.+?)\s*---$", re.IGNORECASE)
_FILE_HEADER = re.compile(r"^File:\s*(.+)$", re.IGNORECASE)


def count_words(text: str) -> int:
    """Number of whitespace-separated words in text."""
    return len(text.split())


def split_into_chunks(text: str, max_words: int) -> list[str]:
    """
    Split text into consecutive groups of at most max_words words.

    Text that already fits is returned unchanged as a single chunk, keeping
    its original whitespace. Longer text is re-joined with single spaces.

    Args:
        text: Source text
        max_words: Word budget per chunk

    Returns:
        list[str]: Chunks in source order

    Raises:
        ValueError: If max_words is not positive
    """
    if max_words <= 0:
        raise ValueError(f"max_words must be positive, got {max_words}")

    words = text.split()
    if len(words) <= max_words:
        return [text]

    return [
        " ".join(words[start:start + max_words])
        for start in range(0, len(words), max_words)
    ]


def truncate_words(text: str, max_words: int, marker: str = "...") -> str:
    """
    Keep the first max_words words of text.

    Args:
        text: Source text
        max_words: Word budget
        marker: Appended when words were dropped

    Returns:
        str: Original text if it fits, otherwise the leading words plus marker
    """
    words = text.split()
    if len(words) <= max_words:
        return text
    return " ".join(words[:max_words]) + marker


def _split_sections(content: str) -> list[tuple[str | None, str]]:
    sections: list[tuple[str | None, str]] = []
    title: str | None = None
    buffer: list[str] = []

    def flush() -> None:
        text = "\n".join(buffer).strip()
        if text:
            sections.append((title, text))
        buffer.clear()

    for raw_line in re.split(r"\n+", content):
        line = raw_line.strip()
        header = _DOCUMENT_HEADER.match(line) or _FILE_HEADER.match(line)
        if header:
            flush()
            title = f"Document: {header.group(1)}"
            continue
        buffer.append(raw_line)
    flush()
    return sections


def _truncate_marked(text: str, max_words: int) -> str:
    # Marker counts as one word of the allowance
    if count_words(text) <= max_words:
        return text
    return truncate_words(text, max(max_words - 1, 0), marker=f"\n{TRUNCATION_MARKER}")


def build_balanced_context(content: str, max_words: int) -> str:
    """
    Truncate multi-document content so every document keeps a fair share.

    Sections start at "--- Document: name ---" or "File: name" header lines.
    Each section is emitted under a "Document: name" label. The budget left
    after the labels is split evenly across sections; the remainder goes one
    word at a time to the first sections. Content without any header is
    simply truncated to its first words.

    The result never holds more than max_words words, truncation markers
    and labels included (unless there are more sections than budget).

    Args:
        content: Concatenated note and document text
        max_words: Total word budget

    Returns:
        str: Balanced, possibly truncated content
    """
    sections = _split_sections(content or "")
    if not sections:
        return content or ""

    if len(sections) == 1 and sections[0][0] is None:
        return _truncate_marked(content, max_words)

    labels = [title or "Document" for title, _ in sections]
    available = max(max_words - sum(count_words(label) for label in labels), len(sections))
    per_section = available // len(sections)
    remainder = available - per_section * len(sections)

    parts = []
    for label, (_, text) in zip(labels, sections):
        allocation = per_section
        if remainder > 0:
            allocation += 1
            remainder -= 1
        picked = _truncate_marked(text, allocation)
        parts.append(f"{label}\n{picked.strip()}".strip())

    return "\n\n".join(parts)
