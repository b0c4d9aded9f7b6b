"""
Language lookup for prompts.

Maps ISO 639-1 codes to the language names used in prompt instructions.

Dependencies: None
System role: Keeps generated content in the language of the source
"""

DEFAULT_LANGUAGE = "en"

LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "de": "German",
    "fr": "French",
    "es": "Spanish",
    "it": "Italian",
    "pt": "Portuguese",
    "nl": "Dutch",
    "ru": "Russian",
    "zh": "Chinese",
    "ja": "Japanese",
    "ko": "Korean",
}


def get_language_name(code: str | None) -> str:
    """Language name for an ISO code; English for unknown codes."""
    return LANGUAGE_NAMES.get((code or DEFAULT_LANGUAGE).lower(), "English")


def language_instruction(code: str | None, subject: str = "your response") -> str:
    """
    Instruction keeping output in the source language.

    Args:
        code: ISO 639-1 code of the content
        subject: What is being generated, e.g. "the flashcards"

    Returns:
        str: Empty for English, otherwise a paragraph to append to a prompt
    """
    if not code or code.lower() == DEFAULT_LANGUAGE:
        return ""
    name = get_language_name(code)
    return (
        f"\n\nIMPORTANT: The content is in {name}. You MUST generate {subject} in the "
        f"SAME language ({name}). Do NOT translate to English - keep the same "
        "language as the input."
    )
