"""
Prompt builders.

ChatPromptTemplate constants per content type, the language lookup table and
length-target estimation.
"""

from study_gateway.core.prompts.languages import get_language_name, language_instruction
from study_gateway.core.prompts.length_targets import LengthTarget, estimate_length_target
from study_gateway.core.prompts.renderer import render_messages

__all__ = [
    "LengthTarget",
    "estimate_length_target",
    "get_language_name",
    "language_instruction",
    "render_messages",
]
