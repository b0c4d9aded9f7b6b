"""
Length-target estimation.

Scales the requested output length with input size instead of a fixed
constant per detail level. Input words are estimated from characters, words
are grouped into "slides", and the profile's base bounds (sized for ten
slides) are scaled by slides / 10, with floors on both bounds.

Dependencies: pydantic, study_gateway.configs
System role: Word-count ranges embedded in summary prompts
"""

import math

from pydantic import BaseModel

from study_gateway.configs.generation import DetailLevelProfile, GenerationSettings


class LengthTarget(BaseModel):
    """Target word range for one completion."""

    min_words: int
    max_words: int
    estimated_slides: int
    multiplier: float

    @property
    def label(self) -> str:
        return f"{self.min_words}-{self.max_words}"


def estimate_length_target(
    char_count: float,
    profile: DetailLevelProfile,
    settings: GenerationSettings,
) -> LengthTarget:
    """
    Compute the target word range for content of a given size.

    Non-decreasing in char_count for a fixed profile.

    Args:
        char_count: Characters of source content (may be an estimate)
        profile: Detail level budgets providing the base bounds
        settings: Generation settings providing the estimation constants

    Returns:
        LengthTarget: Word range plus the slide estimate behind it
    """
    estimated_words = max(char_count, 0) / settings.chars_per_word
    estimated_slides = math.ceil(estimated_words / settings.words_per_slide)
    multiplier = estimated_slides / settings.slides_per_base

    min_words = max(round(profile.base_min_words * multiplier), settings.min_words_floor)
    max_words = max(round(profile.base_max_words * multiplier), settings.max_words_floor)

    return LengthTarget(
        min_words=min_words,
        max_words=max_words,
        estimated_slides=estimated_slides,
        multiplier=multiplier,
    )
