"""
Generation configuration.

Single home for every word budget, length base and temperature used while
building prompts, one profile per detail level.

Dependencies: pydantic, pydantic_settings
System role: Tunables for summary chunking and structured generators
"""

from pydantic import BaseModel, Field

from study_gateway.configs.base import BaseSettings, env_settings_config


class DetailLevelProfile(BaseModel):
    """Budgets applied for one detail level."""

    base_min_words: int = Field(default=2000, ge=1)
    base_max_words: int = Field(default=4000, ge=1)
    chunk_words: int = Field(ge=1, description="Word budget per completion call")
    truncate_words: int | None = Field(
        default=None,
        description="Pre-chunk truncation budget (None processes the full input)",
    )


class GenerationSettings(BaseSettings):
    """Budgets, counts and temperatures for generation calls."""

    model_config = env_settings_config("GENERATION_", env_nested_delimiter="__")

    concise: DetailLevelProfile = DetailLevelProfile(chunk_words=900, truncate_words=1800)
    standard: DetailLevelProfile = DetailLevelProfile(chunk_words=1300, truncate_words=2600)
    comprehensive: DetailLevelProfile = DetailLevelProfile(chunk_words=8000, truncate_words=None)

    # Length target estimation
    chars_per_word: int = Field(default=5, description="Characters per estimated word")
    words_per_slide: int = Field(default=500, description="Words per estimated slide")
    slides_per_base: int = Field(default=10, description="Slides covered by the base bounds")
    min_words_floor: int = Field(default=500)
    max_words_floor: int = Field(default=1000)
    merge_length_factor: float = Field(
        default=2.5,
        description="Partial summaries are roughly this much shorter than their source",
    )

    # Default item counts
    flashcard_count: int = Field(default=20, ge=1)
    quiz_count: int = Field(default=15, ge=1)
    exercise_count: int = Field(default=10, ge=1)
    feynman_count: int = Field(default=4, ge=1)

    # Input budgets (words)
    flashcard_input_words: int = Field(default=1500)
    quiz_input_words: int = Field(default=1500)
    exercise_input_words: int = Field(default=2000)
    feynman_input_words: int = Field(default=1000)
    title_input_words: int = Field(default=1000)
    chat_context_words: int = Field(default=1000)
    language_sample_chars: int = Field(default=1000)

    # Temperatures
    generator_temperature: float = Field(default=0.7, ge=0.0, le=1.0)
    summary_temperature: float = Field(default=0.7, ge=0.0, le=1.0)
    merge_temperature: float = Field(default=0.5, ge=0.0, le=1.0)
    edit_temperature: float = Field(default=0.5, ge=0.0, le=1.0)
    title_temperature: float = Field(default=0.3, ge=0.0, le=1.0)
    language_temperature: float = Field(default=0.1, ge=0.0, le=1.0)
    chat_temperature: float = Field(default=0.7, ge=0.0, le=1.0)

    # Background generation
    min_background_chars: int = Field(
        default=50,
        description="Notes shorter than this are not worth generating study content for",
    )

    def profile_for(self, detail_level: str) -> DetailLevelProfile:
        """
        Look up the profile for a detail level.

        Args:
            detail_level: concise, standard or comprehensive

        Returns:
            DetailLevelProfile: Budgets for that level

        Raises:
            ValueError: If the detail level is unknown
        """
        name = getattr(detail_level, "value", detail_level)
        profile = getattr(self, name, None)
        if not isinstance(profile, DetailLevelProfile):
            raise ValueError(f"Unknown detail level: {detail_level}")
        return profile
