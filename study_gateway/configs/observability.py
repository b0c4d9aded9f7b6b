"""
Observability configuration.

Dependencies: pydantic_settings
System role: Logging configuration
"""

from pydantic import Field

from study_gateway.configs.base import BaseSettings, env_settings_config


class ObservabilitySettings(BaseSettings):
    """Logging settings."""

    model_config = env_settings_config("LOG_")

    level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
