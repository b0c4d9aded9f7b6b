"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field

from study_gateway.configs.base import BaseSettings
from study_gateway.configs.database import DatabaseSettings
from study_gateway.configs.gateway import GatewaySettings
from study_gateway.configs.generation import GenerationSettings
from study_gateway.configs.observability import ObservabilitySettings
from study_gateway.configs.storage import StorageSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment, read from ENVIRONMENT",
    )

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    gateway: GatewaySettings = GatewaySettings()
    generation: GenerationSettings = GenerationSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
    storage: StorageSettings = StorageSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from study_gateway.configs import get_settings
        settings = get_settings()
    """
    return Settings()
