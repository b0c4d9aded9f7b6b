"""
Shared settings plumbing for the gateway.

Every config module reads the same .env file; they differ only in the
variable prefix (POSTGRES_, GATEWAY_, GENERATION_, ...). env_settings_config
builds that per-module SettingsConfigDict so the loading rules live in one place.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from typing import Any

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


def env_settings_config(prefix: str = "", **overrides: Any) -> SettingsConfigDict:
    """
    Build the settings config for one module.

    Args:
        prefix: Environment variable prefix, e.g. "STORAGE_"
        **overrides: Extra SettingsConfigDict keys (env_nested_delimiter, ...)

    Returns:
        SettingsConfigDict: .env loading, case-insensitive, unknown keys ignored
    """
    config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix=prefix,
        case_sensitive=False,
        extra="ignore",
    )
    config.update(overrides)
    return config


class BaseSettings(PydanticBaseSettings):
    """Base class for gateway settings; unprefixed unless a subclass says otherwise."""

    model_config = env_settings_config()
