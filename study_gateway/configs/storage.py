"""
Object storage configuration.

Settings for the S3-compatible bucket that receives large audio uploads
before transcription.

Dependencies: pydantic_settings
System role: Object storage bucket configuration
"""

from pydantic import Field

from study_gateway.configs.base import BaseSettings, env_settings_config


class StorageSettings(BaseSettings):
    """Settings for S3-compatible object storage."""

    model_config = env_settings_config("STORAGE_")

    bucket: str = Field(
        default="documents",
        description="Bucket for audio uploads",
    )
    region: str = Field(
        default="us-east-1",
        description="Region of the bucket",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Custom endpoint for S3-compatible providers (None for AWS)",
    )
    key_prefix: str = Field(
        default="audio",
        description="Key prefix under each user's folder",
    )
