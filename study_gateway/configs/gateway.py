"""
Hosted gateway configuration.

Connection parameters for the hosted function endpoints that front the
language model (completion, transcription) and the link-processing service.

Dependencies: pydantic, pydantic_settings
System role: Completion endpoint configuration
"""

from pydantic import Field

from study_gateway.configs.base import BaseSettings, env_settings_config


class GatewaySettings(BaseSettings):
    """Hosted function gateway configuration."""

    model_config = env_settings_config("GATEWAY_")

    functions_url: str = Field(
        default="http://localhost:54321/functions/v1",
        description="Base URL of the hosted functions",
    )
    api_key: str = Field(default="", description="Bearer key sent with every invocation")
    completion_function: str = Field(
        default="ai-generate",
        description="Function handling chat and transcription requests",
    )
    link_function: str = Field(
        default="process-link",
        description="Function extracting text from web and Drive links",
    )
    default_model: str = Field(default="gpt-4o-mini", description="Default model identifier")
    request_timeout: float = Field(
        default=180.0,
        description="Transport timeout in seconds for a single invocation",
    )
    history_turns: int = Field(
        default=10,
        description="Most recent chat turns forwarded to the model",
    )
    inline_audio_max_bytes: int = Field(
        default=2 * 1024 * 1024,
        description="Audio larger than this is uploaded to storage before transcription",
    )
