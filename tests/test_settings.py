"""
Test suite for configuration loading.

Tests per-module environment prefixes, nested generation overrides and
environment validation.

System role: Verification of settings plumbing
"""

import pytest
from pydantic import ValidationError

from study_gateway.configs.base import env_settings_config
from study_gateway.configs.gateway import GatewaySettings
from study_gateway.configs.generation import GenerationSettings
from study_gateway.configs.settings import Settings
from study_gateway.configs.storage import StorageSettings


class TestEnvSettingsConfig:
    """Test suite for env_settings_config."""

    def test_shared_defaults_with_prefix(self) -> None:
        config = env_settings_config("STORAGE_")

        assert config["env_prefix"] == "STORAGE_"
        assert config["env_file"] == ".env"
        assert config["case_sensitive"] is False
        assert config["extra"] == "ignore"

    def test_overrides_are_merged(self) -> None:
        config = env_settings_config("GENERATION_", env_nested_delimiter="__")

        assert config["env_nested_delimiter"] == "__"
        assert config["env_prefix"] == "GENERATION_"


class TestModuleSettings:
    """Each module reads only its own prefixed variables."""

    def test_gateway_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        # Arrange
        monkeypatch.setenv("GATEWAY_API_KEY", "secret-key")
        monkeypatch.setenv("API_KEY", "unprefixed")

        # Act
        settings = GatewaySettings(_env_file=None)

        # Assert
        assert settings.api_key == "secret-key"

    def test_prefix_is_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("gateway_api_key", "lower")

        assert GatewaySettings(_env_file=None).api_key == "lower"

    def test_other_module_prefix_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GATEWAY_BUCKET", "wrong-module")

        settings = StorageSettings(_env_file=None)

        assert settings.bucket != "wrong-module"

    def test_generation_profiles_accept_nested_overrides(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GENERATION_STANDARD__CHUNK_WORDS", "1000")

        settings = GenerationSettings(_env_file=None)

        assert settings.standard.chunk_words == 1000
        assert settings.concise.chunk_words == 900


class TestSettings:
    """Test suite for the aggregated Settings."""

    def test_environment_defaults_to_development(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        assert Settings(_env_file=None).environment == "development"

    def test_environment_is_read_unprefixed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")

        assert Settings(_env_file=None).environment == "production"

    def test_unknown_environment_is_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "qa-box")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
