"""
Unit tests for Configuration module.

This module contains unit tests for the configuration settings,
validators, and computed properties.
"""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from app.core.config import (
    EnvironmentEnum,
    LogFormatEnum,
    LogLevelEnum,
    Settings,
    get_config_summary,
)


class TestSettings:
    """Test cases for Settings configuration."""

    def test_default_settings(self, monkeypatch):
        """Test default configuration values."""
        for name in ("ENVIRONMENT", "LOG_LEVEL", "SEED_DEFAULT_PROJECTS"):
            monkeypatch.delenv(name, raising=False)

        test_settings = Settings(_env_file=None)

        assert test_settings.app_name == "Task Board API"
        assert test_settings.environment == EnvironmentEnum.development
        assert test_settings.debug is False
        assert test_settings.version == "1.0.0"
        assert test_settings.log_level == LogLevelEnum.INFO
        assert test_settings.log_format == LogFormatEnum.simple
        assert test_settings.seed_default_projects is True
        assert test_settings.default_project_color == "#3B82F6"
        assert test_settings.host == "127.0.0.1"
        assert test_settings.port == 8000

    def test_environment_validation(self):
        """Test environment validation with various inputs."""
        assert Settings(environment="production").environment == EnvironmentEnum.production
        assert Settings(environment="DEVELOPMENT").environment == EnvironmentEnum.development
        assert Settings(environment="dev").environment == EnvironmentEnum.development
        assert Settings(environment="prod").environment == EnvironmentEnum.production

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(environment="moon")

    def test_log_level_case_insensitive(self):
        assert Settings(log_level="debug").log_level == LogLevelEnum.DEBUG

    def test_default_project_color_validation(self):
        assert Settings(default_project_color="#abcdef").default_project_color == "#ABCDEF"

        with pytest.raises(ValidationError):
            Settings(default_project_color="blue")

    def test_port_validation(self):
        with pytest.raises(ValidationError):
            Settings(port=70000)

    def test_allowed_origins_list(self):
        test_settings = Settings(allowed_origins="http://a.test, http://b.test,,")

        assert test_settings.allowed_origins_list == ["http://a.test", "http://b.test"]

    def test_environment_properties(self):
        assert Settings(environment="development").is_development is True
        assert Settings(environment="dev").is_development is True
        assert Settings(environment="production").is_development is False

    def test_reads_environment_variables(self, monkeypatch):
        monkeypatch.setenv("SEED_DEFAULT_PROJECTS", "false")
        monkeypatch.setenv("LOG_FORMAT", "json")

        test_settings = Settings()

        assert test_settings.seed_default_projects is False
        assert test_settings.log_format == LogFormatEnum.json


class TestConfigSummary:
    """Test cases for get_config_summary."""

    def test_summary_reflects_settings(self):
        fake = Settings(app_name="Board", seed_default_projects=False)

        with patch("app.core.config.settings", fake):
            summary = get_config_summary()

        assert summary["app_name"] == "Board"
        assert summary["seed_default_projects"] is False
        assert set(summary) == {
            "app_name",
            "version",
            "environment",
            "debug",
            "log_level",
            "log_format",
            "seed_default_projects",
            "default_project_color",
        }
