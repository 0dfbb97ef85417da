"""
Tests for environment-based settings.
"""

import pytest

from wasenderapi.core.config.settings import DEFAULT_BASE_URL, Settings

WASENDER_ENV = (
    "WASENDER_API_KEY",
    "WASENDER_PERSONAL_ACCESS_TOKEN",
    "WASENDER_WEBHOOK_SECRET",
    "WASENDER_BASE_URL",
    "WASENDER_RETRY_ENABLED",
    "WASENDER_MAX_RETRIES",
    "WASENDER_REQUEST_TIMEOUT",
    "LOG_LEVEL",
    "ENVIRONMENT",
    "PORT",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in WASENDER_ENV:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    def test_defaults(self, clean_env):
        settings = Settings()

        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.api_key is None
        assert settings.webhook_secret is None
        assert settings.has_webhook_secret is False
        assert settings.retry_enabled is False
        assert settings.max_retries == 0
        assert settings.request_timeout == 30.0
        assert settings.log_level == "INFO"
        assert settings.is_development

    def test_reads_environment(self, clean_env):
        clean_env.setenv("WASENDER_API_KEY", "key")
        clean_env.setenv("WASENDER_WEBHOOK_SECRET", "secret")
        clean_env.setenv("WASENDER_RETRY_ENABLED", "true")
        clean_env.setenv("WASENDER_MAX_RETRIES", "3")
        clean_env.setenv("LOG_LEVEL", "debug")
        clean_env.setenv("ENVIRONMENT", "prod")

        settings = Settings()

        assert settings.api_key == "key"
        assert settings.has_webhook_secret
        assert settings.retry_enabled is True
        assert settings.max_retries == 3
        assert settings.log_level == "DEBUG"
        assert settings.is_production

    def test_invalid_log_level_raises(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ValueError, match="LOG_LEVEL"):
            Settings()

    def test_invalid_environment_falls_back_to_dev(self, clean_env):
        clean_env.setenv("ENVIRONMENT", "staging")
        assert Settings().environment == "DEV"

    def test_negative_retries_rejected(self, clean_env):
        clean_env.setenv("WASENDER_MAX_RETRIES", "-1")

        with pytest.raises(ValueError):
            Settings()

    def test_version_from_pyproject(self, clean_env):
        assert Settings().version == "0.1.0"
