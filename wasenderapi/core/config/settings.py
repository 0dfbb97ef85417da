"""
Settings for the WasenderAPI client.

Simple environment variable configuration. Credentials are optional at load
time: each client call checks for the token it needs, so the same settings
object serves scripts that only send messages, only manage sessions, or only
receive webhooks.
"""

import os
import tomllib
from pathlib import Path

from dotenv import load_dotenv

# Load .env file for local development - look in current working directory
load_dotenv(".env")

DEFAULT_BASE_URL = "https://www.wasenderapi.com/api"


def _get_version_from_pyproject() -> str:
    """
    Read version from pyproject.toml file.

    Returns:
        Version string from pyproject.toml, or fallback version
    """
    current_path = Path(__file__)
    for parent in [current_path.parent, *current_path.parents]:
        pyproject_path = parent / "pyproject.toml"
        if pyproject_path.exists():
            try:
                with open(pyproject_path, "rb") as f:
                    pyproject_data = tomllib.load(f)
                    version = pyproject_data.get("project", {}).get("version")
                    if version:
                        return version
            except (OSError, tomllib.TOMLDecodeError):
                continue

    return "0.1.0"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings with environment-based configuration."""

    def __init__(self):
        # ================================================================
        # Version
        # ================================================================
        self.version: str = _get_version_from_pyproject()

        # ================================================================
        # Environment & General Configuration
        # ================================================================
        self.port: int = int(os.getenv("PORT", "3000"))
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
        self.log_dir: str = os.getenv("LOG_DIR", "./logs")
        self.environment: str = os.getenv("ENVIRONMENT", "DEV")

        # ================================================================
        # WasenderAPI Configuration
        # ================================================================
        self.base_url: str = os.getenv("WASENDER_BASE_URL", DEFAULT_BASE_URL)

        # Session-scoped key: messages, contacts, groups, session status
        self.api_key: str | None = os.getenv("WASENDER_API_KEY")

        # Account-scoped token: session lifecycle management
        self.personal_access_token: str | None = os.getenv(
            "WASENDER_PERSONAL_ACCESS_TOKEN"
        )

        # Shared secret compared against the X-Webhook-Signature header
        self.webhook_secret: str | None = os.getenv("WASENDER_WEBHOOK_SECRET")

        # ================================================================
        # HTTP Behaviour
        # ================================================================
        self.retry_enabled: bool = _env_bool("WASENDER_RETRY_ENABLED", False)
        self.max_retries: int = int(os.getenv("WASENDER_MAX_RETRIES", "0"))
        self.request_timeout: float = float(
            os.getenv("WASENDER_REQUEST_TIMEOUT", "30")
        )

        self._validate_settings()

    def _validate_settings(self):
        """Validate settings values."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR"]
        if self.log_level.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        self.log_level = self.log_level.upper()

        valid_environments = ["DEV", "PROD"]
        if self.environment.upper() not in valid_environments:
            self.environment = "DEV"  # Default fallback
        self.environment = self.environment.upper()

        if self.max_retries < 0:
            raise ValueError("WASENDER_MAX_RETRIES cannot be negative")
        if self.request_timeout <= 0:
            raise ValueError("WASENDER_REQUEST_TIMEOUT must be positive")

    @property
    def has_webhook_secret(self) -> bool:
        """Check if a webhook secret is configured."""
        return bool(self.webhook_secret)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "DEV"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "PROD"


# Global settings instance
settings = Settings()
