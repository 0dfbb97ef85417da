"""Configuration module for the WasenderAPI client."""

from .settings import DEFAULT_BASE_URL, Settings, settings

__all__ = ["DEFAULT_BASE_URL", "Settings", "settings"]
