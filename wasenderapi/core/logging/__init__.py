"""Logging module for the WasenderAPI client."""

from .context import clear_webhook_context, set_webhook_context
from .logger import ContextLogger, get_logger, setup_app_logging, setup_logging

__all__ = [
    "ContextLogger",
    "clear_webhook_context",
    "get_logger",
    "set_webhook_context",
    "setup_app_logging",
    "setup_logging",
]
