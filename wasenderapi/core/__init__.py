"""
Core building blocks shared by the webhook and REST layers.

Usage:
    from wasenderapi.core import WasenderAPIError, RateLimitInfo, settings
"""

from .config.settings import Settings, settings
from .errors import (
    WasenderAPIError,
    WasenderErrorDetail,
    WasenderWebhookError,
    WebhookNotConfiguredError,
    WebhookPayloadError,
    WebhookSignatureError,
)
from .types import MissingTypePolicy, RateLimitInfo, WebhookErrorReason

__all__ = [
    "Settings",
    "settings",
    "WasenderAPIError",
    "WasenderErrorDetail",
    "WasenderWebhookError",
    "WebhookNotConfiguredError",
    "WebhookPayloadError",
    "WebhookSignatureError",
    "MissingTypePolicy",
    "RateLimitInfo",
    "WebhookErrorReason",
]
