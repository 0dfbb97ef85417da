"""
WasenderAPI - WhatsApp client and webhook toolkit.

Clean, simple interface for the Wasender REST API and its webhooks.

Example:
    from wasenderapi import create_wasender, StarletteRequestAdapter

    wasender = create_wasender()
    event = await wasender.handle_webhook_event(StarletteRequestAdapter(request))
"""

from .core.config.settings import settings
from .core.errors import (
    WasenderAPIError,
    WasenderWebhookError,
    WebhookNotConfiguredError,
    WebhookPayloadError,
    WebhookSignatureError,
)
from .core.logging.logger import get_logger, setup_logging
from .core.types import MissingTypePolicy, RateLimitInfo, WebhookErrorReason
from .messaging.client.http_client import RetryConfig
from .messaging.client.transport import AiohttpTransport, HttpResponse, HttpTransport
from .messaging.models.common import WasenderResponse, WasenderResult
from .messaging.wasender import Wasender, create_wasender
from .webhooks import (
    RawRequestAdapter,
    StarletteRequestAdapter,
    WasenderWebhookEvent,
    WasenderWebhookEventType,
    WebhookRequestAdapter,
    handle_webhook_event,
    verify_wasender_webhook_signature,
)

__version__ = settings.version

__all__ = [
    # Client
    "Wasender",
    "create_wasender",
    "RetryConfig",
    "HttpTransport",
    "HttpResponse",
    "AiohttpTransport",
    "WasenderResponse",
    "WasenderResult",
    "RateLimitInfo",
    # Webhooks
    "handle_webhook_event",
    "verify_wasender_webhook_signature",
    "WebhookRequestAdapter",
    "RawRequestAdapter",
    "StarletteRequestAdapter",
    "WasenderWebhookEvent",
    "WasenderWebhookEventType",
    "MissingTypePolicy",
    # Errors
    "WasenderAPIError",
    "WasenderWebhookError",
    "WebhookNotConfiguredError",
    "WebhookSignatureError",
    "WebhookPayloadError",
    "WebhookErrorReason",
    # Logging
    "get_logger",
    "setup_logging",
]
