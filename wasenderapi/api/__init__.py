"""FastAPI integration for inbound Wasender webhooks."""

from .routes.webhooks import WebhookEventCallback, create_webhook_router

__all__ = ["WebhookEventCallback", "create_webhook_router"]
