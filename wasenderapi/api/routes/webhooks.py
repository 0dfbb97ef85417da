"""
Wasender webhook route for FastAPI applications.

The route handles only HTTP concerns: it hands the request to the webhook
entry point, maps rejections to status codes and acknowledges accepted
events. What to do with an event is up to the ``on_event`` callback.
"""

import inspect
from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from wasenderapi.core.config.settings import settings
from wasenderapi.core.errors import WasenderWebhookError
from wasenderapi.core.logging.context import set_webhook_context
from wasenderapi.core.logging.logger import get_logger
from wasenderapi.core.types import MissingTypePolicy
from wasenderapi.webhooks.adapters import StarletteRequestAdapter
from wasenderapi.webhooks.handler import WasenderWebhookHandler
from wasenderapi.webhooks.models import WasenderWebhookEvent
from wasenderapi.webhooks.verifier import SignatureVerifier

# Sync callables or coroutine functions
WebhookEventCallback = Callable[[WasenderWebhookEvent], Any]


def create_webhook_router(
    on_event: WebhookEventCallback,
    *,
    webhook_secret: str | None = None,
    path: str = "/webhook",
    verifier: SignatureVerifier | None = None,
    missing_type: MissingTypePolicy | str = MissingTypePolicy.RAISE,
) -> APIRouter:
    """
    Create a router with a single POST webhook endpoint.

    Args:
        on_event: Called with every accepted event; sync callables run in the
            threadpool
        webhook_secret: Shared secret; falls back to WASENDER_WEBHOOK_SECRET
        path: Route path
        verifier: Signature verification strategy
        missing_type: Policy for payloads without an event type

    Returns:
        APIRouter answering 200 ``{"received": true}`` on success, 401 on
        signature failures, 400 on bad bodies and 500 when the secret is not
        configured or ``on_event`` fails
    """
    handler = WasenderWebhookHandler(
        webhook_secret or settings.webhook_secret,
        verifier=verifier,
        missing_type=missing_type,
    )
    logger = get_logger(__name__)

    router = APIRouter(
        tags=["Webhooks"],
        responses={
            400: {"description": "Bad Request - Invalid webhook payload"},
            401: {"description": "Unauthorized - Invalid webhook signature"},
            500: {"description": "Internal Server Error"},
        },
    )

    @router.post(path)
    async def receive_webhook(request: Request):
        try:
            event = await handler.handle(StarletteRequestAdapter(request))
        except WasenderWebhookError as e:
            status_code = e.status_code or 500
            if status_code >= 500:
                logger.error(f"Webhook rejected: {e.api_message}")
            else:
                logger.warning(f"Webhook rejected ({status_code}): {e.api_message}")
            content: dict[str, Any] = {"error": e.api_message, "reason": e.reason.value}
            if e.error_details:
                content["details"] = e.error_details
            return JSONResponse(status_code=status_code, content=content)

        set_webhook_context(
            session_id=str(event.session_id) if event.session_id is not None else None,
            event_type=str(event.type) if event.type is not None else None,
        )
        logger.info(f"Webhook accepted: {event.type or 'unknown'}")

        try:
            if inspect.iscoroutinefunction(on_event):
                await on_event(event)
            else:
                result = await run_in_threadpool(on_event, event)
                if inspect.isawaitable(result):
                    await result
        except Exception:
            logger.exception(f"Webhook callback failed for {event.type}")
            return JSONResponse(
                status_code=500, content={"error": "Webhook processing failed"}
            )

        return {"received": True}

    return router
