"""
Wasender CLI main module.

Small operational commands: a local webhook receiver for inspecting
deliveries, plus one-shot API calls for smoke testing credentials.
"""

import asyncio

import typer

from wasenderapi.core.config.settings import settings
from wasenderapi.core.errors import WasenderAPIError
from wasenderapi.core.logging.logger import get_logger, setup_app_logging
from wasenderapi.webhooks.models import (
    BaseWebhookEvent,
    MessagesUpsertEvent,
    MessageSentEvent,
    QrCodeUpdatedEvent,
    SessionStatusEvent,
)

app = typer.Typer(help="WasenderAPI WhatsApp client CLI")


def describe_event(event: BaseWebhookEvent) -> str:
    """One-line summary of a decoded webhook event for the console."""
    if isinstance(event, MessagesUpsertEvent):
        sender = event.data.push_name or event.data.key.remote_jid or "unknown"
        direction = "outgoing" if event.data.key.from_me else "incoming"
        content = (
            event.data.message.describe() if event.data.message else "no content"
        )
        return f"{direction} message from {sender}: {content}"
    if isinstance(event, MessageSentEvent):
        content = (
            event.data.message.describe() if event.data.message else "no content"
        )
        return f"message sent: {content}"
    if isinstance(event, SessionStatusEvent):
        return f"session status: {event.data.status}"
    if isinstance(event, QrCodeUpdatedEvent):
        return "QR code updated"
    if event.payload_is_array and isinstance(event.data, list):
        return f"{len(event.data)} item(s)"
    if not event.is_known:
        return f"unrecognized event type {event.type!r}"
    return "event received"


def create_webhook_app(webhook_secret: str | None = None, path: str = "/webhook"):
    """FastAPI app that logs every accepted webhook event."""
    from fastapi import FastAPI

    from wasenderapi.api.routes.webhooks import create_webhook_router

    logger = get_logger("wasenderapi.cli.webhook")

    def log_event(event: BaseWebhookEvent) -> None:
        logger.info(f"{event.type}: {describe_event(event)}")

    webhook_app = FastAPI(title="Wasender webhook receiver", version=settings.version)
    webhook_app.include_router(
        create_webhook_router(log_event, webhook_secret=webhook_secret, path=path)
    )
    return webhook_app


@app.command("webhook-server")
def webhook_server(
    host: str = typer.Option("0.0.0.0", "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(settings.port, "--port", "-p", help="Port to bind to"),
    path: str = typer.Option("/webhook", "--path", help="Webhook route path"),
    secret: str | None = typer.Option(
        None, "--secret", help="Webhook secret (default: WASENDER_WEBHOOK_SECRET)"
    ),
):
    """
    Run a local webhook receiver that logs every event.

    Examples:
        wasender webhook-server
        wasender webhook-server --port 8080 --secret my-secret
    """
    import uvicorn

    webhook_secret = secret or settings.webhook_secret
    if not webhook_secret:
        typer.echo(
            "❌ No webhook secret. Set WASENDER_WEBHOOK_SECRET or pass --secret.",
            err=True,
        )
        raise typer.Exit(1)

    setup_app_logging()

    typer.echo("🚀 Starting Wasender webhook receiver...")
    typer.echo(f"🌐 Webhook URL: http://{host}:{port}{path}")
    typer.echo("💡 Press CTRL+C to stop")
    typer.echo()

    uvicorn.run(
        create_webhook_app(webhook_secret, path),
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )


@app.command("send-text")
def send_text(
    to: str = typer.Argument(..., help="Recipient phone number (E.164) or JID"),
    text: str = typer.Argument(..., help="Message text"),
    api_key: str | None = typer.Option(
        None, "--api-key", help="Session API key (default: WASENDER_API_KEY)"
    ),
):
    """
    Send a text message.

    Examples:
        wasender send-text +15551234567 "Hello from Wasender"
    """
    from wasenderapi.messaging.wasender import create_wasender

    async def _send():
        async with create_wasender(api_key=api_key) as wasender:
            return await wasender.send_text(to=to, text=text)

    try:
        result = asyncio.run(_send())
    except WasenderAPIError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1) from e

    data = result.data
    typer.echo(f"✅ Sent (msgId: {data.msg_id if data else 'n/a'})")
    if result.rate_limit and result.rate_limit.remaining is not None:
        typer.echo(f"Rate limit remaining: {result.rate_limit.remaining}")


@app.command("session-status")
def session_status(
    api_key: str | None = typer.Option(
        None, "--api-key", help="Session API key (default: WASENDER_API_KEY)"
    ),
):
    """Show the connection status of the session the API key belongs to."""
    from wasenderapi.messaging.wasender import create_wasender

    async def _status():
        async with create_wasender(api_key=api_key) as wasender:
            return await wasender.get_session_status()

    try:
        result = asyncio.run(_status())
    except WasenderAPIError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1) from e

    typer.echo(f"Session status: {result.response.status}")


if __name__ == "__main__":
    app()
