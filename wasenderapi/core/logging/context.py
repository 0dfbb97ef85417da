"""
Webhook context management using contextvars for automatic propagation.

The context is set once per inbound webhook (by the FastAPI route or the CLI
server) and is picked up by every logger created through ``get_logger``
within the same async task.
"""

from contextvars import ContextVar

_session_context: ContextVar[str | None] = ContextVar(
    "session_id", default=None
)  # From the webhook envelope
_event_context: ContextVar[str | None] = ContextVar(
    "event_type", default=None
)  # From the webhook envelope


def set_webhook_context(
    session_id: str | None = None,
    event_type: str | None = None,
) -> None:
    """
    Set the webhook context for the current async context.

    Args:
        session_id: Wasender session identifier carried by the event
        event_type: Event discriminant (e.g. ``messages.upsert``)
    """
    if session_id is not None:
        _session_context.set(session_id)
    if event_type is not None:
        _event_context.set(event_type)


def get_current_session_context() -> str | None:
    """Get the current webhook session ID, or None if not set."""
    return _session_context.get()


def get_current_event_context() -> str | None:
    """Get the current webhook event type, or None if not set."""
    return _event_context.get()


def clear_webhook_context() -> None:
    """
    Clear the webhook context.

    Context is isolated per task already; this is mostly useful in tests.
    """
    _session_context.set(None)
    _event_context.set(None)
