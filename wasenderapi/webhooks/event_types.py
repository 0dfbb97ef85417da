"""
Known webhook event types sent by WasenderAPI.

The set is closed: a tag that is not listed here is decoded as an
``UnknownWebhookEvent`` rather than rejected.
"""

from enum import Enum


class WasenderWebhookEventType(str, Enum):
    """Event discriminants carried in the ``type`` field of a webhook body."""

    # Chat events
    CHATS_UPSERT = "chats.upsert"
    CHATS_UPDATE = "chats.update"
    CHATS_DELETE = "chats.delete"

    # Group events
    GROUPS_UPSERT = "groups.upsert"
    GROUPS_UPDATE = "groups.update"
    GROUP_PARTICIPANTS_UPDATE = "group-participants.update"

    # Contact events
    CONTACTS_UPSERT = "contacts.upsert"
    CONTACTS_UPDATE = "contacts.update"

    # Message events
    MESSAGES_UPSERT = "messages.upsert"  # New incoming message
    MESSAGES_UPDATE = "messages.update"  # Delivery/read status change
    MESSAGES_DELETE = "messages.delete"
    MESSAGES_REACTION = "messages.reaction"
    MESSAGE_RECEIPT_UPDATE = "message-receipt.update"

    # Session events
    MESSAGE_SENT = "message.sent"  # Confirmation of a send from this session
    SESSION_STATUS = "session.status"
    QRCODE_UPDATED = "qrcode.updated"

    @classmethod
    def from_value(cls, value: str | None) -> "WasenderWebhookEventType | None":
        """Return the member for a wire tag, or None for unknown tags."""
        try:
            return cls(value)
        except ValueError:
            return None


# Event types whose ``data`` is a list of entries; every other known type
# carries exactly one object.
ARRAY_PAYLOAD_EVENT_TYPES: frozenset[str] = frozenset(
    event_type.value
    for event_type in (
        WasenderWebhookEventType.CHATS_UPSERT,
        WasenderWebhookEventType.CHATS_UPDATE,
        WasenderWebhookEventType.CHATS_DELETE,
        WasenderWebhookEventType.GROUPS_UPSERT,
        WasenderWebhookEventType.GROUPS_UPDATE,
        WasenderWebhookEventType.CONTACTS_UPSERT,
        WasenderWebhookEventType.CONTACTS_UPDATE,
        WasenderWebhookEventType.MESSAGES_UPDATE,
        WasenderWebhookEventType.MESSAGES_REACTION,
        WasenderWebhookEventType.MESSAGE_RECEIPT_UPDATE,
    )
)


def is_array_payload(event_type: str) -> bool:
    """Check whether a known event type carries a list of entries."""
    return str(getattr(event_type, "value", event_type)) in ARRAY_PAYLOAD_EVENT_TYPES
