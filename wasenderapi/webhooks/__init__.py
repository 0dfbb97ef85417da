"""
WasenderAPI webhook verification and event typing.

Usage:
    from wasenderapi.webhooks import (
        StarletteRequestAdapter,
        WasenderWebhookEventType,
        handle_webhook_event,
    )

    event = await handle_webhook_event(StarletteRequestAdapter(request), secret)
    if event.type == WasenderWebhookEventType.MESSAGES_UPSERT:
        ...
"""

from .adapters import RawRequestAdapter, StarletteRequestAdapter, WebhookRequestAdapter
from .decoder import decode_webhook_event, decode_webhook_payload, parse_webhook_body
from .event_types import (
    ARRAY_PAYLOAD_EVENT_TYPES,
    WasenderWebhookEventType,
    is_array_payload,
)
from .handler import WasenderWebhookHandler, handle_webhook_event
from .models import (
    WEBHOOK_EVENT_MODELS,
    BaseWebhookEvent,
    ChatEntry,
    ChatsDeleteEvent,
    ChatsUpdateEvent,
    ChatsUpsertEvent,
    ChatUpdate,
    ContactEntry,
    ContactsUpdateEvent,
    ContactsUpsertEvent,
    ContactUpdate,
    GroupMetadataEntry,
    GroupMetadataUpdate,
    GroupParticipantsUpdateData,
    GroupParticipantsUpdateEvent,
    GroupsUpdateEvent,
    GroupsUpsertEvent,
    MessageContent,
    MessageKey,
    MessageReceiptUpdateEntry,
    MessageReceiptUpdateEvent,
    MessagesDeleteData,
    MessagesDeleteEvent,
    MessageSentData,
    MessageSentEvent,
    MessagesReactionEntry,
    MessagesReactionEvent,
    MessagesUpdateEntry,
    MessagesUpdateEvent,
    MessagesUpsertData,
    MessagesUpsertEvent,
    MessageUpdate,
    QrCodeUpdatedData,
    QrCodeUpdatedEvent,
    Reaction,
    Receipt,
    SessionStatusData,
    SessionStatusEvent,
    UnknownWebhookEvent,
    WasenderWebhookEvent,
)
from .verifier import (
    WEBHOOK_SIGNATURE_HEADER,
    HmacSha256Verifier,
    SharedSecretVerifier,
    SignatureVerifier,
    verify_wasender_webhook_signature,
)

__all__ = [
    # Entry point
    "handle_webhook_event",
    "WasenderWebhookHandler",
    # Adapters
    "WebhookRequestAdapter",
    "RawRequestAdapter",
    "StarletteRequestAdapter",
    # Verification
    "WEBHOOK_SIGNATURE_HEADER",
    "verify_wasender_webhook_signature",
    "SignatureVerifier",
    "SharedSecretVerifier",
    "HmacSha256Verifier",
    # Decoding
    "decode_webhook_event",
    "decode_webhook_payload",
    "parse_webhook_body",
    # Taxonomy
    "WasenderWebhookEventType",
    "ARRAY_PAYLOAD_EVENT_TYPES",
    "is_array_payload",
    "WEBHOOK_EVENT_MODELS",
    # Events
    "WasenderWebhookEvent",
    "BaseWebhookEvent",
    "ChatsUpsertEvent",
    "ChatsUpdateEvent",
    "ChatsDeleteEvent",
    "GroupsUpsertEvent",
    "GroupsUpdateEvent",
    "GroupParticipantsUpdateEvent",
    "ContactsUpsertEvent",
    "ContactsUpdateEvent",
    "MessagesUpsertEvent",
    "MessagesUpdateEvent",
    "MessagesDeleteEvent",
    "MessagesReactionEvent",
    "MessageReceiptUpdateEvent",
    "MessageSentEvent",
    "SessionStatusEvent",
    "QrCodeUpdatedEvent",
    "UnknownWebhookEvent",
    # Payloads
    "MessageKey",
    "MessageContent",
    "ChatEntry",
    "ChatUpdate",
    "GroupMetadataEntry",
    "GroupMetadataUpdate",
    "GroupParticipantsUpdateData",
    "ContactEntry",
    "ContactUpdate",
    "MessagesUpsertData",
    "MessageUpdate",
    "MessagesUpdateEntry",
    "MessagesDeleteData",
    "Reaction",
    "MessagesReactionEntry",
    "Receipt",
    "MessageReceiptUpdateEntry",
    "MessageSentData",
    "SessionStatusData",
    "QrCodeUpdatedData",
]
