"""
Pydantic models for WasenderAPI webhook events.

Every event is an envelope ``{type, timestamp?, sessionId?, data}``. The
``type`` discriminant selects exactly one event class below, and that class
fixes the shape of ``data``: a list of entries for chat, group, contact and
batched message events, a single object for everything else.

Payload models keep unknown fields (``extra="allow"``) and validate in strict
mode, so wire values are type-checked but never converted and
``event.to_wire()`` reproduces the JSON the server sent.
"""

from typing import Any, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from wasenderapi.messaging.models.groups import GroupParticipant
from wasenderapi.webhooks.event_types import WasenderWebhookEventType


class WebhookPayloadModel(BaseModel):
    """Base for webhook payload fragments."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, strict=True)


# ---------- Message key ----------


class MessageKey(WebhookPayloadModel):
    """
    Identifies a single message.

    Join key across update, delete, reaction and receipt events.
    """

    id: str = Field(..., description="Message ID")
    from_me: bool = Field(
        ..., alias="fromMe", description="True if sent by this session"
    )
    remote_jid: str = Field(
        ...,
        alias="remoteJid",
        description="Recipient JID for outgoing, sender JID for incoming",
    )
    participant: str | None = Field(
        None, description="Actual sender JID for group messages"
    )


# ---------- Message content ----------


class MediaMessageContent(WebhookPayloadModel):
    url: str | None = None
    mimetype: str | None = None
    caption: str | None = None
    file_length: int | str | None = Field(None, alias="fileLength")


class ImageMessageContent(MediaMessageContent):
    pass


class VideoMessageContent(MediaMessageContent):
    pass


class DocumentMessageContent(MediaMessageContent):
    title: str | None = None
    file_name: str | None = Field(None, alias="fileName")


class AudioMessageContent(MediaMessageContent):
    duration: int | float | None = Field(None, description="Length in seconds")


class StickerMessageContent(MediaMessageContent):
    pass


class ContactMessageContent(WebhookPayloadModel):
    display_name: str | None = Field(None, alias="displayName")
    vcard: str | None = None


class LocationMessageContent(WebhookPayloadModel):
    degrees_latitude: float | None = Field(None, alias="degreesLatitude")
    degrees_longitude: float | None = Field(None, alias="degreesLongitude")
    name: str | None = None
    address: str | None = None


class ExtendedTextMessageContent(WebhookPayloadModel):
    text: str | None = None


class ReactionMessageContent(WebhookPayloadModel):
    text: str | None = None
    key: MessageKey | None = None


class MessageContent(WebhookPayloadModel):
    """
    Content of a WhatsApp message.

    At most one of the typed sub-objects is normally present; types this
    model doesn't list are kept as extra fields.
    """

    conversation: str | None = Field(None, description="Plain text body")
    image_message: ImageMessageContent | None = Field(None, alias="imageMessage")
    video_message: VideoMessageContent | None = Field(None, alias="videoMessage")
    document_message: DocumentMessageContent | None = Field(
        None, alias="documentMessage"
    )
    audio_message: AudioMessageContent | None = Field(None, alias="audioMessage")
    sticker_message: StickerMessageContent | None = Field(
        None, alias="stickerMessage"
    )
    contact_message: ContactMessageContent | None = Field(
        None, alias="contactMessage"
    )
    location_message: LocationMessageContent | None = Field(
        None, alias="locationMessage"
    )
    extended_text_message: ExtendedTextMessageContent | None = Field(
        None, alias="extendedTextMessage"
    )
    reaction_message: ReactionMessageContent | None = Field(
        None, alias="reactionMessage"
    )

    @property
    def text(self) -> str | None:
        """Text body from either plain or extended text messages."""
        if self.conversation is not None:
            return self.conversation
        if self.extended_text_message is not None:
            return self.extended_text_message.text
        return None

    def describe(self) -> str:
        """Short human-readable summary of the content kind, for logs."""
        if self.conversation:
            return f'text: "{self.conversation}"'
        if self.extended_text_message and self.extended_text_message.text:
            return f'text: "{self.extended_text_message.text}"'
        if self.image_message:
            media = self.image_message
            return f"image {media.mimetype or ''} {media.file_length or '?'} bytes"
        if self.video_message:
            media = self.video_message
            return f"video {media.mimetype or ''} {media.file_length or '?'} bytes"
        if self.document_message:
            return f'document "{self.document_message.file_name or "unknown file"}"'
        if self.audio_message:
            audio = self.audio_message
            duration = audio.duration if audio.duration is not None else "?"
            return f"audio ({audio.mimetype or ''}), duration: {duration}s"
        if self.sticker_message:
            return f"sticker ({self.sticker_message.mimetype or ''})"
        if self.reaction_message:
            target = self.reaction_message.key.id if self.reaction_message.key else "?"
            return f'reaction: "{self.reaction_message.text}" to msg ID {target}'
        if self.contact_message:
            return f"contact card {self.contact_message.display_name or ''}".rstrip()
        if self.location_message:
            return "location pin"
        for key in (self.model_extra or {}):
            if key.endswith("Message"):
                return f"{key.removesuffix('Message')} message"
        return "unsupported/unknown message kind"


# ---------- Chat payloads ----------


class ChatEntry(WebhookPayloadModel):
    id: str = Field(..., description="Chat JID (contact or group)")
    name: str | None = Field(None, description="Contact name or group subject")
    conversation_timestamp: int | None = Field(
        None, alias="conversationTimestamp", description="Last message timestamp"
    )
    unread_count: int | None = Field(None, alias="unreadCount")
    mute_end_time: int | None = Field(None, alias="muteEndTime")
    is_spam: bool | None = Field(None, alias="isSpam")


class ChatUpdate(ChatEntry):
    """Partial chat entry; updates only carry the fields that changed."""

    id: str | None = None


# ---------- Group payloads ----------


class GroupMetadataEntry(WebhookPayloadModel):
    jid: str = Field(..., description="Group JID")
    subject: str = Field(..., description="Group subject")
    creation: int | None = Field(None, description="Unix timestamp of creation")
    owner: str | None = Field(None, description="JID of the group owner")
    desc: str | None = Field(None, description="Group description")
    participants: list[GroupParticipant] | None = None
    announce: bool | None = Field(None, description="Only admins send messages")
    restrict: bool | None = Field(None, description="Only admins edit group info")


class GroupMetadataUpdate(GroupMetadataEntry):
    """Partial group metadata."""

    jid: str | None = None
    subject: str | None = None


class GroupParticipantsUpdateData(WebhookPayloadModel):
    jid: str = Field(..., description="Group JID")
    participants: list[str | GroupParticipant] = Field(
        ..., description="Affected participant JIDs or participant objects"
    )
    action: Literal["add", "remove", "promote", "demote"]


# ---------- Contact payloads ----------


class ContactEntry(WebhookPayloadModel):
    jid: str
    name: str | None = Field(None, description="Name saved by the user")
    notify: str | None = Field(None, description="Display (push) name")
    verified_name: str | None = Field(None, alias="verifiedName")
    status: str | None = Field(None, description="About text")
    img_url: str | None = Field(
        None, alias="imgUrl", description="Profile picture URL (may be temporary)"
    )


class ContactUpdate(ContactEntry):
    """Partial contact entry."""

    jid: str | None = None


# ---------- Message payloads ----------


class MessagesUpsertData(WebhookPayloadModel):
    key: MessageKey
    message: MessageContent | None = None
    push_name: str | None = Field(
        None, alias="pushName", description="Sender's WhatsApp profile name"
    )
    message_timestamp: int | None = Field(None, alias="messageTimestamp")


class MessageUpdate(WebhookPayloadModel):
    status: Literal["delivered", "read", "played", "error", "pending"]


class MessagesUpdateEntry(WebhookPayloadModel):
    key: MessageKey
    update: MessageUpdate


class MessagesDeleteData(WebhookPayloadModel):
    keys: list[MessageKey]


class Reaction(WebhookPayloadModel):
    text: str = Field(..., description="Emoji; empty when a reaction is removed")
    key: MessageKey = Field(..., description="Key of the message reacted to")
    sender_timestamp_ms: str | int | None = Field(None, alias="senderTimestampMs")
    read: bool | None = None


class MessagesReactionEntry(WebhookPayloadModel):
    key: MessageKey
    reaction: Reaction


class Receipt(WebhookPayloadModel):
    user_jid: str = Field(..., alias="userJid")
    status: Literal["sent", "delivered", "read", "played"]
    t: int | None = Field(None, description="Timestamp of the status change")


class MessageReceiptUpdateEntry(WebhookPayloadModel):
    key: MessageKey
    receipt: Receipt


# ---------- Session payloads ----------


class MessageSentData(WebhookPayloadModel):
    key: MessageKey
    message: MessageContent | None = None
    status: str | None = Field(None, description="e.g. 'sent', 'pending'")


class SessionStatusData(WebhookPayloadModel):
    status: Literal[
        "connected", "disconnected", "connecting", "error", "logged_out", "need_scan"
    ]
    session_id: str | None = None
    reason: str | None = None


class QrCodeUpdatedData(WebhookPayloadModel):
    qr: str = Field(..., description="QR code payload or data URI")
    session_id: str | None = None


# ---------- Event envelopes ----------


class BaseWebhookEvent(BaseModel):
    """
    Envelope shared by every webhook event.

    Subclasses narrow ``type`` to one tag and ``data`` to its payload shape.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, strict=True)

    payload_is_array: ClassVar[bool] = False

    type: str | None
    timestamp: int | float | None = Field(None, description="Unix timestamp")
    session_id: str | None = Field(None, alias="sessionId")
    data: Any = None

    # (wire key, wire value) when the discriminant did not arrive as a
    # string under "type"
    _wire_discriminant: tuple[str, Any] | None = PrivateAttr(default=None)

    @property
    def event_type(self) -> WasenderWebhookEventType | None:
        """The known event type, or None for unrecognized events."""
        return WasenderWebhookEventType.from_value(self.type)

    @property
    def is_known(self) -> bool:
        return self.event_type is not None

    def to_wire(self) -> dict[str, Any]:
        """Serialize back to the JSON structure the server sent."""
        wire = self.model_dump(by_alias=True, exclude_unset=True, mode="json")
        if self._wire_discriminant is not None:
            field, value = self._wire_discriminant
            wire.pop("type", None)
            wire[field] = value
        return wire


class ChatsUpsertEvent(BaseWebhookEvent):
    payload_is_array: ClassVar[bool] = True
    type: Literal["chats.upsert"]
    data: list[ChatEntry]


class ChatsUpdateEvent(BaseWebhookEvent):
    payload_is_array: ClassVar[bool] = True
    type: Literal["chats.update"]
    data: list[ChatUpdate]


class ChatsDeleteEvent(BaseWebhookEvent):
    payload_is_array: ClassVar[bool] = True
    type: Literal["chats.delete"]
    data: list[str]


class GroupsUpsertEvent(BaseWebhookEvent):
    payload_is_array: ClassVar[bool] = True
    type: Literal["groups.upsert"]
    data: list[GroupMetadataEntry]


class GroupsUpdateEvent(BaseWebhookEvent):
    payload_is_array: ClassVar[bool] = True
    type: Literal["groups.update"]
    data: list[GroupMetadataUpdate]


class GroupParticipantsUpdateEvent(BaseWebhookEvent):
    type: Literal["group-participants.update"]
    data: GroupParticipantsUpdateData


class ContactsUpsertEvent(BaseWebhookEvent):
    payload_is_array: ClassVar[bool] = True
    type: Literal["contacts.upsert"]
    data: list[ContactEntry]


class ContactsUpdateEvent(BaseWebhookEvent):
    payload_is_array: ClassVar[bool] = True
    type: Literal["contacts.update"]
    data: list[ContactUpdate]


class MessagesUpsertEvent(BaseWebhookEvent):
    type: Literal["messages.upsert"]
    data: MessagesUpsertData


class MessagesUpdateEvent(BaseWebhookEvent):
    payload_is_array: ClassVar[bool] = True
    type: Literal["messages.update"]
    data: list[MessagesUpdateEntry]


class MessagesDeleteEvent(BaseWebhookEvent):
    type: Literal["messages.delete"]
    data: MessagesDeleteData


class MessagesReactionEvent(BaseWebhookEvent):
    payload_is_array: ClassVar[bool] = True
    type: Literal["messages.reaction"]
    data: list[MessagesReactionEntry]


class MessageReceiptUpdateEvent(BaseWebhookEvent):
    payload_is_array: ClassVar[bool] = True
    type: Literal["message-receipt.update"]
    data: list[MessageReceiptUpdateEntry]


class MessageSentEvent(BaseWebhookEvent):
    type: Literal["message.sent"]
    data: MessageSentData


class SessionStatusEvent(BaseWebhookEvent):
    type: Literal["session.status"]
    data: SessionStatusData


class QrCodeUpdatedEvent(BaseWebhookEvent):
    type: Literal["qrcode.updated"]
    data: QrCodeUpdatedData


class UnknownWebhookEvent(BaseWebhookEvent):
    """
    An event whose discriminant this client doesn't know (or, depending on
    the decoder policy, that has no discriminant at all).

    ``data`` is the raw JSON value. Applications should log and ignore it.
    Envelope fields are kept as received, without type checks.
    """

    type: str | None = None
    timestamp: Any = None
    session_id: Any = Field(None, alias="sessionId")
    data: Any = None


# Tag -> event class. Keys are the plain string values so lookups by the
# raw wire tag work.
WEBHOOK_EVENT_MODELS: dict[str, type[BaseWebhookEvent]] = {
    WasenderWebhookEventType.CHATS_UPSERT.value: ChatsUpsertEvent,
    WasenderWebhookEventType.CHATS_UPDATE.value: ChatsUpdateEvent,
    WasenderWebhookEventType.CHATS_DELETE.value: ChatsDeleteEvent,
    WasenderWebhookEventType.GROUPS_UPSERT.value: GroupsUpsertEvent,
    WasenderWebhookEventType.GROUPS_UPDATE.value: GroupsUpdateEvent,
    WasenderWebhookEventType.GROUP_PARTICIPANTS_UPDATE.value: GroupParticipantsUpdateEvent,
    WasenderWebhookEventType.CONTACTS_UPSERT.value: ContactsUpsertEvent,
    WasenderWebhookEventType.CONTACTS_UPDATE.value: ContactsUpdateEvent,
    WasenderWebhookEventType.MESSAGES_UPSERT.value: MessagesUpsertEvent,
    WasenderWebhookEventType.MESSAGES_UPDATE.value: MessagesUpdateEvent,
    WasenderWebhookEventType.MESSAGES_DELETE.value: MessagesDeleteEvent,
    WasenderWebhookEventType.MESSAGES_REACTION.value: MessagesReactionEvent,
    WasenderWebhookEventType.MESSAGE_RECEIPT_UPDATE.value: MessageReceiptUpdateEvent,
    WasenderWebhookEventType.MESSAGE_SENT.value: MessageSentEvent,
    WasenderWebhookEventType.SESSION_STATUS.value: SessionStatusEvent,
    WasenderWebhookEventType.QRCODE_UPDATED.value: QrCodeUpdatedEvent,
}

WasenderWebhookEvent = Union[
    ChatsUpsertEvent,
    ChatsUpdateEvent,
    ChatsDeleteEvent,
    GroupsUpsertEvent,
    GroupsUpdateEvent,
    GroupParticipantsUpdateEvent,
    ContactsUpsertEvent,
    ContactsUpdateEvent,
    MessagesUpsertEvent,
    MessagesUpdateEvent,
    MessagesDeleteEvent,
    MessagesReactionEvent,
    MessageReceiptUpdateEvent,
    MessageSentEvent,
    SessionStatusEvent,
    QrCodeUpdatedEvent,
    UnknownWebhookEvent,
]
