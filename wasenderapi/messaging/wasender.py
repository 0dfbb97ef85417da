"""
Wasender client facade.

One object per WhatsApp session: outbound messaging, contacts, groups and
session management over the REST API, plus the inbound webhook entry point
bound to the configured webhook secret.

Example:
    async with create_wasender(api_key="...") as wasender:
        result = await wasender.send_text(to="+15551234567", text="Hello")
        print(result.data.msg_id, result.rate_limit)
"""

from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter

from wasenderapi.core.config.settings import settings
from wasenderapi.core.logging.logger import get_logger
from wasenderapi.core.types import MissingTypePolicy
from wasenderapi.messaging.client.http_client import RetryConfig, WasenderHttpClient
from wasenderapi.messaging.client.transport import HttpTransport
from wasenderapi.messaging.handlers.contacts_handler import WasenderContactsHandler
from wasenderapi.messaging.handlers.groups_handler import WasenderGroupsHandler
from wasenderapi.messaging.handlers.sessions_handler import WasenderSessionsHandler
from wasenderapi.messaging.models.contacts import (
    ContactActionResult,
    GetAllContactsResult,
    GetContactInfoResult,
    GetContactProfilePictureResult,
)
from wasenderapi.messaging.models.groups import (
    GetAllGroupsResult,
    GetGroupMetadataResult,
    GetGroupParticipantsResult,
    ModifyGroupParticipantsResult,
    UpdateGroupSettingsPayload,
    UpdateGroupSettingsResult,
)
from wasenderapi.messaging.models.messages import (
    AudioUrlMessage,
    ContactCardMessage,
    ContactCardPayload,
    DocumentUrlMessage,
    ImageUrlMessage,
    LocationPinMessage,
    LocationPinPayload,
    SendMessageResponse,
    StickerUrlMessage,
    TextMessage,
    VideoUrlMessage,
    WasenderMessagePayload,
    WasenderSendResult,
)
from wasenderapi.messaging.models.sessions import (
    ConnectSessionResult,
    CreateWhatsAppSessionPayload,
    CreateWhatsAppSessionResult,
    DeleteWhatsAppSessionResult,
    DisconnectSessionResult,
    GetAllWhatsAppSessionsResult,
    GetQRCodeResult,
    GetSessionStatusResult,
    GetWhatsAppSessionDetailsResult,
    RegenerateApiKeyResult,
    UpdateWhatsAppSessionPayload,
    UpdateWhatsAppSessionResult,
)
from wasenderapi.webhooks.adapters import WebhookRequestAdapter
from wasenderapi.webhooks.handler import WasenderWebhookHandler
from wasenderapi.webhooks.models import WasenderWebhookEvent
from wasenderapi.webhooks.verifier import SignatureVerifier

_message_payload_adapter: TypeAdapter[WasenderMessagePayload] = TypeAdapter(
    WasenderMessagePayload
)


class Wasender:
    """
    Complete Wasender API client.

    Uses composition:
    - WasenderHttpClient: authentication, transport, rate limits and retries
    - WasenderContactsHandler / WasenderGroupsHandler / WasenderSessionsHandler:
      endpoint groups
    - WasenderWebhookHandler: inbound webhook verification and decoding

    Credentials are optional at construction and checked per call, so a
    webhook-only deployment needs nothing but ``webhook_secret``.
    """

    def __init__(
        self,
        api_key: str | None = None,
        personal_access_token: str | None = None,
        *,
        base_url: str = settings.base_url,
        transport: HttpTransport | None = None,
        retry: RetryConfig | None = None,
        webhook_secret: str | None = None,
        webhook_verifier: SignatureVerifier | None = None,
        missing_type: MissingTypePolicy | str = MissingTypePolicy.RAISE,
    ):
        self.client = WasenderHttpClient(
            api_key,
            personal_access_token,
            base_url=base_url,
            transport=transport,
            retry=retry,
        )
        self.contacts = WasenderContactsHandler(self.client)
        self.groups = WasenderGroupsHandler(self.client)
        self.sessions = WasenderSessionsHandler(self.client)
        self.webhooks = WasenderWebhookHandler(
            webhook_secret, verifier=webhook_verifier, missing_type=missing_type
        )
        self.logger = get_logger(__name__)

    async def __aenter__(self) -> "Wasender":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self.client.close()

    # Messaging

    async def send(
        self, payload: WasenderMessagePayload | Mapping[str, Any]
    ) -> WasenderSendResult:
        """
        Send any supported message through ``POST /send-message``.

        Args:
            payload: A message model, or a mapping carrying ``messageType``
                (or ``message_type``) plus the fields for that kind

        Returns:
            WasenderSendResult with the message id and rate limit info

        Raises:
            pydantic.ValidationError: mapping does not describe a valid message
            WasenderAPIError: missing API key or request failure
        """
        if isinstance(payload, Mapping):
            payload = _message_payload_adapter.validate_python(dict(payload))

        self.logger.debug(f"Sending {payload.message_type} message to {payload.to}")
        return await self.client.request(
            "POST",
            "send-message",
            SendMessageResponse,
            json_body=payload.to_api_payload(),
        )

    async def send_text(self, to: str, text: str) -> WasenderSendResult:
        return await self.send(TextMessage(to=to, text=text))

    async def send_image(
        self, to: str, image_url: str, text: str | None = None
    ) -> WasenderSendResult:
        return await self.send(ImageUrlMessage(to=to, image_url=image_url, text=text))

    async def send_video(
        self, to: str, video_url: str, text: str | None = None
    ) -> WasenderSendResult:
        return await self.send(VideoUrlMessage(to=to, video_url=video_url, text=text))

    async def send_document(
        self, to: str, document_url: str, text: str | None = None
    ) -> WasenderSendResult:
        return await self.send(
            DocumentUrlMessage(to=to, document_url=document_url, text=text)
        )

    async def send_audio(self, to: str, audio_url: str) -> WasenderSendResult:
        return await self.send(AudioUrlMessage(to=to, audio_url=audio_url))

    async def send_sticker(self, to: str, sticker_url: str) -> WasenderSendResult:
        return await self.send(StickerUrlMessage(to=to, sticker_url=sticker_url))

    async def send_contact(
        self,
        to: str,
        contact: ContactCardPayload | Mapping[str, Any],
        text: str | None = None,
    ) -> WasenderSendResult:
        if isinstance(contact, Mapping):
            contact = ContactCardPayload.model_validate(dict(contact))
        return await self.send(ContactCardMessage(to=to, contact=contact, text=text))

    async def send_location(
        self,
        to: str,
        latitude: float | str,
        longitude: float | str,
        name: str | None = None,
        address: str | None = None,
        text: str | None = None,
    ) -> WasenderSendResult:
        location = LocationPinPayload(
            latitude=latitude, longitude=longitude, name=name, address=address
        )
        return await self.send(LocationPinMessage(to=to, location=location, text=text))

    # Contacts

    async def get_contacts(self) -> GetAllContactsResult:
        return await self.contacts.get_contacts()

    async def get_contact_info(self, contact_phone_number: str) -> GetContactInfoResult:
        return await self.contacts.get_contact_info(contact_phone_number)

    async def get_contact_profile_picture(
        self, contact_phone_number: str
    ) -> GetContactProfilePictureResult:
        return await self.contacts.get_contact_profile_picture(contact_phone_number)

    async def block_contact(self, contact_phone_number: str) -> ContactActionResult:
        return await self.contacts.block_contact(contact_phone_number)

    async def unblock_contact(self, contact_phone_number: str) -> ContactActionResult:
        return await self.contacts.unblock_contact(contact_phone_number)

    # Groups

    async def get_groups(self) -> GetAllGroupsResult:
        return await self.groups.get_groups()

    async def get_group_metadata(self, group_jid: str) -> GetGroupMetadataResult:
        return await self.groups.get_group_metadata(group_jid)

    async def get_group_participants(
        self, group_jid: str
    ) -> GetGroupParticipantsResult:
        return await self.groups.get_group_participants(group_jid)

    async def add_group_participants(
        self, group_jid: str, participants: list[str]
    ) -> ModifyGroupParticipantsResult:
        return await self.groups.add_group_participants(group_jid, participants)

    async def remove_group_participants(
        self, group_jid: str, participants: list[str]
    ) -> ModifyGroupParticipantsResult:
        return await self.groups.remove_group_participants(group_jid, participants)

    async def update_group_settings(
        self, group_jid: str, settings: UpdateGroupSettingsPayload | dict
    ) -> UpdateGroupSettingsResult:
        return await self.groups.update_group_settings(group_jid, settings)

    # Sessions

    async def get_all_whatsapp_sessions(self) -> GetAllWhatsAppSessionsResult:
        return await self.sessions.get_all_whatsapp_sessions()

    async def create_whatsapp_session(
        self, payload: CreateWhatsAppSessionPayload | dict
    ) -> CreateWhatsAppSessionResult:
        return await self.sessions.create_whatsapp_session(payload)

    async def get_whatsapp_session_details(
        self, session_id: int | str
    ) -> GetWhatsAppSessionDetailsResult:
        return await self.sessions.get_whatsapp_session_details(session_id)

    async def update_whatsapp_session(
        self, session_id: int | str, payload: UpdateWhatsAppSessionPayload | dict
    ) -> UpdateWhatsAppSessionResult:
        return await self.sessions.update_whatsapp_session(session_id, payload)

    async def delete_whatsapp_session(
        self, session_id: int | str
    ) -> DeleteWhatsAppSessionResult:
        return await self.sessions.delete_whatsapp_session(session_id)

    async def connect_whatsapp_session(
        self, session_id: int | str, qr_as_image: bool | None = None
    ) -> ConnectSessionResult:
        return await self.sessions.connect_whatsapp_session(session_id, qr_as_image)

    async def get_whatsapp_session_qrcode(
        self, session_id: int | str
    ) -> GetQRCodeResult:
        return await self.sessions.get_whatsapp_session_qrcode(session_id)

    async def disconnect_whatsapp_session(
        self, session_id: int | str
    ) -> DisconnectSessionResult:
        return await self.sessions.disconnect_whatsapp_session(session_id)

    async def regenerate_api_key(self, session_id: int | str) -> RegenerateApiKeyResult:
        return await self.sessions.regenerate_api_key(session_id)

    async def get_session_status(self) -> GetSessionStatusResult:
        return await self.sessions.get_session_status()

    # Webhooks

    async def handle_webhook_event(
        self, adapter: WebhookRequestAdapter
    ) -> WasenderWebhookEvent:
        """Verify and decode an inbound webhook with this client's secret."""
        return await self.webhooks.handle(adapter)


def create_wasender(
    api_key: str | None = None,
    personal_access_token: str | None = None,
    base_url: str | None = None,
    transport: HttpTransport | None = None,
    retry: RetryConfig | None = None,
    webhook_secret: str | None = None,
    **kwargs: Any,
) -> Wasender:
    """
    Build a Wasender client, filling unset options from environment settings.

    Retries come from ``WASENDER_RETRY_ENABLED`` / ``WASENDER_MAX_RETRIES``
    when no ``retry`` config is passed.
    """
    if retry is None:
        retry = RetryConfig(
            enabled=settings.retry_enabled, max_retries=settings.max_retries
        )
    return Wasender(
        api_key or settings.api_key,
        personal_access_token or settings.personal_access_token,
        base_url=base_url or settings.base_url,
        transport=transport,
        retry=retry,
        webhook_secret=webhook_secret or settings.webhook_secret,
        **kwargs,
    )
