"""
WhatsApp session models for the ``/whatsapp-sessions`` and ``/status``
endpoints.

Session lifecycle is owned by the remote server; these models only mirror
what it reports.
"""

from enum import Enum

from pydantic import Field

from wasenderapi.messaging.models.common import (
    WasenderModel,
    WasenderRequestModel,
    WasenderResponse,
    WasenderResult,
)


class WhatsAppSessionStatus(str, Enum):
    """Session states reported by the API (the API may send them upper-cased)."""

    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    NEED_SCAN = "need_scan"
    CONNECTING = "connecting"
    LOGGED_OUT = "logged_out"
    EXPIRED = "expired"


class WhatsAppSession(WasenderModel):
    id: int
    name: str
    phone_number: str
    status: str
    account_protection: bool = False
    log_messages: bool = False
    webhook_url: str | None = None
    webhook_enabled: bool = False
    webhook_events: list[str] | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @property
    def normalized_status(self) -> WhatsAppSessionStatus | None:
        """Status as an enum member, None for states this client doesn't know."""
        try:
            return WhatsAppSessionStatus(self.status.lower())
        except ValueError:
            return None


class CreateWhatsAppSessionPayload(WasenderRequestModel):
    name: str = Field(..., min_length=1)
    phone_number: str = Field(..., min_length=1)
    account_protection: bool
    log_messages: bool
    webhook_url: str | None = None
    webhook_enabled: bool | None = None
    webhook_events: list[str] | None = None


class UpdateWhatsAppSessionPayload(WasenderRequestModel):
    name: str | None = None
    phone_number: str | None = None
    account_protection: bool | None = None
    log_messages: bool | None = None
    webhook_url: str | None = None
    webhook_enabled: bool | None = None
    webhook_events: list[str] | None = None


class ConnectSessionPayload(WasenderRequestModel):
    qr_as_image: bool | None = None


class ConnectSessionResponseData(WasenderModel):
    status: str
    qr_code: str | None = Field(None, alias="qrCode")
    message: str | None = None


class QRCodeResponseData(WasenderModel):
    qr_code: str = Field(..., alias="qrCode")


class DisconnectSessionResponseData(WasenderModel):
    status: str
    message: str | None = None


class RegenerateApiKeyResponse(WasenderModel):
    """Body of ``regenerate-key``; it has no ``data`` wrapper."""

    success: bool = True
    api_key: str


class SessionStatusResponse(WasenderModel):
    """Body of ``GET /status``; a bare ``{"status": ...}`` object."""

    status: str


GetAllWhatsAppSessionsResponse = WasenderResponse[list[WhatsAppSession]]
GetWhatsAppSessionDetailsResponse = WasenderResponse[WhatsAppSession]
CreateWhatsAppSessionResponse = WasenderResponse[WhatsAppSession]
UpdateWhatsAppSessionResponse = WasenderResponse[WhatsAppSession]
DeleteWhatsAppSessionResponse = WasenderResponse[None]
ConnectSessionResponse = WasenderResponse[ConnectSessionResponseData]
GetQRCodeResponse = WasenderResponse[QRCodeResponseData]
DisconnectSessionResponse = WasenderResponse[DisconnectSessionResponseData]

GetAllWhatsAppSessionsResult = WasenderResult[GetAllWhatsAppSessionsResponse]
GetWhatsAppSessionDetailsResult = WasenderResult[GetWhatsAppSessionDetailsResponse]
CreateWhatsAppSessionResult = WasenderResult[CreateWhatsAppSessionResponse]
UpdateWhatsAppSessionResult = WasenderResult[UpdateWhatsAppSessionResponse]
DeleteWhatsAppSessionResult = WasenderResult[DeleteWhatsAppSessionResponse]
ConnectSessionResult = WasenderResult[ConnectSessionResponse]
GetQRCodeResult = WasenderResult[GetQRCodeResponse]
DisconnectSessionResult = WasenderResult[DisconnectSessionResponse]
RegenerateApiKeyResult = WasenderResult[RegenerateApiKeyResponse]
GetSessionStatusResult = WasenderResult[SessionStatusResponse]
