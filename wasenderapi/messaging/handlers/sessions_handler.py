"""
Wasender WhatsApp session handler.

Session lifecycle endpoints authenticate with the account personal access
token, not the per-session API key; ``get_session_status`` is the exception
and reports on the session the API key belongs to.
"""

from wasenderapi.core.logging.logger import get_logger
from wasenderapi.messaging.client.http_client import AuthScope, WasenderHttpClient
from wasenderapi.messaging.models.sessions import (
    ConnectSessionPayload,
    ConnectSessionResponse,
    ConnectSessionResult,
    CreateWhatsAppSessionPayload,
    CreateWhatsAppSessionResponse,
    CreateWhatsAppSessionResult,
    DeleteWhatsAppSessionResponse,
    DeleteWhatsAppSessionResult,
    DisconnectSessionResponse,
    DisconnectSessionResult,
    GetAllWhatsAppSessionsResponse,
    GetAllWhatsAppSessionsResult,
    GetQRCodeResponse,
    GetQRCodeResult,
    GetSessionStatusResult,
    GetWhatsAppSessionDetailsResponse,
    GetWhatsAppSessionDetailsResult,
    RegenerateApiKeyResponse,
    RegenerateApiKeyResult,
    SessionStatusResponse,
    UpdateWhatsAppSessionPayload,
    UpdateWhatsAppSessionResponse,
    UpdateWhatsAppSessionResult,
)

PAT = AuthScope.PERSONAL_ACCESS_TOKEN


class WasenderSessionsHandler:
    """Handler for ``/whatsapp-sessions`` and ``/status``."""

    def __init__(self, client: WasenderHttpClient):
        self.client = client
        self.logger = get_logger(__name__)

    async def get_all_whatsapp_sessions(self) -> GetAllWhatsAppSessionsResult:
        return await self.client.request(
            "GET", "whatsapp-sessions", GetAllWhatsAppSessionsResponse, auth=PAT
        )

    async def create_whatsapp_session(
        self, payload: CreateWhatsAppSessionPayload | dict
    ) -> CreateWhatsAppSessionResult:
        if isinstance(payload, dict):
            payload = CreateWhatsAppSessionPayload.model_validate(payload)
        self.logger.info(f"Creating WhatsApp session '{payload.name}'")
        return await self.client.request(
            "POST",
            "whatsapp-sessions",
            CreateWhatsAppSessionResponse,
            auth=PAT,
            json_body=payload.to_api_payload(),
        )

    async def get_whatsapp_session_details(
        self, session_id: int | str
    ) -> GetWhatsAppSessionDetailsResult:
        return await self.client.request(
            "GET",
            f"whatsapp-sessions/{session_id}",
            GetWhatsAppSessionDetailsResponse,
            auth=PAT,
        )

    async def update_whatsapp_session(
        self, session_id: int | str, payload: UpdateWhatsAppSessionPayload | dict
    ) -> UpdateWhatsAppSessionResult:
        if isinstance(payload, dict):
            payload = UpdateWhatsAppSessionPayload.model_validate(payload)
        return await self.client.request(
            "PUT",
            f"whatsapp-sessions/{session_id}",
            UpdateWhatsAppSessionResponse,
            auth=PAT,
            json_body=payload.to_api_payload(),
        )

    async def delete_whatsapp_session(
        self, session_id: int | str
    ) -> DeleteWhatsAppSessionResult:
        self.logger.info(f"Deleting WhatsApp session {session_id}")
        return await self.client.request(
            "DELETE",
            f"whatsapp-sessions/{session_id}",
            DeleteWhatsAppSessionResponse,
            auth=PAT,
        )

    async def connect_whatsapp_session(
        self, session_id: int | str, qr_as_image: bool | None = None
    ) -> ConnectSessionResult:
        """
        Start connecting a session; the response may carry a QR code.

        Args:
            session_id: Session identifier
            qr_as_image: Ask for the QR code as an image instead of raw data;
                omitted from the body when None
        """
        payload = ConnectSessionPayload(qr_as_image=qr_as_image).to_api_payload()
        return await self.client.request(
            "POST",
            f"whatsapp-sessions/{session_id}/connect",
            ConnectSessionResponse,
            auth=PAT,
            json_body=payload or None,
        )

    async def get_whatsapp_session_qrcode(
        self, session_id: int | str
    ) -> GetQRCodeResult:
        return await self.client.request(
            "GET",
            f"whatsapp-sessions/{session_id}/qrcode",
            GetQRCodeResponse,
            auth=PAT,
        )

    async def disconnect_whatsapp_session(
        self, session_id: int | str
    ) -> DisconnectSessionResult:
        return await self.client.request(
            "POST",
            f"whatsapp-sessions/{session_id}/disconnect",
            DisconnectSessionResponse,
            auth=PAT,
        )

    async def regenerate_api_key(self, session_id: int | str) -> RegenerateApiKeyResult:
        self.logger.warning(
            f"Regenerating API key for session {session_id}; the old key stops working"
        )
        return await self.client.request(
            "POST",
            f"whatsapp-sessions/{session_id}/regenerate-key",
            RegenerateApiKeyResponse,
            auth=PAT,
        )

    async def get_session_status(self) -> GetSessionStatusResult:
        return await self.client.request("GET", "status", SessionStatusResponse)
