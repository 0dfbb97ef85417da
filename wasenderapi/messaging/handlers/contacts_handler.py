"""
Wasender contacts handler.

Read-only contact lookups plus block/unblock, all scoped to the session
API key.
"""

from urllib.parse import quote

from wasenderapi.core.logging.logger import get_logger
from wasenderapi.messaging.client.http_client import WasenderHttpClient
from wasenderapi.messaging.models.contacts import (
    ContactActionResponse,
    ContactActionResult,
    GetAllContactsResponse,
    GetAllContactsResult,
    GetContactInfoResponse,
    GetContactInfoResult,
    GetContactProfilePictureResponse,
    GetContactProfilePictureResult,
)


def _jid_path(jid: str) -> str:
    return quote(jid, safe="@")


class WasenderContactsHandler:
    """Handler for ``/contacts`` endpoints."""

    def __init__(self, client: WasenderHttpClient):
        self.client = client
        self.logger = get_logger(__name__)

    async def get_contacts(self) -> GetAllContactsResult:
        return await self.client.request("GET", "contacts", GetAllContactsResponse)

    async def get_contact_info(self, contact_phone_number: str) -> GetContactInfoResult:
        """
        Fetch one contact.

        Args:
            contact_phone_number: Phone number or JID of the contact
        """
        return await self.client.request(
            "GET", f"contacts/{_jid_path(contact_phone_number)}", GetContactInfoResponse
        )

    async def get_contact_profile_picture(
        self, contact_phone_number: str
    ) -> GetContactProfilePictureResult:
        return await self.client.request(
            "GET",
            f"contacts/{_jid_path(contact_phone_number)}/picture",
            GetContactProfilePictureResponse,
        )

    async def block_contact(self, contact_phone_number: str) -> ContactActionResult:
        self.logger.info(f"Blocking contact {contact_phone_number}")
        return await self.client.request(
            "POST",
            f"contacts/{_jid_path(contact_phone_number)}/block",
            ContactActionResponse,
        )

    async def unblock_contact(self, contact_phone_number: str) -> ContactActionResult:
        self.logger.info(f"Unblocking contact {contact_phone_number}")
        return await self.client.request(
            "POST",
            f"contacts/{_jid_path(contact_phone_number)}/unblock",
            ContactActionResponse,
        )
