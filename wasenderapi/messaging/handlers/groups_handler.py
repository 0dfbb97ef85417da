"""
Wasender groups handler.

Group listing, metadata, participant management and settings updates.
"""

from urllib.parse import quote

from wasenderapi.core.logging.logger import get_logger
from wasenderapi.messaging.client.http_client import WasenderHttpClient
from wasenderapi.messaging.models.groups import (
    GetAllGroupsResponse,
    GetAllGroupsResult,
    GetGroupMetadataResponse,
    GetGroupMetadataResult,
    GetGroupParticipantsResponse,
    GetGroupParticipantsResult,
    ModifyGroupParticipantsPayload,
    ModifyGroupParticipantsResponse,
    ModifyGroupParticipantsResult,
    UpdateGroupSettingsPayload,
    UpdateGroupSettingsResponse,
    UpdateGroupSettingsResult,
)


class WasenderGroupsHandler:
    """
    Handler for ``/groups`` endpoints.

    Group JIDs look like ``123456789-987654321@g.us``; they are placed in the
    URL path as-is apart from percent-encoding.
    """

    def __init__(self, client: WasenderHttpClient):
        self.client = client
        self.logger = get_logger(__name__)

    @staticmethod
    def _group_path(group_jid: str, suffix: str = "") -> str:
        path = f"groups/{quote(group_jid, safe='@')}"
        return f"{path}/{suffix}" if suffix else path

    async def get_groups(self) -> GetAllGroupsResult:
        return await self.client.request("GET", "groups", GetAllGroupsResponse)

    async def get_group_metadata(self, group_jid: str) -> GetGroupMetadataResult:
        return await self.client.request(
            "GET", self._group_path(group_jid, "metadata"), GetGroupMetadataResponse
        )

    async def get_group_participants(
        self, group_jid: str
    ) -> GetGroupParticipantsResult:
        return await self.client.request(
            "GET",
            self._group_path(group_jid, "participants"),
            GetGroupParticipantsResponse,
        )

    async def _modify_participants(
        self, group_jid: str, action: str, participants: list[str]
    ) -> ModifyGroupParticipantsResult:
        payload = ModifyGroupParticipantsPayload(participants=participants)
        self.logger.info(
            f"{action.capitalize()} {len(participants)} participant(s) in {group_jid}"
        )
        return await self.client.request(
            "POST",
            self._group_path(group_jid, f"participants/{action}"),
            ModifyGroupParticipantsResponse,
            json_body=payload.to_api_payload(),
        )

    async def add_group_participants(
        self, group_jid: str, participants: list[str]
    ) -> ModifyGroupParticipantsResult:
        """
        Add participants to a group.

        Args:
            group_jid: Group JID
            participants: Phone numbers (E.164) or JIDs; at least one

        Raises:
            pydantic.ValidationError: empty participant list
            WasenderAPIError: request failed
        """
        return await self._modify_participants(group_jid, "add", participants)

    async def remove_group_participants(
        self, group_jid: str, participants: list[str]
    ) -> ModifyGroupParticipantsResult:
        return await self._modify_participants(group_jid, "remove", participants)

    async def update_group_settings(
        self, group_jid: str, settings: UpdateGroupSettingsPayload | dict
    ) -> UpdateGroupSettingsResult:
        if isinstance(settings, dict):
            settings = UpdateGroupSettingsPayload.model_validate(settings)
        return await self.client.request(
            "PUT",
            self._group_path(group_jid, "settings"),
            UpdateGroupSettingsResponse,
            json_body=settings.to_api_payload(),
        )
