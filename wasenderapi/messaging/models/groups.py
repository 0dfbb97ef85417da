"""
Group models for the ``/groups`` endpoints.

``GroupParticipant`` is also the participant shape used by group webhook
events.
"""

from pydantic import Field

from wasenderapi.messaging.models.common import (
    WasenderModel,
    WasenderRequestModel,
    WasenderResponse,
    WasenderResult,
)


class GroupParticipant(WasenderModel):
    id: str = Field(..., description="Participant JID")
    admin: str | None = Field(
        None, description="'admin', 'superadmin' or None for regular members"
    )

    @property
    def is_admin(self) -> bool:
        return self.admin in ("admin", "superadmin")

    @property
    def is_super_admin(self) -> bool:
        return self.admin == "superadmin"


class BasicGroupInfo(WasenderModel):
    id: str = Field(..., description="Group JID, e.g. '123-456@g.us'")
    name: str | None = Field(None, description="Group name or subject")
    img_url: str | None = Field(None, alias="imgUrl")


class GroupMetadata(BasicGroupInfo):
    creation: int | None = Field(None, description="Unix timestamp of creation")
    owner: str | None = Field(None, description="JID of the group owner")
    desc: str | None = None
    desc_owner: str | None = Field(None, alias="descOwner")
    desc_id: str | None = Field(None, alias="descId")
    restrict: bool | None = Field(None, description="Only admins edit group info")
    announce: bool | None = Field(None, description="Only admins send messages")
    size: int | None = None
    subject_owner: str | None = Field(None, alias="subjectOwner")
    subject_time: int | None = Field(None, alias="subjectTime")
    participants: list[GroupParticipant] = Field(default_factory=list)
    subject: str | None = None


class ModifyGroupParticipantsPayload(WasenderRequestModel):
    participants: list[str] = Field(
        ..., min_length=1, description="Participant phone numbers (E.164) or JIDs"
    )


class UpdateGroupSettingsPayload(WasenderRequestModel):
    subject: str | None = None
    description: str | None = None
    announce: bool | None = None
    restrict: bool | None = None


class ParticipantActionStatus(WasenderModel):
    """Outcome of adding or removing one participant."""

    status: int
    jid: str
    message: str


class UpdateGroupSettingsResponseData(WasenderModel):
    subject: str | None = None
    description: str | None = None


GetAllGroupsResponse = WasenderResponse[list[BasicGroupInfo]]
GetGroupMetadataResponse = WasenderResponse[GroupMetadata]
GetGroupParticipantsResponse = WasenderResponse[list[GroupParticipant]]
ModifyGroupParticipantsResponse = WasenderResponse[list[ParticipantActionStatus]]
UpdateGroupSettingsResponse = WasenderResponse[UpdateGroupSettingsResponseData]

GetAllGroupsResult = WasenderResult[GetAllGroupsResponse]
GetGroupMetadataResult = WasenderResult[GetGroupMetadataResponse]
GetGroupParticipantsResult = WasenderResult[GetGroupParticipantsResponse]
ModifyGroupParticipantsResult = WasenderResult[ModifyGroupParticipantsResponse]
UpdateGroupSettingsResult = WasenderResult[UpdateGroupSettingsResponse]
