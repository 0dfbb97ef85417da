"""
Contact models for the ``/contacts`` endpoints.
"""

from pydantic import Field

from wasenderapi.messaging.models.common import (
    WasenderModel,
    WasenderResponse,
    WasenderResult,
)


class Contact(WasenderModel):
    """A WhatsApp contact as returned by the API."""

    jid: str = Field(..., description="Contact JID, typically the phone number")
    name: str | None = Field(None, description="Name saved by the user")
    notify: str | None = Field(None, description="Push name of the contact")
    verified_name: str | None = Field(
        None, alias="verifiedName", description="Verified business name"
    )
    img_url: str | None = Field(
        None, alias="imgUrl", description="Profile picture URL"
    )
    status: str | None = Field(None, description="About text of the contact")
    exists: bool | None = Field(
        None, description="Whether the number is on WhatsApp (contact info only)"
    )


class ContactProfilePicture(WasenderModel):
    img_url: str | None = Field(None, alias="imgUrl")


class ContactActionData(WasenderModel):
    message: str


GetAllContactsResponse = WasenderResponse[list[Contact]]
GetContactInfoResponse = WasenderResponse[Contact]
GetContactProfilePictureResponse = WasenderResponse[ContactProfilePicture]
ContactActionResponse = WasenderResponse[ContactActionData]

GetAllContactsResult = WasenderResult[GetAllContactsResponse]
GetContactInfoResult = WasenderResult[GetContactInfoResponse]
GetContactProfilePictureResult = WasenderResult[GetContactProfilePictureResponse]
ContactActionResult = WasenderResult[ContactActionResponse]
