"""
Outbound message payloads for ``POST /send-message``.

Each payload type carries a client-side ``message_type`` discriminator
(wire alias ``messageType``) that selects the shape; it is not sent to the
API. Channel messages are plain text messages addressed to a channel JID
such as ``1234567890@newsletter``.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from wasenderapi.messaging.models.common import (
    WasenderModel,
    WasenderRequestModel,
    WasenderResponse,
    WasenderResult,
)


class ContactCardPayload(WasenderRequestModel):
    """Contact card shared with a ``contact`` message."""

    name: str = Field(..., min_length=1, description="Display name on the card")
    phone: str = Field(..., min_length=1, description="Phone number in E.164 format")


class LocationPinPayload(WasenderRequestModel):
    """Location shared with a ``location`` message."""

    latitude: float | str = Field(..., description="Latitude, number or string")
    longitude: float | str = Field(..., description="Longitude, number or string")
    name: str | None = Field(None, description="Name of the place")
    address: str | None = Field(None, description="Address of the place")


class BaseMessage(WasenderRequestModel):
    """Fields common to every outbound message."""

    to: str = Field(..., min_length=1, description="Recipient phone number or JID")
    text: str | None = Field(None, description="Body text or media caption")

    def to_api_payload(self) -> dict:
        return self.model_dump(
            by_alias=True, exclude_none=True, exclude={"message_type"}
        )


class TextMessage(BaseMessage):
    message_type: Literal["text"] = Field("text", alias="messageType")
    text: str = Field(..., min_length=1, description="Text content of the message")


class ImageUrlMessage(BaseMessage):
    message_type: Literal["image"] = Field("image", alias="messageType")
    image_url: str = Field(..., alias="imageUrl", description="Public image URL")


class VideoUrlMessage(BaseMessage):
    message_type: Literal["video"] = Field("video", alias="messageType")
    video_url: str = Field(..., alias="videoUrl", description="Public video URL")


class DocumentUrlMessage(BaseMessage):
    message_type: Literal["document"] = Field("document", alias="messageType")
    document_url: str = Field(
        ..., alias="documentUrl", description="Public document URL"
    )


class AudioUrlMessage(BaseMessage):
    message_type: Literal["audio"] = Field("audio", alias="messageType")
    audio_url: str = Field(..., alias="audioUrl", description="Public audio URL")


class StickerUrlMessage(BaseMessage):
    message_type: Literal["sticker"] = Field("sticker", alias="messageType")
    sticker_url: str = Field(
        ..., alias="stickerUrl", description="Public .webp sticker URL"
    )


class ContactCardMessage(BaseMessage):
    message_type: Literal["contact"] = Field("contact", alias="messageType")
    contact: ContactCardPayload


class LocationPinMessage(BaseMessage):
    message_type: Literal["location"] = Field("location", alias="messageType")
    location: LocationPinPayload


# Aliases kept for parity with the API documentation naming
TextOnlyMessage = TextMessage
ChannelTextMessage = TextMessage

WasenderMessagePayload = Annotated[
    Union[
        TextMessage,
        ImageUrlMessage,
        VideoUrlMessage,
        DocumentUrlMessage,
        AudioUrlMessage,
        StickerUrlMessage,
        ContactCardMessage,
        LocationPinMessage,
    ],
    Field(discriminator="message_type"),
]


class SendMessageData(WasenderModel):
    """``data`` of a successful send."""

    msg_id: int | str | None = Field(None, alias="msgId")
    jid: str | None = None
    status: str | None = None


SendMessageResponse = WasenderResponse[SendMessageData]
WasenderSendResult = WasenderResult[SendMessageResponse]
SendChannelMessageResult = WasenderSendResult
