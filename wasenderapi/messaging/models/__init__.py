"""
Request and response models for the Wasender REST API.

Usage:
    from wasenderapi.messaging.models import TextMessage, Contact, GroupMetadata
"""

from .common import WasenderModel, WasenderRequestModel, WasenderResponse, WasenderResult
from .contacts import (
    Contact,
    ContactActionData,
    ContactActionResult,
    ContactProfilePicture,
    GetAllContactsResult,
    GetContactInfoResult,
    GetContactProfilePictureResult,
)
from .groups import (
    BasicGroupInfo,
    GetAllGroupsResult,
    GetGroupMetadataResult,
    GetGroupParticipantsResult,
    GroupMetadata,
    GroupParticipant,
    ModifyGroupParticipantsPayload,
    ModifyGroupParticipantsResult,
    ParticipantActionStatus,
    UpdateGroupSettingsPayload,
    UpdateGroupSettingsResponseData,
    UpdateGroupSettingsResult,
)
from .messages import (
    AudioUrlMessage,
    BaseMessage,
    ChannelTextMessage,
    ContactCardMessage,
    ContactCardPayload,
    DocumentUrlMessage,
    ImageUrlMessage,
    LocationPinMessage,
    LocationPinPayload,
    SendChannelMessageResult,
    SendMessageData,
    StickerUrlMessage,
    TextMessage,
    TextOnlyMessage,
    VideoUrlMessage,
    WasenderMessagePayload,
    WasenderSendResult,
)
from .sessions import (
    ConnectSessionPayload,
    ConnectSessionResponseData,
    ConnectSessionResult,
    CreateWhatsAppSessionPayload,
    CreateWhatsAppSessionResult,
    DeleteWhatsAppSessionResult,
    DisconnectSessionResponseData,
    DisconnectSessionResult,
    GetAllWhatsAppSessionsResult,
    GetQRCodeResult,
    GetSessionStatusResult,
    GetWhatsAppSessionDetailsResult,
    QRCodeResponseData,
    RegenerateApiKeyResponse,
    RegenerateApiKeyResult,
    SessionStatusResponse,
    UpdateWhatsAppSessionPayload,
    UpdateWhatsAppSessionResult,
    WhatsAppSession,
    WhatsAppSessionStatus,
)

__all__ = [
    # Common
    "WasenderModel",
    "WasenderRequestModel",
    "WasenderResponse",
    "WasenderResult",
    # Messages
    "BaseMessage",
    "TextMessage",
    "TextOnlyMessage",
    "ChannelTextMessage",
    "ImageUrlMessage",
    "VideoUrlMessage",
    "DocumentUrlMessage",
    "AudioUrlMessage",
    "StickerUrlMessage",
    "ContactCardMessage",
    "ContactCardPayload",
    "LocationPinMessage",
    "LocationPinPayload",
    "WasenderMessagePayload",
    "SendMessageData",
    "WasenderSendResult",
    "SendChannelMessageResult",
    # Contacts
    "Contact",
    "ContactActionData",
    "ContactProfilePicture",
    "GetAllContactsResult",
    "GetContactInfoResult",
    "GetContactProfilePictureResult",
    "ContactActionResult",
    # Groups
    "BasicGroupInfo",
    "GroupMetadata",
    "GroupParticipant",
    "ModifyGroupParticipantsPayload",
    "UpdateGroupSettingsPayload",
    "ParticipantActionStatus",
    "UpdateGroupSettingsResponseData",
    "GetAllGroupsResult",
    "GetGroupMetadataResult",
    "GetGroupParticipantsResult",
    "ModifyGroupParticipantsResult",
    "UpdateGroupSettingsResult",
    # Sessions
    "WhatsAppSession",
    "WhatsAppSessionStatus",
    "CreateWhatsAppSessionPayload",
    "UpdateWhatsAppSessionPayload",
    "ConnectSessionPayload",
    "ConnectSessionResponseData",
    "QRCodeResponseData",
    "DisconnectSessionResponseData",
    "RegenerateApiKeyResponse",
    "SessionStatusResponse",
    "GetAllWhatsAppSessionsResult",
    "GetWhatsAppSessionDetailsResult",
    "CreateWhatsAppSessionResult",
    "UpdateWhatsAppSessionResult",
    "DeleteWhatsAppSessionResult",
    "ConnectSessionResult",
    "GetQRCodeResult",
    "DisconnectSessionResult",
    "RegenerateApiKeyResult",
    "GetSessionStatusResult",
]
