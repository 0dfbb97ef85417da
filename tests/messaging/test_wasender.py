"""
Tests for the Wasender facade: endpoints, payloads and token scopes.
"""

import pytest
from conftest import (
    TEST_API_KEY,
    TEST_BASE_URL,
    TEST_PERSONAL_ACCESS_TOKEN,
    TEST_WEBHOOK_SECRET,
    FakeTransport,
    json_response,
)
from pydantic import ValidationError

from wasenderapi.core.config.settings import settings
from wasenderapi.core.errors import WasenderAPIError, WebhookNotConfiguredError
from wasenderapi.messaging.client.http_client import RetryConfig
from wasenderapi.messaging.models.groups import UpdateGroupSettingsPayload
from wasenderapi.messaging.models.messages import ImageUrlMessage
from wasenderapi.messaging.models.sessions import CreateWhatsAppSessionPayload
from wasenderapi.messaging.wasender import Wasender, create_wasender
from wasenderapi.webhooks.models import SessionStatusEvent

SEND_OK = {
    "success": True,
    "data": {"msgId": 123456, "jid": "15551234567@s.whatsapp.net", "status": "in_progress"},
}


@pytest.fixture
def wasender(fake_transport) -> Wasender:
    return Wasender(
        TEST_API_KEY,
        TEST_PERSONAL_ACCESS_TOKEN,
        base_url=TEST_BASE_URL,
        transport=fake_transport,
        webhook_secret=TEST_WEBHOOK_SECRET,
    )


def url(path: str) -> str:
    return f"{TEST_BASE_URL}/{path}"


@pytest.mark.asyncio
class TestSendMessages:
    async def test_send_text(self, wasender, fake_transport):
        fake_transport.queue(json_response(200, SEND_OK))

        result = await wasender.send_text(to="+15551234567", text="Hello")

        request = fake_transport.last_request
        assert request["method"] == "POST"
        assert request["url"] == url("send-message")
        assert request["json"] == {"to": "+15551234567", "text": "Hello"}
        assert result.data.msg_id == 123456

    async def test_send_image_uses_wire_names(self, wasender, fake_transport):
        fake_transport.queue(json_response(200, SEND_OK))

        await wasender.send_image(
            to="+15551234567", image_url="https://example.com/a.jpg", text="Look"
        )

        assert fake_transport.last_request["json"] == {
            "to": "+15551234567",
            "text": "Look",
            "imageUrl": "https://example.com/a.jpg",
        }

    @pytest.mark.parametrize(
        "method, kwargs, wire_field",
        [
            ("send_video", {"video_url": "https://e.com/v.mp4"}, "videoUrl"),
            ("send_document", {"document_url": "https://e.com/d.pdf"}, "documentUrl"),
            ("send_audio", {"audio_url": "https://e.com/a.mp3"}, "audioUrl"),
            ("send_sticker", {"sticker_url": "https://e.com/s.webp"}, "stickerUrl"),
        ],
    )
    async def test_media_helpers(self, wasender, fake_transport, method, kwargs, wire_field):
        fake_transport.queue(json_response(200, SEND_OK))

        await getattr(wasender, method)(to="+15551234567", **kwargs)

        body = fake_transport.last_request["json"]
        assert body[wire_field] == next(iter(kwargs.values()))
        assert "messageType" not in body

    async def test_send_contact(self, wasender, fake_transport):
        fake_transport.queue(json_response(200, SEND_OK))

        await wasender.send_contact(
            to="+15551234567", contact={"name": "John", "phone": "+15550001111"}
        )

        assert fake_transport.last_request["json"] == {
            "to": "+15551234567",
            "contact": {"name": "John", "phone": "+15550001111"},
        }

    async def test_send_location_accepts_string_coordinates(
        self, wasender, fake_transport
    ):
        fake_transport.queue(json_response(200, SEND_OK))

        await wasender.send_location(
            to="+15551234567", latitude="37.7749", longitude=-122.4194, name="SF"
        )

        assert fake_transport.last_request["json"]["location"] == {
            "latitude": "37.7749",
            "longitude": -122.4194,
            "name": "SF",
        }

    async def test_send_accepts_model(self, wasender, fake_transport):
        fake_transport.queue(json_response(200, SEND_OK))

        await wasender.send(
            ImageUrlMessage(to="123@newsletter", image_url="https://e.com/i.png")
        )

        assert fake_transport.last_request["json"]["imageUrl"] == "https://e.com/i.png"

    async def test_send_accepts_mapping_with_message_type(
        self, wasender, fake_transport
    ):
        fake_transport.queue(json_response(200, SEND_OK))

        await wasender.send({"messageType": "text", "to": "123@newsletter", "text": "News"})

        assert fake_transport.last_request["json"] == {
            "to": "123@newsletter",
            "text": "News",
        }

    async def test_invalid_mapping_rejected_before_io(self, wasender, fake_transport):
        with pytest.raises(ValidationError):
            await wasender.send({"messageType": "image", "to": "+1"})

        assert fake_transport.requests == []

    async def test_empty_text_rejected(self, wasender):
        with pytest.raises(ValidationError):
            await wasender.send_text(to="+15551234567", text="")


@pytest.mark.asyncio
class TestContactsAndGroups:
    async def test_contacts_endpoints(self, wasender, fake_transport):
        jid = "15551234567@s.whatsapp.net"
        fake_transport.queue(
            json_response(200, {"success": True, "data": [{"jid": jid}]}),
            json_response(200, {"success": True, "data": {"jid": jid, "name": "Jane"}}),
            json_response(200, {"success": True, "data": {"imgUrl": "https://e.com/p"}}),
            json_response(200, {"success": True, "data": {"message": "blocked"}}),
            json_response(200, {"success": True, "data": {"message": "unblocked"}}),
        )

        await wasender.get_contacts()
        info = await wasender.get_contact_info(jid)
        picture = await wasender.get_contact_profile_picture(jid)
        await wasender.block_contact(jid)
        await wasender.unblock_contact(jid)

        assert [(r["method"], r["url"]) for r in fake_transport.requests] == [
            ("GET", url("contacts")),
            ("GET", url(f"contacts/{jid}")),
            ("GET", url(f"contacts/{jid}/picture")),
            ("POST", url(f"contacts/{jid}/block")),
            ("POST", url(f"contacts/{jid}/unblock")),
        ]
        assert info.data.name == "Jane"
        assert picture.data.img_url == "https://e.com/p"

    async def test_group_endpoints(self, wasender, fake_transport):
        group = "123456789-987654321@g.us"
        fake_transport.queue(
            json_response(200, {"success": True, "data": [{"id": group, "name": "Team"}]}),
            json_response(
                200,
                {
                    "success": True,
                    "data": {
                        "id": group,
                        "subject": "Team",
                        "participants": [{"id": "1@s.whatsapp.net", "admin": "superadmin"}],
                    },
                },
            ),
            json_response(200, {"success": True, "data": [{"id": "1@s.whatsapp.net"}]}),
        )

        groups = await wasender.get_groups()
        metadata = await wasender.get_group_metadata(group)
        await wasender.get_group_participants(group)

        assert [r["url"] for r in fake_transport.requests] == [
            url("groups"),
            url(f"groups/{group}/metadata"),
            url(f"groups/{group}/participants"),
        ]
        assert groups.data[0].name == "Team"
        assert metadata.data.participants[0].is_super_admin

    async def test_modify_participants(self, wasender, fake_transport):
        group = "123@g.us"
        status = {"status": 200, "jid": "1@s.whatsapp.net", "message": "added"}
        fake_transport.queue(
            json_response(200, {"success": True, "data": [status]}),
            json_response(200, {"success": True, "data": [status]}),
        )

        added = await wasender.add_group_participants(group, ["+15551234567"])
        await wasender.remove_group_participants(group, ["+15551234567"])

        add_request, remove_request = fake_transport.requests
        assert add_request["url"] == url(f"groups/{group}/participants/add")
        assert add_request["json"] == {"participants": ["+15551234567"]}
        assert remove_request["url"] == url(f"groups/{group}/participants/remove")
        assert added.data[0].message == "added"

    async def test_empty_participant_list_rejected(self, wasender, fake_transport):
        with pytest.raises(ValidationError):
            await wasender.add_group_participants("123@g.us", [])

        assert fake_transport.requests == []

    async def test_update_group_settings(self, wasender, fake_transport):
        fake_transport.queue(
            json_response(200, {"success": True, "data": {"subject": "New"}})
        )

        await wasender.update_group_settings(
            "123@g.us", UpdateGroupSettingsPayload(subject="New", announce=True)
        )

        request = fake_transport.last_request
        assert request["method"] == "PUT"
        assert request["url"] == url("groups/123@g.us/settings")
        assert request["json"] == {"subject": "New", "announce": True}


@pytest.mark.asyncio
class TestSessions:
    async def test_session_endpoints_use_personal_token(self, wasender, fake_transport):
        session = {"id": 7, "name": "Main", "phone_number": "+15551234567", "status": "connected"}
        fake_transport.queue(
            json_response(200, {"success": True, "data": [session]}),
            json_response(200, {"success": True, "data": session}),
            json_response(200, {"success": True, "data": session}),
            json_response(200, {"success": True, "data": session}),
            json_response(200, {"success": True, "data": None}),
        )

        await wasender.get_all_whatsapp_sessions()
        await wasender.create_whatsapp_session(
            CreateWhatsAppSessionPayload(
                name="Main",
                phone_number="+15551234567",
                account_protection=True,
                log_messages=False,
            )
        )
        await wasender.get_whatsapp_session_details(7)
        await wasender.update_whatsapp_session(7, {"name": "Renamed"})
        await wasender.delete_whatsapp_session(7)

        assert [(r["method"], r["url"]) for r in fake_transport.requests] == [
            ("GET", url("whatsapp-sessions")),
            ("POST", url("whatsapp-sessions")),
            ("GET", url("whatsapp-sessions/7")),
            ("PUT", url("whatsapp-sessions/7")),
            ("DELETE", url("whatsapp-sessions/7")),
        ]
        assert all(
            r["headers"]["Authorization"] == f"Bearer {TEST_PERSONAL_ACCESS_TOKEN}"
            for r in fake_transport.requests
        )
        assert fake_transport.requests[1]["json"] == {
            "name": "Main",
            "phone_number": "+15551234567",
            "account_protection": True,
            "log_messages": False,
        }
        assert fake_transport.requests[3]["json"] == {"name": "Renamed"}

    async def test_connect_with_and_without_qr_flag(self, wasender, fake_transport):
        body = {"success": True, "data": {"status": "NEED_SCAN", "qrCode": "2@abc"}}
        fake_transport.queue(json_response(200, body), json_response(200, body))

        result = await wasender.connect_whatsapp_session(7, qr_as_image=True)
        await wasender.connect_whatsapp_session(7)

        first, second = fake_transport.requests
        assert first["url"] == url("whatsapp-sessions/7/connect")
        assert first["json"] == {"qr_as_image": True}
        assert second["json"] is None
        assert result.data.qr_code == "2@abc"

    async def test_qrcode_disconnect_and_regenerate(self, wasender, fake_transport):
        fake_transport.queue(
            json_response(200, {"success": True, "data": {"qrCode": "2@abc"}}),
            json_response(200, {"success": True, "data": {"status": "DISCONNECTED"}}),
            json_response(200, {"success": True, "api_key": "new-key"}),
        )

        qr = await wasender.get_whatsapp_session_qrcode(7)
        await wasender.disconnect_whatsapp_session(7)
        regenerated = await wasender.regenerate_api_key(7)

        assert [(r["method"], r["url"]) for r in fake_transport.requests] == [
            ("GET", url("whatsapp-sessions/7/qrcode")),
            ("POST", url("whatsapp-sessions/7/disconnect")),
            ("POST", url("whatsapp-sessions/7/regenerate-key")),
        ]
        assert qr.data.qr_code == "2@abc"
        assert regenerated.response.api_key == "new-key"

    async def test_session_status_uses_api_key(self, wasender, fake_transport):
        fake_transport.queue(json_response(200, {"status": "connected"}))

        result = await wasender.get_session_status()

        request = fake_transport.last_request
        assert request["url"] == url("status")
        assert request["headers"]["Authorization"] == f"Bearer {TEST_API_KEY}"
        assert result.response.status == "connected"

    async def test_session_calls_need_personal_token(self, fake_transport):
        client = Wasender(TEST_API_KEY, base_url=TEST_BASE_URL, transport=fake_transport)

        with pytest.raises(WasenderAPIError):
            await client.get_all_whatsapp_sessions()

        assert fake_transport.requests == []


@pytest.mark.asyncio
class TestWebhookAndLifecycle:
    async def test_handle_webhook_event_uses_configured_secret(
        self, wasender, make_webhook_request
    ):
        event = await wasender.handle_webhook_event(
            make_webhook_request({"type": "session.status", "data": {"status": "connected"}})
        )

        assert isinstance(event, SessionStatusEvent)

    async def test_webhook_without_secret_not_configured(
        self, fake_transport, make_webhook_request
    ):
        client = Wasender(TEST_API_KEY, transport=fake_transport)

        with pytest.raises(WebhookNotConfiguredError):
            await client.handle_webhook_event(make_webhook_request({"type": "x"}))

    async def test_async_context_manager_closes_transport(self, fake_transport):
        async with Wasender(TEST_API_KEY, transport=fake_transport):
            pass

        assert fake_transport.closed is True


class TestCreateWasender:
    def test_explicit_values_win(self, fake_transport):
        client = create_wasender(
            api_key="explicit",
            base_url="https://other/api",
            transport=fake_transport,
            retry=RetryConfig(enabled=True, max_retries=4),
        )

        assert client.client.api_key == "explicit"
        assert client.client.url_builder.base_url == "https://other/api"
        assert client.client.retry.max_retries == 4

    def test_falls_back_to_settings(self, fake_transport, monkeypatch):
        monkeypatch.setattr(settings, "api_key", "from-env")
        monkeypatch.setattr(settings, "webhook_secret", "env-secret")
        monkeypatch.setattr(settings, "retry_enabled", True)
        monkeypatch.setattr(settings, "max_retries", 2)

        client = create_wasender(transport=fake_transport)

        assert client.client.api_key == "from-env"
        assert client.webhooks.webhook_secret == "env-secret"
        assert client.client.retry == RetryConfig(enabled=True, max_retries=2)
