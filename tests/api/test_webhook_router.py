"""
Tests for the FastAPI webhook route.
"""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from conftest import TEST_WEBHOOK_SECRET
from fastapi import FastAPI
from fastapi.testclient import TestClient

from wasenderapi.api.routes.webhooks import create_webhook_router
from wasenderapi.webhooks.models import MessagesUpsertEvent, UnknownWebhookEvent

MESSAGE_BODY = {
    "type": "messages.upsert",
    "timestamp": 1700000000,
    "sessionId": "session-1",
    "data": {
        "key": {"id": "ABC", "fromMe": False, "remoteJid": "1@s.whatsapp.net"},
        "message": {"conversation": "hi"},
    },
}


def _client(on_event, **kwargs) -> TestClient:
    kwargs.setdefault("webhook_secret", TEST_WEBHOOK_SECRET)
    app = FastAPI()
    app.include_router(create_webhook_router(on_event, **kwargs))
    return TestClient(app)


def _post(client: TestClient, body, signature=TEST_WEBHOOK_SECRET, path="/webhook"):
    headers = {"Content-Type": "application/json"}
    if signature is not None:
        headers["X-Webhook-Signature"] = signature
    content = body if isinstance(body, str) else json.dumps(body)
    return client.post(path, content=content, headers=headers)


class TestWebhookRouter:
    def test_accepts_valid_event(self):
        on_event = MagicMock()
        client = _client(on_event)

        response = _post(client, MESSAGE_BODY)

        assert response.status_code == 200
        assert response.json() == {"received": True}
        event = on_event.call_args.args[0]
        assert isinstance(event, MessagesUpsertEvent)
        assert event.session_id == "session-1"

    def test_async_callback_is_awaited(self):
        on_event = AsyncMock()
        client = _client(on_event)

        response = _post(client, MESSAGE_BODY)

        assert response.status_code == 200
        on_event.assert_awaited_once()

    def test_sync_callback_runs_off_the_event_loop(self):
        seen = {}

        def on_event(event):
            try:
                asyncio.get_running_loop()
                seen["on_loop"] = True
            except RuntimeError:
                seen["on_loop"] = False
            seen["type"] = event.type

        response = _post(_client(on_event), MESSAGE_BODY)

        assert response.status_code == 200
        assert seen == {"on_loop": False, "type": "messages.upsert"}

    def test_bad_signature_is_401(self):
        on_event = MagicMock()
        client = _client(on_event)

        response = _post(client, MESSAGE_BODY, signature="wrong")

        assert response.status_code == 401
        assert response.json()["reason"] == "unauthorized"
        on_event.assert_not_called()

    def test_missing_signature_is_401(self):
        response = _post(_client(MagicMock()), MESSAGE_BODY, signature=None)
        assert response.status_code == 401

    def test_malformed_body_is_400(self):
        on_event = MagicMock()

        response = _post(_client(on_event), "not json")

        assert response.status_code == 400
        assert response.json()["reason"] == "malformed_body"
        on_event.assert_not_called()

    def test_invalid_payload_reports_details(self):
        body = {"type": "session.status", "data": {"status": "sleeping"}}

        response = _post(_client(MagicMock()), body)

        assert response.status_code == 400
        assert response.json()["reason"] == "invalid_payload"
        assert "data.status" in response.json()["details"]

    def test_unknown_event_is_acknowledged(self):
        on_event = MagicMock()

        response = _post(_client(on_event), {"type": "poll.created", "data": {}})

        assert response.status_code == 200
        assert isinstance(on_event.call_args.args[0], UnknownWebhookEvent)

    def test_not_configured_is_500(self, monkeypatch):
        from wasenderapi.core.config.settings import settings

        monkeypatch.setattr(settings, "webhook_secret", None)
        client = _client(MagicMock(), webhook_secret=None)

        response = _post(client, MESSAGE_BODY)

        assert response.status_code == 500
        assert response.json()["reason"] == "not_configured"

    def test_callback_failure_is_500(self):
        on_event = MagicMock(side_effect=RuntimeError("handler bug"))

        response = _post(_client(on_event), MESSAGE_BODY)

        assert response.status_code == 500

    @pytest.mark.parametrize("path", ["/hooks/wasender", "/webhook/wasender"])
    def test_custom_path(self, path):
        client = _client(MagicMock(), path=path)

        assert _post(client, MESSAGE_BODY, path=path).status_code == 200
