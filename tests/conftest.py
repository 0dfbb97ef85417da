"""
Pytest configuration and common fixtures for WasenderAPI tests.

Provides an in-memory HTTP transport so client tests never touch the
network, plus helpers for building webhook requests.
"""

import json
from typing import Any

import pytest

from wasenderapi.core.logging.context import clear_webhook_context
from wasenderapi.messaging.client.transport import HttpResponse
from wasenderapi.webhooks.adapters import RawRequestAdapter

TEST_WEBHOOK_SECRET = "test-webhook-secret"
TEST_API_KEY = "test-api-key"
TEST_PERSONAL_ACCESS_TOKEN = "test-personal-access-token"
TEST_BASE_URL = "https://api.test.local/api"


def json_response(
    status: int = 200,
    body: Any = None,
    headers: dict[str, str] | None = None,
) -> HttpResponse:
    """Build an HttpResponse with a JSON body."""
    text = "" if body is None else json.dumps(body)
    return HttpResponse(status=status, headers=headers or {}, text=text)


class FakeTransport:
    """
    HttpTransport double that replays queued responses and records requests.

    Queue entries may be HttpResponse objects or exceptions to raise.
    """

    def __init__(self, *responses: HttpResponse | Exception):
        self.responses = list(responses)
        self.requests: list[dict[str, Any]] = []
        self.closed = False

    def queue(self, *responses: HttpResponse | Exception) -> None:
        self.responses.extend(responses)

    async def send(self, method, url, *, headers, json=None, params=None):
        self.requests.append(
            {
                "method": method,
                "url": url,
                "headers": dict(headers),
                "json": json,
                "params": params,
            }
        )
        if not self.responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    async def close(self) -> None:
        self.closed = True

    @property
    def last_request(self) -> dict[str, Any]:
        return self.requests[-1]


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def webhook_secret() -> str:
    return TEST_WEBHOOK_SECRET


@pytest.fixture
def make_webhook_request():
    """Factory for RawRequestAdapter instances carrying a JSON body."""

    def _make(
        body: Any,
        signature: str | None = TEST_WEBHOOK_SECRET,
        header_name: str = "X-Webhook-Signature",
    ) -> RawRequestAdapter:
        raw = body if isinstance(body, (str, bytes)) else json.dumps(body)
        headers = {"Content-Type": "application/json"}
        if signature is not None:
            headers[header_name] = signature
        return RawRequestAdapter(headers, raw)

    return _make


@pytest.fixture(autouse=True)
def _reset_webhook_context():
    """Keep logging context from leaking between tests."""
    yield
    clear_webhook_context()
