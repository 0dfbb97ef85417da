"""
Tests for shared types and error classes.
"""

from datetime import UTC, datetime

import pytest

from wasenderapi.core.errors import (
    WasenderAPIError,
    WasenderWebhookError,
    WebhookNotConfiguredError,
    WebhookPayloadError,
    WebhookSignatureError,
)
from wasenderapi.core.types import MissingTypePolicy, RateLimitInfo, WebhookErrorReason


class TestRateLimitInfo:
    def test_from_headers_case_insensitive(self):
        info = RateLimitInfo.from_headers(
            {"x-ratelimit-limit": "60", "X-RATELIMIT-REMAINING": "0", "X-RateLimit-Reset": "0"}
        )

        assert info.limit == 60
        assert info.remaining == 0
        assert info.reset_at == datetime(1970, 1, 1, tzinfo=UTC)

    def test_no_headers_means_none(self):
        assert RateLimitInfo.from_headers({"content-type": "application/json"}) is None

    def test_partial_and_unparseable_headers(self):
        info = RateLimitInfo.from_headers(
            {"X-RateLimit-Limit": "lots", "X-RateLimit-Remaining": "5"}
        )

        assert info.limit is None
        assert info.remaining == 5
        assert info.reset_timestamp is None
        assert info.reset_at is None

    def test_is_read_only(self):
        info = RateLimitInfo(limit=1)
        with pytest.raises(ValueError):
            info.limit = 2


class TestErrors:
    def test_api_error_message_without_status(self):
        error = WasenderAPIError("Network error: boom")

        assert str(error) == "Wasender API Error (Status N/A): Network error: boom"
        assert error.status_code is None
        assert error.success is False

    def test_to_dict(self):
        error = WasenderAPIError(
            "Too many requests",
            429,
            error_details={"to": ["bad"]},
            retry_after=10,
        )

        assert error.to_dict() == {
            "success": False,
            "message": "Too many requests",
            "errors": {"to": ["bad"]},
            "retry_after": 10,
        }

    @pytest.mark.parametrize(
        "error, status, reason",
        [
            (WebhookNotConfiguredError(), None, WebhookErrorReason.NOT_CONFIGURED),
            (WebhookSignatureError(), 401, WebhookErrorReason.UNAUTHORIZED),
            (WebhookPayloadError("bad"), 400, WebhookErrorReason.MALFORMED_BODY),
            (
                WebhookPayloadError("no type", reason=WebhookErrorReason.MISSING_TYPE),
                400,
                WebhookErrorReason.MISSING_TYPE,
            ),
        ],
    )
    def test_webhook_errors(self, error, status, reason):
        assert isinstance(error, WasenderWebhookError)
        assert isinstance(error, WasenderAPIError)
        assert error.status_code == status
        assert error.reason is reason


class TestMissingTypePolicy:
    def test_values(self):
        assert MissingTypePolicy("raise") is MissingTypePolicy.RAISE
        assert MissingTypePolicy("unknown") is MissingTypePolicy.UNKNOWN
