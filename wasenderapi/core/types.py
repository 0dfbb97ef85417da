"""
Core type definitions shared by the webhook and REST layers.
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

RATE_LIMIT_LIMIT_HEADER = "x-ratelimit-limit"
RATE_LIMIT_REMAINING_HEADER = "x-ratelimit-remaining"
RATE_LIMIT_RESET_HEADER = "x-ratelimit-reset"


class WebhookErrorReason(str, Enum):
    """Why an inbound webhook was rejected."""

    NOT_CONFIGURED = "not_configured"
    """No webhook secret was configured on the receiving side."""

    UNAUTHORIZED = "unauthorized"
    """Signature header missing or not matching the secret."""

    MALFORMED_BODY = "malformed_body"
    """Body could not be read, is not UTF-8, or is not a JSON object."""

    MISSING_TYPE = "missing_type"
    """Body is JSON but carries no event discriminant."""

    INVALID_PAYLOAD = "invalid_payload"
    """The ``data`` field does not match the shape of its event type."""


class MissingTypePolicy(str, Enum):
    """
    What the decoder does with a JSON body that has no event discriminant.

    RAISE rejects it as a bad request; UNKNOWN hands it to the application
    as an ``UnknownWebhookEvent`` whose ``type`` is None.
    """

    RAISE = "raise"
    UNKNOWN = "unknown"


class RateLimitInfo(BaseModel):
    """
    Throttling counters reflected from the remote API's response headers.

    Read-only snapshot of the server's last known counters; the client never
    updates it on its own.
    """

    model_config = ConfigDict(frozen=True)

    limit: int | None = Field(None, description="Requests allowed in the window")
    remaining: int | None = Field(None, description="Requests left in the window")
    reset_timestamp: int | None = Field(
        None, description="Unix timestamp (seconds) when the window resets"
    )

    @property
    def reset_at(self) -> datetime | None:
        """Reset instant as an aware UTC datetime."""
        if self.reset_timestamp is None:
            return None
        return datetime.fromtimestamp(self.reset_timestamp, tz=UTC)

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RateLimitInfo | None":
        """
        Build from HTTP response headers.

        Header names are matched case-insensitively. Returns None when none of
        the rate limit headers is present; unparseable values become None.
        """
        lowered = {k.lower(): v for k, v in headers.items()}

        values = {}
        for field_name, header in (
            ("limit", RATE_LIMIT_LIMIT_HEADER),
            ("remaining", RATE_LIMIT_REMAINING_HEADER),
            ("reset_timestamp", RATE_LIMIT_RESET_HEADER),
        ):
            raw = lowered.get(header)
            if raw is None:
                continue
            try:
                values[field_name] = int(float(raw))
            except (TypeError, ValueError):
                values[field_name] = None

        if not values:
            return None
        return cls(**values)
