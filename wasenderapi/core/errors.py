"""
Error types for the WasenderAPI client.

Every failure the library surfaces, whether an outbound REST call or an
inbound webhook, is a ``WasenderAPIError`` so host applications can apply one
handling path: map ``status_code`` to an HTTP status, log, discard.
"""

from typing import Any

from wasenderapi.core.types import RateLimitInfo, WebhookErrorReason

# Field-level validation errors, e.g. {"to": ["The to field is required."]}
WasenderErrorDetail = dict[str, list[str]]


class WasenderAPIError(Exception):
    """
    Error returned by the Wasender API or raised by the SDK itself.

    Attributes:
        api_message: The ``message`` field of the error body, or an SDK message
        status_code: HTTP status, None for network or SDK-side failures
        error_details: Field-level validation errors, if provided
        retry_after: Seconds to wait before retrying, if provided
        rate_limit: Rate limit snapshot taken when the error occurred
    """

    success = False

    def __init__(
        self,
        api_message: str,
        status_code: int | None = None,
        error_details: WasenderErrorDetail | None = None,
        retry_after: float | None = None,
        rate_limit: RateLimitInfo | None = None,
    ):
        self.api_message = api_message
        self.status_code = status_code
        self.error_details = error_details
        self.retry_after = retry_after
        self.rate_limit = rate_limit
        super().__init__(
            f"Wasender API Error (Status {status_code or 'N/A'}): {api_message}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API's error response structure."""
        body: dict[str, Any] = {"success": False, "message": self.api_message}
        if self.error_details:
            body["errors"] = self.error_details
        if self.retry_after is not None:
            body["retry_after"] = self.retry_after
        return body


class WasenderWebhookError(WasenderAPIError):
    """Base class for inbound webhook rejections."""

    def __init__(
        self,
        message: str,
        reason: WebhookErrorReason,
        status_code: int | None = None,
        error_details: WasenderErrorDetail | None = None,
    ):
        self.reason = reason
        super().__init__(message, status_code, error_details)


class WebhookNotConfiguredError(WasenderWebhookError):
    """Raised when webhook handling is invoked without a configured secret."""

    def __init__(self):
        super().__init__(
            "Webhook secret is not configured",
            WebhookErrorReason.NOT_CONFIGURED,
        )


class WebhookSignatureError(WasenderWebhookError):
    """Raised when the signature header is missing or does not match."""

    def __init__(self, message: str = "Invalid webhook signature"):
        super().__init__(message, WebhookErrorReason.UNAUTHORIZED, 401)


class WebhookPayloadError(WasenderWebhookError):
    """Raised when the webhook body cannot be read or decoded."""

    def __init__(
        self,
        message: str,
        reason: WebhookErrorReason = WebhookErrorReason.MALFORMED_BODY,
        error_details: WasenderErrorDetail | None = None,
    ):
        super().__init__(message, reason, 400, error_details)
