"""
Webhook entry point: adapter -> verifier -> decoder.

One call per inbound HTTP request. The handler performs no retries, no
logging and no network I/O; every rejection is raised as a
``WasenderWebhookError`` whose ``status_code`` tells the host what to answer
(401 for signature failures, 400 for bad bodies).
"""

import inspect

from wasenderapi.core.errors import (
    WebhookNotConfiguredError,
    WebhookPayloadError,
    WebhookSignatureError,
)
from wasenderapi.core.types import MissingTypePolicy
from wasenderapi.webhooks.adapters import WebhookRequestAdapter
from wasenderapi.webhooks.decoder import decode_webhook_event
from wasenderapi.webhooks.models import WasenderWebhookEvent
from wasenderapi.webhooks.verifier import (
    WEBHOOK_SIGNATURE_HEADER,
    SharedSecretVerifier,
    SignatureVerifier,
)


async def read_raw_body(adapter: WebhookRequestAdapter) -> str:
    """
    Read the body through the adapter, awaiting it if needed.

    Raises:
        WebhookPayloadError: the body could not be retrieved or is not UTF-8
    """
    try:
        body = adapter.get_raw_body()
        if inspect.isawaitable(body):
            body = await body
    except Exception as exc:
        raise WebhookPayloadError("Could not read webhook body") from exc

    if isinstance(body, (bytes, bytearray)):
        try:
            return body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise WebhookPayloadError("Webhook body is not valid UTF-8") from exc
    if not isinstance(body, str):
        raise WebhookPayloadError("Webhook body must be str or bytes")
    return body


class WasenderWebhookHandler:
    """
    Reusable webhook entry point bound to one secret and verifier.

    Stateless between calls; a single instance can serve concurrent
    requests.

    Example:
        handler = WasenderWebhookHandler(settings.webhook_secret)
        event = await handler.handle(StarletteRequestAdapter(request))
    """

    def __init__(
        self,
        webhook_secret: str | None,
        *,
        verifier: SignatureVerifier | None = None,
        missing_type: MissingTypePolicy | str = MissingTypePolicy.RAISE,
    ):
        self.webhook_secret = webhook_secret
        self.verifier = verifier or SharedSecretVerifier()
        self.missing_type = MissingTypePolicy(missing_type)

    async def handle(self, adapter: WebhookRequestAdapter) -> WasenderWebhookEvent:
        """
        Verify and decode one inbound webhook request.

        Raises:
            WebhookNotConfiguredError: no secret configured (before any I/O)
            WebhookSignatureError: signature missing or mismatched
            WebhookPayloadError: body unreadable, not JSON or wrongly shaped
        """
        secret = self.webhook_secret
        if not secret:
            raise WebhookNotConfiguredError()

        signature = adapter.get_header(WEBHOOK_SIGNATURE_HEADER)
        if not signature:
            raise WebhookSignatureError("Missing webhook signature header")

        if not self.verifier.uses_body:
            if not self.verifier.verify(signature, secret):
                raise WebhookSignatureError()
            raw_body = await read_raw_body(adapter)
        else:
            raw_body = await read_raw_body(adapter)
            if not self.verifier.verify(signature, secret, raw_body):
                raise WebhookSignatureError()

        return decode_webhook_event(raw_body, missing_type=self.missing_type)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"configured={bool(self.webhook_secret)}, "
            f"verifier={self.verifier!r}, "
            f"missing_type={self.missing_type.value})"
        )


async def handle_webhook_event(
    adapter: WebhookRequestAdapter,
    configured_secret: str | None,
    *,
    verifier: SignatureVerifier | None = None,
    missing_type: MissingTypePolicy | str = MissingTypePolicy.RAISE,
) -> WasenderWebhookEvent:
    """Verify and decode one inbound webhook; see ``WasenderWebhookHandler``."""
    handler = WasenderWebhookHandler(
        configured_secret, verifier=verifier, missing_type=missing_type
    )
    return await handler.handle(adapter)
