"""
Decoding of webhook bodies into typed events.

The event class, and with it the shape of ``data``, is chosen solely by the
``type`` discriminant; it is never guessed from the shape of ``data``.
Unknown discriminants decode to ``UnknownWebhookEvent`` instead of failing,
so new server-side event kinds don't break existing consumers.
"""

import json
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from wasenderapi.core.errors import WasenderErrorDetail, WebhookPayloadError
from wasenderapi.core.types import MissingTypePolicy, WebhookErrorReason
from wasenderapi.webhooks.models import (
    WEBHOOK_EVENT_MODELS,
    BaseWebhookEvent,
    UnknownWebhookEvent,
    WasenderWebhookEvent,
)

# Live deliveries name the discriminant "event"; the documented envelope
# uses "type". "type" wins when both are present.
DISCRIMINANT_FIELD = "type"
ALTERNATE_DISCRIMINANT_FIELD = "event"


def parse_webhook_body(raw_body: str | bytes) -> dict[str, Any]:
    """
    Parse a raw webhook body into a JSON object.

    Raises:
        WebhookPayloadError: body is not UTF-8, not JSON, or not a JSON object
    """
    if isinstance(raw_body, (bytes, bytearray)):
        try:
            raw_body = raw_body.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise WebhookPayloadError("Webhook body is not valid UTF-8") from exc
    elif isinstance(raw_body, str):
        raw_body = raw_body.removeprefix("\ufeff")

    try:
        payload = json.loads(raw_body)
    except (TypeError, ValueError) as exc:
        raise WebhookPayloadError("Webhook body is not valid JSON") from exc

    if not isinstance(payload, dict):
        raise WebhookPayloadError("Webhook body must be a JSON object")
    return payload


def validation_error_details(exc: ValidationError) -> WasenderErrorDetail:
    """Map pydantic errors to ``{"data.0.key.id": ["Field required"]}``."""
    details: WasenderErrorDetail = {}
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "body"
        details.setdefault(location, []).append(error["msg"])
    return details


def _discriminant(payload: Mapping[str, Any]) -> tuple[str, Any]:
    """Return the wire key carrying the discriminant and its raw value."""
    if DISCRIMINANT_FIELD in payload:
        return DISCRIMINANT_FIELD, payload[DISCRIMINANT_FIELD]
    return ALTERNATE_DISCRIMINANT_FIELD, payload.get(ALTERNATE_DISCRIMINANT_FIELD)


def _validate(
    model: type[BaseWebhookEvent], body: dict[str, Any], event_type: str | None
) -> WasenderWebhookEvent:
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        raise WebhookPayloadError(
            f"Webhook data does not match the shape of '{event_type}'",
            reason=WebhookErrorReason.INVALID_PAYLOAD,
            error_details=validation_error_details(exc),
        ) from exc


def decode_webhook_payload(
    payload: Mapping[str, Any],
    *,
    missing_type: MissingTypePolicy | str = MissingTypePolicy.RAISE,
) -> WasenderWebhookEvent:
    """
    Decode an already-parsed webhook body.

    Args:
        payload: JSON object of the webhook body
        missing_type: What to do when the body has no string discriminant

    Returns:
        The typed event, or ``UnknownWebhookEvent`` for unknown (and, under
        ``MissingTypePolicy.UNKNOWN``, missing) discriminants

    Raises:
        WebhookPayloadError: missing discriminant under ``RAISE`` or a
            ``data`` value that does not fit its event type
    """
    field, event_type = _discriminant(payload)
    body = {key: value for key, value in payload.items() if key != field}

    if not isinstance(event_type, str):
        if MissingTypePolicy(missing_type) is MissingTypePolicy.RAISE:
            raise WebhookPayloadError(
                "Webhook body has no event type",
                reason=WebhookErrorReason.MISSING_TYPE,
            )
        event = _validate(UnknownWebhookEvent, body, None)
        if field in payload:
            event._wire_discriminant = (field, event_type)
        return event

    body[DISCRIMINANT_FIELD] = event_type
    model = WEBHOOK_EVENT_MODELS.get(event_type, UnknownWebhookEvent)
    event = _validate(model, body, event_type)
    if field != DISCRIMINANT_FIELD:
        event._wire_discriminant = (field, event_type)
    return event


def decode_webhook_event(
    raw_body: str | bytes,
    *,
    missing_type: MissingTypePolicy | str = MissingTypePolicy.RAISE,
) -> WasenderWebhookEvent:
    """
    Decode a raw, already-verified webhook body into a typed event.

    Example:
        event = decode_webhook_event(body)
        if isinstance(event, MessagesUpsertEvent):
            print(event.data.key.remote_jid, event.data.message.text)
    """
    return decode_webhook_payload(
        parse_webhook_body(raw_body), missing_type=missing_type
    )
