"""
Webhook signature verification.

WasenderAPI currently authenticates webhooks by sending the shared secret
itself in the ``X-Webhook-Signature`` header, so the default verifier is a
plain (constant-time) equality check. Most webhook providers sign the body
with HMAC instead; verification is therefore a strategy so a keyed-hash
scheme can replace the equality check without touching the decoder or the
entry point.
"""

import hashlib
import hmac
from abc import ABC, abstractmethod

WEBHOOK_SIGNATURE_HEADER = "x-webhook-signature"


def _constant_time_equals(left: str, right: str) -> bool:
    return hmac.compare_digest(left.encode("utf-8"), right.encode("utf-8"))


def verify_wasender_webhook_signature(
    request_signature: str | None, configured_secret: str | None
) -> bool:
    """
    Verify the ``X-Webhook-Signature`` header against the configured secret.

    Fails closed: returns False when either value is missing or empty.
    Otherwise returns True only if both strings are exactly equal.

    Args:
        request_signature: Value of the signature header, None if absent
        configured_secret: Webhook secret configured in the Wasender dashboard

    Returns:
        True if the signature is valid, False otherwise
    """
    if not request_signature or not configured_secret:
        return False
    return _constant_time_equals(request_signature, configured_secret)


class SignatureVerifier(ABC):
    """
    Strategy deciding whether an inbound webhook is authentic.

    Verifiers never raise for a bad signature; they return False and the
    caller turns that into a rejection.
    """

    # Whether verify() needs the raw body. When False the entry point checks
    # the signature before reading the body at all.
    uses_body: bool = False

    @abstractmethod
    def verify(
        self, signature: str | None, secret: str | None, raw_body: str | None = None
    ) -> bool:
        """
        Args:
            signature: Signature header value, None if absent
            secret: Configured webhook secret
            raw_body: Unmodified request body (only passed when ``uses_body``)

        Returns:
            True if the request is authentic
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(uses_body={self.uses_body})"


class SharedSecretVerifier(SignatureVerifier):
    """The scheme WasenderAPI uses today: header value equals the secret."""

    def verify(
        self, signature: str | None, secret: str | None, raw_body: str | None = None
    ) -> bool:
        return verify_wasender_webhook_signature(signature, secret)


class HmacSha256Verifier(SignatureVerifier):
    """
    Hex HMAC-SHA256 of the raw body, keyed with the secret.

    Accepts signatures with or without a ``sha256=`` prefix. The body must be
    the bytes received on the wire; a re-serialized JSON body will not match.
    """

    uses_body = True
    prefix = "sha256="

    def verify(
        self, signature: str | None, secret: str | None, raw_body: str | None = None
    ) -> bool:
        if not signature or not secret or raw_body is None:
            return False

        provided_hash = signature.strip()
        if provided_hash.lower().startswith(self.prefix):
            provided_hash = provided_hash[len(self.prefix) :]

        expected_hash = hmac.new(
            secret.encode("utf-8"),
            raw_body.encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()

        return _constant_time_equals(expected_hash, provided_hash.lower())
