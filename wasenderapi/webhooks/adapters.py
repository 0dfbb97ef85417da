"""
Transport adapters between a host HTTP framework and the webhook handler.

The handler only ever asks for one header and the raw body, so any framework
can be supported by implementing ``WebhookRequestAdapter``. The body must be
the unmodified bytes received on the wire, never a parsed-and-reserialized
copy, or body-based signature schemes will not verify.
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from starlette.requests import Request

RawBody = str | bytes


@runtime_checkable
class WebhookRequestAdapter(Protocol):
    """What the webhook handler needs from an inbound HTTP request."""

    def get_header(self, name: str) -> str | None:
        """Case-insensitive header lookup; None when the header is absent."""
        ...

    def get_raw_body(self) -> RawBody | Awaitable[RawBody]:
        """The unmodified request body, returned directly or awaitable."""
        ...


class RawRequestAdapter:
    """
    Adapter over an already-available header mapping and body.

    Works for any framework (or for tests): pass the request headers and
    either the raw body or a zero-argument callable (sync or async) that
    returns it.

    Example:
        adapter = RawRequestAdapter(request.headers, request.get_data())
    """

    def __init__(
        self,
        headers: Mapping[str, str],
        body: RawBody | Callable[[], RawBody | Awaitable[RawBody]],
    ):
        self._headers = {key.lower(): value for key, value in headers.items()}
        self._body = body

    def get_header(self, name: str) -> str | None:
        return self._headers.get(name.lower())

    def get_raw_body(self) -> RawBody | Awaitable[RawBody]:
        if callable(self._body):
            return self._body()
        return self._body


class StarletteRequestAdapter:
    """Adapter for FastAPI / Starlette ``Request`` objects."""

    def __init__(self, request: "Request"):
        self.request = request

    def get_header(self, name: str) -> str | None:
        # Starlette headers are already case-insensitive
        return self.request.headers.get(name)

    async def get_raw_body(self) -> bytes:
        return await self.request.body()
