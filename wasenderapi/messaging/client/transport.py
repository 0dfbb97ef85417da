"""
Pluggable HTTP transport for the Wasender REST client.

The client talks to the network only through ``HttpTransport.send``; the
default implementation uses a persistent aiohttp session. Tests and hosts
with their own HTTP stack can pass any object with the same ``send``
coroutine.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

import aiohttp

from wasenderapi.core.config.settings import settings


@dataclass(frozen=True)
class HttpResponse:
    """Transport-neutral view of an HTTP response."""

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    text: str = ""


@runtime_checkable
class HttpTransport(Protocol):
    async def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        json: Any | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> HttpResponse: ...


class AiohttpTransport:
    """
    aiohttp-backed transport.

    Pass an existing ``aiohttp.ClientSession`` to share connection pooling
    with the host application (the caller then owns its lifecycle); otherwise
    a session is created lazily and closed by ``close()``.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        timeout: float = settings.request_timeout,
    ):
        self._session = session
        self._owns_session = session is None
        self.timeout = aiohttp.ClientTimeout(total=timeout)

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
            self._owns_session = True
        return self._session

    async def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        json: Any | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> HttpResponse:
        session = self._get_session()
        # aiohttp rejects None query values
        query = {k: v for k, v in (params or {}).items() if v is not None} or None

        async with session.request(
            method, url, headers=dict(headers), json=json, params=query
        ) as response:
            text = await response.text()
            return HttpResponse(
                status=response.status,
                headers=dict(response.headers),
                text=text,
            )

    async def close(self) -> None:
        """Close the session if this transport created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
