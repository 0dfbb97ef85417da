"""
Low-level HTTP client for the Wasender REST API.

Key Design Decisions:
- Two token scopes: the session API key (messages, contacts, groups, status)
  and the account personal access token (session lifecycle)
- Transport injected, never created behind the caller's back unless omitted
- Every failure surfaces as WasenderAPIError with rate limit info attached
- Bounded retry loop on HTTP 429 only
"""

import asyncio
import json
from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

import aiohttp
from pydantic import BaseModel, Field, ValidationError

from wasenderapi.core.config.settings import settings
from wasenderapi.core.errors import WasenderAPIError, WasenderErrorDetail
from wasenderapi.core.logging.logger import get_logger
from wasenderapi.core.types import RateLimitInfo
from wasenderapi.messaging.client.transport import (
    AiohttpTransport,
    HttpResponse,
    HttpTransport,
)
from wasenderapi.messaging.models.common import WasenderResult

ModelT = TypeVar("ModelT", bound=BaseModel)

MAX_BACKOFF_SECONDS = 30.0


class AuthScope(str, Enum):
    """Which bearer token an endpoint requires."""

    API_KEY = "api_key"
    PERSONAL_ACCESS_TOKEN = "personal_access_token"


class RetryConfig(BaseModel):
    """Retry policy for rate-limited (HTTP 429) requests."""

    enabled: bool = False
    max_retries: int = Field(0, ge=0, description="Retries after the first attempt")

    def backoff(self, attempt: int) -> float:
        """Fallback wait when the server gives no retry_after: 1s, 2s, 4s ..."""
        return min(float(2**attempt), MAX_BACKOFF_SECONDS)


class WasenderUrlBuilder:
    """Builds URLs for Wasender API endpoints."""

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")

    def get_endpoint_url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"


def _parse_retry_after(value: Any) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _parse_error_details(value: Any) -> WasenderErrorDetail | None:
    if not isinstance(value, dict):
        return None
    details: WasenderErrorDetail = {}
    for key, messages in value.items():
        if isinstance(messages, list):
            details[str(key)] = [str(message) for message in messages]
        else:
            details[str(key)] = [str(messages)]
    return details


class WasenderHttpClient:
    """
    Authenticated request/response mapping for the Wasender REST API.

    Builds the URL and bearer header for the endpoint's token scope, parses
    the JSON body, extracts rate limit headers and converts failures into
    ``WasenderAPIError``.
    """

    def __init__(
        self,
        api_key: str | None,
        personal_access_token: str | None = None,
        *,
        base_url: str = settings.base_url,
        transport: HttpTransport | None = None,
        retry: RetryConfig | None = None,
        logger: Any | None = None,
    ):
        self.api_key = api_key
        self.personal_access_token = personal_access_token
        self.url_builder = WasenderUrlBuilder(base_url)
        self.transport = transport or AiohttpTransport()
        self.retry = retry or RetryConfig()
        self.logger = logger or get_logger(__name__)

    def _resolve_token(self, auth: AuthScope) -> str:
        if auth is AuthScope.PERSONAL_ACCESS_TOKEN:
            if not self.personal_access_token:
                raise WasenderAPIError(
                    "Personal access token is required for session management endpoints"
                )
            return self.personal_access_token
        if not self.api_key:
            raise WasenderAPIError("API key is required for this endpoint")
        return self.api_key

    def _get_headers(self, token: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    @staticmethod
    def _parse_body(response: HttpResponse) -> Any:
        """Decode the JSON body; None for an empty body."""
        if not response.text or not response.text.strip():
            return None
        return json.loads(response.text)

    def _build_error(
        self,
        response: HttpResponse,
        body: Any,
        rate_limit: RateLimitInfo | None,
    ) -> WasenderAPIError:
        if isinstance(body, Mapping):
            message = body.get("message") or f"HTTP {response.status}"
            return WasenderAPIError(
                str(message),
                status_code=response.status,
                error_details=_parse_error_details(body.get("errors")),
                retry_after=_parse_retry_after(body.get("retry_after")),
                rate_limit=rate_limit,
            )
        snippet = (response.text or "").strip()[:200]
        return WasenderAPIError(
            snippet or f"HTTP {response.status}",
            status_code=response.status,
            rate_limit=rate_limit,
        )

    async def request(
        self,
        method: str,
        endpoint: str,
        response_model: type[ModelT],
        *,
        auth: AuthScope = AuthScope.API_KEY,
        json_body: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> WasenderResult[ModelT]:
        """
        Perform an authenticated API call.

        Args:
            method: HTTP method
            endpoint: Path relative to the base URL (e.g. ``contacts/123``)
            response_model: Model the success body is validated against
            auth: Token scope the endpoint requires
            json_body: JSON request body
            params: Query parameters

        Returns:
            WasenderResult with the parsed body and rate limit info

        Raises:
            WasenderAPIError: missing token, network failure, non-2xx status,
                ``success: false`` body or unexpected body structure
        """
        token = self._resolve_token(auth)
        url = self.url_builder.get_endpoint_url(endpoint)
        headers = self._get_headers(token)

        attempt = 0
        while True:
            self.logger.debug(f"{method} {url} (attempt {attempt + 1})")
            try:
                response = await self.transport.send(
                    method, url, headers=headers, json=json_body, params=params
                )
            except (aiohttp.ClientError, TimeoutError) as err:
                self.logger.error(f"Network error calling {method} {url}: {err}")
                raise WasenderAPIError(f"Network error: {err}") from err

            rate_limit = RateLimitInfo.from_headers(response.headers)

            try:
                body = self._parse_body(response)
            except ValueError as err:
                if 200 <= response.status < 300:
                    raise WasenderAPIError(
                        "Invalid JSON in API response",
                        status_code=response.status,
                        rate_limit=rate_limit,
                    ) from err
                body = None

            self.logger.debug(f"{method} {url} -> {response.status}")

            if 200 <= response.status < 300 and not (
                isinstance(body, Mapping) and body.get("success") is False
            ):
                try:
                    parsed = response_model.model_validate(body or {})
                except ValidationError as err:
                    raise WasenderAPIError(
                        "Unexpected API response structure",
                        status_code=response.status,
                        rate_limit=rate_limit,
                    ) from err
                return WasenderResult[response_model](
                    response=parsed, rate_limit=rate_limit
                )

            error = self._build_error(response, body, rate_limit)

            if (
                response.status == 429
                and self.retry.enabled
                and attempt < self.retry.max_retries
            ):
                delay = (
                    error.retry_after
                    if error.retry_after is not None
                    else self.retry.backoff(attempt)
                )
                attempt += 1
                self.logger.warning(
                    f"Rate limited on {method} {url}; retry {attempt}/"
                    f"{self.retry.max_retries} in {delay:.1f}s"
                )
                await asyncio.sleep(delay)
                continue

            if response.status == 401:
                self.logger.error(
                    f"Authentication failed for {method} {url} - check the "
                    f"{'personal access token' if auth is AuthScope.PERSONAL_ACCESS_TOKEN else 'API key'}"
                )
            else:
                self.logger.error(
                    f"API error for {method} {url}: {error.status_code} - {error.api_message}"
                )
            raise error

    async def close(self) -> None:
        """Release transport resources, if the transport holds any."""
        close = getattr(self.transport, "close", None)
        if close is not None:
            await close()
