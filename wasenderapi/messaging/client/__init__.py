"""Wasender HTTP client package."""

from .http_client import AuthScope, RetryConfig, WasenderHttpClient, WasenderUrlBuilder
from .transport import AiohttpTransport, HttpResponse, HttpTransport

__all__ = [
    "AiohttpTransport",
    "AuthScope",
    "HttpResponse",
    "HttpTransport",
    "RetryConfig",
    "WasenderHttpClient",
    "WasenderUrlBuilder",
]
