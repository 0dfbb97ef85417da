"""
Shared response and result models for the Wasender REST API.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from wasenderapi.core.types import RateLimitInfo

DataT = TypeVar("DataT")
ResponseT = TypeVar("ResponseT")


class WasenderModel(BaseModel):
    """
    Base for models received from the API.

    Unknown fields are kept so new server-side fields survive a round trip.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class WasenderRequestModel(BaseModel):
    """Base for payloads the client sends."""

    model_config = ConfigDict(populate_by_name=True)

    def to_api_payload(self) -> dict:
        """Serialize with wire names, dropping unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class WasenderResponse(WasenderModel, Generic[DataT]):
    """Standard success body: ``{"success": true, "message": ..., "data": ...}``."""

    success: bool = True
    message: str | None = None
    data: DataT | None = None


class WasenderResult(BaseModel, Generic[ResponseT]):
    """
    A successful API call: the parsed body plus rate limit headers.

    ``rate_limit`` is None when the server sent no rate limit headers.
    """

    response: ResponseT
    rate_limit: RateLimitInfo | None = Field(
        None, description="Rate limit snapshot from the response headers"
    )

    @property
    def data(self):
        """Shortcut to ``response.data``."""
        return getattr(self.response, "data", None)
