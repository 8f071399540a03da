"""Request and response models for the hookstorm HTTP API."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..features.webhooks.entities import ReplayResult, WebhookEndpoint, WebhookEvent


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class EndpointCreateRequest(BaseSchema):
    """Request model for creating a webhook endpoint."""

    name: str = Field(..., min_length=1, max_length=255, description="Endpoint label")
    ttl_seconds: int = Field(
        0,
        description="Lifetime override in seconds; zero or negative uses the configured default"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject blank names."""
        if not v.strip():
            raise ValueError("name must not be blank")
        return v


class EndpointResponse(BaseSchema):
    """Response model for a webhook endpoint."""

    id: str = Field(..., description="Endpoint ID")
    name: str = Field(..., description="Endpoint label")
    url: str = Field(..., description="Capture URL for this endpoint")
    created_at: datetime = Field(..., description="Creation timestamp")
    expires_at: datetime = Field(..., description="Expiry timestamp")
    event_count: int = Field(..., description="Number of captured events")

    @classmethod
    def from_entity(cls, endpoint: WebhookEndpoint, url: str) -> "EndpointResponse":
        """Create response from endpoint entity."""
        return cls(
            id=endpoint.id,
            name=endpoint.name,
            url=url,
            created_at=endpoint.created_at,
            expires_at=endpoint.expires_at,
            event_count=endpoint.event_count,
        )


class EventResponse(BaseSchema):
    """Response model for a captured event."""

    id: str
    endpoint_id: str
    received_at: datetime
    method: str
    headers: Dict[str, List[str]]
    query_params: Dict[str, List[str]]
    body: Dict[str, Any]
    replay_count: int

    @classmethod
    def from_entity(cls, event: WebhookEvent) -> "EventResponse":
        """Create response from event entity."""
        return cls.model_validate(event)


class ReplayRequest(BaseSchema):
    """Request model for replaying an event."""

    target_url: Optional[str] = Field(None, description="URL the event is re-sent to")


class ReplayResponse(BaseSchema):
    """Response model for a replay attempt."""

    success: bool = Field(..., description="Whether the target answered")
    replayed_at: datetime = Field(..., description="Dispatch timestamp")
    response_code: Optional[int] = Field(None, description="Status code returned by the target")
    error: Optional[str] = Field(None, description="Failure description")

    @classmethod
    def from_result(cls, result: ReplayResult) -> "ReplayResponse":
        """Create response from replay result."""
        return cls.model_validate(result)


class CaptureResponse(BaseSchema):
    """Acknowledgement returned to webhook senders."""

    status: str = "received"
