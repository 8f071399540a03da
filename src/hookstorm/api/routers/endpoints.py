"""Endpoint management and replay API."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, status

from ...core.exceptions import EventEndpointMismatchError, InvalidTargetError
from ...features.webhooks.adapters import HttpReplayAdapter
from ...features.webhooks.repositories import WebhookStore
from ..dependencies import get_replay_adapter, get_webhook_store
from ..models import (
    EndpointCreateRequest,
    EndpointResponse,
    EventResponse,
    ReplayRequest,
    ReplayResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _capture_url(request: Request, endpoint_id: str) -> str:
    return str(request.url_for("receive_webhook", endpoint_id=endpoint_id))


@router.post("", response_model=EndpointResponse, status_code=status.HTTP_201_CREATED)
async def create_endpoint(
    payload: EndpointCreateRequest,
    request: Request,
    store: WebhookStore = Depends(get_webhook_store),
) -> EndpointResponse:
    """Create a new webhook endpoint with an optional TTL override."""
    endpoint = store.create_endpoint(payload.name, payload.ttl_seconds)
    logger.info(f"Created endpoint {endpoint.id} expiring at {endpoint.expires_at.isoformat()}")
    return EndpointResponse.from_entity(endpoint, _capture_url(request, endpoint.id))


@router.get("/{endpoint_id}", response_model=EndpointResponse)
async def get_endpoint(
    endpoint_id: str,
    request: Request,
    store: WebhookStore = Depends(get_webhook_store),
) -> EndpointResponse:
    """Get endpoint details. Unknown endpoints return 404, expired ones 410."""
    endpoint = store.get_endpoint(endpoint_id)
    return EndpointResponse.from_entity(endpoint, _capture_url(request, endpoint.id))


@router.get("/{endpoint_id}/events", response_model=List[EventResponse])
async def list_events(
    endpoint_id: str,
    store: WebhookStore = Depends(get_webhook_store),
) -> List[EventResponse]:
    """List captured events in arrival order, including after the endpoint expired."""
    return [EventResponse.from_entity(event) for event in store.list_events(endpoint_id)]


@router.post("/{endpoint_id}/events/{event_id}/replay", response_model=ReplayResponse)
async def replay_event(
    endpoint_id: str,
    event_id: str,
    payload: Optional[ReplayRequest] = None,
    store: WebhookStore = Depends(get_webhook_store),
    replay_adapter: HttpReplayAdapter = Depends(get_replay_adapter),
) -> ReplayResponse:
    """Re-send a captured event to a target URL.

    The response is 200 whenever the replay was attempted; ``success`` tells
    whether the target answered.
    """
    event = store.get_event(event_id)

    if event.endpoint_id != endpoint_id:
        raise EventEndpointMismatchError(event_id, endpoint_id)

    target_url = payload.target_url if payload else None
    if not target_url or not target_url.strip():
        raise InvalidTargetError("Target URL is required")

    result = await replay_adapter.replay_event(event, target_url)

    if result.success:
        store.increment_replay_count(event_id)
        logger.info(f"Replayed event {event_id} to {target_url} [{result.response_code}]")
    else:
        logger.warning(f"Replay of event {event_id} to {target_url} failed: {result.error}")

    return ReplayResponse.from_result(result)
