"""In-memory storage for webhook endpoints and captured events.

This module implements the volatile store behind the capture service.
Single responsibility: keep endpoints, events and the endpoint -> event index
consistent under concurrent access. No persistence (data lost on restart),
no eviction (expired entries stay in memory), no logging.

Concurrency model:
- One ReadWriteLock guards all three collections as a unit
- Lookups take the shared side; every mutation takes the exclusive side
  for the whole multi-collection update
- Expiry is evaluated at access time against the injected clock
"""

import json
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from ....config.constants import DEFAULT_WEBHOOK_EXPIRY_SECONDS
from ....core.exceptions import (
    EndpointExpiredError,
    EndpointNotFoundError,
    EventNotFoundError,
)
from ....utils import generate_uuid_v4, utc_now
from ..entities import MultiValueMap, WebhookEndpoint, WebhookEvent
from ..utils.expiry import compute_expiry, effective_ttl
from .locks import ReadWriteLock


class WebhookStore:
    """Concurrent, time-bounded store for endpoints and their events.

    Features:
    - Endpoint creation with default or per-endpoint TTL
    - Expiry-aware endpoint lookup and capture
    - Atomic capture: event record, index append and event count bump are
      published together or not at all
    - Capture-ordered event listing that survives endpoint expiry
    - Replay counter bookkeeping
    """

    def __init__(
        self,
        default_ttl_seconds: int = DEFAULT_WEBHOOK_EXPIRY_SECONDS,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = generate_uuid_v4
    ):
        """Initialize an empty store.

        Args:
            default_ttl_seconds: Lifetime used when create_endpoint gets no
                positive override
            clock: Source of the current UTC instant
            id_factory: Generator for endpoint and event ids
        """
        self._default_ttl = default_ttl_seconds
        self._clock = clock
        self._new_id = id_factory

        self._lock = ReadWriteLock()

        # Endpoint storage: endpoint_id -> WebhookEndpoint
        self._endpoints: Dict[str, WebhookEndpoint] = {}

        # Event storage: event_id -> WebhookEvent
        self._events: Dict[str, WebhookEvent] = {}

        # Capture order: endpoint_id -> list of event ids
        self._events_by_endpoint: Dict[str, List[str]] = {}

    @property
    def default_ttl_seconds(self) -> int:
        return self._default_ttl

    # ===========================================
    # Endpoint Operations
    # ===========================================

    def create_endpoint(self, name: str, ttl_seconds: Optional[int] = None) -> WebhookEndpoint:
        """Create a new endpoint.

        Args:
            name: Caller supplied label
            ttl_seconds: Optional lifetime override, ignored unless positive

        Returns:
            The stored endpoint with event_count 0
        """
        with self._lock.write():
            now = self._clock()
            endpoint = WebhookEndpoint(
                id=self._new_id(),
                name=name,
                created_at=now,
                expires_at=compute_expiry(self._default_ttl, ttl_seconds, now=now),
                ttl_seconds=effective_ttl(self._default_ttl, ttl_seconds),
            )

            self._endpoints[endpoint.id] = endpoint
            self._events_by_endpoint[endpoint.id] = []

            return endpoint

    def get_endpoint(self, endpoint_id: str) -> WebhookEndpoint:
        """Get an endpoint that exists and has not expired.

        Raises:
            EndpointNotFoundError: If the id was never created
            EndpointExpiredError: If the endpoint is past its expiry instant
        """
        with self._lock.read():
            return self._validate_endpoint(endpoint_id)

    def _validate_endpoint(self, endpoint_id: str) -> WebhookEndpoint:
        """Resolve an endpoint for access. Caller must hold the lock."""
        endpoint = self._endpoints.get(endpoint_id)
        if endpoint is None:
            raise EndpointNotFoundError(endpoint_id)
        if endpoint.is_expired(self._clock()):
            raise EndpointExpiredError(endpoint_id)
        return endpoint

    # ===========================================
    # Event Operations
    # ===========================================

    def save_event(
        self,
        endpoint_id: str,
        method: str,
        headers: Mapping[str, Sequence[str]],
        query_params: Mapping[str, Sequence[str]],
        body: Dict[str, Any]
    ) -> WebhookEvent:
        """Capture an inbound request for an endpoint.

        Args:
            endpoint_id: Target endpoint
            method: HTTP method of the inbound request
            headers: Header name -> values, in arrival order
            query_params: Query key -> values, in arrival order
            body: Normalised JSON object body

        Returns:
            The stored event

        Raises:
            EndpointNotFoundError: If the endpoint was never created
            EndpointExpiredError: If the endpoint has expired; nothing is stored
        """
        with self._lock.write():
            endpoint = self._validate_endpoint(endpoint_id)

            event = WebhookEvent(
                id=self._new_id(),
                endpoint_id=endpoint_id,
                received_at=self._clock(),
                method=method,
                headers=_copy_multi_map(headers),
                query_params=_copy_multi_map(query_params),
                body=_copy_body(body),
            )

            self._events[event.id] = event
            self._events_by_endpoint[endpoint_id].append(event.id)
            self._endpoints[endpoint_id] = endpoint.with_event_recorded()

            return _detach(event)

    def get_event(self, event_id: str) -> WebhookEvent:
        """Get a captured event by id.

        Raises:
            EventNotFoundError: If no such event was captured
        """
        with self._lock.read():
            event = self._events.get(event_id)
            if event is None:
                raise EventNotFoundError(event_id)
            return _detach(event)

    def list_events(self, endpoint_id: str) -> List[WebhookEvent]:
        """List an endpoint's events in capture order.

        Expired endpoints still list the events they captured while valid.

        Raises:
            EndpointNotFoundError: If the endpoint was never created
        """
        with self._lock.read():
            if endpoint_id not in self._endpoints:
                raise EndpointNotFoundError(endpoint_id)

            return [
                _detach(self._events[event_id])
                for event_id in self._events_by_endpoint.get(endpoint_id, [])
            ]

    def increment_replay_count(self, event_id: str) -> WebhookEvent:
        """Record one successful replay of an event.

        Every call counts once; retried calls are not deduplicated.

        Returns:
            The updated event

        Raises:
            EventNotFoundError: If no such event was captured
        """
        with self._lock.write():
            event = self._events.get(event_id)
            if event is None:
                raise EventNotFoundError(event_id)

            updated = event.with_replay_recorded()
            self._events[event_id] = updated
            return _detach(updated)


def _copy_multi_map(source: Mapping[str, Sequence[str]]) -> MultiValueMap:
    return {
        key: [values] if isinstance(values, str) else list(values)
        for key, values in source.items()
    }


def _copy_body(body: Dict[str, Any]) -> Dict[str, Any]:
    # Bodies are JSON objects; the codec copies any depth the parser accepted
    return json.loads(json.dumps(body))


def _detach(event: WebhookEvent) -> WebhookEvent:
    """Copy an event so callers never share the stored maps."""
    return replace(
        event,
        headers=_copy_multi_map(event.headers),
        query_params=_copy_multi_map(event.query_params),
        body=_copy_body(event.body),
    )
