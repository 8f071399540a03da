"""Captured webhook event entity."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, List

# Ordered multi-map: name -> values in arrival order
MultiValueMap = Dict[str, List[str]]


@dataclass(frozen=True)
class WebhookEvent:
    """A single inbound request captured by an endpoint.
    
    The store hands out copies, so changing an event's headers, query
    parameters or body never alters what was captured.
    """
    
    id: str
    endpoint_id: str
    received_at: datetime
    method: str
    headers: MultiValueMap = field(default_factory=dict)
    query_params: MultiValueMap = field(default_factory=dict)
    body: Dict[str, Any] = field(default_factory=dict)
    replay_count: int = 0
    
    def with_replay_recorded(self) -> "WebhookEvent":
        """Return a snapshot with the replay count bumped by one."""
        return replace(self, replay_count=self.replay_count + 1)
