"""Webhook endpoint domain entity.

An endpoint is a short-lived capture address. Its expiry is fixed at creation
and evaluated lazily on every access; expired endpoints are never removed.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from ....utils import utc_now


@dataclass(frozen=True)
class WebhookEndpoint:
    """Webhook endpoint domain entity.
    
    Instances are immutable snapshots. The store publishes a new snapshot
    whenever the event count changes.
    """
    
    id: str
    name: str
    created_at: datetime
    expires_at: datetime
    ttl_seconds: int
    event_count: int = 0
    
    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check whether the endpoint is past its expiry instant.
        
        The expiry instant itself still counts as valid.
        """
        return (now or utc_now()) > self.expires_at
    
    def with_event_recorded(self) -> "WebhookEndpoint":
        """Return a snapshot with the event count bumped by one."""
        return replace(self, event_count=self.event_count + 1)
