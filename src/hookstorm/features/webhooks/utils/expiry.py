"""TTL policy for webhook endpoints."""

from datetime import datetime, timedelta
from typing import Optional

from ....utils import utc_now, ensure_utc


def effective_ttl(default_ttl_seconds: int, custom_ttl_seconds: Optional[int] = None) -> int:
    """Pick the TTL an endpoint is created with.
    
    The caller's override wins only when it is a positive number of seconds.
    """
    if custom_ttl_seconds is not None and custom_ttl_seconds > 0:
        return custom_ttl_seconds
    return default_ttl_seconds


def compute_expiry(
    default_ttl_seconds: int,
    custom_ttl_seconds: Optional[int] = None,
    now: Optional[datetime] = None
) -> datetime:
    """Compute the absolute expiry instant for a new endpoint.
    
    Args:
        default_ttl_seconds: Configured default lifetime
        custom_ttl_seconds: Optional per-endpoint override
        now: Reference instant, defaults to the current UTC time
        
    Returns:
        Timezone-aware UTC expiry instant
    """
    start = ensure_utc(now) if now is not None else utc_now()
    ttl = effective_ttl(default_ttl_seconds, custom_ttl_seconds)
    return start + timedelta(seconds=ttl)
