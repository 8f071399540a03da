"""Webhook capture and replay feature.

Provides the ephemeral endpoint/event store and the replay engine:
- WebhookStore: concurrent, expiry-aware storage for endpoints and events
- HttpReplayAdapter: reconstructs and re-sends captured requests
"""

from .entities import WebhookEndpoint, WebhookEvent, ReplayResult
from .repositories import WebhookStore
from .adapters import HttpReplayAdapter
from .utils import parse_json_body, compute_expiry, validate_target_url

__all__ = [
    "WebhookEndpoint",
    "WebhookEvent",
    "ReplayResult",
    "WebhookStore",
    "HttpReplayAdapter",
    "parse_json_body",
    "compute_expiry",
    "validate_target_url",
]
