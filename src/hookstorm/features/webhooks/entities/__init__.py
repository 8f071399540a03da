"""Webhook domain entities."""

from .webhook_endpoint import WebhookEndpoint
from .webhook_event import WebhookEvent, MultiValueMap
from .replay_result import ReplayResult

__all__ = [
    "WebhookEndpoint",
    "WebhookEvent",
    "MultiValueMap",
    "ReplayResult",
]
