"""Hookstorm - capture, inspect and replay webhooks.

Short-lived capture endpoints record every inbound request; captured events
can be listed and re-sent to any target URL.
"""

from .__version__ import __version__
from .core.exceptions import (
    HookstormError,
    NotFoundError,
    EndpointNotFoundError,
    EventNotFoundError,
    EndpointExpiredError,
    InvalidTargetError,
    TransportFailureError,
)
from .features.webhooks import (
    WebhookEndpoint,
    WebhookEvent,
    ReplayResult,
    WebhookStore,
    HttpReplayAdapter,
)

__all__ = [
    "__version__",
    "HookstormError",
    "NotFoundError",
    "EndpointNotFoundError",
    "EventNotFoundError",
    "EndpointExpiredError",
    "InvalidTargetError",
    "TransportFailureError",
    "WebhookEndpoint",
    "WebhookEvent",
    "ReplayResult",
    "WebhookStore",
    "HttpReplayAdapter",
]
