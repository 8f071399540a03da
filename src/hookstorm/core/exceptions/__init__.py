"""Exceptions module for hookstorm."""

from .base import (
    HookstormError,
    get_http_status_code,
)

from .domain import (
    NotFoundError,
    EndpointNotFoundError,
    EventNotFoundError,
    EndpointExpiredError,
    EventEndpointMismatchError,
    ReplayError,
    InvalidTargetError,
    TransportFailureError,
)

from .http_mapping import HTTP_STATUS_MAP

__all__ = [
    "HookstormError",
    "get_http_status_code",
    "NotFoundError",
    "EndpointNotFoundError",
    "EventNotFoundError",
    "EndpointExpiredError",
    "EventEndpointMismatchError",
    "ReplayError",
    "InvalidTargetError",
    "TransportFailureError",
    "HTTP_STATUS_MAP",
]
