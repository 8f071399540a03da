"""HTTP status code mapping for exceptions."""

from .base import HookstormError
from .domain import (
    NotFoundError,
    EndpointNotFoundError,
    EventNotFoundError,
    EndpointExpiredError,
    EventEndpointMismatchError,
    InvalidTargetError,
)


HTTP_STATUS_MAP = {
    # 400 Bad Request
    EventEndpointMismatchError: 400,
    InvalidTargetError: 400,
    
    # 404 Not Found
    NotFoundError: 404,
    EndpointNotFoundError: 404,
    EventNotFoundError: 404,
    
    # 410 Gone
    EndpointExpiredError: 410,
    
    # Default for HookstormError
    HookstormError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Resolve the HTTP status for an exception by walking its class hierarchy.
    
    Args:
        exception: The exception instance
        
    Returns:
        HTTP status code, 500 for anything unmapped
    """
    for exc_class in type(exception).__mro__:
        if exc_class in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exc_class]
    return 500
