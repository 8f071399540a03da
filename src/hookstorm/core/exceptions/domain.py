"""Domain exceptions for endpoints, events and replays."""

from .base import HookstormError


class NotFoundError(HookstormError):
    """Raised when an endpoint or event id is unknown."""
    pass


class EndpointNotFoundError(NotFoundError):
    """Raised when no endpoint with the given id was ever created."""
    
    def __init__(self, endpoint_id: str):
        super().__init__(
            "Endpoint not found",
            details={"endpoint_id": endpoint_id},
        )
        self.endpoint_id = endpoint_id


class EventNotFoundError(NotFoundError):
    """Raised when no event with the given id was ever captured."""
    
    def __init__(self, event_id: str):
        super().__init__(
            "Event not found",
            details={"event_id": event_id},
        )
        self.event_id = event_id


class EndpointExpiredError(HookstormError):
    """Raised when an endpoint exists but its expiry instant has passed."""
    
    def __init__(self, endpoint_id: str):
        super().__init__(
            "This webhook endpoint has expired",
            details={"endpoint_id": endpoint_id},
        )
        self.endpoint_id = endpoint_id


class EventEndpointMismatchError(HookstormError):
    """Raised when an event is addressed through an endpoint it does not belong to."""
    
    def __init__(self, event_id: str, endpoint_id: str):
        super().__init__(
            "Event does not belong to this endpoint",
            details={"event_id": event_id, "endpoint_id": endpoint_id},
        )


# Replay Errors
class ReplayError(HookstormError):
    """Base class for replay failures."""
    pass


class InvalidTargetError(ReplayError):
    """Raised when a replay target URL is missing or cannot be used."""
    pass


class TransportFailureError(ReplayError):
    """Raised when the replay request could not complete a round trip."""
    pass
