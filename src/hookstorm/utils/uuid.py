"""UUID utilities for hookstorm."""

import uuid


def generate_uuid_v4() -> str:
    """
    Generate a standard UUIDv4 (random).
    
    Returns:
        String representation of UUIDv4
    """
    return str(uuid.uuid4())
