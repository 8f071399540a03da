"""Utility functions for hookstorm."""

from .datetime import utc_now, ensure_utc
from .uuid import generate_uuid_v4

__all__ = [
    "utc_now",
    "ensure_utc",
    "generate_uuid_v4",
]
