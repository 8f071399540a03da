"""In-memory repositories for the webhook feature."""

from .locks import ReadWriteLock
from .webhook_store import WebhookStore

__all__ = [
    "ReadWriteLock",
    "WebhookStore",
]
