"""FastAPI dependencies resolving the application's shared components."""

from fastapi import Request

from ..features.webhooks.adapters import HttpReplayAdapter
from ..features.webhooks.repositories import WebhookStore


def get_webhook_store(request: Request) -> WebhookStore:
    """Get the store owned by the running application."""
    return request.app.state.webhook_store


def get_replay_adapter(request: Request) -> HttpReplayAdapter:
    """Get the replay adapter owned by the running application."""
    return request.app.state.replay_adapter
