"""Outbound adapters for the webhook feature."""

from .http_replay_adapter import (
    HttpReplayAdapter,
    build_replay_headers,
    build_replay_url,
    EXCLUDED_REPLAY_HEADERS,
)

__all__ = [
    "HttpReplayAdapter",
    "build_replay_headers",
    "build_replay_url",
    "EXCLUDED_REPLAY_HEADERS",
]
