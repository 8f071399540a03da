"""Pytest configuration and fixtures for hookstorm tests."""

import pytest
from datetime import datetime, timedelta, timezone

from hookstorm.config import HookstormSettings
from hookstorm.features.webhooks.repositories import WebhookStore


class FrozenClock:
    """Manually advanced UTC clock for expiry tests."""
    
    def __init__(self, start: datetime):
        self.current = start
    
    def __call__(self) -> datetime:
        return self.current
    
    def advance(self, seconds: float) -> datetime:
        self.current = self.current + timedelta(seconds=seconds)
        return self.current


@pytest.fixture
def clock():
    """Clock frozen at a fixed instant."""
    return FrozenClock(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def store(clock):
    """Empty store with a one hour default TTL driven by the frozen clock."""
    return WebhookStore(default_ttl_seconds=3600, clock=clock)


@pytest.fixture
def sample_headers():
    """Captured headers including the original Host."""
    return {
        "host": ["original.example"],
        "content-type": ["application/json"],
        "x-signature": ["abc123"],
        "x-multi": ["first", "second"],
    }


@pytest.fixture
def sample_query_params():
    """Captured query parameters with a repeated key."""
    return {"source": ["github"], "tag": ["a", "b"]}


@pytest.fixture
def test_settings():
    """Settings isolated from the process environment."""
    return HookstormSettings(
        _env_file=None,
        environment="testing",
        webhook_expiry_seconds=3600,
        replay_timeout_seconds=2,
    )
