"""Tests for environment-driven settings."""

import pytest

from hookstorm.config import HookstormSettings
from hookstorm.config.constants import DEFAULT_REPLAY_TIMEOUT_SECONDS, DEFAULT_WEBHOOK_EXPIRY_SECONDS


class TestHookstormSettings:
    """Test settings defaults and fallbacks."""
    
    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("WEBHOOK_EXPIRY_SECONDS", "REPLAY_TIMEOUT_SECONDS", "PORT", "ENVIRONMENT"):
            monkeypatch.delenv(name, raising=False)
    
    def test_defaults(self):
        settings = HookstormSettings(_env_file=None)
        
        assert settings.port == 8080
        assert settings.webhook_expiry_seconds == DEFAULT_WEBHOOK_EXPIRY_SECONDS == 86400
        assert settings.replay_timeout_seconds == DEFAULT_REPLAY_TIMEOUT_SECONDS
        assert settings.cors_origins == []
        assert settings.is_production is False
    
    def test_expiry_from_environment(self, monkeypatch):
        monkeypatch.setenv("WEBHOOK_EXPIRY_SECONDS", "600")
        
        assert HookstormSettings(_env_file=None).webhook_expiry_seconds == 600
    
    @pytest.mark.parametrize("value", ["abc", "0", "-30", ""])
    def test_invalid_expiry_falls_back(self, monkeypatch, value):
        monkeypatch.setenv("WEBHOOK_EXPIRY_SECONDS", value)
        
        assert HookstormSettings(_env_file=None).webhook_expiry_seconds == DEFAULT_WEBHOOK_EXPIRY_SECONDS
    
    def test_production_flag(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "Production")
        
        assert HookstormSettings(_env_file=None).is_production is True
