"""Configuration for hookstorm."""

from .constants import DEFAULT_WEBHOOK_EXPIRY_SECONDS, DEFAULT_REPLAY_TIMEOUT_SECONDS
from .settings import HookstormSettings, get_settings
from .logging_config import LoggingConfig, LogFormat

__all__ = [
    "DEFAULT_WEBHOOK_EXPIRY_SECONDS",
    "DEFAULT_REPLAY_TIMEOUT_SECONDS",
    "HookstormSettings",
    "get_settings",
    "LoggingConfig",
    "LogFormat",
]
