"""
Service configuration for hookstorm.

Settings are read from the environment (and an optional .env file) with
pydantic-settings. The TTL default is forgiving: a missing, non-numeric or
non-positive WEBHOOK_EXPIRY_SECONDS falls back to 24 hours instead of failing
startup.
"""
from functools import lru_cache
from typing import Any, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_WEBHOOK_EXPIRY_SECONDS, DEFAULT_REPLAY_TIMEOUT_SECONDS


class HookstormSettings(BaseSettings):
    """Application settings for the webhook capture service."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Core Application Settings
    app_name: str = Field(default="hookstorm")
    environment: str = Field(default="development")
    debug: bool = Field(default=False)
    
    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)
    
    # Webhook Configuration
    webhook_expiry_seconds: int = Field(default=DEFAULT_WEBHOOK_EXPIRY_SECONDS)
    replay_timeout_seconds: float = Field(default=DEFAULT_REPLAY_TIMEOUT_SECONDS, gt=0)
    
    # CORS Configuration
    cors_origins: List[str] = Field(default=[])
    
    @field_validator("webhook_expiry_seconds", mode="before")
    @classmethod
    def _fallback_expiry(cls, value: Any) -> int:
        try:
            expiry = int(value)
        except (TypeError, ValueError):
            return DEFAULT_WEBHOOK_EXPIRY_SECONDS
        return expiry if expiry > 0 else DEFAULT_WEBHOOK_EXPIRY_SECONDS
    
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment.lower() == "production"


@lru_cache()
def get_settings() -> HookstormSettings:
    """Get cached settings instance."""
    return HookstormSettings()
