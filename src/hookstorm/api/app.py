"""Hookstorm application factory.

Builds the FastAPI application that owns one WebhookStore and one
HttpReplayAdapter for its lifetime.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..__version__ import __version__
from ..config import HookstormSettings, get_settings
from ..features.webhooks.adapters import HttpReplayAdapter
from ..features.webhooks.repositories import WebhookStore
from .exception_handlers import register_exception_handlers
from .routers import endpoints_router, hooks_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(
        f"Webhook expiry set to {app.state.webhook_store.default_ttl_seconds} seconds"
    )
    
    yield
    
    # Cleanup
    await app.state.replay_adapter.close()


def create_app(settings: Optional[HookstormSettings] = None) -> FastAPI:
    """Create the hookstorm API.
    
    Args:
        settings: Explicit settings, defaults to the environment-derived ones
        
    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    
    app = FastAPI(
        title="Hookstorm",
        version=__version__,
        description="Capture, inspect and replay webhooks on short-lived endpoints",
        lifespan=lifespan,
    )
    
    app.state.settings = settings
    app.state.webhook_store = WebhookStore(default_ttl_seconds=settings.webhook_expiry_seconds)
    app.state.replay_adapter = HttpReplayAdapter(timeout_seconds=settings.replay_timeout_seconds)
    
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    
    register_exception_handlers(app, is_production=settings.is_production)
    
    app.include_router(endpoints_router, prefix="/api/endpoints", tags=["Endpoints"])
    app.include_router(hooks_router, tags=["Webhooks"])
    
    return app
