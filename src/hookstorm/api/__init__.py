"""HTTP API for hookstorm."""

from .app import create_app

__all__ = ["create_app"]
