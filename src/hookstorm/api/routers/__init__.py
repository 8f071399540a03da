"""HTTP routers for hookstorm."""

from .endpoints import router as endpoints_router
from .hooks import router as hooks_router

__all__ = [
    "endpoints_router",
    "hooks_router",
]
