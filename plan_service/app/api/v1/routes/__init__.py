"""Route module exports for API v1."""

from .health import router as health_router
from .plans import router as plans_router

__all__ = ["health_router", "plans_router"]
