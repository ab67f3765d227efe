"""API route modules."""

from .health import router as health_router
from .properties import router as properties_router

__all__ = [
    "health_router",
    "properties_router",
]
