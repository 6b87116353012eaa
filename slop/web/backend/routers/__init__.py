"""API routers for the web backend."""

from .analyze import router as analyze_router
from .enhance import router as enhance_router
from .scenes import router as scenes_router

__all__ = [
    "analyze_router",
    "enhance_router",
    "scenes_router",
]
