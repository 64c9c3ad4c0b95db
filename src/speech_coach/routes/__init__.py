from .analyze import router as analyze_router
from .recordings import router as recordings_router

__all__ = ["analyze_router", "recordings_router"]
