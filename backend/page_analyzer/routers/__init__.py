"""Page routers."""
from .pages import router as pages_router
from .urls import router as urls_router

__all__ = ["pages_router", "urls_router"]
