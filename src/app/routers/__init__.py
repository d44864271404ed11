"""API routers for HIFLD Layer Search."""

from app.routers.layers import router as layers_router

__all__ = ["layers_router"]
