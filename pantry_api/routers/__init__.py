"""API routers for the Pantry application.

This module exports all API routers for inclusion in the main FastAPI app.
"""

from .health import router as health_router
from .ingredients import router as ingredients_router

__all__ = [
    "health_router",
    "ingredients_router",
]
