"""Pantry - API module for REST endpoints.

This module provides the FastAPI application and all related components
for the Pantry ingredient API.
"""

from .config import Settings, get_settings
from .dependencies import get_graph_connection, get_ingredient_store
from .main import app, create_app

__all__ = [
    "app",
    "create_app",
    "get_graph_connection",
    "get_ingredient_store",
    "get_settings",
    "Settings",
]
