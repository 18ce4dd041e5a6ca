"""Dependency injection setup for the Pantry API.

This module provides FastAPI dependency functions for injecting
the graph connection and ingredient store into route handlers.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends

from pantry.graph import GraphConnection, IngredientStore, ensure_schema

from .config import Settings, get_settings

# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]


# Process-wide instances, created on startup and torn down on shutdown
_graph_connection: GraphConnection | None = None
_ingredient_store: IngredientStore | None = None


async def init_dependencies(settings: Settings) -> None:
    """Initialize global dependencies on application startup.

    Connects to Neo4j and ensures the unique name constraint before the
    store is handed out. Any failure propagates and aborts startup.

    Args:
        settings: Application settings instance.
    """
    global _graph_connection, _ingredient_store

    connection = GraphConnection(
        uri=settings.neo4j_uri,
        user=settings.neo4j_user,
        password=settings.neo4j_password,
        database=settings.neo4j_database,
        max_connection_pool_size=settings.neo4j_max_pool_size,
        connection_acquisition_timeout=settings.neo4j_acquisition_timeout,
    )
    await connection.connect()

    try:
        await ensure_schema(connection)
    except Exception:
        await connection.close()
        raise

    _graph_connection = connection
    _ingredient_store = IngredientStore(connection)


async def shutdown_dependencies() -> None:
    """Close the Neo4j connection and release resources."""
    global _graph_connection, _ingredient_store

    if _graph_connection is not None:
        await _graph_connection.close()
        _graph_connection = None

    _ingredient_store = None


async def get_graph_connection() -> AsyncGenerator[GraphConnection, None]:
    """Get the Neo4j graph connection.

    Raises:
        RuntimeError: If dependencies have not been initialized.
    """
    if _graph_connection is None:
        raise RuntimeError(
            "Graph connection not initialized. Ensure init_dependencies() was called on startup."
        )
    yield _graph_connection


async def get_ingredient_store() -> AsyncGenerator[IngredientStore, None]:
    """Get the ingredient store.

    Raises:
        RuntimeError: If dependencies have not been initialized.
    """
    if _ingredient_store is None:
        raise RuntimeError(
            "Ingredient store not initialized. Ensure init_dependencies() was called on startup."
        )
    yield _ingredient_store


# Type aliases for commonly used dependencies
GraphConnectionDep = Annotated[GraphConnection, Depends(get_graph_connection)]
IngredientStoreDep = Annotated[IngredientStore, Depends(get_ingredient_store)]
