"""Pytest configuration and shared fixtures for the pantry tests.

Provides sample ingredient snapshots, Neo4j-shaped result records, and
GraphConnection instances wired to mocked driver sessions so that no test
needs a running database.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from pantry.graph import GraphConnection, Ingredient, IngredientStore

# ---------------------------------------------------------------------------
# Ingredient Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def flour() -> Ingredient:
    """A persisted 'flour' ingredient."""
    return Ingredient(properties={"name": "flour"})


@pytest.fixture
def sugar() -> Ingredient:
    """A persisted 'sugar' ingredient."""
    return Ingredient(properties={"name": "sugar"})


@pytest.fixture
def make_record():
    """Factory for a Neo4j record carrying one node under the given key."""

    def _make(name: str, key: str = "ingredient", **extra: Any) -> dict[str, Any]:
        return {key: {"name": name}, **extra}

    return _make


# ---------------------------------------------------------------------------
# Neo4j Driver Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_neo4j_result() -> MagicMock:
    """A mock Neo4j result returning no rows by default."""
    result = MagicMock()
    result.data = AsyncMock(return_value=[])
    result.single = AsyncMock(return_value=None)
    result.consume = AsyncMock()
    return result


@pytest.fixture
def mock_neo4j_session(mock_neo4j_result: MagicMock) -> MagicMock:
    """A mock Neo4j async session whose run() yields mock_neo4j_result."""
    session = MagicMock()
    session.run = AsyncMock(return_value=mock_neo4j_result)
    session.close = AsyncMock()
    return session


@pytest.fixture
def mock_neo4j_driver() -> MagicMock:
    """A mock Neo4j async driver."""
    driver = MagicMock()
    driver.verify_connectivity = AsyncMock()
    driver.close = AsyncMock()
    return driver


@pytest.fixture
def mock_graph_connection(mock_neo4j_driver: MagicMock, mock_neo4j_session: MagicMock) -> GraphConnection:
    """A GraphConnection whose sessions are the mocked session."""
    connection = GraphConnection(
        uri="bolt://localhost:7687",
        user="neo4j",
        password="password",
    )
    connection._driver = mock_neo4j_driver

    @asynccontextmanager
    async def mock_session_cm(**kwargs: Any) -> AsyncGenerator[MagicMock, None]:
        yield mock_neo4j_session

    connection.session = MagicMock(side_effect=mock_session_cm)
    return connection


# ---------------------------------------------------------------------------
# Store Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_connection() -> MagicMock:
    """A stand-in GraphConnection whose run() returns no rows by default."""
    connection = MagicMock(spec=GraphConnection)
    connection.run = AsyncMock(return_value=[])
    return connection


@pytest.fixture
def store(fake_connection: MagicMock) -> IngredientStore:
    """An IngredientStore over the fake connection."""
    return IngredientStore(fake_connection)
