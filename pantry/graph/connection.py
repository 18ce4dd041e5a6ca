"""Neo4j connection management.

This module provides the GraphConnection class, the only place that talks
to the Neo4j driver. It supports async context management, connection
pooling, health checks, and translates driver errors into domain errors.
"""

import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from neo4j import READ_ACCESS, WRITE_ACCESS, AsyncDriver, AsyncGraphDatabase, AsyncSession
from neo4j.exceptions import ConstraintError, DriverError, Neo4jError, ServiceUnavailable

from .errors import ConflictError, DatabaseError, GraphConnectionError
from .queries import CypherQuery

logger = structlog.get_logger(__name__)


def translate_error(error: Exception, conflict_key: str | None = None) -> DatabaseError | ConflictError:
    """Map a driver exception onto the domain error taxonomy.

    A uniqueness constraint violation becomes ConflictError only when the
    caller names the key it was writing; everything else is a DatabaseError.

    Args:
        error: The exception raised by the driver.
        conflict_key: The unique key being written, if any.

    Returns:
        The domain error to raise in place of error.
    """
    if isinstance(error, ConstraintError) and conflict_key is not None:
        # Name is the only unique property on Ingredient.
        return ConflictError(conflict_key)
    return DatabaseError(f"Neo4j query failed: {error}")


class GraphConnection:
    """Manages connections to the Neo4j graph database.

    Each execute call runs a single auto-commit statement, so every
    repository operation costs one round trip and is never retried here.

    Attributes:
        uri: Neo4j connection URI.
        user: Neo4j username.
        password: Neo4j password.
        database: Neo4j database name.
    """

    def __init__(
        self,
        uri: str | None = None,
        user: str | None = None,
        password: str | None = None,
        database: str = "neo4j",
        max_connection_pool_size: int = 50,
        connection_acquisition_timeout: float = 60.0,
    ) -> None:
        """Initialize the graph connection.

        Args:
            uri: Neo4j connection URI. Defaults to NEO4J_URI env var.
            user: Neo4j username. Defaults to NEO4J_USER env var.
            password: Neo4j password. Defaults to NEO4J_PASSWORD env var.
            database: Neo4j database name.
            max_connection_pool_size: Maximum connections in the pool.
            connection_acquisition_timeout: Timeout for acquiring a connection.
        """
        self.uri = uri or os.getenv("NEO4J_URI", "bolt://localhost:7687")
        self.user = user or os.getenv("NEO4J_USER", "neo4j")
        self.password = password or os.getenv("NEO4J_PASSWORD", "password")
        self.database = database
        self._max_pool_size = max_connection_pool_size
        self._acquisition_timeout = connection_acquisition_timeout
        self._driver: AsyncDriver | None = None

    async def connect(self) -> None:
        """Establish connection to Neo4j.

        Raises:
            GraphConnectionError: If connection fails.
        """
        if self._driver is not None:
            return

        driver = AsyncGraphDatabase.driver(
            self.uri,
            auth=(self.user, self.password),
            max_connection_pool_size=self._max_pool_size,
            connection_acquisition_timeout=self._acquisition_timeout,
        )
        try:
            await driver.verify_connectivity()
        except ServiceUnavailable as e:
            await driver.close()
            raise GraphConnectionError(f"Failed to connect to Neo4j: {e}") from e
        except (Neo4jError, DriverError) as e:
            await driver.close()
            raise GraphConnectionError(f"Unexpected error connecting to Neo4j: {e}") from e

        self._driver = driver
        logger.info("Connected to Neo4j", uri=self.uri, database=self.database)

    async def close(self) -> None:
        """Close the driver and release all pooled connections."""
        if self._driver is not None:
            await self._driver.close()
            self._driver = None
            logger.info("Disconnected from Neo4j")

    async def __aenter__(self) -> "GraphConnection":
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    @property
    def driver(self) -> AsyncDriver:
        """Get the Neo4j driver.

        Raises:
            GraphConnectionError: If not connected.
        """
        if self._driver is None:
            raise GraphConnectionError("Not connected to Neo4j. Call connect() first.")
        return self._driver

    @asynccontextmanager
    async def session(self, **kwargs: Any) -> AsyncGenerator[AsyncSession, None]:
        """Get a Neo4j session as an async context manager.

        Args:
            **kwargs: Additional session configuration.

        Yields:
            An async Neo4j session.

        Raises:
            GraphConnectionError: If not connected.
        """
        session = self.driver.session(database=self.database, **kwargs)
        try:
            yield session
        finally:
            await session.close()

    async def health_check(self) -> dict[str, Any]:
        """Check the health of the Neo4j connection.

        Returns:
            Dictionary with health status information.
        """
        if self._driver is None:
            return {
                "status": "disconnected",
                "message": "Driver not initialized",
            }

        try:
            await self._driver.verify_connectivity()
            async with self.session() as session:
                result = await session.run("RETURN 1 AS n")
                record = await result.single()
        except ServiceUnavailable as e:
            return {"status": "unhealthy", "message": f"Service unavailable: {e}"}
        except (Neo4jError, DriverError) as e:
            return {"status": "unhealthy", "message": f"Neo4j error: {e}"}

        if record and record["n"] == 1:
            return {"status": "healthy", "uri": self.uri, "database": self.database}
        return {"status": "unhealthy", "message": "Query returned unexpected result"}

    async def _execute(
        self,
        query: str,
        parameters: dict[str, Any] | None,
        access_mode: str,
        conflict_key: str | None = None,
    ) -> list[dict[str, Any]]:
        async with self.session(default_access_mode=access_mode) as session:
            try:
                result = await session.run(query, parameters or {})
                return await result.data()
            except (Neo4jError, DriverError) as e:
                logger.debug("Query failed", error=str(e), access_mode=access_mode)
                raise translate_error(e, conflict_key) from e

    async def execute_read(
        self,
        query: str,
        parameters: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Execute a read query.

        Args:
            query: Cypher query string.
            parameters: Query parameters.

        Returns:
            List of result records as dictionaries.

        Raises:
            DatabaseError: If the query fails.
        """
        return await self._execute(query, parameters, READ_ACCESS)

    async def execute_write(
        self,
        query: str,
        parameters: dict[str, Any] | None = None,
        conflict_key: str | None = None,
    ) -> list[dict[str, Any]]:
        """Execute a write query as one auto-commit statement.

        Args:
            query: Cypher query string.
            parameters: Query parameters.
            conflict_key: Unique key being written. When set, a uniqueness
                constraint violation is raised as ConflictError.

        Returns:
            List of result records as dictionaries.

        Raises:
            ConflictError: If conflict_key is set and is already taken.
            DatabaseError: For any other failure.
        """
        return await self._execute(query, parameters, WRITE_ACCESS, conflict_key)

    async def run(
        self,
        query: CypherQuery,
        write: bool = False,
        conflict_key: str | None = None,
    ) -> list[dict[str, Any]]:
        """Execute a prebuilt CypherQuery."""
        if write:
            return await self.execute_write(query.text, query.parameters, conflict_key)
        return await self.execute_read(query.text, query.parameters)

    async def create_constraint(self, query: CypherQuery) -> bool:
        """Create a schema constraint if it does not exist yet.

        Args:
            query: An idempotent CREATE CONSTRAINT ... IF NOT EXISTS query.

        Returns:
            True if the constraint was newly created, False if it existed.

        Raises:
            DatabaseError: If the constraint cannot be created.
        """
        async with self.session(default_access_mode=WRITE_ACCESS) as session:
            try:
                result = await session.run(query.text, query.parameters)
                summary = await result.consume()
            except (Neo4jError, DriverError) as e:
                raise translate_error(e) from e
        return summary.counters.constraints_added > 0
