"""Schema bootstrap for the ingredient graph.

Global uniqueness of ingredient names is enforced by a Neo4j constraint,
so the application must not serve requests until the constraint exists.
"""

import structlog

from .connection import GraphConnection
from .errors import DatabaseError, SchemaBootstrapError
from .queries import INGREDIENT_LABEL, KEY_PROPERTY, IngredientQueries

logger = structlog.get_logger(__name__)


async def ensure_schema(connection: GraphConnection, queries: IngredientQueries | None = None) -> bool:
    """Register the unique name constraint, blocking until it exists.

    Must run after the connection is established and before the store is
    used. Any failure is fatal to startup.

    Args:
        connection: An established GraphConnection instance.
        queries: Query builder, mainly overridable for tests.

    Returns:
        True if the constraint was created now, False if it already existed.

    Raises:
        SchemaBootstrapError: If the constraint cannot be ensured.
    """
    queries = queries or IngredientQueries()
    try:
        created = await connection.create_constraint(queries.create_name_constraint())
    except DatabaseError as e:
        logger.error(
            "Failed to register unique constraint",
            label=INGREDIENT_LABEL,
            property=KEY_PROPERTY,
            error=str(e),
        )
        raise SchemaBootstrapError(f"Could not ensure unique {KEY_PROPERTY} constraint: {e}") from e

    if created:
        logger.info("Registered unique names constraint", label=INGREDIENT_LABEL, property=KEY_PROPERTY)
    return created
