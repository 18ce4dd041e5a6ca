"""Graph module for ingredient operations on Neo4j.

This module provides all the components needed to manage ingredients and
their follows relationships: validation, query templates, connection
management, the IngredientStore repository, and schema bootstrap.

Example usage:
    ```python
    from pantry.graph import GraphConnection, IngredientStore, ensure_schema

    async with GraphConnection() as conn:
        await ensure_schema(conn)
        store = IngredientStore(conn)

        flour = await store.create({"name": "flour"})
        sugar = await store.create({"name": "sugar"})
        await store.follow(flour, sugar)

        following, others = await store.get_following_and_others(flour)
    ```
"""

from .connection import GraphConnection, translate_error
from .errors import (
    ConflictError,
    DatabaseError,
    ErrorKind,
    GraphConnectionError,
    IngredientVanishedError,
    NotFoundError,
    PantryError,
    SchemaBootstrapError,
    ValidationError,
)
from .models import FollowingAndOthers, Ingredient
from .queries import QUERIES, CypherQueries, CypherQuery, IngredientQueries
from .schema import ensure_schema
from .store import IngredientStore
from .utils import parse_neo4j_node, record_to_ingredient, records_to_ingredients
from .validation import VALIDATION_INFO, FieldRule, validate, validate_prop

__all__ = [
    # Connection
    "GraphConnection",
    "translate_error",
    # Store
    "IngredientStore",
    "ensure_schema",
    # Errors
    "ErrorKind",
    "PantryError",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "DatabaseError",
    "GraphConnectionError",
    "IngredientVanishedError",
    "SchemaBootstrapError",
    # Models
    "Ingredient",
    "FollowingAndOthers",
    # Queries
    "QUERIES",
    "CypherQueries",
    "CypherQuery",
    "IngredientQueries",
    # Validation
    "VALIDATION_INFO",
    "FieldRule",
    "validate",
    "validate_prop",
    # Utilities
    "parse_neo4j_node",
    "record_to_ingredient",
    "records_to_ingredients",
]
