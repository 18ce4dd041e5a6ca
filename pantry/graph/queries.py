"""Cypher query templates and builders for ingredient operations.

This module contains the Cypher statements behind every ingredient operation
and a small builder that pairs each template with its parameter map.
All queries use parameterized values for security and plan caching.
"""

from dataclasses import dataclass, field
from typing import Any

INGREDIENT_LABEL = "Ingredient"
KEY_PROPERTY = "name"


@dataclass(frozen=True)
class CypherQuery:
    """A Cypher statement together with its parameters.

    Attributes:
        text: The Cypher query text.
        parameters: Values bound to the $placeholders in text.
    """

    text: str
    parameters: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CypherQueries:
    """Collection of Cypher query templates.

    All queries use parameterized values (prefixed with $) for safety.
    Never concatenate user input directly into queries.
    """

    # ==========================================================================
    # Node Queries
    # ==========================================================================

    CREATE_INGREDIENT = """
        CREATE (ingredient:Ingredient $props)
        RETURN ingredient
    """

    GET_INGREDIENT = """
        MATCH (ingredient:Ingredient {name: $name})
        RETURN ingredient
    """

    GET_ALL_INGREDIENTS = """
        MATCH (ingredient:Ingredient)
        RETURN ingredient
        ORDER BY ingredient.name
    """

    PATCH_INGREDIENT = """
        MATCH (ingredient:Ingredient {name: $name})
        SET ingredient += $props
        RETURN ingredient
    """

    # Fails if any relationship other than `follows` is attached.
    DELETE_INGREDIENT = """
        MATCH (ingredient:Ingredient {name: $name})
        OPTIONAL MATCH (ingredient)-[rel:follows]-(other)
        DELETE ingredient, rel
    """

    # ==========================================================================
    # Relationship Queries
    # ==========================================================================

    FOLLOW = """
        MATCH (ingredient:Ingredient {name: $name})
        MATCH (other:Ingredient {name: $other_name})
        MERGE (ingredient)-[rel:follows]->(other)
    """

    UNFOLLOW = """
        MATCH (ingredient:Ingredient {name: $name})
        MATCH (other:Ingredient {name: $other_name})
        MATCH (ingredient)-[rel:follows]->(other)
        DELETE rel
    """

    # COUNT(rel) is 1 when the edge exists and 0 otherwise.
    FOLLOWING_AND_OTHERS = """
        MATCH (ingredient:Ingredient {name: $name})
        MATCH (other:Ingredient)
        WHERE other <> ingredient
        OPTIONAL MATCH (ingredient)-[rel:follows]->(other)
        RETURN other, COUNT(rel) AS follows
        ORDER BY other.name
    """

    # ==========================================================================
    # Schema Queries
    # ==========================================================================

    CREATE_NAME_CONSTRAINT = """
        CREATE CONSTRAINT ingredient_name_unique IF NOT EXISTS
        FOR (ingredient:Ingredient) REQUIRE ingredient.name IS UNIQUE
    """


# Singleton instance for easy access
QUERIES = CypherQueries()


class IngredientQueries:
    """Builds parameterized queries for each ingredient operation.

    Builders never perform I/O and never inline values into query text.
    """

    def __init__(self, queries: CypherQueries = QUERIES) -> None:
        self.queries = queries

    def create(self, props: dict[str, Any]) -> CypherQuery:
        return CypherQuery(self.queries.CREATE_INGREDIENT, {"props": props})

    def get(self, name: str) -> CypherQuery:
        return CypherQuery(self.queries.GET_INGREDIENT, {"name": name})

    def get_all(self) -> CypherQuery:
        return CypherQuery(self.queries.GET_ALL_INGREDIENTS)

    def patch(self, name: str, props: dict[str, Any]) -> CypherQuery:
        return CypherQuery(self.queries.PATCH_INGREDIENT, {"name": name, "props": props})

    def delete(self, name: str) -> CypherQuery:
        return CypherQuery(self.queries.DELETE_INGREDIENT, {"name": name})

    def follow(self, name: str, other_name: str) -> CypherQuery:
        return CypherQuery(self.queries.FOLLOW, {"name": name, "other_name": other_name})

    def unfollow(self, name: str, other_name: str) -> CypherQuery:
        return CypherQuery(self.queries.UNFOLLOW, {"name": name, "other_name": other_name})

    def get_following_and_others(self, name: str) -> CypherQuery:
        return CypherQuery(self.queries.FOLLOWING_AND_OTHERS, {"name": name})

    def create_name_constraint(self) -> CypherQuery:
        return CypherQuery(self.queries.CREATE_NAME_CONSTRAINT)
