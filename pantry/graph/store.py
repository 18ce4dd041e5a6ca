"""IngredientStore: the repository for ingredient nodes.

This module provides the IngredientStore class which validates caller input,
builds the matching Cypher query, runs it through the GraphConnection, and
maps the response back into Ingredient snapshots. Every operation is a single
round trip; the store keeps no locks or caches, so correctness under
concurrency rests on Neo4j transactions and the unique name constraint.
"""

from typing import Any

import structlog

from .connection import GraphConnection
from .errors import IngredientVanishedError, NotFoundError, ValidationError
from .models import FollowingAndOthers, Ingredient
from .queries import IngredientQueries
from .utils import parse_neo4j_node, record_to_ingredient, records_to_ingredients
from .validation import validate

logger = structlog.get_logger(__name__)


class IngredientStore:
    """CRUD and follow operations for Ingredient nodes.

    Errors from the connection propagate unchanged; the store adds no
    recovery or retry logic.

    Attributes:
        connection: The Neo4j connection instance.
        queries: Builder for the parameterized queries.
    """

    def __init__(self, connection: GraphConnection, queries: IngredientQueries | None = None) -> None:
        """Initialize the store.

        Args:
            connection: An established GraphConnection instance.
            queries: Query builder, mainly overridable for tests.
        """
        self.connection = connection
        self.queries = queries or IngredientQueries()

    # ==========================================================================
    # Node Operations
    # ==========================================================================

    async def create(self, props: dict[str, Any]) -> Ingredient:
        """Create an ingredient and persist it.

        Args:
            props: Caller-provided properties; all required fields must be set.

        Returns:
            Snapshot of the newly created node.

        Raises:
            ValidationError: If props break a field rule.
            ConflictError: If the name is already taken.
        """
        safe_props = validate(props, require_all=True)
        records = await self.connection.run(
            self.queries.create(safe_props), write=True, conflict_key=safe_props["name"]
        )
        ingredient = record_to_ingredient(records[0])
        logger.info("Created ingredient", name=safe_props["name"])
        return ingredient

    async def get(self, name: str) -> Ingredient:
        """Get an ingredient by name.

        Raises:
            NotFoundError: If no ingredient has this name.
        """
        records = await self.connection.run(self.queries.get(name))
        ingredient = record_to_ingredient(records[0]) if records else None
        if ingredient is None:
            raise NotFoundError(name)
        return ingredient

    async def get_all(self) -> list[Ingredient]:
        """Get every ingredient, ordered by name."""
        records = await self.connection.run(self.queries.get_all())
        return records_to_ingredients(records)

    async def patch(self, ingredient: Ingredient, props: dict[str, Any]) -> Ingredient:
        """Apply a partial update to an ingredient.

        Only the supplied fields are validated. The update is merged on the
        server and the returned snapshot reflects the post-write node; the
        snapshot passed in is left untouched.

        Args:
            ingredient: The ingredient to update.
            props: Properties to change.

        Returns:
            A fresh snapshot of the updated node.

        Raises:
            ValidationError: If props break a field rule.
            ConflictError: If renaming to a name that is already taken.
            IngredientVanishedError: If the node was deleted concurrently.
        """
        safe_props = validate(props)
        if not safe_props:
            return ingredient

        records = await self.connection.run(
            self.queries.patch(ingredient.name, safe_props),
            write=True,
            conflict_key=safe_props.get("name"),
        )
        updated = record_to_ingredient(records[0]) if records else None
        if updated is None:
            raise IngredientVanishedError(ingredient.name)

        logger.info("Patched ingredient", name=ingredient.name, fields=sorted(safe_props))
        return updated

    async def delete(self, ingredient: Ingredient) -> None:
        """Delete an ingredient together with its follows relationships.

        Deleting an ingredient that is already gone is a silent no-op.
        Relationships of any other type make Neo4j reject the delete, which
        surfaces as DatabaseError.
        """
        await self.connection.run(self.queries.delete(ingredient.name), write=True)
        logger.info("Deleted ingredient", name=ingredient.name)

    # ==========================================================================
    # Relationship Operations
    # ==========================================================================

    async def follow(self, ingredient: Ingredient, other: Ingredient) -> None:
        """Make ingredient follow other. Following twice is a no-op.

        Raises:
            ValidationError: If an ingredient tries to follow itself.
        """
        if ingredient.name == other.name:
            raise ValidationError("An ingredient cannot follow itself.")
        await self.connection.run(self.queries.follow(ingredient.name, other.name), write=True)
        logger.debug("Followed", name=ingredient.name, other=other.name)

    async def unfollow(self, ingredient: Ingredient, other: Ingredient) -> None:
        """Remove the follows edge, if any, from ingredient to other."""
        await self.connection.run(self.queries.unfollow(ingredient.name, other.name), write=True)
        logger.debug("Unfollowed", name=ingredient.name, other=other.name)

    async def get_following_and_others(self, ingredient: Ingredient) -> FollowingAndOthers:
        """Partition all other ingredients by whether ingredient follows them.

        Uses a single query returning every other node with a 0/1 follows
        flag rather than one existence check per candidate.

        Returns:
            FollowingAndOthers with the subject excluded from both lists.
        """
        records = await self.connection.run(self.queries.get_following_and_others(ingredient.name))

        following: list[Ingredient] = []
        others: list[Ingredient] = []
        for record in records:
            props = parse_neo4j_node(record, "other")
            if not props or props.get("name") == ingredient.name:
                continue
            if record.get("follows"):
                following.append(Ingredient(properties=props))
            else:
                others.append(Ingredient(properties=props))

        return FollowingAndOthers(following=following, others=others)
