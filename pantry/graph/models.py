"""Pydantic models for ingredient nodes.

An Ingredient is an immutable snapshot of a persisted node. Operations that
change the node return a fresh snapshot built from the database response;
existing snapshots are never mutated.
"""

from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class Ingredient(BaseModel):
    """Snapshot of an Ingredient node.

    Attributes:
        properties: Every property stored on the node, as returned by Neo4j.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    properties: dict[str, Any] = Field(..., description="Persisted node properties")

    @property
    def name(self) -> str:
        """The ingredient's unique name, e.g. 'flour'."""
        return self.properties["name"]

    def __str__(self) -> str:
        return self.name


class FollowingAndOthers(NamedTuple):
    """Partition of all other ingredients relative to a subject.

    Attributes:
        following: Ingredients the subject follows.
        others: Ingredients the subject does not follow.
    """

    following: list[Ingredient]
    others: list[Ingredient]
