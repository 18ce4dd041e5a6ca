"""Helpers for turning Neo4j result records into ingredient snapshots."""

from typing import Any

from .models import Ingredient


def parse_neo4j_node(record: dict[str, Any], node_key: str = "ingredient") -> dict[str, Any]:
    """Extract node properties from a Neo4j result record.

    Args:
        record: The Neo4j result record.
        node_key: The key for the node in the record.

    Returns:
        Dictionary of node properties, empty if the key is absent or null.
    """
    node = record.get(node_key)
    if node is None:
        return {}

    # Handle neo4j Node type
    if hasattr(node, "items"):
        return dict(node.items())
    return {}


def record_to_ingredient(record: dict[str, Any], node_key: str = "ingredient") -> Ingredient | None:
    """Convert a Neo4j record to an Ingredient snapshot.

    Returns:
        The snapshot, or None if the record carries no node.
    """
    props = parse_neo4j_node(record, node_key)
    if not props:
        return None
    return Ingredient(properties=props)


def records_to_ingredients(records: list[dict[str, Any]], node_key: str = "ingredient") -> list[Ingredient]:
    """Convert every record carrying a node into an Ingredient snapshot."""
    ingredients = []
    for record in records:
        ingredient = record_to_ingredient(record, node_key)
        if ingredient is not None:
            ingredients.append(ingredient)
    return ingredients
