"""Domain errors for ingredient graph operations.

Every error raised by the graph layer derives from PantryError and carries
an ErrorKind, a closed enumeration callers can match on exhaustively instead
of branching on exception classes.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds surfaced by the graph layer."""

    VALIDATION = "validation"  # caller input rejected, message is user-facing
    NOT_FOUND = "not_found"  # requested key absent
    CONFLICT = "conflict"  # uniqueness constraint violated
    DATABASE = "database"  # any other database or transport failure


class PantryError(Exception):
    """Base class for all ingredient graph errors.

    Attributes:
        kind: The failure kind.
        message: Human-readable description.
    """

    kind: ErrorKind = ErrorKind.DATABASE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PantryError):
    """Raised when caller-provided properties break a field rule."""

    kind = ErrorKind.VALIDATION


class ConflictError(ValidationError):
    """Raised when a write collides with the unique name constraint.

    Subclasses ValidationError so that callers redisplaying a form on
    validation failures also show "name is taken" messages.
    """

    kind = ErrorKind.CONFLICT

    def __init__(self, key: str) -> None:
        super().__init__(f"The name '{key}' is taken.")
        self.key = key


class NotFoundError(PantryError):
    """Raised when no ingredient matches the requested name."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, key: str) -> None:
        super().__init__(f"No such ingredient with name: {key}")
        self.key = key


class DatabaseError(PantryError):
    """Raised for database failures other than constraint violations."""

    kind = ErrorKind.DATABASE


class GraphConnectionError(DatabaseError):
    """Raised when the Neo4j driver is unavailable or not connected."""


class IngredientVanishedError(DatabaseError):
    """Raised when an ingredient disappears between read and write."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Ingredient has been deleted! Name: {key}")
        self.key = key


class SchemaBootstrapError(DatabaseError):
    """Raised when the uniqueness constraint cannot be ensured at startup."""
