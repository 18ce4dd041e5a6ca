"""Field validation for ingredient properties.

Validation is pure: no I/O, no mutation of the caller's mapping. Rules are
checked per field in a fixed order (required, too short, too long, format)
and only the first violation is reported, since callers show the message
directly to end users.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .errors import ValidationError


@dataclass(frozen=True)
class FieldRule:
    """Validation rule for a single ingredient property.

    Attributes:
        required: Whether the field must be present when require_all is set.
        min_length: Minimum string length, if any.
        max_length: Maximum string length, if any.
        pattern: Regular expression the whole value must match, if any.
        message: Requirements text appended to error messages.
    """

    required: bool = False
    min_length: int | None = None
    max_length: int | None = None
    pattern: re.Pattern[str] | None = None
    message: str = ""


VALIDATION_INFO: dict[str, FieldRule] = {
    "name": FieldRule(
        required=True,
        min_length=2,
        max_length=16,
        pattern=re.compile(r"[A-Za-z0-9_]+"),
        message="2-16 characters; letters, numbers, and underscores only.",
    ),
}


def validate(props: Mapping[str, Any], require_all: bool = False) -> dict[str, Any]:
    """Select the known properties from props and validate them.

    By default only properties that are present are validated, which lets
    partial updates omit fields. Pass require_all=True to also enforce that
    every required property is present (used on create).

    Args:
        props: Caller-provided properties. Unknown keys are ignored.
        require_all: Enforce required fields.

    Returns:
        The sanitized subset of known, non-empty properties.

    Raises:
        ValidationError: On the first rule violated.
    """
    safe_props: dict[str, Any] = {}

    for prop, rule in VALIDATION_INFO.items():
        value = props.get(prop)
        if validate_prop(prop, value, rule, require_all):
            safe_props[prop] = value

    return safe_props


def validate_prop(prop: str, value: Any, rule: FieldRule, require_all: bool = False) -> bool:
    """Validate a single property value against its rule.

    Returns:
        True if the value is present and valid, False if it is absent or
        empty and may be skipped.

    Raises:
        ValidationError: If the value breaks the rule.
    """
    if value is None or value == "":
        if rule.required and require_all:
            raise ValidationError(f"Missing {prop} (required).")
        return False

    requirements = f"Requirements: {rule.message}"

    if not isinstance(value, str):
        raise ValidationError(f"Invalid {prop} (format). {requirements}")

    if rule.min_length is not None and len(value) < rule.min_length:
        raise ValidationError(f"Invalid {prop} (too short). {requirements}")

    if rule.max_length is not None and len(value) > rule.max_length:
        raise ValidationError(f"Invalid {prop} (too long). {requirements}")

    if rule.pattern is not None and rule.pattern.fullmatch(value) is None:
        raise ValidationError(f"Invalid {prop} (format). {requirements}")

    return True
