"""
Value validation functions.

These helpers check individual values decoded from a rules document and
raise ValidationError with the position of the offending value.
"""

import re
from typing import Any, List

from .exceptions import ValidationError


def validate_string_list(value: Any, field_name: str = "value") -> List[str]:
    """
    Validate that a value is a list whose elements are all strings.

    Args:
        value: Value to validate
        field_name: Name of the field being validated

    Returns:
        The validated list (a new list object)

    Raises:
        ValidationError: If the value is not a list or an element is not a string
    """
    if not isinstance(value, list):
        raise ValidationError(
            f"{field_name} must be a list of strings, got {type(value).__name__} {value!r}",
            field_name=field_name,
            value=value
        )

    validated = []
    for i, item in enumerate(value):
        if not isinstance(item, str):
            raise ValidationError(
                f"{field_name}[{i}] must be a string, got {type(item).__name__} {item!r}",
                field_name=f"{field_name}[{i}]",
                value=item
            )
        validated.append(item)
    return validated


def validate_boolean(value: Any, field_name: str = "value") -> bool:
    """Validate that a value is a real boolean (not 0/1 or "yes")."""
    if not isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be a boolean, got {type(value).__name__} {value!r}",
            field_name=field_name,
            value=value
        )
    return value


def validate_string(value: Any, field_name: str = "value") -> str:
    """Validate that a value is a string. None (an empty YAML value) is rejected."""
    if not isinstance(value, str):
        raise ValidationError(
            f"{field_name} must be a string, got {type(value).__name__} {value!r}",
            field_name=field_name,
            value=value
        )
    return value


def validate_regex_pattern(pattern: Any, field_name: str = "regex_pattern") -> "re.Pattern[str]":
    """
    Validate and compile a regex pattern.

    An empty pattern is valid and matches every command line.

    Args:
        pattern: Regex pattern to validate
        field_name: Name of the field being validated

    Returns:
        The compiled pattern

    Raises:
        ValidationError: If pattern is not a string or fails to compile
    """
    if not isinstance(pattern, str):
        raise ValidationError(
            f"{field_name} must be a string",
            field_name=field_name,
            value=pattern
        )

    try:
        return re.compile(pattern)
    except re.error as e:
        raise ValidationError(
            f"{field_name}: bad cmdline regex {pattern!r}: {e}",
            field_name=field_name,
            value=pattern
        ) from e
