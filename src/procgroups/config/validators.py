"""
Rule definition validation.

This module turns the loosely-typed entries of a parsed rules document into
RuleDefinition instances in one explicit pass. Every error names the
position of the offending entry and key.
"""

import logging
from typing import Any, Dict, List

from ..models.config import RuleDefinition
from ..validation import (
    ValidationError,
    validate_boolean,
    validate_string,
    validate_string_list,
)

logger = logging.getLogger(__name__)

LIST_KEYS = ("comm", "exe", "cmdline")
RECOGNIZED_KEYS = LIST_KEYS + ("name", "report_missing")


def validate_rule_definition(rule_data: Any, index: int) -> RuleDefinition:
    """
    Validate one raw rule definition.

    Args:
        rule_data: One element of the ``process_names`` list
        index: Position of the element in the list

    Returns:
        Validated RuleDefinition

    Raises:
        ValidationError: If the entry is not a mapping, has a non-string or
            unknown key, or a value of the wrong type
    """
    position = f"process_names[{index}]"

    if not isinstance(rule_data, dict):
        raise ValidationError(
            f"{position}: not a map, got {type(rule_data).__name__} {rule_data!r}",
            field_name=position,
            value=rule_data,
        )

    values: Dict[str, Any] = {}
    for key, value in rule_data.items():
        if not isinstance(key, str):
            raise ValidationError(
                f"{position}: non-string key {key!r}",
                field_name=position,
                value=key,
            )
        if key not in RECOGNIZED_KEYS:
            raise ValidationError(
                f"{position}: unknown key {key!r}, expected one of {', '.join(RECOGNIZED_KEYS)}",
                field_name=f"{position}.{key}",
                value=value,
            )

        field_name = f"{position}.{key}"
        if key in LIST_KEYS:
            values[key] = tuple(validate_string_list(value, field_name=field_name))
        elif key == "name":
            values[key] = validate_string(value, field_name=field_name)
        elif key == "report_missing":
            values[key] = validate_boolean(value, field_name=field_name)

    definition = RuleDefinition(index=index, **values)
    if not definition.has_matchers:
        raise ValidationError(
            f"{position}: no matchers provided",
            field_name=position,
            value=rule_data,
        )
    return definition


def validate_rule_definitions(rules_data: List[Any]) -> List[RuleDefinition]:
    """
    Validate every raw rule definition, keeping document order.

    The first invalid definition aborts validation.

    Args:
        rules_data: The raw ``process_names`` list

    Returns:
        List of validated RuleDefinition instances

    Raises:
        ValidationError: If any definition is invalid
    """
    definitions = []

    for i, rule_data in enumerate(rules_data):
        try:
            definitions.append(validate_rule_definition(rule_data, i))
        except ValidationError as e:
            logger.error(f"Rule configuration validation failed: {e}")
            raise

    logger.info(f"Loaded and validated {len(definitions)} process naming rules.")
    return definitions
