"""
Validation and error handling for the procgroups package.

This module provides input validation and error handling with consistent
error reporting across the application.
"""

from .exceptions import (
    ErrorSeverity,
    ProcessGroupError,
    TemplateRenderError,
    ValidationError,
    handle_error,
    handle_config_error,
    handle_cli_error,
)

from .validators import (
    validate_boolean,
    validate_string,
    validate_regex_pattern,
    validate_string_list,
)

__all__ = [
    # Core functionality
    "ErrorSeverity",
    "ProcessGroupError",
    "TemplateRenderError",
    "ValidationError",
    "handle_error",
    "handle_config_error",
    "handle_cli_error",
    # Validators
    "validate_boolean",
    "validate_string",
    "validate_regex_pattern",
    "validate_string_list",
]
