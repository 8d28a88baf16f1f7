"""
Configuration management for the procgroups package.

This module provides a clean interface for loading, validating and compiling
rules documents, with singleton management of the loaded configuration.
"""

# Main configuration interface
from .manager import (
    build_config,
    clear_config_cache,
    get_config,
    get_config_info,
    is_config_loaded,
    load_config,
    parse_config,
    set_config_path,
)

# For advanced usage - direct access to loaders and validators
from .loader import (
    get_process_names_list,
    load_rules_document,
    load_toml_file,
    load_yaml_file,
)
from .validators import (
    validate_rule_definition,
    validate_rule_definitions,
)

__all__ = [
    # Main interface
    "get_config",
    "set_config_path",
    "clear_config_cache",
    "is_config_loaded",
    "get_config_info",
    "load_config",
    "parse_config",
    "build_config",
    # Advanced interface
    "load_toml_file",
    "load_yaml_file",
    "load_rules_document",
    "get_process_names_list",
    "validate_rule_definition",
    "validate_rule_definitions",
]
