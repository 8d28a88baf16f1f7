"""
procgroups: rule-based grouping of operating-system processes.

This package classifies processes into named monitoring groups using an
ordered list of declarative naming rules, and derives the names of the
processes that are expected to be running.

The package is organized into specialized modules:
- config: Rules document loading, validation and singleton management
- models: Data structures and type definitions
- validation: Input validation and error handling
- classification: Matchers, name templates, rule compilation and rule sets
- system: Process attribute collection
- cli: Command-line interface

Usage:
    From command line:
        procgroups --config conf/process_names.yaml

    Programmatically:
        from procgroups import load_config
        app_config = load_config(Path("conf/process_names.yaml"))
        matched, group = app_config.rule_set.match_and_name(attrs)
"""

# Main interfaces
from .config import clear_config_cache, get_config, load_config, parse_config, set_config_path
from .cli import main_cli

# Model classes for external use
from .models import AppConfig, ProcessAttributes, RuleDefinition

# Validation utilities
from .validation import ProcessGroupError, TemplateRenderError, ValidationError

# Classification
from .classification import (
    FirstMatchRuleSet,
    NameTemplate,
    Rule,
    compile_rule,
    compile_rules,
    extract_static_names,
)

# System utilities
from .system import iter_process_attributes

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "get_config",
    "clear_config_cache",
    "set_config_path",
    "load_config",
    "parse_config",
    "main_cli",
    # Models
    "AppConfig",
    "ProcessAttributes",
    "RuleDefinition",
    # Validation
    "ProcessGroupError",
    "TemplateRenderError",
    "ValidationError",
    # Classification
    "FirstMatchRuleSet",
    "NameTemplate",
    "Rule",
    "compile_rule",
    "compile_rules",
    "extract_static_names",
    # System utilities
    "iter_process_attributes",
]
