"""
Configuration management and singleton pattern.

This module provides the main configuration loading interface. A rules
document is loaded, validated and compiled once; the resulting AppConfig is
immutable and shared by every caller.
"""

import logging
from pathlib import Path
from typing import Any, List, Optional

from ..classification.compiler import compile_rules
from ..classification.static_names import extract_static_names
from ..models.config import AppConfig
from ..validation import ErrorSeverity, ValidationError, handle_config_error
from .loader import get_process_names_list, load_rules_document, parse_toml_content, parse_yaml_content
from .validators import validate_rule_definitions

logger = logging.getLogger(__name__)

# --- Global Singleton for Configuration ---

_CONFIG: Optional[AppConfig] = None

# Default rules document, relative to the repository root. Overridden by the
# CLI's --config option and by tests.
_CONFIG_FILE_PATH = Path(__file__).parent.parent.parent.parent / "conf" / "process_names.yaml"


def set_config_path(config_path: Path) -> None:
    """
    Set a custom rules document path and drop any cached configuration.

    Args:
        config_path: Path to a YAML or TOML rules document
    """
    global _CONFIG_FILE_PATH, _CONFIG
    _CONFIG_FILE_PATH = Path(config_path)
    _CONFIG = None
    logger.info(f"Configuration path set to: {config_path}")


def clear_config_cache() -> None:
    """
    Clear the cached configuration, forcing a reload on next access.
    """
    global _CONFIG
    _CONFIG = None
    logger.debug("Configuration cache cleared")


def build_config(rules_data: List[Any], source_path: Optional[Path] = None) -> AppConfig:
    """
    Validate and compile a raw ``process_names`` list.

    Args:
        rules_data: The raw list of rule definitions
        source_path: Where the list was read from, if anywhere

    Returns:
        The assembled AppConfig

    Raises:
        ValidationError: On the first invalid definition
    """
    definitions = validate_rule_definitions(rules_data)
    rule_set = compile_rules(definitions)
    missing_names = extract_static_names(definitions)

    return AppConfig(
        definitions=definitions,
        rule_set=rule_set,
        missing_process_names=missing_names,
        source_path=source_path,
    )


def parse_config(content: str, format: str = "yaml") -> AppConfig:
    """
    Build an AppConfig from an in-memory rules document.

    Args:
        content: The document text
        format: ``"yaml"`` or ``"toml"``

    Raises:
        ValidationError: If the format is unknown or the document is invalid
    """
    if format == "yaml":
        document = parse_yaml_content(content, "rules document")
    elif format == "toml":
        document = parse_toml_content(content, "rules document")
    else:
        raise ValidationError(f"unsupported rules document format {format!r}", value=format)

    return build_config(get_process_names_list(document))


def load_config(config_path: Path) -> AppConfig:
    """
    Load, validate and compile a rules document.

    Args:
        config_path: Path to the rules document

    Returns:
        Fully validated AppConfig instance

    Raises:
        FileNotFoundError: If the document is missing
        ValidationError: If the document or one of its rules is invalid
    """
    try:
        rules_data = load_rules_document(config_path)
        app_config = build_config(rules_data, source_path=config_path)

        logger.info(
            f"Successfully loaded {len(app_config.definitions)} rules "
            f"({len(app_config.missing_process_names)} expected process names) from {config_path}"
        )
        return app_config

    except FileNotFoundError as e:
        handle_config_error(
            error=e,
            context="loading rules file",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise
    except ValidationError as e:
        handle_config_error(
            error=e,
            context=f"processing rules file {config_path}",
            severity=ErrorSeverity.ERROR,
            reraise=True,
            logger=logger
        )
        raise


def get_config() -> AppConfig:
    """
    Get the global application configuration, loading it if necessary.

    Returns:
        The singleton AppConfig instance

    Raises:
        FileNotFoundError: If the rules document is missing
        ValidationError: If the rules document is invalid
    """
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = load_config(_CONFIG_FILE_PATH)
    return _CONFIG


def is_config_loaded() -> bool:
    return _CONFIG is not None


def get_config_info() -> dict:
    """
    Get information about the current configuration state.
    """
    return {
        "config_loaded": is_config_loaded(),
        "config_path": str(_CONFIG_FILE_PATH),
        "rules_count": len(_CONFIG.definitions) if _CONFIG else 0,
        "missing_names_count": len(_CONFIG.missing_process_names) if _CONFIG else 0,
    }
