"""
Rules document loading utilities.

This module handles the low-level loading and parsing of rules documents.
YAML (``.yaml``/``.yml``) and TOML (``.toml``) files are supported; both hold
a top-level ``process_names`` list.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, List

import yaml

from ..validation import ErrorSeverity, ValidationError, handle_config_error

logger = logging.getLogger(__name__)

PROCESS_NAMES_KEY = "process_names"

YAML_SUFFIXES = (".yaml", ".yml")
TOML_SUFFIXES = (".toml",)


def load_toml_file(file_path: Path, description: str = "configuration file") -> Dict[str, Any]:
    """
    Load and parse a TOML file with error handling.

    Args:
        file_path: Path to the TOML file to load
        description: Human-readable description for error messages

    Returns:
        Parsed TOML data as a dictionary

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the file is malformed
    """
    logger.info(f"Loading {description} from: {file_path}")

    if not file_path.exists():
        logger.error(f"{description} not found: {file_path}")
        raise FileNotFoundError(f"{description} not found: {file_path}")

    try:
        with open(file_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        handle_config_error(
            error=e,
            context=f"parsing {description}",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise


def load_yaml_file(file_path: Path, description: str = "configuration file") -> Dict[str, Any]:
    """
    Load and parse a YAML file with error handling.

    Args:
        file_path: Path to the YAML file to load
        description: Human-readable description for error messages

    Returns:
        Parsed YAML data; an empty file yields an empty dictionary

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the file is malformed
    """
    logger.info(f"Loading {description} from: {file_path}")

    if not file_path.exists():
        logger.error(f"{description} not found: {file_path}")
        raise FileNotFoundError(f"{description} not found: {file_path}")

    content = file_path.read_text(encoding="utf-8")
    logger.debug(f"{description} {file_path} contents:\n{content}")
    return parse_yaml_content(content, description)


def parse_yaml_content(content: str, description: str = "configuration document") -> Dict[str, Any]:
    """Parse YAML text, treating an empty document as an empty mapping."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        handle_config_error(
            error=e,
            context=f"parsing {description}",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise
    return data if data is not None else {}


def parse_toml_content(content: str, description: str = "configuration document") -> Dict[str, Any]:
    """Parse TOML text."""
    try:
        return tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        handle_config_error(
            error=e,
            context=f"parsing {description}",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise


def get_process_names_list(document: Any) -> List[Any]:
    """
    Extract the raw ``process_names`` list from a parsed document.

    Raises:
        ValidationError: If the document is not a mapping, the key is missing
            or its value is not a list
    """
    if not isinstance(document, dict):
        raise ValidationError(
            f"rules document must be a mapping with a top-level '{PROCESS_NAMES_KEY}' key",
            value=document,
        )

    if PROCESS_NAMES_KEY not in document:
        raise ValidationError(
            f"error parsing config: no top-level '{PROCESS_NAMES_KEY}' key",
            field_name=PROCESS_NAMES_KEY,
        )

    entries = document[PROCESS_NAMES_KEY]
    if not isinstance(entries, list):
        raise ValidationError(
            f"error parsing config: '{PROCESS_NAMES_KEY}' is not a list",
            field_name=PROCESS_NAMES_KEY,
            value=entries,
        )
    return entries


def load_rules_document(rules_path: Path) -> List[Any]:
    """
    Load a rules document and return its raw ``process_names`` list.

    The format is chosen from the file suffix.

    Args:
        rules_path: Path to a ``.yaml``, ``.yml`` or ``.toml`` file

    Returns:
        The raw (not yet validated) list of rule definitions

    Raises:
        ValidationError: If the suffix is unsupported or the document lacks
            a ``process_names`` list
    """
    suffix = rules_path.suffix.lower()
    if suffix in YAML_SUFFIXES:
        document = load_yaml_file(rules_path, "rules file")
    elif suffix in TOML_SUFFIXES:
        document = load_toml_file(rules_path, "rules file")
    else:
        raise ValidationError(
            f"unsupported rules file type '{suffix}' for {rules_path}; "
            f"use one of {', '.join(YAML_SUFFIXES + TOML_SUFFIXES)}",
            value=str(rules_path),
        )
    return get_process_names_list(document)
