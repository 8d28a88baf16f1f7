"""
Data models for the procgroups package.

Configuration Models:
- Validated rule definitions
- Application-wide configuration

Process Models:
- Per-process attribute snapshots
- Name template parameters

All models are dataclasses with type hints.
"""

# Configuration models
from .config import AppConfig, RuleDefinition

# Process models
from .process import ProcessAttributes, TemplateParams

__all__ = [
    # Configuration
    "AppConfig",
    "RuleDefinition",
    # Process
    "ProcessAttributes",
    "TemplateParams",
]
