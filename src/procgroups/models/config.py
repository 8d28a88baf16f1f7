"""
Configuration data models.

This module contains the validated form of a rules document entry and the
root configuration object that aggregates everything loaded from it.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..classification.rules import FirstMatchRuleSet


@dataclass(frozen=True)
class RuleDefinition:
    """
    One entry of the ``process_names`` list after type validation.

    A key that is absent from the document is stored as None, which is
    different from a key given with an empty list.
    """

    # Position of the entry in the document, used in error and log messages.
    index: int
    # Exact process names (comm).
    comm: Optional[Tuple[str, ...]] = None
    # Executable names, either bare ("nginx") or path-qualified ("/usr/sbin/nginx").
    exe: Optional[Tuple[str, ...]] = None
    # Regular expressions that must all match the space-joined argv.
    cmdline: Optional[Tuple[str, ...]] = None
    # Group name template; None means the default template.
    name: Optional[str] = None
    # Include this rule's literal names in the missing-process name list.
    report_missing: bool = False

    @property
    def position(self) -> str:
        return f"process_names[{self.index}]"

    @property
    def has_matchers(self) -> bool:
        return any(v is not None for v in (self.comm, self.exe, self.cmdline))


@dataclass
class AppConfig:
    """
    The root configuration object that aggregates all loaded settings.
    """

    # Validated rule definitions in document order.
    definitions: List[RuleDefinition]
    # The compiled, ordered rule set.
    rule_set: "FirstMatchRuleSet"
    # Literal process names expected to be running (from report_missing rules).
    missing_process_names: List[str] = field(default_factory=list)
    # The file the configuration was read from, if any.
    source_path: Optional[Path] = None
