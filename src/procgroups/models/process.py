"""
Process data models.

This module contains the snapshot of a single process that rules are matched
against, and the record a name template is rendered with.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, Tuple


@dataclass(frozen=True)
class ProcessAttributes:
    """
    Immutable snapshot of one process at a sampling instant.
    """

    # The process "comm" (kernel-reported executable name, possibly truncated).
    name: str
    # The argv of the process. Empty for kernel threads and zombies.
    cmdline: Tuple[str, ...] = ()
    # Name of the owning user.
    username: str = ""
    pid: int = 0
    start_time: datetime = datetime.fromtimestamp(0)

    def __post_init__(self):
        # Accept any sequence for cmdline but always store a tuple.
        if not isinstance(self.cmdline, tuple):
            object.__setattr__(self, "cmdline", tuple(self.cmdline))

    @property
    def exe_full(self) -> str:
        """cmdline[0], or the comm when the command line is empty."""
        return self.cmdline[0] if self.cmdline else self.name

    @property
    def exe_base(self) -> str:
        """Basename of cmdline[0], or the comm when the command line is empty."""
        return Path(self.cmdline[0]).name if self.cmdline else self.name


@dataclass
class TemplateParams:
    """
    The fields available to a group name template.

    Field names are the ones used in templates, e.g. ``{{.ExeBase}}`` or
    ``{{.Matches.port}}``.
    """

    Comm: str
    ExeBase: str
    ExeFull: str
    Username: str
    PID: int
    StartTime: datetime
    Matches: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_attributes(cls, attrs: ProcessAttributes, matches: Dict[str, str]) -> "TemplateParams":
        return cls(
            Comm=attrs.name,
            ExeBase=attrs.exe_base,
            ExeFull=attrs.exe_full,
            Username=attrs.username,
            PID=attrs.pid,
            StartTime=attrs.start_time,
            Matches=dict(matches),
        )

    def as_context(self) -> Dict[str, object]:
        """Return the fields as a template rendering context."""
        return {
            "Comm": self.Comm,
            "ExeBase": self.ExeBase,
            "ExeFull": self.ExeFull,
            "Username": self.Username,
            "PID": self.PID,
            "StartTime": self.StartTime,
            "Matches": self.Matches,
        }
