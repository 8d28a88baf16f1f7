"""
Process attribute matchers.

A matcher is a predicate over ProcessAttributes. There is a closed set of
matcher kinds:

- CommMatcher: exact match on the process name (comm)
- ExeMatcher: match on the executable basename, optionally path-qualified
- CmdlineMatcher: every regex must match the space-joined argv
- AndMatcher: every sub-matcher must match

``match`` returns a MatchResult holding the values captured by named regex
groups. Captures are created per call and never stored on the matcher, so one
matcher instance can be shared freely between threads.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Mapping, Tuple, Union

from ..models.process import ProcessAttributes


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a single match attempt. Truthy iff the attempt matched."""

    matched: bool
    captures: Dict[str, str] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.matched


NO_MATCH = MatchResult(False)


@dataclass(frozen=True)
class CommMatcher:
    comms: FrozenSet[str]

    def match(self, attrs: ProcessAttributes) -> MatchResult:
        if attrs.name in self.comms:
            return MatchResult(True)
        return NO_MATCH

    def __str__(self) -> str:
        return f"comms: {sorted(self.comms)}"


@dataclass(frozen=True)
class ExeMatcher:
    """
    Match on the basename of cmdline[0].

    ``exes`` maps a basename to the full path it was configured with, or to
    "" when only the bare name was given. A full path disambiguates binaries
    that share a basename but live in different directories.
    """

    exes: Mapping[str, str]

    def match(self, attrs: ProcessAttributes) -> MatchResult:
        if not attrs.cmdline:
            return NO_MATCH

        argv0 = attrs.cmdline[0]
        full_path = self.exes.get(Path(argv0).name)
        if full_path is None:
            return NO_MATCH
        if full_path == "" or full_path == argv0:
            return MatchResult(True)
        return NO_MATCH

    def __str__(self) -> str:
        return f"exes: {dict(self.exes)}"


@dataclass(frozen=True)
class CmdlineMatcher:
    """
    Match the command line, joined with single spaces, against regexes.

    All regexes must match. Named groups of every regex feed the captures;
    a group that did not take part in the match captures "".
    """

    regexes: Tuple["re.Pattern[str]", ...]

    def match(self, attrs: ProcessAttributes) -> MatchResult:
        cmdline = " ".join(attrs.cmdline)
        captures: Dict[str, str] = {}

        for regex in self.regexes:
            m = regex.search(cmdline)
            if m is None:
                return NO_MATCH
            for group_name, value in m.groupdict().items():
                captures[group_name] = value if value is not None else ""

        return MatchResult(True, captures)

    def __str__(self) -> str:
        return f"cmdlines: {[r.pattern for r in self.regexes]}"


@dataclass(frozen=True)
class AndMatcher:
    """Match iff every sub-matcher matches. Stops at the first failure."""

    matchers: Tuple["Matcher", ...]

    def match(self, attrs: ProcessAttributes) -> MatchResult:
        captures: Dict[str, str] = {}
        for matcher in self.matchers:
            result = matcher.match(attrs)
            if not result:
                return NO_MATCH
            captures.update(result.captures)
        return MatchResult(True, captures)

    def __len__(self) -> int:
        return len(self.matchers)

    def __str__(self) -> str:
        return "[" + ", ".join(str(m) for m in self.matchers) + "]"


Matcher = Union[CommMatcher, ExeMatcher, CmdlineMatcher, AndMatcher]
