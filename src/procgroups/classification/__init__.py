"""
Process classification for the procgroups package.

This module matches processes against ordered naming rules and renders the
name of the group each process belongs to.
"""

from .compiler import compile_rule, compile_rules, split_exe
from .matchers import (
    AndMatcher,
    CmdlineMatcher,
    CommMatcher,
    ExeMatcher,
    MatchResult,
    Matcher,
)
from .rules import FirstMatchRuleSet, Rule
from .service import classify_processes, find_missing_processes
from .static_names import extract_static_names, get_process_names
from .templates import DEFAULT_NAME_TEMPLATE, NameTemplate

__all__ = [
    # Matchers
    "AndMatcher",
    "CmdlineMatcher",
    "CommMatcher",
    "ExeMatcher",
    "MatchResult",
    "Matcher",
    # Rules
    "DEFAULT_NAME_TEMPLATE",
    "FirstMatchRuleSet",
    "NameTemplate",
    "Rule",
    "compile_rule",
    "compile_rules",
    "split_exe",
    # Scans
    "classify_processes",
    "find_missing_processes",
    # Static names
    "extract_static_names",
    "get_process_names",
]
