"""
Rule compilation.

Turns validated rule definitions into compiled Rules: builds the leaf
matchers, compiles cmdline regexes and parses the name template.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from ..models.config import RuleDefinition
from ..validation import ValidationError, validate_regex_pattern
from .matchers import AndMatcher, CmdlineMatcher, CommMatcher, ExeMatcher, Matcher
from .rules import FirstMatchRuleSet, Rule
from .templates import DEFAULT_NAME_TEMPLATE, NameTemplate

logger = logging.getLogger(__name__)


def split_exe(exe: str) -> Tuple[str, str]:
    """
    Split an ``exe`` entry into (basename, full path).

    Entries without a path separator match any executable with that
    basename, so their full path is "".

    Examples:
        >>> split_exe("/usr/sbin/nginx")
        ('nginx', '/usr/sbin/nginx')
        >>> split_exe("nginx")
        ('nginx', '')
    """
    if "/" in exe:
        return Path(exe).name, exe
    return exe, ""


def build_exe_matcher(exes: Iterable[str]) -> ExeMatcher:
    mapping: Dict[str, str] = {}
    for exe in exes:
        base, full_path = split_exe(exe)
        if base in mapping and mapping[base] != full_path:
            logger.warning(
                f"exe entry {exe!r} replaces {mapping[base] or base!r} for basename {base!r}"
            )
        mapping[base] = full_path
    return ExeMatcher(mapping)


def compile_rule(definition: RuleDefinition) -> Rule:
    """
    Compile one rule definition.

    Leaf matchers are combined in a fixed order: comm, exe, cmdline.

    Args:
        definition: A type-checked rule definition.

    Returns:
        The compiled Rule.

    Raises:
        ValidationError: If a regex or the name template fails to compile, or
            the definition has no matcher keys at all.
    """
    position = definition.position
    leaves: List[Matcher] = []

    if definition.comm is not None:
        leaves.append(CommMatcher(frozenset(definition.comm)))

    if definition.exe is not None:
        leaves.append(build_exe_matcher(definition.exe))

    if definition.cmdline is not None:
        regexes = [
            validate_regex_pattern(pattern, field_name=f"{position}.cmdline[{i}]")
            for i, pattern in enumerate(definition.cmdline)
        ]
        leaves.append(CmdlineMatcher(tuple(regexes)))

    if not leaves:
        raise ValidationError(
            f"{position}: no matchers provided",
            field_name=position,
        )

    template_text = definition.name or DEFAULT_NAME_TEMPLATE
    try:
        template = NameTemplate(template_text)
    except ValidationError as e:
        raise ValidationError(
            f"{position}.name: {e}",
            field_name=f"{position}.name",
            value=template_text,
        ) from e

    return Rule(AndMatcher(tuple(leaves)), template, definition.index)


def compile_rules(definitions: Iterable[RuleDefinition]) -> FirstMatchRuleSet:
    """
    Compile rule definitions into a FirstMatchRuleSet, keeping their order.

    The first invalid definition aborts compilation; no partial rule set is
    returned.
    """
    rules = [compile_rule(definition) for definition in definitions]
    logger.debug(f"Compiled {len(rules)} process naming rules")
    return FirstMatchRuleSet(rules)
