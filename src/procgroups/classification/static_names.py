"""
Static process name extraction.

Rules flagged with ``report_missing`` name processes that are expected to be
running. This module derives the literal names of those processes from the
rule definitions so a missing-process check can look for them. It works on
definitions, not compiled rules, and never touches the matching pipeline.
"""

import logging
from typing import Iterable, List

from ..models.config import RuleDefinition
from .compiler import split_exe
from .templates import contains_template_markup

logger = logging.getLogger(__name__)


def get_process_names(definition: RuleDefinition) -> List[str]:
    """
    Extract the literal process names of one rule definition.

    A literal ``name`` wins over everything else. Otherwise the names are the
    ``comm`` entries followed by the basenames of the ``exe`` entries.
    ``cmdline`` regexes name no process and contribute nothing.

    Args:
        definition: A validated rule definition.

    Returns:
        The names, or an empty list if the rule is not flagged with
        ``report_missing``.
    """
    if not definition.report_missing:
        return []

    if definition.name:
        if not contains_template_markup(definition.name):
            return [definition.name]
        logger.debug(
            f"{definition.position}: name {definition.name!r} is a template, "
            f"using comm/exe entries for missing-process names"
        )

    names = list(definition.comm or ())
    names.extend(split_exe(exe)[0] for exe in definition.exe or ())

    if not names:
        logger.warning(
            f"{definition.position}: report_missing is set but the rule has no literal names"
        )
    return names


def extract_static_names(definitions: Iterable[RuleDefinition]) -> List[str]:
    """
    Collect the missing-process names of all definitions, in definition order.

    Duplicates are kept.
    """
    names: List[str] = []
    for definition in definitions:
        names.extend(get_process_names(definition))
    return names
