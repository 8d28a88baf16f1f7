"""
Scan-level helpers built on a compiled rule set.
"""

import logging
from typing import Dict, Iterable, List, Set

from ..models.process import ProcessAttributes
from .rules import FirstMatchRuleSet

logger = logging.getLogger(__name__)


def classify_processes(
    rule_set: FirstMatchRuleSet,
    processes: Iterable[ProcessAttributes],
) -> Dict[str, List[int]]:
    """Group processes by their rendered group name.

    Unmatched processes are dropped.

    Args:
        rule_set: The compiled rules.
        processes: Attributes of the processes of one sampling cycle.

    Returns:
        Mapping of group name to the PIDs in that group, in the order the
        processes were seen.
    """
    groups: Dict[str, List[int]] = {}
    unmatched = 0
    for attrs in processes:
        matched, group_name = rule_set.match_and_name(attrs)
        if not matched:
            unmatched += 1
            continue
        groups.setdefault(group_name, []).append(attrs.pid)

    logger.debug(f"Classified processes into {len(groups)} groups, {unmatched} unmatched")
    return groups


def find_missing_processes(
    expected_names: Iterable[str],
    processes: Iterable[ProcessAttributes],
) -> List[str]:
    """Return the expected names that no live process carries.

    A process carries a name if its comm or its executable basename equals it.
    Each missing name is reported once, in first-seen order.
    """
    seen: Set[str] = set()
    for attrs in processes:
        seen.add(attrs.name)
        seen.add(attrs.exe_base)

    missing: List[str] = []
    for name in expected_names:
        if name not in seen and name not in missing:
            missing.append(name)

    if missing:
        logger.warning(f"Expected processes not running: {', '.join(missing)}")
    return missing
