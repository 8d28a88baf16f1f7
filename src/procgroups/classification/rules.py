"""
Compiled rules and first-match-wins rule sets.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from ..models.process import ProcessAttributes
from ..validation import ErrorSeverity, TemplateRenderError, handle_error
from .matchers import AndMatcher
from .templates import NameTemplate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    """A compiled (matcher, name template) pair."""

    matcher: AndMatcher
    template: NameTemplate
    # Position of the source definition, for log messages.
    index: int = -1

    def match_and_name(self, attrs: ProcessAttributes) -> Tuple[bool, str]:
        """
        Match the process and render its group name.

        Returns:
            (True, group_name) on a match, (False, "") otherwise.

        Raises:
            TemplateRenderError: If the process matched but the name template
                could not be rendered.
        """
        result = self.matcher.match(attrs)
        if not result:
            return False, ""
        return True, self.template.render(attrs, result.captures)

    def __str__(self) -> str:
        return f"{self.matcher} -> {self.template.text!r}"


class FirstMatchRuleSet:
    """
    An ordered, immutable sequence of rules.

    Rules are tried in the order they were defined and the first one that
    matches names the process. Instances hold no per-call state and can be
    shared between threads without locking.
    """

    def __init__(self, rules: Iterable[Rule] = ()):
        self._rules: Tuple[Rule, ...] = tuple(rules)

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def match_and_name(self, attrs: ProcessAttributes) -> Tuple[bool, str]:
        """
        Classify one process.

        A template that fails to render is logged for this process only and
        the process is reported as unmatched, so a single bad process never
        aborts a whole scan.

        Args:
            attrs: Attributes of the process to classify.

        Returns:
            (True, group_name) for the first matching rule, (False, "") if no
            rule matches or the group name could not be rendered.
        """
        for rule in self._rules:
            try:
                matched, name = rule.match_and_name(attrs)
            except TemplateRenderError as e:
                handle_error(
                    error=e,
                    context=f"naming PID {attrs.pid} ({attrs.name}) with process_names[{rule.index}]",
                    severity=ErrorSeverity.ERROR,
                    reraise=False,
                    logger=logger,
                )
                return False, ""
            if matched:
                return True, name
        return False, ""

    def __str__(self) -> str:
        return "[" + ", ".join(str(r) for r in self._rules) + "]"
