"""
Group name templates.

Templates are rendered with Jinja2 against the fields of TemplateParams:
Comm, ExeBase, ExeFull, Username, PID, StartTime and Matches. Field references
may be written Go-style with a leading dot (``{{.ExeBase}}``,
``{{ .Matches.port }}``); the dot is dropped before the template is compiled.
"""

import logging
import re
from typing import Dict

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError

from ..models.process import ProcessAttributes, TemplateParams
from ..validation import TemplateRenderError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_NAME_TEMPLATE = "{{.ExeBase}}"

# One environment for all templates. Rendering only reads from it.
_ENVIRONMENT = Environment(
    undefined=StrictUndefined,
    autoescape=False,
    keep_trailing_newline=True,
)

_TAG_RE = re.compile(r"\{\{.*?\}\}", re.DOTALL)
# A dot that starts a field reference: after the tag opener, whitespace,
# an opening parenthesis, a pipe or a comma.
_LEADING_DOT_RE = re.compile(r"(^\{\{-?|[\s(|,])\.(?=[A-Za-z_])")
# A capture reference. Captures are looked up by key so that names such as
# "items" or "keys" never resolve to dict methods.
_MATCHES_ATTR_RE = re.compile(r"(?<![\w.])Matches\.([A-Za-z_]\w*)")


def to_jinja_syntax(template_text: str) -> str:
    """
    Rewrite Go-style leading-dot field references to plain Jinja2 names.

    ``Matches.name`` becomes ``Matches["name"]``.

    Examples:
        >>> to_jinja_syntax("{{.ExeBase}}")
        '{{ExeBase}}'
        >>> to_jinja_syntax("app:{{ .Matches.port }}")
        'app:{{ Matches["port"] }}'
    """
    def rewrite_tag(m: "re.Match[str]") -> str:
        tag = _LEADING_DOT_RE.sub(r"\1", m.group(0))
        return _MATCHES_ATTR_RE.sub(r'Matches["\1"]', tag)

    return _TAG_RE.sub(rewrite_tag, template_text)


def contains_template_markup(text: str) -> bool:
    """Return True if ``text`` holds any template tag."""
    return "{{" in text or "{%" in text


class NameTemplate:
    """A compiled group name template."""

    def __init__(self, template_text: str = DEFAULT_NAME_TEMPLATE):
        self.text = template_text
        try:
            self._template = _ENVIRONMENT.from_string(to_jinja_syntax(template_text))
        except TemplateSyntaxError as e:
            raise ValidationError(
                f"bad name template {template_text!r}: {e}",
                value=template_text,
            ) from e

    def render_params(self, params: TemplateParams) -> str:
        try:
            return self._template.render(params.as_context())
        except Exception as e:
            # Filters and operators raise plain Python errors (TypeError,
            # ZeroDivisionError) as well as TemplateError.
            raise TemplateRenderError(
                f"cannot render name template {self.text!r}: {e}",
                template_text=self.text,
            ) from e

    def render(self, attrs: ProcessAttributes, matches: Dict[str, str]) -> str:
        """
        Render the group name for a process.

        Args:
            attrs: The attributes of the matched process.
            matches: Values captured by the rule's cmdline regexes.

        Returns:
            The rendered group name.

        Raises:
            TemplateRenderError: If the template refers to an undefined field
                or fails while rendering.
        """
        return self.render_params(TemplateParams.from_attributes(attrs, matches))

    def __repr__(self) -> str:
        return f"NameTemplate({self.text!r})"
