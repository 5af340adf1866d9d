"""
Jinja2 templates for the boilerplate parts of a generated file.

Built-in templates live in memory. A template directory can shadow any of
them by holding a file with the same name, which is how a project swaps in
its own header comment.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    TemplateNotFound,
    select_autoescape,
)

from ...logging_config import get_logger

logger = get_logger(__name__)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


HEADER_COMMENT_PREFIX = "//  "

FILE_HEADER = "file_header.swift.j2"

FILE_HEADER_TEMPLATE = """\
//
{% if file_name %}
{{ file_name | comment }}
{% endif %}
//
{% if framework %}
{{ framework | comment }}
//
{% endif %}
{% if contains %}
{{ "Contains:" | comment }}
{% for line in contains %}
{{ line | comment }}
{% endfor %}
//
{% endif %}
{{ "Generated by %s on %s" | format(generator, created_at) | comment }}
//
//
"""

BUILTIN_TEMPLATES = {FILE_HEADER: FILE_HEADER_TEMPLATE}


def comment_lines(value: Any, prefix: str = HEADER_COMMENT_PREFIX) -> str:
    """Prefix each line with a line-comment marker; blank lines keep a bare marker."""
    return "\n".join(
        f"{prefix}{line}" if line.strip() else prefix.rstrip()
        for line in str(value).split("\n")
    )


class TemplateEngine:
    """Jinja2 environment holding the built-in templates plus optional overrides."""

    def __init__(self, template_dir: Optional[Union[str, Path]] = None):
        """
        Args:
            template_dir: Directory whose files take precedence over the
                built-in templates of the same name
        """
        self.template_dir = Path(template_dir) if template_dir else None

        loaders = [DictLoader(BUILTIN_TEMPLATES)]
        if self.template_dir is not None:
            if not self.template_dir.is_dir():
                raise TemplateError(f"Template directory not found: {self.template_dir}")
            loaders.insert(0, FileSystemLoader(str(self.template_dir)))
            logger.debug("Template overrides from %s", self.template_dir)

        self._env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(["html", "xml"], default_for_string=False),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.filters["comment"] = comment_lines

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a named template.

        Raises:
            TemplateError: If the template is missing or fails to render
        """
        try:
            return self._env.get_template(template_name).render(**context)
        except TemplateNotFound as e:
            raise TemplateError(f"Unknown template: {template_name}") from e
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e


_engines: Dict[Optional[str], TemplateEngine] = {}


def get_template_engine(template_dir: Optional[Union[str, Path]] = None) -> TemplateEngine:
    """Shared engine for ``template_dir`` (or the built-ins alone)."""
    key = str(template_dir) if template_dir else None
    if key not in _engines:
        _engines[key] = TemplateEngine(template_dir)
    return _engines[key]


def render_file_header(
    file_name: Optional[str],
    framework: Optional[str],
    contains: List[str],
    generator: str,
    created_at: str,
    template_dir: Optional[Union[str, Path]] = None,
) -> str:
    """
    Render the comment block that opens every generated file.

    Lines whose source value is absent are left out. The result has no
    trailing newline.
    """
    return get_template_engine(template_dir).render_template(
        FILE_HEADER,
        {
            "file_name": file_name,
            "framework": framework,
            "contains": contains,
            "generator": generator,
            "created_at": created_at,
        },
    )
