"""
Template engine wrapper for statement rendering.

Provides a simple interface for Jinja2 template rendering with the built-in
TypeScript statement templates and a few filters for code generation.
"""

from typing import Dict, Any, Iterable, Optional, Union
from pathlib import Path

from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
)
from jinja2 import TemplateError as Jinja2Error

from ..logging_config import get_logger

logger = get_logger(__name__)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


# Built-in statement templates. Expressions arrive already printed.
EXPORT_ALL_TEMPLATE = "export * from {{ module }}{{ terminator }}"

NAMED_EXPORT_TEMPLATE = (
    "export {% if type_only %}type {% endif %}{{ items | clause }}"
    " from {{ module }}{{ terminator }}"
)

NAMED_IMPORT_TEMPLATE = (
    "import {% if type_only %}type {% endif %}{{ items | clause }}"
    " from {{ module }}{{ terminator }}"
)

CONST_DECLARATION_TEMPLATE = (
    "{% if exported %}export {% endif %}const {{ name }}"
    "{% if type_annotation %}: {{ type_annotation }}{% endif %}"
    " = {{ initializer }}{{ terminator }}"
)

DOC_COMMENT_TEMPLATE = """/**
{{ lines | comment(" *") }}
 */"""

BUILTIN_TEMPLATES = {
    "export_all.ts.j2": EXPORT_ALL_TEMPLATE,
    "named_export.ts.j2": NAMED_EXPORT_TEMPLATE,
    "named_import.ts.j2": NAMED_IMPORT_TEMPLATE,
    "const_declaration.ts.j2": CONST_DECLARATION_TEMPLATE,
    "doc_comment.ts.j2": DOC_COMMENT_TEMPLATE,
}


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory whose templates take precedence over the
                built-in ones
        """
        self.template_dir = template_dir
        self._builtins = DictLoader(dict(BUILTIN_TEMPLATES))
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        if self.template_dir and self.template_dir.exists():
            loader = ChoiceLoader(
                [FileSystemLoader(str(self.template_dir)), self._builtins]
            )
            logger.debug("Loading template overrides from %s", self.template_dir)
        else:
            loader = self._builtins

        self._env = Environment(
            loader=loader,
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

        # Add custom filters for code generation
        self._env.filters["clause"] = self._clause_filter
        self._env.filters["comment"] = self._comment_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Jinja2Error as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {e}"
            ) from e

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """
        Render a template string with the given context.

        Args:
            template_string: Template content as string
            context: Variables to pass to template

        Returns:
            Rendered content
        """
        try:
            template = self._env.from_string(template_string)
            return template.render(**context)
        except Jinja2Error as e:
            raise TemplateError(f"Failed to render template string: {e}") from e

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template, replacing a built-in of the same name.

        Args:
            name: Template name
            content: Template content
        """
        self._builtins.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True

    # Template filters for code generation

    def _clause_filter(self, items: Iterable[str]) -> str:
        """Wrap printed specifiers in braces; an empty clause prints ``{}``."""
        items = list(items)
        if not items:
            return "{}"
        return "{ " + ", ".join(items) + " }"

    def _comment_filter(self, value: Union[str, Iterable[str]], style: str = "//") -> str:
        """Add comment markers to each line."""
        lines = str(value).split("\n") if isinstance(value, str) else list(value)
        return "\n".join(f"{style} {line}" if line.strip() else style for line in lines)


def create_template_engine(template_dir: Optional[Union[str, Path]] = None) -> TemplateEngine:
    """
    Create a new template engine.

    Each engine owns its templates, so ``add_template`` on one engine never
    affects another.

    Args:
        template_dir: Optional directory with template overrides

    Returns:
        TemplateEngine instance
    """
    return TemplateEngine(Path(template_dir) if template_dir is not None else None)
