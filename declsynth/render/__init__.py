"""
Reference renderer for declaration trees.

Prints the node model as TypeScript source using configurable Jinja2
statement templates.
"""

from .printer import TypeScriptPrinter, RenderError, RenderResult, render_statements
from .config import PrinterConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine
from .naming import identifier_problem, is_reserved_word

__all__ = [
    # Printer
    "TypeScriptPrinter",
    "RenderError",
    "RenderResult",
    "render_statements",
    # Configuration system
    "PrinterConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    # Identifier checks
    "identifier_problem",
    "is_reserved_word",
]
