"""
declsynth - TypeScript declaration synthesis

Builds immutable export, import, call and const declaration trees and prints
them as TypeScript source.
"""

from .core import (
    DeclarationError,
    DocComment,
    ImportExportItem,
    attach_leading_comment,
    build_call,
    build_const_declaration,
    build_export_all,
    build_named_export,
    build_named_import,
    factory,
)
from .render import (
    PrinterConfig,
    RenderError,
    RenderResult,
    TypeScriptPrinter,
    load_config,
    render_statements,
)
from .logging_config import configure_logging, get_logger

# Version info
__version__ = "0.1.0"


def quick_render(nodes, **options):
    """
    Quick rendering of one statement or a sequence of statements.

    Args:
        nodes: Statement node or iterable of statement nodes
        **options: Printer configuration overrides (quote_style, semicolons, ...)

    Returns:
        Rendered source string
    """
    if not isinstance(nodes, (list, tuple)):
        nodes = [nodes]

    result = render_statements(nodes, options or None)

    if result.success:
        return result.code
    else:
        raise RuntimeError(f"Rendering failed: {result.error_message}")


# Export main interfaces
__all__ = [
    "DeclarationError",
    "DocComment",
    "ImportExportItem",
    "attach_leading_comment",
    "build_call",
    "build_const_declaration",
    "build_export_all",
    "build_named_export",
    "build_named_import",
    "factory",
    "PrinterConfig",
    "RenderError",
    "RenderResult",
    "TypeScriptPrinter",
    "load_config",
    "render_statements",
    "configure_logging",
    "get_logger",
    "quick_render",
]
