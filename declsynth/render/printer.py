"""
TypeScript printer for declaration trees.

Serializes the node model into source text. Expressions are printed directly;
statements go through the Jinja2 templates of the printer's template engine.
"""

import math
import re
from typing import Any, Dict, Iterable, List, Optional, Union

from ..core.nodes import (
    ArrayLiteral,
    AsExpression,
    BindingElement,
    BooleanLiteral,
    CallExpression,
    ConstDeclaration,
    DocComment,
    ExportAllDeclaration,
    Identifier,
    ImportExportItem,
    NamedExportDeclaration,
    NamedImportDeclaration,
    Node,
    NullLiteral,
    NumericLiteral,
    ObjectBindingPattern,
    ObjectLiteral,
    PropertyAccess,
    PropertyAssignment,
    Statement,
    StringLiteral,
    SyntaxKind,
    TypeReference,
)
from ..logging_config import get_logger
from .config import PrinterConfig, load_config
from .naming import identifier_problem
from .templates import TemplateEngine, TemplateError, create_template_engine

logger = get_logger(__name__)

_PROPERTY_NAME_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

_ESCAPES = {
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class RenderError(Exception):
    """Raised when a node tree cannot be printed."""

    pass


class TypeScriptPrinter:
    """Prints declaration trees as TypeScript source."""

    def __init__(self, config: Optional[PrinterConfig] = None):
        """Initialize printer with optional configuration."""
        self.config = config or load_config()
        self.template_engine: TemplateEngine = create_template_engine(
            self.config.template_dir
        )
        self.warnings: List[str] = []

        self._printers = {
            SyntaxKind.IDENTIFIER: self._print_identifier,
            SyntaxKind.STRING_LITERAL: self._print_string_literal,
            SyntaxKind.NUMERIC_LITERAL: self._print_numeric_literal,
            SyntaxKind.BOOLEAN_LITERAL: self._print_boolean_literal,
            SyntaxKind.NULL_LITERAL: self._print_null_literal,
            SyntaxKind.ARRAY_LITERAL: self._print_array_literal,
            SyntaxKind.OBJECT_LITERAL: self._print_object_literal,
            SyntaxKind.PROPERTY_ASSIGNMENT: self._print_property_assignment,
            SyntaxKind.PROPERTY_ACCESS: self._print_property_access,
            SyntaxKind.CALL_EXPRESSION: self._print_call_expression,
            SyntaxKind.AS_EXPRESSION: self._print_as_expression,
            SyntaxKind.TYPE_REFERENCE: self._print_type_reference,
            SyntaxKind.BINDING_ELEMENT: self._print_binding_element,
            SyntaxKind.OBJECT_BINDING_PATTERN: self._print_object_binding_pattern,
            SyntaxKind.IMPORT_EXPORT_ITEM: self._print_import_export_item,
            SyntaxKind.EXPORT_ALL_DECLARATION: self._print_export_all,
            SyntaxKind.NAMED_EXPORT_DECLARATION: self._print_named_export,
            SyntaxKind.NAMED_IMPORT_DECLARATION: self._print_named_import,
            SyntaxKind.CONST_DECLARATION: self._print_const_declaration,
        }

    @property
    def terminator(self) -> str:
        return ";" if self.config.semicolons else ""

    def print_node(self, node: Node) -> str:
        """
        Print a single node.

        Statements are printed with their leading doc comment, if any.

        Args:
            node: Any node of the node model

        Returns:
            Source text
        """
        if not isinstance(node, Node):
            raise RenderError(f"Cannot print {type(node).__name__}: not a node")

        printer = self._printers.get(getattr(node, "kind", None))
        if printer is None:
            raise RenderError(f"No printer for node type {type(node).__name__}")

        text = printer(node)

        if isinstance(node, Statement) and node.comment:
            text = f"{self.print_doc_comment(node.comment)}\n{text}"

        return text

    def print_file(self, statements: Iterable[Statement]) -> str:
        """
        Print a sequence of statements as a source file.

        Warnings from previous calls are discarded.

        Args:
            statements: Statement nodes in output order

        Returns:
            Source text ending with a line ending
        """
        self.warnings = []

        chunks = []
        for statement in statements:
            if not isinstance(statement, Statement):
                raise RenderError(
                    f"Only statements can be printed at file level, "
                    f"got {type(statement).__name__}"
                )
            chunks.append(self.print_node(statement))

        code = "\n".join(chunks) + "\n" if chunks else ""
        if self.config.line_ending != "\n":
            code = code.replace("\n", self.config.line_ending)

        logger.debug("Printed %d statement(s)", len(chunks))
        return code

    def print_doc_comment(self, comment: DocComment) -> str:
        """Print a documentation block."""
        lines = [line.replace("*/", "*\\/") for line in comment.lines]
        return self.template_engine.render_template(
            "doc_comment.ts.j2", {"lines": lines}
        )

    def quote(self, text: str) -> str:
        """Quote a string using the configured quote style."""
        quote = "'" if self.config.quote_style == "single" else '"'
        escaped = "".join(
            _ESCAPES.get(char, "\\" + char if char == quote else char)
            for char in text
        )
        return f"{quote}{escaped}{quote}"

    # Identifier checks

    def _check_identifier(self, name: str, binding: bool = False):
        problem = identifier_problem(name, binding=binding)
        if problem is None:
            return

        if self.config.strict_identifiers:
            raise RenderError(problem)

        if problem not in self.warnings:
            self.warnings.append(problem)
            logger.warning("Emitting questionable identifier: %s", problem)

    # Expressions

    def _print_identifier(self, node: Identifier) -> str:
        self._check_identifier(node.text)
        return node.text

    def _print_string_literal(self, node: StringLiteral) -> str:
        return self.quote(node.text)

    def _print_numeric_literal(self, node: NumericLiteral) -> str:
        value = node.value
        if isinstance(value, float):
            if math.isnan(value):
                return "NaN"
            if math.isinf(value):
                return "Infinity" if value > 0 else "-Infinity"
            if value == 0 and math.copysign(1.0, value) < 0:
                return "-0"
            if value.is_integer():
                return str(int(value))
        return repr(value)

    def _print_boolean_literal(self, node: BooleanLiteral) -> str:
        return "true" if node.value else "false"

    def _print_null_literal(self, node: NullLiteral) -> str:
        return "null"

    def _print_array_literal(self, node: ArrayLiteral) -> str:
        return "[" + ", ".join(self.print_node(e) for e in node.elements) + "]"

    def _print_object_literal(self, node: ObjectLiteral) -> str:
        if not node.properties:
            return "{}"
        return "{ " + ", ".join(self.print_node(p) for p in node.properties) + " }"

    def _print_property_assignment(self, node: PropertyAssignment) -> str:
        name = node.name if _PROPERTY_NAME_RE.match(node.name) else self.quote(node.name)
        return f"{name}: {self.print_node(node.initializer)}"

    def _print_operand(self, node: Node) -> str:
        """Print the left side of a member access or call."""
        text = self.print_node(node)
        if isinstance(node, (AsExpression, NumericLiteral, ObjectLiteral)):
            return f"({text})"
        return text

    def _print_property_access(self, node: PropertyAccess) -> str:
        target = self._print_operand(node.expression)
        if _PROPERTY_NAME_RE.match(node.name):
            return f"{target}.{node.name}"
        return f"{target}[{self.quote(node.name)}]"

    def _print_call_expression(self, node: CallExpression) -> str:
        callee = self._print_operand(node.callee)
        type_arguments = ""
        if node.type_arguments:
            type_arguments = (
                "<" + ", ".join(self.print_node(t) for t in node.type_arguments) + ">"
            )
        arguments = ", ".join(self.print_node(arg) for arg in node.arguments)
        return f"{callee}{type_arguments}({arguments})"

    def _print_as_expression(self, node: AsExpression) -> str:
        return f"{self.print_node(node.expression)} as {self.print_node(node.type)}"

    # Types

    def _print_type_reference(self, node: TypeReference) -> str:
        if not node.type_arguments:
            return node.name
        arguments = ", ".join(self.print_node(t) for t in node.type_arguments)
        return f"{node.name}<{arguments}>"

    # Bindings

    def _print_binding_element(self, node: BindingElement) -> str:
        self._check_identifier(node.name, binding=True)
        text = node.name
        if node.property_name is not None:
            text = f"{node.property_name}: {text}"
        if node.initializer is not None:
            text = f"{text} = {self.print_node(node.initializer)}"
        return text

    def _print_object_binding_pattern(self, node: ObjectBindingPattern) -> str:
        if not node.elements:
            return "{}"
        return "{ " + ", ".join(self.print_node(e) for e in node.elements) + " }"

    # Statements

    def _print_import_export_item(self, node: ImportExportItem) -> str:
        text = node.name
        if node.alias:
            text = f"{text} as {node.alias}"
        if node.as_type:
            text = f"type {text}"
        return text

    def _render_statement(self, template_name: str, context: Dict[str, Any]) -> str:
        context = {"terminator": self.terminator, "config": self.config, **context}
        return self.template_engine.render_template(template_name, context)

    def _print_export_all(self, node: ExportAllDeclaration) -> str:
        return self._render_statement(
            "export_all.ts.j2", {"module": self.quote(node.module)}
        )

    def _print_named_export(self, node: NamedExportDeclaration) -> str:
        return self._render_statement(
            "named_export.ts.j2",
            {
                "items": [self.print_node(item) for item in node.items],
                "module": self.quote(node.module),
                "type_only": node.type_only,
            },
        )

    def _print_named_import(self, node: NamedImportDeclaration) -> str:
        # Imports introduce local bindings; re-exports do not
        for item in node.items:
            self._check_identifier(item.alias or item.name, binding=True)

        return self._render_statement(
            "named_import.ts.j2",
            {
                "items": [self.print_node(item) for item in node.items],
                "module": self.quote(node.module),
                "type_only": node.type_only,
            },
        )

    def _print_const_declaration(self, node: ConstDeclaration) -> str:
        if isinstance(node.name, Identifier):
            self._check_identifier(node.name.text, binding=True)
            name = node.name.text
        else:
            name = self.print_node(node.name)

        type_annotation = None
        if node.type_annotation is not None:
            type_annotation = self.print_node(node.type_annotation)

        return self._render_statement(
            "const_declaration.ts.j2",
            {
                "name": name,
                "type_annotation": type_annotation,
                "initializer": self.print_node(node.initializer),
                "exported": node.exported,
            },
        )


class RenderResult:
    """Container for rendering results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize render result.

        Args:
            code: Rendered source text
            warnings: Any warnings raised while printing
            metadata: Additional metadata about the output
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "RenderResult":
        """Create a failed render result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def render_statements(
    statements: Iterable[Statement],
    config: Optional[Union[PrinterConfig, Dict[str, Any]]] = None,
) -> RenderResult:
    """
    Render statements into a TypeScript source file with error handling.

    Args:
        statements: Statement nodes in output order
        config: PrinterConfig, or a dict of overrides for the default preset

    Returns:
        RenderResult with code, warnings, and metadata
    """
    if isinstance(config, dict):
        config = load_config(custom_config=config)

    statements = list(statements)

    try:
        printer = TypeScriptPrinter(config)
        code = printer.print_file(statements)
    except (RenderError, TemplateError) as e:
        logger.error("Rendering failed: %s", e)
        return RenderResult.error(f"Rendering failed: {e}", exception=e)

    metadata = {
        "statement_count": len(statements),
        "exports": sum(
            isinstance(s, (ExportAllDeclaration, NamedExportDeclaration))
            or (isinstance(s, ConstDeclaration) and s.exported)
            for s in statements
        ),
        "imports": sum(isinstance(s, NamedImportDeclaration) for s in statements),
        "quote_style": printer.config.quote_style,
    }

    return RenderResult(code, list(printer.warnings), metadata)
