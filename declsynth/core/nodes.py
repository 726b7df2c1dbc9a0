"""
Node model for declaration synthesis.

Immutable representations of the TypeScript statements and expressions the
builders produce. A renderer walks these trees to emit source text.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple, Union
from enum import Enum


class SyntaxKind(Enum):
    """Kinds of nodes understood by renderers."""

    IDENTIFIER = "identifier"
    STRING_LITERAL = "string_literal"
    NUMERIC_LITERAL = "numeric_literal"
    BOOLEAN_LITERAL = "boolean_literal"
    NULL_LITERAL = "null_literal"
    ARRAY_LITERAL = "array_literal"
    OBJECT_LITERAL = "object_literal"
    PROPERTY_ASSIGNMENT = "property_assignment"
    PROPERTY_ACCESS = "property_access"
    CALL_EXPRESSION = "call_expression"
    AS_EXPRESSION = "as_expression"
    TYPE_REFERENCE = "type_reference"
    BINDING_ELEMENT = "binding_element"
    OBJECT_BINDING_PATTERN = "object_binding_pattern"
    IMPORT_EXPORT_ITEM = "import_export_item"
    EXPORT_ALL_DECLARATION = "export_all_declaration"
    NAMED_EXPORT_DECLARATION = "named_export_declaration"
    NAMED_IMPORT_DECLARATION = "named_import_declaration"
    CONST_DECLARATION = "const_declaration"


@dataclass(frozen=True)
class Node:
    """Base class for every node."""

    kind: ClassVar[SyntaxKind]


class Expression(Node):
    """Marker base for nodes usable in expression position."""


class TypeNode(Node):
    """Marker base for nodes usable in type position."""


class Statement(Node):
    """Marker base for top-level statements.

    Every statement declares a trailing ``comment`` field holding its leading
    documentation block.
    """


# Expressions


@dataclass(frozen=True)
class Identifier(Expression):
    """Bare identifier reference, e.g. ``foo``."""

    kind: ClassVar[SyntaxKind] = SyntaxKind.IDENTIFIER

    text: str


@dataclass(frozen=True)
class StringLiteral(Expression):
    """String literal; ``text`` holds the unquoted value."""

    kind: ClassVar[SyntaxKind] = SyntaxKind.STRING_LITERAL

    text: str


@dataclass(frozen=True)
class NumericLiteral(Expression):
    kind: ClassVar[SyntaxKind] = SyntaxKind.NUMERIC_LITERAL

    value: Union[int, float]


@dataclass(frozen=True)
class BooleanLiteral(Expression):
    kind: ClassVar[SyntaxKind] = SyntaxKind.BOOLEAN_LITERAL

    value: bool


@dataclass(frozen=True)
class NullLiteral(Expression):
    kind: ClassVar[SyntaxKind] = SyntaxKind.NULL_LITERAL


@dataclass(frozen=True)
class ArrayLiteral(Expression):
    kind: ClassVar[SyntaxKind] = SyntaxKind.ARRAY_LITERAL

    elements: Tuple[Expression, ...] = ()


@dataclass(frozen=True)
class PropertyAssignment(Node):
    """``name: initializer`` entry of an object literal."""

    kind: ClassVar[SyntaxKind] = SyntaxKind.PROPERTY_ASSIGNMENT

    name: str
    initializer: Expression


@dataclass(frozen=True)
class ObjectLiteral(Expression):
    kind: ClassVar[SyntaxKind] = SyntaxKind.OBJECT_LITERAL

    properties: Tuple[PropertyAssignment, ...] = ()


@dataclass(frozen=True)
class PropertyAccess(Expression):
    """Member access, e.g. ``client.get``."""

    kind: ClassVar[SyntaxKind] = SyntaxKind.PROPERTY_ACCESS

    expression: Expression
    name: str


@dataclass(frozen=True)
class TypeReference(TypeNode):
    """Named type, optionally generic, e.g. ``Array<string>``."""

    kind: ClassVar[SyntaxKind] = SyntaxKind.TYPE_REFERENCE

    name: str
    type_arguments: Tuple[TypeNode, ...] = ()


CONST_TYPE_NAME = "const"


@dataclass(frozen=True)
class AsExpression(Expression):
    """Type assertion ``expression as type``."""

    kind: ClassVar[SyntaxKind] = SyntaxKind.AS_EXPRESSION

    expression: Expression
    type: TypeNode

    @property
    def is_const_assertion(self) -> bool:
        """True for ``expression as const``."""
        return (
            isinstance(self.type, TypeReference)
            and self.type.name == CONST_TYPE_NAME
            and not self.type.type_arguments
        )


Callee = Union[Identifier, PropertyAccess]


@dataclass(frozen=True)
class CallExpression(Expression):
    """Invocation ``callee<type_arguments>(arguments)``.

    ``type_arguments`` is None when the call has no type argument list.
    """

    kind: ClassVar[SyntaxKind] = SyntaxKind.CALL_EXPRESSION

    callee: Callee
    type_arguments: Optional[Tuple[TypeNode, ...]] = None
    arguments: Tuple[Expression, ...] = ()


# Bindings


@dataclass(frozen=True)
class BindingElement(Node):
    """One element of a destructuring pattern.

    ``property_name`` renames (``{ prop: name }``); ``initializer`` provides a
    default value. Both are unset for a plain ``{ name }`` binding.
    """

    kind: ClassVar[SyntaxKind] = SyntaxKind.BINDING_ELEMENT

    name: str
    property_name: Optional[str] = None
    initializer: Optional[Expression] = None


@dataclass(frozen=True)
class ObjectBindingPattern(Node):
    kind: ClassVar[SyntaxKind] = SyntaxKind.OBJECT_BINDING_PATTERN

    elements: Tuple[BindingElement, ...] = ()


# Documentation


@dataclass(frozen=True)
class DocComment:
    """Leading documentation block, one entry per line."""

    lines: Tuple[str, ...] = ()

    def __post_init__(self):
        if not isinstance(self.lines, tuple):
            raise TypeError(
                f"Comment lines must be a tuple, got {type(self.lines).__name__}"
            )
        for line in self.lines:
            if not isinstance(line, str):
                raise TypeError(
                    f"Comment lines must be strings, got {type(line).__name__}"
                )

    def __bool__(self) -> bool:
        return bool(self.lines)


# Import / export


@dataclass(frozen=True)
class ImportExportItem(Node):
    """A single binding of an import or export clause.

    Renders as ``name``, ``name as alias``, or with a ``type`` prefix when
    ``as_type`` is set.
    """

    kind: ClassVar[SyntaxKind] = SyntaxKind.IMPORT_EXPORT_ITEM

    name: str
    alias: Optional[str] = None
    as_type: bool = False


@dataclass(frozen=True)
class ExportAllDeclaration(Statement):
    """``export * from "module"``."""

    kind: ClassVar[SyntaxKind] = SyntaxKind.EXPORT_ALL_DECLARATION

    module: str
    comment: Optional[DocComment] = None


@dataclass(frozen=True)
class NamedExportDeclaration(Statement):
    """``export { a, b as c } from "module"``.

    ``type_only`` marks the whole clause as ``export type``.
    """

    kind: ClassVar[SyntaxKind] = SyntaxKind.NAMED_EXPORT_DECLARATION

    items: Tuple[ImportExportItem, ...]
    module: str
    type_only: bool = False
    comment: Optional[DocComment] = None


@dataclass(frozen=True)
class NamedImportDeclaration(Statement):
    """``import { a, b as c } from "module"``."""

    kind: ClassVar[SyntaxKind] = SyntaxKind.NAMED_IMPORT_DECLARATION

    items: Tuple[ImportExportItem, ...]
    module: str
    type_only: bool = False
    comment: Optional[DocComment] = None


@dataclass(frozen=True)
class ConstDeclaration(Statement):
    """Top-level ``const`` variable statement with a single declaration."""

    kind: ClassVar[SyntaxKind] = SyntaxKind.CONST_DECLARATION

    name: Union[Identifier, ObjectBindingPattern]
    initializer: Expression
    type_annotation: Optional[TypeNode] = None
    exported: bool = False
    comment: Optional[DocComment] = None

    @property
    def destructure(self) -> bool:
        return isinstance(self.name, ObjectBindingPattern)

    @property
    def const_assertion(self) -> bool:
        return (
            isinstance(self.initializer, AsExpression)
            and self.initializer.is_const_assertion
        )

    @property
    def declared_name(self) -> str:
        """Variable name visible at use sites."""
        if isinstance(self.name, ObjectBindingPattern):
            return self.name.elements[0].name
        return self.name.text
