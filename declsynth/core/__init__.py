"""
Core declaration synthesis components.

Node model, leaf node helpers, comment attachment and the declaration
builders.
"""

from .nodes import (
    SyntaxKind,
    Node,
    Expression,
    TypeNode,
    Statement,
    Identifier,
    StringLiteral,
    NumericLiteral,
    BooleanLiteral,
    NullLiteral,
    ArrayLiteral,
    ObjectLiteral,
    PropertyAssignment,
    PropertyAccess,
    TypeReference,
    AsExpression,
    CallExpression,
    BindingElement,
    ObjectBindingPattern,
    DocComment,
    ImportExportItem,
    ExportAllDeclaration,
    NamedExportDeclaration,
    NamedImportDeclaration,
    ConstDeclaration,
)
from .comments import attach_leading_comment, to_doc_comment
from .module import (
    DeclarationError,
    build_export_all,
    build_named_export,
    build_named_import,
    build_call,
    build_const_declaration,
    normalize_item,
    normalize_items,
    resolve_type_only_placement,
)
from . import factory

__all__ = [
    # Node model
    "SyntaxKind",
    "Node",
    "Expression",
    "TypeNode",
    "Statement",
    "Identifier",
    "StringLiteral",
    "NumericLiteral",
    "BooleanLiteral",
    "NullLiteral",
    "ArrayLiteral",
    "ObjectLiteral",
    "PropertyAssignment",
    "PropertyAccess",
    "TypeReference",
    "AsExpression",
    "CallExpression",
    "BindingElement",
    "ObjectBindingPattern",
    "DocComment",
    "ImportExportItem",
    "ExportAllDeclaration",
    "NamedExportDeclaration",
    "NamedImportDeclaration",
    "ConstDeclaration",
    # Comments
    "attach_leading_comment",
    "to_doc_comment",
    # Builders
    "DeclarationError",
    "build_export_all",
    "build_named_export",
    "build_named_import",
    "build_call",
    "build_const_declaration",
    "normalize_item",
    "normalize_items",
    "resolve_type_only_placement",
    # Leaf helpers
    "factory",
]
