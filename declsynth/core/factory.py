"""
Leaf node helpers.

Short constructors for identifiers, literals, member access and type
references, used by callers to assemble the expressions they pass to the
declaration builders.
"""

from typing import Any, Iterable, Mapping, Optional, Union

from .nodes import (
    ArrayLiteral,
    BooleanLiteral,
    Expression,
    Identifier,
    ImportExportItem,
    NullLiteral,
    NumericLiteral,
    ObjectLiteral,
    PropertyAccess,
    PropertyAssignment,
    StringLiteral,
    TypeNode,
    TypeReference,
)


def identifier(text: str) -> Identifier:
    """Create a bare identifier reference."""
    return Identifier(text)


def string(text: str) -> StringLiteral:
    """Create a string literal. Quoting is left to the renderer."""
    return StringLiteral(text)


def literal(value: Any) -> Expression:
    """
    Convert a plain Python value into a literal expression.

    Strings become string literals (unlike the builders' shorthand, where a
    bare string means an identifier). Lists and tuples become array literals,
    mappings become object literals with their keys kept in order. Expression
    nodes are returned unchanged so literals can embed references.

    Args:
        value: None, bool, int, float, str, list, tuple, mapping or Expression

    Returns:
        Literal expression node

    Raises:
        TypeError: If the value has no literal form
    """
    if isinstance(value, Expression):
        return value
    if value is None:
        return NullLiteral()
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return BooleanLiteral(value)
    if isinstance(value, (int, float)):
        return NumericLiteral(value)
    if isinstance(value, str):
        return StringLiteral(value)
    if isinstance(value, (list, tuple)):
        return ArrayLiteral(tuple(literal(item) for item in value))
    if isinstance(value, Mapping):
        return ObjectLiteral(
            tuple(
                PropertyAssignment(str(key), literal(item))
                for key, item in value.items()
            )
        )
    raise TypeError(f"Cannot convert {type(value).__name__} to a literal expression")


def member_access(
    expression: Union[str, Expression], *names: str
) -> PropertyAccess:
    """
    Create a member access chain, e.g. ``member_access("client", "get")``.

    Args:
        expression: Object expression; a string is treated as an identifier
        names: One or more property names, applied left to right

    Returns:
        Outermost PropertyAccess node
    """
    if not names:
        raise ValueError("member_access requires at least one property name")

    target = Identifier(expression) if isinstance(expression, str) else expression
    for name in names:
        target = PropertyAccess(target, name)
    return target


def type_reference(
    name: str, type_arguments: Optional[Iterable[Union[str, TypeNode]]] = None
) -> TypeReference:
    """Create a type reference; string type arguments become references too."""
    arguments = tuple(
        TypeReference(arg) if isinstance(arg, str) else arg
        for arg in (type_arguments or ())
    )
    return TypeReference(name, arguments)


def export_item(
    name: str, alias: Optional[str] = None, as_type: bool = False
) -> ImportExportItem:
    """Create an item for an export clause."""
    return ImportExportItem(name=name, alias=alias, as_type=as_type)


def import_item(
    name: str, alias: Optional[str] = None, as_type: bool = False
) -> ImportExportItem:
    """Create an item for an import clause."""
    return ImportExportItem(name=name, alias=alias, as_type=as_type)
