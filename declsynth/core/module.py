"""
Module-level declaration builders.

Pure functions that build export, import, call and const declaration nodes.
Every builder normalizes its shorthand inputs first, then applies its rules to
the canonical node types only.

Identifier legality (reserved words, illegal characters) is not checked here;
that belongs to the renderer.
"""

import dataclasses
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple, Union

from .comments import CommentValue, attach_leading_comment
from .nodes import (
    AsExpression,
    BindingElement,
    CallExpression,
    ConstDeclaration,
    ExportAllDeclaration,
    Expression,
    Identifier,
    ImportExportItem,
    NamedExportDeclaration,
    NamedImportDeclaration,
    ObjectBindingPattern,
    PropertyAccess,
    TypeNode,
    TypeReference,
    CONST_TYPE_NAME,
)


class DeclarationError(Exception):
    """Raised when a builder is called with structurally invalid input."""

    pass


ImportExportValue = Union[str, ImportExportItem, Mapping[str, Any]]
ImportExportItems = Union[ImportExportValue, Iterable[ImportExportValue]]


def _require_name(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a string, got {type(value).__name__}")
    if not value:
        raise DeclarationError(f"{what} must not be empty")
    return value


def normalize_item(item: ImportExportValue) -> ImportExportItem:
    """
    Convert an import/export shorthand into an ImportExportItem.

    Accepted forms are a bare name, an ImportExportItem, or a mapping with
    ``name`` and optional ``alias`` and ``as_type`` (``asType`` also works).
    """
    if isinstance(item, ImportExportItem):
        _require_name(item.name, "Item name")
        return item

    if isinstance(item, str):
        return ImportExportItem(name=_require_name(item, "Item name"))

    if isinstance(item, Mapping):
        unknown = set(item) - {"name", "alias", "as_type", "asType"}
        if unknown:
            raise DeclarationError(
                f"Unknown import/export item keys: {', '.join(sorted(unknown))}"
            )
        if "name" not in item:
            raise DeclarationError("Import/export item requires a 'name'")

        alias = item.get("alias")
        if alias is not None:
            _require_name(alias, "Item alias")

        as_type = item.get("as_type", item.get("asType", False))
        if not isinstance(as_type, bool):
            raise TypeError(
                f"Item as_type must be a bool, got {type(as_type).__name__}"
            )

        return ImportExportItem(
            name=_require_name(item["name"], "Item name"),
            alias=alias,
            as_type=as_type,
        )

    raise TypeError(
        f"Import/export item must be a string, mapping or ImportExportItem, "
        f"got {type(item).__name__}"
    )


def normalize_items(items: ImportExportItems) -> Tuple[ImportExportItem, ...]:
    """Normalize a single item or a sequence of items into a tuple."""
    if isinstance(items, (str, ImportExportItem, Mapping)):
        items = [items]
    return tuple(normalize_item(item) for item in items)


def resolve_type_only_placement(
    items: Sequence[ImportExportItem],
) -> Tuple[bool, Tuple[ImportExportItem, ...]]:
    """
    Decide where ``type`` modifiers go in an import or export clause.

    A clause whose items are all type-only is marked once at clause level and
    the item markers are dropped. When at least one item is a value binding,
    the clause stays unmarked and each item keeps its own marker.

    Args:
        items: Normalized clause items

    Returns:
        Tuple of (clause_type_only, items with resolved per-item markers)
    """
    has_value_item = any(not item.as_type for item in items)

    if has_value_item:
        return False, tuple(items)
    return True, tuple(dataclasses.replace(item, as_type=False) for item in items)


def build_export_all(module: str) -> ExportAllDeclaration:
    """
    Create an export-all declaration. Example: ``export * from './y'``.

    Args:
        module: Module containing the exports

    Returns:
        ExportAllDeclaration
    """
    return ExportAllDeclaration(module=_require_name(module, "Module path"))


def build_named_export(
    items: ImportExportItems, module: str
) -> NamedExportDeclaration:
    """
    Create a named export declaration. Example: ``export { X } from './y'``.

    Args:
        items: One item or a sequence of items to re-export
        module: Module containing the exports

    Returns:
        NamedExportDeclaration
    """
    module = _require_name(module, "Module path")
    type_only, resolved = resolve_type_only_placement(normalize_items(items))
    return NamedExportDeclaration(items=resolved, module=module, type_only=type_only)


def build_named_import(
    items: ImportExportItems, module: str
) -> NamedImportDeclaration:
    """
    Create a named import declaration. Example: ``import { X } from './y'``.

    Args:
        items: One item or a sequence of items to import
        module: Module containing the imports

    Returns:
        NamedImportDeclaration
    """
    module = _require_name(module, "Module path")
    type_only, resolved = resolve_type_only_placement(normalize_items(items))
    return NamedImportDeclaration(items=resolved, module=module, type_only=type_only)


def build_call(
    callee: Union[str, Identifier, PropertyAccess],
    args: Iterable[Union[str, Expression]] = (),
    type_args: Optional[Iterable[TypeNode]] = None,
) -> CallExpression:
    """
    Create a call expression.

    A string callee or argument becomes a bare identifier reference, never a
    string literal; pass ``factory.string(...)`` for a literal.

    Args:
        callee: Function name or member access node
        args: Call arguments, in order
        type_args: Type arguments; None omits the type argument list

    Returns:
        CallExpression
    """
    if isinstance(callee, str):
        callee = Identifier(_require_name(callee, "Callee name"))
    elif not isinstance(callee, (Identifier, PropertyAccess)):
        raise TypeError(
            f"Callee must be a string, Identifier or PropertyAccess, "
            f"got {type(callee).__name__}"
        )

    arguments = []
    for position, arg in enumerate(args):
        if isinstance(arg, str):
            arguments.append(Identifier(arg))
        elif isinstance(arg, Expression):
            arguments.append(arg)
        else:
            raise TypeError(
                f"Argument {position} must be a string or an expression node, "
                f"got {type(arg).__name__}"
            )

    type_arguments = None
    if type_args is not None:
        type_arguments = tuple(type_args)
        for type_arg in type_arguments:
            if not isinstance(type_arg, TypeNode):
                raise TypeError(
                    f"Type argument must be a type node, got {type(type_arg).__name__}"
                )

    return CallExpression(
        callee=callee, type_arguments=type_arguments, arguments=tuple(arguments)
    )


def build_const_declaration(
    name: str,
    initializer: Expression,
    *,
    destructure: bool = False,
    const_assertion: bool = False,
    exported: bool = False,
    type_annotation: Optional[Union[str, TypeNode]] = None,
    comment: Optional[CommentValue] = None,
) -> ConstDeclaration:
    """
    Create a const variable statement. Example: ``export const x = {} as const``.

    Args:
        name: Name of the variable
        initializer: Expression assigned to the variable
        destructure: Bind ``{ name }`` from the initializer instead of ``name``
        const_assertion: Wrap the initializer in ``as const``
        exported: Add the ``export`` modifier
        type_annotation: Type name or type node annotating the binding
        comment: Leading documentation comment

    Returns:
        ConstDeclaration
    """
    name = _require_name(name, "Declaration name")
    if not isinstance(initializer, Expression):
        raise TypeError(
            f"Initializer must be an expression node, got {type(initializer).__name__}"
        )

    if const_assertion:
        initializer = AsExpression(initializer, TypeReference(CONST_TYPE_NAME))

    target = (
        ObjectBindingPattern((BindingElement(name),))
        if destructure
        else Identifier(name)
    )

    annotation = None
    if isinstance(type_annotation, TypeNode):
        annotation = type_annotation
    elif type_annotation:
        annotation = TypeReference(_require_name(type_annotation, "Type annotation"))

    statement = ConstDeclaration(
        name=target,
        initializer=initializer,
        type_annotation=annotation,
        exported=bool(exported),
    )
    if comment is not None:
        statement = attach_leading_comment(statement, comment)
    return statement
