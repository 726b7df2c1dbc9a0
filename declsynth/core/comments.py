"""
Documentation comment attachment.

Comments are stored on the statement node itself; attaching one returns a new
node rather than mutating the original.
"""

import dataclasses
from typing import Iterable, Optional, Union

from .nodes import DocComment, Statement

CommentValue = Union[DocComment, str, Iterable[Optional[str]]]


def to_doc_comment(value: Optional[CommentValue]) -> Optional[DocComment]:
    """
    Normalize a comment value into a DocComment.

    Args:
        value: DocComment, a string (split on newlines), or a sequence of
            lines. None and empty lines in a sequence are dropped.

    Returns:
        DocComment, or None when no lines remain

    Raises:
        TypeError: If the value is not a supported comment shape
    """
    if value is None:
        return None

    if isinstance(value, DocComment):
        lines = value.lines
    elif isinstance(value, str):
        lines = tuple(value.splitlines())
    else:
        try:
            entries = list(value)
        except TypeError:
            raise TypeError(
                f"Comment must be a string or a sequence of strings, "
                f"got {type(value).__name__}"
            ) from None

        lines = []
        for entry in entries:
            if not entry:
                continue
            if not isinstance(entry, str):
                raise TypeError(
                    f"Comment lines must be strings, got {type(entry).__name__}"
                )
            lines.extend(entry.splitlines())
        lines = tuple(lines)

    return DocComment(lines) if lines else None


def attach_leading_comment(node: Statement, comment: Optional[CommentValue]):
    """
    Return a copy of ``node`` carrying ``comment`` as its leading doc block.

    A comment already on the node is replaced. An empty comment leaves the
    node untouched.

    Args:
        node: Statement node
        comment: Comment value accepted by :func:`to_doc_comment`

    Returns:
        Statement node of the same type
    """
    if not isinstance(node, Statement):
        raise TypeError(
            f"Comments attach to statements only, got {type(node).__name__}"
        )

    doc = to_doc_comment(comment)
    if doc is None:
        return node
    return dataclasses.replace(node, comment=doc)
