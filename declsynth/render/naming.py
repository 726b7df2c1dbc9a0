"""
TypeScript identifier checks used by the printer.

The builders pass names through untouched; the printer consults this module
to decide whether a name can appear in binding or expression position.
"""

import re
from typing import Optional

# Reserved words that can never be used as binding names
TS_RESERVED_WORDS = {
    "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "enum", "export", "extends", "false",
    "finally", "for", "function", "if", "import", "in", "instanceof", "new",
    "null", "return", "super", "switch", "this", "throw", "true", "try",
    "typeof", "var", "void", "while", "with",
}

# Reserved in strict mode, which ES modules always are
TS_STRICT_RESERVED_WORDS = {
    "arguments", "eval", "implements", "interface", "let", "package",
    "private", "protected", "public", "static", "yield", "await",
}

# Literal-like keywords that are valid expressions on their own
TS_EXPRESSION_KEYWORDS = {"this", "super", "null", "true", "false"}

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_reserved_word(name: str) -> bool:
    """Check whether a name is reserved in an ES module."""
    return name in TS_RESERVED_WORDS or name in TS_STRICT_RESERVED_WORDS


def identifier_problem(name: str, binding: bool = False) -> Optional[str]:
    """
    Describe why a name cannot be used as an identifier.

    Args:
        name: Candidate identifier
        binding: True when the name is being declared rather than referenced

    Returns:
        Problem description, or None when the name is usable
    """
    if not _IDENTIFIER_RE.match(name):
        return f"'{name}' is not a valid identifier"

    if binding:
        if is_reserved_word(name):
            return f"'{name}' is a reserved word"
    elif name in TS_RESERVED_WORDS and name not in TS_EXPRESSION_KEYWORDS:
        return f"'{name}' is a reserved word"

    return None
