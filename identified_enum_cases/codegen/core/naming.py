"""
Naming utilities for Swift identifiers.

Decides whether a token's text can name an enum case, and recovers the
plain spelling of backtick-escaped names.
"""

import re
from typing import Set


# Keywords that cannot be used as a bare identifier in declarations.
# Contextual keywords (open, borrowing, nonisolated, ...) are left out.
SWIFT_RESERVED_WORDS: Set[str] = {
    # Declarations
    "associatedtype",
    "class",
    "deinit",
    "enum",
    "extension",
    "fileprivate",
    "func",
    "import",
    "init",
    "inout",
    "internal",
    "let",
    "operator",
    "private",
    "precedencegroup",
    "protocol",
    "public",
    "rethrows",
    "static",
    "struct",
    "subscript",
    "typealias",
    "var",
    # Statements
    "break",
    "case",
    "catch",
    "continue",
    "default",
    "defer",
    "do",
    "else",
    "fallthrough",
    "for",
    "guard",
    "if",
    "in",
    "repeat",
    "return",
    "switch",
    "throw",
    "where",
    "while",
    # Expressions and types
    "Any",
    "as",
    "false",
    "is",
    "nil",
    "self",
    "Self",
    "super",
    "throws",
    "true",
    "try",
}

# identifier-head from The Swift Programming Language, Lexical Structure
_HEAD_RANGES = (
    r"A-Za-z_"
    r"\u00a8\u00aa\u00ad\u00af\u00b2-\u00b5\u00b7-\u00ba\u00bc-\u00be"
    r"\u00c0-\u00d6\u00d8-\u00f6\u00f8-\u00ff\u0100-\u02ff\u0370-\u167f"
    r"\u1681-\u180d\u180f-\u1dbf\u1e00-\u1fff\u200b-\u200d\u202a-\u202e"
    r"\u203f-\u2040\u2054\u2060-\u206f\u2070-\u20cf\u2100-\u218f"
    r"\u2460-\u24ff\u2776-\u2793\u2c00-\u2dff\u2e80-\u2fff\u3004-\u3007"
    r"\u3021-\u302f\u3031-\u303f\u3040-\ud7ff\uf900-\ufd3d\ufd40-\ufdcf"
    r"\ufdf0-\ufe1f\ufe30-\ufe44\ufe47-\ufffd"
    + "".join(rf"\U{plane:04x}0000-\U{plane:04x}fffd" for plane in range(0x1, 0xF))
)
# identifier-character adds digits and combining marks
_BODY_RANGES = _HEAD_RANGES + r"0-9\u0300-\u036f\u1dc0-\u1dff\u20d0-\u20ff\ufe20-\ufe2f"

_IDENTIFIER_HEAD = f"[{_HEAD_RANGES}]"
_IDENTIFIER_BODY = f"[{_BODY_RANGES}]"

_PLAIN_IDENTIFIER = re.compile(rf"{_IDENTIFIER_HEAD}{_IDENTIFIER_BODY}*")
_ESCAPED_IDENTIFIER = re.compile(rf"`{_IDENTIFIER_HEAD}{_IDENTIFIER_BODY}*`")


def is_reserved_word(text: str) -> bool:
    """Check if text is a Swift keyword."""
    return text in SWIFT_RESERVED_WORDS


def is_escaped_identifier(text: str) -> bool:
    """Check if text is a backtick-escaped identifier (e.g. `` `default` ``)."""
    return bool(_ESCAPED_IDENTIFIER.fullmatch(text))


def is_valid_identifier(text: str) -> bool:
    """
    Check if text is usable as an identifier token.

    Plain identifiers must not be reserved words; backtick-escaped ones may.
    Contextual keywords such as `open` are ordinary identifiers here.
    A lone underscore is a wildcard, not an identifier.

    Args:
        text: Token text to check

    Returns:
        True if text is a valid identifier
    """
    if not text or text == "_":
        return False

    if is_escaped_identifier(text):
        return True

    return bool(_PLAIN_IDENTIFIER.fullmatch(text)) and not is_reserved_word(text)


def unescape_identifier(name: str) -> str:
    """Strip surrounding backticks from an escaped identifier."""
    if is_escaped_identifier(name):
        return name[1:-1]
    return name
