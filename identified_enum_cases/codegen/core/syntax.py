"""
Syntax tree representation consumed by member macros.

The host hands over an already-parsed declaration; this module defines the
closed set of node variants a macro can see, plus converters from the JSON
form used by the command line and test fixtures.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Union

from .naming import is_reserved_word, is_valid_identifier


class SyntaxTreeError(Exception):
    """Exception raised for malformed serialized syntax trees."""

    pass


class SyntaxKind(Enum):
    """Kinds of member nodes found inside a declaration's member block."""

    ENUM_CASE_DECL = "enumCaseDecl"
    OTHER_MEMBER = "otherMember"


class TokenKind(Enum):
    """Lexical token kinds the engine distinguishes."""

    IDENTIFIER = "identifier"
    KEYWORD = "keyword"
    PUNCTUATION = "punctuation"
    STRING_SEGMENT = "stringSegment"
    INTEGER_LITERAL = "integerLiteral"
    UNKNOWN = "unknown"


class DeclKind(Enum):
    """Declaration groups a member macro can be attached to."""

    ENUM = "enum"
    STRUCT = "struct"
    CLASS = "class"
    ACTOR = "actor"
    PROTOCOL = "protocol"
    EXTENSION = "extension"


@dataclass(frozen=True)
class Token:
    """A single lexical token."""

    kind: TokenKind
    text: str

    @classmethod
    def classify(cls, text: str) -> "Token":
        """Build a token, guessing its kind from the text."""
        if is_valid_identifier(text):
            kind = TokenKind.IDENTIFIER
        elif is_reserved_word(text):
            kind = TokenKind.KEYWORD
        elif text.isdigit():
            kind = TokenKind.INTEGER_LITERAL
        elif text and not any(ch.isalnum() or ch == "_" for ch in text):
            kind = TokenKind.PUNCTUATION
        else:
            kind = TokenKind.UNKNOWN
        return cls(kind, text)


def string_literal_tokens(value: str) -> Tuple[Token, ...]:
    """Tokens of a string literal argument such as ``"public"``."""
    return (
        Token(TokenKind.PUNCTUATION, '"'),
        Token(TokenKind.STRING_SEGMENT, value),
        Token(TokenKind.PUNCTUATION, '"'),
    )


@dataclass(frozen=True)
class EnumCaseElement:
    """One element of a case declaration, e.g. ``circle(radius: Double)``."""

    tokens: Tuple[Token, ...] = ()

    # Kept for display only; never used as the identifier value
    associated_value: Optional[str] = None
    raw_value: Optional[str] = None

    @classmethod
    def named(
        cls,
        name: str,
        associated_value: Optional[str] = None,
        raw_value: Optional[str] = None,
    ) -> "EnumCaseElement":
        """Build an element whose leading token is ``name``."""
        return cls((Token.classify(name),), associated_value, raw_value)

    def first_token(self) -> Optional[Token]:
        """Return the leading token, or None if the element has none."""
        return self.tokens[0] if self.tokens else None


@dataclass(frozen=True)
class EnumCaseDecl:
    """A case-introducing member: ``case a, b(Int), c = "c"``."""

    elements: Tuple[EnumCaseElement, ...] = ()
    modifiers: Tuple[str, ...] = ()

    kind: ClassVar[SyntaxKind] = SyntaxKind.ENUM_CASE_DECL


@dataclass(frozen=True)
class OtherMember:
    """Any member that does not introduce cases (properties, methods, nested types)."""

    text: str = ""

    kind: ClassVar[SyntaxKind] = SyntaxKind.OTHER_MEMBER


Member = Union[EnumCaseDecl, OtherMember]


@dataclass(frozen=True)
class DeclGroup:
    """A type declaration with a member block."""

    kind: DeclKind
    name: str
    members: Tuple[Member, ...] = ()
    modifiers: Tuple[str, ...] = ()
    attributes: Tuple["AttributeNode", ...] = ()

    @property
    def is_enum(self) -> bool:
        return self.kind is DeclKind.ENUM


@dataclass(frozen=True)
class AttributeNode:
    """The macro attribute as written on the declaration, e.g. ``@Macro("public")``."""

    name: str
    argument: Optional[Tuple[Token, ...]] = None

    def argument_tokens(self) -> Tuple[Token, ...]:
        """Tokens of the argument clause, empty when there is none."""
        return self.argument or ()

    def __str__(self) -> str:
        if self.argument is None:
            return f"@{self.name}"
        return f"@{self.name}({''.join(t.text for t in self.argument)})"


@dataclass
class ExpansionRequest:
    """An attribute together with the declaration it is attached to."""

    attribute: AttributeNode
    declaration: DeclGroup
    source: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


# Converters from the JSON form


def token_from_dict(data: Union[str, Dict[str, Any]]) -> Token:
    """
    Convert a serialized token.

    Accepts either a bare string (kind is classified from its text) or
    an object with ``kind`` and ``text`` keys.
    """
    if isinstance(data, str):
        return Token.classify(data)

    if not isinstance(data, dict) or "text" not in data:
        raise SyntaxTreeError(f"Invalid token: {data!r}")

    try:
        kind = TokenKind(data.get("kind", TokenKind.IDENTIFIER.value))
    except ValueError as e:
        raise SyntaxTreeError(f"Unknown token kind: {data.get('kind')!r}") from e

    return Token(kind, str(data["text"]))


def element_from_dict(data: Union[str, Dict[str, Any]]) -> EnumCaseElement:
    """Convert a serialized case element (a name or an object)."""
    if isinstance(data, str):
        return EnumCaseElement.named(data)

    if not isinstance(data, dict):
        raise SyntaxTreeError(f"Invalid case element: {data!r}")

    if "tokens" in data:
        tokens = tuple(token_from_dict(t) for t in _as_list(data["tokens"], "tokens"))
    elif "name" in data:
        tokens = (token_from_dict(data["name"]),)
    else:
        tokens = ()

    return EnumCaseElement(
        tokens=tokens,
        associated_value=data.get("associated_value"),
        raw_value=data.get("raw_value"),
    )


def member_from_dict(data: Dict[str, Any]) -> Member:
    """
    Convert a serialized member.

    ``{"case": [...]}`` becomes an :class:`EnumCaseDecl`; ``{"other": "..."}``
    (or any other object) becomes an :class:`OtherMember`.
    """
    if not isinstance(data, dict):
        raise SyntaxTreeError(f"Invalid member: {data!r}")

    if "case" in data:
        elements = tuple(element_from_dict(e) for e in _as_list(data["case"], "case"))
        modifiers = tuple(_as_list(data.get("modifiers", []), "modifiers"))
        return EnumCaseDecl(elements=elements, modifiers=modifiers)

    return OtherMember(text=str(data.get("other", "")))


def declaration_from_dict(data: Dict[str, Any]) -> DeclGroup:
    """
    Convert a serialized declaration.

    Args:
        data: Object with ``kind``, ``name`` and optional ``members``,
            ``modifiers`` and ``attributes``

    Returns:
        DeclGroup instance

    Raises:
        SyntaxTreeError: If the object is malformed
    """
    if not isinstance(data, dict):
        raise SyntaxTreeError(f"Declaration must be an object, got {type(data).__name__}")

    try:
        kind = DeclKind(data.get("kind"))
    except ValueError as e:
        valid = ", ".join(k.value for k in DeclKind)
        raise SyntaxTreeError(
            f"Unknown declaration kind: {data.get('kind')!r} (expected one of: {valid})"
        ) from e

    members = tuple(member_from_dict(m) for m in _as_list(data.get("members", []), "members"))
    attributes = tuple(
        attribute_from_dict(a) for a in _as_list(data.get("attributes", []), "attributes")
    )

    return DeclGroup(
        kind=kind,
        name=str(data.get("name", "")),
        members=members,
        modifiers=tuple(_as_list(data.get("modifiers", []), "modifiers")),
        attributes=attributes,
    )


def attribute_from_dict(data: Union[str, Dict[str, Any]]) -> AttributeNode:
    """
    Convert a serialized attribute.

    ``"Name"`` is an attribute without arguments. In the object form,
    ``argument`` may be a single string, read as the string literal
    ``("public")``, or a list of tokens.
    """
    if isinstance(data, str):
        return AttributeNode(name=data.lstrip("@"))

    if not isinstance(data, dict) or "name" not in data:
        raise SyntaxTreeError(f"Invalid attribute: {data!r}")

    argument = data.get("argument")
    if argument is None:
        tokens = None
    elif isinstance(argument, str):
        tokens = string_literal_tokens(argument)
    else:
        tokens = tuple(token_from_dict(t) for t in _as_list(argument, "argument"))

    return AttributeNode(name=str(data["name"]).lstrip("@"), argument=tokens)


def request_from_dict(
    data: Dict[str, Any], default_attribute: Optional[str] = None
) -> ExpansionRequest:
    """
    Convert a serialized expansion request.

    The attribute is taken from ``attribute``, falling back to the first
    entry of the declaration's own ``attributes`` and then to
    ``default_attribute``.
    """
    if not isinstance(data, dict):
        raise SyntaxTreeError("Expansion request must be a JSON object")

    if "declaration" not in data:
        raise SyntaxTreeError("Expansion request has no 'declaration'")

    declaration = declaration_from_dict(data["declaration"])

    if "attribute" in data:
        attribute = attribute_from_dict(data["attribute"])
    elif declaration.attributes:
        attribute = declaration.attributes[0]
    elif default_attribute:
        attribute = AttributeNode(name=default_attribute)
    else:
        raise SyntaxTreeError("Expansion request has no 'attribute'")

    return ExpansionRequest(
        attribute=attribute,
        declaration=declaration,
        metadata=dict(data.get("metadata", {})),
    )


def _as_list(value: Any, what: str) -> List[Any]:
    if not isinstance(value, list):
        raise SyntaxTreeError(f"'{what}' must be a list, got {type(value).__name__}")
    return value
