"""Builders for syntax trees used across the tests."""

from identified_enum_cases.codegen.core.syntax import (
    AttributeNode,
    DeclGroup,
    DeclKind,
    EnumCaseDecl,
    EnumCaseElement,
    Token,
)


def case_decl(*names):
    return EnumCaseDecl(elements=tuple(EnumCaseElement.named(n) for n in names))


def enum_decl(*members, name="Color"):
    return DeclGroup(kind=DeclKind.ENUM, name=name, members=tuple(members))


def attribute(*argument):
    """Attribute with the given argument token texts; no argument clause if empty."""
    tokens = tuple(Token.classify(text) for text in argument) or None
    return AttributeNode(name="IdentifiedEnumCasesMacro", argument=tokens)


COLOR_ID = (
    "enum ID: String, Equatable, CaseIterable {\n"
    "  case red\n"
    "  case green\n"
    "  case blue\n"
    "}"
)

COLOR_ACCESSOR = (
    "var id: ID {\n"
    "  switch self {\n"
    "  case .red: .red\n"
    "  case .green: .green\n"
    "  case .blue: .blue\n"
    "  }\n"
    "}"
)
