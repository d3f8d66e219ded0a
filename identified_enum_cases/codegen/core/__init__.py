"""
Core macro expansion components.

Provides base classes and utilities used by all member macros.
"""

from .generator import (
    MemberMacro,
    ExpansionContext,
    CollectingContext,
    ExpansionResult,
    GeneratedDeclaration,
    DeclarationKind,
    GeneratorError,
    expand_declaration,
)
from .syntax import (
    SyntaxKind,
    TokenKind,
    DeclKind,
    Token,
    EnumCaseElement,
    EnumCaseDecl,
    OtherMember,
    DeclGroup,
    AttributeNode,
    ExpansionRequest,
    SyntaxTreeError,
    declaration_from_dict,
    attribute_from_dict,
    string_literal_tokens,
    request_from_dict,
)
from .diagnostics import Diagnostic, DiagnosticKind, DiagnosticSeverity, MessageID
from .naming import is_valid_identifier, unescape_identifier
from .config import GeneratorConfig, ConfigManager, ConfigError, Visibility, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base macro interface
    "MemberMacro",
    "ExpansionContext",
    "CollectingContext",
    "ExpansionResult",
    "GeneratedDeclaration",
    "DeclarationKind",
    "GeneratorError",
    "expand_declaration",
    # Syntax tree - input data structures
    "SyntaxKind",
    "TokenKind",
    "DeclKind",
    "Token",
    "EnumCaseElement",
    "EnumCaseDecl",
    "OtherMember",
    "DeclGroup",
    "AttributeNode",
    "ExpansionRequest",
    "SyntaxTreeError",
    "declaration_from_dict",
    "attribute_from_dict",
    "string_literal_tokens",
    "request_from_dict",
    # Diagnostics
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSeverity",
    "MessageID",
    # Naming utilities
    "is_valid_identifier",
    "unescape_identifier",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "Visibility",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
