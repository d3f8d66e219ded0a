"""
Member macro expansion.

Expands macros attached to already-parsed Swift declarations into new
member declarations.
"""

from typing import Any, Dict, Optional, Union

from .registry import (
    MacroPlugin,
    MacroRegistry,
    RegistryError,
    get_macro,
    get_macro_info,
    get_registry,
    is_macro_supported,
    list_supported_macros,
    register_macro,
)
from .core.generator import (
    CollectingContext,
    ExpansionContext,
    ExpansionResult,
    GeneratedDeclaration,
    GeneratorError,
    MemberMacro,
    expand_declaration,
)
from .core.syntax import (
    AttributeNode,
    DeclGroup,
    ExpansionRequest,
    string_literal_tokens,
)
from .core.diagnostics import Diagnostic, DiagnosticKind
from .core.config import GeneratorConfig, Visibility, load_config

DEFAULT_MACRO = "IdentifiedEnumCasesMacro"


def expand_request(
    request: ExpansionRequest,
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str]] = None,
) -> ExpansionResult:
    """
    Expand the macro named by the request's attribute.

    Args:
        request: Attribute and declaration, e.g. from ``utils.load_expansion_request``
        config: Macro configuration as GeneratorConfig, dict, or file path

    Returns:
        ExpansionResult with declarations or diagnostics
    """
    macro = get_macro(request.attribute.name, config)
    return expand_declaration(macro, request)


def expand(
    declaration: DeclGroup,
    visibility: Optional[Union[Visibility, str]] = None,
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str]] = None,
) -> ExpansionResult:
    """
    Expand ``@IdentifiedEnumCasesMacro`` on a declaration.

    Args:
        declaration: The annotated declaration
        visibility: Optional argument of the attribute ("public", "private", "internal")
        config: Macro configuration

    Returns:
        ExpansionResult with declarations or diagnostics
    """
    if isinstance(visibility, Visibility):
        visibility = visibility.value

    argument = None if visibility is None else string_literal_tokens(visibility)
    attribute = AttributeNode(name=DEFAULT_MACRO, argument=argument)
    return expand_request(ExpansionRequest(attribute, declaration), config)


__version__ = "0.1.0"

__all__ = [
    "MacroPlugin",
    "MacroRegistry",
    "RegistryError",
    "MemberMacro",
    "ExpansionContext",
    "CollectingContext",
    "ExpansionResult",
    "GeneratedDeclaration",
    "GeneratorError",
    "Diagnostic",
    "DiagnosticKind",
    "GeneratorConfig",
    "Visibility",
    "DEFAULT_MACRO",
    "expand",
    "expand_request",
    "expand_declaration",
    "get_macro",
    "get_macro_info",
    "get_registry",
    "is_macro_supported",
    "list_supported_macros",
    "register_macro",
    "load_config",
]
