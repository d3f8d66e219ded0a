"""
Base macro interface for all member macros.

Defines the contract every macro implements, the expansion context that
collects diagnostics, and the value types handed back to the host.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ...logging_config import get_logger
from .config import GeneratorConfig, Visibility
from .diagnostics import Diagnostic, DiagnosticSeverity
from .naming import unescape_identifier
from .syntax import AttributeNode, DeclGroup, ExpansionRequest
from .templates import TemplateEngine, TemplateError, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class DeclarationKind(Enum):
    """What a generated declaration is."""

    IDENTIFIER_TYPE = "identifier_type"
    ACCESSOR = "accessor"


@dataclass(frozen=True)
class GeneratedDeclaration:
    """A new member to be spliced into the annotated declaration's body."""

    kind: DeclarationKind
    name: str
    text: str
    cases: Tuple[str, ...] = ()
    modifier: Optional[Visibility] = None

    @property
    def raw_values(self) -> Tuple[str, ...]:
        """String raw values of the cases (the case name without backticks)."""
        return tuple(unescape_identifier(case) for case in self.cases)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "kind": self.kind.value,
            "name": self.name,
            "modifier": self.modifier.value if self.modifier else None,
            "cases": list(self.cases),
            "text": self.text,
        }

    def __str__(self) -> str:
        return self.text


class ExpansionContext(ABC):
    """Channel through which a macro reports diagnostics to the host."""

    @abstractmethod
    def diagnose(self, diagnostic: Diagnostic) -> None:
        """Report a diagnostic."""
        pass


class CollectingContext(ExpansionContext):
    """Expansion context that keeps every diagnostic it receives."""

    def __init__(self):
        self.diagnostics: List[Diagnostic] = []

    def diagnose(self, diagnostic: Diagnostic) -> None:
        logger.warning("%s", diagnostic)
        self.diagnostics.append(diagnostic)

    @property
    def has_errors(self) -> bool:
        return any(d.severity is DiagnosticSeverity.ERROR for d in self.diagnostics)


class MemberMacro(ABC):
    """Abstract base class for macros that add members to a declaration."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize macro with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this macro."""
        self._template_engine = create_template_engine(
            self.get_template_directory(), self.get_builtin_templates()
        )

    @property
    @abstractmethod
    def macro_name(self) -> str:
        """Return the attribute name the macro is spelled with."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this macro.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.
        """
        return None

    def get_builtin_templates(self) -> Dict[str, str]:
        """Return in-memory templates used when a template file is missing."""
        return {}

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this macro."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def expansion(
        self,
        node: AttributeNode,
        declaration: DeclGroup,
        context: ExpansionContext,
    ) -> List[GeneratedDeclaration]:
        """
        Expand the macro attached to a declaration.

        Args:
            node: The macro attribute
            declaration: The declaration the attribute is attached to
            context: Sink for diagnostics

        Returns:
            New member declarations, empty if a diagnostic was reported
        """
        pass

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class ExpansionResult:
    """Container for expansion results and metadata."""

    def __init__(
        self,
        declarations: List[GeneratedDeclaration] = None,
        diagnostics: List[Diagnostic] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize expansion result.

        Args:
            declarations: Generated member declarations
            diagnostics: Diagnostics reported during expansion
            metadata: Additional metadata about the expansion
        """
        self.declarations = declarations or []
        self.diagnostics = diagnostics or []
        self.metadata = metadata or {}
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @property
    def success(self) -> bool:
        return self.error_message is None and not self.diagnostics

    @property
    def code(self) -> str:
        """All generated declarations, separated by a blank line."""
        return "\n\n".join(d.text for d in self.declarations)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "success": self.success,
            "declarations": [d.to_dict() for d in self.declarations],
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "error": self.error_message,
            "metadata": self.metadata,
        }

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "ExpansionResult":
        """Create a failed expansion result."""
        result = cls()
        result.error_message = message
        result.exception = exception
        return result


def expand_declaration(macro: MemberMacro, request: ExpansionRequest) -> ExpansionResult:
    """
    Expand a macro on a declaration with error handling.

    Args:
        macro: Macro instance
        request: Attribute and declaration to expand

    Returns:
        ExpansionResult with declarations, diagnostics and metadata
    """
    context = CollectingContext()
    declaration = request.declaration

    try:
        declarations = macro.expansion(request.attribute, declaration, context)
    except (GeneratorError, TemplateError) as e:
        logger.error("Expansion of %s failed: %s", macro.macro_name, e, exc_info=True)
        return ExpansionResult.error(f"Expansion failed: {e}", exception=e)

    metadata = {
        "macro": macro.macro_name,
        "declaration": declaration.name,
        "declaration_kind": declaration.kind.value,
        "attribute": str(request.attribute),
        "declaration_count": len(declarations),
    }
    if request.source:
        metadata["source"] = request.source

    logger.info(
        "Expanded %s on %s: %d declaration(s), %d diagnostic(s)",
        request.attribute,
        declaration.name,
        len(declarations),
        len(context.diagnostics),
    )

    return ExpansionResult(declarations, context.diagnostics, metadata)
