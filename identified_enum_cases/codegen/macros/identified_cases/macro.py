"""
The ``@IdentifiedEnumCasesMacro`` member macro.

Attached to an enum, adds a string-backed ``ID`` enum mirroring its cases
and an ``id`` property mapping every case to its identifier::

    @IdentifiedEnumCasesMacro("public")
    enum Color { case red, green }

expands inside ``Color`` to::

    public enum ID: String, Equatable, CaseIterable {
      case red
      case green
    }

    public var id: ID {
      switch self {
      case .red: .red
      case .green: .green
      }
    }
"""

from pathlib import Path
from typing import Dict, List, Optional

from ....logging_config import get_logger
from ...core.config import GeneratorConfig, Visibility
from ...core.diagnostics import Diagnostic, DiagnosticKind
from ...core.generator import ExpansionContext, GeneratedDeclaration, MemberMacro
from ...core.syntax import AttributeNode, DeclGroup
from .extractor import CaseExtractor
from .synthesizer import BUILTIN_TEMPLATES, DeclarationSynthesizer

logger = get_logger(__name__)


class IdentifiedEnumCasesMacro(MemberMacro):
    """Member macro generating case identifiers for an enum."""

    MACRO_NAME = "IdentifiedEnumCasesMacro"
    ALIASES = ["IdentifiedEnumCases"]

    def __init__(self, config: Optional[GeneratorConfig] = None):
        super().__init__(config)
        self.extractor = CaseExtractor()
        self.synthesizer = DeclarationSynthesizer(self.template_engine, self.config)

    @property
    def macro_name(self) -> str:
        return self.MACRO_NAME

    def get_template_directory(self) -> Optional[Path]:
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    def get_builtin_templates(self) -> Dict[str, str]:
        return dict(BUILTIN_TEMPLATES)

    def expansion(
        self,
        node: AttributeNode,
        declaration: DeclGroup,
        context: ExpansionContext,
    ) -> List[GeneratedDeclaration]:
        if not declaration.is_enum:
            context.diagnose(Diagnostic(DiagnosticKind.MUST_BE_ENUM, node))
            return []

        case_names = self.extractor.extract_names(declaration)
        if not case_names:
            context.diagnose(Diagnostic(DiagnosticKind.MUST_HAVE_CASES, node))
            return []

        visibility = self.resolve_visibility(node)
        identifier_type, accessor = self.synthesizer.synthesize(case_names, visibility)
        return [identifier_type, accessor]

    def resolve_visibility(self, node: AttributeNode) -> Optional[Visibility]:
        """
        Pick the qualifier for the generated declarations.

        The first argument token naming a visibility wins. Anything else,
        including no argument at all, falls back to the configured default
        (no qualifier unless configured).
        """
        visibility = Visibility.from_tokens(t.text for t in node.argument_tokens())
        if visibility is None:
            if node.argument_tokens():
                logger.debug("No visibility recognized in %s, using default", node)
            visibility = self.config.visibility
        return visibility
