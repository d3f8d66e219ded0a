"""
Declaration synthesis for the identified-cases macro.

Builds the nested ``ID`` enum and the ``id`` accessor from an ordered list
of case names. Both declarations come from the same list, so the accessor's
switch is always exhaustive over the identifier type.
"""

from typing import Any, Dict, Optional, Sequence, Tuple

from ....logging_config import get_logger
from ...core.config import GeneratorConfig, Visibility
from ...core.generator import DeclarationKind, GeneratedDeclaration, GeneratorError
from ...core.templates import TemplateEngine

logger = get_logger(__name__)

IDENTIFIER_TYPE_TEMPLATE = "identifier_type.swift.j2"
ACCESSOR_TEMPLATE = "accessor.swift.j2"

# Used when the template files are not installed alongside the package
BUILTIN_TEMPLATES = {
    IDENTIFIER_TYPE_TEMPLATE: (
        '{% if modifier %}{{ modifier }} {% endif %}enum {{ type_name }}: {{ inherited | join(", ") }} {\n'
        "{% for case in cases %}\n"
        "{{ indent }}case {{ case }}\n"
        "{% endfor %}\n"
        "}\n"
    ),
    ACCESSOR_TEMPLATE: (
        "{% if modifier %}{{ modifier }} {% endif %}var {{ accessor_name }}: {{ type_name }} {\n"
        "{{ indent }}switch self {\n"
        "{% for case in cases %}\n"
        "{{ indent }}case .{{ case }}: .{{ case }}\n"
        "{% endfor %}\n"
        '{{ indent ~ "}" }}\n'
        "}\n"
    ),
}


class DeclarationSynthesizer:
    """Renders the identifier type and accessor declarations."""

    def __init__(self, template_engine: TemplateEngine, config: Optional[GeneratorConfig] = None):
        self.template_engine = template_engine
        self.config = config or GeneratorConfig()

    def synthesize(
        self, case_names: Sequence[str], visibility: Optional[Visibility] = None
    ) -> Tuple[GeneratedDeclaration, GeneratedDeclaration]:
        """
        Synthesize the identifier type and the accessor.

        Args:
            case_names: Non-empty case names in declaration order
            visibility: Qualifier put in front of both declarations, or None

        Returns:
            (identifier type declaration, accessor declaration)

        Raises:
            GeneratorError: If case_names is empty
        """
        if not case_names:
            raise GeneratorError("Cannot synthesize an identifier type without cases")

        cases = tuple(case_names)
        context = self._build_context(cases, visibility)

        identifier_type = GeneratedDeclaration(
            kind=DeclarationKind.IDENTIFIER_TYPE,
            name=self.config.type_name,
            text=self.template_engine.render_template(IDENTIFIER_TYPE_TEMPLATE, context),
            cases=cases,
            modifier=visibility,
        )
        accessor = GeneratedDeclaration(
            kind=DeclarationKind.ACCESSOR,
            name=self.config.accessor_name,
            text=self.template_engine.render_template(ACCESSOR_TEMPLATE, context),
            cases=cases,
            modifier=visibility,
        )

        logger.debug(
            "Synthesized %s and %s for %d case(s), visibility=%s",
            identifier_type.name,
            accessor.name,
            len(cases),
            visibility.value if visibility else "none",
        )
        return identifier_type, accessor

    def _build_context(
        self, cases: Tuple[str, ...], visibility: Optional[Visibility]
    ) -> Dict[str, Any]:
        return {
            "modifier": visibility.value if visibility else "",
            "type_name": self.config.type_name,
            "accessor_name": self.config.accessor_name,
            "inherited": [self.config.raw_type, *self.config.conformances],
            "indent": self.config.indent,
            "cases": cases,
        }
