"""
Case extraction for enum declarations.

Walks an enum's member block and yields its case names in source order.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from ....logging_config import get_logger
from ...core.naming import is_valid_identifier
from ...core.syntax import (
    DeclGroup,
    EnumCaseElement,
    SyntaxKind,
    TokenKind,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class Case:
    """A case name extracted from an enum."""

    name: str


class CaseExtractor:
    """Extracts case names from a declaration's member block."""

    def extract(self, declaration: DeclGroup) -> List[Case]:
        """
        Extract the declaration's cases in source order.

        Only direct ``case`` members are considered; nested types and other
        members are not entered. Elements without a leading identifier token
        are skipped.

        Args:
            declaration: Declaration already known to be an enum

        Returns:
            Ordered list of cases, possibly empty
        """
        cases = []
        for element in self._iter_elements(declaration):
            name = self._case_name(element)
            if name is None:
                logger.debug(
                    "Skipping case element without identifier in %s: %r",
                    declaration.name,
                    element,
                )
                continue
            cases.append(Case(name))
        return cases

    def extract_names(self, declaration: DeclGroup) -> List[str]:
        """Extract only the case names."""
        return [case.name for case in self.extract(declaration)]

    def _iter_elements(self, declaration: DeclGroup) -> Iterator[EnumCaseElement]:
        for member in declaration.members:
            if member.kind is not SyntaxKind.ENUM_CASE_DECL:
                continue
            yield from member.elements

    def _case_name(self, element: EnumCaseElement) -> Optional[str]:
        token = element.first_token()
        if token is None or token.kind is not TokenKind.IDENTIFIER:
            return None
        if not is_valid_identifier(token.text):
            return None
        return token.text


def extract_case_names(declaration: DeclGroup) -> List[str]:
    """Convenience wrapper around :class:`CaseExtractor`."""
    return CaseExtractor().extract_names(declaration)
