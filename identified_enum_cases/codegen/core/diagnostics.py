"""
Diagnostics reported by macros through the expansion context.

Diagnostics are values handed to the host's sink, never raised.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .syntax import AttributeNode


class DiagnosticSeverity(Enum):
    """Severity of a diagnostic."""

    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


@dataclass(frozen=True)
class MessageID:
    """Stable identifier of a diagnostic message."""

    domain: str
    id: str

    def __str__(self) -> str:
        return f"{self.domain}.{self.id}"


class DiagnosticKind(Enum):
    """Failures of the identified-cases macro."""

    MUST_BE_ENUM = "mustBeEnum"
    MUST_HAVE_CASES = "mustHaveCases"

    @property
    def message(self) -> str:
        if self is DiagnosticKind.MUST_BE_ENUM:
            return "`@IdentifiedEnumCasesMacro` can only be applied to an `enum`"
        return (
            "`@IdentifiedEnumCasesMacro` can only be applied to an `enum` "
            "with `case` statements"
        )

    @property
    def diagnostic_id(self) -> MessageID:
        return MessageID(domain="IdentifiedEnumCasesMacro", id=self.value)

    @property
    def severity(self) -> DiagnosticSeverity:
        return DiagnosticSeverity.ERROR


@dataclass(frozen=True)
class Diagnostic:
    """A message attached to a syntax node."""

    kind: DiagnosticKind
    node: Optional[AttributeNode] = None

    @property
    def message(self) -> str:
        return self.kind.message

    @property
    def severity(self) -> DiagnosticSeverity:
        return self.kind.severity

    @property
    def diagnostic_id(self) -> MessageID:
        return self.kind.diagnostic_id

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "id": str(self.diagnostic_id),
            "severity": self.severity.value,
            "message": self.message,
            "node": str(self.node) if self.node is not None else None,
        }

    def __str__(self) -> str:
        location = f"{self.node}: " if self.node is not None else ""
        return f"{location}{self.severity.value}: {self.message}"
