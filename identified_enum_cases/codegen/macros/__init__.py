"""
Member macros provided by this package.

``PLUGIN`` lists every macro; the host registers it explicitly at startup.
"""

from ..registry import MacroPlugin
from .identified_cases import IdentifiedEnumCasesMacro

PLUGIN = MacroPlugin(providing_macros=[IdentifiedEnumCasesMacro])

__all__ = ["PLUGIN", "IdentifiedEnumCasesMacro"]
