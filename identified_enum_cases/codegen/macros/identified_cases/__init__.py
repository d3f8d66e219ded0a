"""
Identified enum cases macro.

Generates a nested ``ID`` enum and an ``id`` accessor for enum declarations.
"""

from .extractor import Case, CaseExtractor, extract_case_names
from .macro import IdentifiedEnumCasesMacro
from .synthesizer import DeclarationSynthesizer

__all__ = [
    "Case",
    "CaseExtractor",
    "DeclarationSynthesizer",
    "IdentifiedEnumCasesMacro",
    "extract_case_names",
]
