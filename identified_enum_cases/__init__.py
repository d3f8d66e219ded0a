"""
Identified enum cases.

Member macro that gives every case of a Swift enum a string-backed
identifier: a nested ``ID`` enum and an ``id`` accessor.
"""

from .codegen import (
    DEFAULT_MACRO,
    ExpansionResult,
    GeneratedDeclaration,
    GeneratorConfig,
    Visibility,
    __version__,
    expand,
    expand_request,
)

__all__ = [
    "DEFAULT_MACRO",
    "ExpansionResult",
    "GeneratedDeclaration",
    "GeneratorConfig",
    "Visibility",
    "__version__",
    "expand",
    "expand_request",
]
