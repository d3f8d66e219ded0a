import pytest

from identified_enum_cases.codegen.core.config import GeneratorConfig
from identified_enum_cases.codegen.core.generator import CollectingContext
from identified_enum_cases.codegen.core.syntax import DeclGroup, DeclKind, OtherMember
from identified_enum_cases.codegen.macros.identified_cases import IdentifiedEnumCasesMacro

from .helpers import case_decl, enum_decl


@pytest.fixture
def color_enum():
    """enum Color { case red, green; case blue; var hex: String }"""
    return enum_decl(
        case_decl("red", "green"),
        case_decl("blue"),
        OtherMember('var hex: String { "" }'),
    )


@pytest.fixture
def color_struct():
    return DeclGroup(
        kind=DeclKind.STRUCT,
        name="Color",
        members=(OtherMember("let red: Double"),),
    )


@pytest.fixture
def macro():
    return IdentifiedEnumCasesMacro(GeneratorConfig())


@pytest.fixture
def context():
    return CollectingContext()
