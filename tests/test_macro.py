import pytest

from identified_enum_cases import expand
from identified_enum_cases.codegen import DEFAULT_MACRO, expand_request
from identified_enum_cases.codegen.core.config import GeneratorConfig, Visibility
from identified_enum_cases.codegen.core.diagnostics import (
    DiagnosticKind,
    DiagnosticSeverity,
)
from identified_enum_cases.codegen.core.generator import expand_declaration
from identified_enum_cases.codegen.core.syntax import (
    AttributeNode,
    DeclGroup,
    DeclKind,
    EnumCaseDecl,
    EnumCaseElement,
    ExpansionRequest,
    OtherMember,
    Token,
    TokenKind,
    declaration_from_dict,
    string_literal_tokens,
)
from identified_enum_cases.codegen.macros.identified_cases import IdentifiedEnumCasesMacro

from .helpers import COLOR_ACCESSOR, COLOR_ID, attribute, case_decl, enum_decl


def test_end_to_end_without_visibility(macro, color_enum, context):
    declarations = macro.expansion(attribute(), color_enum, context)

    assert [d.text for d in declarations] == [COLOR_ID, COLOR_ACCESSOR]
    assert context.diagnostics == []


def test_end_to_end_with_public(macro, color_enum, context):
    declarations = macro.expansion(attribute('"', "public", '"'), color_enum, context)

    assert [d.text for d in declarations] == [f"public {COLOR_ID}", f"public {COLOR_ACCESSOR}"]
    assert context.diagnostics == []


@pytest.mark.parametrize(
    "argument, expected",
    [
        ((), None),
        (("public",), Visibility.PUBLIC),
        (("private",), Visibility.PRIVATE),
        (("internal",), Visibility.INTERNAL),
        (('"', "internal", '"'), Visibility.INTERNAL),
        ((".", "private"), Visibility.PRIVATE),
    ],
)
def test_visibility_is_read_from_argument_tokens(macro, color_enum, context, argument, expected):
    identifier_type, accessor = macro.expansion(attribute(*argument), color_enum, context)

    assert identifier_type.modifier is expected
    assert accessor.modifier is expected
    prefix = f"{expected.value} " if expected else ""
    assert identifier_type.text.startswith(f"{prefix}enum ID")
    assert accessor.text.startswith(f"{prefix}var id")


@pytest.mark.parametrize("argument", [("open",), ("fileprivate",), ("PUBLIC",), ('"', "nope", '"')])
def test_unrecognized_visibility_means_no_qualifier(macro, color_enum, context, argument):
    declarations = macro.expansion(attribute(*argument), color_enum, context)

    assert [d.text for d in declarations] == [COLOR_ID, COLOR_ACCESSOR]
    assert context.diagnostics == []


def test_string_literal_argument_sets_visibility(macro, color_enum, context):
    node = AttributeNode("IdentifiedEnumCasesMacro", string_literal_tokens("private"))

    identifier_type, accessor = macro.expansion(node, color_enum, context)

    assert identifier_type.text == f"private {COLOR_ID}"
    assert accessor.text == f"private {COLOR_ACCESSOR}"


def test_first_recognized_token_wins(macro, color_enum, context):
    identifier_type, _ = macro.expansion(
        attribute("private", ",", "public"), color_enum, context
    )
    assert identifier_type.modifier is Visibility.PRIVATE


def test_configured_default_visibility(color_enum, context):
    macro = IdentifiedEnumCasesMacro(GeneratorConfig(visibility=Visibility.INTERNAL))

    assert macro.expansion(attribute(), color_enum, context)[0].modifier is Visibility.INTERNAL
    assert macro.expansion(attribute("public"), color_enum, context)[0].modifier is Visibility.PUBLIC


def test_non_enum_is_rejected(macro, color_struct, context):
    node = attribute()
    declarations = macro.expansion(node, color_struct, context)

    assert declarations == []
    assert len(context.diagnostics) == 1
    diagnostic = context.diagnostics[0]
    assert diagnostic.kind is DiagnosticKind.MUST_BE_ENUM
    assert diagnostic.severity is DiagnosticSeverity.ERROR
    assert diagnostic.node is node
    assert diagnostic.message == "`@IdentifiedEnumCasesMacro` can only be applied to an `enum`"
    assert str(diagnostic.diagnostic_id) == "IdentifiedEnumCasesMacro.mustBeEnum"


@pytest.mark.parametrize("kind", [k for k in DeclKind if k is not DeclKind.ENUM])
def test_every_non_enum_kind_is_rejected(macro, context, kind):
    decl = DeclGroup(kind=kind, name="Thing", members=(case_decl("looks_like_a_case"),))

    assert macro.expansion(attribute(), decl, context) == []
    assert [d.kind for d in context.diagnostics] == [DiagnosticKind.MUST_BE_ENUM]


def test_enum_without_cases_is_rejected(macro, context):
    decl = enum_decl(OtherMember("var x: Int { 0 }"))

    assert macro.expansion(attribute("public"), decl, context) == []
    assert [d.kind for d in context.diagnostics] == [DiagnosticKind.MUST_HAVE_CASES]
    assert context.diagnostics[0].message == (
        "`@IdentifiedEnumCasesMacro` can only be applied to an `enum` with `case` statements"
    )
    assert context.has_errors


def test_enum_whose_elements_all_lack_identifiers_is_rejected(macro, context):
    decl = enum_decl(
        EnumCaseDecl(elements=(EnumCaseElement(tokens=(Token(TokenKind.KEYWORD, "case"),)),))
    )

    assert macro.expansion(attribute(), decl, context) == []
    assert [d.kind for d in context.diagnostics] == [DiagnosticKind.MUST_HAVE_CASES]


def test_identifier_type_cases_equal_source_cases(macro, context):
    names = ["a", "b", "c", "d", "e"]
    decl = enum_decl(case_decl(*names[:2]), OtherMember("func f() {}"), case_decl(*names[2:]))

    identifier_type, accessor = macro.expansion(attribute(), decl, context)

    assert list(identifier_type.cases) == names
    assert list(accessor.cases) == names


def test_repeated_expansion_is_byte_identical(color_enum, context):
    first = IdentifiedEnumCasesMacro().expansion(attribute("public"), color_enum, context)
    second = IdentifiedEnumCasesMacro().expansion(attribute("public"), color_enum, context)

    assert [d.text for d in first] == [d.text for d in second]


def test_expand_declaration_success(macro, color_enum):
    result = expand_declaration(macro, ExpansionRequest(attribute(), color_enum, source="color.json"))

    assert result.success
    assert result.code == f"{COLOR_ID}\n\n{COLOR_ACCESSOR}"
    assert result.metadata["macro"] == "IdentifiedEnumCasesMacro"
    assert result.metadata["declaration"] == "Color"
    assert result.metadata["declaration_count"] == 2
    assert result.metadata["source"] == "color.json"


def test_expand_declaration_reports_diagnostic_without_declarations(macro, color_struct):
    result = expand_declaration(macro, ExpansionRequest(attribute(), color_struct))

    assert not result.success
    assert result.declarations == []
    assert [d.kind for d in result.diagnostics] == [DiagnosticKind.MUST_BE_ENUM]
    assert result.to_dict()["diagnostics"][0]["id"] == "IdentifiedEnumCasesMacro.mustBeEnum"


def test_expand_convenience(color_enum):
    result = expand(color_enum, visibility="public")

    assert result.success
    assert [d.text for d in result.declarations] == [
        f"public {COLOR_ID}",
        f"public {COLOR_ACCESSOR}",
    ]


def test_expand_accepts_visibility_enum(color_enum):
    result = expand(color_enum, visibility=Visibility.PRIVATE)
    assert all(d.text.startswith("private ") for d in result.declarations)


def test_expand_request_resolves_alias(color_enum):
    request = ExpansionRequest(
        attribute=AttributeNode(name="IdentifiedEnumCases"),
        declaration=color_enum,
    )
    result = expand_request(request)

    assert result.success
    assert result.metadata["macro"] == DEFAULT_MACRO


def test_contextual_keyword_cases_keep_accessor_exhaustive(macro, context):
    decl = declaration_from_dict(
        {"kind": "enum", "name": "Door", "members": [{"case": ["open", "closed"]}]}
    )

    identifier_type, accessor = macro.expansion(attribute(), decl, context)

    assert identifier_type.cases == accessor.cases == ("open", "closed")
    assert identifier_type.text == (
        "enum ID: String, Equatable, CaseIterable {\n  case open\n  case closed\n}"
    )
    assert accessor.text == (
        "var id: ID {\n  switch self {\n  case .open: .open\n  case .closed: .closed\n  }\n}"
    )
