import io
import json

import pytest

from identified_enum_cases.cli import main

from .helpers import COLOR_ACCESSOR, COLOR_ID

COLOR_REQUEST = {
    "attribute": {"name": "IdentifiedEnumCasesMacro"},
    "declaration": {
        "kind": "enum",
        "name": "Color",
        "members": [
            {"case": ["red", "green"]},
            {"case": ["blue"]},
            {"other": "var hex: String { \"\" }"},
        ],
    },
}


@pytest.fixture
def write_request(tmp_path):
    def write(data, name="request.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return write


def test_expand_prints_declarations(write_request, capsys):
    code = main(["expand", write_request(COLOR_REQUEST)])

    assert code == 0
    assert capsys.readouterr().out == f"{COLOR_ID}\n\n{COLOR_ACCESSOR}\n"


def test_expand_with_visibility_flag(write_request, capsys):
    code = main(["expand", "--visibility", "public", write_request(COLOR_REQUEST)])

    assert code == 0
    assert capsys.readouterr().out == f"public {COLOR_ID}\n\npublic {COLOR_ACCESSOR}\n"


def test_expand_json_format(write_request, capsys):
    request = {**COLOR_REQUEST, "attribute": {"name": "IdentifiedEnumCases", "argument": "private"}}

    code = main(["expand", "--format", "json", write_request(request)])

    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["success"] is True
    assert [d["kind"] for d in payload["declarations"]] == ["identifier_type", "accessor"]
    assert payload["declarations"][0]["text"] == f"private {COLOR_ID}"
    assert payload["declarations"][1]["cases"] == ["red", "green", "blue"]


def test_expand_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(COLOR_REQUEST)))

    assert main(["expand", "--stdin"]) == 0
    assert capsys.readouterr().out.startswith("enum ID: String")


def test_expand_non_enum_reports_diagnostic(write_request, capsys):
    request = {"declaration": {"kind": "struct", "name": "Point"}}

    code = main(["expand", write_request(request)])

    assert code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "mustBeEnum" in captured.err
    assert "can only be applied to an `enum`" in captured.err


def test_expand_enum_without_cases_reports_diagnostic(write_request, capsys):
    request = {"declaration": {"kind": "enum", "name": "Never", "members": []}}

    assert main(["expand", write_request(request)]) == 1
    assert "mustHaveCases" in capsys.readouterr().err


def test_expand_writes_output_file(write_request, tmp_path, capsys):
    output = tmp_path / "Color+ID.swift"

    code = main(["expand", write_request(COLOR_REQUEST), "--output", str(output)])

    assert code == 0
    assert output.read_text(encoding="utf-8") == f"{COLOR_ID}\n\n{COLOR_ACCESSOR}\n"


def test_expand_with_config_file(write_request, tmp_path, capsys):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"visibility": "internal", "indent_size": 4}))

    code = main(["expand", "--config", str(config), write_request(COLOR_REQUEST)])

    assert code == 0
    out = capsys.readouterr().out
    assert out.startswith("internal enum ID: String, Equatable, CaseIterable {\n    case red\n")


def test_expand_with_mistyped_config_value(write_request, tmp_path, capsys):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"indent_size": "2"}))

    code = main(["expand", "--config", str(config), write_request(COLOR_REQUEST)])

    assert code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid indent_size" in captured.err


def test_expand_verbose_still_prints_code(write_request, capsys):
    assert main(["expand", "--verbose", write_request(COLOR_REQUEST)]) == 0
    assert capsys.readouterr().out == f"{COLOR_ID}\n\n{COLOR_ACCESSOR}\n"


def test_missing_file(tmp_path, capsys):
    assert main(["expand", str(tmp_path / "absent.json")]) == 1
    assert "not found" in capsys.readouterr().err


def test_invalid_syntax_tree(write_request, capsys):
    assert main(["expand", write_request({"declaration": {"kind": "module"}})]) == 1
    assert "Invalid syntax tree" in capsys.readouterr().err


def test_unknown_macro(write_request, capsys):
    request = {**COLOR_REQUEST, "attribute": "SomethingElse"}
    assert main(["expand", write_request(request)]) == 1
    assert "No macro registered" in capsys.readouterr().err


def test_expand_requires_input(capsys):
    assert main(["expand"]) == 1


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_list_and_info(capsys):
    assert main(["list"]) == 0
    assert "IdentifiedEnumCasesMacro" in capsys.readouterr().out

    assert main(["info", "IdentifiedEnumCases"]) == 0
    assert "IdentifiedEnumCasesMacro" in capsys.readouterr().out
