import pytest

from identified_enum_cases.codegen.core.naming import (
    is_escaped_identifier,
    is_reserved_word,
    is_valid_identifier,
    unescape_identifier,
)


@pytest.mark.parametrize(
    "text",
    ["red", "_hidden", "camelCase", "x1", "`default`", "caf\u00e9", "\u65e5\u672c", "e\u0301", "\U0001d49c"],
)
def test_valid_identifiers(text):
    assert is_valid_identifier(text)


@pytest.mark.parametrize("text", ["", "_", "1st", "default", "self", "a-b", "a b", "`a", "red\n"])
def test_invalid_identifiers(text):
    assert not is_valid_identifier(text)


@pytest.mark.parametrize("text", ["open", "borrowing", "consuming", "nonisolated", "await", "get"])
def test_contextual_keywords_are_identifiers(text):
    assert not is_reserved_word(text)
    assert is_valid_identifier(text)


@pytest.mark.parametrize(
    "text",
    ["a\u00d7b", "a\u00f7b", "a\u2192b", "x\u2026", "a\u2014b", "\u2192", "\u0301x", "a\u00b1"],
)
def test_operator_characters_are_rejected(text):
    assert not is_valid_identifier(text)


def test_unescape():
    assert is_escaped_identifier("`case`")
    assert unescape_identifier("`case`") == "case"
    assert unescape_identifier("plain") == "plain"
