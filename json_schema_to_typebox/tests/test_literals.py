from __future__ import annotations

import pytest

from json_schema_to_typebox.typebox.literals import (
    STRUCTURAL_KEYS,
    extract_options,
    format_literal_value,
    format_options,
    format_property_key,
    is_identifier,
)


@pytest.mark.parametrize("name", ["unquoted", "__underscores", "$", "_", "camelCase", "a1", "$ref"])
def test_identifier_safe_names_are_unquoted(name):
    assert format_property_key(name) == name


@pytest.mark.parametrize(
    "name, expected",
    [
        ("6", '"6"'),
        ("@prop", '"@prop"'),
        ("with-hyphen", '"with-hyphen"'),
        (" spaces ", '" spaces "'),
        ("1abc", '"1abc"'),
        ("a.b", '"a.b"'),
        ("", '""'),
        ("default", '"default"'),
        ("ünïcode", '"ünïcode"'),
        ("abc\n", '"abc\\n"'),
        ("\nabc", '"\\nabc"'),
    ],
)
def test_other_names_are_quoted(name, expected):
    assert format_property_key(name) == expected


def test_reserved_words_are_not_identifiers():
    assert not is_identifier("null")
    assert is_identifier("nullable")


def test_literal_values():
    assert format_literal_value("1") == '"1"'
    assert format_literal_value(1) == "1"
    assert format_literal_value(True) == "true"
    assert format_literal_value(2.5) == "2.5"


def test_extract_options_drops_structural_keys():
    schema = {key: 1 for key in STRUCTURAL_KEYS}
    schema.update({"$id": "X", "title": "T", "minimum": 0})
    assert extract_options(schema) == {"$id": "X", "title": "T", "minimum": 0}


def test_extract_options_keeps_key_order():
    schema = {"maximum": 90, "type": "number", "minimum": 18}
    assert list(extract_options(schema)) == ["maximum", "minimum"]


def test_format_options_is_compact_json():
    assert format_options({"$id": "X"}) == '{"$id":"X"}'
    assert format_options({"minimum": 18, "maximum": 90}) == '{"minimum":18,"maximum":90}'
    assert format_options({"description": "café"}) == '{"description":"café"}'


def test_trailing_newline_is_not_an_identifier():
    assert not is_identifier("abc\n")
