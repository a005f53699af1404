import json

import pytest

from cutetools.json_format import JsonFormatError, format_json


def test_pinned_layout_with_sorted_keys():
    assert (
        format_json('{"b":1,"a":[true,null]}')
        == '{\n    "a": [\n        true,\n        null\n    ],\n    "b": 1\n}\n'
    )


def test_empty_object():
    assert format_json("  {  }  ") == "{\n}\n"


def test_empty_nested_array():
    assert format_json('{"a":[]}') == '{\n    "a": [\n    ]\n}\n'


@pytest.mark.parametrize(
    "text",
    [
        '{"name": "x", "list": [1, 2.5, -3, {"k": false}], "nested": {"z": null, "y": "q"}}',
        "[1, [2, [3, []]], {}]",
        '{"esc": "a\\nb\\t\\"c\\" \\\\ \\u0001 \\/"}',
        '[-0.25, 1e-7, 123456789012]',
    ],
)
def test_round_trip_preserves_data(text):
    assert json.loads(format_json(text)) == json.loads(text)


@pytest.mark.parametrize(
    "text",
    ['{"b": [1, {"d": 2, "c": 3}], "a": "x"}', "[[], {}, [[1]]]", '{"k": 1.5}'],
)
def test_formatting_is_idempotent(text):
    once = format_json(text)
    assert format_json(once) == once


def test_keys_come_out_sorted():
    out = format_json('{"zeta": 1, "alpha": 2, "mid": 3}')
    keys = list(json.loads(out))
    assert keys == sorted(keys)


def test_duplicate_keys_keep_last_value():
    assert json.loads(format_json('{"a": 1, "a": 2}')) == {"a": 2}


def test_non_latin1_characters_become_question_marks():
    assert format_json('["\u4e2d"]') == format_json('["?"]')


def test_surrogate_pair_escape_decodes():
    assert json.loads(format_json('["\\ud83d\\ude00"]')) == ["\U0001f600"]


def test_integer_beyond_int64_becomes_double():
    out = format_json("[12345678901234567890]")
    assert json.loads(out) == [float(12345678901234567890)]


def test_whole_double_keeps_value():
    assert json.loads(format_json("[2.0, 1.50]")) == [2, 1.5]


def test_output_ends_with_newline_and_closing_bracket():
    out = format_json("[1]")
    assert out.endswith("]\n")
    assert out.startswith("[\n")


def test_nesting_at_limit_is_accepted():
    out = format_json("[" * 1024 + "]" * 1024)
    assert out.count("[") == 1024
    assert out.count("]") == 1024


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "42",
        '"text"',
        "true",
        "{",
        "[",
        "[1,]",
        "[1 2]",
        '{"a" 1}',
        '{"a": 1,}',
        '{"a": 1 "b": 2}',
        "{a: 1}",
        "[tru]",
        '["abc',
        '["\\x"]',
        '["\\u12"]',
        "[1e]",
        "[-]",
        "[1e999]",
        "[1] x",
        "[\u00e9]",
        '["\u00e9"]',
        "[" * 1025 + "]" * 1025,
    ],
)
def test_invalid_documents_raise(text):
    with pytest.raises(JsonFormatError) as info:
        format_json(text)
    assert 0 <= info.value.offset <= len(text.encode("utf-8"))


def test_error_is_a_value_error_with_message():
    with pytest.raises(ValueError) as info:
        format_json("[1,]")
    assert isinstance(info.value, JsonFormatError)
    assert str(info.value) == info.value.message