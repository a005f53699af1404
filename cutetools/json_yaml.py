"""Conversion between JSON and YAML documents."""

from __future__ import annotations

import json
import math
import re
import sys
from typing import Any

import yaml
from yaml.nodes import MappingNode, Node, ScalarNode, SequenceNode

from cutetools.json_format import format_json

_NULL_TAG = "tag:yaml.org,2002:null"
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_EXACT_FLOAT_LIMIT = 2**53

_BOOL_WORDS: dict[str, bool] = {}
for _true, _false in (("y", "n"), ("yes", "no"), ("true", "false"), ("on", "off")):
    for _word, _value in ((_true, True), (_false, False)):
        for _variant in (_word, _word.upper(), _word.capitalize()):
            _BOOL_WORDS[_variant] = _value

_INT_RE = re.compile(r"([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)\s*\Z")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*\Z")
_INF_WORDS = (".inf", ".Inf", ".INF")
_NAN_WORDS = (".nan", ".NaN", ".NAN")


class ConversionError(ValueError):
    """Raised when a document cannot be parsed or converted."""


class _Dumper(yaml.SafeDumper):
    """Block-style dumper that writes null as '~'."""


def _represent_none(dumper: yaml.SafeDumper, _value: None) -> yaml.ScalarNode:
    return dumper.represent_scalar(_NULL_TAG, "~")


_Dumper.add_representer(type(None), _represent_none)


def json_value_to_yaml(value: Any) -> Any:
    """A decoded JSON value made ready for YAML output.

    Mappings get sorted keys and whole floats become integers.
    """
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer() and abs(value) < _EXACT_FLOAT_LIMIT:
            return int(value)
        return value
    if isinstance(value, dict):
        return {
            str(key): json_value_to_yaml(item)
            for key, item in sorted(value.items(), key=lambda pair: str(pair[0]))
        }
    if isinstance(value, (list, tuple)):
        return [json_value_to_yaml(item) for item in value]
    raise TypeError(f"not a JSON value: {type(value).__name__}")


def _reject_constant(name: str) -> Any:
    raise ConversionError(f"illegal value: {name}")


def json_to_yaml(text: str, indent: int = 4) -> str:
    """Convert a JSON object to block-style YAML; other top-level values give '{}'."""
    if not 2 <= indent <= 9:
        raise ValueError("indent must be between 2 and 9")
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ConversionError(str(exc)) from exc
    if not isinstance(data, dict):
        data = {}
    return yaml.dump(
        json_value_to_yaml(data),
        Dumper=_Dumper,
        indent=indent,
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=True,
        width=sys.maxsize,
    )


def _parse_int(text: str) -> int | None:
    match = _INT_RE.match(text)
    if not match:
        return None
    sign, body = match.groups()
    if body[:2].lower() == "0x":
        value = int(body[2:], 16)
    elif body.startswith("0"):
        value = int(body, 8)
    else:
        value = int(body, 10)
    if sign == "-":
        value = -value
    if not _INT32_MIN <= value <= _INT32_MAX:
        return None
    return value


def _parse_float(text: str) -> float | None:
    unsigned = text[1:] if text[:1] in ("+", "-") else text
    if unsigned in _INF_WORDS:
        return -math.inf if text.startswith("-") else math.inf
    if text in _NAN_WORDS:
        return math.nan
    if _FLOAT_RE.match(text):
        return float(text)
    return None


def _scalar_to_json(text: str) -> Any:
    if text in _BOOL_WORDS:
        return _BOOL_WORDS[text]
    integer = _parse_int(text)
    if integer is not None:
        return integer
    number = _parse_float(text)
    if number is not None:
        return number
    return text


def _key_text(node: Node) -> str:
    if not isinstance(node, ScalarNode):
        raise ConversionError("mapping keys must be scalars")
    if node.tag == _NULL_TAG:
        return "null"
    return node.value


def yaml_node_to_json(node: Node | None) -> Any:
    """The JSON value for a composed YAML node.

    Scalars are read as a boolean, a 32-bit integer, a float or a string,
    in that order, whatever their quoting; plain nulls become None.
    """
    if node is None:
        return None
    if isinstance(node, MappingNode):
        return {_key_text(key): yaml_node_to_json(value) for key, value in node.value}
    if isinstance(node, SequenceNode):
        return [yaml_node_to_json(item) for item in node.value]
    if isinstance(node, ScalarNode):
        if node.tag == _NULL_TAG:
            return None
        return _scalar_to_json(node.value)
    raise ConversionError(f"unsupported YAML node: {type(node).__name__}")


def _finite(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_finite(item) for item in value]
    return value


def yaml_to_json(text: str) -> str:
    """Convert the first YAML document to an indented JSON object.

    A document that is not a mapping gives an empty object.
    """
    try:
        root = next(iter(yaml.compose_all(text, Loader=yaml.SafeLoader)), None)
    except yaml.YAMLError as exc:
        raise ConversionError(str(exc)) from exc
    value = yaml_node_to_json(root)
    if not isinstance(value, dict):
        value = {}
    return format_json(json.dumps(_finite(value), ensure_ascii=True))