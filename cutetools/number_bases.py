"""Conversion of one integer between binary, decimal, octal, hex and characters."""

from __future__ import annotations

import string
from dataclasses import dataclass, replace

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_DIGITS = string.digits + string.ascii_lowercase


@dataclass(frozen=True)
class NumberBases:
    """One value shown in every supported representation."""

    binary: str
    decimal: str
    octal: str
    hexadecimal: str
    ascii: str
    utf8: str


def parse_int(text: str, base: int) -> int:
    """Parse a signed 32-bit integer; anything invalid or out of range gives 0."""
    if not 2 <= base <= 36:
        raise ValueError("base must be between 2 and 36")
    body = text.strip()
    sign = 1
    if body[:1] in ("+", "-"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    if base == 16 and body[:2].lower() == "0x":
        body = body[2:]
    allowed = _DIGITS[:base]
    if not body or any(ch not in allowed for ch in body.lower()):
        return 0
    value = sign * int(body, base)
    if not _INT_MIN <= value <= _INT_MAX:
        return 0
    return value


def _to_base(value: int, base: int) -> str:
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    value = abs(value)
    digits = []
    while value:
        value, rem = divmod(value, base)
        digits.append(_DIGITS[rem])
    return sign + "".join(reversed(digits))


def _first_unit_cell(text: str) -> int:
    """Low byte of the first UTF-16 code unit of ``text``."""
    if not text:
        raise ValueError("text is empty")
    code = ord(text[0])
    if code > 0xFFFF:
        code = 0xD800 + ((code - 0x10000) >> 10)
    return code & 0xFF


def from_value(value: int) -> NumberBases:
    """Every representation of ``value``."""
    return NumberBases(
        binary=_to_base(value, 2),
        decimal=_to_base(value, 10),
        octal=_to_base(value, 8),
        hexadecimal=_to_base(value, 16),
        ascii=chr(value & 0xFF),
        utf8=chr(value & 0xFFFF),
    )


def from_binary(text: str) -> NumberBases:
    return replace(from_value(parse_int(text, 2)), binary=text)


def from_decimal(text: str) -> NumberBases:
    return replace(from_value(parse_int(text, 10)), decimal=text)


def from_octal(text: str) -> NumberBases:
    return replace(from_value(parse_int(text, 8)), octal=text)


def from_hexadecimal(text: str) -> NumberBases:
    return replace(from_value(parse_int(text, 16)), hexadecimal=text)


def from_ascii(text: str) -> NumberBases:
    """Representations of the first character's byte; raises on empty text."""
    return replace(from_value(_first_unit_cell(text)), ascii=text)


def from_utf8(text: str) -> NumberBases:
    """Representations of the first character's byte; raises on empty text."""
    return replace(from_value(_first_unit_cell(text)), utf8=text)