"""Reformatting of JSON documents with sorted keys and four-space indentation."""

from __future__ import annotations

import math
import string
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Union

_NESTING_LIMIT = 1024
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_WHITESPACE = " \t\n\r"
_HEX = set(string.hexdigits)

_UNESCAPE = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_ESCAPE = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_BRACKETS = {dict: ("{", "}"), list: ("[", "]")}


class JsonFormatError(ValueError):
    """Raised when the text is not a JSON object or array."""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(message)
        self.message = message
        self.offset = offset


@dataclass
class _Frame:
    container: Union[list, dict]
    key: str = field(default="")


def _is_digit(ch: str) -> bool:
    return len(ch) == 1 and "0" <= ch <= "9"


class _Parser:
    """Iterative JSON parser that accepts only an object or array at top level."""

    def __init__(self, text: str) -> None:
        self.s = text
        self.n = len(text)
        self.i = 0
        self.depth = 0

    def fail(self, message: str) -> None:
        raise JsonFormatError(message, self.i)

    def peek(self) -> str:
        return self.s[self.i] if self.i < self.n else ""

    def eat_space(self) -> bool:
        while self.i < self.n and self.s[self.i] in _WHITESPACE:
            self.i += 1
        return self.i < self.n

    def next_token(self) -> str:
        if not self.eat_space():
            return ""
        ch = self.s[self.i]
        self.i += 1
        return ch

    def parse(self) -> Any:
        token = self.next_token()
        if token not in ("[", "{"):
            self.fail("illegal value")
        stack: list[_Frame] = []
        expecting = self._begin(token, stack)
        while True:
            if expecting:
                ch = self.s[self.i]
                self.i += 1
                if ch in "[{":
                    expecting = self._begin(ch, stack)
                    continue
                value = self._scalar(ch)
            else:
                value = stack.pop().container
                self.depth -= 1
                if not stack:
                    break
            expecting = self._store(stack[-1], value)
        if self.eat_space():
            self.fail("garbage at the end of the document")
        return value

    def _begin(self, token: str, stack: list[_Frame]) -> bool:
        self.depth += 1
        if self.depth > _NESTING_LIMIT:
            self.fail("too deeply nested document")
        if token == "[":
            stack.append(_Frame([]))
            if not self.eat_space():
                self.fail("unterminated array")
            if self.s[self.i] == "]":
                self.i += 1
                return False
            return True
        frame = _Frame({})
        stack.append(frame)
        return self._member_or_end(self.next_token(), frame)

    def _member_or_end(self, token: str, frame: _Frame) -> bool:
        if token == "}":
            return False
        if token != '"':
            self.fail("unterminated object")
        frame.key = self._string()
        if self.next_token() != ":":
            self.fail("missing name separator")
        if not self.eat_space():
            self.fail("unterminated object")
        return True

    def _store(self, frame: _Frame, value: Any) -> bool:
        container = frame.container
        if isinstance(container, list):
            container.append(value)
            token = self.next_token()
            if token == "]":
                return False
            if token == ",":
                if not self.eat_space():
                    self.fail("unterminated array")
                return True
            if not self.eat_space():
                self.fail("unterminated array")
            self.fail("missing value separator")
        container[frame.key] = value
        token = self.next_token()
        if token == ",":
            token = self.next_token()
            if token == "}":
                self.fail("object is missing after a comma")
            return self._member_or_end(token, frame)
        if token == "}":
            return False
        self.fail("unterminated object")
        return False

    def _scalar(self, ch: str) -> Any:
        if ch == '"':
            return self._string()
        for word, value in (("true", True), ("false", False), ("null", None)):
            if ch == word[0]:
                rest = word[1:]
                if not self.s.startswith(rest, self.i):
                    self.fail("illegal value")
                self.i += len(rest)
                return value
        self.i -= 1
        if ch == "-" or _is_digit(ch):
            return self._number()
        self.fail("illegal value")
        return None

    def _string(self) -> str:
        chars: list[str] = []
        while True:
            if self.i >= self.n:
                self.fail("unterminated string")
            ch = self.s[self.i]
            self.i += 1
            if ch == '"':
                return "".join(chars)
            if ch == "\\":
                chars.append(self._escape())
            elif "\udc80" <= ch <= "\udcff":
                self.i -= 1
                self.fail("invalid UTF8 string")
            else:
                chars.append(ch)

    def _escape(self) -> str:
        if self.i >= self.n:
            self.fail("invalid escape sequence")
        ch = self.s[self.i]
        self.i += 1
        if ch in _UNESCAPE:
            return _UNESCAPE[ch]
        if ch != "u":
            self.fail("invalid escape sequence")
        code = self._hex4()
        if 0xD800 <= code <= 0xDBFF and self.s.startswith("\\u", self.i):
            saved = self.i
            self.i += 2
            low = self._hex4()
            if 0xDC00 <= low <= 0xDFFF:
                return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00))
            self.i = saved
        return chr(code)

    def _hex4(self) -> int:
        digits = self.s[self.i : self.i + 4]
        if len(digits) < 4 or not set(digits) <= _HEX:
            self.fail("invalid escape sequence")
        self.i += 4
        return int(digits, 16)

    def _number(self) -> Union[int, float]:
        start = self.i
        is_int = True
        if self.peek() == "-":
            self.i += 1
        if self.peek() == "0":
            self.i += 1
        else:
            while _is_digit(self.peek()):
                self.i += 1
        if self.peek() == ".":
            self.i += 1
            while _is_digit(self.peek()):
                is_int = is_int and self.s[self.i] == "0"
                self.i += 1
        if self.peek() in ("e", "E"):
            is_int = False
            self.i += 1
            if self.peek() in ("+", "-"):
                self.i += 1
            while _is_digit(self.peek()):
                self.i += 1
        if self.i >= self.n:
            self.fail("invalid termination by number")
        number = self.s[start : self.i]
        if is_int:
            try:
                value = int(number)
            except ValueError:
                pass
            else:
                if _INT64_MIN <= value <= _INT64_MAX:
                    return value
        try:
            result = float(number)
        except ValueError:
            result = math.inf
        if not math.isfinite(result):
            self.fail("illegal number")
        return result


def _to_latin1(text: str) -> bytes:
    out = bytearray()
    for ch in text:
        code = ord(ch)
        if code <= 0xFF:
            out.append(code)
        elif code > 0xFFFF:
            out += b"??"
        else:
            out.append(0x3F)
    return bytes(out)


def _escape_char(ch: str) -> str:
    if ch in _ESCAPE:
        return _ESCAPE[ch]
    if ch < " ":
        return f"\\u{ord(ch):04x}"
    return ch


def _quote(text: str) -> str:
    return '"' + "".join(_escape_char(ch) for ch in text) + '"'


def _format_double(value: float) -> str:
    """Shortest round-tripping form, choosing the shorter of plain and exponent notation."""
    if not math.isfinite(value):
        return "null"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    decpt = len(digit_tuple) + exponent
    digits = "".join(map(str, digit_tuple)).rstrip("0") or "0"

    if decpt <= 0:
        plain = "0." + "0" * (-decpt) + digits
    elif decpt >= len(digits):
        plain = digits + "0" * (decpt - len(digits))
    else:
        plain = digits[:decpt] + "." + digits[decpt:]

    mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    power = decpt - 1
    scientific = f"{mantissa}e{'-' if power < 0 else '+'}{abs(power):02d}"

    return sign + (plain if len(plain) <= len(scientific) else scientific)


def _scalar_text(value: Any) -> str:
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, int):
        return str(value)
    return _format_double(value)


def _utf16_key(item: tuple[str, Any]) -> bytes:
    return item[0].encode("utf-16-be", errors="surrogatepass")


def _entries(container: Union[list, dict]) -> list[tuple[Any, Any]]:
    if isinstance(container, dict):
        return sorted(container.items(), key=_utf16_key)
    return [(None, value) for value in container]


def _dump(root: Union[list, dict]) -> str:
    out: list[str] = []
    opener, closer = _BRACKETS[type(root)]
    out.append(opener + "\n")
    stack: list[list[Any]] = [[_entries(root), 0, 1, closer]]
    while stack:
        frame = stack[-1]
        entries, index, indent, closer = frame
        if index == len(entries):
            stack.pop()
            if not stack:
                out.append(closer + "\n")
            else:
                parent = stack[-1]
                out.append(" " * (4 * (indent - 1)) + closer)
                out.append(",\n" if parent[1] < len(parent[0]) else "\n")
            continue
        key, value = entries[index]
        frame[1] = index + 1
        out.append(" " * (4 * indent))
        if key is not None:
            out.append(_quote(key) + ": ")
        if isinstance(value, (list, dict)):
            child_opener, child_closer = _BRACKETS[type(value)]
            out.append(child_opener + "\n")
            stack.append([_entries(value), 0, indent + 1, child_closer])
        else:
            out.append(_scalar_text(value))
            out.append(",\n" if frame[1] < len(entries) else "\n")
    return "".join(out)


def format_json(text: str) -> str:
    """Reformat a JSON object or array with sorted keys and four-space indentation.

    The text is taken as Latin-1, so characters outside it become '?'.
    """
    data = _to_latin1(text).decode("utf-8", errors="surrogateescape")
    return _dump(_Parser(data).parse())