"""Escaping and unescaping of the HTML special characters."""

from __future__ import annotations

_ENCODE_STEPS = (
    ("&", "&amp;"),
    (">", "&gt;"),
    ("<", "&lt;"),
    ('"', "&quot;"),
    ("'", "&#x27;"),
)

_DECODE_STEPS = (
    ("&gt;", ">"),
    ("&lt;", "<"),
    ("&quot;", '"'),
    ("&#x27;", "'"),
    ("&amp;", "&"),
)


def encode(text: str) -> str:
    """Replace ``& > < " '`` with their HTML entities."""
    for plain, entity in _ENCODE_STEPS:
        text = text.replace(plain, entity)
    return text


def decode(text: str) -> str:
    """Turn the entities produced by :func:`encode` back into characters."""
    for entity, plain in _DECODE_STEPS:
        text = text.replace(entity, plain)
    return text