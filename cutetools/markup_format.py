"""Reindenting well-formed HTML/XML markup."""

from __future__ import annotations

import re
from xml.dom import Node, minidom
from xml.parsers.expat import ExpatError

_DECLARATION = re.compile(r"\A\s*(<\?xml\b[^?]*\?>)")


class MarkupError(ValueError):
    """Raised when the markup cannot be parsed."""


def _escape_text(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_attr(text: str) -> str:
    return _escape_text(text).replace('"', "&quot;")


def _children(node: Node) -> list[Node]:
    return [
        child
        for child in node.childNodes
        if not (child.nodeType == Node.TEXT_NODE and not child.data.strip())
    ]


def _start_tag(element: Node) -> str:
    attrs = "".join(
        f' {name}="{_escape_attr(value)}"' for name, value in element.attributes.items()
    )
    return f"<{element.tagName}{attrs}"


def _write(node: Node, depth: int, indent: int, out: list[str]) -> None:
    pad = " " * (indent * depth)
    kind = node.nodeType
    if kind == Node.ELEMENT_NODE:
        children = _children(node)
        start = _start_tag(node)
        if not children:
            out.append(f"{pad}{start}/>\n")
        elif all(child.nodeType == Node.TEXT_NODE for child in children):
            text = "".join(_escape_text(child.data) for child in children)
            out.append(f"{pad}{start}>{text}</{node.tagName}>\n")
        else:
            out.append(f"{pad}{start}>\n")
            for child in children:
                _write(child, depth + 1, indent, out)
            out.append(f"{pad}</{node.tagName}>\n")
    elif kind == Node.TEXT_NODE:
        out.append(f"{pad}{_escape_text(node.data)}\n")
    elif kind == Node.CDATA_SECTION_NODE:
        out.append(f"{pad}<![CDATA[{node.data}]]>\n")
    elif kind == Node.COMMENT_NODE:
        out.append(f"{pad}<!--{node.data}-->\n")
    elif kind == Node.PROCESSING_INSTRUCTION_NODE:
        out.append(f"{pad}<?{node.target} {node.data}?>\n")
    elif kind == Node.DOCUMENT_TYPE_NODE:
        ident = ""
        if node.publicId:
            ident = f' PUBLIC "{node.publicId}" "{node.systemId or ""}"'
        elif node.systemId:
            ident = f' SYSTEM "{node.systemId}"'
        out.append(f"{pad}<!DOCTYPE {node.name}{ident}>\n")


def format_markup(text: str, indent: int = 4) -> str:
    """Return ``text`` reindented with ``indent`` spaces per nesting level."""
    if indent < 0:
        raise ValueError("indent must not be negative")
    try:
        document = minidom.parseString(text.encode("utf-8"))
    except ExpatError as exc:
        raise MarkupError(str(exc)) from exc
    out: list[str] = []
    declaration = _DECLARATION.match(text)
    if declaration:
        out.append(declaration.group(1) + "\n")
    for child in document.childNodes:
        _write(child, 0, indent, out)
    document.unlink()
    return "".join(out)