"""Command-line entry point for the text and file tools."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from pathlib import Path

from cutetools import gzip_codec, html_codec, number_bases
from cutetools.desktop_entry import load_desktop_entry, search_icons
from cutetools.hashing import HashType, compute_hash
from cutetools.image_convert import convert_image, supported_formats
from cutetools.json_format import format_json
from cutetools.json_yaml import json_to_yaml, yaml_to_json
from cutetools.lorem import LoremMode, generate
from cutetools.markup_format import format_markup

PROG = "cutetools"

_BASE_PARSERS = {
    "bin": number_bases.from_binary,
    "dec": number_bases.from_decimal,
    "oct": number_bases.from_octal,
    "hex": number_bases.from_hexadecimal,
    "ascii": number_bases.from_ascii,
    "utf8": number_bases.from_utf8,
}


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_bytes().decode("utf-8", errors="replace")


def _emit(text: str) -> None:
    if text and not text.endswith("\n"):
        text += "\n"
    sys.stdout.write(text)


def _cmd_hash(args: argparse.Namespace) -> int:
    digest = compute_hash(_read_input(args.input), HashType.from_label(args.type))
    _emit(digest)
    if args.check is not None and args.check != digest:
        return 1
    return 0


def _cmd_json_format(args: argparse.Namespace) -> int:
    _emit(format_json(_read_input(args.input)))
    return 0


def _cmd_markup_format(args: argparse.Namespace) -> int:
    _emit(format_markup(_read_input(args.input), args.indent))
    return 0


def _cmd_json2yaml(args: argparse.Namespace) -> int:
    _emit(json_to_yaml(_read_input(args.input), args.indent))
    return 0


def _cmd_yaml2json(args: argparse.Namespace) -> int:
    _emit(yaml_to_json(_read_input(args.input)))
    return 0


def _cmd_html_encode(args: argparse.Namespace) -> int:
    sys.stdout.write(html_codec.encode(_read_input(args.input)))
    return 0


def _cmd_html_decode(args: argparse.Namespace) -> int:
    sys.stdout.write(html_codec.decode(_read_input(args.input)))
    return 0


def _cmd_gzip(args: argparse.Namespace) -> int:
    _emit(gzip_codec.compress(_read_input(args.input)))
    return 0


def _cmd_gunzip(args: argparse.Namespace) -> int:
    sys.stdout.write(gzip_codec.decompress(_read_input(args.input)))
    return 0


def _cmd_lorem(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed) if args.seed is not None else None
    mode = LoremMode[args.mode.upper()]
    _emit(generate(args.count, mode, args.lorem, rng))
    return 0


def _cmd_bases(args: argparse.Namespace) -> int:
    result = _BASE_PARSERS[args.source](args.value)
    _emit(
        "\n".join(
            f"{name}: {getattr(result, name)}"
            for name in ("binary", "decimal", "octal", "hexadecimal", "ascii", "utf8")
        )
    )
    return 0


def _cmd_image_convert(args: argparse.Namespace) -> int:
    fmt = args.format or Path(args.target).suffix.lstrip(".")
    if not fmt:
        raise ValueError("no image format given and the target has no extension")
    _emit(f"Converted: {convert_image(args.source, args.target, fmt)}")
    return 0


def _cmd_image_formats(_args: argparse.Namespace) -> int:
    _emit("\n".join(supported_formats()))
    return 0


def _cmd_desktop_entry(args: argparse.Namespace) -> int:
    _emit(load_desktop_entry(args.path).render())
    return 0


def _cmd_desktop_icons(args: argparse.Namespace) -> int:
    _emit("\n".join(search_icons(args.dirs or None)))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description="Small text and file tools.")
    commands = parser.add_subparsers(dest="command", required=True)

    def add(name: str, handler, help_text: str, with_input: bool = True):
        sub = commands.add_parser(name, help=help_text)
        if with_input:
            sub.add_argument("input", nargs="?", default="-", help="file to read, '-' for stdin")
        sub.set_defaults(handler=handler)
        return sub

    sub = add("hash", _cmd_hash, "print the digest of the input")
    sub.add_argument("--type", default="MD5", choices=[t.label for t in HashType])
    sub.add_argument("--check", help="expected digest; exit with 1 when it differs")

    add("json-format", _cmd_json_format, "reformat a JSON document")

    sub = add("markup-format", _cmd_markup_format, "reindent HTML/XML markup")
    sub.add_argument("--indent", type=int, default=4)

    sub = add("json2yaml", _cmd_json2yaml, "convert a JSON object to YAML")
    sub.add_argument("--indent", type=int, default=4)

    add("yaml2json", _cmd_yaml2json, "convert a YAML mapping to JSON")
    add("html-encode", _cmd_html_encode, "escape HTML special characters")
    add("html-decode", _cmd_html_decode, "unescape HTML special characters")
    add("gzip", _cmd_gzip, "gzip text and print it as base64")
    add("gunzip", _cmd_gunzip, "inflate base64 gzip data")

    sub = add("lorem", _cmd_lorem, "generate placeholder text", with_input=False)
    sub.add_argument("--count", type=int, default=5)
    sub.add_argument("--mode", default="words", choices=[m.name.lower() for m in LoremMode])
    sub.add_argument("--lorem", action="store_true", help="begin with 'Lorem ipsum'")
    sub.add_argument("--seed", type=int)

    sub = add("bases", _cmd_bases, "show a number in several bases", with_input=False)
    sub.add_argument("value")
    sub.add_argument("--from", dest="source", default="dec", choices=list(_BASE_PARSERS))

    sub = add("image-convert", _cmd_image_convert, "convert an image file", with_input=False)
    sub.add_argument("source")
    sub.add_argument("target")
    sub.add_argument("--format")

    add("image-formats", _cmd_image_formats, "list writable image formats", with_input=False)

    sub = add("desktop-entry", _cmd_desktop_entry, "normalise a .desktop file", with_input=False)
    sub.add_argument("path")

    sub = add("desktop-icons", _cmd_desktop_icons, "list icons named by desktop files",
              with_input=False)
    sub.add_argument("dirs", nargs="*")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one tool and return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except (ValueError, OSError) as exc:
        print(f"{PROG}: error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())