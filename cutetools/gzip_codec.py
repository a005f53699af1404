"""Gzip compression of text, carried around as base64 strings."""

from __future__ import annotations

import base64
import string
import zlib
from pathlib import Path

from cutetools.recent import PathArg

_GZIP_WBITS = 15 + 16
_CHUNK_SIZE = 16384
_B64_ALPHABET = frozenset(string.ascii_letters + string.digits + "+/")


def compress_bytes(data: bytes) -> bytes:
    """Gzip ``data`` at the default compression level."""
    compressor = zlib.compressobj(
        zlib.Z_DEFAULT_COMPRESSION, zlib.DEFLATED, _GZIP_WBITS, 8, zlib.Z_DEFAULT_STRATEGY
    )
    return compressor.compress(data) + compressor.flush(zlib.Z_FINISH)


def decompress_bytes(data: bytes) -> bytes:
    """Inflate the first gzip member of ``data``.

    Empty input gives empty output and a truncated stream gives what could be
    inflated; corrupt data raises ValueError.
    """
    if not data:
        return b""
    decompressor = zlib.decompressobj(_GZIP_WBITS)
    try:
        return decompressor.decompress(data)
    except zlib.error as exc:
        raise ValueError(f"invalid gzip data: {exc}") from exc


def _lenient_b64decode(encoded: str | bytes) -> bytes:
    """Decode base64, skipping characters outside the alphabet and padding."""
    if isinstance(encoded, bytes):
        encoded = encoded.decode("latin-1")
    cleaned = "".join(ch for ch in encoded if ch in _B64_ALPHABET)
    if len(cleaned) % 4 == 1:
        cleaned = cleaned[:-1]
    cleaned += "=" * (-len(cleaned) % 4)
    return base64.b64decode(cleaned)


def compress(text: str) -> str:
    """Gzip the UTF-8 bytes of ``text`` and return them as base64."""
    return base64.b64encode(compress_bytes(text.encode("utf-8"))).decode("ascii")


def decompress(encoded: str | bytes) -> str:
    """Decode base64 gzip data and return the inflated bytes as UTF-8 text."""
    return decompress_bytes(_lenient_b64decode(encoded)).decode("utf-8", errors="replace")


def read_file_base64(path: PathArg) -> str:
    """The raw bytes of the file at ``path``, as base64."""
    return base64.b64encode(Path(path).read_bytes()).decode("ascii")


def write_base64_file(encoded: str | bytes, path: PathArg) -> str:
    """Write the bytes that ``encoded`` stands for to ``path`` and return the path."""
    target = str(path)
    Path(target).write_bytes(_lenient_b64decode(encoded))
    return target