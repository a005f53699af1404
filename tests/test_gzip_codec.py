import base64
import gzip

import pytest

from cutetools.gzip_codec import (
    compress,
    compress_bytes,
    decompress,
    decompress_bytes,
    read_file_base64,
    write_base64_file,
)


def test_compress_bytes_has_gzip_magic():
    assert compress_bytes(b"hello")[:2] == b"\x1f\x8b"


def test_compress_bytes_readable_by_stdlib():
    data = b"some text " * 100
    assert gzip.decompress(compress_bytes(data)) == data


def test_decompress_bytes_reads_stdlib_output():
    data = b"payload bytes"
    assert decompress_bytes(gzip.compress(data)) == data


def test_decompress_bytes_empty():
    assert decompress_bytes(b"") == b""


def test_decompress_bytes_corrupt_raises():
    with pytest.raises(ValueError):
        decompress_bytes(b"not gzip at all")


def test_decompress_bytes_truncated_gives_prefix():
    data = b"abcdefghij" * 50
    packed = compress_bytes(data)
    partial = decompress_bytes(packed[: len(packed) - 8])
    assert data.startswith(partial)


def test_decompress_ignores_trailing_member():
    packed = compress_bytes(b"first") + compress_bytes(b"second")
    assert decompress_bytes(packed) == b"first"


@pytest.mark.parametrize("text", ["", "hello", "zażółć gęślą jaźń", "line\nline\ttab"])
def test_text_round_trip(text):
    assert decompress(compress(text)) == text


def test_compress_is_base64():
    encoded = compress("hello")
    assert base64.b64decode(encoded)[:2] == b"\x1f\x8b"


def test_decompress_tolerates_whitespace_and_missing_padding():
    encoded = compress("a longer piece of text")
    messy = "\n".join(encoded[i : i + 10] for i in range(0, len(encoded), 10)).rstrip("=")
    assert decompress(messy) == "a longer piece of text"


def test_file_round_trip(tmp_path):
    source = tmp_path / "in.gz"
    source.write_bytes(compress_bytes(b"file contents"))
    encoded = read_file_base64(source)
    assert decompress(encoded) == "file contents"
    target = tmp_path / "out.gz"
    assert write_base64_file(encoded, target) == str(target)
    assert target.read_bytes() == source.read_bytes()


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file_base64(tmp_path / "missing")