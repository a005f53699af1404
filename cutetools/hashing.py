"""Message digests of text, and comparison with an expected digest."""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from enum import IntEnum
from typing import Any

from Crypto.Hash import keccak


class HashType(IntEnum):
    """Supported digest algorithms, in the order they are offered."""

    MD5 = 0
    SHA1 = 1
    SHA256 = 2
    SHA512 = 3
    SHA3_256 = 4
    SHA3_512 = 5
    KECCAK256 = 6
    KECCAK512 = 7
    BLAKE2B256 = 8
    BLAKE2B512 = 9
    BLAKE2S256 = 10

    @property
    def label(self) -> str:
        """Display name of the algorithm."""
        return _LABELS[self]

    @property
    def digest_size(self) -> int:
        """Length of the digest in bytes."""
        return _new_hasher(self).digest_size

    @classmethod
    def from_label(cls, label: str) -> HashType:
        """The algorithm whose display name is ``label``."""
        for member, name in _LABELS.items():
            if name == label:
                return member
        raise ValueError(f"unknown hash type: {label!r}")


_LABELS: dict[HashType, str] = {
    HashType.MD5: "MD5",
    HashType.SHA1: "SHA1",
    HashType.SHA256: "SHA256",
    HashType.SHA512: "SHA512",
    HashType.SHA3_256: "SHA3-256",
    HashType.SHA3_512: "SHA3-512",
    HashType.KECCAK256: "KECCAK256",
    HashType.KECCAK512: "KECCAK512",
    HashType.BLAKE2B256: "BLAKE2b256",
    HashType.BLAKE2B512: "BLAKE2b512",
    HashType.BLAKE2S256: "BLAKE2s256",
}

_FACTORIES: dict[HashType, Callable[[], Any]] = {
    HashType.MD5: hashlib.md5,
    HashType.SHA1: hashlib.sha1,
    HashType.SHA256: hashlib.sha256,
    HashType.SHA512: hashlib.sha512,
    HashType.SHA3_256: hashlib.sha3_256,
    HashType.SHA3_512: hashlib.sha3_512,
    HashType.KECCAK256: lambda: keccak.new(digest_bits=256),
    HashType.KECCAK512: lambda: keccak.new(digest_bits=512),
    HashType.BLAKE2B256: lambda: hashlib.blake2b(digest_size=32),
    HashType.BLAKE2B512: lambda: hashlib.blake2b(digest_size=64),
    HashType.BLAKE2S256: lambda: hashlib.blake2s(digest_size=32),
}


def _new_hasher(hash_type: HashType | int) -> Any:
    return _FACTORIES[HashType(hash_type)]()


def _to_latin1(text: str) -> bytes:
    """Latin-1 bytes of ``text``; every other UTF-16 code unit becomes '?'."""
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


def compute_hash(text: str | bytes, hash_type: HashType | int = HashType.MD5) -> str:
    """Lower-case hex digest of ``text`` taken as Latin-1 bytes."""
    data = text if isinstance(text, bytes) else _to_latin1(text)
    hasher = _new_hasher(hash_type)
    hasher.update(data)
    return hasher.hexdigest()


def matches(text: str | bytes, hash_type: HashType | int, expected: str) -> bool | None:
    """Whether ``expected`` equals the digest exactly; None when nothing is expected."""
    if not expected:
        return None
    return compute_hash(text, hash_type) == expected