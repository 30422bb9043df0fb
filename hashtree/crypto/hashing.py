"""
Digest Primitives
Hash functions used at every level of a Merkle tree.

This module provides:
- SHA-512 (the default tree hasher) and SHA-256 over raw bytes
- get_hasher(): resolve any fixed-length hashlib algorithm by name
- hash_concat(): the internal node composition
- Hex encoding with 0x prefix

Reentrancy Notes:
- Every hasher returned here builds a fresh hashlib object per call, so a
  single hasher may be shared between threads
- All operations are deterministic
"""
from __future__ import annotations

import hashlib
from typing import Callable

from hashtree.schemas.errors import UnsupportedAlgorithmException


# A digest primitive: bytes in, fixed-length bytes out
Hasher = Callable[[bytes], bytes]

DEFAULT_ALGORITHM = "sha512"


def sha512(data: bytes) -> bytes:
    """
    Compute SHA-512 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        64-byte SHA-512 digest
    """
    return hashlib.sha512(data).digest()


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


_BUILTIN_HASHERS: dict[str, Hasher] = {
    "sha512": sha512,
    "sha256": sha256,
}


def get_hasher(name: str) -> Hasher:
    """
    Resolve a digest algorithm name to a Hasher.

    Args:
        name: Any hashlib algorithm name ("sha512", "sha3_256", "blake2b", ...).
              Matching is case-insensitive and ignores "-" (so "SHA-512" works).

    Returns:
        A callable computing that digest with fresh state per invocation.

    Raises:
        UnsupportedAlgorithmException: If the algorithm is not available in
            this interpreter, or is a variable-length XOF (shake_*).
    """
    normalized = name.strip().lower().replace("-", "")
    if normalized in _BUILTIN_HASHERS:
        return _BUILTIN_HASHERS[normalized]

    if normalized.startswith("shake"):
        raise UnsupportedAlgorithmException(
            f"Algorithm has no fixed digest length: {name}",
            algorithm=name,
        )

    available = {a.lower() for a in hashlib.algorithms_available}
    if normalized not in available:
        raise UnsupportedAlgorithmException(
            f"Unknown digest algorithm: {name}",
            algorithm=name,
            details={"available": sorted(available)},
        )

    def _hasher(data: bytes) -> bytes:
        return hashlib.new(normalized, data).digest()

    _hasher.__name__ = normalized
    return _hasher


def hash_concat(left: bytes, right: bytes, hasher: Hasher = sha512) -> bytes:
    """
    Hash the raw concatenation of two digests: hasher(left + right).

    No separator or length prefix is inserted between the two inputs.
    """
    return hasher(left + right)


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


__all__ = [
    "Hasher",
    "DEFAULT_ALGORITHM",
    "sha512",
    "sha256",
    "get_hasher",
    "hash_concat",
    "to_hex",
]
