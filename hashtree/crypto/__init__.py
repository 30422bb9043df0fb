"""
Digest primitives for hashtree.
"""
from .hashing import (
    DEFAULT_ALGORITHM,
    Hasher,
    get_hasher,
    hash_concat,
    sha256,
    sha512,
    to_hex,
)

__all__ = [
    "DEFAULT_ALGORITHM",
    "Hasher",
    "sha512",
    "sha256",
    "get_hasher",
    "hash_concat",
    "to_hex",
]
