"""
Merkle Hasher Convenience Wrapper
Binds a hasher, encoder and worker count once for repeated use.

These are thin wrappers around the functions in builder.py.
"""
from __future__ import annotations

from typing import Any, Iterable, Optional

from hashtree.config.runtime import HashTreeConfig, get_default_config
from hashtree.crypto.hashing import Hasher, sha512, to_hex
from hashtree.merkle.builder import build_merkle_tree, merkle_hash
from hashtree.merkle.hashable import Encoder, canonical_bytes
from hashtree.merkle.merkle_tree import MerkleTree


class MerkleHasher:
    """
    Computes Merkle trees and root digests with fixed settings.

    Example:
        >>> hasher = MerkleHasher()
        >>> hasher.root([]) == b""
        True
        >>> len(hasher.root(["a", "b", "c"]))
        64
    """

    def __init__(
        self,
        hasher: Hasher = sha512,
        encoder: Encoder = canonical_bytes,
        max_workers: int = 1,
    ) -> None:
        self.hasher = hasher
        self.encoder = encoder
        self.max_workers = max_workers

    @classmethod
    def from_config(cls, config: Optional[HashTreeConfig] = None) -> "MerkleHasher":
        """
        Create a MerkleHasher from configuration.

        Args:
            config: Settings to use; the default config when omitted

        Raises:
            UnsupportedAlgorithmException: If the configured algorithm is
                unavailable.
        """
        config = config or get_default_config()
        return cls(hasher=config.hasher(), max_workers=config.max_workers)

    def tree(self, items: Iterable[Any]) -> MerkleTree:
        """Build the Merkle tree for ``items``."""
        return build_merkle_tree(items, hasher=self.hasher, encoder=self.encoder)

    def root(self, items: Iterable[Any]) -> bytes:
        """Root digest of ``items`` (b"" for no items)."""
        return merkle_hash(
            items,
            hasher=self.hasher,
            encoder=self.encoder,
            max_workers=self.max_workers,
        )

    def root_hex(self, items: Iterable[Any]) -> str:
        """Root digest of ``items`` as 0x-prefixed hex."""
        return to_hex(self.root(items))

    def __repr__(self) -> str:
        name = getattr(self.hasher, "__name__", repr(self.hasher))
        return f"MerkleHasher(hasher={name}, max_workers={self.max_workers})"


__all__ = [
    "MerkleHasher",
]
