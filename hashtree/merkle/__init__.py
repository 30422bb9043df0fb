"""
Merkle Tree Construction and Root Hashing

This package provides:
- Empty / Leaf / Node: immutable tree shapes with memoized digests
- build_merkle_tree: balanced tree from ordered items
- merkle_hash: root digest of ordered items
- canonical_bytes: default item encoding (bytes, UTF-8 text, canonical JSON)
- MerkleHasher: settings-bound convenience wrapper

Usage:
    from hashtree.merkle import build_merkle_tree, merkle_hash

    tree = build_merkle_tree(["a", "b", "c"])
    assert tree.digest() == merkle_hash(["a", "b", "c"])
"""
from .hashable import (
    BytesHashable,
    Encoder,
    canonical_bytes,
    utf8_bytes,
)
from .merkle_tree import (
    EMPTY_DIGEST,
    Empty,
    Leaf,
    MerkleTree,
    Node,
    iter_leaves,
    leaf_count,
    tree_height,
)
from .builder import (
    build_merkle_tree,
    merkle_hash,
    precompute_digests,
)
from .hasher import MerkleHasher


__all__ = [
    # Tree shapes
    "MerkleTree",
    "Empty",
    "Leaf",
    "Node",
    "EMPTY_DIGEST",
    # Construction and hashing
    "build_merkle_tree",
    "merkle_hash",
    "precompute_digests",
    # Shape inspection
    "leaf_count",
    "tree_height",
    "iter_leaves",
    # Item encoding
    "BytesHashable",
    "Encoder",
    "canonical_bytes",
    "utf8_bytes",
    # Convenience
    "MerkleHasher",
]
