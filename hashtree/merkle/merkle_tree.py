"""
Merkle Tree Variants and Hash Composition
Immutable binary Merkle trees and their per-node digests.

A tree is one of a closed set of three shapes:
- Empty: a missing subtree, digest is b"" (never passed to a hasher)
- Leaf(item): digest = hasher(encoder(item))
- Node(left, right): digest composed from the children

Composition Rules (applied in order):
1. left is Empty  -> digest(right)
2. right is Empty -> digest(left)
3. otherwise      -> hasher(digest(left) + digest(right))

Rules 1 and 2 let a lone subtree's digest pass upward unchanged. The
position of that subtree is therefore not bound into the root, unlike
schemes that always hash both sides or tag node depth.

Digests are computed on first access and cached on the node. Trees are
frozen, so a cached digest never goes stale. If the hasher or encoder
raises, nothing is cached and the exception reaches the caller as is.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Iterator

from hashtree.crypto.hashing import Hasher, hash_concat, sha512, to_hex
from hashtree.merkle.hashable import Encoder, canonical_bytes


# Digest of the Empty tree: a sentinel, not a hash output
EMPTY_DIGEST: bytes = b""


class MerkleTree:
    """
    Common base of Empty, Leaf and Node.

    Dispatch over the three shapes happens here, in one place, rather
    than through per-class overrides.
    """

    def digest(self) -> bytes:
        """
        Return this tree's digest, computing it at most once per node.

        Returns:
            b"" for Empty, otherwise the output of the tree's hasher.
        """
        if isinstance(self, Empty):
            return EMPTY_DIGEST
        if isinstance(self, (Leaf, Node)):
            return self._digest
        raise TypeError(f"Not a Merkle tree shape: {type(self).__name__}")

    def is_empty(self) -> bool:
        """True only for the Empty tree."""
        return isinstance(self, Empty)

    def hex(self) -> str:
        """Digest as a 0x-prefixed hex string."""
        return to_hex(self.digest())


@dataclass(frozen=True)
class Empty(MerkleTree):
    """A missing subtree. Only produced by building from zero items."""


@dataclass(frozen=True)
class Leaf(MerkleTree):
    """
    A single item.

    Attributes:
        item: The leaf item
        hasher: Digest primitive applied to the item's canonical bytes
        encoder: Converts the item to its canonical bytes
    """
    item: Any
    hasher: Hasher = field(default=sha512, compare=False, repr=False)
    encoder: Encoder = field(default=canonical_bytes, compare=False, repr=False)

    @cached_property
    def _digest(self) -> bytes:
        return self.hasher(self.encoder(self.item))


@dataclass(frozen=True)
class Node(MerkleTree):
    """
    An internal node owning exactly two subtrees.

    Attributes:
        left: Left subtree
        right: Right subtree
        hasher: Digest primitive applied to the concatenated child digests
    """
    left: MerkleTree
    right: MerkleTree
    hasher: Hasher = field(default=sha512, compare=False, repr=False)

    @cached_property
    def _digest(self) -> bytes:
        # Usually only the right subtree can be empty
        if self.left.is_empty():
            return self.right.digest()
        if self.right.is_empty():
            return self.left.digest()
        return hash_concat(
            self.left.digest(), self.right.digest(), hasher=self.hasher
        )


def leaf_count(tree: MerkleTree) -> int:
    """Number of Leaf nodes in the tree."""
    if isinstance(tree, Node):
        return leaf_count(tree.left) + leaf_count(tree.right)
    if isinstance(tree, Leaf):
        return 1
    return 0


def tree_height(tree: MerkleTree) -> int:
    """
    Number of edges on the longest root-to-leaf path.

    Empty and single-leaf trees have height 0. A tree built from n >= 1
    items has height ceil(log2(n)).
    """
    if isinstance(tree, Node):
        return 1 + max(tree_height(tree.left), tree_height(tree.right))
    return 0


def iter_leaves(tree: MerkleTree) -> Iterator[Any]:
    """Yield leaf items from left to right."""
    if isinstance(tree, Node):
        yield from iter_leaves(tree.left)
        yield from iter_leaves(tree.right)
    elif isinstance(tree, Leaf):
        yield tree.item


__all__ = [
    "EMPTY_DIGEST",
    "MerkleTree",
    "Empty",
    "Leaf",
    "Node",
    "leaf_count",
    "tree_height",
    "iter_leaves",
]
