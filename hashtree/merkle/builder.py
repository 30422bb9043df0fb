"""
Merkle Tree Builder
Deterministic, balanced construction of a Merkle tree from ordered items.

Construction Rules:
1. Zero items: Empty
2. One item: Leaf(item)
3. n >= 2 items: Node(build(first ceil(n/2)), build(remaining floor(n/2)))

A balanced split of n >= 2 items never leaves a side empty, so Empty only
appears as the whole tree for an empty input. Item order is significant
and never changed here.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, Sequence

from hashtree.crypto.hashing import Hasher, sha512
from hashtree.merkle.hashable import Encoder, canonical_bytes
from hashtree.merkle.merkle_tree import (
    Empty,
    Leaf,
    MerkleTree,
    Node,
    leaf_count,
    tree_height,
)


logger = logging.getLogger(__name__)


def build_merkle_tree(
    items: Iterable[Any],
    hasher: Hasher = sha512,
    encoder: Encoder = canonical_bytes,
) -> MerkleTree:
    """
    Build a balanced Merkle tree from an ordered collection of items.

    Args:
        items: Leaf items in order. Any iterable; it is consumed once.
        hasher: Digest primitive used by every Leaf and Node of the tree
        encoder: Canonical byte encoding for items

    Returns:
        Empty, a single Leaf, or a Node whose left subtree holds the first
        ceil(n/2) items and whose right subtree holds the rest.

    Example:
        >>> tree = build_merkle_tree(["a", "b", "c"])
        >>> tree.left.right.item, tree.right.item
        ('b', 'c')
    """
    ordered: Sequence[Any] = items if isinstance(items, (list, tuple)) else list(items)

    def build(start: int, stop: int) -> MerkleTree:
        count = stop - start
        if count == 0:
            return Empty()
        if count == 1:
            return Leaf(ordered[start], hasher=hasher, encoder=encoder)
        mid = start + (count + 1) // 2
        return Node(build(start, mid), build(mid, stop), hasher=hasher)

    tree = build(0, len(ordered))

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Built Merkle tree: %d leaves, height %d",
            leaf_count(tree),
            tree_height(tree),
        )
    return tree


def precompute_digests(tree: MerkleTree, max_workers: int) -> None:
    """
    Evaluate independent subtree digests concurrently.

    The tree is expanded one level at a time until the frontier holds at
    least ``max_workers`` subtrees (or only leaves remain). Each frontier subtree
    is digested by exactly one worker, which fills its cached digests; the
    nodes above the frontier are left for the caller's tree.digest().

    Args:
        tree: Tree to evaluate
        max_workers: Thread pool size. Values below 2 do nothing.

    Raises:
        Whatever the hasher or encoder raises, re-raised in the caller.
    """
    if max_workers < 2 or not isinstance(tree, Node):
        return

    frontier: list[MerkleTree] = [tree]
    while len(frontier) < max_workers:
        expanded: list[MerkleTree] = []
        for subtree in frontier:
            if isinstance(subtree, Node):
                expanded.extend((subtree.left, subtree.right))
            else:
                expanded.append(subtree)
        if len(expanded) == len(frontier):
            break
        frontier = expanded

    logger.debug(
        "Evaluating %d subtrees on %d workers", len(frontier), max_workers
    )
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        # Consume the results so worker exceptions propagate
        for _ in pool.map(MerkleTree.digest, frontier):
            pass


def merkle_hash(
    items: Iterable[Any],
    hasher: Hasher = sha512,
    encoder: Encoder = canonical_bytes,
    max_workers: int = 1,
) -> bytes:
    """
    Build a tree from ``items`` and return its root digest.

    Args:
        items: Leaf items in order
        hasher: Digest primitive (SHA-512 by default)
        encoder: Canonical byte encoding for items
        max_workers: If 2 or more, subtree digests are evaluated on a
                     thread pool first. The result is identical either way.

    Returns:
        The root digest. b"" when ``items`` is empty.
    """
    tree = build_merkle_tree(items, hasher=hasher, encoder=encoder)
    precompute_digests(tree, max_workers)
    return tree.digest()


__all__ = [
    "build_merkle_tree",
    "precompute_digests",
    "merkle_hash",
]
