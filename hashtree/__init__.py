"""
hashtree - root hashes of ordered collections via balanced Merkle trees.

    >>> from hashtree import merkle_hash
    >>> merkle_hash([]) == b""
    True
"""
from hashtree.crypto import Hasher, get_hasher, sha256, sha512, to_hex
from hashtree.merkle import (
    EMPTY_DIGEST,
    BytesHashable,
    Empty,
    Leaf,
    MerkleHasher,
    MerkleTree,
    Node,
    build_merkle_tree,
    canonical_bytes,
    merkle_hash,
)
from hashtree.schemas import (
    CanonicalizationException,
    HashTreeException,
    UnsupportedAlgorithmException,
)

__version__ = "0.1.0"

__all__ = [
    "MerkleTree",
    "Empty",
    "Leaf",
    "Node",
    "EMPTY_DIGEST",
    "build_merkle_tree",
    "merkle_hash",
    "MerkleHasher",
    "BytesHashable",
    "canonical_bytes",
    "Hasher",
    "get_hasher",
    "sha512",
    "sha256",
    "to_hex",
    "HashTreeException",
    "CanonicalizationException",
    "UnsupportedAlgorithmException",
]
