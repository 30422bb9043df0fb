"""
Merkle Hasher Unit Tests
Tests for hashtree/merkle/hasher.py and the package-level API.
"""
import pytest

import hashtree
from hashtree.config import HashTreeConfig, set_default_config
from hashtree.crypto.hashing import sha256, sha512
from hashtree.merkle.builder import merkle_hash
from hashtree.merkle.hasher import MerkleHasher
from hashtree.merkle.merkle_tree import Node
from hashtree.schemas.errors import UnsupportedAlgorithmException


class TestMerkleHasher:
    """Tests for MerkleHasher."""

    def test_root_matches_merkle_hash(self, abc_items):
        """Default settings equal the plain function."""
        assert MerkleHasher().root(abc_items) == merkle_hash(abc_items)

    def test_root_empty(self):
        """No items, empty digest."""
        assert MerkleHasher().root([]) == b""

    def test_root_hex(self, abc_items):
        """root_hex is the 0x-prefixed root."""
        hasher = MerkleHasher()

        assert hasher.root_hex(abc_items) == "0x" + hasher.root(abc_items).hex()

    def test_tree_uses_bound_settings(self, abc_items, tagged):
        """tree() applies the bound hasher."""
        tree = MerkleHasher(hasher=tagged).tree(abc_items)

        assert isinstance(tree, Node)
        assert tree.digest() == b"H(H(H(a)H(b))H(c))"

    def test_parallel_root(self):
        """max_workers does not change the root."""
        items = [f"i{i}" for i in range(40)]

        assert MerkleHasher(max_workers=4).root(items) == MerkleHasher().root(items)

    def test_from_config(self, abc_items):
        """Config selects the algorithm and worker count."""
        hasher = MerkleHasher.from_config(HashTreeConfig(algorithm="sha256", max_workers=3))

        assert hasher.hasher is sha256
        assert hasher.max_workers == 3
        assert len(hasher.root(abc_items)) == 32

    def test_from_default_config(self):
        """Without an argument the default config is used."""
        set_default_config(HashTreeConfig(algorithm="sha256"))

        assert MerkleHasher.from_config().hasher is sha256

    def test_from_config_bad_algorithm(self):
        """Unknown algorithms surface when the hasher is bound."""
        with pytest.raises(UnsupportedAlgorithmException):
            MerkleHasher.from_config(HashTreeConfig(algorithm="md99"))

    def test_repr(self):
        """repr names the hasher."""
        assert repr(MerkleHasher()) == "MerkleHasher(hasher=sha512, max_workers=1)"


class TestPackageApi:
    """Tests for names exported from the top-level package."""

    def test_exports(self, abc_items):
        """Top-level helpers are the same objects as the submodule ones."""
        assert hashtree.merkle_hash is merkle_hash
        assert hashtree.sha512 is sha512
        assert hashtree.build_merkle_tree(abc_items).digest() == merkle_hash(abc_items)

    def test_empty_digest_constant(self):
        """EMPTY_DIGEST is the zero-length byte string."""
        assert hashtree.EMPTY_DIGEST == b""
