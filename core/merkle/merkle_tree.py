"""
Module 03 - Merkle Tree Implementation
Deterministic Merkle tree construction over a whitelist of identifiers.

Owner: Protocol/Crypto Engineer
Module ID: M03

This module provides:
- MerkleTree: immutable level-by-level tree
- Tree construction from identifiers or from pre-hashed leaves
- Root computation and depth helpers

Canonical Commitment Rules (Hard Contracts):
1. Leaf hashing: leaf = hash(encode(identifier)), see core.schemas.encoding
2. Leaf set: duplicates removed, then sorted ascending by byte value
3. Parent hashing: parent = hash(min(left, right) + max(left, right))
4. Odd node: the last unpaired node is carried up unchanged (never duplicated)
5. Empty leaves: rejected with EmptyInputError
6. Single leaf: root = leaf

Determinism Notes:
- The root depends only on the set of identifiers, not on input order
- These rules match the sortLeaves/sortPairs convention used to publish
  the on-chain root, so any change here changes deployed roots
"""
from __future__ import annotations

import bisect
import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from core.crypto.hashing import (
    DEFAULT_HASH_ALGORITHM,
    HashFunction,
    get_hash_function,
    hash_pair,
    keccak256,
    to_hex,
)
from core.schemas.encoding import DEFAULT_ENCODER, LeafEncoder
from core.schemas.errors import EmptyInputError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MerkleTree:
    """
    A fully built Merkle tree.

    Attributes:
        levels: Level 0 holds the sorted, deduplicated leaf hashes; each
                following level holds the parents of the level below; the
                last level holds exactly one node, the root.
        hash_algorithm: Name of the hash function the tree was built with
    """
    levels: tuple[tuple[bytes, ...], ...]
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM

    def __post_init__(self) -> None:
        if not self.levels or not self.levels[0]:
            raise EmptyInputError()
        if len(self.levels[-1]) != 1:
            raise ValueError(
                f"Top level must hold exactly one node, got {len(self.levels[-1])}"
            )

    @property
    def root(self) -> bytes:
        return self.levels[-1][0]

    @property
    def hex_root(self) -> str:
        """0x-prefixed lowercase hex of the root."""
        return to_hex(self.root)

    @property
    def leaves(self) -> tuple[bytes, ...]:
        """Sorted, deduplicated leaf hashes."""
        return self.levels[0]

    @property
    def leaf_count(self) -> int:
        return len(self.levels[0])

    @property
    def depth(self) -> int:
        """Number of levels, leaf level and root level included."""
        return len(self.levels)

    def index_of(self, leaf: bytes) -> int | None:
        """Position of a leaf hash in level 0, or None if absent."""
        leaves = self.levels[0]
        i = bisect.bisect_left(leaves, leaf)
        if i < len(leaves) and leaves[i] == leaf:
            return i
        return None

    def contains(self, leaf: bytes) -> bool:
        return self.index_of(leaf) is not None


def merkle_parent(left: bytes, right: bytes, hash_fn: HashFunction = keccak256) -> bytes:
    """
    Compute the parent hash of two child nodes.

    The pair is sorted before hashing, so
    merkle_parent(a, b) == merkle_parent(b, a).
    """
    return hash_pair(left, right, hash_fn)


def canonical_leaves(leaf_hashes: Iterable[bytes]) -> tuple[bytes, ...]:
    """Deduplicate and sort leaf hashes by byte value."""
    return tuple(sorted(set(leaf_hashes)))


def build_merkle_tree(
    leaf_hashes: Iterable[bytes],
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> MerkleTree:
    """
    Build a tree from pre-hashed leaves.

    Algorithm:
    1. Deduplicate and sort the leaves
    2. Pair adjacent nodes left to right, parent = hash(min + max)
    3. Carry an odd last node up unchanged
    4. Repeat until a single root remains

    Example: [a, b, c] -> [parent(a,b), c] -> [parent(parent(a,b), c)]

    Args:
        leaf_hashes: Leaf hashes, any order, duplicates allowed
        hash_algorithm: Name of the hash function for internal nodes

    Returns:
        MerkleTree

    Raises:
        EmptyInputError: If no leaves are given
        ValueError: If a leaf's width differs from the hash output width
    """
    hash_fn = get_hash_function(hash_algorithm)
    leaves = canonical_leaves(leaf_hashes)

    if not leaves:
        raise EmptyInputError()

    width = len(hash_fn(b""))
    for leaf in leaves:
        if len(leaf) != width:
            raise ValueError(
                f"Leaf hash must be {width} bytes for {hash_algorithm}, got {len(leaf)}"
            )

    levels: list[tuple[bytes, ...]] = [leaves]
    current_level: Sequence[bytes] = leaves

    while len(current_level) > 1:
        next_level: list[bytes] = []
        for i in range(0, len(current_level) - 1, 2):
            next_level.append(merkle_parent(current_level[i], current_level[i + 1], hash_fn))

        # Carry up the unpaired node
        if len(current_level) % 2 == 1:
            next_level.append(current_level[-1])

        levels.append(tuple(next_level))
        current_level = next_level

    tree = MerkleTree(levels=tuple(levels), hash_algorithm=hash_algorithm)
    logger.debug(
        f"Built Merkle tree: {tree.leaf_count} leaves, depth {tree.depth}, root {tree.hex_root}"
    )
    return tree


def build_tree(
    identifiers: Iterable[str],
    encoder: LeafEncoder = DEFAULT_ENCODER,
) -> MerkleTree:
    """
    Build a tree from raw identifiers.

    Each identifier is encoded and hashed by ``encoder``; the resulting leaf
    set is then committed with build_merkle_tree().

    Raises:
        EmptyInputError: If no identifiers are given
        InvalidIdentifierError: If an identifier fails normalization
    """
    leaves = [encoder.leaf_hash(identifier) for identifier in identifiers]
    return build_merkle_tree(leaves, hash_algorithm=encoder.hash_algorithm)


def build_merkle_root(
    leaf_hashes: Iterable[bytes],
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> bytes:
    """Root of the tree over ``leaf_hashes``."""
    return build_merkle_tree(leaf_hashes, hash_algorithm).root


def compute_tree_depth(num_leaves: int) -> int:
    """
    Number of levels of a tree with ``num_leaves`` distinct leaves.

    Each level above the leaves holds ceil(n / 2) nodes of the level below.
    One leaf has depth 1, two leaves depth 2, three or four leaves depth 3.

    Returns:
        Tree depth (0 for empty tree)
    """
    if num_leaves <= 0:
        return 0

    depth = 1
    n = num_leaves
    while n > 1:
        n = (n + 1) // 2
        depth += 1

    return depth


def max_proof_length(num_leaves: int) -> int:
    """Upper bound on proof entries: ceil(log2(num_leaves))."""
    if num_leaves <= 1:
        return 0
    return (num_leaves - 1).bit_length()


__all__ = [
    "MerkleTree",
    "merkle_parent",
    "canonical_leaves",
    "build_merkle_tree",
    "build_tree",
    "build_merkle_root",
    "compute_tree_depth",
    "max_proof_length",
]
