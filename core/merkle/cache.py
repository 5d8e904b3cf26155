"""
Module 03 - Tree Cache
Optional memoization of built trees, keyed by the identifier set.

The key is hash(hash_algorithm, normalization, sorted unique leaf hashes),
so any change to the set (or to the encoding) yields a new key and a
stale tree is never returned. Entries are evicted least-recently-used.

Trees are built outside the lock and inserted under it; readers only ever
see complete, immutable MerkleTree objects.
"""
from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Iterable

from core.crypto.hashing import sha256
from core.merkle.merkle_tree import MerkleTree, build_merkle_tree, canonical_leaves
from core.schemas.encoding import DEFAULT_ENCODER, LeafEncoder


logger = logging.getLogger(__name__)


def identifier_set_key(leaves: Iterable[bytes], encoder: LeafEncoder = DEFAULT_ENCODER) -> bytes:
    """Cache key for a leaf set under a given encoder."""
    header = f"{encoder.hash_algorithm}|{encoder.normalization}|".encode("utf-8")
    return sha256(header + b"".join(canonical_leaves(leaves)))


class TreeCache:
    """
    Thread-safe LRU cache of built Merkle trees.

    Example:
        cache = TreeCache(max_entries=8)
        tree = cache.get_or_build(addresses, encoder)
    """

    def __init__(self, max_entries: int = 16) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self.max_entries = max_entries
        self._entries: OrderedDict[bytes, MerkleTree] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, key: bytes) -> MerkleTree | None:
        with self._lock:
            tree = self._entries.get(key)
            if tree is not None:
                self._entries.move_to_end(key)
                self.hits += 1
            else:
                self.misses += 1
            return tree

    def put(self, key: bytes, tree: MerkleTree) -> None:
        with self._lock:
            self._entries[key] = tree
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def get_or_build(
        self,
        identifiers: Iterable[str],
        encoder: LeafEncoder = DEFAULT_ENCODER,
    ) -> MerkleTree:
        """
        Return the cached tree for this identifier set, building it on a miss.

        Raises:
            EmptyInputError: If identifiers is empty
        """
        leaves = [encoder.leaf_hash(identifier) for identifier in identifiers]
        key = identifier_set_key(leaves, encoder)

        tree = self.get(key)
        if tree is not None:
            logger.debug(f"Tree cache hit: {key.hex()[:16]}")
            return tree

        logger.debug(f"Tree cache miss: {key.hex()[:16]}")
        tree = build_merkle_tree(leaves, hash_algorithm=encoder.hash_algorithm)
        self.put(key, tree)
        return tree


__all__ = [
    "identifier_set_key",
    "TreeCache",
]
