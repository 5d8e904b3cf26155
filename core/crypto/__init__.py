"""
Core cryptographic utilities.

Module 01 provides the hash primitives used by the Merkle tree.
"""
from .hashing import (
    HashFunction,
    HASH_WIDTH,
    DEFAULT_HASH_ALGORITHM,
    keccak256,
    sha256,
    get_hash_function,
    supported_hash_algorithms,
    hash_pair,
    to_hex,
    from_hex,
)

__all__ = [
    "HashFunction",
    "HASH_WIDTH",
    "DEFAULT_HASH_ALGORITHM",
    "keccak256",
    "sha256",
    "get_hash_function",
    "supported_hash_algorithms",
    "hash_pair",
    "to_hex",
    "from_hex",
]
