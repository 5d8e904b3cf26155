"""
Module 01 - Hashing Utilities
Hash primitives shared by leaf hashing and internal node hashing.

Owner: Protocol/Crypto Engineer
Module ID: M01

This module provides:
- keccak256 / sha256 hashing for raw bytes
- A small registry resolving hash function names from configuration
- Hex encoding/decoding with 0x prefix

Security/Determinism Notes:
- One hash function is used for both leaves and internal nodes
- keccak256 is the default so roots match the deployed whitelist contract
- Always hash raw bytes exactly as given
"""
from __future__ import annotations

import hashlib
from typing import Callable

from eth_utils import keccak


HashFunction = Callable[[bytes], bytes]

# Both supported hash functions produce 32-byte digests
HASH_WIDTH: int = 32

DEFAULT_HASH_ALGORITHM = "keccak256"


def keccak256(data: bytes) -> bytes:
    """
    Compute the Keccak-256 hash of raw bytes (Ethereum flavour, not SHA3-256).

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte Keccak-256 digest

    Example:
        >>> keccak256(b"").hex()
        'c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470'
    """
    return keccak(data)


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest
    """
    return hashlib.sha256(data).digest()


_HASH_FUNCTIONS: dict[str, HashFunction] = {
    "keccak256": keccak256,
    "sha256": sha256,
}


def get_hash_function(name: str) -> HashFunction:
    """
    Resolve a hash function by its configured name.

    Raises:
        ValueError: If the name is not a supported algorithm
    """
    try:
        return _HASH_FUNCTIONS[name.lower()]
    except KeyError:
        supported = ", ".join(sorted(_HASH_FUNCTIONS))
        raise ValueError(
            f"Unsupported hash algorithm '{name}' (supported: {supported})"
        ) from None


def supported_hash_algorithms() -> list[str]:
    """Names accepted by get_hash_function()."""
    return sorted(_HASH_FUNCTIONS)


def hash_pair(left: bytes, right: bytes, hash_fn: HashFunction = keccak256) -> bytes:
    """
    Hash two nodes after ordering them by byte value.

    parent = hash(min(left, right) + max(left, right))

    Sorting the pair makes the parent independent of which child sits
    on which side, so verifiers need no position information.
    """
    if right < left:
        left, right = right, left
    return hash_fn(left + right)


def to_hex(data: bytes) -> str:
    """
    Convert bytes to a lowercase hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert a hexadecimal string (with 0x prefix) to bytes.

    Args:
        hex_string: Hex string with 0x prefix (either case)

    Returns:
        Decoded bytes

    Raises:
        ValueError: If string doesn't start with 0x, has odd length,
                   or contains invalid hex characters
    """
    if not hex_string.startswith(("0x", "0X")):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    hex_content = hex_string[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


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
