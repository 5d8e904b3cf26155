"""
Module 02 - Schemas & Encoding
File: encoding.py

Purpose: Turn member identifiers into leaf hashes.

Rule: leaf = hash(normalize(identifier).encode("utf-8"))

The reference deployment hashes address strings exactly as given, so the
default normalization is "none". Case folding is an explicit choice:
"lowercase" folds to lower case, "checksum" rewrites hex addresses into
their EIP-55 checksum form. Roots built under different modes differ.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from eth_utils import is_hex_address, to_checksum_address

from core.crypto.hashing import DEFAULT_HASH_ALGORITHM, HashFunction, get_hash_function

from .errors import InvalidIdentifierError


Normalization = Literal["none", "lowercase", "checksum"]

NORMALIZATION_MODES: tuple[str, ...] = ("none", "lowercase", "checksum")


def normalize_identifier(identifier: str, mode: str = "none") -> str:
    """
    Apply the configured normalization to an identifier.

    Raises:
        InvalidIdentifierError: "checksum" mode and the identifier is not
            a 20-byte hex address
        ValueError: Unknown mode
    """
    if mode == "none":
        return identifier
    if mode == "lowercase":
        return identifier.lower()
    if mode == "checksum":
        if not is_hex_address(identifier):
            raise InvalidIdentifierError(
                f"Not a hex address: {identifier!r}",
                identifier=identifier,
            )
        return to_checksum_address(identifier)
    raise ValueError(
        f"Unknown normalization mode '{mode}' (expected one of {', '.join(NORMALIZATION_MODES)})"
    )


@dataclass(frozen=True)
class LeafEncoder:
    """
    Canonical identifier encoding plus the hash function shared by
    leaves and internal nodes.

    Example:
        >>> encoder = LeafEncoder()
        >>> encoder.encode("0xAbC")
        b'0xAbC'
        >>> len(encoder.leaf_hash("0xAbC"))
        32
    """

    normalization: str = "none"
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM

    def __post_init__(self) -> None:
        if self.normalization not in NORMALIZATION_MODES:
            raise ValueError(
                f"Unknown normalization mode '{self.normalization}' "
                f"(expected one of {', '.join(NORMALIZATION_MODES)})"
            )
        # Fail at construction time on unknown algorithms
        get_hash_function(self.hash_algorithm)

    @property
    def hash_fn(self) -> HashFunction:
        return get_hash_function(self.hash_algorithm)

    def normalize(self, identifier: str) -> str:
        return normalize_identifier(identifier, self.normalization)

    def encode(self, identifier: str) -> bytes:
        """Raw UTF-8 bytes of the (normalized) identifier."""
        return self.normalize(identifier).encode("utf-8")

    def leaf_hash(self, identifier: str) -> bytes:
        """hash(encode(identifier))"""
        return self.hash_fn(self.encode(identifier))


DEFAULT_ENCODER = LeafEncoder()


__all__ = [
    "Normalization",
    "NORMALIZATION_MODES",
    "normalize_identifier",
    "LeafEncoder",
    "DEFAULT_ENCODER",
]
