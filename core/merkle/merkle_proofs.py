"""
Module 03 - Merkle Proofs
Inclusion proof generation and verification for sorted-pair trees.

Owner: Protocol/Crypto Engineer
Module ID: M03

This module provides:
- ProofStep / MerkleProof: immutable proof structures
- build_merkle_proof / prove: generate a proof from a built tree
- verify_merkle_proof / verify: recompute a root from a leaf and a proof
- MerkleProver / MerkleVerifier: class-style convenience wrappers

Verification folds sorted pairs, so sibling positions are not needed to
verify. They are still recorded (position of the sibling in its level)
for consumers that track left/right explicitly.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Sequence, Union

from core.crypto.hashing import (
    DEFAULT_HASH_ALGORITHM,
    get_hash_function,
    hash_pair,
    to_hex,
)
from core.merkle.merkle_tree import MerkleTree, build_tree
from core.schemas.encoding import DEFAULT_ENCODER, LeafEncoder
from core.schemas.errors import MalformedProofError, NotFoundError


Position = Literal["left", "right"]


@dataclass(frozen=True)
class ProofStep:
    """
    One proof entry.

    Attributes:
        sibling: Hash of the node paired with the running node
        position: Where the sibling sits in its level ("left" or "right")
    """
    sibling: bytes
    position: Position

    def to_dict(self) -> dict[str, str]:
        return {"sibling": to_hex(self.sibling), "position": self.position}


@dataclass(frozen=True)
class MerkleProof:
    """
    A Merkle inclusion proof for one leaf.

    Attributes:
        leaf: The leaf hash being proven
        index: Position of the leaf in the sorted leaf level
        steps: Sibling entries ordered from leaf to root
        root: The root the proof was generated against
    """
    leaf: bytes
    index: int
    steps: tuple[ProofStep, ...]
    root: bytes

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"Leaf index must be non-negative, got {self.index}")

    @property
    def siblings(self) -> list[bytes]:
        return [step.sibling for step in self.steps]

    @property
    def positions(self) -> list[Position]:
        return [step.position for step in self.steps]

    def hex_siblings(self) -> list[str]:
        """Siblings as 0x-prefixed hex, the form served over HTTP."""
        return [to_hex(s) for s in self.siblings]

    def to_dict(self) -> dict[str, Any]:
        return {
            "leaf": to_hex(self.leaf),
            "index": self.index,
            "steps": [step.to_dict() for step in self.steps],
            "root": to_hex(self.root),
        }

    def __len__(self) -> int:
        return len(self.steps)


ProofLike = Union[MerkleProof, Sequence[bytes], Sequence[ProofStep]]


def build_merkle_proof(tree: MerkleTree, leaf: bytes) -> MerkleProof:
    """
    Generate an inclusion proof for a leaf hash.

    Algorithm:
    1. Locate the leaf in the sorted leaf level
    2. At each level below the root:
       - sibling index = index XOR 1
       - if the sibling exists, record it with its position
       - if not, the node is carried up and adds nothing at this level
       - move up: index = index // 2

    Raises:
        NotFoundError: If the leaf is not in the tree
    """
    index = tree.index_of(leaf)
    if index is None:
        raise NotFoundError(f"Leaf {to_hex(leaf)} is not in the tree")

    steps: list[ProofStep] = []
    current_index = index

    for level in tree.levels[:-1]:
        sibling_index = current_index ^ 1
        if sibling_index < len(level):
            position: Position = "left" if sibling_index < current_index else "right"
            steps.append(ProofStep(sibling=level[sibling_index], position=position))
        current_index //= 2

    return MerkleProof(
        leaf=leaf,
        index=index,
        steps=tuple(steps),
        root=tree.root,
    )


def prove(
    tree: MerkleTree,
    identifier: str,
    encoder: LeafEncoder = DEFAULT_ENCODER,
) -> MerkleProof:
    """
    Generate an inclusion proof for an identifier.

    The encoder must match the one the tree was built with.

    Raises:
        NotFoundError: If the identifier is not a member
        InvalidIdentifierError: If the identifier fails normalization
    """
    leaf = encoder.leaf_hash(identifier)
    if not tree.contains(leaf):
        raise NotFoundError(identifier=identifier)
    return build_merkle_proof(tree, leaf)


def _sibling_hashes(proof: ProofLike) -> list[bytes]:
    if isinstance(proof, MerkleProof):
        return proof.siblings
    return [p.sibling if isinstance(p, ProofStep) else p for p in proof]


def verify_merkle_proof(
    leaf: bytes,
    proof: ProofLike,
    expected_root: bytes,
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> bool:
    """
    Verify that a leaf hash is committed under ``expected_root``.

    Algorithm:
    1. Start with the leaf hash
    2. For each sibling: current = hash(min(current, sibling) + max(...))
    3. Compare the result with the expected root

    Args:
        leaf: Leaf hash to verify
        proof: MerkleProof, or sibling hashes / ProofSteps ordered leaf to root
        expected_root: Root to verify against
        hash_algorithm: Hash function the tree was built with

    Returns:
        True if the recomputed root matches, False otherwise

    Raises:
        MalformedProofError: If the leaf, a sibling or the root has the wrong width
    """
    hash_fn = get_hash_function(hash_algorithm)
    width = len(hash_fn(b""))

    if len(leaf) != width:
        raise MalformedProofError(
            f"Leaf hash must be {width} bytes, got {len(leaf)}",
            expected_width=width,
            actual_width=len(leaf),
        )
    if len(expected_root) != width:
        raise MalformedProofError(
            f"Root must be {width} bytes, got {len(expected_root)}",
            expected_width=width,
            actual_width=len(expected_root),
        )

    current = leaf
    for i, sibling in enumerate(_sibling_hashes(proof)):
        if len(sibling) != width:
            raise MalformedProofError(
                f"Proof entry {i} must be {width} bytes, got {len(sibling)}",
                position=i,
                expected_width=width,
                actual_width=len(sibling),
            )
        current = hash_pair(current, sibling, hash_fn)

    return current == expected_root


def verify(
    identifier: str,
    proof: ProofLike,
    expected_root: bytes,
    encoder: LeafEncoder = DEFAULT_ENCODER,
) -> bool:
    """
    Verify that an identifier is committed under ``expected_root``.

    Stateless: needs only the identifier, the proof and the root.

    Raises:
        MalformedProofError: If a proof entry or the root has the wrong width
    """
    leaf = encoder.leaf_hash(identifier)
    return verify_merkle_proof(leaf, proof, expected_root, encoder.hash_algorithm)


class MerkleProver:
    """
    Convenience class for generating proofs from raw identifiers.

    Example:
        >>> proof = MerkleProver.prove(["0xa", "0xb", "0xc"], "0xb")
        >>> MerkleVerifier.verify("0xb", proof, proof.root)
        True
    """

    @staticmethod
    def prove(
        identifiers: Sequence[str],
        identifier: str,
        encoder: LeafEncoder = DEFAULT_ENCODER,
    ) -> MerkleProof:
        """
        Build the tree over ``identifiers`` and prove ``identifier``.

        Raises:
            EmptyInputError: If identifiers is empty
            NotFoundError: If identifier is not a member
        """
        return prove(build_tree(identifiers, encoder), identifier, encoder)

    @staticmethod
    def compute_root(
        identifiers: Sequence[str],
        encoder: LeafEncoder = DEFAULT_ENCODER,
    ) -> bytes:
        """32-byte root over ``identifiers``."""
        return build_tree(identifiers, encoder).root


class MerkleVerifier:
    """Convenience class for verifying proofs."""

    @staticmethod
    def verify(
        identifier: str,
        proof: ProofLike,
        expected_root: bytes,
        encoder: LeafEncoder = DEFAULT_ENCODER,
    ) -> bool:
        return verify(identifier, proof, expected_root, encoder)

    @staticmethod
    def verify_proof(proof: MerkleProof, hash_algorithm: str = DEFAULT_HASH_ALGORITHM) -> bool:
        """Check a proof against the root it carries."""
        return verify_merkle_proof(proof.leaf, proof, proof.root, hash_algorithm)


__all__ = [
    "Position",
    "ProofStep",
    "MerkleProof",
    "build_merkle_proof",
    "prove",
    "verify_merkle_proof",
    "verify",
    "MerkleProver",
    "MerkleVerifier",
]
