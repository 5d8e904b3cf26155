"""
Module 03 - Merkle Tree and Commitments
Sorted-leaf, sorted-pair Merkle trees over whitelist identifiers.

Owner: Protocol/Crypto Engineer
Module ID: M03

This module provides:
- MerkleTree: immutable tree (levels + root)
- build_tree / build_merkle_tree: construct from identifiers / leaf hashes
- prove / build_merkle_proof: generate inclusion proofs
- verify / verify_merkle_proof: check a proof against a root
- TreeCache: optional thread-safe cache keyed by the identifier set

Canonical Commitment Rules:
1. Leaf hashing: keccak256(identifier.encode("utf-8")) by default
2. Leaves deduplicated and sorted by byte value
3. Parent hashing: hash(min(left, right) + max(left, right))
4. Odd node carried up unchanged
5. Empty tree: EmptyInputError
6. Single leaf: root = leaf

Usage:
    from core.merkle import build_tree, prove, verify

    tree = build_tree(addresses)
    proof = prove(tree, "0xAbC...")
    assert verify("0xAbC...", proof, tree.root)
"""
from .merkle_tree import (
    MerkleTree,
    merkle_parent,
    canonical_leaves,
    build_merkle_tree,
    build_tree,
    build_merkle_root,
    compute_tree_depth,
    max_proof_length,
)

from .merkle_proofs import (
    Position,
    ProofStep,
    MerkleProof,
    build_merkle_proof,
    prove,
    verify_merkle_proof,
    verify,
    MerkleProver,
    MerkleVerifier,
)

from .cache import (
    identifier_set_key,
    TreeCache,
)


__all__ = [
    # Core types
    "MerkleTree",
    "Position",
    "ProofStep",
    "MerkleProof",
    # Tree construction
    "merkle_parent",
    "canonical_leaves",
    "build_merkle_tree",
    "build_tree",
    "build_merkle_root",
    "compute_tree_depth",
    "max_proof_length",
    # Proofs
    "build_merkle_proof",
    "prove",
    "verify_merkle_proof",
    "verify",
    # Convenience classes
    "MerkleProver",
    "MerkleVerifier",
    # Caching
    "identifier_set_key",
    "TreeCache",
]
