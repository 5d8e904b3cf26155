"""
Module 04 - Whitelist Service

Glue between a whitelist source and the Merkle core. Each call re-reads
the source so answers always reflect the current document; with a
TreeCache attached, an unchanged set reuses its already built tree.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from core.config.runtime import RuntimeConfig
from core.crypto.hashing import to_hex
from core.merkle.cache import TreeCache
from core.merkle.merkle_proofs import MerkleProof, ProofStep, prove, verify
from core.merkle.merkle_tree import MerkleTree, build_tree
from core.schemas.encoding import LeafEncoder
from core.whitelist.root_store import RootStore, StaticRootStore, SyncStatus
from core.whitelist.source import WhitelistSource, create_source


logger = logging.getLogger(__name__)


class WhitelistService:
    """
    Root, proof and verification queries over a whitelist source.

    Example:
        service = WhitelistService(FileWhitelistSource("public/whitelist.json"))
        root_hex = service.get_root_hex()
        proof = service.get_proof("0x70997970C51812dc3A010C7d01b50e0d17dc79C8")
    """

    def __init__(
        self,
        source: WhitelistSource,
        encoder: Optional[LeafEncoder] = None,
        cache: Optional[TreeCache] = None,
    ):
        self.source = source
        self.encoder = encoder or LeafEncoder()
        self.cache = cache

    @classmethod
    def from_config(cls, config: RuntimeConfig, source: Optional[WhitelistSource] = None) -> "WhitelistService":
        """Build a service (source, encoder, optional cache) from configuration."""
        encoder = LeafEncoder(
            normalization=config.merkle.normalization,
            hash_algorithm=config.merkle.hash_algorithm,
        )
        cache = TreeCache(config.merkle.cache_size) if config.merkle.cache_enabled else None
        return cls(source or create_source(config), encoder=encoder, cache=cache)

    def build_tree(self) -> MerkleTree:
        """
        Read the source and build the tree.

        Raises:
            SourceUnavailableError / SchemaValidationError: From the source
            EmptyInputError: If the whitelist has no entries
        """
        addresses = self.source.addresses()
        if self.cache is not None:
            tree = self.cache.get_or_build(addresses, self.encoder)
        else:
            tree = build_tree(addresses, self.encoder)
        logger.info(f"Whitelist tree: {tree.leaf_count} leaves, root {tree.hex_root}")
        return tree

    def get_root(self) -> bytes:
        return self.build_tree().root

    def get_root_hex(self) -> str:
        return to_hex(self.get_root())

    def get_proof(self, address: str) -> MerkleProof:
        """
        Raises:
            NotFoundError: If the address is not whitelisted
        """
        return prove(self.build_tree(), address, self.encoder)

    def verify(
        self,
        address: str,
        proof: MerkleProof | Sequence[bytes] | Sequence[ProofStep],
        root: Optional[bytes] = None,
    ) -> bool:
        """Verify against ``root``, or against the current whitelist root when omitted."""
        expected_root = root if root is not None else self.get_root()
        return verify(address, proof, expected_root, self.encoder)

    def sync_status(self, store: RootStore | None) -> SyncStatus:
        """Compare the current whitelist root with the published one."""
        onchain_root = store.read_root() if store is not None else None
        status = SyncStatus(whitelist_root=self.get_root(), onchain_root=onchain_root)
        if not status.synced:
            logger.warning(
                f"Whitelist root {to_hex(status.whitelist_root)} does not match "
                f"on-chain root {to_hex(onchain_root) if onchain_root else 'unknown'}"
            )
        return status


def root_store_from_config(config: RuntimeConfig) -> Optional[RootStore]:
    """StaticRootStore for chain.onchain_root, or None when unset."""
    if config.chain.onchain_root:
        return StaticRootStore(config.chain.onchain_root)
    return None


__all__ = [
    "WhitelistService",
    "root_store_from_config",
]
