"""
Module 04 - On-chain Root Comparison

The contract holding the published root is an external collaborator. This
module only models reading that value and comparing it with the root
computed from the current whitelist; submitting a new root on-chain is the
application's job, not the library's.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

from core.crypto.hashing import from_hex, to_hex


@runtime_checkable
class RootStore(Protocol):
    """Anything that can report the currently published root."""

    def read_root(self) -> Optional[bytes]:
        ...


class StaticRootStore:
    """A root value known ahead of time (config or CLI flag)."""

    def __init__(self, root: bytes | str | None):
        if isinstance(root, str):
            root = from_hex(root)
        self._root = root

    def read_root(self) -> Optional[bytes]:
        return self._root


class InMemoryRootStore:
    """Mutable root value for applications that push roots themselves."""

    def __init__(self, root: Optional[bytes] = None):
        self._root = root
        self._lock = threading.Lock()

    def read_root(self) -> Optional[bytes]:
        with self._lock:
            return self._root

    def write_root(self, root: bytes) -> None:
        with self._lock:
            self._root = root


@dataclass(frozen=True)
class SyncStatus:
    """Result of comparing the whitelist root with the published root."""
    whitelist_root: bytes
    onchain_root: Optional[bytes]

    @property
    def synced(self) -> bool:
        return self.onchain_root is not None and self.onchain_root == self.whitelist_root

    def to_dict(self) -> dict[str, Any]:
        return {
            "whitelist_root": to_hex(self.whitelist_root),
            "onchain_root": to_hex(self.onchain_root) if self.onchain_root is not None else None,
            "synced": self.synced,
        }


__all__ = [
    "RootStore",
    "StaticRootStore",
    "InMemoryRootStore",
    "SyncStatus",
]
