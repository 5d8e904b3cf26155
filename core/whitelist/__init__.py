"""
Module 04 - Whitelist

Loading, querying and root comparison around the Merkle core.
"""

from .source import (
    WhitelistSource,
    FileWhitelistSource,
    HttpWhitelistSource,
    StaticWhitelistSource,
    create_source,
    source_from_location,
)
from .root_store import (
    RootStore,
    StaticRootStore,
    InMemoryRootStore,
    SyncStatus,
)
from .service import (
    WhitelistService,
    root_store_from_config,
)

__all__ = [
    "WhitelistSource",
    "FileWhitelistSource",
    "HttpWhitelistSource",
    "StaticWhitelistSource",
    "create_source",
    "source_from_location",
    "RootStore",
    "StaticRootStore",
    "InMemoryRootStore",
    "SyncStatus",
    "WhitelistService",
    "root_store_from_config",
]
