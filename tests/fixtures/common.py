"""
Common test fixtures shared by all modules.

Provides factory functions for whitelist data:
- Sample addresses and whitelist documents
- Whitelist files on disk
- Sources and services over static data

These are the foundational building blocks used by the unit tests.
"""

import json
from pathlib import Path
from typing import Any, Optional, Sequence

from core.schemas.encoding import LeafEncoder
from core.whitelist.service import WhitelistService
from core.whitelist.source import StaticWhitelistSource


# Well-known development accounts (EIP-55 checksummed)
SAMPLE_ADDRESSES: tuple[str, ...] = (
    "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266",
    "0x70997970C51812dc3A010C7d01b50e0d17dc79C8",
    "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC",
    "0x90F79bf6EB2c4f870365E785982E1f101E93b906",
    "0x15d34AAf54267DB7D7c367839AAf71A00a2C6A65",
)

NON_MEMBER_ADDRESS = "0x9965507D1a55bcC2695C58ba16FB37d819B0A4dc"


# =============================================================================
# Whitelist Document Factories
# =============================================================================

def make_whitelist_records(
    addresses: Optional[Sequence[str]] = None,
    name_prefix: str = "member",
) -> list[dict[str, Any]]:
    """
    Create whitelist records in the {"name", "address"} document shape.

    Args:
        addresses: Addresses to include (default: SAMPLE_ADDRESSES)
        name_prefix: Prefix for generated member names
    """
    if addresses is None:
        addresses = SAMPLE_ADDRESSES
    return [
        {"name": f"{name_prefix}-{i}", "address": address}
        for i, address in enumerate(addresses)
    ]


def write_whitelist_file(
    directory: Path,
    records: Any = None,
    filename: str = "whitelist.json",
) -> Path:
    """Write a whitelist document to ``directory`` and return its path."""
    if records is None:
        records = make_whitelist_records()
    path = Path(directory) / filename
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


# =============================================================================
# Source / Service Factories
# =============================================================================

def make_static_source(addresses: Optional[Sequence[str]] = None) -> StaticWhitelistSource:
    """Create an in-memory source over ``addresses``."""
    return StaticWhitelistSource(make_whitelist_records(addresses))


def make_service(
    addresses: Optional[Sequence[str]] = None,
    encoder: Optional[LeafEncoder] = None,
    cache=None,
) -> WhitelistService:
    """Create a WhitelistService over a static source."""
    return WhitelistService(make_static_source(addresses), encoder=encoder, cache=cache)
