"""
Module 07 - CLI Sync Command

Compare the whitelist root with the published on-chain root.

Usage:
    merkle-whitelist sync [--onchain-root 0x...] [--whitelist PATH|URL] [--json]

Without --onchain-root the configured chain.onchain_root is used.
"""

from __future__ import annotations

import json
import sys
from argparse import Namespace

from core.schemas.errors import WhitelistException
from core.whitelist.root_store import StaticRootStore
from core.whitelist.service import root_store_from_config
from whitelist_cli.commands.common import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    service_from_args,
)


def sync_cmd(args: Namespace) -> int:
    """
    Execute the sync command.

    Returns:
        EXIT_VERIFICATION_FAILED when the roots differ or no on-chain root is known
    """
    service = service_from_args(args)

    try:
        if args.onchain_root:
            store = StaticRootStore(args.onchain_root)
        else:
            store = root_store_from_config(args.runtime_config)
    except ValueError as e:
        print(f"Error: invalid on-chain root: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    try:
        status = service.sync_status(store)
    except WhitelistException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    summary = status.to_dict()
    if args.json:
        print(json.dumps(summary, indent=2))
    else:
        print(f"whitelist_root: {summary['whitelist_root']}")
        print(f"onchain_root: {summary['onchain_root'] or '(unknown)'}")
        print(f"synced: {str(status.synced).lower()}")

    return EXIT_SUCCESS if status.synced else EXIT_VERIFICATION_FAILED
