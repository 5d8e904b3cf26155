"""
Module 07 - CLI Root Command

Print the Merkle root of the whitelist.

Usage:
    merkle-whitelist root [--whitelist PATH|URL] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from core.schemas.errors import WhitelistException
from whitelist_cli.commands.common import EXIT_RUNTIME_ERROR, EXIT_SUCCESS, service_from_args


logger = logging.getLogger(__name__)


def root_cmd(args: Namespace) -> int:
    """Execute the root command."""
    service = service_from_args(args)

    try:
        tree = service.build_tree()
    except WhitelistException as e:
        logger.debug(f"Root failed for {service.source.location}: {e.code} {e.details}")
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print(json.dumps({
            "source": service.source.location,
            "root": tree.hex_root,
            "leaf_count": tree.leaf_count,
            "depth": tree.depth,
        }, indent=2))
    else:
        print(tree.hex_root)

    return EXIT_SUCCESS
