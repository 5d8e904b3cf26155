"""
Module 07 - CLI Proof Command

Print the membership proof for one address.

Usage:
    merkle-whitelist proof <address> [--whitelist PATH|URL] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from core.crypto.hashing import to_hex
from core.merkle.merkle_proofs import prove
from core.schemas.errors import NotFoundError, WhitelistException
from whitelist_cli.commands.common import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    service_from_args,
)


logger = logging.getLogger(__name__)


def proof_cmd(args: Namespace) -> int:
    """
    Execute the proof command.

    Returns:
        EXIT_VERIFICATION_FAILED when the address is not whitelisted
    """
    service = service_from_args(args)

    try:
        tree = service.build_tree()
        proof = prove(tree, args.address, service.encoder)
    except NotFoundError:
        logger.info(f"Proof requested for non-member {args.address}")
        print(f"{args.address}: not in whitelist", file=sys.stderr)
        return EXIT_VERIFICATION_FAILED
    except WhitelistException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print(json.dumps({
            "address": args.address,
            "leaf": to_hex(proof.leaf),
            "root": tree.hex_root,
            "proof": proof.hex_siblings(),
            "positions": proof.positions,
        }, indent=2))
    else:
        for sibling in proof.hex_siblings():
            print(sibling)

    return EXIT_SUCCESS
