"""
Module 07 - CLI Verify Command

Check a proof for an address against a root.

Usage:
    merkle-whitelist verify <address> --proof 0x... [--proof 0x...] [--root 0x...] [--json]

Without --root the proof is checked against the current whitelist root.
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from core.crypto.hashing import from_hex, to_hex
from core.schemas.errors import WhitelistException
from whitelist_cli.commands.common import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    service_from_args,
)


logger = logging.getLogger(__name__)


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Returns:
        EXIT_VERIFICATION_FAILED when the proof does not reproduce the root
    """
    service = service_from_args(args)

    try:
        siblings = [from_hex(s) for s in args.proof or []]
        root = from_hex(args.root) if args.root else None
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    try:
        if root is None:
            root = service.get_root()
        valid = service.verify(args.address, siblings, root)
    except WhitelistException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print(json.dumps({
            "address": args.address,
            "root": to_hex(root),
            "valid": valid,
        }, indent=2))
    else:
        print(f"valid: {str(valid).lower()}")

    if not valid:
        logger.info(f"Proof for {args.address} does not match root {to_hex(root)}")
        return EXIT_VERIFICATION_FAILED
    return EXIT_SUCCESS
