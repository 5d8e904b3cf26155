"""
CLI command modules.
"""

from whitelist_cli.commands import root, proof, verify, sync

__all__ = ["root", "proof", "verify", "sync"]
