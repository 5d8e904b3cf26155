"""
Module 07 - Merkle Whitelist CLI

Command-line interface for the Merkle whitelist.

Usage:
    python -m whitelist_cli root --whitelist public/whitelist.json
    python -m whitelist_cli proof 0x70997970C51812dc3A010C7d01b50e0d17dc79C8
    python -m whitelist_cli verify <address> --proof 0x... --proof 0x...
    python -m whitelist_cli sync --onchain-root 0x...
    python -m whitelist_cli serve --port 8000
"""

__version__ = "0.1.0"
