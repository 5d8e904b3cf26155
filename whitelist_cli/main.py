"""
Module 07 - CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m whitelist_cli root [--whitelist PATH|URL] [--json]
    python -m whitelist_cli proof <address> [--whitelist PATH|URL] [--json]
    python -m whitelist_cli verify <address> --proof 0x... [--root 0x...] [--json]
    python -m whitelist_cli sync [--onchain-root 0x...] [--json]
    python -m whitelist_cli serve [--host HOST] [--port PORT]
    python -m whitelist_cli config --init

Environment Variables:
    WHITELIST_PATH              Local whitelist JSON file
    WHITELIST_URL               Remote whitelist JSON document (wins over path)
    WHITELIST_HASH_ALGORITHM    keccak256 (default) or sha256
    WHITELIST_NORMALIZATION     none (default), lowercase or checksum
    WHITELIST_ONCHAIN_ROOT      Last known on-chain root
    WHITELIST_LOG_LEVEL         Log level (default: INFO)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from core.config.runtime import get_default_config_template, load_runtime_config
from whitelist_cli import __version__
from whitelist_cli.commands import proof, root, sync, verify
from whitelist_cli.commands.common import EXIT_RUNTIME_ERROR, EXIT_SUCCESS


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def _add_source_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--whitelist", "-w",
        type=str,
        default=None,
        help="Whitelist file path or http(s) URL (overrides config)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="merkle-whitelist",
        description="Merkle whitelist CLI - Compute roots, issue and verify membership proofs.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./merkle-whitelist.json or ~/.config/merkle-whitelist/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write logs to this file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Print the Merkle root of the whitelist",
    )
    _add_source_args(root_parser)
    root_parser.set_defaults(func=root.root_cmd)

    # --- proof command ---
    proof_parser = subparsers.add_parser(
        "proof",
        help="Print the membership proof for an address",
        description="Print sibling hashes from leaf to root. Exits with 2 if the address is not whitelisted.",
    )
    proof_parser.add_argument("address", type=str, help="Address to prove")
    _add_source_args(proof_parser)
    proof_parser.set_defaults(func=proof.proof_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify a membership proof",
        description="Recompute the root from an address and its proof. Exits with 2 if the proof is invalid.",
    )
    verify_parser.add_argument("address", type=str, help="Address the proof is for")
    verify_parser.add_argument(
        "--proof", "-p",
        action="append",
        default=[],
        help="Sibling hash (0x hex), repeat in leaf-to-root order",
    )
    verify_parser.add_argument(
        "--root", "-r",
        type=str,
        default=None,
        help="Root to check against (default: current whitelist root)",
    )
    _add_source_args(verify_parser)
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- sync command ---
    sync_parser = subparsers.add_parser(
        "sync",
        help="Compare the whitelist root with the on-chain root",
        description="Exits with 2 when the roots differ or no on-chain root is known.",
    )
    sync_parser.add_argument(
        "--onchain-root",
        type=str,
        default=None,
        help="On-chain root (0x hex, default: chain.onchain_root from config)",
    )
    _add_source_args(sync_parser)
    sync_parser.set_defaults(func=sync.sync_cmd)

    # --- serve command ---
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP API",
    )
    serve_parser.add_argument("--host", type=str, default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")
    serve_parser.set_defaults(func=serve_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="merkle-whitelist.json",
        help="Path for config file (default: merkle-whitelist.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("\nEdit this file to configure your settings.")
        print("You can also use environment variables (WHITELIST_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.runtime_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    # Default: show help
    print("Usage: merkle-whitelist config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def serve_cmd(args: argparse.Namespace) -> int:
    """Handle serve command."""
    import uvicorn

    uvicorn.run("api.app:app", host=args.host, port=args.port)
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification or membership failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_runtime_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=args.log_file)

    # Attach config to args for commands to use
    args.runtime_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if args.log_level == "DEBUG":
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
