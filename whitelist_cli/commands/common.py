"""
Shared helpers for CLI commands.
"""

from __future__ import annotations

from argparse import Namespace

from core.config.runtime import RuntimeConfig
from core.whitelist.service import WhitelistService
from core.whitelist.source import source_from_location


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def service_from_args(args: Namespace) -> WhitelistService:
    """
    Build a WhitelistService for a command.

    ``--whitelist`` (path or URL) overrides the configured source.
    """
    config: RuntimeConfig = args.runtime_config
    location = getattr(args, "whitelist", None)
    source = source_from_location(location, config) if location else None
    return WhitelistService.from_config(config, source=source)
