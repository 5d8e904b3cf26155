"""
Module 06 - API Dependencies

Dependency injection for the API.
Provides the process-wide WhitelistService and the on-chain root store.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from api.errors import ConfigurationError
from core.config.runtime import RuntimeConfig, load_runtime_config
from core.whitelist.root_store import RootStore
from core.whitelist.service import WhitelistService, root_store_from_config

logger = logging.getLogger(__name__)


_service: Optional[WhitelistService] = None
_service_lock = threading.Lock()


def get_runtime_config() -> RuntimeConfig:
    """Load RuntimeConfig from config file, then overlay environment variables."""
    try:
        return load_runtime_config()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        raise ConfigurationError(str(e)) from e


def get_whitelist_service() -> WhitelistService:
    """
    Shared WhitelistService.

    One instance per process so the optional tree cache is shared across
    requests. The whitelist itself is re-read on every call.
    """
    global _service
    with _service_lock:
        if _service is None:
            config = get_runtime_config()
            _service = WhitelistService.from_config(config)
            logger.info(
                f"Whitelist service ready: source={_service.source.location}, "
                f"hash={config.merkle.hash_algorithm}, "
                f"normalization={config.merkle.normalization}, "
                f"cache={'on' if _service.cache is not None else 'off'}"
            )
        return _service


def reset_whitelist_service() -> None:
    """Drop the shared service so the next request reloads configuration."""
    global _service
    with _service_lock:
        _service = None


def get_root_store() -> Optional[RootStore]:
    """Root store for the configured on-chain root, if any."""
    return root_store_from_config(get_runtime_config())
