"""
Runtime Configuration Module

Provides configuration loading and management for whitelist commitments.
"""

from .runtime import (
    ChainConfig,
    HttpConfig,
    MerkleConfig,
    RuntimeConfig,
    SourceConfig,
    get_default_config,
    get_default_config_template,
    load_runtime_config,
    set_default_config,
)

__all__ = [
    "ChainConfig",
    "HttpConfig",
    "MerkleConfig",
    "RuntimeConfig",
    "SourceConfig",
    "get_default_config",
    "get_default_config_template",
    "load_runtime_config",
    "set_default_config",
]
