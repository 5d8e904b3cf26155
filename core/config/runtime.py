"""
Runtime Configuration

Central configuration for tree construction, the whitelist source and the
on-chain root comparison.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from core.crypto.hashing import HASH_WIDTH, from_hex

load_dotenv()

logger = logging.getLogger(__name__)


ENV_PREFIX = "WHITELIST_"

CONFIG_SEARCH_PATHS: tuple[Path, ...] = (
    Path("merkle-whitelist.json"),
    Path(".merkle-whitelist.json"),
    Path.home() / ".config" / "merkle-whitelist" / "config.json",
)


@dataclass
class MerkleConfig:
    """Configuration for leaf encoding and tree construction."""
    hash_algorithm: str = "keccak256"
    normalization: str = "none"  # none | lowercase | checksum
    cache_enabled: bool = False
    cache_size: int = 16


@dataclass
class SourceConfig:
    """Where the whitelist document is read from. ``url`` wins over ``path``."""
    path: str = "./public/whitelist.json"
    url: Optional[str] = None
    timeout: float = 10.0


@dataclass
class HttpConfig:
    """Configuration for the HTTP client used by remote sources."""
    timeout: float = 30.0
    user_agent: str = "merkle-whitelist/0.1.0"


@dataclass
class ChainConfig:
    """Last known on-chain root, compared against the computed root."""
    onchain_root: Optional[str] = None

    def validate(self) -> None:
        """
        Check that ``onchain_root`` is a 0x-prefixed 32-byte hex string.

        Raises:
            ValueError: Naming the setting and its environment variable
        """
        if not self.onchain_root:
            return
        try:
            width = len(from_hex(self.onchain_root))
        except ValueError as e:
            raise ValueError(
                f"Invalid chain.onchain_root ({ENV_PREFIX}ONCHAIN_ROOT): {e}"
            ) from e
        if width != HASH_WIDTH:
            raise ValueError(
                f"Invalid chain.onchain_root ({ENV_PREFIX}ONCHAIN_ROOT): "
                f"expected {HASH_WIDTH} bytes, got {width}"
            )


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables
    - JSON or YAML file
    - Programmatic construction
    """
    merkle: MerkleConfig = field(default_factory=MerkleConfig)
    source: SourceConfig = field(default_factory=SourceConfig)
    http: HttpConfig = field(default_factory=HttpConfig)
    chain: ChainConfig = field(default_factory=ChainConfig)
    log_level: str = "INFO"
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - WHITELIST_PATH: Local whitelist JSON file
        - WHITELIST_URL: Remote whitelist JSON document
        - WHITELIST_SOURCE_TIMEOUT: Remote fetch timeout in seconds
        - WHITELIST_HASH_ALGORITHM: keccak256 or sha256
        - WHITELIST_NORMALIZATION: none, lowercase or checksum
        - WHITELIST_CACHE_ENABLED: Enable the tree cache (true/false)
        - WHITELIST_CACHE_SIZE: Max cached trees
        - WHITELIST_ONCHAIN_ROOT: Last known on-chain root (0x hex)
        - WHITELIST_LOG_LEVEL: Log level
        """
        overrides: dict[str, Any] = {}

        # Source settings
        if os.getenv(f"{ENV_PREFIX}PATH"):
            overrides.setdefault("source", {})["path"] = os.getenv(f"{ENV_PREFIX}PATH")
        if os.getenv(f"{ENV_PREFIX}URL"):
            overrides.setdefault("source", {})["url"] = os.getenv(f"{ENV_PREFIX}URL")
        if os.getenv(f"{ENV_PREFIX}SOURCE_TIMEOUT"):
            overrides.setdefault("source", {})["timeout"] = float(
                os.getenv(f"{ENV_PREFIX}SOURCE_TIMEOUT", "10")
            )

        # Merkle settings
        if os.getenv(f"{ENV_PREFIX}HASH_ALGORITHM"):
            overrides.setdefault("merkle", {})["hash_algorithm"] = os.getenv(
                f"{ENV_PREFIX}HASH_ALGORITHM"
            )
        if os.getenv(f"{ENV_PREFIX}NORMALIZATION"):
            overrides.setdefault("merkle", {})["normalization"] = os.getenv(
                f"{ENV_PREFIX}NORMALIZATION"
            )
        if os.getenv(f"{ENV_PREFIX}CACHE_ENABLED"):
            overrides.setdefault("merkle", {})["cache_enabled"] = _env_bool(
                f"{ENV_PREFIX}CACHE_ENABLED"
            )
        if os.getenv(f"{ENV_PREFIX}CACHE_SIZE"):
            overrides.setdefault("merkle", {})["cache_size"] = int(
                os.getenv(f"{ENV_PREFIX}CACHE_SIZE", "16")
            )

        # Chain
        if os.getenv(f"{ENV_PREFIX}ONCHAIN_ROOT"):
            overrides.setdefault("chain", {})["onchain_root"] = os.getenv(
                f"{ENV_PREFIX}ONCHAIN_ROOT"
            )

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a JSON or YAML file, by extension."""
        path = Path(path)
        if path.suffix in (".yaml", ".yml"):
            return cls.from_yaml(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            return cls.from_dict(json.load(f))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        merkle_data = data.get("merkle", {})
        source_data = data.get("source", {})
        http_data = data.get("http", {})
        chain_data = data.get("chain", {})

        config = cls(
            merkle=MerkleConfig(**merkle_data) if merkle_data else MerkleConfig(),
            source=SourceConfig(**source_data) if source_data else SourceConfig(),
            http=HttpConfig(**http_data) if http_data else HttpConfig(),
            chain=ChainConfig(**chain_data) if chain_data else ChainConfig(),
            log_level=data.get("log_level", "INFO"),
            extra=data.get("extra", {}),
        )
        config.chain.validate()
        return config

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        for section in ("merkle", "source", "chain"):
            for key, value in overrides.get(section, {}).items():
                setattr(getattr(new_config, section), key, value)

        if "log_level" in overrides:
            new_config.log_level = overrides["log_level"]

        new_config.chain.validate()
        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "merkle": {
                "hash_algorithm": self.merkle.hash_algorithm,
                "normalization": self.merkle.normalization,
                "cache_enabled": self.merkle.cache_enabled,
                "cache_size": self.merkle.cache_size,
            },
            "source": {
                "path": self.source.path,
                "url": self.source.url,
                "timeout": self.source.timeout,
            },
            "http": {
                "timeout": self.http.timeout,
                "user_agent": self.http.user_agent,
            },
            "chain": {
                "onchain_root": self.chain.onchain_root,
            },
            "log_level": self.log_level,
            "extra": self.extra,
        }


def load_runtime_config(config_path: str | Path | None = None) -> RuntimeConfig:
    """
    Load RuntimeConfig from a config file, then overlay environment variables.

    Search order when no path is given:
      1. ./merkle-whitelist.json
      2. ./.merkle-whitelist.json
      3. ~/.config/merkle-whitelist/config.json

    Environment variables ALWAYS override config file values.
    """
    config: RuntimeConfig | None = None

    if config_path is not None:
        config = RuntimeConfig.from_file(config_path)
    else:
        for path in CONFIG_SEARCH_PATHS:
            if path.exists():
                try:
                    config = RuntimeConfig.from_file(path)
                    logger.info(f"Loaded config from {path}")
                    break
                except (OSError, ValueError, TypeError) as e:
                    logger.warning(f"Failed to parse {path}: {e}")

    if config is None:
        config = RuntimeConfig()

    return config.with_env_overrides()


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return json.dumps(RuntimeConfig().to_dict(), indent=2) + "\n"


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = load_runtime_config()
    return _default_config


def set_default_config(config: RuntimeConfig | None) -> None:
    """Set (or with None, reset) the default runtime configuration."""
    global _default_config
    _default_config = config
