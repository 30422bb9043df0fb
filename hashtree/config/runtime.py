"""
Runtime Configuration

Digest algorithm, concurrency and logging settings for hashtree.
"""

from __future__ import annotations

import copy
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from dotenv import find_dotenv, load_dotenv

from hashtree.crypto.hashing import DEFAULT_ALGORITHM, Hasher, get_hasher
from hashtree.schemas.errors import ConfigurationException


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass
class HashTreeConfig:
    """
    Configuration for building and hashing Merkle trees.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction

    Attributes:
        algorithm: hashlib name of the digest used at every tree level
        max_workers: Thread pool size for subtree digests; 1 is sequential
        log_level: Level passed to configure_logging()
    """
    algorithm: str = DEFAULT_ALGORITHM
    max_workers: int = 1
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if isinstance(self.max_workers, bool) or not isinstance(self.max_workers, int):
            raise ConfigurationException(
                f"max_workers must be an integer, got {self.max_workers!r}",
                field_path="max_workers",
            )
        if self.max_workers < 1:
            raise ConfigurationException(
                f"max_workers must be at least 1, got {self.max_workers}",
                field_path="max_workers",
            )
        if not isinstance(getattr(logging, str(self.log_level).upper(), None), int):
            raise ConfigurationException(
                f"Unknown log level: {self.log_level!r}",
                field_path="log_level",
            )

    def hasher(self) -> Hasher:
        """
        Resolve the configured algorithm.

        Raises:
            UnsupportedAlgorithmException: If the algorithm is unavailable.
        """
        return get_hasher(self.algorithm)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Read configuration overrides from environment variables.

        Supported variables:
        - HASHTREE_ALGORITHM: digest algorithm name
        - HASHTREE_MAX_WORKERS: thread pool size for subtree digests
        - HASHTREE_LOG_LEVEL: logging level name

        A .env file found from the working directory upwards is loaded first.
        Variables already set in the process environment take precedence.
        """
        load_dotenv(find_dotenv(usecwd=True))

        overrides: dict[str, Any] = {}

        if os.getenv("HASHTREE_ALGORITHM"):
            overrides["algorithm"] = os.getenv("HASHTREE_ALGORITHM")

        raw_workers = os.getenv("HASHTREE_MAX_WORKERS")
        if raw_workers:
            try:
                overrides["max_workers"] = int(raw_workers)
            except ValueError as e:
                raise ConfigurationException(
                    f"HASHTREE_MAX_WORKERS must be an integer, got {raw_workers!r}",
                    field_path="max_workers",
                ) from e

        if os.getenv("HASHTREE_LOG_LEVEL"):
            overrides["log_level"] = os.getenv("HASHTREE_LOG_LEVEL")

        return overrides

    @classmethod
    def from_env(cls) -> "HashTreeConfig":
        """Load configuration from environment variables over the defaults."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "HashTreeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HashTreeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        unknown = set(data) - {"algorithm", "max_workers", "log_level"}
        if unknown:
            raise ConfigurationException(
                f"Unknown configuration keys: {sorted(unknown)}",
                details={"keys": sorted(unknown)},
            )
        return cls(**data)

    def with_env_overrides(self) -> "HashTreeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)
        for key, value in overrides.items():
            setattr(new_config, key, value)
        new_config.__post_init__()
        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "algorithm": self.algorithm,
            "max_workers": self.max_workers,
            "log_level": self.log_level,
        }


def configure_logging(config: Optional[HashTreeConfig] = None) -> None:
    """Configure root logging from a config (the default config if omitted)."""
    config = config or get_default_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()),
        format=LOG_FORMAT,
    )


# Global default configuration
_default_config: Optional[HashTreeConfig] = None


def get_default_config() -> HashTreeConfig:
    """Get the default configuration, loading it from the environment once."""
    global _default_config
    if _default_config is None:
        _default_config = HashTreeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[HashTreeConfig]) -> None:
    """Replace the default configuration (None resets it)."""
    global _default_config
    _default_config = config
