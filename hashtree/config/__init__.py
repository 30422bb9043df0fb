"""
Runtime Configuration Module

Configuration loading for hashtree.
"""

from .runtime import (
    HashTreeConfig,
    configure_logging,
    get_default_config,
    set_default_config,
)

__all__ = [
    "HashTreeConfig",
    "configure_logging",
    "get_default_config",
    "set_default_config",
]
