"""
Configuration management for sphcollection.

This module provides Pydantic-based configuration schemas with support
for loading from TOML and YAML files, plus the process-wide active
configuration used by the precision layer and the registry.
"""

from typing import Optional

from sphcollection.config.schema import (
    Config,
    PrecisionConfig,
    RegistryConfig,
    LoggingConfig,
)

__all__ = [
    "Config",
    "PrecisionConfig",
    "RegistryConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "reset_config",
]

_active_config: Optional[Config] = None


def get_config() -> Config:
    """Return the active configuration, creating the default on first use."""
    global _active_config
    if _active_config is None:
        _active_config = Config()
    return _active_config


def set_config(config: Config) -> None:
    """Replace the active configuration."""
    global _active_config
    _active_config = config


def reset_config() -> None:
    """Restore the default configuration."""
    global _active_config
    _active_config = None
