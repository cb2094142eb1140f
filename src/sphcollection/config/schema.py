"""
Pydantic configuration schemas for sphcollection.

This module defines the configuration classes using Pydantic v2 for
type-safe configuration management with validation and serialization.
"""

import sys
from pathlib import Path
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sphcollection.core.precision import Precision

__all__ = [
    "PrecisionConfig",
    "RegistryConfig",
    "LoggingConfig",
    "Config",
]


class PrecisionConfig(BaseModel):
    """Configuration for precision-generic evaluation."""

    model_config = ConfigDict(extra="forbid")

    default: Precision = Field(
        default=Precision.DOUBLE,
        description="Precision used when no input carries a floating dtype",
    )

    @field_validator("default", mode="before")
    @classmethod
    def parse_precision(cls, v: Any) -> Precision:
        """Accept aliases such as 'single', 'double', 'f4'."""
        return Precision.parse(v)


class RegistryConfig(BaseModel):
    """Configuration for the function registry."""

    model_config = ConfigDict(extra="forbid")

    load_entry_points: bool = Field(
        default=True,
        description="Discover third-party functions through entry points",
    )
    entry_point_group: str = Field(
        default="sphcollection.functions",
        min_length=1,
        description="Entry point group scanned for third-party functions",
    )


class LoggingConfig(BaseModel):
    """Configuration for library logging."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Level of the 'sphcollection' logger",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept lower-case level names."""
        return v.upper() if isinstance(v, str) else v


class Config(BaseModel):
    """
    Main configuration class for sphcollection.

    This class combines all sub-configurations and provides methods
    for loading from and saving to TOML/YAML files.

    Example:
        >>> config = Config.from_toml("sphcollection.toml")
        >>> config = Config(precision=PrecisionConfig(default="float32"))
    """

    model_config = ConfigDict(extra="forbid")

    precision: PrecisionConfig = Field(
        default_factory=PrecisionConfig,
        description="Precision configuration",
    )
    registry: RegistryConfig = Field(
        default_factory=RegistryConfig,
        description="Registry configuration",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )

    @classmethod
    def from_toml(cls, path: Union[str, Path]) -> "Config":
        """Read a TOML file. Missing sections keep their defaults."""
        path = _existing(path)
        if sys.version_info >= (3, 11):
            import tomllib
        else:
            import tomli as tomllib

        with open(path, "rb") as f:
            return cls(**tomllib.load(f))

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "Config":
        """Read a YAML file. An empty file gives the default configuration."""
        import yaml

        path = _existing(path)
        with open(path, "r") as f:
            return cls(**(yaml.safe_load(f) or {}))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Config":
        """
        Read a configuration file, choosing the parser by suffix.

        Raises:
            ValueError: For suffixes other than .toml, .yaml and .yml
        """
        path = Path(path)
        suffix = path.suffix.lower()
        if suffix == ".toml":
            return cls.from_toml(path)
        if suffix in (".yaml", ".yml"):
            return cls.from_yaml(path)
        raise ValueError(f"Unsupported config format: {suffix}")

    def to_toml(self, path: Union[str, Path]) -> None:
        """Write the configuration as TOML."""
        import tomli_w

        with open(path, "wb") as f:
            tomli_w.dump(self.model_dump(mode="json"), f)

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Write the configuration as YAML, keeping section order."""
        import yaml

        with open(path, "w") as f:
            yaml.safe_dump(self.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)


def _existing(path: Union[str, Path]) -> Path:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    return path
