"""
Configuration models.

Provides Pydantic models for hashbench configuration with validation.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import ConfigDict, field_validator

from .base import BenchBaseModel

# Type aliases
LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(BenchBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env strings
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class BenchmarkConfig(ConfigBaseModel):
    """Benchmark defaults section.

    Unit, format and algorithm are kept as plain strings here; they are
    checked when the run configuration is built so that a bad value from
    any source is reported the same way.
    """

    size: int = 10
    unit: str = "ns"
    format: str = "yaml"
    algorithm: str = "sha3_512"
    escape_quotes: bool = False
    random: bool = True

    @field_validator("unit", "format", "algorithm", mode="before")
    @classmethod
    def normalize_name(cls, v: Any) -> Any:
        """Lower-case and strip selector strings."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v
