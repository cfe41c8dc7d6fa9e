"""
Pydantic models for hashbench.

This package provides typed, validated models for configuration and run data.
All models use Pydantic v2.
"""

# Base models
from .base import BenchBaseModel, ImmutableModel

# Configuration models
from .config import BenchmarkConfig, LoggingConfig

# Run models
from .run import MEGABYTE, HashResult, OutputFormat, RunConfiguration, TimeUnit

__all__ = [
    "MEGABYTE",
    "BenchBaseModel",
    "BenchmarkConfig",
    "HashResult",
    "ImmutableModel",
    "LoggingConfig",
    "OutputFormat",
    "RunConfiguration",
    "TimeUnit",
]
