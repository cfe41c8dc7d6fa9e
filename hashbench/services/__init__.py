"""
Services for hashbench: input acquisition, timing and benchmark runs.
"""

from .benchmark import (
    BenchmarkOutcome,
    BenchmarkService,
    Measurement,
    SingleMeasurement,
    build_run_configuration,
)
from .inputs import BenchInput, resolve_input
from .timing import FileDigester, Timing, time_file, time_in_memory

__all__ = [
    "BenchInput",
    "BenchmarkOutcome",
    "BenchmarkService",
    "FileDigester",
    "Measurement",
    "SingleMeasurement",
    "Timing",
    "build_run_configuration",
    "resolve_input",
    "time_file",
    "time_in_memory",
]
