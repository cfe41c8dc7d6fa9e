"""
Run models.

The run configuration resolved for a single invocation, and the
per-algorithm timing results it produces.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from ..exceptions import ConfigError
from .base import ImmutableModel

MEGABYTE = 1024 * 1024


class TimeUnit(str, Enum):
    """Output time unit, valued by its abbreviation."""

    NANOSECOND = "ns"
    MICROSECOND = "us"
    MILLISECOND = "ms"
    SECOND = "s"

    @property
    def nanoseconds(self) -> int:
        """Magnitude of one unit in nanoseconds."""
        return _UNIT_NANOSECONDS[self]

    @classmethod
    def parse(cls, value: str) -> TimeUnit:
        """Parse a unit abbreviation (case-insensitive).

        Raises:
            ConfigError: If the unit is not one of ns, us, ms, s
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            supported = ", ".join(u.value for u in cls)
            raise ConfigError(
                f"invalid units specification '{value}' (supported: {supported})",
                key="unit",
            ) from None


_UNIT_NANOSECONDS = {
    TimeUnit.NANOSECOND: 1,
    TimeUnit.MICROSECOND: 1_000,
    TimeUnit.MILLISECOND: 1_000_000,
    TimeUnit.SECOND: 1_000_000_000,
}


class OutputFormat(str, Enum):
    """Output representation. USER is the plain, human-readable form."""

    USER = "user"
    JSON = "json"
    YAML = "yaml"

    @classmethod
    def parse(cls, value: str) -> OutputFormat:
        """Parse a format name (case-insensitive).

        Raises:
            ConfigError: If the format is not one of user, json, yaml
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            supported = ", ".join(f.value for f in cls)
            raise ConfigError(
                f"invalid format '{value}' (supported formats: {supported})",
                key="format",
            ) from None


class RunConfiguration(ImmutableModel):
    """Everything one benchmark invocation needs, fixed for its duration.

    Attributes:
        file_path: Input file, or None to generate random input
        random_size_bytes: Size of generated input in bytes
        time_unit: Unit timings are reported in
        output_format: How results are rendered
        escape_quotes: Escape '"' in the rendered output
        selected_algorithm: Algorithm used by the plain (user) format
        allow_random: Whether random input may be generated
    """

    file_path: str | None = None
    random_size_bytes: int = Field(default=10 * MEGABYTE, ge=0)
    time_unit: TimeUnit = TimeUnit.NANOSECOND
    output_format: OutputFormat = OutputFormat.YAML
    escape_quotes: bool = False
    selected_algorithm: str = "sha3_512"
    allow_random: bool = True

    @property
    def wants_buffer(self) -> bool:
        """Whether the in-memory timing path runs (all but the plain format)."""
        return self.output_format != OutputFormat.USER


class HashResult(ImmutableModel):
    """Timings for one registry entry, in the configured unit.

    ``bytes_elapsed`` is the in-memory run over the already-read buffer and
    includes no I/O; ``file_elapsed`` re-reads the file and includes I/O.
    """

    algorithm: str
    bytes_elapsed: int | None = None
    file_elapsed: int | None = None

    def to_record(self) -> dict[str, str | int]:
        """Serializable mapping with the published field names."""
        record: dict[str, str | int] = {"alg": self.algorithm}
        if self.bytes_elapsed is not None:
            record["bytes"] = self.bytes_elapsed
        if self.file_elapsed is not None:
            record["file"] = self.file_elapsed
        return record
