"""
Result formatting for hashbench output.

Converts raw nanosecond measurements into the configured unit and renders
them as JSON, YAML or the plain single-algorithm form.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import TYPE_CHECKING

import yaml

from ..core.exceptions import FormatError
from ..core.models.run import MEGABYTE, HashResult, OutputFormat, TimeUnit

if TYPE_CHECKING:
    from ..services.benchmark import BenchmarkOutcome, Measurement, SingleMeasurement


def convert_duration(elapsed_ns: int, unit: TimeUnit) -> int:
    """Express a duration as a whole number of ``unit``.

    Truncates toward zero; the remainder is dropped.

    Examples:
        >>> convert_duration(5_000_000, TimeUnit.MILLISECOND)
        5
        >>> convert_duration(1_999_999, TimeUnit.MILLISECOND)
        1
    """
    return elapsed_ns // unit.nanoseconds


def throughput_mb_per_second(size_bytes: int, elapsed_seconds: float) -> float:
    """Throughput in MB/s (MB = 1,048,576 bytes).

    A zero elapsed time gives inf for a non-empty input and 0.0 for an
    empty one.
    """
    megabytes = size_bytes / MEGABYTE
    if elapsed_seconds <= 0:
        return float("inf") if megabytes > 0 else 0.0
    return megabytes / elapsed_seconds


def to_results(measurements: Iterable[Measurement], unit: TimeUnit) -> list[HashResult]:
    """Convert measurements to results in ``unit``, keeping their order."""
    return [
        HashResult(
            algorithm=m.algorithm,
            bytes_elapsed=None if m.bytes_ns is None else convert_duration(m.bytes_ns, unit),
            file_elapsed=convert_duration(m.file_ns, unit),
        )
        for m in measurements
    ]


def render_results(results: list[HashResult], output_format: OutputFormat) -> str:
    """Serialize a result table as JSON or YAML.

    Raises:
        FormatError: If the format is not a table format or serialization fails
    """
    records = [r.to_record() for r in results]
    try:
        if output_format == OutputFormat.JSON:
            return json.dumps(records, separators=(",", ":"))
        if output_format == OutputFormat.YAML:
            return yaml.safe_dump(records, default_flow_style=False, sort_keys=False).rstrip("\n")
    except (TypeError, ValueError, yaml.YAMLError) as e:
        raise FormatError(
            f"failed to encode output: {e}", output_format=str(output_format.value), cause=e
        ) from e

    raise FormatError(
        f"invalid format {output_format.value} (supported formats are yaml or json)",
        output_format=str(output_format.value),
    )


def render_single(measurement: SingleMeasurement) -> str:
    """Render the plain form: a digest line and a stats line.

    Example:
        9e3a...c1 /tmp/hashbench_x1y2.bin
        time: 0.012345s, throughput: 810.12 MB/s
    """
    seconds = measurement.elapsed_seconds
    rate = throughput_mb_per_second(measurement.size, seconds)
    return (
        f"{measurement.digest.hex()} {measurement.path}\n"
        f"time: {seconds:.6f}s, throughput: {rate:.2f} MB/s"
    )


def escape_quotes(text: str) -> str:
    r"""Escape every double quote as \"."""
    return text.replace('"', '\\"')


def render_outcome(outcome: BenchmarkOutcome) -> str:
    """Render a benchmark outcome according to its run configuration.

    Raises:
        FormatError: If rendering fails
    """
    config = outcome.config
    if config.output_format == OutputFormat.USER:
        if outcome.single is None:
            raise FormatError("no measurement to render", output_format=OutputFormat.USER.value)
        text = render_single(outcome.single)
    else:
        results = to_results(outcome.measurements, config.time_unit)
        text = render_results(results, config.output_format)

    if config.escape_quotes:
        text = escape_quotes(text)
    return text
