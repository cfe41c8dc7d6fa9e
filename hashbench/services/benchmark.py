"""
Benchmark service.

Resolves the run configuration, acquires the input and walks the algorithm
registry through the timing harness. Rendering is left to the presenters.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..core.di import resolve_or_default
from ..core.exceptions import ConfigError
from ..core.interfaces.logger import ILogger
from ..core.models.config import BenchmarkConfig
from ..core.models.run import MEGABYTE, OutputFormat, RunConfiguration, TimeUnit
from ..hashing.registry import HashAlgorithmRegistry, build_default_registry
from .inputs import BenchInput, resolve_input
from .logging import NullLogger
from .timing import FileDigester, time_file, time_in_memory


@dataclass(frozen=True)
class Measurement:
    """Raw nanosecond timings for one algorithm.

    ``bytes_ns`` is None when the in-memory path did not run.
    """

    algorithm: str
    bytes_ns: int | None
    file_ns: int


@dataclass(frozen=True)
class SingleMeasurement:
    """One algorithm timed over a file, for the plain (user) format."""

    algorithm: str
    path: str
    size: int
    digest: bytes
    elapsed_ns: int

    @property
    def elapsed_seconds(self) -> float:
        return self.elapsed_ns / 1_000_000_000


@dataclass(frozen=True)
class BenchmarkOutcome:
    """What a run produced: either the full table or a single measurement."""

    config: RunConfiguration
    measurements: tuple[Measurement, ...] = ()
    single: SingleMeasurement | None = None


def build_run_configuration(
    defaults: BenchmarkConfig,
    *,
    file_path: str | None = None,
    size: int | None = None,
    unit: str | None = None,
    output_format: str | None = None,
    algorithm: str | None = None,
    escape_quotes: bool = False,
    allow_random: bool | None = None,
) -> RunConfiguration:
    """Merge command-line values over configured defaults.

    Options left as None fall back to ``defaults``.

    Raises:
        ConfigError: For an invalid unit, format or negative size
    """
    size_mb = defaults.size if size is None else size
    if size_mb < 0:
        raise ConfigError(f"invalid size {size_mb} (must be zero or more megabytes)", key="size")

    return RunConfiguration(
        file_path=file_path or None,
        random_size_bytes=size_mb * MEGABYTE,
        time_unit=TimeUnit.parse(unit if unit is not None else defaults.unit),
        output_format=OutputFormat.parse(
            output_format if output_format is not None else defaults.format
        ),
        escape_quotes=escape_quotes or defaults.escape_quotes,
        selected_algorithm=(algorithm if algorithm is not None else defaults.algorithm)
        .strip()
        .lower(),
        allow_random=defaults.random if allow_random is None else allow_random,
    )


def _resolve_registry() -> HashAlgorithmRegistry:
    return resolve_or_default(HashAlgorithmRegistry, build_default_registry)


class BenchmarkService:
    """
    Runs hash benchmarks.

    A new registry is built for every run, so every in-memory measurement
    gets an accumulator no earlier run has touched.
    """

    def __init__(
        self,
        registry_factory: Callable[[], HashAlgorithmRegistry] | None = None,
        logger: ILogger | None = None,
    ) -> None:
        self._registry_factory = registry_factory or _resolve_registry
        self._logger = logger or resolve_or_default(ILogger, NullLogger)

    def execute(self, config: RunConfiguration) -> BenchmarkOutcome:
        """
        Run the benchmark described by ``config``.

        The selected algorithm is checked before any input is touched.

        Raises:
            ConfigError: If the selected algorithm is unknown
            InputError: If the input cannot be acquired
            HashingError: If a digest computation fails
        """
        registry = self._registry_factory()
        entry = registry.resolve(config.selected_algorithm)
        self._logger.debug("Run configuration: %s", config.model_dump(mode="json"))

        with resolve_input(config, self._logger) as bench_input:
            if config.output_format == OutputFormat.USER:
                single = self.measure_single(registry, entry.name, bench_input)
                return BenchmarkOutcome(config=config, single=single)
            measurements = self.measure_all(registry, bench_input)
            return BenchmarkOutcome(config=config, measurements=tuple(measurements))

    def measure_all(
        self, registry: HashAlgorithmRegistry, bench_input: BenchInput
    ) -> list[Measurement]:
        """Time every registry entry, in registry order.

        Each entry is timed over the in-memory buffer (when one was loaded)
        and then over the file.
        """
        digester = FileDigester(registry)
        measurements: list[Measurement] = []

        for entry in registry:
            bytes_ns: int | None = None
            if bench_input.buffer is not None:
                hasher = entry.fresh_hasher()
                bytes_ns = time_in_memory(hasher, bench_input.buffer).elapsed_ns
            file_ns = time_file(digester, entry.file_selector, bench_input.path).elapsed_ns

            self._logger.debug("%s: bytes=%sns file=%dns", entry.name, bytes_ns, file_ns)
            measurements.append(
                Measurement(algorithm=entry.name, bytes_ns=bytes_ns, file_ns=file_ns)
            )

        return measurements

    def measure_single(
        self, registry: HashAlgorithmRegistry, algorithm: str, bench_input: BenchInput
    ) -> SingleMeasurement:
        """Time one algorithm over the input file."""
        entry = registry.resolve(algorithm)
        timing = time_file(FileDigester(registry), entry.file_selector, bench_input.path)
        self._logger.debug("%s: file=%dns", entry.name, timing.elapsed_ns)
        return SingleMeasurement(
            algorithm=entry.name,
            path=bench_input.path,
            size=bench_input.size,
            digest=timing.digest,
            elapsed_ns=timing.elapsed_ns,
        )
