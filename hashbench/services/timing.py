"""
Timing harness.

Two measurements exist per algorithm and they do different work:

- time_in_memory() hashes a buffer that is already in memory; no I/O.
- time_file() reads and hashes the file itself through FileDigester; the
  reads are part of what is measured.

Only the digest work sits between the two clock reads. Algorithm lookup,
hasher construction and opening the file happen before the clock starts.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from ..core.exceptions import HashingError
from ..hashing.accumulator import SingleUseHasher
from ..hashing.registry import HashAlgorithmRegistry


@dataclass(frozen=True)
class Timing:
    """A digest and the nanoseconds it took to compute."""

    digest: bytes
    elapsed_ns: int

    @property
    def elapsed_seconds(self) -> float:
        return self.elapsed_ns / 1_000_000_000


class FileDigester:
    """
    Computes whole-file digests for algorithms selected by name.

    Reads the file in fixed-size chunks so memory use does not grow with
    the file.
    """

    CHUNK_SIZE = 8192 * 1024  # 8MB chunks

    def __init__(self, registry: HashAlgorithmRegistry) -> None:
        self._registry = registry

    @contextmanager
    def prepare(self, selector: str, path: str | Path) -> Iterator[Callable[[], bytes]]:
        """
        Set up a whole-file digest without reading any data yet.

        Resolves the algorithm, builds its hasher and opens the file, then
        yields a callable that streams the file through the hasher and
        returns the digest. The file is closed when the block exits.

        Raises:
            ConfigError: If the selector names no registered algorithm
            HashingError: If the file cannot be opened or read
        """
        strategy = self._registry.resolve(selector).strategy
        hasher = strategy.create_hasher()
        chunk_size = self.CHUNK_SIZE

        try:
            with open(path, "rb") as f:

                def read_digest() -> bytes:
                    for chunk in iter(lambda: f.read(chunk_size), b""):
                        strategy.update(hasher, chunk)
                    return strategy.digest(hasher)

                yield read_digest
        except OSError as e:
            raise HashingError(
                f"failed to hash file {path}: {e.strerror or e}",
                algorithm=selector,
                cause=e,
            ) from e


def time_in_memory(hasher: SingleUseHasher, buffer: bytes) -> Timing:
    """Time one digest of ``buffer`` on a fresh accumulator.

    Raises:
        HashingError: If ``hasher`` has already been consumed
    """
    start = time.perf_counter_ns()
    digest = hasher.consume(buffer)
    elapsed = time.perf_counter_ns() - start
    return Timing(digest=digest, elapsed_ns=elapsed)


def time_file(digester: FileDigester, selector: str, path: str | Path) -> Timing:
    """Time reading and digesting the whole file at ``path``."""
    with digester.prepare(selector, path) as read_digest:
        start = time.perf_counter_ns()
        digest = read_digest()
        elapsed = time.perf_counter_ns() - start
    return Timing(digest=digest, elapsed_ns=elapsed)
