"""
Benchmark input acquisition.

Resolves the bytes and the file a run hashes: either an existing file named
by the user, or a temporary file of random bytes that lives exactly as long
as the run.
"""

from __future__ import annotations

import secrets
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from ..core.di import resolve_or_default
from ..core.exceptions import InputError
from ..core.interfaces.logger import ILogger
from ..core.models.run import RunConfiguration
from .logging import NullLogger

TEMP_PREFIX = "hashbench_"
TEMP_SUFFIX = ".bin"


@dataclass(frozen=True)
class BenchInput:
    """The input of one run.

    Attributes:
        path: File the file-based timings read
        size: File size in bytes
        buffer: File contents, or None when the run does not need them
    """

    path: str
    size: int
    buffer: bytes | None = None


def read_file(path: Path) -> bytes:
    """Read a whole file into memory.

    Raises:
        InputError: If the file cannot be read
    """
    try:
        return path.read_bytes()
    except OSError as e:
        raise InputError(
            f"error reading file {path}: {e.strerror or e}", path=str(path), cause=e
        ) from e
    except MemoryError as e:
        raise InputError(
            f"file {path} is too large to load into memory", path=str(path), cause=e
        ) from e


def generate_random_bytes(size: int) -> bytes:
    """Draw ``size`` bytes from the OS cryptographic random source.

    Raises:
        InputError: If the random source fails
    """
    try:
        return secrets.token_bytes(size)
    except (OSError, NotImplementedError) as e:
        raise InputError(f"failed to generate {size} random bytes: {e}", cause=e) from e
    except (OverflowError, MemoryError) as e:
        raise InputError(
            f"cannot generate {size} random bytes: not enough memory", cause=e
        ) from e


def write_temp_file(data: bytes) -> str:
    """Write data to a new, uniquely named temporary file and return its path.

    The file is removed again if writing fails.

    Raises:
        InputError: If the temporary file cannot be created or written
    """
    path: str | None = None
    try:
        with tempfile.NamedTemporaryFile(prefix=TEMP_PREFIX, suffix=TEMP_SUFFIX, delete=False) as f:
            path = f.name
            f.write(data)
    except OSError as e:
        if path is not None:
            Path(path).unlink(missing_ok=True)
        raise InputError(f"failed to write temporary file: {e}", path=path, cause=e) from e
    return path


def _remove_temp_file(path: str, logger: ILogger) -> None:
    try:
        Path(path).unlink(missing_ok=True)
        logger.debug("Removed temporary input %s", path)
    except OSError as e:
        logger.warning("Failed to remove temporary input %s: %s", path, e)


@contextmanager
def resolve_input(config: RunConfiguration, logger: ILogger | None = None) -> Iterator[BenchInput]:
    """Yield the input for a run described by ``config``.

    A named file must exist and be a regular file; there is no fallback to
    random data when an explicit path is missing. Without a file, random
    bytes are written to a temporary file that is removed when the block
    exits, whether it exits normally or by an exception.

    Raises:
        InputError: If the input cannot be acquired
    """
    logger = logger or resolve_or_default(ILogger, NullLogger)

    if config.file_path:
        path = Path(config.file_path)
        if not path.exists():
            raise InputError(f"file {config.file_path} doesn't exist", path=config.file_path)
        if not path.is_file():
            raise InputError(f"{config.file_path} is not a regular file", path=config.file_path)

        buffer = read_file(path) if config.wants_buffer else None
        size = len(buffer) if buffer is not None else path.stat().st_size
        logger.info("Using input file %s (%d bytes)", path, size)
        yield BenchInput(path=str(path), size=size, buffer=buffer)
        return

    if not config.allow_random:
        raise InputError("no input file given and random input generation is disabled")

    size = config.random_size_bytes
    data = generate_random_bytes(size)
    temp_path = write_temp_file(data)
    logger.info("Generated random input %s (%d bytes)", temp_path, size)
    try:
        yield BenchInput(
            path=temp_path,
            size=size,
            buffer=data if config.wants_buffer else None,
        )
    finally:
        _remove_temp_file(temp_path, logger)
