"""
Diagnostic logging for hashbench runs.

Benchmark output never goes through here; it is printed by the presenter.
The log carries what a run did: its resolved configuration, where the
input came from, per-algorithm timings and temp-file cleanup.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..core.interfaces.logger import ILogger

if TYPE_CHECKING:
    from ..core.models.config import LoggingConfig

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class BenchLogger(ILogger):
    """
    stdlib logger with optional stderr and rotating-file output.

    With neither output enabled the logger is silent. It never falls through
    to logging.lastResort, which would put a second line next to the CLI's
    own error diagnostic.
    """

    DEFAULT_LOG_FILE = Path.home() / ".hashbench" / "hashbench.log"
    MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 3
    FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    def __init__(
        self,
        level: str = "warning",
        console: bool = False,
        log_file: Path | None = None,
        name: str = "hashbench",
    ) -> None:
        """
        Args:
            level: Minimum level written (debug, info, warning, error)
            console: Write records to stderr
            log_file: Rotating log file to append to, if any
            name: stdlib logger name
        """
        self._logger = logging.getLogger(name)
        self._logger.handlers.clear()
        self._logger.propagate = False
        self._logger.setLevel(_LEVELS.get(level.lower(), logging.WARNING))

        formatter = logging.Formatter(self.FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

        if console:
            self._attach(logging.StreamHandler(sys.stderr), formatter)

        if log_file is not None:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            self._attach(
                RotatingFileHandler(
                    log_file, maxBytes=self.MAX_FILE_SIZE, backupCount=self.BACKUP_COUNT
                ),
                formatter,
            )

        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

    @classmethod
    def from_config(cls, config: LoggingConfig) -> BenchLogger:
        """Build the logger described by the [logging] settings section."""
        return cls(
            level=config.level,
            console=config.console,
            log_file=cls.DEFAULT_LOG_FILE if config.file else None,
        )

    def _attach(self, handler: logging.Handler, formatter: logging.Formatter) -> None:
        handler.setFormatter(formatter)
        self._logger.addHandler(handler)

    @property
    def handlers(self) -> tuple[logging.Handler, ...]:
        return tuple(self._logger.handlers)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)


class NullLogger(ILogger):
    """Discards everything; the fallback when nothing has been bootstrapped."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass
