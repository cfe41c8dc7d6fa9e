"""
Logger interface.

Services take an ILogger so that library callers and tests get a silent
NullLogger, while the CLI resolves whatever bootstrap configured.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """
    Diagnostic log sink with printf-style arguments.

    Messages are formatted lazily, so timing loops can log per-algorithm
    results at debug level without paying for it when debug is off.
    """

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Per-algorithm timings, resolved configuration."""

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Input source and size."""

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Recoverable problems such as a temp file that could not be removed."""

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """The error that ended a command."""
