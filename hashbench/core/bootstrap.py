"""
Application bootstrap for hashbench.

Initializes the DI container with the presenter, the logger and the
algorithm registry factory. Called once at CLI startup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .interfaces.presenter import IPresenter

if TYPE_CHECKING:
    from .settings import BenchSettings

_initialized = False


def bootstrap(settings: BenchSettings | None = None) -> ServiceContainer:
    """
    Bootstrap the hashbench application.

    Args:
        settings: Loaded settings; logging options are taken from here

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    _register_core_services(container, settings)

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer, settings: BenchSettings | None) -> None:
    """Register core application services."""
    from ..hashing.registry import HashAlgorithmRegistry, build_default_registry
    from ..presenters.console import ConsolePresenter
    from ..services.logging import BenchLogger

    container.register_instance(IPresenter, ConsolePresenter())  # type: ignore[type-abstract]

    def create_logger() -> ILogger:
        if settings is None:
            return BenchLogger()
        return BenchLogger.from_config(settings.logging)

    container.register_singleton(ILogger, create_logger)  # type: ignore[type-abstract]

    # Every resolve builds a new table with untouched accumulators
    container.register_factory(HashAlgorithmRegistry, build_default_registry)


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if the application has been bootstrapped."""
    return _initialized
