"""
Service container for hashbench.

Maps an interface type to a dependency-injector provider. Three lifetimes
are used:

- instance: an object built up front (the console presenter)
- singleton: built lazily on first resolve, then shared (the logger)
- factory: rebuilt on every resolve (the algorithm registry, whose
  accumulators must never be shared between runs)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """Process-wide registry of service providers."""

    _instance: ServiceContainer | None = None

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}

    @classmethod
    def get_instance(cls) -> ServiceContainer:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the process-wide container; the next get_instance() starts empty."""
        cls._instance = None

    def register_instance(self, interface: type[T], instance: T) -> None:
        self._providers[interface] = providers.Object(instance)

    def register_singleton(self, interface: type[T], factory: Callable[[], T]) -> None:
        self._providers[interface] = providers.Singleton(factory)

    def register_factory(self, interface: type[T], factory: Callable[[], T]) -> None:
        self._providers[interface] = providers.Factory(factory)

    def resolve(self, interface: type[T]) -> T:
        """
        Raises:
            KeyError: If nothing is registered for ``interface``
        """
        try:
            provider = self._providers[interface]
        except KeyError:
            raise KeyError(f"No provider registered for: {interface.__name__}") from None
        return provider()

    def try_resolve(self, interface: type[T]) -> T | None:
        provider = self._providers.get(interface)
        return None if provider is None else provider()


def get_container() -> ServiceContainer:
    """Get the process-wide service container."""
    return ServiceContainer.get_instance()
