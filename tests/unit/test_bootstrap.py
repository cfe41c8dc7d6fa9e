"""
Unit tests for application bootstrap and the service container.
"""

import logging

import pytest

from hashbench.core.bootstrap import bootstrap, is_initialized, reset
from hashbench.core.container import ServiceContainer, get_container
from hashbench.core.di import resolve_or_default
from hashbench.core.interfaces.logger import ILogger
from hashbench.core.interfaces.presenter import IPresenter
from hashbench.core.models.config import LoggingConfig
from hashbench.core.settings import BenchSettings
from hashbench.hashing import HashAlgorithmRegistry, build_default_registry
from hashbench.presenters.console import ConsolePresenter
from hashbench.services.logging import BenchLogger, NullLogger


class TestBootstrap:
    def test_registers_core_services(self):
        container = bootstrap()
        assert is_initialized()
        assert isinstance(container.resolve(IPresenter), ConsolePresenter)
        assert isinstance(container.resolve(ILogger), BenchLogger)
        assert isinstance(container.resolve(HashAlgorithmRegistry), HashAlgorithmRegistry)

    def test_is_idempotent(self):
        first = bootstrap()
        presenter = first.resolve(IPresenter)
        assert bootstrap() is first
        assert first.resolve(IPresenter) is presenter

    def test_registry_is_rebuilt_per_resolve(self):
        """Each resolve hands out a table nobody has hashed with yet."""
        container = bootstrap()
        first = container.resolve(HashAlgorithmRegistry)
        second = container.resolve(HashAlgorithmRegistry)
        assert first is not second

    def test_logger_is_singleton(self):
        container = bootstrap()
        assert container.resolve(ILogger) is container.resolve(ILogger)

    def test_logger_uses_settings(self):
        settings = BenchSettings(logging=LoggingConfig(level="debug", console=True))
        logger = bootstrap(settings).resolve(ILogger)
        assert isinstance(logger, BenchLogger)
        assert any(type(h) is logging.StreamHandler for h in logger.handlers)
        assert logging.getLogger("hashbench").level == logging.DEBUG

    def test_reset_clears_container(self):
        first = bootstrap()
        reset()
        assert not is_initialized()
        assert get_container() is not first
        assert get_container().try_resolve(ILogger) is None


class TestServiceContainer:
    def test_resolve_unregistered_raises(self):
        with pytest.raises(KeyError):
            ServiceContainer().resolve(ILogger)

    def test_instance_is_returned_as_is(self):
        container = ServiceContainer()
        logger = NullLogger()
        container.register_instance(ILogger, logger)
        assert container.resolve(ILogger) is logger

    def test_singleton_factory_runs_once(self):
        calls = []

        def factory():
            calls.append(1)
            return NullLogger()

        container = ServiceContainer()
        container.register_singleton(ILogger, factory)
        assert container.resolve(ILogger) is container.resolve(ILogger)
        assert len(calls) == 1


class TestResolveOrDefault:
    def test_falls_back_without_bootstrap(self):
        assert isinstance(resolve_or_default(ILogger, NullLogger), NullLogger)

    def test_prefers_registered_service(self):
        stub = HashAlgorithmRegistry()
        get_container().register_instance(HashAlgorithmRegistry, stub)
        assert resolve_or_default(HashAlgorithmRegistry, build_default_registry) is stub
