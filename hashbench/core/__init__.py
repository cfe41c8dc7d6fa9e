"""
Core infrastructure for hashbench.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Settings loading
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container
from .exceptions import (
    ConfigError,
    FormatError,
    HashbenchException,
    HashingError,
    InputError,
)

__all__ = [
    "ConfigError",
    "FormatError",
    "HashbenchException",
    "HashingError",
    "InputError",
    "ServiceContainer",
    "bootstrap",
    "get_container",
    "is_initialized",
    "reset",
]
