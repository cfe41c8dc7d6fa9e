"""
Native Click implementation of the algorithms command.

Usage: hashbench algorithms
"""

from __future__ import annotations

import click

from ...core.di import resolve_or_default
from ...core.interfaces.presenter import IPresenter
from ...hashing.registry import HashAlgorithmRegistry, build_default_registry
from ...presenters.console import ConsolePresenter


@click.command("algorithms")
def algorithms() -> None:
    """List the benchmarked algorithms in run order."""
    registry = resolve_or_default(HashAlgorithmRegistry, build_default_registry)
    presenter = resolve_or_default(IPresenter, ConsolePresenter)  # type: ignore[type-abstract]

    rows = [
        [entry.name, str(entry.strategy.digest_size * 8), type(entry.strategy).__name__]
        for entry in registry
    ]
    presenter.print_table(["Algorithm", "Bits", "Strategy"], rows)
