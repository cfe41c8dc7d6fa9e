"""
Click-based CLI for hashbench.

This module provides the main Click command group and serves as the
entry point for the hashbench CLI.

Usage:
    from hashbench.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import click

from ..core.bootstrap import bootstrap
from .context import BenchContext
from .decorators import report_errors

# Version is loaded from package metadata
try:
    from importlib.metadata import version

    __version__ = version("hashbench-cli")
except Exception:
    __version__ = "0.1.0"


@report_errors
def _create_context() -> BenchContext:
    bench_ctx = BenchContext.create()
    bootstrap(bench_ctx.settings)
    return bench_ctx


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="hashbench")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """hashbench - hash algorithm timing benchmarks

    Times cryptographic and non-cryptographic hash digests over a file or
    generated random data and reports the results as YAML, JSON or plain
    text.

    \b
    Commands:
        hashbench run            Time all algorithms
        hashbench algorithms     List algorithms in run order
        hashbench config         View configuration
    """
    ctx.ensure_object(dict)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    else:
        ctx.obj = _create_context()


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


# Register commands at module load time
register_commands()


__all__ = [
    "BenchContext",
    "__version__",
    "cli",
    "register_commands",
]
