"""
Native Click implementation of the config command.

Usage: hashbench config [list|get] [key]
"""

import click

from ...config import config_list, get_nested
from ..context import BenchContext


@click.group("config", invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """View configuration.

    Defaults come from .hashbench.toml (or [tool.hashbench] in
    pyproject.toml) and HASHBENCH_<SECTION>__<KEY> environment variables.

    \b
    Examples:

        hashbench config list               # List all options

        hashbench config get benchmark.unit # Get the effective value
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@config.command("list")
def config_list_cmd() -> None:
    """List all config options."""
    click.echo("Available config options:")
    click.echo("")

    for key, info in config_list().items():
        click.echo(f"  {key}")
        click.echo(f"    {info['description']}")
        click.echo(f"    Default: {info['default']}")
        click.echo("")


@config.command("get")
@click.argument("key")
@click.pass_obj
def config_get_cmd(ctx: BenchContext, key: str) -> None:
    """Get an effective config value.

    Arguments:

        KEY    The config key to get (e.g. benchmark.unit)
    """
    value = get_nested(ctx.settings.to_dict(), key)
    if value is None:
        click.echo(f"{key}: (not set)")
    else:
        click.echo(f"{key}: {value}")

    if ctx.config_file:
        click.echo(f"  (config file: {ctx.config_file})")
    if ctx.settings.config_error:
        click.echo(f"  (config file ignored: {ctx.settings.config_error})")
