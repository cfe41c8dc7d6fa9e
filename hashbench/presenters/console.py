"""
Console presenter for terminal output.

Writes through click.echo so output follows whatever streams click is
bound to (including CliRunner in tests).
"""

import sys

import click

from ..core.interfaces.presenter import IPresenter


class ConsolePresenter(IPresenter):
    """
    Console output presenter.

    Results go to stdout, diagnostics to stderr.
    """

    def __init__(self, use_color: bool = True) -> None:
        """
        Initialize console presenter.

        Args:
            use_color: Whether to use ANSI color codes on a TTY
        """
        self._use_color = use_color and sys.stderr.isatty()

    def print(self, message: str) -> None:
        """Print a message to output."""
        click.echo(message)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        if self._use_color:
            click.echo(f"\033[91mError: {message}\033[0m", err=True)
        else:
            click.echo(f"Error: {message}", err=True)

    def print_table(self, headers: list[str], rows: list[list[str]]) -> None:
        """
        Print a formatted table.

        Args:
            headers: Column headers
            rows: Table rows
        """
        if not rows:
            return

        widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                if i < len(widths):
                    widths[i] = max(widths[i], len(str(cell)))

        header_line = "  ".join(str(h).ljust(widths[i]) for i, h in enumerate(headers))
        click.echo(header_line.rstrip())
        click.echo("-" * len(header_line.rstrip()))

        for row in rows:
            row_line = "  ".join(
                str(cell).ljust(widths[i]) if i < len(widths) else str(cell)
                for i, cell in enumerate(row)
            )
            click.echo(row_line.rstrip())
