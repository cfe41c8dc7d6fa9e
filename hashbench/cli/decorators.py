"""
Click decorators for hashbench CLI commands.

- report_errors: Turns a HashbenchException into one diagnostic line on
  stderr and the exception's exit code
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from ..core.di import resolve_or_default
from ..core.exceptions import HashbenchException
from ..core.interfaces.logger import ILogger
from ..core.interfaces.presenter import IPresenter
from ..presenters.console import ConsolePresenter
from ..services.logging import NullLogger

F = TypeVar("F", bound=Callable[..., Any])


def report_errors(f: F) -> F:
    """Decorator reporting hashbench errors as a single diagnostic line.

    Nothing is retried: the first error ends the command. The full error,
    context included, goes to the log; the user sees only its message.

    Usage:
        @click.command()
        @click.pass_obj
        @report_errors
        def run(ctx: BenchContext, ...):
            ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except HashbenchException as e:
            resolve_or_default(ILogger, NullLogger).error("%s: %s", type(e).__name__, e)
            resolve_or_default(IPresenter, ConsolePresenter).print_error(e.message)  # type: ignore[type-abstract]
            raise SystemExit(e.exit_code) from e

    return wrapper  # type: ignore[return-value]
