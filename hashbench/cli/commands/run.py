"""
Native Click implementation of the run command.

Usage: hashbench run [--file PATH] [--size MB] [--unit U] [--format F] [--alg NAME]
"""

from __future__ import annotations

import click

from ...core.di import resolve_or_default
from ...core.interfaces.presenter import IPresenter
from ...presenters.console import ConsolePresenter
from ...presenters.formatting import render_outcome
from ...services.benchmark import BenchmarkService, build_run_configuration
from ..context import BenchContext
from ..decorators import report_errors


@click.command("run")
@click.option(
    "--file",
    "file_path",
    type=str,
    default=None,
    help="File to hash (a random file is generated if this is omitted).",
)
@click.option(
    "--size",
    type=int,
    default=None,
    help="Size in megabytes of the generated random file. [default: 10]",
)
@click.option(
    "--unit",
    type=str,
    default=None,
    help="Time unit for reported timings: ns, us, ms or s. [default: ns]",
)
@click.option(
    "--format",
    "output_format",
    type=str,
    default=None,
    help="Output format: json, yaml or user (plain text). [default: yaml]",
)
@click.option(
    "--alg",
    "algorithm",
    type=str,
    default=None,
    help="Algorithm timed by the user format. [default: sha3_512]",
)
@click.option(
    "--escape-quote",
    "escape_quote",
    is_flag=True,
    help='Escape " characters in the output.',
)
@click.option(
    "--random/--no-random",
    "allow_random",
    default=None,
    help="Allow generating a random file when no file is given. [default: random]",
)
@click.pass_obj
@report_errors
def run(
    ctx: BenchContext,
    file_path: str | None,
    size: int | None,
    unit: str | None,
    output_format: str | None,
    algorithm: str | None,
    escape_quote: bool,
    allow_random: bool | None,
) -> None:
    """Time every hash algorithm over a file or random data.

    Each algorithm is timed twice: over the file contents already held in
    memory ("bytes", no I/O) and over the file read from disk ("file").
    The user format times only the --alg algorithm over the file and
    prints its digest and throughput.

    \b
    Examples:

        hashbench run                            # 10 MB of random data, YAML

        hashbench run --file data.bin --format json --unit us

        hashbench run --format user --alg sha3_256 --file data.bin
    """
    config = build_run_configuration(
        ctx.settings.benchmark,
        file_path=file_path,
        size=size,
        unit=unit,
        output_format=output_format,
        algorithm=algorithm,
        escape_quotes=escape_quote,
        allow_random=allow_random,
    )

    outcome = BenchmarkService().execute(config)

    presenter = resolve_or_default(IPresenter, ConsolePresenter)  # type: ignore[type-abstract]
    presenter.print(render_outcome(outcome))
