"""CLI entry point: registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="oo-metrics",
    help="oo-metrics - Inheritance and encapsulation metrics for object-oriented types",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
) -> None:
    if version:
        console.print(f"[bold cyan]oo-metrics[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .calculators import calculators as _calculators  # noqa: F401, E402


def main(argv: Optional[list] = None) -> None:
    app(args=argv)
