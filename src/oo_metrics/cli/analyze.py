"""Analyze command: compute metrics for the types in a model file."""

import json
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional

import typer
from rich.table import Table

from ..calculators import calculate_codebase
from ..exceptions import OOMetricsError
from ..logging_config import setup_logging
from ..metrics import Metric, sort_metrics
from ..model import load_codebase
from . import app
from ._common import console, resolve_config


def _render_table(type_name: str, metrics: FrozenSet[Metric], decimal_places: int) -> None:
    if not metrics:
        console.print(f"[dim]{type_name}: no metrics[/dim]")
        return

    table = Table(title=type_name, show_header=True, header_style="bold cyan")
    table.add_column("Metric", style="green", no_wrap=True)
    table.add_column("Description")
    table.add_column("Value", justify="right", style="yellow")

    for metric in sort_metrics(metrics):
        table.add_row(metric.name.value, metric.description, metric.formatted_value(decimal_places))

    console.print(table)


def _to_json(results: Dict[str, FrozenSet[Metric]], decimal_places: int) -> str:
    data = {
        type_name: {
            d["name"]: d["value"]
            for d in (m.to_dict(decimal_places) for m in sort_metrics(metrics))
        }
        for type_name, metrics in results.items()
    }
    return json.dumps(data, indent=2)


@app.command()
def analyze(
    model: Path = typer.Argument(
        ...,
        help="JSON model describing the parsed types",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    type_names: Optional[List[str]] = typer.Option(
        None,
        "--type",
        "-t",
        help="Qualified type name to measure (repeatable; default: all types)",
    ),
    calculator_names: Optional[List[str]] = typer.Option(
        None,
        "--calculator",
        "-c",
        help="Calculator to run (repeatable; default: all, see 'oo-metrics calculators')",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Threads used to measure several types",
        min=1,
    ),
    decimal_places: Optional[int] = typer.Option(
        None,
        "--decimals",
        help="Digits shown for ratio metrics",
        min=0,
        max=12,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to an oo-metrics.toml configuration file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
) -> None:
    """
    Compute inheritance and encapsulation metrics for types in MODEL.

    [bold cyan]Examples:[/bold cyan]

      oo-metrics analyze model.json

      oo-metrics analyze model.json --type zoo.Dog --json

      oo-metrics analyze model.json -c method_attribute_inheritance -w 4
    """
    if verbose and quiet:
        console.print("[red]Error:[/red] --verbose and --quiet are mutually exclusive")
        raise typer.Exit(1)

    try:
        settings = resolve_config(
            config=config,
            calculators=calculator_names,
            workers=workers,
            decimal_places=decimal_places,
            verbose=verbose,
            quiet=quiet,
        )
    except OOMetricsError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    # -v/-q already folded into settings.verbosity
    logger = setup_logging(verbosity=settings.verbosity)
    logger.debug(f"Loaded settings: {settings}")

    try:
        codebase = load_codebase(model)
        results = calculate_codebase(
            codebase,
            type_names=type_names,
            names=settings.calculators,
            workers=settings.workers,
        )
    except OOMetricsError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if json_output:
        typer.echo(_to_json(results, settings.decimal_places))
        return

    for type_name, metrics in results.items():
        _render_table(type_name, metrics, settings.decimal_places)
