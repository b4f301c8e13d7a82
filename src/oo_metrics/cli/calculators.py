"""List registered calculators."""

from rich.table import Table

from ..calculators import get_registry
from . import app
from ._common import console


@app.command()
def calculators() -> None:
    """Show the calculators that can be selected with --calculator."""
    table = Table(title="Calculators", show_header=True, header_style="bold cyan")
    table.add_column("Name", style="green", no_wrap=True)
    table.add_column("Display name")
    table.add_column("Description", style="dim")

    for defn in get_registry():
        table.add_row(defn.name, defn.display_name, defn.description)

    console.print(table)
