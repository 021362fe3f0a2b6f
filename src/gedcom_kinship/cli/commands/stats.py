from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_kinship.cli.utils import load_gedcom
from gedcom_kinship.registry.gedcom import Gedcom

console = Console()


def stats_table(gedcom: Gedcom) -> Table:
    table = Table(title="GEDCOM Statistics")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Individuals", str(len(gedcom.individuals)))
    table.add_row("Families", str(len(gedcom.family_groups)))
    table.add_row("Sources", str(len(gedcom.sources)))
    return table


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Report load time",
    ),
):
    """
    Show summary statistics for a GEDCOM file.
    """
    console.print(stats_table(load_gedcom(gedcom, verbose=verbose)))
