from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_kinship.cli.utils import Ask, Say, diagram_cell_factory, load_gedcom, select_individual
from gedcom_kinship.diagram.layout import CellFactory, render_path
from gedcom_kinship.registry.gedcom import Gedcom
from gedcom_kinship.relationships.search import find_relationship_path

console = Console()


def grade_relationship(
    gedcom: Gedcom,
    ask: Ask,
    say: Say,
    cell_factory: CellFactory,
    first: Optional[str] = None,
    second: Optional[str] = None,
) -> Optional[str]:
    """
    Select two individuals and return their relationship diagram.

    Returns None when either selection fails. Lookup errors from the search
    propagate to the caller.
    """
    start = select_individual(gedcom, "first", ask, say, first)
    if start is None:
        return None
    target = select_individual(gedcom, "second", ask, say, second)
    if target is None:
        return None

    path = find_relationship_path(gedcom, start, target.id)
    if path is None:
        return f"Could not find relationship between {start.display_name} and {target.display_name}"
    return render_path(path, cell_factory)


def relationship_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    first: Optional[str] = typer.Option(None, "--first", help="Name fragment of the first person"),
    second: Optional[str] = typer.Option(None, "--second", help="Name fragment of the second person"),
    strict: bool = typer.Option(False, "--strict", help="Reject files with malformed lines"),
    plain: bool = typer.Option(False, "--plain", help="Names only, no grades or colours"),
):
    """
    Draw the shortest relationship between two people in a GEDCOM file.
    """
    tree = load_gedcom(gedcom, strict=strict)

    diagram = grade_relationship(
        tree,
        ask=typer.prompt,
        say=console.print,
        cell_factory=diagram_cell_factory(plain=plain),
        first=first,
        second=second,
    )
    if diagram is None:
        raise typer.Exit(code=1)

    typer.echo(diagram)
