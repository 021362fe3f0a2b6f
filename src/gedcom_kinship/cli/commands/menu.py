from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Tuple

import typer
from rich.console import Console

from gedcom_kinship.cli.commands.relationship import grade_relationship
from gedcom_kinship.cli.commands.stats import stats_table
from gedcom_kinship.cli.utils import diagram_cell_factory, load_gedcom
from gedcom_kinship.core.exceptions import GedcomKinshipError
from gedcom_kinship.logging import get_logger
from gedcom_kinship.registry.gedcom import Gedcom

console = Console()
log = get_logger(__name__)


def _grade_relationship(gedcom: Gedcom) -> None:
    diagram = grade_relationship(
        gedcom,
        ask=typer.prompt,
        say=console.print,
        cell_factory=diagram_cell_factory(),
    )
    if diagram is not None:
        typer.echo(diagram)


def _statistics(gedcom: Gedcom) -> None:
    console.print(stats_table(gedcom))


QUIT = "quit"

MENU: Dict[str, Tuple[str, Callable[[Gedcom], None]]] = {
    "1": ("Grade relationship", _grade_relationship),
    "2": ("Statistics", _statistics),
}


def menu_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    strict: bool = typer.Option(False, "--strict", help="Reject files with malformed lines"),
):
    """
    Interactive menu over a loaded GEDCOM file.
    """
    tree = load_gedcom(gedcom, strict=strict)
    quit_key = str(len(MENU) + 1)

    while True:
        console.print("\nCommands:")
        for key, (title, _) in MENU.items():
            console.print(f"  {key}. {title}")
        console.print(f"  {quit_key}. Quit")

        choice = typer.prompt("Choose a command").strip()
        if choice in (quit_key, "q", QUIT):
            return

        entry = MENU.get(choice)
        if entry is None:
            console.print(f"Unknown command: {choice}")
            continue

        title, action = entry
        try:
            action(tree)
        except (GedcomKinshipError, ValueError) as exc:
            log.error(f"{title} failed: {exc}")
            console.print(f"[red]{title} failed:[/red] {exc}")
