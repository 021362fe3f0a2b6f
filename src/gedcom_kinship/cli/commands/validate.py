from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from gedcom_kinship.core.exceptions import GedcomFormatError
from gedcom_kinship.loader import load_lines
from gedcom_kinship.parsing import to_lines, validate_format

console = Console()


def validate_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
):
    """
    Check that every line of a GEDCOM file is well formed.

    Lists all malformed lines and exits with status 1 if there are any.
    """
    lines = to_lines(load_lines(gedcom))
    try:
        validate_format(lines)
    except GedcomFormatError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1)

    console.print(f"{len(lines)} lines OK")
