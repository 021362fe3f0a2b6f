from __future__ import annotations

import typer

from gedcom_kinship.cli.commands.menu import menu_command
from gedcom_kinship.cli.commands.relationship import relationship_command
from gedcom_kinship.cli.commands.stats import stats_command
from gedcom_kinship.cli.commands.validate import validate_command

app = typer.Typer(
    name="gedcom-kinship",
    help="GEDCOM relationship finder and inspector",
    add_completion=False,
)

app.command("stats")(stats_command)
app.command("validate")(validate_command)
app.command("relationship")(relationship_command)
app.command("menu")(menu_command)


def main():
    app()


if __name__ == "__main__":
    main()
