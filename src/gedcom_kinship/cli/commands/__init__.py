"""
CLI command modules for gedcom_kinship.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_kinship.cli.commands.menu import menu_command
from gedcom_kinship.cli.commands.relationship import relationship_command
from gedcom_kinship.cli.commands.stats import stats_command
from gedcom_kinship.cli.commands.validate import validate_command

__all__ = [
    "menu_command",
    "relationship_command",
    "stats_command",
    "validate_command",
]
