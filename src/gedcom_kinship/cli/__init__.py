"""
CLI package for gedcom_kinship.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedcom_kinship.cli.app import app, main

__all__ = [
    "app",
    "main",
]
