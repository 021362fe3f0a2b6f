"""
Record parsers for GEDCOM individuals, family groups and sources.

    from gedcom_kinship.parsing import parse_gedcom, parse_gedcom_file
"""

from __future__ import annotations

from .parser import parse_gedcom, parse_gedcom_file, to_lines, validate_format

__all__ = [
    "parse_gedcom",
    "parse_gedcom_file",
    "to_lines",
    "validate_format",
]
