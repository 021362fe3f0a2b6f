"""
gedcom_kinship

Parse GEDCOM files, find how two people are related and draw the
relationship as an ASCII diagram.
"""

__version__ = "0.1.0"

from gedcom_kinship.parsing import parse_gedcom, parse_gedcom_file
from gedcom_kinship.registry.gedcom import Gedcom

__all__ = [
    "Gedcom",
    "__version__",
    "parse_gedcom",
    "parse_gedcom_file",
]
