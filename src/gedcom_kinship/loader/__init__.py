# src/gedcom_kinship/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

Intended usage from other parts of the project and tests:

    from gedcom_kinship.loader import (
        Line,
        LineStream,
        load_lines,
        merge_continuations,
        strip_byte_order_mark,
    )
"""

from __future__ import annotations

from .continuation import merge_continuations, strip_byte_order_mark
from .file_loader import load_lines
from .line import Line
from .line_stream import LineStream

__all__ = [
    "Line",
    "LineStream",
    "load_lines",
    "merge_continuations",
    "strip_byte_order_mark",
]
