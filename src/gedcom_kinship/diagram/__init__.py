from __future__ import annotations

from .color import Color, colorize
from .layout import (
    MatrixBuilder,
    build_matrix,
    grade_color,
    graded_box,
    name_box,
    render_path,
)
from .matrix import (
    HORIZONTAL_CONNECTOR,
    VERTICAL_CONNECTOR,
    BoxCell,
    ColoredString,
    PrintMatrix,
    TextCell,
    pad_lines,
    pad_to,
)

__all__ = [
    "BoxCell",
    "Color",
    "ColoredString",
    "HORIZONTAL_CONNECTOR",
    "MatrixBuilder",
    "PrintMatrix",
    "TextCell",
    "VERTICAL_CONNECTOR",
    "build_matrix",
    "colorize",
    "grade_color",
    "graded_box",
    "name_box",
    "pad_lines",
    "pad_to",
    "render_path",
]
