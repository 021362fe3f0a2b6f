"""
Print matrix

A sparse grid of printable cells keyed by (column, row). Rendering sizes
every column to its widest cell and every row to its tallest, then prints
rows from the highest index down and columns left to right.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .color import Color, colorize


@dataclass(frozen=True)
class ColoredString:
    """Text with an optional colour; ``len()`` is the visible length."""
    text: str
    color: Optional[Color] = None

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return colorize(self.text, self.color)


Printable = Union[str, ColoredString]


def pad_to(text: Printable, width: int) -> str:
    """
    Centre ``text`` in ``width`` columns.

    When the padding is odd the extra space goes on the right. Text that is
    already at least ``width`` wide is returned as is.
    """
    diff = max(width - len(text), 0)
    left = diff // 2
    return " " * left + str(text) + " " * (diff - left)


def pad_lines(lines: Sequence[str], height: int, width: int) -> List[str]:
    """Centre ``lines`` vertically in ``height`` rows of blank filler."""
    diff = max(height - len(lines), 0)
    before = diff // 2
    filler = " " * width
    return [filler] * before + list(lines) + [filler] * (diff - before)


class Cell:
    span_two_columns: bool = False

    @property
    def width(self) -> int:
        raise NotImplementedError

    @property
    def height(self) -> int:
        raise NotImplementedError

    def render(self, width: int, height: int) -> List[str]:
        raise NotImplementedError


@dataclass(frozen=True)
class TextCell(Cell):
    text: str

    @property
    def width(self) -> int:
        return len(self.text)

    @property
    def height(self) -> int:
        return 1

    def render(self, width: int, height: int) -> List[str]:
        return pad_lines([pad_to(self.text, width)], height, width)


@dataclass(frozen=True)
class BoxCell(Cell):
    """
    Bordered multi-line box:

         +-------+
         |person1|
         +-------+

    ``margin`` blank columns surround the border on both sides. The border
    takes ``color``; each line keeps its own colour.
    """
    lines: Tuple[ColoredString, ...]
    color: Optional[Color] = None
    margin: int = 1
    span_two_columns: bool = False

    @property
    def width(self) -> int:
        text_width = max((len(line) for line in self.lines), default=0)
        return text_width + 2 + 2 * self.margin

    @property
    def height(self) -> int:
        return len(self.lines) + 2

    def render(self, width: int, height: int) -> List[str]:
        inner = width - 2 - 2 * self.margin
        pad = " " * self.margin
        border = pad + colorize("+" + "-" * inner + "+", self.color) + pad
        bar = colorize("|", self.color)

        body = [pad + bar + pad_to(line, inner) + bar + pad for line in self.lines]
        return pad_lines([border] + body + [border], height, width)


VERTICAL_CONNECTOR = TextCell("|")
HORIZONTAL_CONNECTOR = TextCell("-")
EMPTY_CELL = TextCell("")

Position = Tuple[int, int]


class PrintMatrix:
    def __init__(self):
        self._cells: Dict[Position, Cell] = {}

    def put(self, column: int, row: int, cell: Cell) -> None:
        self._cells[(column, row)] = cell

    def get(self, column: int, row: int) -> Optional[Cell]:
        return self._cells.get((column, row))

    def entries(self) -> Dict[Position, Cell]:
        return dict(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Tuple[Position, Cell]]:
        return iter(self._cells.items())

    def column_widths(self) -> Dict[int, int]:
        widths: Dict[int, int] = {}
        for (column, _), cell in self._cells.items():
            widths[column] = max(widths.get(column, 0), cell.width)
        return widths

    def row_heights(self) -> Dict[int, int]:
        heights: Dict[int, int] = {}
        for (_, row), cell in self._cells.items():
            heights[row] = max(heights.get(row, 0), cell.height)
        return heights

    def _render_row(self, row: int, columns: range, widths: Dict[int, int], height: int) -> List[str]:
        blocks: List[List[str]] = []
        column = columns.start
        while column < columns.stop:
            cell = self._cells.get((column, row), EMPTY_CELL)
            width = widths.get(column, 0)
            if cell.span_two_columns:
                width += widths.get(column + 1, 0)
                column += 1
            blocks.append(cell.render(width, height))
            column += 1

        return ["".join(block[i] for block in blocks) for i in range(height)]

    def render(self) -> str:
        if not self._cells:
            return ""

        columns = [column for column, _ in self._cells]
        rows = [row for _, row in self._cells]
        column_range = range(min(columns), max(columns) + 1)

        widths = self.column_widths()
        heights = self.row_heights()

        lines: List[str] = []
        for row in range(max(rows), min(rows) - 1, -1):
            lines.extend(self._render_row(row, column_range, widths, heights.get(row, 0)))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
