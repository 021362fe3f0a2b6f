"""
Relationship diagram layout

Places a relationship path on a PrintMatrix. The root person sits at
(0, 0); each following person is placed relative to the previous one:

    PARENT   two vertical connectors then the box, going up
    CHILD    two vertical connectors then the box, going down
    PARTNER  a horizontal connector then the box, going right

A parent directly followed by a child (the other parent's side of a
couple) gets a box spanning two columns so that child sits below it.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Optional, Sequence

from gedcom_kinship.core.exceptions import LayoutError
from gedcom_kinship.logging import get_logger
from gedcom_kinship.registry.entities import Individual, QualityAssessment
from gedcom_kinship.relationships.grading import IndividualGrade
from gedcom_kinship.relationships.search import RelationshipPart, Role

from .color import Color
from .matrix import HORIZONTAL_CONNECTOR, VERTICAL_CONNECTOR, BoxCell, ColoredString, PrintMatrix

log = get_logger(__name__)

CellFactory = Callable[[Individual], BoxCell]

GRADE_COLORS = {
    QualityAssessment.UNRELIABLE: Color.RED,
    QualityAssessment.QUESTIONABLE: Color.YELLOW,
    QualityAssessment.SECONDARY: Color.YELLOW,
    QualityAssessment.PRIMARY: Color.GREEN,
    QualityAssessment.DIRECT: Color.GREEN,
}


def grade_color(grade: QualityAssessment) -> Color:
    return GRADE_COLORS[grade]


def name_box(person: Individual, margin: int = 1) -> BoxCell:
    return BoxCell((ColoredString(person.display_name),), margin=margin)


def graded_box(person: Individual, margin: int = 1, colored: bool = True) -> BoxCell:
    """Box with the name and the birth/death source grades, coloured by quality."""
    grade = IndividualGrade.of(person)

    def tint(value: QualityAssessment) -> Optional[Color]:
        return grade_color(value) if colored else None

    return BoxCell(
        (
            ColoredString(person.display_name),
            ColoredString(f"Birth: {grade.birth.name}", tint(grade.birth)),
            ColoredString(f"Death: {grade.death.name}", tint(grade.death)),
        ),
        color=tint(grade.average_grade),
        margin=margin,
    )


class MatrixBuilder:
    """Cursor-driven placement of path elements on a PrintMatrix."""

    def __init__(self, cell_factory: CellFactory = name_box):
        self.matrix = PrintMatrix()
        self.cell_factory = cell_factory
        self.column = 0
        self.row = 0

    def set_current(self, cell: BoxCell) -> None:
        self.matrix.put(self.column, self.row, cell)

    def add_parent(self, cell: BoxCell) -> None:
        self._add_vertical(1, cell)
        if cell.span_two_columns:
            self.column += 1

    def add_child(self, cell: BoxCell) -> None:
        self._add_vertical(-1, cell)

    def add_partner(self, cell: BoxCell) -> None:
        self.column += 1
        self.matrix.put(self.column, self.row, HORIZONTAL_CONNECTOR)
        self.column += 1
        self.matrix.put(self.column, self.row, cell)

    def _add_vertical(self, step: int, cell: BoxCell) -> None:
        for _ in range(2):
            self.row += step
            self.matrix.put(self.column, self.row, VERTICAL_CONNECTOR)
        self.row += step
        self.matrix.put(self.column, self.row, cell)

    def build(self, path: Sequence[RelationshipPart]) -> PrintMatrix:
        if not path:
            return self.matrix

        self.set_current(self.cell_factory(path[0].person))

        for index in range(1, len(path)):
            part = path[index]
            cell = self.cell_factory(part.person)

            if part.role is Role.PARENT:
                following = path[index + 1] if index + 1 < len(path) else None
                if following is not None and following.role is Role.CHILD:
                    cell = replace(cell, span_two_columns=True)
                self.add_parent(cell)
            elif part.role is Role.CHILD:
                self.add_child(cell)
            elif part.role is Role.PARTNER:
                self.add_partner(cell)
            else:
                raise LayoutError(
                    f"Person {part.person.display_name} has relationship role {part.role.name}"
                )

        log.debug(f"Laid out {len(path)} people on {len(self.matrix)} cells")
        return self.matrix


def build_matrix(path: Sequence[RelationshipPart], cell_factory: CellFactory = name_box) -> PrintMatrix:
    return MatrixBuilder(cell_factory).build(path)


def render_path(path: Sequence[RelationshipPart], cell_factory: CellFactory = name_box) -> str:
    return build_matrix(path, cell_factory).render()
