from __future__ import annotations

from .grading import IndividualGrade, source_grade
from .search import (
    PathNode,
    RelationshipPart,
    Role,
    bfs,
    family_relatives,
    find_relationship_path,
)

__all__ = [
    "IndividualGrade",
    "PathNode",
    "RelationshipPart",
    "Role",
    "bfs",
    "family_relatives",
    "find_relationship_path",
    "source_grade",
]
