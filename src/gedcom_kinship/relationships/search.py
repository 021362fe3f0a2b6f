"""
Relationship search

Breadth-first search over the family graph. Each individual's neighbours
are its parents, then its children, then its partners; among several
shortest paths the first one found under that order wins.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Hashable, Iterable, List, Optional, TypeVar

from gedcom_kinship.logging import get_logger
from gedcom_kinship.registry.entities import Individual, IndividualId
from gedcom_kinship.registry.gedcom import Gedcom

log = get_logger(__name__)

T = TypeVar("T")


class Role(Enum):
    """Role of a path element relative to the element before it."""
    PARENT = "parent"
    CHILD = "child"
    PARTNER = "partner"
    UNKNOWN = "unknown"  # search origin only


@dataclass(frozen=True)
class RelationshipPart:
    role: Role
    person: Individual


@dataclass(frozen=True)
class PathNode(Generic[T]):
    parent: Optional["PathNode[T]"]
    value: T

    def path(self) -> List[T]:
        """Values from the root node down to this node."""
        values: List[T] = []
        node: Optional[PathNode[T]] = self
        while node is not None:
            values.append(node.value)
            node = node.parent
        values.reverse()
        return values


def bfs(
    start: T,
    identifier: Callable[[T], Hashable],
    neighbours: Callable[[T], Iterable[T]],
    is_finished: Callable[[T], bool],
) -> Optional[List[T]]:
    """
    Generic FIFO breadth-first search.

    Returns the path from ``start`` to the first value accepted by
    ``is_finished``, or None when the reachable graph is exhausted.
    """
    visited = {identifier(start)}
    frontier = deque([PathNode(None, start)])

    while frontier:
        node = frontier.popleft()
        if is_finished(node.value):
            return node.path()

        for neighbour in neighbours(node.value):
            key = identifier(neighbour)
            if key in visited:
                continue
            visited.add(key)
            frontier.append(PathNode(node, neighbour))

    return None


def family_relatives(gedcom: Gedcom, person: Individual) -> List[RelationshipPart]:
    """
    Neighbours of ``person``: parents, then children, then partners.

    Family and individual ids are resolved with the strict lookups, so a
    dangling reference raises RecordLookupError.
    """
    parents: List[RelationshipPart] = []
    for link in person.child_to_family_links:
        family = gedcom.family_group(link.family_id)
        for parent_id in (family.husband_id, family.wife_id):
            if parent_id is not None:
                parents.append(RelationshipPart(Role.PARENT, gedcom.individual(parent_id)))

    spouse_families = [gedcom.family_group(link.family_id) for link in person.spouse_to_family_links]

    children = [
        RelationshipPart(Role.CHILD, gedcom.individual(child_id))
        for family in spouse_families
        for child_id in family.children_ids
    ]

    partners: List[RelationshipPart] = []
    for family in spouse_families:
        for spouse_id in (family.husband_id, family.wife_id):
            if spouse_id is not None and spouse_id != person.id:
                partners.append(RelationshipPart(Role.PARTNER, gedcom.individual(spouse_id)))

    return parents + children + partners


def find_relationship_path(
    gedcom: Gedcom,
    start: Individual,
    target: IndividualId,
) -> Optional[List[RelationshipPart]]:
    """
    Shortest relationship path from ``start`` to the individual ``target``.

    The first element is ``start`` with role UNKNOWN. Returns None when the
    two individuals are not connected.
    """
    log.debug(f"Searching relationship {start.id} -> {target}")
    path = bfs(
        RelationshipPart(Role.UNKNOWN, start),
        identifier=lambda part: part.person.id,
        neighbours=lambda part: family_relatives(gedcom, part.person),
        is_finished=lambda part: part.person.id == target,
    )
    if path is None:
        log.info(f"No relationship between {start.id} and {target}")
    else:
        log.info(f"Found relationship {start.id} -> {target} in {len(path) - 1} step(s)")
    return path
