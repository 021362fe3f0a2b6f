from __future__ import annotations

from typing import List

from gedcom_kinship.loader import LineStream
from gedcom_kinship.registry.entities import (
    FamilyEvent,
    FamilyGroup,
    FamilyGroupId,
    IndividualId,
    MultimediaLink,
    SourceCitation,
)
from gedcom_kinship.registry.events import FamilyEventType

from .citation import parse_source_citation
from .common import Fields, multimedia_handler, parse_optional_int, store
from .events import parse_family_event


def parse_family_group(family_id: str, stream: LineStream) -> FamilyGroup:
    """Parse a ``0 @F1@ FAM`` record."""
    fields: Fields = {}
    children: List[IndividualId] = []
    events: List[FamilyEvent] = []
    notes: List[str] = []
    source_citations: List[SourceCitation] = []
    multimedia_links: List[MultimediaLink] = []

    handlers = {
        "HUSB": store(fields, "husband_id", IndividualId),
        "WIFE": store(fields, "wife_id", IndividualId),
        "CHIL": lambda child_id: children.append(IndividualId(child_id)),
        "NCHI": store(fields, "number_of_children", lambda value: parse_optional_int(value, "NCHI")),
        "NOTE": notes.append,
        "SOUR": lambda source: source_citations.append(parse_source_citation(source, stream)),
        "OBJE": multimedia_handler(multimedia_links),
    }
    for event_type in FamilyEventType:
        handlers[event_type.tag] = lambda _: events.append(parse_family_event(stream))
    stream.parse_by_tag(handlers)

    return FamilyGroup(
        id=FamilyGroupId(family_id),
        children_ids=tuple(children),
        events=tuple(events),
        notes=tuple(notes),
        source_citations=tuple(source_citations),
        multimedia_links=tuple(multimedia_links),
        **fields,
    )
