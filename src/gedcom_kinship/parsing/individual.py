from __future__ import annotations

from typing import List, Optional

from gedcom_kinship.loader import LineStream
from gedcom_kinship.logging import get_logger
from gedcom_kinship.registry.entities import (
    ChildToFamilyLink,
    FamilyGroupId,
    Individual,
    IndividualEvent,
    IndividualId,
    IndividualName,
    MultimediaLink,
    NameType,
    Pedigree,
    Sex,
    SourceCitation,
    SpouseToFamilyLink,
)

from .citation import parse_source_citation
from .common import Fields, multimedia_handler, store
from .events import individual_event_handlers

log = get_logger(__name__)


def parse_sex(value: str) -> Optional[Sex]:
    sex = Sex.from_code(value.strip().upper())
    if sex is None:
        log.warning(f"Unknown sex code {value!r}")
    return sex


def parse_name_type(value: str) -> Optional[NameType]:
    name_type = NameType.from_value(value)
    if name_type is None:
        log.warning(f"Unknown name type {value!r}")
    return name_type


def parse_pedigree(value: str) -> Optional[Pedigree]:
    pedigree = Pedigree.from_value(value)
    if pedigree is None:
        log.warning(f"Unknown pedigree linkage {value!r}")
    return pedigree


def parse_individual(individual_id: str, stream: LineStream) -> Individual:
    """
    Parse a ``0 @I1@ INDI`` record.

    Names, events and family links are kept in file order.
    """
    fields: Fields = {}
    names: List[IndividualName] = []
    events: List[IndividualEvent] = []
    child_links: List[ChildToFamilyLink] = []
    spouse_links: List[SpouseToFamilyLink] = []
    notes: List[str] = []
    source_citations: List[SourceCitation] = []
    multimedia_links: List[MultimediaLink] = []

    handlers = individual_event_handlers(stream, events)
    handlers.update({
        "NAME": lambda name: names.append(parse_individual_name(name, stream)),
        "SEX": store(fields, "sex", parse_sex),
        "FAMC": lambda family_id: child_links.append(parse_child_to_family_link(family_id, stream)),
        "FAMS": lambda family_id: spouse_links.append(parse_spouse_to_family_link(family_id, stream)),
        "NOTE": notes.append,
        "SOUR": lambda source: source_citations.append(parse_source_citation(source, stream)),
        "OBJE": multimedia_handler(multimedia_links),
    })
    stream.parse_by_tag(handlers)

    return Individual(
        id=IndividualId(individual_id),
        names=tuple(names),
        events=tuple(events),
        child_to_family_links=tuple(child_links),
        spouse_to_family_links=tuple(spouse_links),
        notes=tuple(notes),
        source_citations=tuple(source_citations),
        multimedia_links=tuple(multimedia_links),
        **fields,
    )


def parse_individual_name(name: str, stream: LineStream) -> IndividualName:
    fields: Fields = {}
    notes: List[str] = []
    source_citations: List[SourceCitation] = []

    stream.parse_by_tag({
        "TYPE": store(fields, "type", parse_name_type),
        "NPFX": store(fields, "prefix"),
        "GIVN": store(fields, "given"),
        "NICK": store(fields, "nickname"),
        "SPFX": store(fields, "surname_prefix"),
        "SURN": store(fields, "surname"),
        "NSFX": store(fields, "suffix"),
        "NOTE": notes.append,
        "SOUR": lambda source: source_citations.append(parse_source_citation(source, stream)),
    })

    return IndividualName(
        name=name,
        notes=tuple(notes),
        source_citations=tuple(source_citations),
        **fields,
    )


def parse_child_to_family_link(family_id: str, stream: LineStream) -> ChildToFamilyLink:
    fields: Fields = {}
    notes: List[str] = []

    stream.parse_by_tag({
        "PEDI": store(fields, "pedigree", parse_pedigree),
        "NOTE": notes.append,
    })

    return ChildToFamilyLink(family_id=FamilyGroupId(family_id), notes=tuple(notes), **fields)


def parse_spouse_to_family_link(family_id: str, stream: LineStream) -> SpouseToFamilyLink:
    notes: List[str] = []
    stream.parse_by_tag({"NOTE": notes.append})
    return SpouseToFamilyLink(family_id=FamilyGroupId(family_id), notes=tuple(notes))
