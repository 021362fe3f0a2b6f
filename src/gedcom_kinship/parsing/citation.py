from __future__ import annotations

from typing import List, Optional

from gedcom_kinship.dates import parse_date_value
from gedcom_kinship.loader import LineStream
from gedcom_kinship.logging import get_logger
from gedcom_kinship.registry.entities import (
    CitationData,
    EventTypeCitedFrom,
    MultimediaLink,
    QualityAssessment,
    SourceCitation,
    SourceId,
)

from .common import Fields, multimedia_handler, store

log = get_logger(__name__)


def parse_quality_assessment(value: str) -> Optional[QualityAssessment]:
    """QUAY 0-4; anything else means no assessment."""
    try:
        code = int(value.strip())
    except ValueError:
        log.warning(f"Quality assessment is not a number: {value!r}")
        return None
    return QualityAssessment.from_value(code)


def parse_source_citation(source: str, stream: LineStream) -> SourceCitation:
    """
    Parse a SOUR citation block, e.g.

        2 SOUR @S1@
        3 PAGE Parish register, p. 12
        3 EVEN BIRT
        4 ROLE CHIL
        3 QUAY 3
    """
    fields: Fields = {}
    notes: List[str] = []
    multimedia_links: List[MultimediaLink] = []

    stream.parse_by_tag({
        "PAGE": store(fields, "page"),
        "EVEN": lambda tag: fields.update(event_type_cited_from=parse_event_type_cited_from(tag, stream)),
        "DATA": lambda _: fields.update(data=parse_citation_data(stream)),
        "NOTE": notes.append,
        "OBJE": multimedia_handler(multimedia_links),
        "QUAY": store(fields, "quality_assessment", parse_quality_assessment),
    })

    return SourceCitation(
        source_id=SourceId(source),
        notes=tuple(notes),
        multimedia_links=tuple(multimedia_links),
        **fields,
    )


def parse_citation_data(stream: LineStream) -> CitationData:
    fields: Fields = {}

    stream.parse_by_tag({
        "DATE": store(fields, "date", parse_date_value),
        "TEXT": store(fields, "text"),
    })

    return CitationData(**fields)


def parse_event_type_cited_from(tag: str, stream: LineStream) -> EventTypeCitedFrom:
    # Kept as the raw tag: MyHeritage exports put non-event tags here.
    fields: Fields = {}

    stream.parse_by_tag({
        "ROLE": store(fields, "role"),
    })

    return EventTypeCitedFrom(event_type=tag, **fields)
