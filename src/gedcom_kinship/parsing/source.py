from __future__ import annotations

from typing import List

from gedcom_kinship.dates import parse_date_value
from gedcom_kinship.loader import LineStream
from gedcom_kinship.registry.entities import (
    MultimediaLink,
    Source,
    SourceData,
    SourceDataEvent,
    SourceId,
)

from .common import Fields, multimedia_handler, store


def parse_source(source_id: str, stream: LineStream) -> Source:
    """Parse a ``0 @S1@ SOUR`` record."""
    fields: Fields = {}
    notes: List[str] = []
    multimedia_links: List[MultimediaLink] = []

    stream.parse_by_tag({
        "DATA": lambda _: fields.update(data=parse_source_data(stream)),
        "AUTH": store(fields, "author"),
        "TITL": store(fields, "title"),
        "ABBR": store(fields, "abbreviation"),
        "PUBL": store(fields, "publication_facts"),
        "TEXT": store(fields, "text"),
        "RIN": store(fields, "automated_record_id"),
        "NOTE": notes.append,
        "OBJE": multimedia_handler(multimedia_links),
    })

    return Source(
        id=SourceId(source_id),
        notes=tuple(notes),
        multimedia_links=tuple(multimedia_links),
        **fields,
    )


def parse_source_data(stream: LineStream) -> SourceData:
    fields: Fields = {}
    events: List[SourceDataEvent] = []
    notes: List[str] = []

    stream.parse_by_tag({
        "EVEN": lambda recorded: events.append(parse_source_data_event(recorded, stream)),
        "AGNC": store(fields, "responsible_agency"),
        "NOTE": notes.append,
    })

    return SourceData(events=tuple(events), notes=tuple(notes), **fields)


def parse_source_data_event(recorded_events: str, stream: LineStream) -> SourceDataEvent:
    fields: Fields = {}

    stream.parse_by_tag({
        "DATE": store(fields, "date", parse_date_value),
        "PLAC": store(fields, "place"),
    })

    return SourceDataEvent(recorded_events=recorded_events, **fields)
