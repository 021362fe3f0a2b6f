from __future__ import annotations

from typing import Dict, List, Optional

from gedcom_kinship.core.exceptions import ConfirmedFlagError
from gedcom_kinship.dates import parse_date_value
from gedcom_kinship.loader import LineStream
from gedcom_kinship.loader.line_stream import Handler
from gedcom_kinship.logging import get_logger
from gedcom_kinship.registry.entities import (
    BirthEvent,
    ChristeningEvent,
    DeathEvent,
    EventDetail,
    FamilyEvent,
    FamilyEventDetail,
    FamilyGroupId,
    GenericIndividualEvent,
    IndividualEvent,
    IndividualEventDetail,
    MultimediaLink,
    SourceCitation,
)
from gedcom_kinship.registry.events import FamilyEventType, IndividualEventType

from .citation import parse_source_citation
from .common import Fields, multimedia_handler, parse_confirmed_flag, store
from .place import parse_address, parse_place

log = get_logger(__name__)


class EventDetailBuilder:
    """
    Collects the lines shared by every event structure (TYPE, DATE, PLAC,
    ADDR, AGNC, RELI, CAUS, NOTE, SOUR, OBJE) for one event block.
    """

    def __init__(self, stream: LineStream):
        self.stream = stream
        self.fields: Fields = {}
        self.notes: List[str] = []
        self.source_citations: List[SourceCitation] = []
        self.multimedia_links: List[MultimediaLink] = []

    def handlers(self) -> Dict[str, Handler]:
        stream = self.stream
        fields = self.fields
        return {
            "TYPE": store(fields, "type"),
            "DATE": store(fields, "date", parse_date_value),
            "PLAC": lambda name: fields.update(place=parse_place(name, stream)),
            "ADDR": lambda line: fields.update(address=parse_address(line, stream)),
            "AGNC": store(fields, "responsible_agency"),
            "RELI": store(fields, "religious_affiliation"),
            "CAUS": store(fields, "cause"),
            "NOTE": self.notes.append,
            "SOUR": lambda source: self.source_citations.append(parse_source_citation(source, stream)),
            "OBJE": multimedia_handler(self.multimedia_links),
        }

    def build(self) -> EventDetail:
        return EventDetail(
            notes=tuple(self.notes),
            source_citations=tuple(self.source_citations),
            multimedia_links=tuple(self.multimedia_links),
            **self.fields,
        )


# ---------------------------------------------------------------------------
# Family events
# ---------------------------------------------------------------------------

def parse_spouse_age(value: str, stream: LineStream) -> Optional[str]:
    """Age of HUSB/WIFE in a family event: either inline or as a nested AGE."""
    fields: Fields = {}
    stream.parse_by_tag({"AGE": store(fields, "age")})
    return fields.get("age") or value or None


def parse_family_event(stream: LineStream) -> FamilyEvent:
    event_type = FamilyEventType.from_tag_strict(stream.current().tag)
    builder = EventDetailBuilder(stream)
    ages: Fields = {}

    handlers = builder.handlers()
    handlers.update({
        "HUSB": lambda value: ages.update(husband_age=parse_spouse_age(value, stream)),
        "WIFE": lambda value: ages.update(wife_age=parse_spouse_age(value, stream)),
    })
    stream.parse_by_tag(handlers)

    return FamilyEvent(event_type, FamilyEventDetail(detail=builder.build(), **ages))


# ---------------------------------------------------------------------------
# Individual events
# ---------------------------------------------------------------------------

def _parse_individual_event_detail(
    stream: LineStream,
    extra: Optional[Dict[str, Handler]] = None,
) -> IndividualEventDetail:
    builder = EventDetailBuilder(stream)
    fields: Fields = {}

    handlers = builder.handlers()
    handlers["AGE"] = store(fields, "age")
    handlers.update(extra or {})
    stream.parse_by_tag(handlers)

    return IndividualEventDetail(detail=builder.build(), age=fields.get("age"))


def _family_link_handler(fields: Fields) -> Dict[str, Handler]:
    return {"FAMC": store(fields, "family_id", FamilyGroupId)}


def parse_birth_event(stream: LineStream) -> BirthEvent:
    link: Fields = {}
    detail = _parse_individual_event_detail(stream, _family_link_handler(link))
    return BirthEvent(detail=detail, **link)


def parse_christening_event(value: str, stream: LineStream) -> Optional[ChristeningEvent]:
    """
    Parse a CHR block.

    Some exports write free text where the occurrence flag belongs; such an
    event is logged and skipped instead of failing the whole individual.
    """
    try:
        confirmed = parse_confirmed_flag(value)
    except ConfirmedFlagError as exc:
        log.error(f"Skipping christening at {stream.current()}: {exc}")
        return None

    link: Fields = {}
    detail = _parse_individual_event_detail(stream, _family_link_handler(link))
    return ChristeningEvent(detail=detail, confirmed=confirmed, **link)


def parse_death_event(value: str, stream: LineStream) -> DeathEvent:
    confirmed = parse_confirmed_flag(value)
    return DeathEvent(detail=_parse_individual_event_detail(stream), confirmed=confirmed)


def parse_generic_event(value: str, stream: LineStream) -> GenericIndividualEvent:
    event_type = IndividualEventType.from_tag_strict(stream.current().tag)
    return GenericIndividualEvent(
        type=event_type,
        detail=_parse_individual_event_detail(stream),
        description=value or None,
    )


def individual_event_handlers(stream: LineStream, events: List[IndividualEvent]) -> Dict[str, Handler]:
    """Handlers for every individual event tag, appending to ``events``."""

    def christening(value: str) -> None:
        event = parse_christening_event(value, stream)
        if event is not None:
            events.append(event)

    handlers: Dict[str, Handler] = {
        "BIRT": lambda _: events.append(parse_birth_event(stream)),
        "CHR": christening,
        "DEAT": lambda value: events.append(parse_death_event(value, stream)),
    }
    for event_type in IndividualEventType:
        handlers[event_type.tag] = lambda value: events.append(parse_generic_event(value, stream))
    return handlers
