from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple, Union

from gedcom_kinship.dates.model import DateValue

from .events import FamilyEventType, IndividualEventType


# -----------------------------
# Identifiers
# -----------------------------

@dataclass(frozen=True)
class IndividualId:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FamilyGroupId:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SourceId:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MultimediaLink:
    value: str

    def __str__(self) -> str:
        return self.value


# -----------------------------
# Enumerations
# -----------------------------

class Sex(Enum):
    MALE = "M"
    FEMALE = "F"
    INTERSEX = "X"
    UNKNOWN = "U"
    NOT_RECORDED = "N"

    @classmethod
    def from_code(cls, code: str) -> Optional["Sex"]:
        for member in cls:
            if member.value == code:
                return member
        return None


class NameType(Enum):
    AKA = "aka"
    BIRTH = "birth"
    IMMIGRANT = "immigrant"
    MAIDEN = "maiden"
    MARRIED = "married"

    @classmethod
    def from_value(cls, value: str) -> Optional["NameType"]:
        lowered = value.strip().lower()
        for member in cls:
            if member.value == lowered:
                return member
        return None


class Pedigree(Enum):
    ADOPTED = "adopted"
    BIRTH = "birth"
    FOSTER = "foster"
    SEALING = "sealing"

    @classmethod
    def from_value(cls, value: str) -> Optional["Pedigree"]:
        lowered = value.strip().lower()
        for member in cls:
            if member.value == lowered:
                return member
        return None


class QualityAssessment(IntEnum):
    """
    Source citation QUAY, ordered by confidence.

    The integer values are the GEDCOM codes and are used directly for
    min/max/average computations.
    """
    UNRELIABLE = 0
    QUESTIONABLE = 1
    SECONDARY = 2
    PRIMARY = 3
    DIRECT = 4

    @classmethod
    def from_value(cls, value: int) -> Optional["QualityAssessment"]:
        try:
            return cls(value)
        except ValueError:
            return None


# -----------------------------
# Places, addresses, citations
# -----------------------------

@dataclass(frozen=True)
class Place:
    name: str
    longitude: Optional[float] = None
    latitude: Optional[float] = None
    notes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Address:
    address_line: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    address3: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    phone_numbers: Tuple[str, ...] = ()
    emails: Tuple[str, ...] = ()
    faxes: Tuple[str, ...] = ()
    websites: Tuple[str, ...] = ()


@dataclass(frozen=True)
class EventTypeCitedFrom:
    """
    EVEN under a citation.

    ``event_type`` is the raw tag name; exporters write values outside the
    event type enumerations here, so it is not validated.
    """
    event_type: str
    role: Optional[str] = None


@dataclass(frozen=True)
class CitationData:
    date: Optional[DateValue] = None
    text: Optional[str] = None


@dataclass(frozen=True)
class SourceCitation:
    source_id: SourceId
    page: Optional[str] = None
    event_type_cited_from: Optional[EventTypeCitedFrom] = None
    data: Optional[CitationData] = None
    notes: Tuple[str, ...] = ()
    multimedia_links: Tuple[MultimediaLink, ...] = ()
    quality_assessment: Optional[QualityAssessment] = None


# -----------------------------
# Events
# -----------------------------

@dataclass(frozen=True)
class EventDetail:
    type: Optional[str] = None
    date: Optional[DateValue] = None
    place: Optional[Place] = None
    address: Optional[Address] = None
    responsible_agency: Optional[str] = None
    religious_affiliation: Optional[str] = None
    cause: Optional[str] = None
    notes: Tuple[str, ...] = ()
    source_citations: Tuple[SourceCitation, ...] = ()
    multimedia_links: Tuple[MultimediaLink, ...] = ()


@dataclass(frozen=True)
class IndividualEventDetail:
    detail: EventDetail = EventDetail()
    age: Optional[str] = None


@dataclass(frozen=True)
class BirthEvent:
    detail: IndividualEventDetail = IndividualEventDetail()
    family_id: Optional[FamilyGroupId] = None


@dataclass(frozen=True)
class ChristeningEvent:
    detail: IndividualEventDetail = IndividualEventDetail()
    confirmed: bool = False
    family_id: Optional[FamilyGroupId] = None


@dataclass(frozen=True)
class DeathEvent:
    detail: IndividualEventDetail = IndividualEventDetail()
    confirmed: bool = False


@dataclass(frozen=True)
class GenericIndividualEvent:
    type: IndividualEventType
    detail: IndividualEventDetail = IndividualEventDetail()
    description: Optional[str] = None


IndividualEvent = Union[BirthEvent, ChristeningEvent, DeathEvent, GenericIndividualEvent]


@dataclass(frozen=True)
class FamilyEventDetail:
    husband_age: Optional[str] = None
    wife_age: Optional[str] = None
    detail: EventDetail = EventDetail()


# -----------------------------
# Records
# -----------------------------

@dataclass(frozen=True)
class IndividualName:
    """
    GEDCOM NAME substructure.

    ``name`` is the raw line value, e.g. ``"John /Doe/"``.
    """
    name: str
    type: Optional[NameType] = None
    prefix: Optional[str] = None
    given: Optional[str] = None
    nickname: Optional[str] = None
    surname_prefix: Optional[str] = None
    surname: Optional[str] = None
    suffix: Optional[str] = None
    notes: Tuple[str, ...] = ()
    source_citations: Tuple[SourceCitation, ...] = ()

    @property
    def display_name(self) -> str:
        return " ".join(self.name.replace("/", " ").split())


@dataclass(frozen=True)
class ChildToFamilyLink:
    family_id: FamilyGroupId
    pedigree: Optional[Pedigree] = None
    notes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SpouseToFamilyLink:
    family_id: FamilyGroupId
    notes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Individual:
    id: IndividualId
    names: Tuple[IndividualName, ...] = ()
    sex: Optional[Sex] = None
    events: Tuple[IndividualEvent, ...] = ()
    child_to_family_links: Tuple[ChildToFamilyLink, ...] = ()
    spouse_to_family_links: Tuple[SpouseToFamilyLink, ...] = ()
    notes: Tuple[str, ...] = ()
    source_citations: Tuple[SourceCitation, ...] = ()
    multimedia_links: Tuple[MultimediaLink, ...] = ()

    @property
    def display_name(self) -> str:
        return self.names[0].display_name if self.names else str(self.id)

    def first_event(self, kind: type) -> Optional[IndividualEvent]:
        for event in self.events:
            if isinstance(event, kind):
                return event
        return None


@dataclass(frozen=True)
class FamilyEvent:
    event_type: FamilyEventType
    detail: FamilyEventDetail = FamilyEventDetail()


@dataclass(frozen=True)
class FamilyGroup:
    id: FamilyGroupId
    husband_id: Optional[IndividualId] = None
    wife_id: Optional[IndividualId] = None
    children_ids: Tuple[IndividualId, ...] = ()
    number_of_children: Optional[int] = None
    events: Tuple[FamilyEvent, ...] = ()
    notes: Tuple[str, ...] = ()
    source_citations: Tuple[SourceCitation, ...] = ()
    multimedia_links: Tuple[MultimediaLink, ...] = ()


@dataclass(frozen=True)
class SourceDataEvent:
    recorded_events: str
    date: Optional[DateValue] = None
    place: Optional[str] = None


@dataclass(frozen=True)
class SourceData:
    events: Tuple[SourceDataEvent, ...] = ()
    responsible_agency: Optional[str] = None
    notes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Source:
    id: SourceId
    data: Optional[SourceData] = None
    author: Optional[str] = None
    title: Optional[str] = None
    abbreviation: Optional[str] = None
    publication_facts: Optional[str] = None
    text: Optional[str] = None
    automated_record_id: Optional[str] = None
    notes: Tuple[str, ...] = ()
    multimedia_links: Tuple[MultimediaLink, ...] = ()
