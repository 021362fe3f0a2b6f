from __future__ import annotations

from .entities import (
    Address,
    BirthEvent,
    ChildToFamilyLink,
    ChristeningEvent,
    CitationData,
    DeathEvent,
    EventDetail,
    EventTypeCitedFrom,
    FamilyEvent,
    FamilyEventDetail,
    FamilyGroup,
    FamilyGroupId,
    GenericIndividualEvent,
    Individual,
    IndividualEvent,
    IndividualEventDetail,
    IndividualId,
    IndividualName,
    MultimediaLink,
    NameType,
    Pedigree,
    Place,
    QualityAssessment,
    Sex,
    Source,
    SourceCitation,
    SourceData,
    SourceDataEvent,
    SourceId,
    SpouseToFamilyLink,
)
from .events import (
    AttributeType,
    FamilyEventType,
    IndividualEventType,
)
from .gedcom import Gedcom

__all__ = [
    "Address",
    "AttributeType",
    "BirthEvent",
    "ChildToFamilyLink",
    "ChristeningEvent",
    "CitationData",
    "DeathEvent",
    "EventDetail",
    "EventTypeCitedFrom",
    "FamilyEvent",
    "FamilyEventDetail",
    "FamilyEventType",
    "FamilyGroup",
    "FamilyGroupId",
    "Gedcom",
    "GenericIndividualEvent",
    "Individual",
    "IndividualEvent",
    "IndividualEventDetail",
    "IndividualEventType",
    "IndividualId",
    "IndividualName",
    "MultimediaLink",
    "NameType",
    "Pedigree",
    "Place",
    "QualityAssessment",
    "Sex",
    "Source",
    "SourceCitation",
    "SourceData",
    "SourceDataEvent",
    "SourceId",
    "SpouseToFamilyLink",
]
