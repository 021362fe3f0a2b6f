# src/gedcom_kinship/registry/events.py

from __future__ import annotations

import re
from enum import Enum

from gedcom_kinship.core.exceptions import InvalidEventTypeError


# ---------------------------------------------------------------------------
# Event Tag Definitions (GEDCOM 5.5.1)
# ---------------------------------------------------------------------------

def _describe(cls) -> str:
    # FamilyEventType -> "family event type"
    return " ".join(re.findall(r"[A-Z][a-z]*", cls.__name__)).lower()


class _TaggedEnum(Enum):
    """Enum whose values are GEDCOM tag names."""

    @property
    def tag(self) -> str:
        return self.value

    @classmethod
    def from_tag(cls, tag: str):
        for member in cls:
            if member.value == tag:
                return member
        return None

    @classmethod
    def from_tag_strict(cls, tag: str):
        member = cls.from_tag(tag)
        if member is None:
            raise InvalidEventTypeError(f"Invalid {_describe(cls)} tag: {tag}")
        return member


class FamilyEventType(_TaggedEnum):
    ANNULMENT = "ANUL"
    CENSUS = "CENS"
    DIVORCE = "DIV"
    DIVORCE_FILED = "DIVF"
    ENGAGEMENT = "ENGA"
    MARRIAGE_BANN = "MARB"
    MARRIAGE_CONTRACT = "MARC"
    MARRIAGE = "MARR"
    MARRIAGE_LICENSE = "MARL"


class IndividualEventType(_TaggedEnum):
    """Individual events without a dedicated record type (BIRT, CHR, DEAT have one)."""

    BURIAL = "BURI"
    CREMATION = "CREM"
    ADOPTION = "ADOP"
    BAPTISM = "BAPM"
    BAR_MITZVAH = "BARM"
    BAS_MITZVAH = "BASM"
    BLESSING = "BLES"
    ADULT_CHRISTENING = "CHRA"
    CONFIRMATION = "CONF"
    FIRST_COMMUNION = "FCOM"
    ORDINATION = "ORDN"
    NATURALIZATION = "NATU"
    EMIGRATION = "EMIG"
    IMMIGRATION = "IMMI"
    CENSUS = "CENS"
    PROBATE = "PROB"
    WILL = "WILL"
    GRADUATION = "GRAD"
    RETIREMENT = "RETI"
    EVENT = "EVEN"


class AttributeType(_TaggedEnum):
    CASTE = "CAST"
    PHYSICAL_DESCRIPTION = "DSCR"
    EDUCATION = "EDUC"
    NATIONAL_ID = "IDNO"
    NATIONALITY = "NATI"
    CHILDREN_COUNT = "NCHI"
    MARRIAGE_COUNT = "NMR"
    OCCUPATION = "OCCU"
    POSSESSIONS = "PROP"
    RELIGION = "RELI"
    RESIDENCE = "RESI"
    SOCIAL_SECURITY_NUMBER = "SSN"
    NOBILITY_TITLE = "TITL"
    FACT = "FACT"
