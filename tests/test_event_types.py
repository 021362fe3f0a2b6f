# tests/test_event_types.py

from __future__ import annotations

import pytest

from gedcom_kinship.core.exceptions import InvalidEventTypeError
from gedcom_kinship.registry.events import (
    AttributeType,
    FamilyEventType,
    IndividualEventType,
)


def test_family_event_lookup() -> None:
    assert FamilyEventType.from_tag("MARR") is FamilyEventType.MARRIAGE
    assert FamilyEventType.from_tag("DIVF") is FamilyEventType.DIVORCE_FILED
    assert FamilyEventType.MARRIAGE.tag == "MARR"


def test_lenient_lookup_returns_none() -> None:
    """Unknown tags give ``None`` rather than an error."""
    assert FamilyEventType.from_tag("MARS") is None
    assert IndividualEventType.from_tag("BIRT") is None
    assert AttributeType.from_tag("NOPE") is None


def test_strict_lookup_names_the_tag() -> None:
    with pytest.raises(InvalidEventTypeError, match="Invalid family event type tag: MARS"):
        FamilyEventType.from_tag_strict("MARS")

    with pytest.raises(InvalidEventTypeError, match="Invalid individual event type tag: XYZ"):
        IndividualEventType.from_tag_strict("XYZ")

    with pytest.raises(InvalidEventTypeError, match="Invalid attribute type tag: XYZ"):
        AttributeType.from_tag_strict("XYZ")


def test_census_is_both_a_family_and_an_individual_event() -> None:
    assert FamilyEventType.from_tag_strict("CENS") is FamilyEventType.CENSUS
    assert IndividualEventType.from_tag_strict("CENS") is IndividualEventType.CENSUS
    assert AttributeType.from_tag_strict("OCCU") is AttributeType.OCCUPATION
