# tests/test_parse_individual.py

from __future__ import annotations

import pytest

from gedcom_kinship.core.exceptions import ConfirmedFlagError
from gedcom_kinship.dates import DatePhrase
from gedcom_kinship.parsing import parse_gedcom
from gedcom_kinship.registry.entities import (
    BirthEvent,
    ChristeningEvent,
    DeathEvent,
    FamilyGroupId,
    GenericIndividualEvent,
    IndividualId,
    NameType,
    Pedigree,
    QualityAssessment,
    Sex,
)
from gedcom_kinship.registry.events import IndividualEventType


def parse_one(*texts):
    gedcom = parse_gedcom(["0 @I1@ INDI", *texts])
    return gedcom.individual(IndividualId("@I1@"))


def test_names_and_sex():
    person = parse_one(
        "1 NAME John /Smith/",
        "2 TYPE Birth",
        "2 NPFX Dr.",
        "2 GIVN John",
        "2 NICK Jack",
        "2 SPFX von",
        "2 SURN Smith",
        "2 NSFX Jr.",
        "2 NOTE From the census",
        "1 NAME Johnny /Smith/",
        "1 SEX M",
    )

    assert person.sex is Sex.MALE
    assert len(person.names) == 2
    name = person.names[0]
    assert name.name == "John /Smith/"
    assert name.type is NameType.BIRTH
    assert (name.prefix, name.given, name.nickname) == ("Dr.", "John", "Jack")
    assert (name.surname_prefix, name.surname, name.suffix) == ("von", "Smith", "Jr.")
    assert name.notes == ("From the census",)
    assert person.display_name == "John Smith"


def test_unknown_codes_are_tolerated():
    person = parse_one(
        "1 NAME A /B/",
        "2 TYPE nickname",
        "1 SEX Q",
    )
    assert person.sex is None
    assert person.names[0].type is None


def test_family_links():
    person = parse_one(
        "1 FAMC @F1@",
        "2 PEDI adopted",
        "2 NOTE Raised by aunt",
        "1 FAMS @F2@",
        "2 NOTE Second marriage",
    )
    child_link = person.child_to_family_links[0]
    assert child_link.family_id == FamilyGroupId("@F1@")
    assert child_link.pedigree is Pedigree.ADOPTED
    assert child_link.notes == ("Raised by aunt",)
    spouse_link = person.spouse_to_family_links[0]
    assert spouse_link.family_id == FamilyGroupId("@F2@")
    assert spouse_link.notes == ("Second marriage",)


def test_birth_with_family_link_and_age():
    person = parse_one(
        "1 BIRT",
        "2 DATE ABT 1890",
        "2 AGE 0",
        "2 FAMC @F9@",
    )
    birth = person.events[0]
    assert isinstance(birth, BirthEvent)
    assert birth.family_id == FamilyGroupId("@F9@")
    assert birth.detail.age == "0"
    assert birth.detail.detail.date == DatePhrase("ABT 1890")


@pytest.mark.parametrize("flag, expected", [("Y", True), ("", False)])
def test_death_confirmed_flag(flag, expected):
    line = f"1 DEAT {flag}".rstrip()
    person = parse_one(line, "2 CAUS Fever")
    death = person.events[0]
    assert isinstance(death, DeathEvent)
    assert death.confirmed is expected
    assert death.detail.detail.cause == "Fever"


def test_invalid_death_flag_is_fatal():
    with pytest.raises(ConfirmedFlagError):
        parse_one("1 DEAT maybe")


def test_invalid_christening_flag_skips_only_that_event():
    person = parse_one(
        "1 CHR Baptised at home",
        "2 DATE 1900",
        "1 CHR Y",
        "2 FAMC @F1@",
        "1 SEX F",
    )
    assert person.sex is Sex.FEMALE
    assert len(person.events) == 1
    christening = person.events[0]
    assert isinstance(christening, ChristeningEvent)
    assert christening.confirmed is True
    assert christening.family_id == FamilyGroupId("@F1@")


def test_generic_events_keep_description_and_order():
    person = parse_one(
        "1 BURI",
        "2 PLAC Old churchyard",
        "1 EVEN Moved abroad",
        "2 TYPE Migration",
        "1 GRAD",
    )
    kinds = [event.type for event in person.events]
    assert kinds == [IndividualEventType.BURIAL, IndividualEventType.EVENT, IndividualEventType.GRADUATION]
    assert all(isinstance(event, GenericIndividualEvent) for event in person.events)
    assert person.events[0].detail.detail.place.name == "Old churchyard"
    assert person.events[1].description == "Moved abroad"
    assert person.events[1].detail.detail.type == "Migration"
    assert person.events[2].description is None


def test_attributes_are_skipped():
    person = parse_one("1 OCCU Farmer", "2 DATE 1900", "1 SEX F")
    assert person.events == ()
    assert person.sex is Sex.FEMALE


def test_event_citations():
    person = parse_one(
        "1 BIRT",
        "2 SOUR @S1@",
        "3 PAGE Folio 12",
        "3 EVEN BIRT",
        "4 ROLE CHIL",
        "3 DATA",
        "4 DATE 2 JAN 1890",
        "4 TEXT Born to John",
        "3 NOTE Hard to read",
        "3 OBJE @M1@",
        "3 QUAY 3",
        "2 SOUR @S2@",
        "3 QUAY 9",
        "2 SOUR @S3@",
        "3 QUAY ?",
    )
    first, second, third = person.events[0].detail.detail.source_citations
    assert str(first.source_id) == "@S1@"
    assert first.page == "Folio 12"
    assert first.event_type_cited_from.event_type == "BIRT"
    assert first.event_type_cited_from.role == "CHIL"
    assert first.data.text == "Born to John"
    assert str(first.data.date) == "2 JAN 1890"
    assert first.notes == ("Hard to read",)
    assert [str(link) for link in first.multimedia_links] == ["@M1@"]
    assert first.quality_assessment is QualityAssessment.PRIMARY
    assert second.quality_assessment is None
    assert third.quality_assessment is None


def test_event_type_cited_from_accepts_any_tag():
    person = parse_one(
        "1 SOUR @S1@",
        "2 EVEN Photo",
    )
    assert person.source_citations[0].event_type_cited_from.event_type == "Photo"


def test_place_coordinates_are_signed():
    person = parse_one(
        "1 BIRT",
        "2 PLAC Somewhere",
        "3 MAP",
        "4 LATI S33.8688",
        "4 LONG W151.2093",
        "3 NOTE Approximate",
        "1 DEAT",
        "2 PLAC Umeå",
        "3 MAP",
        "4 LATI N63.8258",
        "4 LONG E20.2630",
    )
    south_west = person.events[0].detail.detail.place
    assert south_west.latitude == pytest.approx(-33.8688)
    assert south_west.longitude == pytest.approx(-151.2093)
    assert south_west.notes == ("Approximate",)

    north_east = person.events[1].detail.detail.place
    assert north_east.latitude == pytest.approx(63.8258)
    assert north_east.longitude == pytest.approx(20.2630)


def test_address_collects_contact_lines_at_address_depth():
    person = parse_one(
        "1 EVEN",
        "2 ADDR 12 High Street",
        "3 ADR1 Flat 2",
        "3 CITY Leeds",
        "3 STAE West Yorkshire",
        "3 POST LS1 1AA",
        "3 CTRY England",
        "2 PHON 0113 496 0000",
        "2 PHON 0113 496 0001",
        "2 EMAIL peter@example.com",
        "2 FAX 0113 496 0002",
        "2 WWW example.com",
        "2 NOTE After the address",
        "2 PHON 999",
    )
    detail = person.events[0].detail.detail
    address = detail.address
    assert address.address_line == "12 High Street"
    assert address.address1 == "Flat 2"
    assert (address.city, address.state, address.postal_code, address.country) == (
        "Leeds",
        "West Yorkshire",
        "LS1 1AA",
        "England",
    )
    assert address.phone_numbers == ("0113 496 0000", "0113 496 0001")
    assert address.emails == ("peter@example.com",)
    assert address.faxes == ("0113 496 0002",)
    assert address.websites == ("example.com",)
    # Contact lines after another tag are not part of the address.
    assert detail.notes == ("After the address",)


def test_individual_notes_sources_and_media():
    person = parse_one(
        "1 NOTE First",
        "2 CONC  line",
        "2 CONT second",
        "1 SOUR @S1@",
        "1 OBJE @M1@",
    )
    assert person.notes == ("First line\nsecond",)
    assert [str(c.source_id) for c in person.source_citations] == ["@S1@"]
    assert [str(link) for link in person.multimedia_links] == ["@M1@"]
