# tests/test_grading.py

from __future__ import annotations

from gedcom_kinship.parsing import parse_gedcom, parse_gedcom_file
from gedcom_kinship.registry.entities import BirthEvent, IndividualId, QualityAssessment
from gedcom_kinship.relationships import IndividualGrade, source_grade
from gedcom_kinship.utils import mock_file_path


def test_grades_from_fixture():
    gedcom = parse_gedcom_file(mock_file_path("family.ged"))

    john = IndividualGrade.of(gedcom.individual(IndividualId("@I1@")))
    assert john.birth is QualityAssessment.PRIMARY
    assert john.death is QualityAssessment.QUESTIONABLE
    assert john.min_grade is QualityAssessment.QUESTIONABLE
    assert john.max_grade is QualityAssessment.PRIMARY
    assert john.average_grade is QualityAssessment.SECONDARY

    mary = IndividualGrade.of(gedcom.individual(IndividualId("@I2@")))
    assert (mary.birth, mary.death) == (QualityAssessment.DIRECT, QualityAssessment.SECONDARY)
    assert mary.average_grade is QualityAssessment.PRIMARY


def test_missing_events_and_citations_are_unreliable():
    gedcom = parse_gedcom([
        "0 @I1@ INDI",
        "1 BIRT",
        "2 SOUR @S1@",
        "2 SOUR @S2@",
        "3 QUAY 7",
    ])
    grade = IndividualGrade.of(gedcom.individual(IndividualId("@I1@")))
    assert grade.birth is QualityAssessment.UNRELIABLE
    assert grade.death is QualityAssessment.UNRELIABLE
    assert grade.average_grade is QualityAssessment.UNRELIABLE


def test_best_citation_of_first_event_wins():
    gedcom = parse_gedcom([
        "0 @I1@ INDI",
        "1 BIRT",
        "2 SOUR @S1@",
        "3 QUAY 1",
        "2 SOUR @S2@",
        "3 QUAY 3",
        "1 BIRT",
        "2 SOUR @S3@",
        "3 QUAY 4",
    ])
    person = gedcom.individual(IndividualId("@I1@"))
    assert source_grade(person, BirthEvent) is QualityAssessment.PRIMARY


def test_average_rounds_down():
    gedcom = parse_gedcom([
        "0 @I1@ INDI",
        "1 BIRT",
        "2 SOUR @S1@",
        "3 QUAY 3",
    ])
    grade = IndividualGrade.of(gedcom.individual(IndividualId("@I1@")))
    assert grade.average_grade is QualityAssessment.QUESTIONABLE
