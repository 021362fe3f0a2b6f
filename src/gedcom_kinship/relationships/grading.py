from __future__ import annotations

from dataclasses import dataclass

from gedcom_kinship.registry.entities import (
    BirthEvent,
    DeathEvent,
    Individual,
    QualityAssessment,
)


@dataclass(frozen=True)
class IndividualGrade:
    """How well an individual's birth and death are sourced."""
    individual: Individual
    birth: QualityAssessment
    death: QualityAssessment

    @property
    def min_grade(self) -> QualityAssessment:
        return min(self.birth, self.death)

    @property
    def max_grade(self) -> QualityAssessment:
        return max(self.birth, self.death)

    @property
    def average_grade(self) -> QualityAssessment:
        return QualityAssessment((self.birth + self.death) // 2)

    @classmethod
    def of(cls, individual: Individual) -> "IndividualGrade":
        return cls(
            individual=individual,
            birth=source_grade(individual, BirthEvent),
            death=source_grade(individual, DeathEvent),
        )


def source_grade(individual: Individual, kind: type) -> QualityAssessment:
    """
    Best citation quality on the first event of ``kind``.

    Citations without a QUAY value are ignored; no event or no graded
    citation means UNRELIABLE.
    """
    event = individual.first_event(kind)
    if event is None:
        return QualityAssessment.UNRELIABLE

    grades = [
        citation.quality_assessment
        for citation in event.detail.detail.source_citations
        if citation.quality_assessment is not None
    ]
    return max(grades, default=QualityAssessment.UNRELIABLE)
