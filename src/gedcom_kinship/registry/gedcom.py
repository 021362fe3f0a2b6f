from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from gedcom_kinship.core.exceptions import RecordLookupError

from .entities import FamilyGroup, FamilyGroupId, Individual, IndividualId, Source, SourceId


@dataclass(frozen=True)
class Gedcom:
    """
    The parsed database: individuals, family groups and sources keyed by id.

    Built once per parse and read-only afterwards. The strict lookups raise
    RecordLookupError for unknown ids, since a dangling cross-reference means
    the data is inconsistent.
    """
    individuals: Dict[IndividualId, Individual] = field(default_factory=dict)
    family_groups: Dict[FamilyGroupId, FamilyGroup] = field(default_factory=dict)
    sources: Dict[SourceId, Source] = field(default_factory=dict)

    def individual(self, individual_id: IndividualId) -> Individual:
        try:
            return self.individuals[individual_id]
        except KeyError:
            raise RecordLookupError(f"No individual with id {individual_id}") from None

    def family_group(self, family_id: FamilyGroupId) -> FamilyGroup:
        try:
            return self.family_groups[family_id]
        except KeyError:
            raise RecordLookupError(f"No family group with id {family_id}") from None

    def source(self, source_id: SourceId) -> Source:
        try:
            return self.sources[source_id]
        except KeyError:
            raise RecordLookupError(f"No source with id {source_id}") from None

    def find_individuals_by_name(self, fragment: str) -> List[Individual]:
        """
        Return individuals with any name containing ``fragment``, ignoring case.

        Results keep the order in which individuals were parsed.
        """
        needle = fragment.strip().lower()
        return [
            individual
            for individual in self.individuals.values()
            if any(
                needle in name.name.lower() or needle in name.display_name.lower()
                for name in individual.names
            )
        ]

    def counts(self) -> Dict[str, int]:
        return {
            "individuals": len(self.individuals),
            "family_groups": len(self.family_groups),
            "sources": len(self.sources),
        }
