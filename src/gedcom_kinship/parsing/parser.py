"""
GEDCOM parser entry point.

Turns raw text lines into a ``Gedcom`` aggregate:

    raw lines -> BOM strip -> Line -> (strict format check) -> CONC/CONT merge
              -> LineStream -> INDI / FAM / SOUR record parsers
"""

from __future__ import annotations

import os
from typing import Dict, List, Sequence, TypeVar

from gedcom_kinship.core.exceptions import GedcomFormatError
from gedcom_kinship.loader import Line, LineStream, load_lines, merge_continuations, strip_byte_order_mark
from gedcom_kinship.logging import get_logger
from gedcom_kinship.registry.entities import (
    FamilyGroup,
    FamilyGroupId,
    Individual,
    IndividualId,
    Source,
    SourceId,
)
from gedcom_kinship.registry.gedcom import Gedcom

from .family import parse_family_group
from .individual import parse_individual
from .source import parse_source

log = get_logger(__name__)

K = TypeVar("K")
V = TypeVar("V")

# Records above depth 0 are nested under this virtual root.
TOP_LEVEL_FLOOR = -1


def to_lines(raw_lines: Sequence[str]) -> List[Line]:
    """Number raw lines from 1 after dropping a leading byte-order mark."""
    return [Line(lineno, text) for lineno, text in enumerate(strip_byte_order_mark(raw_lines), start=1)]


def validate_format(lines: Sequence[Line]) -> None:
    """
    Strict pre-pass: fail if any line is malformed.

    Raises:
        GedcomFormatError: listing every malformed line, not only the first.
    """
    malformed = [line for line in lines if not line.is_well_formed()]
    if malformed:
        log.error(f"{len(malformed)} improperly formatted line(s)")
        raise GedcomFormatError(malformed)


def _register(records: Dict[K, V], key: K, record: V, kind: str) -> None:
    if key in records:
        log.warning(f"Duplicate {kind} id {key}; keeping the last record")
    records[key] = record


def parse_gedcom(raw_lines: Sequence[str], *, strict: bool = False) -> Gedcom:
    """
    Parse GEDCOM text lines into a ``Gedcom`` aggregate.

    Args:
        raw_lines: Line texts without terminators.
        strict: Reject the whole input if any line is malformed. Otherwise
            malformed lines are skipped with a warning.
    """
    lines = to_lines(raw_lines)
    if strict:
        validate_format(lines)

    stream = LineStream(merge_continuations(lines))

    individuals: Dict[IndividualId, Individual] = {}
    family_groups: Dict[FamilyGroupId, FamilyGroup] = {}
    sources: Dict[SourceId, Source] = {}

    def individual(record_id: str) -> None:
        record = parse_individual(record_id, stream)
        _register(individuals, record.id, record, "individual")

    def family_group(record_id: str) -> None:
        record = parse_family_group(record_id, stream)
        _register(family_groups, record.id, record, "family group")

    def source(record_id: str) -> None:
        record = parse_source(record_id, stream)
        _register(sources, record.id, record, "source")

    stream.parse_by_content(
        {"INDI": individual, "FAM": family_group, "SOUR": source},
        floor=TOP_LEVEL_FLOOR,
    )

    gedcom = Gedcom(individuals=individuals, family_groups=family_groups, sources=sources)
    log.info(
        f"Parsed {len(individuals)} individuals, {len(family_groups)} family groups, "
        f"{len(sources)} sources"
    )
    return gedcom


def parse_gedcom_file(path: str | os.PathLike, *, strict: bool = False) -> Gedcom:
    return parse_gedcom(load_lines(path), strict=strict)
