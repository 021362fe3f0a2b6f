# src/gedcom_kinship/dates/parser.py

from __future__ import annotations

import re
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .model import Calendar, Date, DatePhrase, DateValue, GregorianCalendar, Month, Year


# ---------------------------------------------------------------------------
# Token classes
# ---------------------------------------------------------------------------

MONTHS: Dict[str, Month] = {m.name: m for m in Month}

BCE_MARKERS = {"BCE", "BC", "B.C."}

_YEAR_RE = re.compile(r"\d{3,4}")
_DAY_RE = re.compile(r"\d{1,2}")
_DUAL_YEAR_RE = re.compile(r"(\d{3,4})/(\d{1,4})")

YEAR = "year"
DAY = "day"
MONTH = "month"
DUAL_YEAR = "dual_year"
BCE = "bce"


def _match_token(kind: str, token: str) -> Optional[object]:
    """Return the parsed value of ``token`` as ``kind``, or None."""
    if kind == YEAR:
        return Year.single(int(token)) if _YEAR_RE.fullmatch(token) else None
    if kind == DAY:
        return int(token) if _DAY_RE.fullmatch(token) else None
    if kind == MONTH:
        return MONTHS.get(token)
    if kind == DUAL_YEAR:
        m = _DUAL_YEAR_RE.fullmatch(token)
        return _dual_year(m.group(1), m.group(2)) if m else None
    if kind == BCE:
        return True if token in BCE_MARKERS else None
    raise ValueError(f"Unknown token kind: {kind}")


def _dual_year(old: str, new: str) -> Year:
    """
    Build a dual-style year; an abbreviated new-style year takes its leading
    digits from the old-style one (``1749/50`` -> 1749/1750).
    """
    old_style = int(old)
    if len(new) >= len(old):
        return Year(old_style, int(new))

    base = 10 ** len(new)
    new_style = old_style - old_style % base + int(new)
    if new_style < old_style:
        new_style += base
    return Year(old_style, new_style)


# ---------------------------------------------------------------------------
# Grammar: tried in order, first match wins
# ---------------------------------------------------------------------------

Builder = Callable[[List[object]], GregorianCalendar]

PATTERNS: Sequence[Tuple[Tuple[str, ...], Builder]] = (
    ((YEAR,), lambda v: GregorianCalendar(year=v[0])),
    ((YEAR, BCE), lambda v: GregorianCalendar(year=v[0], bce=True)),
    ((MONTH, YEAR), lambda v: GregorianCalendar(month=v[0], year=v[1])),
    ((DAY, MONTH, YEAR), lambda v: GregorianCalendar(day=v[0], month=v[1], year=v[2])),
    ((DAY, MONTH), lambda v: GregorianCalendar(day=v[0], month=v[1])),
    ((MONTH, DUAL_YEAR), lambda v: GregorianCalendar(month=v[0], year=v[1])),
    ((DAY, MONTH, DUAL_YEAR), lambda v: GregorianCalendar(day=v[0], month=v[1], year=v[2])),
)


def _match_pattern(shape: Tuple[str, ...], tokens: List[str]) -> Optional[List[object]]:
    if len(shape) != len(tokens):
        return None
    values: List[object] = []
    for kind, token in zip(shape, tokens):
        value = _match_token(kind, token)
        if value is None:
            return None
        values.append(value)
    return values


def parse_gregorian(tokens: List[str]) -> Optional[GregorianCalendar]:
    for shape, build in PATTERNS:
        values = _match_pattern(shape, tokens)
        if values is not None:
            return build(values)
    return None


def parse_date_value(raw: str) -> DateValue:
    """
    Parse the content of a DATE line.

    Only plain Gregorian dates are understood:

        "1911"              -> year 1911
        "1911 BCE"          -> year 1911, before common era
        "NOV 1911"          -> month + year
        "27 NOV 1911"       -> day + month + year
        "27 NOV"            -> day + month
        "NOV 1749/1750"     -> month + dual-style year
        "27 NOV 1749/1750"  -> day + month + dual-style year

    An optional ``@#DGREGORIAN@`` escape may precede these. Anything else
    (qualifiers, ranges, other calendars, free text) is returned verbatim as
    a DatePhrase; this function never raises.
    """
    tokens = raw.split(" ")
    if tokens and tokens[0] == Calendar.GREGORIAN.value:
        tokens = tokens[1:]

    payload = parse_gregorian(tokens)
    if payload is None:
        return DatePhrase(raw)
    return Date(Calendar.GREGORIAN, payload)
