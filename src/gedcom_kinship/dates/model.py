# src/gedcom_kinship/dates/model.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Calendar(Enum):
    """Calendar escapes, e.g. ``@#DGREGORIAN@``."""

    GREGORIAN = "@#DGREGORIAN@"
    JULIAN = "@#DJULIAN@"
    HEBREW = "@#DHEBREW@"
    FRENCH_REPUBLICAN = "@#DFRENCH R@"
    ROMAN = "@#DROMAN@"
    UNKNOWN = "@#DUNKNOWN@"


class Month(Enum):
    JAN = 1
    FEB = 2
    MAR = 3
    APR = 4
    MAY = 5
    JUN = 6
    JUL = 7
    AUG = 8
    SEP = 9
    OCT = 10
    NOV = 11
    DEC = 12


@dataclass(frozen=True)
class Year:
    """
    A year, possibly dual-dated.

    ``1749/1750`` gives old_style=1749, new_style=1750; a plain ``1911`` gives
    1911 for both.
    """

    old_style: int
    new_style: int

    @classmethod
    def single(cls, value: int) -> "Year":
        return cls(value, value)

    def __str__(self) -> str:
        if self.old_style == self.new_style:
            return str(self.old_style)
        return f"{self.old_style}/{self.new_style}"


@dataclass(frozen=True)
class GregorianCalendar:
    day: Optional[int] = None
    month: Optional[Month] = None
    year: Optional[Year] = None
    bce: bool = False

    def __str__(self) -> str:
        parts = [str(self.day) if self.day is not None else None,
                 self.month.name if self.month else None,
                 str(self.year) if self.year else None,
                 "BCE" if self.bce else None]
        return " ".join(p for p in parts if p)


@dataclass(frozen=True)
class Date:
    calendar: Calendar
    payload: GregorianCalendar

    def __str__(self) -> str:
        return str(self.payload)


# Forms below are not produced by the parser yet; they keep the model
# complete for GEDCOM date values (FROM/TO, BEF/AFT/BET, ABT/CAL/EST, INT).

class RangeKind(Enum):
    BEFORE = "BEF"
    AFTER = "AFT"
    BETWEEN = "BET"


class ApproximationKind(Enum):
    ABOUT = "ABT"
    CALCULATED = "CAL"
    ESTIMATED = "EST"


@dataclass(frozen=True)
class DatePeriod:
    start: Optional[Date] = None
    end: Optional[Date] = None


@dataclass(frozen=True)
class DateRange:
    kind: RangeKind
    start: Optional[Date] = None
    end: Optional[Date] = None


@dataclass(frozen=True)
class DateApproximated:
    kind: ApproximationKind
    date: Date


@dataclass(frozen=True)
class DatePhrase:
    """Verbatim text of a date that did not match the grammar."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class DatePhraseExt:
    date: Date
    phrase: str


DateValue = Union[Date, DatePeriod, DateRange, DateApproximated, DatePhrase, DatePhraseExt]
