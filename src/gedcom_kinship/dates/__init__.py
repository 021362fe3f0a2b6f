from .model import (
    ApproximationKind,
    Calendar,
    Date,
    DateApproximated,
    DatePeriod,
    DatePhrase,
    DatePhraseExt,
    DateRange,
    DateValue,
    GregorianCalendar,
    Month,
    RangeKind,
    Year,
)
from .parser import parse_date_value

__all__ = [
    "ApproximationKind",
    "Calendar",
    "Date",
    "DateApproximated",
    "DatePeriod",
    "DatePhrase",
    "DatePhraseExt",
    "DateRange",
    "DateValue",
    "GregorianCalendar",
    "Month",
    "RangeKind",
    "Year",
    "parse_date_value",
]
