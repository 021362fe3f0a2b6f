# tests/test_dates.py

from __future__ import annotations

import pytest

from gedcom_kinship.dates import (
    Calendar,
    Date,
    DatePhrase,
    GregorianCalendar,
    Month,
    Year,
    parse_date_value,
)


def gregorian(**kwargs) -> Date:
    return Date(Calendar.GREGORIAN, GregorianCalendar(**kwargs))


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1911", gregorian(year=Year(1911, 1911))),
        ("1911 BCE", gregorian(year=Year(1911, 1911), bce=True)),
        ("900 B.C.", gregorian(year=Year(900, 900), bce=True)),
        ("NOV 1911", gregorian(month=Month.NOV, year=Year(1911, 1911))),
        ("27 NOV 1911", gregorian(day=27, month=Month.NOV, year=Year(1911, 1911))),
        ("27 NOV", gregorian(day=27, month=Month.NOV)),
        ("FEB 1749/1750", gregorian(month=Month.FEB, year=Year(1749, 1750))),
        ("3 FEB 1749/1750", gregorian(day=3, month=Month.FEB, year=Year(1749, 1750))),
        ("@#DGREGORIAN@ 27 NOV 1911", gregorian(day=27, month=Month.NOV, year=Year(1911, 1911))),
    ],
)
def test_gregorian_grammar(raw, expected):
    assert parse_date_value(raw) == expected


def test_abbreviated_dual_year_takes_leading_digits():
    assert parse_date_value("MAR 1749/50") == gregorian(month=Month.MAR, year=Year(1749, 1750))
    assert parse_date_value("MAR 1699/00") == gregorian(month=Month.MAR, year=Year(1699, 1700))


@pytest.mark.parametrize(
    "raw",
    [
        "ABT 1950",
        "BET 1900 AND 1910",
        "27 nov 1911",
        "1 JAN 19",
        "@#DJULIAN@ 1 JAN 1700",
        "unknown",
        "",
    ],
)
def test_anything_else_is_a_phrase(raw):
    assert parse_date_value(raw) == DatePhrase(raw)


def test_date_str_round_trips_simple_forms():
    assert str(parse_date_value("27 NOV 1911")) == "27 NOV 1911"
    assert str(parse_date_value("ABT 1950")) == "ABT 1950"
