# tests/test_line_stream.py

from __future__ import annotations

import pytest

from gedcom_kinship.loader import Line, LineStream


def make_stream(*texts) -> LineStream:
    return LineStream([Line(i, text) for i, text in enumerate(texts, start=1)])


def test_cursor_starts_before_first_line() -> None:
    """The stream has no current line until the first advance."""
    stream = make_stream("0 HEAD")
    assert stream.has_next()
    with pytest.raises(IndexError):
        stream.current()

    assert stream.peek().tag == "HEAD"
    assert stream.advance().tag == "HEAD"
    assert stream.current().tag == "HEAD"
    assert not stream.has_next()


def test_dispatch_by_tag_stops_at_sibling_depth() -> None:
    """Dispatch consumes only the block nested under the current line."""
    stream = make_stream(
        "1 BIRT",
        "2 DATE 1900",
        "2 PLAC Umeå",
        "1 DEAT",
    )
    stream.advance()
    seen = []

    stream.parse_by_tag({
        "DATE": lambda value: seen.append(("DATE", value)),
        "PLAC": lambda value: seen.append(("PLAC", value)),
    })

    assert seen == [("DATE", "1900"), ("PLAC", "Umeå")]
    assert stream.peek().tag == "DEAT"


def test_unknown_tag_is_skipped_with_its_nested_block() -> None:
    """An unhandled tag takes its whole subtree with it."""
    stream = make_stream(
        "0 @I1@ INDI",
        "1 _UID 1234",
        "2 _X nested",
        "3 _Y deeper",
        "1 SEX F",
    )
    stream.advance()
    seen = []

    stream.parse_by_tag({"SEX": seen.append, "_X": seen.append, "_Y": seen.append})

    assert seen == ["F"]
    assert not stream.has_next()


def test_lines_left_unconsumed_by_a_handler_are_skipped() -> None:
    stream = make_stream(
        "1 NAME John",
        "2 GIVN John",
        "2 SURN Smith",
        "1 SEX M",
    )
    seen = []

    # The handler ignores the nested GIVN/SURN lines entirely.
    stream.parse_by_tag({"NAME": seen.append, "SEX": seen.append}, floor=0)

    assert seen == ["John", "M"]


def test_dispatch_by_content_passes_tag_as_value() -> None:
    """Top-level records are routed by kind and receive their identifier."""
    stream = make_stream(
        "0 HEAD",
        "1 CHAR UTF-8",
        "0 @I1@ INDI",
        "0 @F1@ FAM",
        "0 TRLR",
    )
    records = []

    stream.parse_by_content(
        {
            "INDI": lambda record_id: records.append(("INDI", record_id)),
            "FAM": lambda record_id: records.append(("FAM", record_id)),
        },
        floor=-1,
    )

    assert records == [("INDI", "@I1@"), ("FAM", "@F1@")]
    assert not stream.has_next()


def test_malformed_lines_are_skipped_while_dispatching() -> None:
    stream = make_stream(
        "0 @I1@ INDI",
        "X BROKEN",
        "1 SEX F",
        "bad",
        "1 NOTE kept",
    )
    stream.advance()
    seen = []

    stream.parse_by_tag({"SEX": seen.append, "NOTE": seen.append})

    assert seen == ["F", "kept"]


def test_nested_handlers_consume_deeper_levels() -> None:
    """Handlers may dispatch again on the lines below them."""
    stream = make_stream(
        "1 PLAC Umeå",
        "2 MAP",
        "3 LATI N63.8",
        "3 LONG E20.2",
        "2 NOTE town",
    )
    stream.advance()
    coordinates = []
    notes = []

    def map_handler(_):
        stream.parse_by_tag({"LATI": coordinates.append, "LONG": coordinates.append})

    stream.parse_by_tag({"MAP": map_handler, "NOTE": notes.append})

    assert coordinates == ["N63.8", "E20.2"]
    assert notes == ["town"]


def test_unknown_dispatch_key_kind_is_rejected() -> None:
    stream = make_stream("0 HEAD")
    stream.advance()
    with pytest.raises(ValueError):
        stream.dispatch({}, by="depth")


def test_skip_block_returns_number_of_skipped_lines() -> None:
    stream = make_stream("1 A", "2 B", "3 C", "1 D")
    stream.advance()
    assert stream.skip_block(1) == 2
    assert stream.peek().tag == "D"
