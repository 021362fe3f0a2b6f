# src/gedcom_kinship/loader/continuation.py

"""
Continuation merging: folds GEDCOM CONC / CONT lines into the line they extend.

Rules (GEDCOM 5.5.1 / 5.5.5):
    - CONC: Append text directly to the previous logical line.
            No newline added.

    - CONT: Append a newline + the text.

Examples:
    "1 NOTE Line one" followed by "2 CONC  and more"
        → "1 NOTE Line one and more"

    followed by "2 CONT Second line"
        → "1 NOTE Line one and more\\nSecond line"

The merge runs on the flat line sequence before any structural parsing, in
one left-to-right pass, and returns a new sequence without continuation lines.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from gedcom_kinship.logging import get_logger

from .line import Line

log = get_logger(__name__)

BYTE_ORDER_MARK = "\ufeff"
CONCATENATION_TAG = "CONC"
CONTINUATION_TAG = "CONT"
CONTINUATION_TAGS = frozenset({CONCATENATION_TAG, CONTINUATION_TAG})


def strip_byte_order_mark(texts: Sequence[str]) -> List[str]:
    """Drop a leading byte-order mark from the first line, if present."""
    stripped = list(texts)
    if stripped and stripped[0].startswith(BYTE_ORDER_MARK):
        stripped[0] = stripped[0][len(BYTE_ORDER_MARK):]
    return stripped


def merge_continuations(lines: Iterable[Line]) -> List[Line]:
    """
    Merge CONC / CONT lines into the preceding retained line.

    Args:
        lines: Lines in input order.

    Returns:
        A new list with every continuation line folded into its predecessor.
    """
    merged: List[Line] = []

    for line in lines:
        tag = line.tag
        if tag not in CONTINUATION_TAGS:
            merged.append(line)
            continue

        if not merged:
            log.warning(f"Dropping {tag} line with nothing to extend -> {line}")
            continue

        addition = line.content if tag == CONCATENATION_TAG else "\n" + line.content
        merged[-1] = merged[-1].extended(addition)

    return merged
