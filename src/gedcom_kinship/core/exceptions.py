from __future__ import annotations

from typing import Sequence


class GedcomKinshipError(Exception):
    """Base exception for parse, lookup and layout failures."""


class MalformedLineError(GedcomKinshipError, ValueError):
    """Raised when a line's depth token is not a non-negative integer."""

    def __init__(self, lineno: int, text: str):
        super().__init__(f"Line {lineno}: depth is not numeric -> {text!r}")
        self.lineno = lineno
        self.text = text


class GedcomFormatError(GedcomKinshipError, ValueError):
    """Raised by the strict pre-pass when any line is malformed."""

    def __init__(self, lines: Sequence[object]):
        listing = "\n".join(str(line) for line in lines)
        super().__init__(
            f"Following lines are improperly formatted:\n{listing}\nCannot parse file"
        )
        self.lines = list(lines)


class RecordLookupError(GedcomKinshipError, KeyError):
    """Raised when an identifier is not present in the aggregate."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class InvalidEventTypeError(GedcomKinshipError, ValueError):
    """Raised when a tag does not name a known event type."""


class ConfirmedFlagError(GedcomKinshipError, ValueError):
    """Raised when an occurrence flag is neither 'Y' nor empty."""


class LayoutError(GedcomKinshipError):
    """Raised when a relationship path cannot be laid out."""
