# src/gedcom_kinship/loader/line.py

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import cached_property
from typing import Optional

from gedcom_kinship.core.exceptions import MalformedLineError


@dataclass(frozen=True)
class Line:
    """
    A single raw GEDCOM line.

    Attributes:
        lineno: 1-based sequence number in the original input.
        text: The line text without trailing newline characters.

    The line is split lazily into ``<depth> <tag>[ <content>]``. On level-0
    records the tag position holds the record identifier and the content
    holds the record kind, e.g. ``0 @I1@ INDI``.
    """

    lineno: int
    text: str

    @cached_property
    def _depth(self) -> Optional[int]:
        token = self.text.split(" ", 1)[0]
        # Plain ASCII digits only; str.isdigit also accepts superscripts.
        return int(token) if token.isascii() and token.isdigit() else None

    @property
    def depth(self) -> int:
        """
        Parsed depth of the line.

        Raises:
            MalformedLineError: if the depth token is not a non-negative integer.
        """
        depth = self._depth
        if depth is None:
            raise MalformedLineError(self.lineno, self.text)
        return depth

    @property
    def tag(self) -> str:
        _, _, rest = self.text.partition(" ")
        return rest.split(" ", 1)[0]

    @property
    def content(self) -> str:
        # Exactly one separator is dropped; further leading spaces are content.
        _, _, rest = self.text.partition(" ")
        _, _, content = rest.partition(" ")
        return content

    def is_well_formed(self) -> bool:
        return self._depth is not None

    def has_content(self) -> bool:
        _, _, rest = self.text.partition(" ")
        return " " in rest

    def extended(self, text: str) -> "Line":
        """Return a copy with ``text`` appended to the content."""
        separator = "" if self.has_content() else " "
        return replace(self, text=self.text + separator + text)

    def __str__(self) -> str:
        return f"{self.lineno}: {self.text}"
