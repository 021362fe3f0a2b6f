# src/gedcom_kinship/loader/line_stream.py

from __future__ import annotations

from typing import Callable, List, Mapping, Optional, Sequence

from gedcom_kinship.logging import get_logger

from .line import Line

log = get_logger(__name__)

Handler = Callable[[str], None]

BY_TAG = "tag"
BY_CONTENT = "content"


class LineStream:
    """
    Cursor over merged GEDCOM lines with one line of lookahead.

    The cursor starts before the first line; ``advance()`` moves it forward
    and ``current()`` returns the line it rests on. Every record parser
    consumes its nested block through ``dispatch``.
    """

    def __init__(self, lines: Sequence[Line]):
        self._lines: List[Line] = list(lines)
        self._index = -1

    def __len__(self) -> int:  # pragma: no cover - trivial wrapper
        return len(self._lines)

    def has_next(self) -> bool:
        return self._index + 1 < len(self._lines)

    def current(self) -> Line:
        if self._index < 0:
            raise IndexError("Stream has not been advanced yet")
        return self._lines[self._index]

    def peek(self) -> Line:
        """Return the next line without consuming it."""
        if not self.has_next():
            raise IndexError("No more lines")
        return self._lines[self._index + 1]

    def advance(self) -> Line:
        """Consume and return the next line."""
        line = self.peek()
        self._index += 1
        return line

    # ------------------------------------------------------------------ #
    # Depth-bounded consumption
    # ------------------------------------------------------------------ #

    def _next_nested(self, depth: int) -> Optional[Line]:
        """
        Advance to the next well-formed line deeper than ``depth``.

        Malformed lines on the way are consumed and skipped. Returns None,
        without consuming, once the next line is at ``depth`` or shallower.
        """
        while self.has_next():
            upcoming = self.peek()
            if not upcoming.is_well_formed():
                self.advance()
                log.warning(f"Could not parse line {upcoming}")
                continue
            if upcoming.depth <= depth:
                return None
            return self.advance()
        return None

    def skip_block(self, depth: int) -> int:
        """Skip every line nested below ``depth``. Returns the number skipped."""
        skipped = 0
        while True:
            line = self._next_nested(depth)
            if line is None:
                return skipped
            log.warning(f"Skipping unparsed nested line {line}")
            skipped += 1

    def dispatch(
        self,
        handlers: Mapping[str, Handler],
        *,
        by: str = BY_TAG,
        floor: Optional[int] = None,
    ) -> None:
        """
        Consume the block nested under the current line.

        Each nested line is routed by its tag (or, with ``by="content"``, by
        its content) to a handler, which receives the other half of the line
        and may consume deeper lines itself. Consumption stops at the first
        line whose depth is not greater than the super line's depth; that
        line is left for the caller.

        Args:
            handlers: key -> handler mapping.
            by: ``"tag"`` or ``"content"``.
            floor: Depth of the super line; defaults to ``current().depth``.
        """
        if by not in (BY_TAG, BY_CONTENT):
            raise ValueError(f"Unknown dispatch key: {by!r}")

        depth = self.current().depth if floor is None else floor

        while True:
            line = self._next_nested(depth)
            if line is None:
                return

            key, value = (line.tag, line.content) if by == BY_TAG else (line.content, line.tag)
            handler = handlers.get(key)

            if handler is None:
                log.warning(f"No parser found for {by} {key!r}, skipping line {line}")
                self.skip_block(line.depth)
                continue

            handler(value)
            self.skip_block(line.depth)

    def parse_by_tag(self, handlers: Mapping[str, Handler], *, floor: Optional[int] = None) -> None:
        self.dispatch(handlers, by=BY_TAG, floor=floor)

    def parse_by_content(self, handlers: Mapping[str, Handler], *, floor: Optional[int] = None) -> None:
        self.dispatch(handlers, by=BY_CONTENT, floor=floor)
