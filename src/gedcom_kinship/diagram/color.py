from __future__ import annotations

from enum import Enum
from typing import Optional

from rich.color import Color as RichColor
from rich.color import ColorSystem
from rich.style import Style


class Color(Enum):
    """256-colour palette indexes used for diagram boxes."""
    RED = 124
    YELLOW = 220
    GREEN = 34

    @property
    def style(self) -> Style:
        return Style(color=RichColor.from_ansi(self.value))

    def paint(self, text: str) -> str:
        """Wrap ``text`` in the colour's ANSI sequence, followed by a reset."""
        return self.style.render(text, color_system=ColorSystem.EIGHT_BIT)


def colorize(text: str, color: Optional[Color]) -> str:
    if color is None:
        return text
    return color.paint(text)
