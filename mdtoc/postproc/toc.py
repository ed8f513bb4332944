"""Table-of-contents list formatting."""

from __future__ import annotations

import io
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Protocol, TextIO

from ..models import HeadingRecord

ALTERNATING_BULLETS = ("-", "*", "+")


class BulletStyle(str, Enum):
    """Built-in list marker styles."""

    ALTERNATING = "alternating"
    ASTERISKS = "asterisks"
    DASHES = "dashes"
    NUMBERS = "numbers"
    PLUSES = "pluses"


_FIXED_MARKERS = {
    BulletStyle.ASTERISKS: "*",
    BulletStyle.DASHES: "-",
    BulletStyle.NUMBERS: "1.",
    BulletStyle.PLUSES: "+",
}


class Format(Protocol):
    """Anything that can write a sequence of headings to a text sink."""

    def fmt(self, sink: TextIO, headings: Iterable[HeadingRecord]) -> None:
        ...


@dataclass(frozen=True)
class Formatter:
    """Renders headings as an indented Markdown list, one line per heading.

    Nested entries are indented by the marker width plus one space for each
    level below the first, so ``1.`` items step three columns and a single
    symbol steps two. ``Formatter.custom`` uses a caller-supplied literal in
    place of the built-in styles.
    """

    style: BulletStyle = BulletStyle.ALTERNATING
    symbol: Optional[str] = None

    def __post_init__(self) -> None:
        if self.symbol is not None and not self.symbol:
            raise ValueError("custom list marker must not be empty")

    @classmethod
    def custom(cls, symbol: str) -> "Formatter":
        return cls(symbol=symbol)

    def marker_for(self, level: int) -> str:
        if self.symbol is not None:
            return self.symbol
        if self.style is BulletStyle.ALTERNATING:
            return ALTERNATING_BULLETS[(level - 1) % len(ALTERNATING_BULLETS)]
        return _FIXED_MARKERS[self.style]

    def format_line(self, heading: HeadingRecord) -> str:
        marker = self.marker_for(heading.level)
        # Width is counted in characters so multi-byte symbols still align.
        indent = " " * ((heading.level - 1) * (len(marker) + 1))
        return f"{indent}{marker} {heading}\n"

    def fmt(self, sink: TextIO, headings: Iterable[HeadingRecord]) -> None:
        """Write every heading to ``sink``; the first failed write aborts."""
        for heading in headings:
            sink.write(self.format_line(heading))
            sink.flush()

    def render(self, headings: Iterable[HeadingRecord]) -> str:
        buffer = io.StringIO()
        self.fmt(buffer, headings)
        return buffer.getvalue()


__all__ = ["ALTERNATING_BULLETS", "BulletStyle", "Format", "Formatter"]
