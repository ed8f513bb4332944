"""Marker scanning and in-place table-of-contents splicing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, TextIO

from ..logging import get_logger
from ..parser import RawHtml, raw_html_events

DEFAULT_BEGIN_MARKER = "<!-- toc -->"
DEFAULT_END_MARKER = "<!-- tocstop -->"

logger = get_logger("markers")


@dataclass(frozen=True)
class MarkerSpan:
    """Half-open range ``[start, end)`` of the managed region of a document.

    ``start`` sits just past the begin marker's line ending. ``end`` is the
    first character of the end marker, or the end of the document when no end
    marker follows.
    """

    start: int
    end: int
    has_end_marker: bool


class MarkerScanner:
    """Finds markers in the HTML block lines of a single parse pass.

    ``find_begin`` and ``find_end`` share one event stream: the end marker is
    searched only in HTML lines after the one holding the begin marker, which
    may belong to the same block.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._events: Iterator[RawHtml] = raw_html_events(source)

    def find_begin(self, marker: str) -> Optional[int]:
        """Return the offset just past the begin marker's line ending."""
        index = self._next_match(marker)
        if index is None:
            return None
        post_marker = index + len(marker)
        if self._source.startswith("\r\n", post_marker):
            return post_marker + 2
        if self._source.startswith("\n", post_marker):
            return post_marker + 1
        return None

    def find_end(self, marker: str) -> Optional[int]:
        """Return the offset of the first character of the end marker."""
        index = self._next_match(marker)
        if index is None:
            return None
        post_marker = index + len(marker)
        if self._source.startswith(("\r\n", "\n"), post_marker):
            return index
        return None

    def _next_match(self, marker: str) -> Optional[int]:
        # Only the first HTML line containing the marker counts; a match
        # without a trailing line ending is not retried further down.
        for event in self._events:
            found = event.text.find(marker)
            if found != -1:
                return event.start + found
        return None


def locate(
    source: str,
    begin_marker: str = DEFAULT_BEGIN_MARKER,
    end_marker: str = DEFAULT_END_MARKER,
) -> Optional[MarkerSpan]:
    """Return the managed region of ``source`` without writing anything."""
    scanner = MarkerScanner(source)
    start = scanner.find_begin(begin_marker)
    if start is None:
        return None
    end = scanner.find_end(end_marker)
    if end is None:
        return MarkerSpan(start=start, end=len(source), has_end_marker=False)
    return MarkerSpan(start=start, end=end, has_end_marker=True)


def splice(
    source: str,
    sink: TextIO,
    write_toc: Callable[[TextIO], None],
    *,
    begin_marker: str = DEFAULT_BEGIN_MARKER,
    end_marker: str = DEFAULT_END_MARKER,
) -> Optional[MarkerSpan]:
    """Write ``source`` to ``sink`` with a fresh table of contents after the begin marker.

    Without a begin marker the document is copied unchanged and ``None`` is
    returned. Otherwise ``write_toc`` is called between two blank lines and
    the old region up to the end marker is dropped. When there is no end
    marker one is written and the rest of the document follows it.
    """
    scanner = MarkerScanner(source)
    start = scanner.find_begin(begin_marker)
    if start is None:
        logger.debug("Begin marker %r not found, copying document", begin_marker)
        sink.write(source)
        return None

    sink.write(source[:start])
    sink.write("\n")
    write_toc(sink)
    sink.write("\n")

    end = scanner.find_end(end_marker)
    if end is None:
        logger.debug("End marker %r not found, inserting one", end_marker)
        sink.write(f"{end_marker}\n")
        sink.write(source[start:])
        return MarkerSpan(start=start, end=len(source), has_end_marker=False)

    logger.debug("Replacing region [%d, %d)", start, end)
    sink.write(source[end:])
    return MarkerSpan(start=start, end=end, has_end_marker=True)


__all__ = [
    "DEFAULT_BEGIN_MARKER",
    "DEFAULT_END_MARKER",
    "MarkerScanner",
    "MarkerSpan",
    "locate",
    "splice",
]
