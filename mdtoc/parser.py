"""Thin wrapper around the CommonMark token stream produced by markdown-it-py."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List

from markdown_it import MarkdownIt
from markdown_it.token import Token

# markdown-it-py splits lines on the same sequences before parsing.
_NEWLINE_RE = re.compile(r"\r\n?|\n")


@dataclass(frozen=True)
class RawHtml:
    """One line of an HTML block, positioned in the original source."""

    text: str
    start: int


def create_parser() -> MarkdownIt:
    """Return a strict CommonMark parser with raw HTML recognition enabled."""
    return MarkdownIt("commonmark")


def tokens(source: str) -> Iterator[Token]:
    """Yield the flat block-level token stream for ``source``."""
    yield from create_parser().parse(source)


def line_offsets(source: str) -> List[int]:
    """Return the offset of every line start, followed by ``len(source)``."""
    offsets = [0]
    offsets.extend(match.end() for match in _NEWLINE_RE.finditer(source))
    offsets.append(len(source))
    return offsets


def raw_html_events(source: str) -> Iterator[RawHtml]:
    """Yield the lines of HTML blocks in document order, sliced from the original source.

    Each line of a multi-line block is its own event, line ending included.

    Code spans, fenced and indented code blocks never produce these events, so
    text that only looks like HTML inside code is skipped.
    """
    offsets = line_offsets(source)
    last = len(offsets) - 1
    for token in tokens(source):
        if token.type != "html_block" or token.map is None:
            continue
        first_line, end_line = token.map
        for line in range(first_line, min(end_line, last)):
            start, end = offsets[line], offsets[line + 1]
            yield RawHtml(text=source[start:end], start=start)


__all__ = ["RawHtml", "create_parser", "line_offsets", "raw_html_events", "tokens"]
