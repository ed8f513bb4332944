"""Heading extraction from a CommonMark document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Set

from markdown_it.token import Token

from .logging import get_logger
from .models import MAX_LEVEL, MIN_LEVEL, HeadingRecord
from .normalize import slugify, titleize
from .parser import tokens

logger = get_logger("headings")


class ParserContractError(RuntimeError):
    """Raised when the parser reports something its format contract rules out."""


class AnchorSlugger:
    """Issues anchor slugs that are unique within a single document."""

    def __init__(self) -> None:
        self._issued: Set[str] = set()

    def slug(self, text: str) -> str:
        """Slugify ``text`` and resolve collisions with ``-1``, ``-2``, ... suffixes.

        Must be called once per heading in document order: the first heading
        keeps the bare slug and later duplicates take the smallest free suffix.
        """
        candidate = slugify(text)
        if candidate in self._issued:
            suffix = 1
            while f"{candidate}-{suffix}" in self._issued:
                suffix += 1
            candidate = f"{candidate}-{suffix}"
        self._issued.add(candidate)
        return candidate


@dataclass
class _PendingHeading:
    level: int
    raw: Optional[str] = None

    @property
    def has_range(self) -> bool:
        return self.raw is not None


class Headings(Iterator[HeadingRecord]):
    """Lazy iterator of the headings of one document, in source order.

    The iterator owns its slugger, so anchors are unique for one pass only.
    Run :func:`headings` again for a fresh pass over the same text.
    """

    def __init__(self, source: str) -> None:
        self._tokens = tokens(source)
        self._slugger = AnchorSlugger()

    def __iter__(self) -> "Headings":
        return self

    def __next__(self) -> HeadingRecord:
        pending: Optional[_PendingHeading] = None
        for token in self._tokens:
            if token.type == "heading_open":
                pending = _PendingHeading(level=_heading_level(token))
            elif token.type == "heading_close" and pending is not None:
                # No inner token means an empty heading such as a lone "#".
                raw = pending.raw if pending.has_range else ""
                return self._build(pending.level, raw)
            elif pending is not None and not pending.has_range:
                # The first inner token bounds the raw heading text.
                pending.raw = token.content if token.type == "inline" else ""
        raise StopIteration

    def _build(self, level: int, raw: str) -> HeadingRecord:
        if raw.endswith("\n"):
            raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
        record = HeadingRecord(
            level=level,
            title=titleize(raw),
            anchor=f"#{self._slugger.slug(raw)}",
        )
        logger.debug("Found heading level=%d anchor=%s", record.level, record.anchor)
        return record


def headings(source: str) -> Headings:
    """Return a lazy iterator over the headings of ``source``."""
    return Headings(source)


def all_headings(records: Iterable[HeadingRecord]) -> Iterator[HeadingRecord]:
    """Pass every heading through unchanged."""
    return iter(records)


def skip_title_and_promote(records: Iterable[HeadingRecord]) -> Iterator[HeadingRecord]:
    """Drop level-1 headings and promote the rest by one level."""
    return (record.promote() for record in records if record.level > MIN_LEVEL)


def _heading_level(token: Token) -> int:
    try:
        level = int(token.tag[1:])
    except ValueError as exc:
        raise ParserContractError(f"unexpected heading tag {token.tag!r}") from exc
    if not MIN_LEVEL <= level <= MAX_LEVEL:
        raise ParserContractError(f"heading level out of range: {level}")
    return level


__all__ = [
    "AnchorSlugger",
    "Headings",
    "ParserContractError",
    "all_headings",
    "headings",
    "skip_title_and_promote",
]
