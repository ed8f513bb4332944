"""Pipeline orchestration: extract headings, format them, splice them in."""

from __future__ import annotations

import io
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Optional, TextIO

from .config import MdTocConfig
from .diff import write_diff
from .headings import all_headings, headings, skip_title_and_promote
from .logging import get_logger
from .models import HeadingRecord
from .postproc.markers import DEFAULT_BEGIN_MARKER, DEFAULT_END_MARKER, MarkerSpan, splice
from .postproc.toc import Format, Formatter

HeadingSelector = Callable[[Iterable[HeadingRecord]], Iterable[HeadingRecord]]


@dataclass(frozen=True)
class TocConfig:
    """Everything needed to render a table of contents into a document."""

    begin_marker: str = DEFAULT_BEGIN_MARKER
    end_marker: str = DEFAULT_END_MARKER
    formatter: Format = field(default_factory=Formatter)
    select: HeadingSelector = skip_title_and_promote

    @classmethod
    def from_settings(cls, settings: MdTocConfig) -> "TocConfig":
        if settings.bullet:
            formatter = Formatter.custom(settings.bullet)
        else:
            formatter = Formatter(style=settings.format)
        return cls(
            begin_marker=settings.begin_marker or DEFAULT_BEGIN_MARKER,
            end_marker=settings.end_marker or DEFAULT_END_MARKER,
            formatter=formatter,
            select=all_headings if settings.include_title else skip_title_and_promote,
        )


def write(config: TocConfig, source: str, sink: TextIO) -> Optional[MarkerSpan]:
    """Write ``source`` to ``sink`` with its table of contents brought up to date."""

    def write_toc(out: TextIO) -> None:
        config.formatter.fmt(out, config.select(headings(source)))

    return splice(
        source,
        sink,
        write_toc,
        begin_marker=config.begin_marker,
        end_marker=config.end_marker,
    )


def render(config: TocConfig, source: str) -> str:
    """Return ``source`` with its table of contents brought up to date."""
    buffer = io.StringIO()
    write(config, source, buffer)
    return buffer.getvalue()


def differs(config: TocConfig, source: str) -> bool:
    """Return True when rendering would change ``source``."""
    return render(config, source) != source


@dataclass
class UpdateOutcome:
    """Result of rendering one document."""

    label: str
    original: str
    updated: str
    path: Optional[Path] = None

    @property
    def changed(self) -> bool:
        return self.original != self.updated


class Orchestrator:
    """Reads documents, renders them, and routes the result to its destination."""

    def __init__(self, config: TocConfig | None = None) -> None:
        self.config = config or TocConfig()
        self.logger = get_logger("orchestrator")

    def read_source(self, path: Path | None, stdin: TextIO | None = None) -> str:
        if path is None:
            self.logger.debug("Reading from stdin")
            stream = stdin or sys.stdin
            # Decode the raw bytes so CRLF line endings are not translated.
            buffer = getattr(stream, "buffer", None)
            if buffer is not None:
                return buffer.read().decode("utf-8")
            return stream.read()
        self.logger.debug("Reading file %s", path)
        # newline="" keeps CRLF line endings intact.
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()

    def render(self, source: str, *, label: str = "<stdin>") -> UpdateOutcome:
        updated = render(self.config, source)
        return UpdateOutcome(label=label, original=source, updated=updated)

    def write_stream(self, source: str, stream: TextIO) -> Optional[MarkerSpan]:
        self.logger.info("Writing to stdout")
        return write(self.config, source, stream)

    def write_file(self, source: str, path: Path) -> UpdateOutcome:
        """Render ``source`` and write the result to ``path``."""
        outcome = self.render(source, label=str(path))
        self.logger.info("Writing to file %s", path)
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(outcome.updated)
        outcome.path = path
        return outcome

    def check(self, source: str, label: str, report: TextIO) -> UpdateOutcome:
        """Compare ``source`` with its rendered form and report any difference."""
        outcome = self.render(source, label=label)
        if outcome.changed:
            self.logger.info("Table of contents in %s is out of date", label)
            write_diff(outcome.original, outcome.updated, label, report)
        else:
            self.logger.info("Table of contents in %s is up to date", label)
        return outcome


__all__ = [
    "HeadingSelector",
    "Orchestrator",
    "TocConfig",
    "UpdateOutcome",
    "differs",
    "render",
    "write",
]
