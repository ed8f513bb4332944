"""Line diffs between a document and its re-rendered form."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterator, List, Sequence, TextIO, Tuple

CONTEXT_LINES = 3

# Alignment tags produced by ``align_lines``.
ORIGINAL = "-"
UPDATED = "+"
BOTH = " "


@dataclass(frozen=True)
class DiffLine:
    """One line of a hunk: ``" "`` context, ``"-"`` original, ``"+"`` updated."""

    kind: str
    text: str


@dataclass
class Mismatch:
    """A contiguous group of differing lines with surrounding context."""

    line_number: int
    lines: List[DiffLine] = field(default_factory=list)


def align_lines(before: Sequence[str], after: Sequence[str]) -> Iterator[Tuple[str, str]]:
    """Yield ``(tag, line)`` pairs aligning ``before`` with ``after``.

    Common leading and trailing lines are matched first; the middle is aligned
    on a longest common subsequence. Within a changed run, original lines come
    before the updated lines that replace them.
    """
    head = 0
    while head < len(before) and head < len(after) and before[head] == after[head]:
        head += 1
    tail = 0
    while (
        tail < len(before) - head
        and tail < len(after) - head
        and before[-1 - tail] == after[-1 - tail]
    ):
        tail += 1

    for line in before[:head]:
        yield BOTH, line
    yield from _align_middle(before[head : len(before) - tail], after[head : len(after) - tail])
    for line in before[len(before) - tail :]:
        yield BOTH, line


def _align_middle(before: Sequence[str], after: Sequence[str]) -> List[Tuple[str, str]]:
    # table[i][j] is the LCS length of before[:i] and after[:j].
    table = [[0] * (len(after) + 1) for _ in range(len(before) + 1)]
    for i, left in enumerate(before, start=1):
        for j, right in enumerate(after, start=1):
            if left == right:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])

    aligned: List[Tuple[str, str]] = []
    i, j = len(before), len(after)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and before[i - 1] == after[j - 1]:
            aligned.append((BOTH, before[i - 1]))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            aligned.append((UPDATED, after[j - 1]))
            j -= 1
        else:
            aligned.append((ORIGINAL, before[i - 1]))
            i -= 1
    aligned.reverse()
    return aligned


def make_diff(original: str, updated: str, context: int = CONTEXT_LINES) -> List[Mismatch]:
    """Return the hunks that turn ``original`` into ``updated``.

    Lines are split on ``\\n`` only, so a trailing newline produces a final
    empty line and a missing one shows up as a difference. A new hunk starts
    once ``context`` unchanged lines separate two changes; its line number is
    the first line of the original shown in it.
    """
    line_number = 1
    pending: Deque[str] = deque()
    since_change = context + 1
    mismatches: List[Mismatch] = []
    current = Mismatch(line_number=0)

    for tag, text in align_lines(original.split("\n"), updated.split("\n")):
        if tag == BOTH:
            if pending and len(pending) >= context:
                pending.popleft()
            if since_change < context:
                current.lines.append(DiffLine(BOTH, text))
            elif context > 0:
                pending.append(text)
            line_number += 1
            since_change += 1
            continue

        if since_change >= context and since_change > 0:
            current = Mismatch(line_number=line_number - len(pending))
            mismatches.append(current)
        while pending:
            current.lines.append(DiffLine(BOTH, pending.popleft()))
        current.lines.append(DiffLine(tag, text))
        if tag == ORIGINAL:
            line_number += 1
        since_change = 0

    return mismatches


def write_diff(original: str, updated: str, label: str, sink: TextIO) -> None:
    """Write a human readable report of every hunk to ``sink``."""
    for mismatch in make_diff(original, updated):
        sink.write(f"Diff in {label} at line {mismatch.line_number}:\n")
        for line in mismatch.lines:
            sink.write(f"{line.kind}{line.text}\n")


__all__ = ["CONTEXT_LINES", "DiffLine", "Mismatch", "align_lines", "make_diff", "write_diff"]
