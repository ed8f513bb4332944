"""Helper utilities for writing throwaway Markdown documents in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping


class DocumentBuilder:
    """Utility for writing Markdown files into a temporary workspace."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "docs"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the workspace."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            # newline="" keeps any explicit \r\n in the fixture text.
            with path.open("w", encoding="utf-8", newline="") as handle:
                handle.write(normalised)

    def read(self, relative: str) -> str:
        with (self.root / relative).open("r", encoding="utf-8", newline="") as handle:
            return handle.read()

    def path(self, relative: str = "") -> Path:
        """Return a path inside the workspace."""
        return self.root / relative if relative else self.root


SIMPLE_CURRENT = """\
# Title

<!-- toc -->

- [Introduction](#introduction)
- [Body](#body)
  * [Detail](#detail)
- [Conclusion](#conclusion)

<!-- tocstop -->

## Introduction

Introduction content.

## Body

Body content.

### Detail

Detail content.

## Conclusion

Conclusion content.
"""

SIMPLE_NEW = """\
# Title

<!-- toc -->

## Introduction

Introduction content.

## Body

Body content.

### Detail

Detail content.

## Conclusion

Conclusion content.
"""


__all__ = ["DocumentBuilder", "SIMPLE_CURRENT", "SIMPLE_NEW"]
