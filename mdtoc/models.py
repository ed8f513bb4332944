"""Core data models shared across mdtoc components."""

from dataclasses import dataclass, replace

MIN_LEVEL = 1
MAX_LEVEL = 6


@dataclass(frozen=True)
class HeadingRecord:
    """A single document heading with its display title and anchor link."""

    level: int
    title: str
    anchor: str

    def __post_init__(self) -> None:
        if not MIN_LEVEL <= self.level <= MAX_LEVEL:
            raise ValueError(f"heading level must be between 1 and 6, got {self.level}")

    def promote(self) -> "HeadingRecord":
        """Return a copy one level shallower, never above level 1."""
        return replace(self, level=max(self.level - 1, MIN_LEVEL))

    def demote(self) -> "HeadingRecord":
        """Return a copy one level deeper, never below level 6."""
        return replace(self, level=min(self.level + 1, MAX_LEVEL))

    def __str__(self) -> str:
        return f"[{self.title}]({self.anchor})"
