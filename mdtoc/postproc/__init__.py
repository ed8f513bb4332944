"""Table-of-contents formatting and document splicing."""

from .markers import DEFAULT_BEGIN_MARKER, DEFAULT_END_MARKER, MarkerScanner, MarkerSpan, locate, splice
from .toc import BulletStyle, Format, Formatter

__all__ = [
    "BulletStyle",
    "DEFAULT_BEGIN_MARKER",
    "DEFAULT_END_MARKER",
    "Format",
    "Formatter",
    "MarkerScanner",
    "MarkerSpan",
    "locate",
    "splice",
]
