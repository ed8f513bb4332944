"""Generate and maintain a table of contents inside Markdown documents."""

__version__ = "0.1.0"

from .headings import AnchorSlugger, Headings, ParserContractError
from .models import HeadingRecord
from .normalize import slugify, titleize
from .orchestrator import TocConfig, differs, render, write
from .postproc.markers import DEFAULT_BEGIN_MARKER, DEFAULT_END_MARKER
from .postproc.toc import BulletStyle, Formatter

__all__ = [
    "AnchorSlugger",
    "BulletStyle",
    "DEFAULT_BEGIN_MARKER",
    "DEFAULT_END_MARKER",
    "Formatter",
    "HeadingRecord",
    "Headings",
    "ParserContractError",
    "TocConfig",
    "__version__",
    "differs",
    "render",
    "slugify",
    "titleize",
    "write",
]
