"""Title and anchor slug normalization for Markdown headings."""

from __future__ import annotations

import re

_HTML_TAG_RE = re.compile(r"</?[^>]+>")
# Unicode White_Space; unlike \s it leaves the \x1c-\x1f separators alone.
_WHITESPACE_RE = re.compile(
    "[\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)

# ASCII punctuation and symbols GitHub drops from generated anchors.
_ASCII_PUNCTUATION = "|$&`~=\\/@+*!?({[]})<>.,;:'\"^%#"
# CJK punctuation marks, including full-width brackets and quotes.
_CJK_PUNCTUATION = "。？！，、；：“”【】（）〔〕［］﹃﹄“ ”‘’﹁﹂—…－～《》〈〉「」"

_INVALID_CHARS_RE = re.compile(
    "[" + re.escape(_ASCII_PUNCTUATION) + re.escape(_CJK_PUNCTUATION) + "]"
)


def titleize(text: str) -> str:
    """Return the display title for raw heading text.

    HTML tags are removed and whitespace runs (newlines included) collapse to
    a single space. Case, punctuation, and non-Latin scripts are untouched.
    """
    stripped = _HTML_TAG_RE.sub("", text)
    return _WHITESPACE_RE.sub(" ", stripped).strip(" ")


def slugify(text: str) -> str:
    """Return the anchor slug (without the leading ``#``) for raw heading text.

    Emphasis markers inside words (``_``) are kept as-is so that anchors stay
    compatible with documents already linking to them.
    """
    slug = text.lower().strip().replace(" ", "-")
    slug = _HTML_TAG_RE.sub("", slug)
    return _INVALID_CHARS_RE.sub("", slug)


__all__ = ["slugify", "titleize"]
