"""Text helpers for whitespace cleanup and slugs."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_SLUG_STRIP_RE = re.compile(r"[^\w\s-]")


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run to one space and trim the ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def slugify(segment: str) -> str:
    """Lowercase a path segment and turn whitespace into dashes.

    Word characters (unicode included) and dashes survive; everything else is
    dropped, so ``"Hello, World"`` becomes ``"hello-world"``.
    """
    cleaned = _SLUG_STRIP_RE.sub("", segment.strip().lower())
    return _WHITESPACE_RE.sub("-", cleaned)
