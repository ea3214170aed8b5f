"""Exceptions raised by SiteIndex."""

from __future__ import annotations


class SiteIndexError(Exception):
    """Base class for errors that abort a build step."""


class ContentError(SiteIndexError):
    """Authored content could not be read or failed schema validation."""


class OutputDirectoryNotFoundError(SiteIndexError):
    """The rendered site output does not exist yet."""
