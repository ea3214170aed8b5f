"""Year-grouped timeline of posts."""

from __future__ import annotations

from datetime import timezone, tzinfo
from typing import Dict, Iterable, List

from siteindex.content.posts import sort_posts
from siteindex.models import Document, TimelineGroup


def publication_year(doc: Document, tz: tzinfo = timezone.utc) -> int:
    """Calendar year of ``doc.published`` as seen from ``tz``."""
    return doc.published.astimezone(tz).year


def group_posts_by_year(documents: Iterable[Document], *, tz: tzinfo = timezone.utc) -> List[TimelineGroup]:
    """Group posts by publication year, newest year and newest post first.

    Year boundaries are evaluated in ``tz``; callers pass an already filtered
    collection.
    """
    grouped: Dict[int, List[Document]] = {}
    for doc in sort_posts(documents):
        grouped.setdefault(publication_year(doc, tz), []).append(doc)

    return [TimelineGroup(year=year, posts=grouped[year]) for year in sorted(grouped, reverse=True)]
