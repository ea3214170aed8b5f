"""Post ordering and prev/next linking."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List

from siteindex.models import Document


def sort_posts(documents: Iterable[Document]) -> List[Document]:
    """Sort posts newest first.

    Posts published at the same instant are ordered by slug so the result does
    not depend on input order.
    """
    by_slug = sorted(documents, key=lambda doc: doc.slug)
    return sorted(by_slug, key=lambda doc: doc.published, reverse=True)


def get_sorted_posts(documents: Iterable[Document]) -> List[Document]:
    """Return posts newest first with prev/next links filled in.

    ``next`` points at the newer neighbour and ``prev`` at the older one, so the
    newest post has no next and the oldest has no prev.
    """
    ordered = sort_posts(documents)
    linked: List[Document] = []
    for index, doc in enumerate(ordered):
        newer = ordered[index - 1] if index > 0 else None
        older = ordered[index + 1] if index + 1 < len(ordered) else None
        linked.append(
            replace(
                doc,
                next_slug=newer.slug if newer else "",
                next_title=newer.title if newer else "",
                prev_slug=older.slug if older else "",
                prev_title=older.title if older else "",
            )
        )
    return linked


def get_sorted_posts_list(documents: Iterable[Document]) -> List[Document]:
    """Return the same ordering without post bodies, for list views."""
    return [replace(doc, body="") for doc in sort_posts(documents)]
