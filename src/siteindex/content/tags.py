"""Tag frequency aggregation."""

from __future__ import annotations

from typing import Dict, Iterable, List

from siteindex.models import Document, Tag


def get_tag_list(documents: Iterable[Document]) -> List[Tag]:
    """Count tag occurrences and sort them case-insensitively.

    Tags are counted as written: ``"Python"`` and ``"python"`` are two tags.
    Names equal after lowercasing keep the order they were first seen in.
    """
    counts: Dict[str, int] = {}
    for doc in documents:
        for tag in doc.tags:
            counts[tag] = counts.get(tag, 0) + 1

    names = sorted(counts, key=str.lower)
    return [Tag(name=name, count=counts[name]) for name in names]
