"""Hierarchical category tree built from ``/``-delimited category paths."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from siteindex.i18n import I18nKey, translate
from siteindex.models import CategoryNode, Document
from siteindex.utils.urls import UrlBuilder, get_category_url


@dataclass(slots=True)
class _CountNode:
    name: str
    full_path: str
    count: int = 0
    children: Dict[str, "_CountNode"] = field(default_factory=dict)


def normalize_category(raw: object) -> str:
    if not raw:
        return ""
    return str(raw).strip()


def split_category(raw: object) -> List[str]:
    """Split a category path into trimmed, non-empty segments."""
    return [segment.strip() for segment in normalize_category(raw).split("/") if segment.strip()]


def _count_into(root: Dict[str, _CountNode], segments: List[str], uncategorized_label: str) -> None:
    if not segments:
        node = root.setdefault(uncategorized_label, _CountNode(uncategorized_label, uncategorized_label))
        node.count += 1
        return

    level = root
    path = ""
    for segment in segments:
        path = f"{path}/{segment}" if path else segment
        node = level.setdefault(segment, _CountNode(segment, path))
        # Every ancestor on the path counts the document once
        node.count += 1
        level = node.children


def _materialize(level: Dict[str, _CountNode], url_builder: UrlBuilder) -> List[CategoryNode]:
    nodes = sorted(level.values(), key=lambda node: node.name.lower())
    return [
        CategoryNode(
            name=node.name,
            full_path=node.full_path,
            count=node.count,
            url=url_builder(node.full_path),
            children=_materialize(node.children, url_builder),
        )
        for node in nodes
    ]


def get_category_list(
    documents: Iterable[Document],
    *,
    uncategorized_label: str | None = None,
    url_builder: UrlBuilder = get_category_url,
) -> List[CategoryNode]:
    """Build the sorted category tree with cumulative counts.

    ``"Java/MouseMacros"`` adds one to both ``Java`` and ``Java/MouseMacros``.
    Documents without a category share a single top-level node named by
    ``uncategorized_label``.
    """
    if uncategorized_label is None:
        uncategorized_label = translate(I18nKey.UNCATEGORIZED)

    root: Dict[str, _CountNode] = {}
    for doc in documents:
        _count_into(root, split_category(doc.category), uncategorized_label)
    return _materialize(root, url_builder)
