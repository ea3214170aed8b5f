"""Core SiteIndex data models."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Tuple


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclass(slots=True, frozen=True)
class Document:
    """One authored post, validated and ready for the derived-index transforms."""

    slug: str
    title: str
    published: datetime
    updated: datetime | None = None
    draft: bool = False
    description: str = ""
    image: str = ""
    tags: Tuple[str, ...] = ()
    category: str | None = ""
    lang: str = ""
    body: str = ""
    prev_slug: str = ""
    prev_title: str = ""
    next_slug: str = ""
    next_title: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slug": self.slug,
            "title": self.title,
            "published": _isoformat(self.published),
            "updated": _isoformat(self.updated),
            "draft": self.draft,
            "description": self.description,
            "image": self.image,
            "tags": list(self.tags),
            "category": self.category,
            "lang": self.lang,
            "prevSlug": self.prev_slug,
            "prevTitle": self.prev_title,
            "nextSlug": self.next_slug,
            "nextTitle": self.next_title,
        }


@dataclass(slots=True)
class CollectionEntry:
    """Entry of a non-post collection (categories, spec pages)."""

    slug: str
    data: Dict[str, Any]
    body: str = ""


@dataclass(slots=True)
class Tag:
    name: str
    count: int


@dataclass(slots=True)
class CategoryNode:
    """Node of the category tree; ``count`` includes every descendant."""

    name: str
    full_path: str
    count: int
    url: str
    children: List["CategoryNode"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "fullPath": self.full_path,
            "count": self.count,
            "url": self.url,
            "children": [child.to_dict() for child in self.children],
        }


@dataclass(slots=True)
class TimelineGroup:
    year: int
    posts: List[Document]

    def to_dict(self) -> Dict[str, Any]:
        return {"year": self.year, "posts": [post.to_dict() for post in self.posts]}


@dataclass(slots=True, frozen=True)
class PageRecord:
    """Searchable text extracted from one rendered page."""

    id: str
    url: str
    title: str
    description: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(slots=True)
class ChunkInfo:
    file: str
    count: int
    category: str


@dataclass(slots=True)
class IndexManifest:
    """Describes the chunk files produced by one search index build."""

    version: int
    total_documents: int
    chunks: List[ChunkInfo]
    timestamp: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "totalDocuments": self.total_documents,
            "chunks": [asdict(chunk) for chunk in self.chunks],
            "timestamp": self.timestamp,
        }
