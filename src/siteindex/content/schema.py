"""Front-matter schemas for the content collections."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Dict, List, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator

from siteindex.models import Document


def to_datetime(value: Any) -> datetime | None:
    """Normalise a front-matter date to an aware datetime.

    YAML hands us ``date``/``datetime`` objects for unquoted values and plain
    strings for quoted ones. Naive values are taken as UTC.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        parsed = datetime.fromisoformat(value.strip())
    else:
        raise ValueError(f"Unsupported date value: {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class PostFrontmatter(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str
    published: datetime
    updated: datetime | None = None
    draft: bool = False
    description: str = ""
    image: str = ""
    tags: List[str] = Field(default_factory=list)
    category: str | None = ""
    lang: str = ""

    # Filled in by post linking, never authored
    prev_title: str = Field("", alias="prevTitle")
    prev_slug: str = Field("", alias="prevSlug")
    next_title: str = Field("", alias="nextTitle")
    next_slug: str = Field("", alias="nextSlug")

    @field_validator("published", "updated", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> datetime | None:
        return to_datetime(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _coerce_tags(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("category", mode="before")
    @classmethod
    def _coerce_category(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    def to_document(self, slug: str, body: str = "") -> Document:
        return Document(
            slug=slug,
            title=self.title,
            published=self.published,
            updated=self.updated,
            draft=self.draft,
            description=self.description,
            image=self.image,
            tags=tuple(self.tags),
            category=self.category,
            lang=self.lang,
            body=body,
            prev_slug=self.prev_slug,
            prev_title=self.prev_title,
            next_slug=self.next_slug,
            next_title=self.next_title,
        )


class CategoryFrontmatter(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str
    description: str = ""
    image: str = ""


class SpecFrontmatter(BaseModel):
    model_config = ConfigDict(extra="ignore")


COLLECTION_SCHEMAS: Dict[str, Type[BaseModel]] = {
    "posts": PostFrontmatter,
    "categories": CategoryFrontmatter,
    "spec": SpecFrontmatter,
}
