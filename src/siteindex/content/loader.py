"""Markdown collection loading and schema validation."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml
from pydantic import ValidationError

from siteindex.content.schema import COLLECTION_SCHEMAS, PostFrontmatter
from siteindex.errors import ContentError
from siteindex.models import CollectionEntry, Document
from siteindex.utils.files import iter_markdown_paths
from siteindex.utils.text import slugify

LOGGER = logging.getLogger(__name__)

_FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE)


def parse_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    """Split a Markdown source into its YAML front matter and body."""
    match = _FRONT_MATTER_RE.match(text)
    if not match:
        return {}, text

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        raise ContentError(f"Invalid front matter: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ContentError("Front matter must be a mapping")
    return data, text[match.end() :]


def slug_from_path(path: Path, root: Path) -> str:
    """Derive the URL slug of a collection entry from its source path."""
    parts = list(path.relative_to(root).with_suffix("").parts)
    if len(parts) > 1 and parts[-1].lower() == "index":
        parts.pop()
    return "/".join(slugify(part) for part in parts)


def _read_entry(path: Path, root: Path) -> Tuple[str, Dict[str, Any], str]:
    try:
        text = path.read_text(encoding="utf-8")
        data, body = parse_front_matter(text)
    except (OSError, UnicodeDecodeError, ContentError) as exc:
        raise ContentError(f"Failed to read {path}: {exc}") from exc
    return slug_from_path(path, root), data, body


def load_posts(content_dir: Path, *, production: bool = False) -> List[Document]:
    """Load and validate every post under ``<content_dir>/posts``.

    Drafts are excluded when ``production`` is true.
    """
    root = content_dir / "posts"
    if not root.is_dir():
        LOGGER.warning("No posts directory at %s", root)
        return []

    documents: List[Document] = []
    seen: Dict[str, Path] = {}
    for path in iter_markdown_paths([root]):
        slug, data, body = _read_entry(path, root)
        try:
            frontmatter = PostFrontmatter.model_validate(data)
        except ValidationError as exc:
            raise ContentError(f"Invalid front matter in {path}:\n{exc}") from exc

        if slug in seen:
            raise ContentError(f"Duplicate slug '{slug}' in {path} and {seen[slug]}")
        seen[slug] = path

        if production and frontmatter.draft:
            LOGGER.debug("Skipping draft %s", path)
            continue
        documents.append(frontmatter.to_document(slug, body))

    LOGGER.info("Loaded %d posts from %s", len(documents), root)
    return documents


def load_collection(content_dir: Path, name: str) -> List[CollectionEntry]:
    """Load a non-post collection (``categories`` or ``spec``)."""
    schema = COLLECTION_SCHEMAS.get(name)
    if schema is None or name == "posts":
        raise ContentError(f"Unknown collection: {name}")

    root = content_dir / name
    if not root.is_dir():
        return []

    entries: List[CollectionEntry] = []
    for path in iter_markdown_paths([root]):
        slug, data, body = _read_entry(path, root)
        try:
            validated = schema.model_validate(data)
        except ValidationError as exc:
            raise ContentError(f"Invalid front matter in {path}:\n{exc}") from exc
        entries.append(CollectionEntry(slug=slug, data=validated.model_dump(), body=body))
    return entries
