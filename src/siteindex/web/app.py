"""FastAPI preview server for the rendered site and its derived metadata."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from siteindex.config import AppConfig
from siteindex.content.categories import get_category_list
from siteindex.content.loader import load_posts
from siteindex.content.posts import get_sorted_posts
from siteindex.content.tags import get_tag_list
from siteindex.content.timeline import group_posts_by_year
from siteindex.errors import ContentError
from siteindex.i18n import I18nKey, translate
from siteindex.models import Document
from siteindex.search.indexer import MANIFEST_FILENAME
from siteindex.utils.urls import category_url_builder

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="SiteIndex Preview", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


def _config() -> AppConfig:
    return getattr(app.state, "config", None) or AppConfig()


def _load_documents(config: AppConfig, production: bool) -> List[Document]:
    content_dir = config.resolve_content_dir(Path.cwd())
    try:
        return load_posts(content_dir, production=production)
    except ContentError as exc:
        LOGGER.error("Unable to load content: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.get("/api/posts")
async def list_posts(production: bool = False) -> dict[str, Any]:
    documents = get_sorted_posts(_load_documents(_config(), production))
    return {"posts": [doc.to_dict() for doc in documents]}


@app.get("/api/posts/{slug:path}")
async def get_post(slug: str, production: bool = False) -> dict[str, Any]:
    for doc in get_sorted_posts(_load_documents(_config(), production)):
        if doc.slug == slug:
            return {"post": doc.to_dict(), "body": doc.body}
    raise HTTPException(status_code=404, detail=f"Post not found: {slug}")


@app.get("/api/tags")
async def list_tags(production: bool = False) -> dict[str, Any]:
    tags = get_tag_list(_load_documents(_config(), production))
    return {"tags": [{"name": tag.name, "count": tag.count} for tag in tags]}


@app.get("/api/categories")
async def list_categories(production: bool = False) -> dict[str, Any]:
    config = _config()
    tree = get_category_list(
        _load_documents(config, production),
        uncategorized_label=translate(I18nKey.UNCATEGORIZED, config.lang),
        url_builder=category_url_builder(config.base_url),
    )
    return {"categories": [node.to_dict() for node in tree]}


@app.get("/api/timeline")
async def timeline(production: bool = False) -> dict[str, Any]:
    config = _config()
    groups = group_posts_by_year(_load_documents(config, production), tz=config.tzinfo())
    return {"timeline": [group.to_dict() for group in groups]}


@app.get("/api/search/manifest")
async def search_manifest() -> dict[str, Any]:
    config = _config()
    manifest = config.resolve_dist_dir(Path.cwd()) / config.search_dir_name / MANIFEST_FILENAME
    if not manifest.is_file():
        raise HTTPException(
            status_code=404,
            detail=f"Search index not found at {manifest}. Run 'siteindex search-index' first.",
        )
    return json.loads(manifest.read_text(encoding="utf-8"))


def _resolve_site_file(site_root: Path, path: str) -> Path | None:
    """Map a request path to a file inside ``site_root``, or ``None``."""
    if "\0" in path:
        return None
    root = Path(os.path.realpath(site_root))
    candidate = Path(os.path.realpath(root / path.lstrip("/")))
    if candidate != root and root not in candidate.parents:
        return None
    if candidate.is_dir():
        candidate = candidate / "index.html"
    return candidate if candidate.is_file() else None


@app.get("/{path:path}")
async def serve_site(path: str) -> FileResponse:
    config = _config()
    target = _resolve_site_file(config.resolve_dist_dir(Path.cwd()), path)
    if target is None:
        raise HTTPException(status_code=404, detail=f"Not found: /{path}")
    return FileResponse(target)
