"""Site URL builders."""

from __future__ import annotations

from typing import Callable
from urllib.parse import quote

UrlBuilder = Callable[[str], str]


def join_url(base_url: str, path: str) -> str:
    """Join a site-relative path onto the configured base URL.

    A trailing slash on ``path`` is kept so directory URLs stay directories.
    """
    joined = "/".join(part for part in (base_url.strip("/"), path.strip("/")) if part)
    url = "/" + joined
    if joined and path.endswith("/"):
        url += "/"
    return url


def get_category_url(category: str, *, base_url: str = "/") -> str:
    """Return the archive URL filtered to ``category``."""
    return join_url(base_url, "archive/") + f"?category={quote(category.strip(), safe='')}"


def category_url_builder(base_url: str = "/") -> UrlBuilder:
    """Bind ``base_url`` into a one-argument category URL builder."""

    def build(category: str) -> str:
        return get_category_url(category, base_url=base_url)

    return build
