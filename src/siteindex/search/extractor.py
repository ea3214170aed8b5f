"""Searchable text extraction from rendered HTML pages.

Uses BeautifulSoup with the stdlib ``html.parser`` backend.
"""

from __future__ import annotations

import re
from pathlib import Path

from bs4 import BeautifulSoup
from bs4.element import Tag

from siteindex.models import PageRecord
from siteindex.utils.text import collapse_whitespace

CONTENT_SELECTOR = "[data-pagefind-body]"

# Removed from the content region before any text is read
EXCLUDE_SELECTORS = (
    "script",
    "style",
    "nav",
    "header",
    "footer",
    ".search-panel",
    "#search-panel",
    "[data-pagefind-ignore]",
    ".katex",
    ".katex-display",
)

# Document metadata that is never page text
HEAD_SELECTORS = ("head", "title")

# Elements whose edges separate words; inline markup concatenates
BLOCK_TAGS = (
    "address", "article", "aside", "blockquote", "br", "caption", "dd",
    "details", "dialog", "div", "dl", "dt", "fieldset", "figcaption",
    "figure", "form", "h1", "h2", "h3", "h4", "h5", "h6", "hr", "li",
    "main", "ol", "p", "pre", "section", "summary", "table", "tbody",
    "td", "tfoot", "th", "thead", "tr", "ul",
)

_INDEX_HTML_RE = re.compile(r"index\.html$")


def page_url(path: Path, site_root: Path) -> str:
    """Map an output file to its site-relative URL.

    ``posts/hello/index.html`` becomes ``/posts/hello/``.
    """
    relative = str(path.relative_to(site_root)).replace("\\", "/")
    return "/" + _INDEX_HTML_RE.sub("", relative)


def _decompose_all(root: Tag, selectors: tuple[str, ...]) -> None:
    for selector in selectors:
        for element in root.select(selector):
            if not element.decomposed:
                element.decompose()


def content_region(soup: BeautifulSoup) -> Tag:
    """Pick the marked content region, else ``<body>``, else the document.

    ``html.parser`` builds no implied ``<body>``, so when the page omits one the
    head elements are dropped and the remaining document is used.
    """
    region = soup.select_one(CONTENT_SELECTOR) or soup.body
    if region is not None:
        return region
    _decompose_all(soup, HEAD_SELECTORS)
    return soup


def prune(region: Tag) -> None:
    """Drop excluded elements from ``region`` in place."""
    _decompose_all(region, EXCLUDE_SELECTORS)


def text_content(region: Tag) -> str:
    """Concatenate the text of ``region`` with a space at block boundaries."""
    for element in region.find_all(list(BLOCK_TAGS)):
        element.insert_before(" ")
        element.insert_after(" ")
    return collapse_whitespace(region.get_text())


def extract_html(html: str, url: str) -> PageRecord | None:
    """Build a record from page markup, or ``None`` when nothing is indexable."""
    soup = BeautifulSoup(html, "html.parser")
    title = soup.title.get_text().strip() if soup.title else ""
    meta = soup.find("meta", attrs={"name": "description"})
    description = meta.get("content", "") if isinstance(meta, Tag) else ""

    region = content_region(soup)
    prune(region)
    content = text_content(region)
    if not content:
        return None

    return PageRecord(id=url, url=url, title=title, description=description, content=content)


def read_page(path: Path, site_root: Path) -> PageRecord | None:
    """Read and extract one rendered page, letting read and parse errors propagate."""
    html = path.read_text(encoding="utf-8")
    return extract_html(html, page_url(path, site_root))
