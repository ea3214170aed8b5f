"""Chunked search index build over the rendered site."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Sequence

from siteindex.errors import OutputDirectoryNotFoundError
from siteindex.models import ChunkInfo, IndexManifest, PageRecord
from siteindex.search.extractor import read_page
from siteindex.utils.files import iter_html_paths, write_json

LOGGER = logging.getLogger(__name__)

INDEX_VERSION = 1
MANIFEST_FILENAME = "index.json"
# Chunks are written in this order; empty ones are omitted
CHUNK_CATEGORIES = ("posts", "pages")


def chunk_filename(category: str) -> str:
    return f"chunk-{category}.json"


def find_pages(site_root: Path) -> list[Path]:
    """Find all rendered HTML pages under the site root."""
    return list(iter_html_paths(site_root))


@dataclass(slots=True)
class IndexStats:
    indexed: int = 0
    skipped: int = 0
    failed: int = 0
    processed_files: list[Path] = field(default_factory=list)
    manifest: IndexManifest | None = None

    def increment(self, status: str, path: Path) -> None:
        if status == "indexed":
            self.indexed += 1
        elif status == "skipped":
            self.skipped += 1
        else:
            self.failed += 1
        self.processed_files.append(path)


class SearchIndexBuilder:
    """Coordinates page extraction, chunk partitioning and artifact writes."""

    def __init__(
        self,
        site_root: Path,
        *,
        search_dir_name: str = "search",
        posts_prefix: str = "/posts/",
    ) -> None:
        self.site_root = Path(site_root)
        self.search_dir = self.site_root / search_dir_name
        self.posts_prefix = posts_prefix

    def collect(self, stats: IndexStats | None = None) -> List[PageRecord]:
        """Extract every page, keeping records that have content."""
        if not self.site_root.is_dir():
            raise OutputDirectoryNotFoundError(
                f"Site output directory not found at {self.site_root}. Render the site first."
            )

        stats = stats if stats is not None else IndexStats()
        pages = find_pages(self.site_root)
        LOGGER.info("Found %d HTML files", len(pages))

        records: List[PageRecord] = []
        for path in pages:
            try:
                record = read_page(path, self.site_root)
            except Exception as e:
                LOGGER.error("Error processing %s: %s", path, e)
                stats.increment("failed", path)
                continue

            if record is None:
                LOGGER.debug("No content in %s", path)
                stats.increment("skipped", path)
                continue

            records.append(record)
            stats.increment("indexed", path)
            LOGGER.info("Indexed: %s", record.url)
        return records

    def partition(self, records: Sequence[PageRecord]) -> Dict[str, List[PageRecord]]:
        """Split records into ``posts`` and ``pages`` by URL prefix."""
        chunks: Dict[str, List[PageRecord]] = {category: [] for category in CHUNK_CATEGORIES}
        for record in records:
            category = "posts" if record.url.startswith(self.posts_prefix) else "pages"
            chunks[category].append(record)
        return chunks

    def write(self, chunks: Dict[str, List[PageRecord]]) -> IndexManifest:
        """Write non-empty chunk files, then the manifest that lists them."""
        infos: List[ChunkInfo] = []
        for category in CHUNK_CATEGORIES:
            records = chunks.get(category, [])
            if not records:
                continue
            filename = chunk_filename(category)
            write_json(self.search_dir / filename, [record.to_dict() for record in records])
            infos.append(ChunkInfo(file=filename, count=len(records), category=category))
            LOGGER.info("Created %s with %d %s", filename, len(records), category)

        manifest = IndexManifest(
            version=INDEX_VERSION,
            total_documents=sum(info.count for info in infos),
            chunks=infos,
            timestamp=datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        )
        write_json(self.search_dir / MANIFEST_FILENAME, manifest.to_dict())
        return manifest

    def build(self) -> IndexStats:
        """Run the full build. Nothing is written until every page is extracted."""
        stats = IndexStats()
        records = self.collect(stats)
        stats.manifest = self.write(self.partition(records))
        return stats
