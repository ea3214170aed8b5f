"""Write derived listing metadata as JSON for the static front end."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from siteindex.config import AppConfig
from siteindex.content.categories import get_category_list
from siteindex.content.posts import get_sorted_posts_list
from siteindex.content.tags import get_tag_list
from siteindex.content.timeline import group_posts_by_year
from siteindex.i18n import I18nKey, translate
from siteindex.models import Document
from siteindex.utils.files import write_json
from siteindex.utils.urls import category_url_builder

LOGGER = logging.getLogger(__name__)


def export_metadata(documents: Sequence[Document], output_dir: Path, *, config: AppConfig) -> List[Path]:
    """Write ``posts``, ``tags``, ``categories`` and ``timeline`` JSON files."""
    categories = get_category_list(
        documents,
        uncategorized_label=translate(I18nKey.UNCATEGORIZED, config.lang),
        url_builder=category_url_builder(config.base_url),
    )
    listed = get_sorted_posts_list(documents)
    payloads = {
        "posts.json": [doc.to_dict() for doc in listed],
        "tags.json": [{"name": tag.name, "count": tag.count} for tag in get_tag_list(documents)],
        "categories.json": [node.to_dict() for node in categories],
        "timeline.json": [group.to_dict() for group in group_posts_by_year(listed, tz=config.tzinfo())],
    }

    written: List[Path] = []
    for filename, payload in payloads.items():
        path = output_dir / filename
        write_json(path, payload)
        LOGGER.debug("Wrote %s", path)
        written.append(path)
    return written
