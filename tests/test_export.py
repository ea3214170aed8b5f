"""Tests for metadata export."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from siteindex.config import AppConfig
from siteindex.content.export import export_metadata
from siteindex.models import Document


def make_doc(slug: str, year: int, **kwargs) -> Document:
    return Document(slug=slug, title=slug, published=datetime(year, 5, 1, tzinfo=timezone.utc), **kwargs)


class TestExportMetadata:
    """Test export_metadata function."""

    def test_writes_all_files(self, tmp_path: Path) -> None:
        docs = [
            make_doc("a", 2022, tags=("x",), category="Java/Macros", body="secret body"),
            make_doc("b", 2023, tags=("x", "y"), category=None),
        ]

        written = export_metadata(docs, tmp_path / "meta", config=AppConfig())

        assert sorted(p.name for p in written) == [
            "categories.json",
            "posts.json",
            "tags.json",
            "timeline.json",
        ]
        posts = json.loads((tmp_path / "meta" / "posts.json").read_text(encoding="utf-8"))
        assert [p["slug"] for p in posts] == ["b", "a"]
        assert "secret body" not in (tmp_path / "meta" / "posts.json").read_text(encoding="utf-8")

        tags = json.loads((tmp_path / "meta" / "tags.json").read_text(encoding="utf-8"))
        assert tags == [{"name": "x", "count": 2}, {"name": "y", "count": 1}]

        timeline = json.loads((tmp_path / "meta" / "timeline.json").read_text(encoding="utf-8"))
        assert [g["year"] for g in timeline] == [2023, 2022]

    def test_categories_use_language_and_base_url(self, tmp_path: Path) -> None:
        config = AppConfig(lang="zh_CN", base_url="/blog/")

        export_metadata([make_doc("a", 2023, category="")], tmp_path, config=config)

        categories = json.loads((tmp_path / "categories.json").read_text(encoding="utf-8"))
        assert categories[0]["name"] == "未分类"
        assert categories[0]["url"].startswith("/blog/archive/?category=")
