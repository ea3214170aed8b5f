"""Tests for file utility functions."""

from __future__ import annotations

import json
from pathlib import Path

from siteindex.utils.files import iter_html_paths, iter_markdown_paths, write_json


class TestIterHtmlPaths:
    """Test iter_html_paths function."""

    def test_nested_directories(self, tmp_path: Path) -> None:
        """Should find HTML files in nested directories."""
        (tmp_path / "posts" / "a").mkdir(parents=True)
        (tmp_path / "index.html").write_text("root")
        (tmp_path / "posts" / "a" / "index.html").write_text("post")
        (tmp_path / "style.css").write_text("css")

        paths = list(iter_html_paths(tmp_path))

        assert {p.relative_to(tmp_path).as_posix() for p in paths} == {
            "index.html",
            "posts/a/index.html",
        }

    def test_stable_order(self, tmp_path: Path) -> None:
        """Should yield paths in sorted order."""
        for name in ["b.html", "a.html", "c.html"]:
            (tmp_path / name).write_text(name)

        assert [p.name for p in iter_html_paths(tmp_path)] == ["a.html", "b.html", "c.html"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert list(iter_html_paths(tmp_path)) == []


class TestIterMarkdownPaths:
    """Test iter_markdown_paths function."""

    def test_directory(self, tmp_path: Path) -> None:
        (tmp_path / "sub").mkdir()
        (tmp_path / "a.md").write_text("a")
        (tmp_path / "sub" / "b.mdx").write_text("b")
        (tmp_path / "notes.txt").write_text("skip")

        names = [p.name for p in iter_markdown_paths([tmp_path])]

        assert names == ["a.md", "b.mdx"]

    def test_single_file(self, tmp_path: Path) -> None:
        md = tmp_path / "post.md"
        md.write_text("x")

        assert list(iter_markdown_paths([md])) == [md]

    def test_nonexistent_file(self, tmp_path: Path) -> None:
        assert list(iter_markdown_paths([tmp_path / "missing.md"])) == []


class TestWriteJson:
    """Test write_json function."""

    def test_creates_parents(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "out.json"

        write_json(target, {"k": [1, 2]})

        assert json.loads(target.read_text(encoding="utf-8")) == {"k": [1, 2]}

    def test_keeps_non_ascii(self, tmp_path: Path) -> None:
        """Should write non-ASCII characters unescaped."""
        target = tmp_path / "out.json"

        write_json(target, {"title": "未分类"})

        assert "未分类" in target.read_text(encoding="utf-8")

    def test_two_space_indent(self, tmp_path: Path) -> None:
        target = tmp_path / "out.json"

        write_json(target, {"a": 1})

        assert target.read_text(encoding="utf-8") == '{\n  "a": 1\n}'
