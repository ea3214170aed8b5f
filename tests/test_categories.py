"""Tests for the category tree builder."""

from __future__ import annotations

from datetime import datetime, timezone

from siteindex.content.categories import get_category_list, normalize_category, split_category
from siteindex.models import Document


def make_doc(slug: str, category: str | None) -> Document:
    return Document(
        slug=slug,
        title=slug,
        published=datetime(2023, 1, 1, tzinfo=timezone.utc),
        category=category,
    )


def fake_url(path: str) -> str:
    return f"/c/{path}"


class TestSplitCategory:
    def test_normalize_none(self) -> None:
        assert normalize_category(None) == ""

    def test_normalize_trims(self) -> None:
        assert normalize_category("  Java  ") == "Java"

    def test_split_drops_empty_segments(self) -> None:
        assert split_category(" Java // Mouse Macros / ") == ["Java", "Mouse Macros"]

    def test_split_whitespace_only(self) -> None:
        assert split_category("   ") == []


class TestGetCategoryList:
    """Test get_category_list function."""

    def test_worked_example(self) -> None:
        """Should count every ancestor once per document."""
        docs = [make_doc("1", "Java/MouseMacros"), make_doc("2", "Java"), make_doc("3", None)]

        tree = get_category_list(docs, uncategorized_label="Uncategorized", url_builder=fake_url)

        assert [n.name for n in tree] == ["Java", "Uncategorized"]
        java, uncategorized = tree
        assert java.count == 2
        assert java.full_path == "Java"
        assert len(java.children) == 1
        assert java.children[0].name == "MouseMacros"
        assert java.children[0].full_path == "Java/MouseMacros"
        assert java.children[0].count == 1
        assert uncategorized.count == 1
        assert uncategorized.full_path == "Uncategorized"
        assert uncategorized.children == []

    def test_urls_from_full_path(self) -> None:
        docs = [make_doc("1", "Java/MouseMacros"), make_doc("2", "")]

        tree = get_category_list(docs, uncategorized_label="Misc", url_builder=fake_url)

        java, misc = tree
        assert java.url == "/c/Java"
        assert java.children[0].url == "/c/Java/MouseMacros"
        assert misc.url == "/c/Misc"

    def test_empty_and_whitespace_share_one_node(self) -> None:
        docs = [make_doc("1", ""), make_doc("2", "   "), make_doc("3", None), make_doc("4", " / ")]

        tree = get_category_list(docs, uncategorized_label="Uncategorized", url_builder=fake_url)

        assert len(tree) == 1
        assert tree[0].count == 4

    def test_siblings_sorted_case_insensitively(self) -> None:
        docs = [make_doc("1", "beta"), make_doc("2", "Alpha"), make_doc("3", "gamma/Zed"), make_doc("4", "gamma/apple")]

        tree = get_category_list(docs, uncategorized_label="U", url_builder=fake_url)

        assert [n.name for n in tree] == ["Alpha", "beta", "gamma"]
        assert [n.name for n in tree[2].children] == ["apple", "Zed"]

    def test_segments_trimmed(self) -> None:
        docs = [make_doc("1", " Java / Macros "), make_doc("2", "Java/Macros")]

        (java,) = get_category_list(docs, uncategorized_label="U", url_builder=fake_url)

        assert java.count == 2
        assert java.children[0].full_path == "Java/Macros"
        assert java.children[0].count == 2

    def test_deep_path_counts(self) -> None:
        docs = [make_doc("1", "a/b/c"), make_doc("2", "a/b"), make_doc("3", "a/x")]

        (a,) = get_category_list(docs, uncategorized_label="U", url_builder=fake_url)

        assert a.count == 3
        b, x = a.children
        assert (b.count, x.count) == (2, 1)
        assert b.children[0].full_path == "a/b/c"
        assert b.children[0].count == 1

    def test_default_label_and_urls(self) -> None:
        """Should fall back to the English label and archive URLs."""
        (node,) = get_category_list([make_doc("1", None)])

        assert node.name == "Uncategorized"
        assert node.url == "/archive/?category=Uncategorized"

    def test_empty_collection(self) -> None:
        assert get_category_list([], uncategorized_label="U", url_builder=fake_url) == []
