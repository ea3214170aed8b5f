"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path
from zoneinfo import ZoneInfo

from siteindex.config import AppConfig


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self) -> None:
        """Should create config with default values."""
        config = AppConfig()

        assert config.content_dir == Path("src/content")
        assert config.dist_dir == Path("dist")
        assert config.search_dir_name == "search"
        assert config.posts_prefix == "/posts/"
        assert config.timezone == "UTC"
        assert config.production is False

    def test_custom_config(self) -> None:
        """Should create config with custom values."""
        config = AppConfig(dist_dir=Path("/srv/site"), lang="ja", production=True)

        assert config.dist_dir == Path("/srv/site")
        assert config.lang == "ja"
        assert config.production is True

    def test_resolve_absolute(self) -> None:
        """Should return absolute paths as-is."""
        config = AppConfig(dist_dir=Path("/absolute/dist"))

        assert config.resolve_dist_dir(Path("/base")) == Path("/absolute/dist")

    def test_resolve_relative_no_base(self) -> None:
        """Should return relative path when no base_dir provided."""
        config = AppConfig()

        assert config.resolve_content_dir() == Path("src/content")

    def test_resolve_relative_with_base(self) -> None:
        """Should resolve relative paths against base_dir."""
        config = AppConfig()

        assert config.resolve_dist_dir(Path("/project")) == Path("/project/dist")
        assert config.resolve_content_dir(Path("/project")) == Path("/project/src/content")

    def test_tzinfo(self) -> None:
        config = AppConfig(timezone="Asia/Shanghai")

        assert config.tzinfo() == ZoneInfo("Asia/Shanghai")
