"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo


@dataclass(slots=True)
class AppConfig:
    content_dir: Path = Path("src/content")
    dist_dir: Path = Path("dist")
    search_dir_name: str = "search"
    metadata_dir_name: str = "meta"
    posts_prefix: str = "/posts/"
    base_url: str = "/"
    lang: str = "en"
    timezone: str = "UTC"
    # Drafts are dropped only for production builds
    production: bool = False

    def resolve_content_dir(self, base_dir: Path | None = None) -> Path:
        return _resolve(self.content_dir, base_dir)

    def resolve_dist_dir(self, base_dir: Path | None = None) -> Path:
        return _resolve(self.dist_dir, base_dir)

    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


def _resolve(path: Path, base_dir: Path | None) -> Path:
    if Path(path).is_absolute() or base_dir is None:
        return Path(path)
    return base_dir / path
