"""Command line interface for SiteIndex."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, NoReturn
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from siteindex.config import AppConfig
from siteindex.content.categories import get_category_list
from siteindex.content.export import export_metadata
from siteindex.content.loader import load_posts
from siteindex.content.posts import get_sorted_posts
from siteindex.content.tags import get_tag_list
from siteindex.content.timeline import group_posts_by_year
from siteindex.errors import OutputDirectoryNotFoundError, SiteIndexError
from siteindex.i18n import I18nKey, translate
from siteindex.models import CategoryNode, Document
from siteindex.search.indexer import SearchIndexBuilder
from siteindex.utils.urls import category_url_builder
from siteindex.web.app import app as web_app


console = Console()
app = typer.Typer(help="SiteIndex - derived listings and search index for a static site")

LOGGER = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code=1)


def _load(config: AppConfig) -> List[Document]:
    content_dir = config.resolve_content_dir(Path.cwd())
    try:
        return load_posts(content_dir, production=config.production)
    except SiteIndexError as exc:
        _fail(str(exc))


def _tzinfo(config: AppConfig) -> ZoneInfo:
    try:
        return config.tzinfo()
    except (ZoneInfoNotFoundError, ValueError):
        _fail(f"Unknown timezone: {config.timezone!r}")


@app.command("search-index")
def search_index(
    dist: Path = typer.Option(AppConfig().dist_dir, "--dist", help="Rendered site directory"),
    search_dir: str = typer.Option(AppConfig().search_dir_name, help="Output subdirectory for the index"),
    posts_prefix: str = typer.Option(AppConfig().posts_prefix, help="URL prefix of the posts chunk"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Build the chunked search index from rendered HTML pages."""
    _setup_logging(verbose)
    config = AppConfig(dist_dir=dist, search_dir_name=search_dir, posts_prefix=posts_prefix)
    site_root = config.resolve_dist_dir(Path.cwd())

    builder = SearchIndexBuilder(
        site_root,
        search_dir_name=config.search_dir_name,
        posts_prefix=config.posts_prefix,
    )
    console.print("Building search index with chunking...")
    try:
        stats = builder.build()
    except OutputDirectoryNotFoundError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    except Exception as exc:
        LOGGER.exception("Failed to build search index")
        _fail(f"Failed to build search index: {exc}")

    manifest = stats.manifest
    console.print(
        f"Indexed: {stats.indexed}, skipped: {stats.skipped}, failed: {stats.failed}"
    )
    if manifest is not None:
        console.print(f"  - Total documents: {manifest.total_documents}")
        console.print(f"  - Chunks: {len(manifest.chunks)}")
    console.print(f"  - Location: [bold]{builder.search_dir}[/bold]")
    console.print("[green]Search index built successfully![/green]")


@app.command()
def metadata(
    content: Path = typer.Option(AppConfig().content_dir, "--content", help="Content collections directory"),
    dist: Path = typer.Option(AppConfig().dist_dir, "--dist", help="Rendered site directory"),
    base_url: str = typer.Option(AppConfig().base_url, help="Site base URL"),
    lang: str = typer.Option(AppConfig().lang, help="Site language"),
    tz: str = typer.Option(AppConfig().timezone, "--timezone", help="Timezone used for year grouping"),
    production: bool = typer.Option(False, "--production", help="Exclude draft posts"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Write posts, tags, categories and timeline JSON next to the rendered site."""
    _setup_logging(verbose)
    config = AppConfig(
        content_dir=content,
        dist_dir=dist,
        base_url=base_url,
        lang=lang,
        timezone=tz,
        production=production,
    )
    _tzinfo(config)
    documents = _load(config)
    output_dir = config.resolve_dist_dir(Path.cwd()) / config.metadata_dir_name
    try:
        written = export_metadata(documents, output_dir, config=config)
    except OSError as exc:
        LOGGER.debug("Metadata export failed", exc_info=True)
        _fail(f"Failed to write metadata to {output_dir}: {exc}")
    console.print(f"Wrote {len(written)} files to [bold]{output_dir}[/bold]")


@app.command()
def posts(
    content: Path = typer.Option(AppConfig().content_dir, "--content", help="Content collections directory"),
    production: bool = typer.Option(False, "--production", help="Exclude draft posts"),
) -> None:
    """List posts newest first with their neighbours."""
    documents = get_sorted_posts(_load(AppConfig(content_dir=content, production=production)))
    if not documents:
        console.print("[yellow]No posts found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Published")
    table.add_column("Slug")
    table.add_column("Title")
    table.add_column("Prev")
    table.add_column("Next")
    for doc in documents:
        table.add_row(doc.published.date().isoformat(), doc.slug, doc.title, doc.prev_slug, doc.next_slug)
    console.print(table)


@app.command()
def tags(
    content: Path = typer.Option(AppConfig().content_dir, "--content", help="Content collections directory"),
    production: bool = typer.Option(False, "--production", help="Exclude draft posts"),
) -> None:
    """Show tag counts."""
    tag_list = get_tag_list(_load(AppConfig(content_dir=content, production=production)))
    if not tag_list:
        console.print("[yellow]No tags found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Tag")
    table.add_column("Count", justify="right")
    for tag in tag_list:
        table.add_row(tag.name, str(tag.count))
    console.print(table)


def _add_category_rows(table: Table, nodes: List[CategoryNode], depth: int = 0) -> None:
    for node in nodes:
        table.add_row("  " * depth + node.name, str(node.count), node.url)
        _add_category_rows(table, node.children, depth + 1)


@app.command()
def categories(
    content: Path = typer.Option(AppConfig().content_dir, "--content", help="Content collections directory"),
    base_url: str = typer.Option(AppConfig().base_url, help="Site base URL"),
    lang: str = typer.Option(AppConfig().lang, help="Site language"),
    production: bool = typer.Option(False, "--production", help="Exclude draft posts"),
) -> None:
    """Show the category tree with cumulative counts."""
    config = AppConfig(content_dir=content, base_url=base_url, lang=lang, production=production)
    tree = get_category_list(
        _load(config),
        uncategorized_label=translate(I18nKey.UNCATEGORIZED, config.lang),
        url_builder=category_url_builder(config.base_url),
    )
    if not tree:
        console.print("[yellow]No posts found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Category")
    table.add_column("Count", justify="right")
    table.add_column("URL")
    _add_category_rows(table, tree)
    console.print(table)


@app.command()
def timeline(
    content: Path = typer.Option(AppConfig().content_dir, "--content", help="Content collections directory"),
    tz: str = typer.Option(AppConfig().timezone, "--timezone", help="Timezone used for year grouping"),
    production: bool = typer.Option(False, "--production", help="Exclude draft posts"),
) -> None:
    """Show posts grouped by year."""
    config = AppConfig(content_dir=content, timezone=tz, production=production)
    zone = _tzinfo(config)
    groups = group_posts_by_year(_load(config), tz=zone)
    if not groups:
        console.print("[yellow]No posts found.[/yellow]")
        return

    for group in groups:
        console.print(f"[bold]{group.year}[/bold] ({len(group.posts)})")
        for doc in group.posts:
            console.print(f"  {doc.published.astimezone(zone):%m-%d}  {doc.title}")


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
    content: Path = typer.Option(AppConfig().content_dir, "--content", help="Content collections directory"),
    dist: Path = typer.Option(AppConfig().dist_dir, "--dist", help="Rendered site directory"),
) -> None:
    """Start the preview server."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    config = AppConfig(
        content_dir=content.resolve(),
        dist_dir=dist.resolve(),
    )
    if not config.dist_dir.exists():
        console.print("[yellow]Warning: dist directory not found, only the API will respond.[/yellow]")

    web_app.state.config = config
    console.print(f"Starting preview on http://{host}:{port} (site: {config.dist_dir})")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
