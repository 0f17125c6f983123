"""Article listing commands."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..config import Config
from ..models import Article
from ..models.base import normalize_path
from ..parsing import ArticleLoader, LoadResult
from ..site import article_links, summarize
from .options import ConfigOption, open_config

console = Console()


def _load(config: Config) -> LoadResult:
    settings = config.config
    loader = ArticleLoader(
        config.content_dir,
        pattern=settings.pattern,
        include_drafts=settings.include_drafts,
    )
    try:
        return loader.load()
    except FileNotFoundError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)


def _sort_key(article: Article):
    published = article.published
    return (published is not None, published.timestamp() if published else 0, str(article.path))


def find_article(articles: List[Article], key: str) -> Optional[Article]:
    """Find an article by url, slug or file name."""
    wanted = normalize_path(key)
    for article in articles:
        if wanted in (article.normalized_url, article.slug, article.path.name, article.path.stem):
            return article
    return None


def articles_command(
    config_path: Optional[Path] = ConfigOption,
    category: Optional[str] = typer.Option(None, "--category", help="Only list this category"),
    author: Optional[str] = typer.Option(None, "--author", help="Only list this author"),
) -> None:
    """List articles, newest first."""
    config = open_config(config_path)
    result = _load(config)

    articles = result.articles
    if category:
        articles = [a for a in articles if category.lower() in (c.lower() for c in a.front_matter.categories)]
    if author:
        articles = [a for a in articles if author in a.front_matter.authors]

    if result.failures:
        console.print(
            f"[yellow]⚠️  {len(result.failures)} files could not be read; "
            f"run 'blogcorpus lint' for details[/yellow]"
        )

    if not articles:
        console.print("[yellow]No articles found.[/yellow]")
        return

    table = Table(title=f"Articles ({len(articles)})")
    table.add_column("Date", style="green")
    table.add_column("URL", style="cyan")
    table.add_column("Title")
    table.add_column("Authors", style="magenta")

    for article in sorted(articles, key=_sort_key, reverse=True):
        published = article.published
        title = escape(article.title)
        if article.front_matter.draft:
            title += " [yellow](draft)[/yellow]"
        table.add_row(
            published.to_date_string() if published else "-",
            article.normalized_url or "-",
            title,
            ", ".join(article.front_matter.authors) or "-",
        )

    console.print(table)


def show_command(
    key: str = typer.Argument(..., help="Article url, slug or file name"),
    config_path: Optional[Path] = ConfigOption,
) -> None:
    """Show metadata, links and summary of one article."""
    config = open_config(config_path)
    result = _load(config)

    article = find_article(result.articles, key)
    if article is None:
        console.print(f"[red]Article '{key}' not found.[/red]")
        raise typer.Exit(1)

    site = config.get_site_config()
    fm = article.front_matter
    links = article_links(article, site)
    summary = fm.excerpt or summarize(article.body, site.summary_length)

    languages = sorted({b.language for b in article.code_blocks if b.language})
    lines = [
        f"[bold]{escape(article.title)}[/bold]",
        "",
        f"File: {article.path}",
        f"Date: {fm.date if fm.date is not None else '-'}",
        f"Modified: {fm.modified if fm.modified is not None else '-'}",
        f"Authors: {', '.join(fm.authors) or '-'}",
        f"Categories: {', '.join(fm.categories) or '-'}",
        f"Draft: {'yes' if fm.draft else 'no'}",
        f"URL: {links['url'] or '-'}",
        f"Teaser image: {links['teaser'] or '-'}",
        f"Opengraph image: {links['opengraph'] or '-'}",
        f"Code blocks: {len(article.code_blocks)} ({', '.join(languages) or 'untagged'})",
        f"Shortcodes: {len([s for s in article.shortcodes if not s.closing])}",
        "",
        escape(summary),
    ]

    console.print(Panel("\n".join(lines), title="Article", style="blue"))
