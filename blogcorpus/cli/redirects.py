"""Redirects command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..lint import LintContext, RedirectCheck, Severity
from ..parsing import ArticleLoader, load_redirects
from .options import ConfigOption, open_config

console = Console()


def redirects_command(config_path: Optional[Path] = ConfigOption) -> None:
    """List redirects from netlify.toml and check them against the articles."""
    config = open_config(config_path)
    settings = config.config

    netlify_path = config.resolve(settings.netlify_toml)
    if netlify_path is None:
        console.print("[red]No netlify_toml configured.[/red]")
        raise typer.Exit(1)

    try:
        redirects = load_redirects(netlify_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)

    if not redirects:
        console.print("[yellow]No redirects configured.[/yellow]")
        return

    table = Table(title="Redirects")
    table.add_column("From", style="cyan")
    table.add_column("To", style="blue")
    table.add_column("Status", style="green")
    table.add_column("Force", style="yellow")

    for redirect in redirects:
        table.add_row(
            redirect.source,
            redirect.target,
            str(redirect.status),
            "✓" if redirect.force else "✗",
        )

    console.print(table)

    articles = []
    content_dir = config.content_dir
    if content_dir is not None and content_dir.exists():
        articles = ArticleLoader(
            content_dir,
            pattern=settings.pattern,
            include_drafts=settings.include_drafts,
        ).load().articles

    context = LintContext(config=settings.lint, redirects=redirects, redirects_path=netlify_path)
    findings = RedirectCheck().check(articles, context)

    if not findings:
        console.print("[green]✅ Redirects look good[/green]")
        return

    for finding in findings:
        color = "red" if finding.severity == Severity.ERROR else "yellow"
        console.print(f"[{color}]{finding.severity.value}[/{color}] {escape(finding.message)}")

    if any(f.severity == Severity.ERROR for f in findings):
        raise typer.Exit(1)
