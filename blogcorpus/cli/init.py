"""Init command implementation."""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import ConfigModel, SiteConfig, save_config
from ..config.loader import DEFAULT_CONFIG_NAME

console = Console()


def init_command(
    path: Path = typer.Option(
        Path(DEFAULT_CONFIG_NAME),
        "--path",
        "-p",
        help="Where to write the config file",
    ),
    content_dir: str = typer.Option(
        "content/blog",
        "--content-dir",
        help="Directory holding the articles, relative to the config file",
    ),
    base_url: str = typer.Option(
        "http://localhost:1313",
        "--base-url",
        help="Site base URL",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config"),
) -> None:
    """Write a default blogcorpus configuration."""
    if path.exists() and not force:
        console.print(f"[red]Config already exists: {path} (use --force to overwrite)[/red]")
        raise typer.Exit(1)

    config = ConfigModel(
        content_dir=content_dir,
        site=SiteConfig(base_url=base_url),
    )
    save_config(config, path)
    console.print(f"✅ Created config: {path}")

    content_path = path.parent / content_dir
    if not content_path.exists():
        console.print(f"[yellow]⚠️  Content directory does not exist yet: {content_path}[/yellow]")

    console.print(
        Panel(
            f"Next steps:\n"
            f"1. Review lint settings in [bold]{path}[/bold]\n"
            f"2. Run: [bold]blogcorpus lint[/bold]",
            style="green",
        )
    )
