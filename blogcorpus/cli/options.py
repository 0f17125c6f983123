"""Options shared by several commands."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import Config

console = Console()

ConfigOption = typer.Option(
    None,
    "--config",
    "-c",
    help="Config file (default: $BLOGCORPUS_CONFIG or ./blogcorpus.yaml)",
)


def open_config(config_path: Optional[Path]) -> Config:
    """Create a config manager, exiting on an unreadable file."""
    config = Config(config_path)
    try:
        config.config
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)
    return config
