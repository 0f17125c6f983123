"""Lint command implementation."""

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from ..lint import print_lint_summary
from ..pipeline import LintPipeline
from .options import ConfigOption, open_config

console = Console()


def lint_command(
    paths: Optional[List[Path]] = typer.Argument(
        None,
        help="Files or directories to lint (default: configured content_dir)",
    ),
    config_path: Optional[Path] = ConfigOption,
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--no-strict",
        help="Fail on warnings as well as errors",
    ),
    disable: Optional[List[str]] = typer.Option(
        None,
        "--disable",
        "-d",
        help="Check code to skip (repeatable)",
    ),
    report_dir: Optional[Path] = typer.Option(
        None,
        "--report-dir",
        help="Directory for lint_report.json and pipeline_stats.json",
    ),
    output_format: str = typer.Option(
        "table",
        "--format",
        help="Output format (table, json)",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        help="Show at most this many findings in the table",
        min=1,
    ),
) -> None:
    """Lint articles and redirects."""
    if output_format not in ("table", "json"):
        console.print(f"[red]Unknown format '{output_format}' (use table or json)[/red]")
        raise typer.Exit(2)

    config = open_config(config_path)
    if strict is None:
        strict = config.config.lint.strict

    pipeline = LintPipeline(
        config,
        paths=paths or None,
        disabled=disable or [],
        report_dir=report_dir,
        show_progress=output_format == "table",
    )

    try:
        report = pipeline.run()
    except KeyboardInterrupt:
        console.print("\n[yellow]Lint interrupted by user[/yellow]")
        raise typer.Exit(1)

    if report is None:
        if output_format == "json":
            stats = pipeline.stage_stats()
            data = {
                "error": "Pipeline failed",
                "failed_stages": [name for name, stage in stats.items() if stage["error"]],
                "stages": stats,
            }
            typer.echo(json.dumps(data, indent=2))
        else:
            pipeline.print_summary()
        raise typer.Exit(1)

    if output_format == "json":
        data = report.model_dump(mode="json")
        data["counts"] = report.counts
        typer.echo(json.dumps(data, indent=2))
    else:
        print_lint_summary(report, limit=limit)
        pipeline.print_summary()

    if report.failed(strict):
        raise typer.Exit(1)
