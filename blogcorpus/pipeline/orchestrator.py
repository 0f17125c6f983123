"""Pipeline orchestrator that runs a complete lint of the corpus."""

import json
import time
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from ..config import Config
from ..lint import ArticleLinter, LintReport
from ..models import Redirect
from ..parsing import LoadResult, load_paths, load_redirects

console = Console()


class PipelineStage:
    """Represents a pipeline stage."""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None
        self.success = False
        self.error: Optional[str] = None
        self.stats: Dict = {}

    def start(self):
        """Mark stage as started."""
        self.start_time = time.time()

    def complete(self, stats: Optional[Dict] = None):
        """Mark stage as completed successfully."""
        self.end_time = time.time()
        self.success = True
        if stats:
            self.stats.update(stats)

    def fail(self, error: str):
        """Mark stage as failed."""
        self.end_time = time.time()
        self.success = False
        self.error = error

    @property
    def duration(self) -> float:
        """Get stage duration in seconds."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


class LintPipeline:
    """Orchestrates loading, linting and reporting."""

    def __init__(
        self,
        config: Config,
        paths: Optional[List[Path]] = None,
        disabled: Optional[List[str]] = None,
        report_dir: Optional[Path] = None,
        show_progress: bool = True,
    ):
        """
        Initialize lint pipeline.

        Args:
            config: Configuration manager
            paths: Files or directories to lint instead of the configured content_dir
            disabled: Check codes to skip on top of the configured ones
            report_dir: Where to write JSON reports, overriding the config
            show_progress: Whether to draw a progress spinner
        """
        self.config = config
        self.paths = paths
        self.disabled = disabled or []
        self.report_dir = report_dir
        self.show_progress = show_progress
        self.stages = [
            PipelineStage("config", "Loading configuration"),
            PipelineStage("articles", "Loading articles"),
            PipelineStage("redirects", "Loading redirects"),
            PipelineStage("lint", "Running lint checks"),
            PipelineStage("report", "Writing reports"),
        ]
        self.report: Optional[LintReport] = None
        self.total_start_time: Optional[float] = None

    def _stage(self, name: str) -> PipelineStage:
        return next(s for s in self.stages if s.name == name)

    def _load_articles(self) -> LoadResult:
        settings = self.config.config
        paths = self.paths or [self.config.content_dir]
        return load_paths(paths, pattern=settings.pattern, include_drafts=settings.include_drafts)

    def _load_redirects(self) -> tuple[List[Redirect], Optional[Path]]:
        path = self.config.resolve(self.config.config.netlify_toml)
        if path is None or not path.exists():
            return [], None
        return load_redirects(path), path

    def stage_stats(self) -> Dict:
        """Durations, outcomes and stats of every stage."""
        stats = {
            "pipeline": {
                "total_duration": time.time() - self.total_start_time if self.total_start_time else 0,
                "completed_at": datetime.now().isoformat(),
            },
            "stages": {},
        }

        for stage in self.stages:
            stats["stages"][stage.name] = {
                "duration": stage.duration,
                "success": stage.success,
                "error": stage.error,
                "stats": stage.stats,
            }

        return stats

    def _save_stage_stats(self, report_dir: Path) -> Path:
        """Save pipeline stage statistics."""
        report_dir.mkdir(parents=True, exist_ok=True)

        stats_file = report_dir / "pipeline_stats.json"
        with open(stats_file, "w", encoding="utf-8") as f:
            json.dump(self.stage_stats(), f, indent=2)

        return stats_file

    def _save_reports(self, report_dir: Path) -> List[Path]:
        """Write the lint report and stage statistics."""
        report_dir.mkdir(parents=True, exist_ok=True)

        report_file = report_dir / "lint_report.json"
        report_data = self.report.model_dump(mode="json")
        report_data["counts"] = self.report.counts
        with open(report_file, "w", encoding="utf-8") as f:
            json.dump(report_data, f, indent=2)

        return [report_file, self._save_stage_stats(report_dir)]

    def print_summary(self) -> None:
        """Print pipeline execution summary."""
        total_duration = time.time() - self.total_start_time if self.total_start_time else 0

        table = Table(title="Pipeline Summary")
        table.add_column("Stage", style="cyan")
        table.add_column("Status", style="bold")
        table.add_column("Duration", style="yellow")
        table.add_column("Details", style="dim")

        for stage in self.stages:
            if stage.success:
                status = "[green]✓[/green]"
            elif stage.start_time is None:
                status = "[dim]-[/dim]"
            else:
                status = "[red]✗[/red]"
            duration = f"{stage.duration:.2f}s" if stage.duration > 0 else "-"

            details = ""
            if stage.success and stage.stats:
                if stage.name == "config":
                    details = stage.stats.get("path", "")
                elif stage.name == "articles":
                    details = (
                        f"{stage.stats.get('articles', 0)} articles, "
                        f"{stage.stats.get('failures', 0)} unreadable, "
                        f"{stage.stats.get('skipped_drafts', 0)} drafts skipped"
                    )
                elif stage.name == "redirects":
                    details = f"{stage.stats.get('redirects', 0)} redirects"
                elif stage.name == "lint":
                    details = f"{stage.stats.get('findings', 0)} findings"
                elif stage.name == "report":
                    details = ", ".join(stage.stats.get("files", [])) or "not written"
            elif stage.error:
                details = stage.error

            table.add_row(stage.name.title(), status, duration, details)

        console.print(table)

        if all(s.success for s in self.stages):
            console.print(f"[dim]Completed in {total_duration:.2f} seconds[/dim]")
        else:
            failed_stages = [s.name for s in self.stages if s.error]
            console.print(
                Panel(
                    f"[red]❌ Pipeline failed![/red]\n\n"
                    f"Failed stages: {', '.join(failed_stages)}\n"
                    f"Duration: {total_duration:.2f} seconds",
                    style="red",
                )
            )

    def run(self) -> Optional[LintReport]:
        """
        Run the complete pipeline.

        Returns:
            The lint report, or None if a stage failed before linting finished
        """
        self.total_start_time = time.time()

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TimeElapsedColumn(),
            console=console,
            disable=not self.show_progress,
            transient=True,
        ) as progress:
            report = self._execute(progress)

        # Keep stage statistics of a failed run when the caller asked for reports
        if report is None and self.report_dir is not None:
            self._save_stage_stats(self.report_dir)

        return report

    def _execute(self, progress: Progress) -> Optional[LintReport]:
        # Stage 1: Load configuration
        stage = self._stage("config")
        stage.start()
        try:
            settings = self.config.config
            stage.complete(
                {
                    "path": str(self.config.config_path),
                    "from_file": self.config.config_path.exists(),
                }
            )
        except (FileNotFoundError, ValueError) as e:
            stage.fail(str(e))
            return None

        # Stage 2: Load articles
        stage = self._stage("articles")
        task = progress.add_task(stage.description, total=1)
        stage.start()
        try:
            load_result = self._load_articles()
            stage.complete(
                {
                    "articles": len(load_result.articles),
                    "failures": len(load_result.failures),
                    "skipped_drafts": load_result.skipped_drafts,
                }
            )
        except (OSError, ValueError) as e:
            stage.fail(str(e))
            return None
        progress.remove_task(task)

        # Stage 3: Load redirects
        stage = self._stage("redirects")
        task = progress.add_task(stage.description, total=1)
        stage.start()
        try:
            redirects, redirects_path = self._load_redirects()
            stage.complete({"redirects": len(redirects)})
        except (OSError, ValueError) as e:
            stage.fail(str(e))
            return None
        progress.remove_task(task)

        # Stage 4: Lint
        stage = self._stage("lint")
        task = progress.add_task(stage.description, total=1)
        stage.start()
        try:
            linter = ArticleLinter(settings.lint, disabled=self.disabled)
            self.report = linter.run(
                load_result,
                redirects=redirects,
                redirects_path=redirects_path,
                static_dir=self.config.resolve(settings.static_dir),
            )
            stage.complete({"findings": len(self.report.findings), **self.report.counts})
        except ValueError as e:
            stage.fail(str(e))
            return None
        progress.remove_task(task)

        # Stage 5: Reports
        stage = self._stage("report")
        stage.start()
        report_dir = self.report_dir or self.config.report_dir
        try:
            files = self._save_reports(report_dir) if report_dir else []
            stage.complete({"files": [f.name for f in files]})
        except OSError as e:
            stage.fail(str(e))

        return self.report
