"""Article linter that combines the individual checks."""

from pathlib import Path
from typing import Iterable, List, Optional

import pendulum
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import LintConfig
from ..models import Redirect
from ..parsing import LoadResult
from .checks import ALL_CHECKS, BaseCheck, LintContext
from .models import Finding, LintReport, Severity

console = Console()

FRONT_MATTER_CODE = "front-matter"

SEVERITY_STYLES = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.INFO: "dim",
}


def available_checks() -> List[str]:
    """Codes of every registered check."""
    return [FRONT_MATTER_CODE] + [check.code for check in ALL_CHECKS]


class ArticleLinter:
    """Lint a loaded corpus using multiple checks."""

    def __init__(
        self,
        config: Optional[LintConfig] = None,
        checks: Optional[List[BaseCheck]] = None,
        disabled: Iterable[str] = (),
    ) -> None:
        """
        Initialize article linter.

        Args:
            config: Lint configuration
            checks: Check instances to run, all registered checks by default
            disabled: Extra check codes to skip on top of the configured ones
        """
        self.config = config or LintConfig()
        self.disabled = set(self.config.disabled_checks) | set(disabled)

        unknown = self.disabled - set(available_checks())
        if unknown:
            raise ValueError(f"Unknown check codes: {', '.join(sorted(unknown))}")

        if checks is None:
            checks = [check_class() for check_class in ALL_CHECKS]
        self.checks = [check for check in checks if check.code not in self.disabled]

    def run(
        self,
        load_result: LoadResult,
        redirects: Optional[List[Redirect]] = None,
        redirects_path: Optional[Path] = None,
        static_dir: Optional[Path] = None,
    ) -> LintReport:
        """
        Lint the loaded articles.

        Returns:
            Report with findings sorted by path, line and code
        """
        context = LintContext(
            config=self.config,
            redirects=redirects or [],
            redirects_path=redirects_path,
            static_dir=static_dir,
        )

        findings: List[Finding] = []
        checks_run: List[str] = []

        if FRONT_MATTER_CODE not in self.disabled:
            checks_run.append(FRONT_MATTER_CODE)
            for failure in load_result.failures:
                findings.append(
                    Finding(
                        code=FRONT_MATTER_CODE,
                        severity=Severity.ERROR,
                        message=failure.error,
                        path=failure.path,
                        line=1,
                    )
                )

        for check in self.checks:
            findings.extend(check.check(load_result.articles, context))
            checks_run.append(check.code)

        findings.sort(key=lambda f: (str(f.path or ""), f.line or 0, f.code))

        return LintReport(
            articles_checked=len(load_result.articles),
            findings=findings,
            checks_run=checks_run,
            generated_at=pendulum.now("UTC"),
        )


def print_lint_summary(report: LintReport, limit: Optional[int] = None) -> None:
    """Print lint findings and totals."""
    findings = report.findings if limit is None else report.findings[:limit]

    if findings:
        table = Table(title="Lint Findings")
        table.add_column("Location", style="cyan")
        table.add_column("Severity", style="bold")
        table.add_column("Check", style="magenta")
        table.add_column("Message")

        for finding in findings:
            style = SEVERITY_STYLES[finding.severity]
            table.add_row(
                finding.location,
                f"[{style}]{finding.severity.value}[/{style}]",
                finding.code,
                escape(finding.message),
            )

        console.print(table)
        if limit is not None and len(report.findings) > limit:
            console.print(f"[dim]... {len(report.findings) - limit} more findings[/dim]")

    counts = report.counts
    console.print(f"\n[bold]Lint Summary:[/bold]")
    console.print(f"  Articles checked: {report.articles_checked}")
    console.print(
        f"  Errors: [red]{counts['error']}[/red]  "
        f"Warnings: [yellow]{counts['warning']}[/yellow]  "
        f"Info: {counts['info']}"
    )
