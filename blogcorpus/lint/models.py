"""Lint models."""

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Severity(str, Enum):
    """How serious a finding is."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Finding(BaseModel):
    """Single lint finding."""

    code: str = Field(..., description="Code of the check that produced it")
    severity: Severity = Field(..., description="Finding severity")
    message: str = Field(..., description="Human-readable description")
    path: Optional[Path] = Field(None, description="File the finding refers to")
    line: Optional[int] = Field(None, description="1-based file line")

    @property
    def location(self) -> str:
        """path:line for display."""
        if self.path is None:
            return "-"
        if self.line is None:
            return str(self.path)
        return f"{self.path}:{self.line}"


class LintReport(BaseModel):
    """Result of linting a corpus."""

    articles_checked: int = Field(..., description="Articles that were checked")
    findings: List[Finding] = Field(default_factory=list, description="All findings")
    checks_run: List[str] = Field(default_factory=list, description="Codes of checks that ran")
    generated_at: datetime = Field(..., description="When the report was produced")

    @property
    def counts(self) -> Dict[str, int]:
        """Number of findings per severity."""
        counts = {severity.value: 0 for severity in Severity}
        for finding in self.findings:
            counts[finding.severity.value] += 1
        return counts

    @property
    def has_errors(self) -> bool:
        return any(f.severity == Severity.ERROR for f in self.findings)

    def failed(self, strict: bool = False) -> bool:
        """Whether the run should fail; strict also fails on warnings."""
        if self.has_errors:
            return True
        return strict and any(f.severity == Severity.WARNING for f in self.findings)

    def by_code(self, code: str) -> List[Finding]:
        return [f for f in self.findings if f.code == code]
