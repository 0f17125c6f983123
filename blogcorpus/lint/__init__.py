"""Content lint checks and reporting."""

from .checks import (
    ALL_CHECKS,
    ArticleCheck,
    AuthorsCheck,
    BaseCheck,
    CodeLanguageCheck,
    DateCheck,
    DuplicateTitleCheck,
    ExcerptCheck,
    FilenameCheck,
    ImageCheck,
    LintContext,
    PlaceholderCheck,
    RedirectCheck,
    RequiredFieldsCheck,
    RoundTripCheck,
    ShortcodeCheck,
    UniqueUrlCheck,
)
from .linter import ArticleLinter, available_checks, print_lint_summary
from .models import Finding, LintReport, Severity

__all__ = [
    "ALL_CHECKS",
    "ArticleCheck",
    "ArticleLinter",
    "AuthorsCheck",
    "BaseCheck",
    "CodeLanguageCheck",
    "DateCheck",
    "DuplicateTitleCheck",
    "ExcerptCheck",
    "FilenameCheck",
    "Finding",
    "ImageCheck",
    "LintContext",
    "LintReport",
    "PlaceholderCheck",
    "RedirectCheck",
    "RequiredFieldsCheck",
    "RoundTripCheck",
    "Severity",
    "ShortcodeCheck",
    "UniqueUrlCheck",
    "available_checks",
    "print_lint_summary",
]
