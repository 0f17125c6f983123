"""Individual lint checks for articles and redirects."""

import re
from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..config import LintConfig
from ..models import Article, Redirect
from ..models.article import match_file_name
from ..models.base import normalize_path
from ..parsing import FrontMatterError, dump_front_matter, iter_prose, load_mapping
from ..timestamps import parse_timestamp
from .models import Finding, Severity


@dataclass
class LintContext:
    """Everything a check may need besides the articles."""

    config: LintConfig = field(default_factory=LintConfig)
    redirects: List[Redirect] = field(default_factory=list)
    redirects_path: Optional[Path] = None
    static_dir: Optional[Path] = None


class BaseCheck(ABC):
    """Base class for lint checks."""

    code: str = ""
    description: str = ""

    @abstractmethod
    def check(self, articles: List[Article], context: LintContext) -> List[Finding]:
        """
        Check a corpus.

        Args:
            articles: Loaded articles
            context: Lint configuration and site data

        Returns:
            Findings, empty if everything passed
        """
        pass

    def finding(
        self,
        severity: Severity,
        message: str,
        path: Optional[Path] = None,
        line: Optional[int] = None,
    ) -> Finding:
        return Finding(code=self.code, severity=severity, message=message, path=path, line=line)


class ArticleCheck(BaseCheck):
    """Check that looks at one article at a time."""

    def check(self, articles: List[Article], context: LintContext) -> List[Finding]:
        findings = []
        for article in articles:
            findings.extend(self.check_article(article, context))
        return findings

    @abstractmethod
    def check_article(self, article: Article, context: LintContext) -> List[Finding]:
        pass


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict, tuple)):
        return len(value) == 0
    return False


class RequiredFieldsCheck(ArticleCheck):
    """Required front matter keys are present and non-empty."""

    code = "required-fields"
    description = "title, url and other required keys are set"

    def check_article(self, article: Article, context: LintContext) -> List[Finding]:
        findings = []
        raw = article.front_matter.raw
        for key in context.config.required_fields:
            if key not in raw:
                findings.append(self.finding(Severity.ERROR, f"Missing '{key}'", article.path, 1))
            elif _is_empty(raw[key]):
                findings.append(self.finding(Severity.ERROR, f"Empty '{key}'", article.path, 1))
        return findings


class AuthorsCheck(ArticleCheck):
    """Every article has at least one author."""

    code = "authors"
    description = "at least one author"

    def check_article(self, article: Article, context: LintContext) -> List[Finding]:
        authors = [a for a in article.front_matter.authors if a.strip()]
        if not authors:
            return [self.finding(Severity.ERROR, "No authors listed", article.path, 1)]
        return []


class DateCheck(ArticleCheck):
    """date is a valid timestamp, modified too when present."""

    code = "date"
    description = "date and modified are valid timestamps"

    def check_article(self, article: Article, context: LintContext) -> List[Finding]:
        fm = article.front_matter
        if _is_empty(fm.date):
            return [self.finding(Severity.ERROR, "Missing 'date'", article.path, 1)]

        try:
            published = parse_timestamp(fm.date)
        except ValueError:
            return [self.finding(Severity.ERROR, f"Invalid 'date': {fm.date!r}", article.path, 1)]

        if _is_empty(fm.modified):
            return []

        try:
            modified = parse_timestamp(fm.modified)
        except ValueError:
            return [
                self.finding(Severity.ERROR, f"Invalid 'modified': {fm.modified!r}", article.path, 1)
            ]

        if modified < published:
            return [
                self.finding(
                    Severity.WARNING,
                    f"'modified' ({modified.to_date_string()}) is before 'date' "
                    f"({published.to_date_string()})",
                    article.path,
                    1,
                )
            ]
        return []


class FilenameCheck(ArticleCheck):
    """File names follow YYYY-MM-DD-slug.md and agree with the date."""

    code = "filename"
    description = "YYYY-MM-DD-slug.md naming matching the front matter date"

    def check_article(self, article: Article, context: LintContext) -> List[Finding]:
        if match_file_name(article.path) is None:
            return [
                self.finding(
                    Severity.WARNING,
                    f"'{article.path.name}' does not follow YYYY-MM-DD-slug.md",
                    article.path,
                )
            ]

        if article.file_date is None:
            return [self.finding(Severity.WARNING, "File name date is not a real date", article.path)]

        published = article.published
        if published is not None and published.date() != article.file_date:
            return [
                self.finding(
                    Severity.WARNING,
                    f"File name date {article.file_date.isoformat()} differs from "
                    f"'date' {published.to_date_string()}",
                    article.path,
                )
            ]
        return []


class UniqueUrlCheck(BaseCheck):
    """url values are unique across the corpus."""

    code = "unique-url"
    description = "no two articles share a url"

    def check(self, articles: List[Article], context: LintContext) -> List[Finding]:
        groups: Dict[str, List[Article]] = defaultdict(list)
        for article in articles:
            if article.normalized_url:
                groups[article.normalized_url].append(article)

        findings = []
        for url, group in groups.items():
            if len(group) < 2:
                continue
            for article in group:
                others = ", ".join(a.path.name for a in group if a is not article)
                findings.append(
                    self.finding(
                        Severity.ERROR,
                        f"url '{url}' is also used by {others}",
                        article.path,
                        1,
                    )
                )
        return findings


def normalize_title(title: str) -> str:
    """Lowercase, drop punctuation and collapse whitespace."""
    return " ".join(re.sub(r"[^\w\s]", " ", title.lower()).split())


class DuplicateTitleCheck(BaseCheck):
    """Titles are unique; duplicates usually mean a leftover revision."""

    code = "duplicate-title"
    description = "no two articles share a title"

    def check(self, articles: List[Article], context: LintContext) -> List[Finding]:
        groups: Dict[str, List[Article]] = defaultdict(list)
        for article in articles:
            if article.front_matter.title and article.front_matter.title.strip():
                groups[normalize_title(article.front_matter.title)].append(article)

        findings = []
        for group in groups.values():
            if len(group) < 2:
                continue
            for article in group:
                others = ", ".join(a.path.name for a in group if a is not article)
                findings.append(
                    self.finding(
                        Severity.WARNING,
                        f"Title '{article.front_matter.title}' duplicates {others}",
                        article.path,
                        1,
                    )
                )
        return findings


class CodeLanguageCheck(ArticleCheck):
    """Code fences declare a known language and are closed."""

    code = "code-language"
    description = "fenced code blocks use a known language tag"

    def check_article(self, article: Article, context: LintContext) -> List[Finding]:
        allowed = set(context.config.allowed_languages)
        findings = []

        for block in article.code_blocks:
            if not block.closed:
                findings.append(
                    self.finding(Severity.ERROR, "Code fence is never closed", article.path, block.line)
                )

            if block.language is None:
                severity = Severity.ERROR if context.config.require_language else Severity.INFO
                findings.append(
                    self.finding(severity, "Code fence has no language tag", article.path, block.line)
                )
            elif block.language not in allowed:
                findings.append(
                    self.finding(
                        Severity.ERROR,
                        f"Unknown code language '{block.language}'",
                        article.path,
                        block.line,
                    )
                )
        return findings


class ShortcodeCheck(ArticleCheck):
    """Shortcodes are known to the theme and block shortcodes are closed."""

    code = "shortcodes"
    description = "shortcodes are known and balanced"

    def check_article(self, article: Article, context: LintContext) -> List[Finding]:
        known = set(context.config.known_shortcodes)
        paired = set(context.config.block_shortcodes)
        paired.update(sc.name for sc in article.shortcodes if sc.closing)

        findings = []
        open_lines: Dict[str, List[int]] = defaultdict(list)

        for sc in article.shortcodes:
            if sc.name not in known and not sc.closing:
                findings.append(
                    self.finding(
                        Severity.WARNING, f"Unknown shortcode '{sc.name}'", article.path, sc.line
                    )
                )

            if sc.closing:
                if open_lines[sc.name]:
                    open_lines[sc.name].pop()
                else:
                    findings.append(
                        self.finding(
                            Severity.WARNING,
                            f"Closing '/{sc.name}' without an opening shortcode",
                            article.path,
                            sc.line,
                        )
                    )
            elif sc.name in paired:
                open_lines[sc.name].append(sc.line)

        for name, lines in open_lines.items():
            for line in lines:
                findings.append(
                    self.finding(
                        Severity.WARNING, f"Shortcode '{name}' is never closed", article.path, line
                    )
                )
        return findings


class RoundTripCheck(ArticleCheck):
    """Front matter survives a dump and re-parse unchanged."""

    code = "round-trip"
    description = "front matter re-serializes without losing keys or values"

    def check_article(self, article: Article, context: LintContext) -> List[Finding]:
        raw = article.front_matter.raw
        try:
            reparsed = load_mapping(dump_front_matter(raw))
        except (FrontMatterError, yaml.YAMLError) as e:
            return [self.finding(Severity.ERROR, f"Front matter does not re-serialize: {e}", article.path, 1)]

        changed = [key for key in raw if key not in reparsed or reparsed[key] != raw[key]]
        added = [key for key in reparsed if key not in raw]
        if changed or added:
            keys = ", ".join(str(k) for k in changed + added)
            return [
                self.finding(Severity.ERROR, f"Front matter keys change on round trip: {keys}", article.path, 1)
            ]
        return []


class PlaceholderCheck(ArticleCheck):
    """Prose contains no unfinished-work markers."""

    code = "placeholder"
    description = "no TODO-style markers outside code"

    def check_article(self, article: Article, context: LintContext) -> List[Finding]:
        if not context.config.placeholders:
            return []

        pattern = re.compile(
            r"\b(" + "|".join(re.escape(p) for p in context.config.placeholders) + r")\b"
        )
        findings = []
        for line_no, line in iter_prose(article.body, article.body_line):
            match = pattern.search(line)
            if match:
                findings.append(
                    self.finding(
                        Severity.WARNING,
                        f"Placeholder '{match.group(1)}' in prose",
                        article.path,
                        line_no,
                    )
                )
        return findings


class ExcerptCheck(ArticleCheck):
    """Articles carry an excerpt instead of relying on a generated summary."""

    code = "excerpt"
    description = "excerpt is set"

    def check_article(self, article: Article, context: LintContext) -> List[Finding]:
        if _is_empty(article.front_matter.excerpt):
            return [self.finding(Severity.INFO, "No 'excerpt'; a generated summary will be used", article.path, 1)]
        return []


class ImageCheck(ArticleCheck):
    """Header images exist in the static directory."""

    code = "image"
    description = "image paths resolve inside static_dir"

    def check_article(self, article: Article, context: LintContext) -> List[Finding]:
        image = article.front_matter.image
        if context.static_dir is None or not image or re.match(r"^[a-z]+://", image):
            return []

        if not (context.static_dir / image.lstrip("/")).exists():
            return [self.finding(Severity.WARNING, f"Image '{image}' not found", article.path, 1)]
        return []


class RedirectCheck(BaseCheck):
    """Redirects neither shadow articles nor loop."""

    code = "redirects"
    description = "redirects are unique, loop-free and do not shadow articles"

    def check(self, articles: List[Article], context: LintContext) -> List[Finding]:
        path = context.redirects_path
        article_urls = {a.normalized_url for a in articles if a.normalized_url}
        sources: Dict[str, Redirect] = {}
        findings = []

        for redirect in context.redirects:
            source = normalize_path(redirect.source)
            if source in sources:
                findings.append(
                    self.finding(Severity.ERROR, f"Duplicate redirect from '{redirect.source}'", path)
                )
                continue
            sources[source] = redirect

            if redirect.force and source in article_urls:
                findings.append(
                    self.finding(
                        Severity.ERROR,
                        f"Forced redirect from '{redirect.source}' hides an article",
                        path,
                    )
                )

        reported = set()
        for source, redirect in sources.items():
            if not redirect.is_internal:
                continue

            chain = [source]
            target = normalize_path(redirect.target)
            looped = False
            while target in sources:
                if target in chain:
                    looped = True
                    break
                chain.append(target)
                next_redirect = sources[target]
                if not next_redirect.is_internal:
                    break
                target = normalize_path(next_redirect.target)

            if looped:
                cycle = chain[chain.index(target):]
                key = frozenset(cycle)
                if key not in reported:
                    reported.add(key)
                    hops = " -> ".join("/" + s for s in cycle + [target])
                    findings.append(self.finding(Severity.ERROR, f"Redirect loop: {hops}", path))
            elif len(chain) > 1:
                hops = " -> ".join("/" + s for s in chain)
                final = sources[chain[-1]].target
                findings.append(self.finding(Severity.WARNING, f"Redirect chain: {hops} -> {final}", path))
        return findings


ALL_CHECKS = [
    RequiredFieldsCheck,
    AuthorsCheck,
    DateCheck,
    FilenameCheck,
    UniqueUrlCheck,
    DuplicateTitleCheck,
    CodeLanguageCheck,
    ShortcodeCheck,
    RoundTripCheck,
    PlaceholderCheck,
    ExcerptCheck,
    ImageCheck,
    RedirectCheck,
]
