"""Article and corpus loading."""

from pathlib import Path
from typing import List

from pydantic import BaseModel, Field

from ..models import Article
from .body import scan_body
from .frontmatter import parse_front_matter, split_front_matter


class LoadFailure(BaseModel):
    """A file that could not be loaded as an article."""

    path: Path = Field(..., description="File path")
    error: str = Field(..., description="Why loading failed")


class LoadResult(BaseModel):
    """Result of loading a content directory."""

    articles: List[Article] = Field(default_factory=list, description="Loaded articles")
    failures: List[LoadFailure] = Field(default_factory=list, description="Files that failed")
    skipped_drafts: int = Field(0, description="Drafts left out of the result")

    @property
    def total_files(self) -> int:
        return len(self.articles) + len(self.failures) + self.skipped_drafts


def load_article(path: Path) -> Article:
    """Load a single article from disk."""
    text = path.read_text(encoding="utf-8")
    yaml_text, body, body_line = split_front_matter(text)
    front_matter = parse_front_matter(yaml_text)
    scan = scan_body(body, body_line)

    return Article(
        path=path,
        front_matter=front_matter,
        body=body,
        body_line=body_line,
        code_blocks=scan.code_blocks,
        shortcodes=scan.shortcodes,
    )


class ArticleLoader:
    """Load every article in a content directory."""

    def __init__(
        self,
        content_dir: Path,
        pattern: str = "**/*.md",
        include_drafts: bool = True,
    ) -> None:
        """
        Initialize article loader.

        Args:
            content_dir: Directory to search
            pattern: Glob for article files
            include_drafts: Whether draft articles are kept
        """
        self.content_dir = Path(content_dir)
        self.pattern = pattern
        self.include_drafts = include_drafts

    def discover(self) -> List[Path]:
        """List article files in a stable order."""
        if not self.content_dir.exists():
            raise FileNotFoundError(f"Content directory not found: {self.content_dir}")
        if self.content_dir.is_file():
            return [self.content_dir]
        return sorted(p for p in self.content_dir.glob(self.pattern) if p.is_file())

    def load(self) -> LoadResult:
        """Load all articles, collecting failures instead of stopping."""
        result = LoadResult()

        for path in self.discover():
            try:
                article = load_article(path)
            except (ValueError, UnicodeDecodeError, OSError) as e:
                result.failures.append(LoadFailure(path=path, error=str(e)))
                continue

            if article.front_matter.draft and not self.include_drafts:
                result.skipped_drafts += 1
                continue

            result.articles.append(article)

        return result


def load_paths(paths: List[Path], pattern: str = "**/*.md", include_drafts: bool = True) -> LoadResult:
    """Load articles from several files or directories into one result."""
    merged = LoadResult()
    seen = set()

    for path in paths:
        partial = ArticleLoader(path, pattern=pattern, include_drafts=include_drafts).load()
        for article in partial.articles:
            if article.path.resolve() not in seen:
                seen.add(article.path.resolve())
                merged.articles.append(article)
        for failure in partial.failures:
            if failure.path.resolve() not in seen:
                seen.add(failure.path.resolve())
                merged.failures.append(failure)
        merged.skipped_drafts += partial.skipped_drafts

    return merged
