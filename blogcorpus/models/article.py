"""Article model for Markdown files with YAML front matter."""

import re
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

from pendulum import DateTime
from pydantic import Field, field_validator

from ..timestamps import parse_timestamp
from .base import ContentModel, normalize_path

FILENAME_RE = re.compile(r"^(?P<date>\d{4}-\d{2}-\d{2})-(?P<slug>[^/]+?)(?:\.md)?$")


def match_file_name(path: Path) -> Optional[re.Match]:
    """Match YYYY-MM-DD-slug against a file, or its folder for index.md bundles."""
    name = path.parent.name if path.stem == "index" else path.name
    return FILENAME_RE.match(name)


class FrontMatter(ContentModel):
    """Metadata block at the head of an article."""

    title: Optional[str] = Field(None, description="Article title")
    authors: List[str] = Field(default_factory=list, description="Author identifiers")
    categories: List[str] = Field(default_factory=list, description="Category tags")
    date: Optional[Any] = Field(None, description="Publication timestamp as written")
    modified: Optional[Any] = Field(None, description="Last modification timestamp as written")
    excerpt: Optional[str] = Field(None, description="Short summary")
    image: Optional[str] = Field(None, description="Header image path")
    url: Optional[str] = Field(None, description="URL slug")
    draft: bool = Field(False, description="Whether the article is unpublished")
    raw: Dict[str, Any] = Field(default_factory=dict, description="Mapping exactly as parsed")

    @field_validator("authors", "categories", mode="before")
    @classmethod
    def coerce_list(cls, v: Any) -> List[str]:
        """Accept a single string or a list of values."""
        if v is None:
            return []
        if isinstance(v, (list, tuple)):
            return [str(item) for item in v if item is not None]
        return [str(v)]

    @field_validator("title", "excerpt", "image", "url", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> Optional[str]:
        """YAML turns bare numbers and dates into non-strings."""
        if v is None:
            return None
        return str(v)

    @field_validator("draft", mode="before")
    @classmethod
    def coerce_draft(cls, v: Any) -> bool:
        """Treat a missing draft flag as published; strings like "false" parse as bools."""
        return False if v is None else v

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "FrontMatter":
        """Build front matter from a parsed YAML mapping."""
        known = {key: data[key] for key in cls.model_fields if key in data and key != "raw"}
        return cls(**known, raw=dict(data))


class CodeBlock(ContentModel):
    """Fenced code block inside an article body."""

    language: Optional[str] = Field(None, description="Declared language tag")
    info: str = Field("", description="Full info string after the fence")
    line: int = Field(..., description="File line of the opening fence")
    closed: bool = Field(True, description="Whether a closing fence was found")
    content: str = Field("", description="Code between the fences")


class Shortcode(ContentModel):
    """Template directive such as {{% image %}}."""

    name: str = Field(..., description="Shortcode name")
    closing: bool = Field(False, description="Whether this is a /name closing tag")
    delimiter: str = Field("%", description="'%' or '<'")
    args: str = Field("", description="Raw argument text")
    line: int = Field(..., description="File line of the directive")


class Article(ContentModel):
    """Single Markdown content file."""

    path: Path = Field(..., description="File path")
    front_matter: FrontMatter = Field(default_factory=FrontMatter)
    body: str = Field("", description="Markdown after the front matter")
    body_line: int = Field(1, description="File line where the body starts")
    code_blocks: List[CodeBlock] = Field(default_factory=list)
    shortcodes: List[Shortcode] = Field(default_factory=list)

    @property
    def slug(self) -> Optional[str]:
        """Slug part of a YYYY-MM-DD-slug.md file name."""
        match = match_file_name(self.path)
        return match.group("slug") if match else None

    @property
    def file_date(self) -> Optional[date]:
        """Date prefix of the file name, None if missing or not a real date."""
        match = match_file_name(self.path)
        if not match:
            return None
        try:
            return date.fromisoformat(match.group("date"))
        except ValueError:
            return None

    @property
    def title(self) -> str:
        """Title or the file name when untitled."""
        return self.front_matter.title or self.path.stem

    @property
    def normalized_url(self) -> Optional[str]:
        """URL without surrounding slashes."""
        if not self.front_matter.url:
            return None
        return normalize_path(self.front_matter.url) or None

    @property
    def published(self) -> Optional[DateTime]:
        """Parsed publication date, None if absent or invalid."""
        try:
            return parse_timestamp(self.front_matter.date)
        except ValueError:
            return None
