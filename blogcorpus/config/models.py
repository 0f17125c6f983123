"""Configuration models."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


DEFAULT_LANGUAGES = ["java", "js", "json", "yaml", "shell", "xml", "sql", "text"]


class ImageFormats(BaseModel):
    """Prefixes and suffixes wrapped around article images."""

    teaser_prefix: str = Field("", description="Prefix for teaser image URLs")
    teaser_suffix: str = Field("", description="Suffix for teaser image URLs")
    opengraph_prefix: str = Field("", description="Prefix for opengraph image URLs")
    opengraph_suffix: str = Field("", description="Suffix for opengraph image URLs")


class SiteConfig(BaseModel):
    """Site settings used to build links and summaries."""

    base_url: str = Field("http://localhost:1313", description="Site base URL")
    base_url_env: Optional[str] = Field(
        "BLOGCORPUS_BASE_URL", description="Environment variable overriding base_url"
    )
    summary_length: int = Field(20, description="Words in a generated summary", ge=1, le=500)
    image_formats: ImageFormats = Field(default_factory=ImageFormats)


class LintConfig(BaseModel):
    """Lint rule settings."""

    allowed_languages: List[str] = Field(
        default_factory=lambda: list(DEFAULT_LANGUAGES),
        description="Code fence languages accepted by the code-language check",
    )
    require_language: bool = Field(False, description="Treat untagged code fences as errors")
    required_fields: List[str] = Field(
        default_factory=lambda: ["title", "url"],
        description="Front matter keys that must be present and non-empty",
    )
    known_shortcodes: List[str] = Field(
        default_factory=lambda: ["image", "github", "info", "warning", "tip", "youtube"],
        description="Shortcode names the theme understands",
    )
    block_shortcodes: List[str] = Field(
        default_factory=lambda: ["info", "warning", "tip"],
        description="Shortcodes that must be closed with a matching /name",
    )
    placeholders: List[str] = Field(
        default_factory=lambda: ["TODO", "TBD", "FIXME"],
        description="Markers that flag unfinished prose",
    )
    disabled_checks: List[str] = Field(default_factory=list, description="Check codes to skip")
    strict: bool = Field(False, description="Fail the run on warnings")

    @field_validator("allowed_languages", "known_shortcodes", "block_shortcodes")
    @classmethod
    def lowercase(cls, v: List[str]) -> List[str]:
        """Store names lowercased."""
        return [item.strip().lower() for item in v if item and item.strip()]


class ConfigModel(BaseModel):
    """Main configuration model."""

    content_dir: str = Field("content/blog", description="Directory holding the articles", min_length=1)
    pattern: str = Field("**/*.md", description="Glob for article files inside content_dir")
    include_drafts: bool = Field(True, description="Load articles marked draft: true")
    netlify_toml: Optional[str] = Field("netlify.toml", description="Netlify config with redirects")
    static_dir: Optional[str] = Field(None, description="Directory that image paths resolve against")
    report_dir: Optional[str] = Field(None, description="Directory for JSON reports")
    site: SiteConfig = Field(default_factory=SiteConfig)
    lint: LintConfig = Field(default_factory=LintConfig)
