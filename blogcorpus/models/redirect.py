"""Redirect model for Netlify redirect rules."""

from pydantic import Field

from .base import ContentModel


class Redirect(ContentModel):
    """A `[[redirects]]` entry from netlify.toml."""

    source: str = Field(..., alias="from", description="Path being redirected")
    target: str = Field(..., alias="to", description="Destination path or URL")
    status: int = Field(301, description="HTTP status code")
    force: bool = Field(False, description="Redirect even when content exists at source")

    @property
    def is_internal(self) -> bool:
        """Whether the target is a path on the same site."""
        return self.target.startswith("/")
