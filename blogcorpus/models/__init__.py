"""Data models for blog articles and site redirects."""

from .article import Article, CodeBlock, FrontMatter, Shortcode
from .redirect import Redirect

__all__ = ["Article", "CodeBlock", "FrontMatter", "Redirect", "Shortcode"]
