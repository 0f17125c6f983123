"""Link and summary helpers driven by the site configuration."""

from .links import absolute_url, article_links, opengraph_url, teaser_url
from .summary import summarize

__all__ = ["absolute_url", "article_links", "opengraph_url", "summarize", "teaser_url"]
