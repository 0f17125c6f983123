"""Site link helpers."""

from typing import Dict, Optional

from ..config import ImageFormats, SiteConfig
from ..models import Article


def absolute_url(base_url: str, path: str) -> str:
    """Join a site-relative path onto the base URL."""
    base = base_url.rstrip("/")
    path = path.lstrip("/")
    return f"{base}/{path}"


def teaser_url(image: str, formats: ImageFormats) -> str:
    """Wrap an image path with the teaser prefix and suffix."""
    return f"{formats.teaser_prefix}{image}{formats.teaser_suffix}"


def opengraph_url(image: str, formats: ImageFormats) -> str:
    """Wrap an image path with the opengraph prefix and suffix."""
    return f"{formats.opengraph_prefix}{image}{formats.opengraph_suffix}"


def article_links(article: Article, site: SiteConfig) -> Dict[str, Optional[str]]:
    """Public URL and image variants of an article."""
    links: Dict[str, Optional[str]] = {"url": None, "teaser": None, "opengraph": None}

    if article.normalized_url:
        links["url"] = absolute_url(site.base_url, article.normalized_url + "/")

    image = article.front_matter.image
    if image:
        links["teaser"] = absolute_url(site.base_url, teaser_url(image, site.image_formats))
        links["opengraph"] = absolute_url(site.base_url, opengraph_url(image, site.image_formats))

    return links
