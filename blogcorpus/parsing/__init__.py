"""Parsing of articles, front matter and redirects."""

from .body import BodyScan, iter_lines, iter_prose, scan_body
from .frontmatter import (
    FrontMatterError,
    dump_front_matter,
    load_mapping,
    parse_front_matter,
    render_front_matter,
    split_front_matter,
)
from .loader import ArticleLoader, LoadFailure, LoadResult, load_article, load_paths
from .redirects import load_redirects

__all__ = [
    "ArticleLoader",
    "BodyScan",
    "FrontMatterError",
    "LoadFailure",
    "LoadResult",
    "dump_front_matter",
    "iter_lines",
    "iter_prose",
    "load_article",
    "load_mapping",
    "load_paths",
    "load_redirects",
    "parse_front_matter",
    "render_front_matter",
    "scan_body",
    "split_front_matter",
]
