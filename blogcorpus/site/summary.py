"""Prose summaries for articles without an excerpt."""

import re

from ..parsing.body import SHORTCODE_RE, iter_prose

LINK_RE = re.compile(r"!?\[([^\]]*)\]\([^)]*\)")
MARKUP_RE = re.compile(r"\*+|`|^\s*(?:#+|>+|[-+]\s)")
HTML_RE = re.compile(r"<[^>]+>")


def summarize(body: str, words: int = 20) -> str:
    """
    Build a plain-text summary from the first words of the prose.

    Code fences, shortcodes, HTML tags and Markdown markup are dropped;
    link text is kept. An ellipsis marks a cut.
    """
    tokens = []
    for _, line in iter_prose(body):
        text = SHORTCODE_RE.sub(" ", line)
        text = LINK_RE.sub(r"\1", text)
        text = HTML_RE.sub(" ", text)
        text = MARKUP_RE.sub("", text)
        tokens.extend(text.split())
        if len(tokens) > words:
            return " ".join(tokens[:words]) + " ..."

    return " ".join(tokens)
