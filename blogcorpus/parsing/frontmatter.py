"""Front matter splitting, parsing and serialization."""

from typing import Any, Dict, Tuple

import yaml

from ..models import FrontMatter

DELIMITER = "---"
CLOSING_DELIMITERS = ("---", "...")


class FrontMatterError(ValueError):
    """Front matter is missing, unterminated or not a YAML mapping."""


def split_front_matter(text: str) -> Tuple[str, str, int]:
    """
    Split an article into its front matter and body.

    Args:
        text: Full file content

    Returns:
        Tuple of (yaml_text, body, body_line) where body_line is the
        1-based file line the body starts on
    """
    lines = text.lstrip("\ufeff").splitlines(keepends=True)

    if not lines or lines[0].rstrip() != DELIMITER:
        raise FrontMatterError("File does not start with a '---' front matter block")

    for index in range(1, len(lines)):
        if lines[index].rstrip() in CLOSING_DELIMITERS:
            yaml_text = "".join(lines[1:index])
            body = "".join(lines[index + 1:])
            return yaml_text, body, index + 2

    raise FrontMatterError("Front matter block is not closed with '---'")


def load_mapping(yaml_text: str) -> Dict[str, Any]:
    """Parse front matter YAML into a mapping."""
    try:
        data = yaml.safe_load(yaml_text)
    except (yaml.YAMLError, ValueError) as e:
        raise FrontMatterError(f"Invalid YAML in front matter: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontMatterError(f"Front matter must be a mapping, got {type(data).__name__}")
    return data


def parse_front_matter(yaml_text: str) -> FrontMatter:
    """Parse front matter YAML into a FrontMatter model."""
    return FrontMatter.from_mapping(load_mapping(yaml_text))


def dump_front_matter(data: Dict[str, Any]) -> str:
    """Serialize a front matter mapping back to YAML."""
    return yaml.safe_dump(
        data,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def render_front_matter(data: Dict[str, Any], body: str = "") -> str:
    """Render a full article from a mapping and a body."""
    return f"{DELIMITER}\n{dump_front_matter(data)}{DELIMITER}\n{body}"
