"""Redirect loading from netlify.toml."""

import tomllib
from pathlib import Path
from typing import List

from pydantic import ValidationError

from ..models import Redirect


def load_redirects(path: Path) -> List[Redirect]:
    """Load [[redirects]] entries from a Netlify config file."""
    if not path.exists():
        raise FileNotFoundError(f"Netlify config not found: {path}")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {path}: {e}")

    redirects = []
    for index, entry in enumerate(data.get("redirects", [])):
        try:
            redirects.append(Redirect(**entry))
        except ValidationError as e:
            raise ValueError(f"Invalid redirect #{index + 1} in {path}: {e}")

    return redirects
