"""Timestamp parsing for front matter values."""

from datetime import date, datetime
from typing import Any, Optional

import pendulum
from pendulum import DateTime


def parse_timestamp(value: Any) -> Optional[DateTime]:
    """
    Parse a front matter date value.

    YAML may hand us a datetime, a date or a string such as
    ``2021-10-05 06:00:00 +1000``. Naive values are taken as UTC.

    Raises:
        ValueError: if the value is not a recognizable timestamp
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return pendulum.instance(value, tz="UTC")
        return pendulum.instance(value)

    if isinstance(value, date):
        return pendulum.datetime(value.year, value.month, value.day, tz="UTC")

    if not isinstance(value, str):
        raise ValueError(f"Unsupported timestamp type: {type(value).__name__}")

    parsed = pendulum.parse(value.strip(), strict=False)
    if isinstance(parsed, DateTime):
        return parsed
    if isinstance(parsed, date):
        return pendulum.datetime(parsed.year, parsed.month, parsed.day, tz="UTC")
    raise ValueError(f"Not a timestamp: {value!r}")
