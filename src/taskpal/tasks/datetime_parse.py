# src/taskpal/tasks/datetime_parse.py

from __future__ import annotations

from datetime import datetime

from ..config import DEFAULT_DATETIME_FORMAT
from ..core.errors import DateParseError

DISPLAY_FORMAT = "%b %d %Y %H:%M"


def parse_datetime(raw: str, fmt: str = DEFAULT_DATETIME_FORMAT) -> datetime:
    """
    Parse a user-supplied local date-time, e.g. "2024-12-01 1800".

    Surrounding whitespace is ignored. Raises DateParseError on anything else.
    """
    text = (raw or "").strip()
    try:
        return datetime.strptime(text, fmt)
    except ValueError as e:
        raise DateParseError(text, fmt) from e


def format_datetime(value: datetime) -> str:
    return value.strftime(DISPLAY_FORMAT)
