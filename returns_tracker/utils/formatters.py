"""
Cell and status-line formatting for the returns views
"""

from datetime import datetime
from typing import Optional

DEFAULT_DATE_FORMAT = "%b %d, %Y %I:%M %p"


def format_date(value: Optional[datetime], format_str: str = DEFAULT_DATE_FORMAT) -> str:
    """Render a timestamp in local time; an unknown timestamp renders empty."""
    if value is None:
        return ""
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime(format_str)


def clip(text: str, width: int = 30) -> str:
    """Fit ``text`` into ``width`` columns, marking the cut with an ellipsis."""
    if len(text) <= width:
        return text
    return text[: width - 1] + "…"


def format_count(loaded: int, total: int) -> str:
    """'10 of 25' style counter for the status bar."""
    if total <= 0:
        return "0"
    return f"{loaded} of {total}"
