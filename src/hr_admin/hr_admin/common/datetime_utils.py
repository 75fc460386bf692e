from __future__ import annotations

import re
from datetime import date, datetime, time
from enum import Enum

from ..core.constants import CLOCK_TIME_PATTERN

_CLOCK_TIME_RE = re.compile(CLOCK_TIME_PATTERN)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_clock_time(value: str) -> time:
    """Parse a zero-padded 24h HH:MM string into time."""
    if not _CLOCK_TIME_RE.match(value):
        raise ValueError(f"Not an HH:MM time: {value!r}")
    return datetime.strptime(value, "%H:%M").time()


def today() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def format_value(value) -> str:
    """Render a stored value back into the string a form would submit."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, time):
        return value.strftime("%H:%M")
    return str(value)
