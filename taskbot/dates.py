"""
Date/time parsing for deadline and event times and for date searches.

Accepted shapes (day-first for slashed dates):
    2024-06-01            2024-06-01 1800       2024-06-01 18:00
    1/6/2024              1/6/2024 1800         1/6/2024 18:00
Event ranges keep their start: "2024-06-01 1800-2000" is 2024-06-01 18:00.
"""

import re
from datetime import date, datetime, time
from typing import NamedTuple, Optional

from .errors import DateParseError

DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y")
TIME_FORMATS = ("%H%M", "%H:%M")

# "<end>" half of an event range, e.g. "-2000" or " - 20:00"
RANGE_END_RE = re.compile(r"\s*-\s*\d{1,2}:?\d{2}$")


class When(NamedTuple):
    """A parsed date with an optional time of day"""
    day: date
    at: Optional[time] = None

    @property
    def has_time(self) -> bool:
        return self.at is not None

    def matches(self, query: "When") -> bool:
        """Exact instant when the query has a time, same day otherwise"""
        if query.has_time:
            return self.has_time and self.day == query.day and self.at == query.at
        return self.day == query.day


def _parse_date(text: str) -> Optional[date]:
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def _parse_time(text: str) -> Optional[time]:
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    return None


def parse_when(text: str) -> When:
    """Parse a date or date/time string.

    Raises:
        DateParseError: if ``text`` is not one of the accepted shapes
    """
    cleaned = " ".join(text.split())
    parts = cleaned.split(" ", 1)

    day = _parse_date(parts[0]) if parts[0] else None
    if day is None:
        raise DateParseError(f"Not a date: {text!r}")

    if len(parts) == 1:
        return When(day)

    clock = RANGE_END_RE.sub("", parts[1]) if "-" in parts[1] else parts[1]
    at = _parse_time(clock)
    if at is None:
        raise DateParseError(f"Not a time of day: {parts[1]!r}")
    return When(day, at)


def try_parse_when(text: Optional[str]) -> Optional[When]:
    """Like parse_when, but None for missing or unparseable input"""
    if not text:
        return None
    try:
        return parse_when(text)
    except DateParseError:
        return None
