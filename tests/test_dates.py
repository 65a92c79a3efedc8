# tests/test_dates.py

from __future__ import annotations

from datetime import date, time

import pytest

from taskbot.dates import When, parse_when, try_parse_when
from taskbot.errors import DateParseError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2024-06-01", When(date(2024, 6, 1))),
        ("2024-06-01 1800", When(date(2024, 6, 1), time(18, 0))),
        ("2024-06-01 18:00", When(date(2024, 6, 1), time(18, 0))),
        ("1/6/2024 0930", When(date(2024, 6, 1), time(9, 30))),
        ("2024-06-01 1800-2000", When(date(2024, 6, 1), time(18, 0))),
        ("  2024-06-01   1800 ", When(date(2024, 6, 1), time(18, 0))),
    ],
)
def test_parse_when(text: str, expected: When) -> None:
    assert parse_when(text) == expected


@pytest.mark.parametrize("text", ["", "tomorrow", "2024-13-01", "2024-06-01 late"])
def test_parse_when_rejects(text: str) -> None:
    with pytest.raises(DateParseError):
        parse_when(text)


def test_try_parse_when_returns_none() -> None:
    assert try_parse_when(None) is None
    assert try_parse_when("whenever") is None


def test_matches_exact_time_or_whole_day() -> None:
    evening = When(date(2024, 6, 1), time(18, 0))
    morning = When(date(2024, 6, 1), time(9, 0))
    day_only = When(date(2024, 6, 1))

    assert evening.matches(day_only)
    assert morning.matches(day_only)
    assert evening.matches(evening)
    assert not morning.matches(evening)
    # A task without a time of day is not at any exact instant
    assert not day_only.matches(evening)
    assert day_only.matches(day_only)
