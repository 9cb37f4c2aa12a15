"""Tests for building work logs from clock entries."""

from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from worktally.duration import Duration
from worktally.logentry import build_work_interval, parse_clock


@pytest.mark.parametrize(
    ("value", "minutes"),
    [("9:30", 570), ("18:00", 1080), (" 00:05 ", 5), ("23:59", 1439)],
)
def test_parse_clock(value, minutes):
    """Valid clock times become minutes after midnight."""
    assert parse_clock(value) == Duration(minutes)


@pytest.mark.parametrize("value", ["930", "24:00", "12:60", "-1:00", "ab:cd"])
def test_parse_clock_invalid(value):
    """Malformed or out-of-range clock times are rejected."""
    with pytest.raises(ValueError):
        parse_clock(value)


def test_build_day_log():
    """Clock times are placed on the given day in the given zone."""
    tokyo = ZoneInfo("Asia/Tokyo")

    log = build_work_interval(
        date(2025, 9, 1), Duration.parse("09:00"), Duration.parse("18:00"), tokyo
    )

    assert log.start_time == datetime(2025, 9, 1, 9, 0, tzinfo=tokyo)
    assert log.end_time == datetime(2025, 9, 1, 18, 0, tzinfo=tokyo)
    assert log.duration == timedelta(hours=9)
    assert log.is_rest_day is False
    assert log.is_holiday is False
    assert log.project_id is None


def test_build_overnight_log():
    """A clock-out before the clock-in ends on the next day."""
    log = build_work_interval(
        date(2025, 9, 1), Duration.parse("20:00"), Duration.parse("03:00"), UTC
    )

    assert log.end_time == datetime(2025, 9, 2, 3, 0, tzinfo=UTC)
    assert log.duration == timedelta(hours=7)


def test_weekend_defaults_to_rest_day():
    """Logs starting on a Saturday are rest-day logs unless told otherwise."""
    saturday = date(2025, 9, 6)

    default = build_work_interval(saturday, Duration.parse("10:00"), Duration.parse("12:00"), UTC)
    explicit = build_work_interval(
        saturday,
        Duration.parse("10:00"),
        Duration.parse("12:00"),
        UTC,
        is_rest_day=False,
        is_holiday=True,
        project_id="alpha",
    )

    assert default.is_rest_day is True
    assert explicit.is_rest_day is False
    assert explicit.is_holiday is True
    assert explicit.project_id == "alpha"
