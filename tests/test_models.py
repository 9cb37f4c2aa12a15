"""Tests for work log and period models."""

from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

from worktally.models import Period, WorkInterval


def test_duration_never_negative():
    """A reversed log has zero duration until normalized."""
    log = WorkInterval(datetime(2025, 9, 1, 18, 0), datetime(2025, 9, 1, 9, 0))

    assert log.duration == timedelta(0)
    assert log.normalized().duration == timedelta(hours=9)
    assert log.normalized().start_time == datetime(2025, 9, 1, 9, 0)
    assert log.normalized().id == log.id


def test_normalized_keeps_ordered_log():
    """An ordered log is returned unchanged."""
    log = WorkInterval(datetime(2025, 9, 1, 9, 0), datetime(2025, 9, 1, 18, 0))

    assert log.normalized() is log


def test_is_overnight_depends_on_zone():
    """Crossing midnight is judged in the reporting calendar."""
    log = WorkInterval(
        datetime(2025, 9, 1, 13, 0, tzinfo=UTC), datetime(2025, 9, 1, 16, 0, tzinfo=UTC)
    )

    assert not log.is_overnight(UTC)
    # 22:00-01:00 in Tokyo
    assert log.is_overnight(ZoneInfo("Asia/Tokyo"))


def test_overlaps_is_half_open():
    """Touching logs do not overlap; intersecting ones do."""
    first = WorkInterval(datetime(2025, 9, 1, 9, 0), datetime(2025, 9, 1, 12, 0))
    touching = WorkInterval(datetime(2025, 9, 1, 12, 0), datetime(2025, 9, 1, 13, 0))
    crossing = WorkInterval(datetime(2025, 9, 1, 11, 0), datetime(2025, 9, 1, 13, 0))

    assert not first.overlaps(touching)
    assert first.overlaps(crossing)
    assert crossing.overlaps(first)


def test_month_period():
    """A month runs from its first midnight to the next month's."""
    period = Period.month(date(2025, 9, 17))

    assert period.start == datetime(2025, 9, 1, tzinfo=UTC)
    assert period.end == datetime(2025, 10, 1, tzinfo=UTC)
    assert period.contains(datetime(2025, 9, 30, 23, 59, tzinfo=UTC))
    assert not period.contains(period.end)


def test_december_period():
    """December ends at the next new year."""
    tokyo = ZoneInfo("Asia/Tokyo")
    period = Period.month(date(2025, 12, 31), tokyo)

    assert period.start == datetime(2025, 12, 1, tzinfo=tokyo)
    assert period.end == datetime(2026, 1, 1, tzinfo=tokyo)
