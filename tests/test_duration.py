"""Tests for Duration class."""

from datetime import datetime
from decimal import Decimal
from zoneinfo import ZoneInfo

from worktally.duration import Duration


def test_parse():
    """Test parsing duration strings."""
    assert Duration.parse("09:30").minutes == 9 * 60 + 30
    assert Duration.parse("00:00").minutes == 0
    assert Duration.parse("23:59").minutes == 23 * 60 + 59
    assert Duration.parse("").minutes == 0


def test_str():
    """Test string representation."""
    assert str(Duration(90)) == "01:30"
    assert str(Duration(0)) == "00:00"
    assert str(Duration(-30)) == "-00:30"
    assert str(Duration(8 * 60)) == "08:00"


def test_between_truncates_to_whole_minutes():
    """Seconds past the last full minute are dropped, not rounded."""
    start = datetime(2025, 9, 1, 9, 0, 0)
    assert Duration.between(start, datetime(2025, 9, 1, 9, 59, 59)).minutes == 59
    assert Duration.between(start, datetime(2025, 9, 1, 10, 0, 0)).minutes == 60
    assert Duration.between(start, datetime(2025, 9, 1, 9, 0, 30)).minutes == 0


def test_between_across_dst_change():
    """Aware datetimes measure real elapsed time, not wall-clock difference."""
    tz = ZoneInfo("Europe/Paris")
    # Clocks jump from 02:00 to 03:00 on 2025-03-30
    start = datetime(2025, 3, 30, 0, 0, tzinfo=tz)
    end = datetime(2025, 3, 30, 4, 0, tzinfo=tz)
    assert Duration.between(start, end).minutes == 3 * 60


def test_from_hours():
    """Hours convert to minutes, truncating sub-minute remainders."""
    assert Duration.from_hours(Decimal(8)).minutes == 480
    assert Duration.from_hours(Decimal("7.5")).minutes == 450
    assert Duration.from_hours(Decimal("7.99")).minutes == 479
    assert Duration.from_hours(0).minutes == 0


def test_hours():
    """Test the exact hour view."""
    assert Duration(480).hours == Decimal(8)
    assert Duration(90).hours == Decimal("1.5")


def test_addition():
    """Test duration addition."""
    d1 = Duration(60)  # 1 hour
    d2 = Duration(30)  # 30 minutes
    result = d1 + d2
    assert result.minutes == 90


def test_subtraction():
    """Test duration subtraction."""
    d1 = Duration(90)  # 1.5 hours
    d2 = Duration(30)  # 30 minutes
    result = d1 - d2
    assert result.minutes == 60


def test_multiplication():
    """Test duration multiplication."""
    d = Duration(60)  # 1 hour
    assert (d * 3).minutes == 180
    assert (3 * d).minutes == 180


def test_comparison():
    """Test duration comparisons."""
    d1 = Duration(60)
    d2 = Duration(90)

    assert d1 < d2
    assert d2 > d1
    assert d1 <= d2
    assert d2 >= d1
    assert d1 == Duration(60)
    assert d1 != d2
    assert min(d2, d1) == d1


def test_hashable():
    """Equal durations hash alike."""
    assert len({Duration(60), Duration(60), Duration(30)}) == 2


def test_abs():
    """Test absolute value."""
    assert abs(Duration(-60)).minutes == 60
    assert abs(Duration(60)).minutes == 60


def test_bool():
    """Test boolean conversion."""
    assert bool(Duration(1)) is True
    assert bool(Duration(0)) is False
    assert bool(Duration(-1)) is False
