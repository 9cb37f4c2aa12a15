"""Tests for the default work calendar."""

from datetime import date

from worktally.workcalendar import DefaultWorkCalendar


def test_weekend_detection():
    """Saturday and Sunday are weekends, Monday is not."""
    calendar = DefaultWorkCalendar()

    assert calendar.is_weekend(date(2025, 9, 6))
    assert calendar.is_weekend(date(2025, 9, 7))
    assert not calendar.is_weekend(date(2025, 9, 8))


def test_no_calendar_holidays():
    """Holidays only come from per-log flags."""
    assert not DefaultWorkCalendar().is_holiday(date(2025, 12, 25))


def test_workdays_in_month():
    """September 2025 starts on a Monday and has 22 weekdays."""
    calendar = DefaultWorkCalendar()

    assert calendar.workdays_in_month(2025, 9) == 22
    assert calendar.workdays_in_month(2025, 2) == 20
