"""Weekend-only work calendar."""

from calendar import monthrange
from datetime import date

# 5 = Saturday, 6 = Sunday
WEEKEND_DAYS = (5, 6)


class DefaultWorkCalendar:
    """
    Weekends are rest days; there are no special holidays.

    Holiday status is an explicit flag on each work log, so this calendar
    only supplies defaults for new entries and display counts.
    """

    def is_holiday(self, target_date: date) -> bool:
        """Always False; holidays come from per-log flags."""
        return False

    def is_weekend(self, target_date: date) -> bool:
        """Check if a date falls on Saturday or Sunday."""
        return target_date.weekday() in WEEKEND_DAYS

    def is_workday(self, target_date: date) -> bool:
        """A workday is neither a weekend nor a holiday."""
        return not self.is_weekend(target_date) and not self.is_holiday(target_date)

    def workdays_in_month(self, year: int, month: int) -> int:
        """Count the calendar workdays in a month."""
        _, days_in_month = monthrange(year, month)
        return sum(
            1 for day in range(1, days_in_month + 1) if self.is_workday(date(year, month, day))
        )
