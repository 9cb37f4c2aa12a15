"""Build work logs from clock-in/clock-out entries."""

from datetime import date, datetime, time, timedelta, tzinfo

from worktally.duration import Duration
from worktally.models import WorkInterval
from worktally.workcalendar import DefaultWorkCalendar

MINUTES_PER_DAY = 24 * 60


def parse_clock(value: str) -> Duration:
    """Parse a clock time like '9:30' or '18:00' into minutes after midnight."""
    value = value.strip()
    if ":" not in value:
        msg = f"Invalid time format: {value}"
        raise ValueError(msg)
    hours, minutes = value.split(":", 1)
    if not 0 <= int(hours) < 24:
        msg = f"Hours must be 0-23: {value}"
        raise ValueError(msg)
    if not 0 <= int(minutes) < 60:
        msg = f"Minutes must be 0-59: {value}"
        raise ValueError(msg)
    return Duration.parse(value)


def build_work_interval(
    target_date: date,
    clock_in: Duration,
    clock_out: Duration,
    tz: tzinfo,
    *,
    project_id: str | None = None,
    is_rest_day: bool | None = None,
    is_holiday: bool = False,
    work_calendar: DefaultWorkCalendar | None = None,
) -> WorkInterval:
    """
    Create a work log from clock times on a given day.

    A clock-out at or before the clock-in is read as the next day, so
    20:00 -> 03:00 becomes an overnight log. When `is_rest_day` is not
    given it defaults to the calendar's weekend rule for the start day.
    """
    # Handle after midnight
    if clock_out <= clock_in:
        clock_out = clock_out + Duration(MINUTES_PER_DAY)

    if is_rest_day is None:
        work_calendar = work_calendar or DefaultWorkCalendar()
        is_rest_day = work_calendar.is_weekend(target_date)

    day_start = datetime.combine(target_date, time.min, tzinfo=tz)
    return WorkInterval(
        start_time=day_start + timedelta(minutes=clock_in.minutes),
        end_time=day_start + timedelta(minutes=clock_out.minutes),
        is_rest_day=is_rest_day,
        is_holiday=is_holiday,
        project_id=project_id,
    )
