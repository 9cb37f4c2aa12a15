"""Split work intervals into single-day slices."""

from collections.abc import Iterable
from datetime import UTC, datetime, time, timedelta, tzinfo

from worktally.duration import Duration
from worktally.models import DaySlice, Period, WorkInterval


def to_utc(moment: datetime, tz: tzinfo) -> datetime:
    """Place a moment on the UTC timeline; naive values are read as wall time in tz."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=tz)
    return moment.astimezone(UTC)


def next_day_start(moment: datetime, tz: tzinfo) -> datetime:
    """Start of the calendar day after the one containing the moment, in UTC."""
    local_date = moment.astimezone(tz).date()
    return datetime.combine(local_date + timedelta(days=1), time.min, tzinfo=tz).astimezone(UTC)


def slice_intervals(
    intervals: Iterable[WorkInterval], period: Period, tz: tzinfo = UTC
) -> list[DaySlice]:
    """
    Split intervals into day slices clipped to the period.

    Each interval is clamped to [period.start, period.end); an interval that
    clamps to nothing contributes no slices. The clamped span is then cut at
    every local midnight. Slice lengths are whole minutes, truncated, and
    each slice carries the rest-day/holiday flags of its interval.

    Slice boundaries are UTC so ordering stays correct across DST changes;
    the calendar day of each slice is taken in tz.
    """
    period_start = to_utc(period.start, tz)
    period_end = to_utc(period.end, tz)
    slices = []

    for interval in intervals:
        clamped_start = max(to_utc(interval.start_time, tz), period_start)
        clamped_end = min(to_utc(interval.end_time, tz), period_end)
        if clamped_end <= clamped_start:
            continue

        cursor = clamped_start
        while cursor < clamped_end:
            slice_end = min(next_day_start(cursor, tz), clamped_end)
            slices.append(
                DaySlice(
                    start=cursor,
                    end=slice_end,
                    minutes=Duration(max(0, Duration.between(cursor, slice_end).minutes)),
                    day=cursor.astimezone(tz).date(),
                    is_rest_day=interval.is_rest_day,
                    is_holiday=interval.is_holiday,
                )
            )
            cursor = slice_end

    return slices
