"""Day-type resolution and pay-bucket classification."""

from collections import defaultdict
from collections.abc import Iterable
from decimal import Decimal

from worktally.duration import Duration
from worktally.models import BucketHours, DaySlice, DayType, PayBucket
from worktally.policy import PayrollConfig, WorkMode


def resolve_day_type(day_slices: Iterable[DaySlice]) -> DayType:
    """
    Resolve the type of a calendar day from the flags of its slices.

    Priority: any holiday slice makes the day a holiday (even when other
    slices say rest day), then any rest-day slice, otherwise a workday.
    """
    is_rest_day = False
    for day_slice in day_slices:
        if day_slice.is_holiday:
            return DayType.HOLIDAY
        is_rest_day = is_rest_day or day_slice.is_rest_day
    return DayType.REST_DAY if is_rest_day else DayType.WORKDAY


def _regular_budget(hours: Decimal) -> Duration:
    return Duration(max(0, Duration.from_hours(hours).minutes))


def _consume(buckets: BucketHours, worked: Duration, remaining: Duration) -> Duration:
    """Split worked time into regular (up to remaining) and workday OT; return what remains."""
    regular = min(remaining, worked)
    buckets.add(PayBucket.REGULAR, regular)
    buckets.add(PayBucket.WORKDAY_OT, worked - regular)
    return remaining - regular


def classify_standard_hours(
    slices: Iterable[DaySlice], daily_regular_hours: Decimal
) -> BucketHours:
    """
    Standard hours: each workday allows `daily_regular_hours` of regular time.

    Slices of a day are consumed in time order; anything past the threshold
    is workday overtime. Holiday and rest days put every slice in their own
    overtime bucket.
    """
    buckets = BucketHours()
    by_day: dict[str, list[DaySlice]] = defaultdict(list)
    for day_slice in slices:
        by_day[day_slice.day_key].append(day_slice)

    for day_slices in by_day.values():
        day_type = resolve_day_type(day_slices)
        remaining = _regular_budget(daily_regular_hours)

        for day_slice in sorted(day_slices, key=lambda s: s.start):
            if day_type == DayType.HOLIDAY:
                buckets.add(PayBucket.HOLIDAY_OT, day_slice.minutes)
            elif day_type == DayType.REST_DAY:
                buckets.add(PayBucket.REST_DAY_OT, day_slice.minutes)
            else:
                remaining = _consume(buckets, day_slice.minutes, remaining)

    return buckets


def count_workdays(slices: Iterable[DaySlice]) -> int:
    """Distinct days holding at least one slice that is neither holiday nor rest day."""
    return len({s.day for s in slices if not s.is_holiday and not s.is_rest_day})


def classify_comprehensive_hours(
    slices: Iterable[DaySlice], hours_per_workday: Decimal
) -> BucketHours:
    """
    Comprehensive hours: one regular pool for the whole period.

    The pool is `hours_per_workday` for every day that has a workday slice,
    and is consumed by all slices in time order. Only the holiday flag is
    honoured per slice; rest-day slices draw from the pool like any other.
    """
    slices = list(slices)
    buckets = BucketHours()
    remaining = _regular_budget(count_workdays(slices) * hours_per_workday)

    for day_slice in sorted(slices, key=lambda s: s.start):
        if day_slice.is_holiday:
            buckets.add(PayBucket.HOLIDAY_OT, day_slice.minutes)
            continue
        remaining = _consume(buckets, day_slice.minutes, remaining)

    return buckets


def classify(slices: Iterable[DaySlice], config: PayrollConfig) -> BucketHours:
    """Classify slices with the algorithm selected by the policy mode."""
    if config.mode == WorkMode.COMPREHENSIVE_HOURS:
        return classify_comprehensive_hours(slices, config.hours_per_workday)
    return classify_standard_hours(slices, config.daily_regular_hours)
