"""Data models for work logs, projects and payroll results."""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime, time, timedelta, tzinfo
from decimal import Decimal
from enum import Enum
from uuid import uuid4

from worktally.duration import Duration
from worktally.policy import PayrollConfig


class DayType(str, Enum):
    """Resolved type of a calendar day."""

    HOLIDAY = "holiday"
    REST_DAY = "rest_day"
    WORKDAY = "workday"


class PayBucket(str, Enum):
    """Mutually exclusive pay buckets."""

    REGULAR = "regular"
    WORKDAY_OT = "overtime_workday"
    REST_DAY_OT = "overtime_rest_day"
    HOLIDAY_OT = "overtime_holiday"


def _new_id() -> str:
    return uuid4().hex


@dataclass(frozen=True)
class WorkInterval:
    """A logged span of work, read-only to the compensation core."""

    start_time: datetime
    end_time: datetime
    is_rest_day: bool = False
    is_holiday: bool = False
    project_id: str | None = None
    id: str = field(default_factory=_new_id)

    @property
    def duration(self) -> timedelta:
        """Elapsed time, never negative."""
        return max(timedelta(0), self.end_time - self.start_time)

    def is_overnight(self, tz: tzinfo = UTC) -> bool:
        """Whether the interval ends on a different calendar day than it starts."""
        return _local(self.start_time, tz).date() != _local(self.end_time, tz).date()

    def overlaps(self, other: "WorkInterval") -> bool:
        """Whether the two half-open intervals share any time."""
        return self.start_time < other.end_time and self.end_time > other.start_time

    def normalized(self) -> "WorkInterval":
        """Copy with start and end swapped when they are reversed."""
        if self.end_time < self.start_time:
            return replace(self, start_time=self.end_time, end_time=self.start_time)
        return self


def _local(moment: datetime, tz: tzinfo) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz)
    return moment.astimezone(tz)


@dataclass
class Project:
    """A project groups work logs and carries its own payroll policy."""

    name: str
    payroll: PayrollConfig = field(default_factory=PayrollConfig)
    note: str = ""
    is_archived: bool = False
    sort_order: int = 0
    id: str = field(default_factory=_new_id)


@dataclass(frozen=True)
class Period:
    """Half-open reporting interval [start, end)."""

    start: datetime
    end: datetime

    @classmethod
    def month(cls, anchor: date, tz: tzinfo = UTC) -> "Period":
        """The calendar month containing the anchor, in the given zone."""
        if isinstance(anchor, datetime):
            anchor = _local(anchor, tz).date()
        start_date = date(anchor.year, anchor.month, 1)
        # Handle December edge case
        if anchor.month == 12:
            end_date = date(anchor.year + 1, 1, 1)
        else:
            end_date = date(anchor.year, anchor.month + 1, 1)
        return cls(
            start=datetime.combine(start_date, time.min, tzinfo=tz),
            end=datetime.combine(end_date, time.min, tzinfo=tz),
        )

    def contains(self, moment: datetime) -> bool:
        """Whether the moment falls inside the half-open period."""
        return self.start <= moment < self.end


@dataclass(frozen=True)
class DaySlice:
    """The part of one work interval confined to a single calendar day."""

    start: datetime
    end: datetime
    minutes: Duration
    day: date
    is_rest_day: bool = False
    is_holiday: bool = False

    @property
    def day_key(self) -> str:
        """Calendar day key, yyyy-MM-dd."""
        return self.day.isoformat()


@dataclass
class BucketHours:
    """Worked time accumulated per pay bucket."""

    regular: Duration = field(default_factory=Duration)
    workday_ot: Duration = field(default_factory=Duration)
    rest_day_ot: Duration = field(default_factory=Duration)
    holiday_ot: Duration = field(default_factory=Duration)

    def add(self, bucket: PayBucket, duration: Duration) -> None:
        """Add time to a bucket; negative contributions count as zero."""
        if not duration:
            return
        if bucket == PayBucket.REGULAR:
            self.regular += duration
        elif bucket == PayBucket.WORKDAY_OT:
            self.workday_ot += duration
        elif bucket == PayBucket.REST_DAY_OT:
            self.rest_day_ot += duration
        else:
            self.holiday_ot += duration

    def get(self, bucket: PayBucket) -> Duration:
        """Time held in a bucket."""
        return {
            PayBucket.REGULAR: self.regular,
            PayBucket.WORKDAY_OT: self.workday_ot,
            PayBucket.REST_DAY_OT: self.rest_day_ot,
            PayBucket.HOLIDAY_OT: self.holiday_ot,
        }[bucket]

    def hours(self, bucket: PayBucket) -> Decimal:
        """Hours held in a bucket."""
        return self.get(bucket).hours

    def total(self) -> Duration:
        """Time across all four buckets."""
        return self.regular + self.workday_ot + self.rest_day_ot + self.holiday_ot

    def total_hours(self) -> Decimal:
        """Hours across all four buckets."""
        return self.total().hours

    def __add__(self, other: "BucketHours") -> "BucketHours":
        return BucketHours(
            regular=self.regular + other.regular,
            workday_ot=self.workday_ot + other.workday_ot,
            rest_day_ot=self.rest_day_ot + other.rest_day_ot,
            holiday_ot=self.holiday_ot + other.holiday_ot,
        )


@dataclass(frozen=True)
class PayrollStatement:
    """Bucketed hours and amounts for one policy, one log set and one period."""

    period: Period
    hours: BucketHours
    amount_regular: Decimal
    amount_workday_ot: Decimal
    amount_rest_day_ot: Decimal
    amount_holiday_ot: Decimal
    amount_total: Decimal


@dataclass(frozen=True)
class MonthlyEarningsSummary:
    """Month rollup across projects."""

    period: Period
    hours: BucketHours
    amount_regular: Decimal
    amount_workday_ot: Decimal
    amount_rest_day_ot: Decimal
    amount_holiday_ot: Decimal
    # Key is the project id, None for unassigned logs
    by_project: dict[str | None, PayrollStatement]
    # Unassigned logs were skipped because no default payroll was supplied
    has_unassigned_but_no_default: bool

    @property
    def amount_total(self) -> Decimal:
        """Sum of the four bucket amounts."""
        return (
            self.amount_regular
            + self.amount_workday_ot
            + self.amount_rest_day_ot
            + self.amount_holiday_ot
        )
