"""Duration handling utilities."""

from datetime import UTC, datetime
from decimal import Decimal

MINUTES_PER_HOUR = 60


class Duration:
    """Represents a duration in whole minutes with convenient operators."""

    @classmethod
    def parse(cls, duration: str) -> "Duration":
        """Parse a duration string like '09:30' into a Duration object."""
        if duration == "":
            return cls(0)
        hours, minutes = duration.split(":")
        total_minutes = MINUTES_PER_HOUR * int(hours) + int(minutes)
        return cls(total_minutes)

    @classmethod
    def between(cls, start: datetime, end: datetime) -> "Duration":
        """
        Elapsed whole minutes from start to end, truncated.

        Aware datetimes are compared on the UTC timeline so a DST switch
        inside the span is accounted for.
        """
        if start.tzinfo is not None and end.tzinfo is not None:
            start = start.astimezone(UTC)
            end = end.astimezone(UTC)
        seconds = (end - start).total_seconds()
        return cls(int(seconds // 60))

    @classmethod
    def from_hours(cls, hours: Decimal | int) -> "Duration":
        """Convert an hour quantity to whole minutes, truncating any remainder."""
        return cls(int(Decimal(hours) * MINUTES_PER_HOUR))

    def __init__(self, minutes: int = 0) -> None:
        self.minutes: int = minutes

    @property
    def hours(self) -> Decimal:
        """Exact hour value of this duration."""
        return Decimal(self.minutes) / MINUTES_PER_HOUR

    def __repr__(self) -> str:
        sign = "-" if self.minutes < 0 else ""
        abs_minutes = abs(self.minutes)
        return f"{sign}{abs_minutes // 60:02}:{abs_minutes % 60:02}"

    __str__ = __repr__

    def __hash__(self) -> int:
        return hash(self.minutes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minutes == other.minutes

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minutes != other.minutes

    def __add__(self, other: "Duration") -> "Duration":
        return Duration(self.minutes + other.minutes)

    def __sub__(self, other: "Duration") -> "Duration":
        return Duration(self.minutes - other.minutes)

    def __neg__(self) -> "Duration":
        return Duration(-self.minutes)

    def __mul__(self, other: int) -> "Duration":
        return Duration(other * self.minutes)

    __rmul__ = __mul__

    def __lt__(self, other: "Duration") -> bool:
        return self.minutes < other.minutes

    def __gt__(self, other: "Duration") -> bool:
        return self.minutes > other.minutes

    def __le__(self, other: "Duration") -> bool:
        return self.minutes <= other.minutes

    def __ge__(self, other: "Duration") -> bool:
        return self.minutes >= other.minutes

    def __abs__(self) -> "Duration":
        return Duration(abs(self.minutes))

    def __bool__(self) -> bool:
        return self.minutes > 0
