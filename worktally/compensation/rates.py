"""Convert bucketed hours into currency amounts."""

from decimal import ROUND_HALF_EVEN, Decimal

from worktally.duration import MINUTES_PER_HOUR
from worktally.models import BucketHours, PayBucket
from worktally.policy import RateTable

CENT = Decimal("0.01")


def bucket_multiplier(bucket: PayBucket, rate_table: RateTable) -> Decimal:
    """Multiplier on the base rate for a bucket (1 for regular time)."""
    multipliers = rate_table.multipliers
    if bucket == PayBucket.WORKDAY_OT:
        return multipliers.workday
    if bucket == PayBucket.REST_DAY_OT:
        return multipliers.rest_day
    if bucket == PayBucket.HOLIDAY_OT:
        return multipliers.holiday
    return Decimal(1)


def bucket_amount(hours: BucketHours, bucket: PayBucket, rate_table: RateTable) -> Decimal:
    """
    Exact amount for one bucket: hours x base rate x multiplier.

    Computed from whole minutes with the division last, so any amount that
    has a finite decimal form is exact. No rounding happens here.
    """
    minutes = Decimal(hours.get(bucket).minutes)
    return (
        minutes * rate_table.base_per_hour * bucket_multiplier(bucket, rate_table)
    ) / MINUTES_PER_HOUR


def convert(hours: BucketHours, rate_table: RateTable) -> dict[PayBucket, Decimal]:
    """Amounts for all four buckets."""
    return {bucket: bucket_amount(hours, bucket, rate_table) for bucket in PayBucket}


def round_currency(amount: Decimal) -> Decimal:
    """Round to cents, half to even."""
    return amount.quantize(CENT, rounding=ROUND_HALF_EVEN)
