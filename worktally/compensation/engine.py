"""Compensation engine: slicing, classification and conversion in one call."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, tzinfo

from worktally.compensation.classifier import classify
from worktally.compensation.rates import convert
from worktally.compensation.slicer import slice_intervals
from worktally.models import PayBucket, PayrollStatement, Period, WorkInterval
from worktally.policy import PayrollConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompensationEngine:
    """
    Stateless payroll calculator.

    `tz` is the reporting calendar: it decides where days begin for slicing
    and grouping. Instances hold no per-call state and can be shared.
    """

    tz: tzinfo = UTC

    def compute_statement(
        self, logs: Iterable[WorkInterval], period: Period, config: PayrollConfig
    ) -> PayrollStatement:
        """Classify the logs falling inside the period and price them with the policy."""
        slices = slice_intervals(logs, period, self.tz)
        hours = classify(slices, config)
        amounts = convert(hours, config.rate_table)
        logger.debug(
            "Classified %d slice(s) in %s mode: %s total",
            len(slices),
            config.mode.value,
            hours.total(),
        )

        return PayrollStatement(
            period=period,
            hours=hours,
            amount_regular=amounts[PayBucket.REGULAR],
            amount_workday_ot=amounts[PayBucket.WORKDAY_OT],
            amount_rest_day_ot=amounts[PayBucket.REST_DAY_OT],
            amount_holiday_ot=amounts[PayBucket.HOLIDAY_OT],
            amount_total=sum(amounts.values()),
        )
