"""Monthly earnings rollup across projects."""

import logging
from collections import defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from worktally.compensation import CompensationEngine, round_currency
from worktally.models import (
    BucketHours,
    MonthlyEarningsSummary,
    PayrollStatement,
    Period,
    Project,
    WorkInterval,
)
from worktally.policy import PayrollConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthlyEarningsCalculator:
    """Summarizes a month of work logs, one statement per project."""

    engine: CompensationEngine = field(default_factory=CompensationEngine)

    def summarize(
        self,
        logs: Iterable[WorkInterval],
        month_anchor: date,
        default_payroll: PayrollConfig | None = None,
        projects: Mapping[str, Project] | None = None,
    ) -> MonthlyEarningsSummary:
        """
        Summarize the calendar month containing `month_anchor`.

        Rules:
        - Logs are grouped by project id; None groups the unassigned logs
        - A project's own payroll applies to its logs
        - Unassigned logs use `default_payroll`; without one they are skipped
          and `has_unassigned_but_no_default` is set
        - Each project's amounts are rounded to cents (half to even) before
          they are added to the month totals
        """
        projects = projects or {}
        period = Period.month(month_anchor, self.engine.tz)

        grouped: dict[str | None, list[WorkInterval]] = defaultdict(list)
        for log in logs:
            grouped[log.project_id].append(log)

        by_project: dict[str | None, PayrollStatement] = {}
        hours = BucketHours()
        amount_regular = Decimal(0)
        amount_workday_ot = Decimal(0)
        amount_rest_day_ot = Decimal(0)
        amount_holiday_ot = Decimal(0)
        has_unassigned_but_no_default = False

        for project_id, group in grouped.items():
            if project_id is None:
                config = default_payroll
                if config is None:
                    logger.warning(
                        "Skipping %d unassigned log(s): no default payroll", len(group)
                    )
                    has_unassigned_but_no_default = True
                    continue
            else:
                project = projects.get(project_id)
                if project is None:
                    logger.warning(
                        "Skipping %d log(s) of unknown project %s", len(group), project_id
                    )
                    continue
                config = project.payroll

            statement = self.engine.compute_statement(group, period, config)
            if not statement.hours.total():
                continue
            by_project[project_id] = statement

            hours = hours + statement.hours
            amount_regular += round_currency(statement.amount_regular)
            amount_workday_ot += round_currency(statement.amount_workday_ot)
            amount_rest_day_ot += round_currency(statement.amount_rest_day_ot)
            amount_holiday_ot += round_currency(statement.amount_holiday_ot)

        logger.debug(
            "Summarized %s..%s: %d project group(s), %s total",
            period.start.date(),
            period.end.date(),
            len(by_project),
            hours.total(),
        )

        return MonthlyEarningsSummary(
            period=period,
            hours=hours,
            amount_regular=amount_regular,
            amount_workday_ot=amount_workday_ot,
            amount_rest_day_ot=amount_rest_day_ot,
            amount_holiday_ot=amount_holiday_ot,
            by_project=by_project,
            has_unassigned_but_no_default=has_unassigned_but_no_default,
        )
