"""Tests for the monthly earnings rollup."""

import logging
from datetime import date, datetime
from decimal import Decimal

import pytest

from worktally.duration import Duration
from worktally.earnings import MonthlyEarningsCalculator
from worktally.models import BucketHours, Project, WorkInterval
from worktally.policy import PayrollConfig, RateTable, WorkMode


@pytest.fixture
def projects():
    """Alpha on standard hours at 35/h, Beta on comprehensive hours at 30/h."""
    alpha = Project(
        id="alpha",
        name="Alpha",
        payroll=PayrollConfig(
            mode=WorkMode.STANDARD_HOURS, rate_table=RateTable(base_per_hour=Decimal(35))
        ),
    )
    beta = Project(
        id="beta",
        name="Beta",
        payroll=PayrollConfig(
            mode=WorkMode.COMPREHENSIVE_HOURS,
            hours_per_workday=Decimal("7.5"),
            rate_table=RateTable(base_per_hour=Decimal(30)),
        ),
    )
    return {alpha.id: alpha, beta.id: beta}


def test_empty_month():
    """No logs: all-zero totals and no warning."""
    summary = MonthlyEarningsCalculator().summarize([], date(2025, 9, 15))

    assert summary.hours == BucketHours()
    assert summary.amount_total == Decimal(0)
    assert summary.by_project == {}
    assert summary.has_unassigned_but_no_default is False
    assert summary.period.start.date() == date(2025, 9, 1)
    assert summary.period.end.date() == date(2025, 10, 1)


def test_unassigned_without_default_is_flagged(caplog):
    """Unassigned logs without a default payroll are skipped and flagged."""
    logs = [WorkInterval(datetime(2025, 9, 1, 9, 0), datetime(2025, 9, 1, 18, 0))]

    with caplog.at_level(logging.WARNING, logger="worktally.earnings"):
        summary = MonthlyEarningsCalculator().summarize(logs, date(2025, 9, 1), None)

    assert summary.has_unassigned_but_no_default is True
    assert summary.by_project == {}
    assert summary.hours.total() == Duration(0)
    assert summary.amount_total == Decimal(0)
    assert "no default payroll" in caplog.text


def test_unassigned_with_default_payroll():
    """The default payroll prices unassigned logs under the None key."""
    logs = [WorkInterval(datetime(2025, 9, 1, 9, 0), datetime(2025, 9, 1, 18, 0))]

    summary = MonthlyEarningsCalculator().summarize(logs, date(2025, 9, 1), PayrollConfig())

    assert list(summary.by_project) == [None]
    assert summary.amount_regular == Decimal("240.00")
    assert summary.amount_workday_ot == Decimal("45.00")
    assert summary.amount_total == Decimal("285.00")
    assert summary.has_unassigned_but_no_default is False


def test_projects_use_their_own_policy(projects):
    """Each project group is classified with its own mode and rate."""
    logs = [
        # Alpha, Monday 9h -> 8h regular + 1h OT at 35/h
        WorkInterval(datetime(2025, 9, 1, 9, 0), datetime(2025, 9, 1, 18, 0), project_id="alpha"),
        # Beta, Tuesday 9h -> pool 7.5h, 1.5h OT at 30/h
        WorkInterval(datetime(2025, 9, 2, 9, 0), datetime(2025, 9, 2, 18, 0), project_id="beta"),
    ]

    summary = MonthlyEarningsCalculator().summarize(
        logs, date(2025, 9, 1), None, projects=projects
    )

    alpha = summary.by_project["alpha"]
    beta = summary.by_project["beta"]
    assert alpha.hours.regular == Duration(8 * 60)
    assert alpha.amount_total == Decimal("332.5")  # 280 + 52.5
    assert beta.hours.regular == Duration(450)
    assert beta.hours.workday_ot == Duration(90)
    assert beta.amount_total == Decimal("292.5")  # 225 + 67.5

    assert summary.hours.regular == Duration(8 * 60 + 450)
    assert summary.hours.workday_ot == Duration(60 + 90)
    assert summary.amount_regular == Decimal("505.00")
    assert summary.amount_workday_ot == Decimal("120.00")
    assert summary.amount_total == Decimal("625.00")
    assert summary.has_unassigned_but_no_default is False


def test_mixed_assigned_and_unassigned_without_default(projects):
    """Assigned logs are still summarized when unassigned ones are skipped."""
    logs = [
        WorkInterval(datetime(2025, 9, 1, 9, 0), datetime(2025, 9, 1, 17, 0), project_id="alpha"),
        WorkInterval(datetime(2025, 9, 2, 9, 0), datetime(2025, 9, 2, 17, 0)),
    ]

    summary = MonthlyEarningsCalculator().summarize(
        logs, date(2025, 9, 1), None, projects=projects
    )

    assert set(summary.by_project) == {"alpha"}
    assert summary.has_unassigned_but_no_default is True
    assert summary.amount_total == Decimal("280.00")


def test_project_amounts_rounded_before_summing():
    """Each project's amounts are rounded half-to-even before they are added up."""
    # 1 minute at 0.15/h = 0.0025 -> 0.00 per project (half to even), so 0.00 in total
    config = PayrollConfig(rate_table=RateTable(base_per_hour=Decimal("0.15")))
    project_map = {
        name: Project(id=name, name=name, payroll=config) for name in ("a", "b", "c", "d")
    }
    logs = [
        WorkInterval(datetime(2025, 9, 1, 9, 0), datetime(2025, 9, 1, 9, 1), project_id=name)
        for name in project_map
    ]

    summary = MonthlyEarningsCalculator().summarize(
        logs, date(2025, 9, 1), None, projects=project_map
    )

    assert summary.by_project["a"].amount_regular == Decimal("0.0025")
    assert summary.amount_regular == Decimal("0.00")


def test_half_cent_project_rounds_to_even():
    """An exact half cent per project rounds to the even neighbour."""
    # 1 minute at 0.90/h = 0.015 -> 0.02
    config = PayrollConfig(rate_table=RateTable(base_per_hour=Decimal("0.90")))
    project = Project(id="p", name="P", payroll=config)
    logs = [WorkInterval(datetime(2025, 9, 1, 9, 0), datetime(2025, 9, 1, 9, 1), project_id="p")]

    summary = MonthlyEarningsCalculator().summarize(
        logs, date(2025, 9, 1), None, projects={"p": project}
    )

    assert summary.amount_regular == Decimal("0.02")


def test_logs_outside_month_leave_no_project_entry(projects):
    """A group with no time inside the month is absent from by_project."""
    logs = [
        WorkInterval(datetime(2025, 8, 29, 9, 0), datetime(2025, 8, 29, 17, 0), project_id="beta"),
        WorkInterval(datetime(2025, 9, 3, 9, 0), datetime(2025, 9, 3, 12, 0), project_id="alpha"),
    ]

    summary = MonthlyEarningsCalculator().summarize(
        logs, date(2025, 9, 1), None, projects=projects
    )

    assert set(summary.by_project) == {"alpha"}


def test_unknown_project_is_skipped(caplog):
    """Logs pointing at a project without a known policy are left out."""
    logs = [
        WorkInterval(datetime(2025, 9, 1, 9, 0), datetime(2025, 9, 1, 17, 0), project_id="gone")
    ]

    with caplog.at_level(logging.WARNING, logger="worktally.earnings"):
        summary = MonthlyEarningsCalculator().summarize(logs, date(2025, 9, 1), PayrollConfig())

    assert summary.by_project == {}
    assert summary.has_unassigned_but_no_default is False
    assert "unknown project gone" in caplog.text


def test_month_totals_conserve_time(projects):
    """Summed bucket hours equal the logged time inside the month."""
    logs = [
        WorkInterval(datetime(2025, 8, 31, 20, 0), datetime(2025, 9, 1, 6, 0), project_id="alpha"),
        WorkInterval(datetime(2025, 9, 6, 8, 0), datetime(2025, 9, 6, 19, 0), is_rest_day=True),
        WorkInterval(datetime(2025, 9, 30, 21, 0), datetime(2025, 10, 1, 1, 0), project_id="beta"),
    ]

    summary = MonthlyEarningsCalculator().summarize(
        logs, date(2025, 9, 1), PayrollConfig(), projects=projects
    )

    # 6h + 11h + 3h
    assert summary.hours.total() == Duration(20 * 60)
    assert summary.hours.total() == sum(
        (statement.hours for statement in summary.by_project.values()), BucketHours()
    ).total()
