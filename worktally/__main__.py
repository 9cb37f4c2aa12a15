"""Main entry point for worktally."""

import logging
import sys
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from worktally.compensation import CompensationEngine
from worktally.config import DEFAULT_CONFIG_PATH, Config
from worktally.database import WorkLogDatabase
from worktally.duration import Duration
from worktally.earnings import MonthlyEarningsCalculator
from worktally.errors import WorktallyError
from worktally.models import MonthlyEarningsSummary, Period, Project
from worktally.policy import OvertimeMultipliers, PayrollConfig, RateTable, WorkMode, to_decimal

USAGE = """Usage: worktally [command]

  (none)                   Run the TUI
  config                   Set timezone and default payroll interactively
  project NAME [POLICY]    Create a project, POLICY is a payroll JSON file
  summary [YYYY-MM]        Print the monthly earnings summary
"""


def _ask(prompt: str, default: str) -> str:
    return input(f"{prompt} [{default}]: ").strip() or default


def configure() -> None:
    """Interactive configuration setup."""
    # Using sys.stdout.write for interactive prompts is allowed
    sys.stdout.write("Worktally Configuration\n")
    sys.stdout.write("=" * 40 + "\n")
    current = Config.load() or Config()
    timezone = _ask("Timezone", current.timezone)

    default_payroll = None
    if _ask("Default payroll for unassigned logs? (y/n)", "y").lower().startswith("y"):
        base = current.default_payroll or PayrollConfig()
        multipliers = base.rate_table.multipliers
        default_payroll = PayrollConfig(
            mode=WorkMode(_ask("Mode (standardHours/comprehensiveHours)", base.mode.value)),
            daily_regular_hours=to_decimal(
                _ask("Daily regular hours", str(base.daily_regular_hours))
            ),
            hours_per_workday=to_decimal(_ask("Hours per workday", str(base.hours_per_workday))),
            rate_table=RateTable(
                base_per_hour=to_decimal(
                    _ask("Base rate per hour", str(base.rate_table.base_per_hour))
                ),
                multipliers=OvertimeMultipliers(
                    workday=to_decimal(_ask("Workday OT multiplier", str(multipliers.workday))),
                    rest_day=to_decimal(
                        _ask("Rest day OT multiplier", str(multipliers.rest_day))
                    ),
                    holiday=to_decimal(_ask("Holiday OT multiplier", str(multipliers.holiday))),
                ),
            ),
        )

    config = Config(
        timezone=timezone, log_level=current.log_level, default_payroll=default_payroll
    )
    # Fail early on an unknown zone
    _ = config.tzinfo
    config.save()
    sys.stdout.write("\n✓ Configuration saved successfully!\n")
    sys.stdout.write(f"Config file: {DEFAULT_CONFIG_PATH}\n")


def create_project(name: str, policy_path: str | None = None) -> Project:
    """Create a project, optionally with a payroll policy read from a JSON file."""
    payroll = PayrollConfig()
    if policy_path:
        payroll = PayrollConfig.from_json(Path(policy_path).read_text())

    project = Project(name=name, payroll=payroll)
    WorkLogDatabase().save_project(project)
    sys.stdout.write(f"✓ Created project {project.name} ({project.id})\n")
    return project


def format_summary(summary: MonthlyEarningsSummary, projects: dict[str, Project]) -> str:
    """Render a monthly summary as plain text."""

    def line(label: str, duration: Duration, amount: Decimal) -> str:
        return f"{label:<14}{duration!s:>8}{amount:>14,.2f}\n"

    hours = summary.hours
    text = f"Earnings {summary.period.start:%Y-%m}\n"
    text += "=" * 36 + "\n"
    text += line("Regular", hours.regular, summary.amount_regular)
    text += line("Workday OT", hours.workday_ot, summary.amount_workday_ot)
    text += line("Rest day OT", hours.rest_day_ot, summary.amount_rest_day_ot)
    text += line("Holiday OT", hours.holiday_ot, summary.amount_holiday_ot)
    text += "-" * 36 + "\n"
    text += line("Total", hours.total(), summary.amount_total)

    for project_id, statement in summary.by_project.items():
        name = "Unassigned" if project_id is None else projects[project_id].name
        text += f"  {name}: {statement.hours.total()} / {statement.amount_total:,.2f}\n"

    if summary.has_unassigned_but_no_default:
        text += "! Unassigned logs were skipped: run 'worktally config' to set a default payroll\n"
    return text


def print_summary(config: Config, month: str | None = None) -> None:
    """Print the earnings summary of a month (current month by default)."""
    tz = config.tzinfo
    if month:
        anchor = datetime.strptime(month, "%Y-%m").date()
    else:
        anchor = datetime.now(tz).date().replace(day=1)

    db = WorkLogDatabase()
    period = Period.month(anchor, tz)
    projects = {project.id: project for project in db.get_projects(include_archived=True)}
    logs = db.get_work_logs_between(period.start, period.end)

    calculator = MonthlyEarningsCalculator(engine=CompensationEngine(tz=tz))
    summary = calculator.summarize(logs, anchor, config.default_payroll, projects=projects)
    sys.stdout.write(format_summary(summary, projects))


def main() -> None:
    """Main entry point."""
    try:
        config = Config.from_env() or Config.load() or Config()
        logging.basicConfig(
            level=config.logging_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    except WorktallyError as e:
        sys.stderr.write(f"Error: {e}\n")
        sys.exit(1)

    args = sys.argv[1:]
    try:
        if args and args[0] == "config":
            configure()
            return
        if args and args[0] == "project":
            if len(args) < 2:
                sys.stderr.write(USAGE)
                sys.exit(2)
            create_project(args[1], args[2] if len(args) > 2 else None)
            return
        if args and args[0] == "summary":
            print_summary(config, args[1] if len(args) > 1 else None)
            return
        if args:
            sys.stderr.write(USAGE)
            sys.exit(2)
    except (WorktallyError, OSError, ValueError) as e:
        sys.stderr.write(f"Error: {e}\n")
        sys.exit(1)

    # Run the TUI
    from worktally.app import WorktallyApp

    app = WorktallyApp(config)
    app.run()


if __name__ == "__main__":
    main()
