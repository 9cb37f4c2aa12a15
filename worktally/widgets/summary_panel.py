"""Summary panel widget showing the month's pay buckets."""

from decimal import Decimal

from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Static

from worktally.duration import Duration
from worktally.models import MonthlyEarningsSummary, Project


def fmt_duration(duration: Duration) -> str:
    """Format a duration as e.g. 8h 05m."""
    return f"{duration.minutes // 60}h {duration.minutes % 60:02d}m"


def fmt_amount(amount: Decimal) -> str:
    """Format a currency amount with thousands separators."""
    return f"{amount:,.2f}"


class SummaryPanel(Container):
    """Panel displaying hours and amounts per pay bucket."""

    def compose(self) -> ComposeResult:
        """Compose the summary panel."""
        with Horizontal(id="summary-row"):
            with Vertical(classes="stat-box"):
                yield Static("Loading...", id="stat-regular")
                yield Static("", id="stat-workday-ot")
                yield Static("", id="stat-total-hours")

            with Vertical(classes="stat-box"):
                yield Static("", id="stat-rest-day-ot")
                yield Static("", id="stat-holiday-ot")
                yield Static("", id="stat-workdays")

            with Vertical(classes="stat-box"):
                yield Static("", id="stat-amount-total")
                yield Static("", id="stat-projects")
                yield Static("", id="stat-warning")

    def update_summary(
        self,
        summary: MonthlyEarningsSummary,
        projects: dict[str, Project],
        calendar_workdays: int,
    ) -> None:
        """Update the displayed summary."""
        hours = summary.hours

        self.query_one("#stat-regular", Static).update(
            f"[bold]Regular:[/bold] {fmt_duration(hours.regular)}"
            f"  {fmt_amount(summary.amount_regular)}"
        )
        self.query_one("#stat-workday-ot", Static).update(
            f"[bold]Workday OT:[/bold] {fmt_duration(hours.workday_ot)}"
            f"  {fmt_amount(summary.amount_workday_ot)}"
        )
        self.query_one("#stat-total-hours", Static).update(
            f"[bold]Total:[/bold] {fmt_duration(hours.total())}"
        )
        self.query_one("#stat-rest-day-ot", Static).update(
            f"[bold]Rest Day OT:[/bold] {fmt_duration(hours.rest_day_ot)}"
            f"  {fmt_amount(summary.amount_rest_day_ot)}"
        )
        self.query_one("#stat-holiday-ot", Static).update(
            f"[bold]Holiday OT:[/bold] {fmt_duration(hours.holiday_ot)}"
            f"  {fmt_amount(summary.amount_holiday_ot)}"
        )
        self.query_one("#stat-workdays", Static).update(
            f"[bold]Calendar Workdays:[/bold] {calendar_workdays}"
        )
        self.query_one("#stat-amount-total", Static).update(
            f"[bold green]Earnings:[/bold green] {fmt_amount(summary.amount_total)}"
        )

        lines = []
        for project_id, statement in summary.by_project.items():
            if project_id is None:
                name = "Unassigned"
            else:
                name = projects[project_id].name if project_id in projects else project_id
            lines.append(f"{name}: {fmt_amount(statement.amount_total)}")
        self.query_one("#stat-projects", Static).update(" | ".join(lines) or "No projects")

        if summary.has_unassigned_but_no_default:
            self.query_one("#stat-warning", Static).update(
                "[red][bold]Unassigned logs skipped:[/bold] set a default payroll[/red]"
            )
        else:
            self.query_one("#stat-warning", Static).update("")

        # Force refresh of the panel
        self.refresh()
