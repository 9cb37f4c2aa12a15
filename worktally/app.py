"""Main Textual application."""

from datetime import date, datetime
from typing import ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.widgets import Footer, Header, LoadingIndicator

from worktally.compensation import CompensationEngine
from worktally.config import Config
from worktally.database import WorkLogDatabase
from worktally.earnings import MonthlyEarningsCalculator
from worktally.errors import WorktallyError
from worktally.logentry import build_work_interval
from worktally.models import MonthlyEarningsSummary, Period, Project, WorkInterval
from worktally.widgets import LogDialog, LogTable, SummaryPanel
from worktally.workcalendar import DefaultWorkCalendar


class WorktallyApp(App):
    """Worktally TUI application."""

    CSS = """
    #main-container {
        height: 100%;
    }

    Vertical {
        height: 100%;
    }

    #loading-indicator {
        layer: overlay;
        offset: 50% 50%;
        width: auto;
        height: auto;
        display: none;
    }

    #loading-indicator.visible {
        display: block;
    }

    #summary-panel {
        height: 1fr;
        padding: 1;
        background: $panel;
        border: solid $primary;
    }

    #summary-row {
        height: 100%;
        width: 100%;
    }

    .stat-box {
        width: 1fr;
        padding: 0 1;
    }

    #log-table {
        height: 4fr;
        border: solid $primary;
        width: 100%;
    }
    """

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        ("q", "quit", "Quit"),
        ("r", "refresh", "Refresh"),
        ("a", "add_log", "Add Log"),
        ("d", "delete_log", "Delete Log"),
        ("c", "current_month", "Current Month"),
        ("n", "next_month", "Next Month"),
        ("b", "prev_month", "Prev Month"),
        ("?", "help", "Help"),
    ]

    def __init__(self, config: Config | None = None, db: WorkLogDatabase | None = None) -> None:
        super().__init__()
        self.config = config or Config()
        self.tz = self.config.tzinfo
        self.today = datetime.now(self.tz).date()
        self.current_year = self.today.year
        self.current_month = self.today.month
        self.db = db or WorkLogDatabase()
        self.calculator = MonthlyEarningsCalculator(engine=CompensationEngine(tz=self.tz))
        self.work_calendar = DefaultWorkCalendar()
        self.projects: dict[str, Project] = {}

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield Header(show_clock=True)
        with Container(id="main-container"), Vertical():
            yield LoadingIndicator(id="loading-indicator")
            yield SummaryPanel(id="summary-panel")
            yield LogTable(id="log-table")
        yield Footer()

    def on_mount(self) -> None:
        """Load data when the app starts."""
        self._update_title()
        self.load_data_async()

    def _update_title(self) -> None:
        self.title = f"Worktally - {self.current_year}/{self.current_month:02d}"

    def load_data_async(self) -> None:
        """Start async data loading."""
        loading = self.query_one("#loading-indicator", LoadingIndicator)
        loading.add_class("visible")
        self.run_worker(self._load_and_update, exclusive=True, thread=True)

    def _load_and_update(self) -> None:
        """Load the month's logs and projects, then summarize them."""
        anchor = date(self.current_year, self.current_month, 1)
        period = Period.month(anchor, self.tz)

        try:
            projects = {
                project.id: project for project in self.db.get_projects(include_archived=True)
            }
            logs = self.db.get_work_logs_between(period.start, period.end)
        except (OSError, WorktallyError) as e:
            self.call_from_thread(self.notify, f"Failed to load logs: {e}", severity="error")
            return

        summary = self.calculator.summarize(
            logs, anchor, self.config.default_payroll, projects=projects
        )
        self.projects = projects

        # Update UI on main thread
        self.call_from_thread(self._update_ui, summary, logs)

    def _update_ui(self, summary: MonthlyEarningsSummary, logs: list[WorkInterval]) -> None:
        """Update UI components (must run on main thread)."""
        summary_panel = self.query_one("#summary-panel", SummaryPanel)
        summary_panel.update_summary(
            summary,
            self.projects,
            self.work_calendar.workdays_in_month(self.current_year, self.current_month),
        )

        log_table = self.query_one("#log-table", LogTable)
        log_table.load_logs(logs, self.projects, self.tz)

        loading = self.query_one("#loading-indicator", LoadingIndicator)
        loading.remove_class("visible")

        # Focus the table so it can receive keyboard input
        log_table.focus()

    def action_refresh(self) -> None:
        """Reload data from the store."""
        self.notify("Refreshing data...", severity="information")
        self.load_data_async()

    def action_next_month(self) -> None:
        """Navigate to next month."""
        self.current_month += 1
        if self.current_month > 12:
            self.current_month = 1
            self.current_year += 1
        self._update_title()
        self.load_data_async()

    def action_prev_month(self) -> None:
        """Navigate to previous month."""
        self.current_month -= 1
        if self.current_month < 1:
            self.current_month = 12
            self.current_year -= 1
        self._update_title()
        self.load_data_async()

    def action_current_month(self) -> None:
        """Navigate to current month."""
        now = datetime.now(self.tz).date()
        self.current_year = now.year
        self.current_month = now.month
        self._update_title()
        self.load_data_async()

    def action_add_log(self) -> None:
        """Open the dialog for a new work log."""
        if (self.current_year, self.current_month) == (self.today.year, self.today.month):
            target_date = self.today
        else:
            target_date = date(self.current_year, self.current_month, 1)
        active_projects = [
            project for project in self.projects.values() if not project.is_archived
        ]
        self.push_screen(LogDialog(target_date, active_projects), self.handle_log_result)

    def handle_log_result(self, result: dict | None) -> None:
        """Handle the result from the log dialog."""
        if result is None:
            return

        log = build_work_interval(
            result["date"],
            result["clock_in"],
            result["clock_out"],
            self.tz,
            project_id=result["project_id"],
            is_rest_day=result["is_rest_day"],
            is_holiday=result["is_holiday"],
        )
        self.db.save_work_log(log)
        self.notify(f"Logged {result['date']}", severity="information")
        self.load_data_async()

    def action_delete_log(self) -> None:
        """Delete the selected work log."""
        log_table = self.query_one("#log-table", LogTable)
        if log_table.row_count == 0:
            self.notify("No log selected", severity="warning")
            return

        try:
            row_key, _ = log_table.coordinate_to_cell_key(log_table.cursor_coordinate)
        except (AttributeError, IndexError) as e:
            self.notify(f"Invalid row selected: {e}", severity="warning")
            return

        self.db.delete_work_log(row_key.value or "")
        self.notify("Deleted log", severity="information")
        self.load_data_async()

    def action_help(self) -> None:
        """Show help message."""
        help_text = """
        [bold]Worktally - Keyboard Shortcuts[/bold]

        [cyan]q[/cyan] - Quit application
        [cyan]r[/cyan] - Refresh data
        [cyan]a[/cyan] - Add a work log
        [cyan]d[/cyan] - Delete the selected log
        [cyan]n[/cyan]/[cyan]b[/cyan]/[cyan]c[/cyan] - Next/previous/current month
        [cyan]?[/cyan] - Show this help

        [bold]Pay Rules:[/bold]
        • Standard hours: overtime after the daily threshold
        • Comprehensive hours: overtime after the monthly quota
        • Holidays override rest days
        """
        self.notify(help_text, title="Help", timeout=10)
