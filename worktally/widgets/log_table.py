"""Table widget listing the month's work logs."""

from datetime import tzinfo

from rich.text import Text
from textual.widgets import DataTable

from worktally.duration import Duration
from worktally.models import Project, WorkInterval


class LogTable(DataTable):
    """Table displaying work logs with their flags and project."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.cursor_type = "row"
        self.show_cursor = True
        self.zebra_stripes = True
        self.can_focus = True

    def on_mount(self) -> None:
        """Set up the table columns."""
        # Date format is "MM/DD (Day)" = 13 chars
        self.add_column("Date", width=13)
        self.add_column("Start", width=7)
        self.add_column("End", width=7)
        self.add_column("Worked", width=8)
        self.add_column("Day", width=9)
        self.add_column("Project")

    def load_logs(
        self, logs: list[WorkInterval], projects: dict[str, Project], tz: tzinfo
    ) -> None:
        """Load work logs into the table."""
        self.clear()

        for log in logs:
            start = log.start_time.astimezone(tz)
            end = log.end_time.astimezone(tz)

            date_display = start.strftime("%m/%d (%a)")
            end_display = end.strftime("%H:%M")
            if log.is_overnight(tz):
                end_display += "+1"
            worked = Duration.between(log.start_time, log.end_time)

            if log.project_id is None:
                project_name = "--"
            elif log.project_id in projects:
                project_name = projects[log.project_id].name
            else:
                project_name = log.project_id

            if log.is_holiday:
                day_label, style = "Holiday", "red"
            elif log.is_rest_day:
                day_label, style = "Rest", "blue"
            else:
                day_label, style = "Work", None

            cells = (
                date_display,
                start.strftime("%H:%M"),
                end_display,
                str(worked),
                day_label,
                project_name,
            )
            # Apply styling to each cell using Rich Text
            if style:
                self.add_row(*(Text(cell, style=style) for cell in cells), key=log.id)
            else:
                self.add_row(*cells, key=log.id)
