"""Dialog for adding a work log."""

from datetime import date
from typing import ClassVar

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Grid, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select, Static

from worktally.logentry import parse_clock
from worktally.models import Project
from worktally.workcalendar import DefaultWorkCalendar


class LogDialog(ModalScreen):
    """Modal dialog for logging work on a day."""

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        ("escape", "dismiss", "Cancel"),
    ]

    CSS = """
    LogDialog {
        align: center middle;
    }

    #dialog {
        width: 60;
        height: auto;
        background: $panel;
        border: thick $primary;
        padding: 1 2;
    }

    #dialog-title {
        width: 100%;
        text-align: center;
        margin-bottom: 1;
        text-style: bold;
    }

    .input-row {
        height: auto;
        margin: 1 0;
    }

    .input-label {
        width: 20;
        padding-right: 1;
    }

    #button-row {
        width: 100%;
        height: auto;
        margin-top: 1;
    }

    Button {
        margin: 0 1;
    }
    """

    def __init__(self, target_date: date, projects: list[Project], **kwargs) -> None:
        super().__init__(**kwargs)
        self.target_date = target_date
        self.projects = projects
        self.work_calendar = DefaultWorkCalendar()

    def compose(self) -> ComposeResult:
        """Compose the dialog."""
        is_weekend = self.work_calendar.is_weekend(self.target_date)
        with Vertical(id="dialog"):
            yield Static(
                f"Log work on {self.target_date.strftime('%Y-%m-%d (%a)')}", id="dialog-title"
            )

            with Grid(classes="input-row"):
                yield Label("Date:", classes="input-label")
                yield Input(value=self.target_date.isoformat(), id="log-date")

            with Grid(classes="input-row"):
                yield Label("Clock in:", classes="input-label")
                yield Input(placeholder="09:00", id="clock-in")

            with Grid(classes="input-row"):
                yield Label("Clock out:", classes="input-label")
                yield Input(placeholder="18:00 (earlier = next day)", id="clock-out")

            with Grid(classes="input-row"):
                yield Label("Project:", classes="input-label")
                yield Select(
                    [(project.name, project.id) for project in self.projects],
                    prompt="Unassigned",
                    id="project",
                )

            with Grid(classes="input-row"):
                yield Label("Rest day:", classes="input-label")
                yield Button(
                    "Yes" if is_weekend else "No",
                    id="rest-day-toggle",
                    variant="success" if is_weekend else "default",
                )

            with Grid(classes="input-row"):
                yield Label("Holiday:", classes="input-label")
                yield Button("No", id="holiday-toggle", variant="default")

            with Grid(id="button-row"):
                yield Button("Save", id="save-button", variant="primary")
                yield Button("Cancel", id="cancel-button", variant="default")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "cancel-button":
            self.dismiss(None)
        elif event.button.id == "save-button":
            self.save_log()
        elif event.button.id in ("rest-day-toggle", "holiday-toggle"):
            self.toggle(event.button)

    @staticmethod
    def toggle(button: Button) -> None:
        """Flip a Yes/No toggle button."""
        if button.label == "No":
            button.label = "Yes"
            button.variant = "success"
        else:
            button.label = "No"
            button.variant = "default"

    def save_log(self) -> None:
        """Validate the entry and dismiss the dialog with it."""
        try:
            log_date = date.fromisoformat(self.query_one("#log-date", Input).value.strip())
            clock_in = parse_clock(self.query_one("#clock-in", Input).value)
            clock_out = parse_clock(self.query_one("#clock-out", Input).value)
        except ValueError as e:
            self.notify(f"Invalid entry: {e}. Use YYYY-MM-DD and HH:MM", severity="error")
            return

        project = self.query_one("#project", Select).value
        result = {
            "date": log_date,
            "clock_in": clock_in,
            "clock_out": clock_out,
            "project_id": project if isinstance(project, str) else None,
            "is_rest_day": self.query_one("#rest-day-toggle", Button).label == "Yes",
            "is_holiday": self.query_one("#holiday-toggle", Button).label == "Yes",
        }

        self.dismiss(result)
