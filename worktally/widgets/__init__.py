"""Textual widgets for the TUI."""

from worktally.widgets.log_dialog import LogDialog
from worktally.widgets.log_table import LogTable
from worktally.widgets.summary_panel import SummaryPanel

__all__ = ["LogDialog", "LogTable", "SummaryPanel"]
