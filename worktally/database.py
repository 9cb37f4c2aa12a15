"""SQLite database for storing projects and work logs."""

import logging
import sqlite3
from datetime import UTC, datetime
from pathlib import Path

from worktally.errors import ProjectNotFoundError
from worktally.models import Project, WorkInterval
from worktally.policy import PayrollConfig

DEFAULT_DB_PATH = Path.home() / ".config" / "worktally" / "worklog.db"

logger = logging.getLogger(__name__)


def _encode_time(moment: datetime) -> str:
    """Store timestamps as UTC ISO-8601 so text ordering matches time ordering."""
    if moment.tzinfo is None:
        msg = f"Timestamps must be timezone-aware, got {moment.isoformat()}"
        raise ValueError(msg)
    return moment.astimezone(UTC).isoformat()


class WorkLogDatabase:
    """Database for storing and retrieving projects and their work logs."""

    def __init__(self, db_path: Path = DEFAULT_DB_PATH) -> None:
        self.db_path = db_path
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        """Initialize database schema."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS projects (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    note TEXT,
                    payroll TEXT NOT NULL,
                    is_archived INTEGER NOT NULL,
                    sort_order INTEGER NOT NULL
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS work_logs (
                    id TEXT PRIMARY KEY,
                    start_time TEXT NOT NULL,
                    end_time TEXT NOT NULL,
                    is_rest_day INTEGER NOT NULL,
                    is_holiday INTEGER NOT NULL,
                    project_id TEXT
                )
            """)
            conn.commit()

    def save_project(self, project: Project) -> None:
        """Save or update a project."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO projects
                (id, name, note, payroll, is_archived, sort_order)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    project.id,
                    project.name,
                    project.note,
                    project.payroll.to_json(),
                    1 if project.is_archived else 0,
                    project.sort_order,
                ),
            )
            conn.commit()

    def get_project(self, project_id: str) -> Project:
        """Get a project by id."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                "SELECT id, name, note, payroll, is_archived, sort_order "
                "FROM projects WHERE id = ?",
                (project_id,),
            )
            row = cursor.fetchone()
            if not row:
                msg = f"No project with id {project_id}"
                raise ProjectNotFoundError(msg)
            return self._project_from_row(row)

    def get_projects(self, *, include_archived: bool = False) -> list[Project]:
        """Get all projects in display order."""
        query = "SELECT id, name, note, payroll, is_archived, sort_order FROM projects"
        if not include_archived:
            query += " WHERE is_archived = 0"
        query += " ORDER BY sort_order, name"

        with sqlite3.connect(self.db_path) as conn:
            return [self._project_from_row(row) for row in conn.execute(query)]

    def delete_project(self, project_id: str) -> None:
        """Delete a project; its work logs stay and become unassigned."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                "UPDATE work_logs SET project_id = NULL WHERE project_id = ?", (project_id,)
            )
            conn.execute("DELETE FROM projects WHERE id = ?", (project_id,))
            conn.commit()
        logger.debug("Deleted project %s", project_id)

    def save_work_log(self, log: WorkInterval) -> None:
        """Save or update a work log."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO work_logs
                (id, start_time, end_time, is_rest_day, is_holiday, project_id)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    log.id,
                    _encode_time(log.start_time),
                    _encode_time(log.end_time),
                    1 if log.is_rest_day else 0,
                    1 if log.is_holiday else 0,
                    log.project_id,
                ),
            )
            conn.commit()

    def get_work_log(self, log_id: str) -> WorkInterval | None:
        """Get a work log by id."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                "SELECT id, start_time, end_time, is_rest_day, is_holiday, project_id "
                "FROM work_logs WHERE id = ?",
                (log_id,),
            )
            row = cursor.fetchone()
            if not row:
                return None
            return self._work_log_from_row(row)

    def get_work_logs_between(self, start: datetime, end: datetime) -> list[WorkInterval]:
        """Get all work logs overlapping [start, end), ordered by start time."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                "SELECT id, start_time, end_time, is_rest_day, is_holiday, project_id "
                "FROM work_logs WHERE start_time < ? AND end_time > ? ORDER BY start_time",
                (_encode_time(end), _encode_time(start)),
            )
            return [self._work_log_from_row(row) for row in cursor]

    def delete_work_log(self, log_id: str) -> None:
        """Delete a work log."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("DELETE FROM work_logs WHERE id = ?", (log_id,))
            conn.commit()

    def clear_all(self) -> None:
        """Clear all projects and work logs (for testing)."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("DELETE FROM work_logs")
            conn.execute("DELETE FROM projects")
            conn.commit()

    @staticmethod
    def _project_from_row(row: tuple) -> Project:
        return Project(
            id=row[0],
            name=row[1],
            note=row[2] or "",
            payroll=PayrollConfig.from_json(row[3]),
            is_archived=bool(row[4]),
            sort_order=row[5],
        )

    @staticmethod
    def _work_log_from_row(row: tuple) -> WorkInterval:
        return WorkInterval(
            id=row[0],
            start_time=datetime.fromisoformat(row[1]),
            end_time=datetime.fromisoformat(row[2]),
            is_rest_day=bool(row[3]),
            is_holiday=bool(row[4]),
            project_id=row[5],
        )
