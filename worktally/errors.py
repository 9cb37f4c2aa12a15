"""Custom exceptions."""


class WorktallyError(Exception):
    """Base exception for worktally."""


class InvalidConfigError(WorktallyError):
    """Raised when the configuration file or environment holds unusable values."""


class InvalidPayrollConfigError(WorktallyError):
    """Raised when a payroll policy cannot be decoded."""


class ProjectNotFoundError(WorktallyError):
    """Raised when a project id does not exist in the store."""
