"""Exceptions raised by the cricket analytics engine."""

from typing import Sequence


class AnalyticsError(Exception):
    """Base class for all analytics errors."""


class InvalidReferenceError(AnalyticsError):
    """Input tables reference rows that do not exist."""

    def __init__(self, issues: Sequence):
        self.issues = list(issues)
        details = "; ".join(
            f"{issue.check}: {issue.count} row(s) (e.g. ids {list(issue.sample_ids)})"
            for issue in self.issues
        )
        super().__init__(f"Invalid reference in input tables: {details}")


class DataValidationError(AnalyticsError):
    """A row failed schema validation while loading."""

    def __init__(self, table: str, row_number: int, error: Exception):
        self.table = table
        self.row_number = row_number
        self.error = error
        super().__init__(f"Invalid row {row_number} in '{table}': {error}")


class UnknownReportError(AnalyticsError):
    """Requested report name is not registered."""

    def __init__(self, name: str, available: Sequence[str]):
        self.name = name
        super().__init__(f"Unknown report '{name}'. Available: {', '.join(available)}")
