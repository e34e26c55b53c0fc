"""Data quality checks."""

from .integrity import IntegrityChecker, IntegrityIssue

__all__ = ["IntegrityChecker", "IntegrityIssue"]
