"""
Error hierarchy for dialect resolution.
"""

from __future__ import annotations


class DialectError(RuntimeError):
    """Base error for dialect-layer failures, including metadata extraction."""


class NoDialectError(DialectError):
    """
    Raised when no detector recognizes the database a connection points at.
    """

    def __init__(self, message: str, *, database_name: str | None = None, driver_name: str | None = None) -> None:
        super().__init__(message)
        self.database_name = database_name
        self.driver_name = driver_name
