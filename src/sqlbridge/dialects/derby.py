"""
Apache Derby dialect implementation.
"""

from __future__ import annotations

from .base import Dialect, offset_fetch_clause
from .db2 import DB2Dialect
from .resolution import DialectResolutionInfo


class DerbyDialect(DB2Dialect):
    """
    Apache Derby: DB2-compatible identity handling with SQL:2008 pagination.
    """

    name = "derby"

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        return offset_fetch_clause(limit, offset)

    def apply_limit(self, sql: str, limit: int | None, offset: int | None) -> str:
        clause = self.limit_clause(limit, offset)
        return f"{sql} {clause}" if clause else sql

    def sequence_next_value_string(self, sequence_name: str) -> str | None:
        return f"values next value for {sequence_name}"


DERBY = DerbyDialect()


def detect_derby(info: DialectResolutionInfo) -> Dialect | None:
    if info.database_name == "Apache Derby":
        return DERBY
    return None
