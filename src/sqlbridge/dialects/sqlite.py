"""
SQLite dialect implementation.
"""

from __future__ import annotations

from ..core.processing import IdentifierProcessing, LetterCasing, Quoting
from .base import AbstractDialect, Dialect, DialectCapabilities
from .identity import SQLITE_IDENTITY
from .resolution import DialectResolutionInfo


class SQLiteDialect(AbstractDialect):
    """
    SQLite dialect: rowid-backed integer keys and no schema namespaces.
    """

    name = "sqlite"
    capabilities = DialectCapabilities(
        supports_returning=False,
        supports_sequences=False,
        supports_schema_namespaces=False,
    )
    identifier_processing = IdentifierProcessing(Quoting.ANSI, LetterCasing.AS_IS)
    identity_column_support = SQLITE_IDENTITY

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        parts: list[str] = []
        if limit is not None:
            parts.append(f"LIMIT {limit}")
        if offset is not None:
            if limit is None:
                parts.append("LIMIT -1")
            parts.append(f"OFFSET {offset}")
        return " ".join(parts)


SQLITE = SQLiteDialect()


def detect_sqlite(info: DialectResolutionInfo) -> Dialect | None:
    if info.database_name.lower() == "sqlite":
        return SQLITE
    return None
