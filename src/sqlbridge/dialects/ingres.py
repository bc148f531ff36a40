"""
Ingres dialect implementations.
"""

from __future__ import annotations

from .base import AbstractDialect, Dialect, DialectCapabilities, insert_after_select, offset_fetch_clause
from .identity import INGRES_IDENTITY
from .resolution import NO_VERSION, DialectResolutionInfo


class IngresDialect(AbstractDialect):
    """
    Ingres before 9: sequences only and ``FIRST n`` row limits.
    """

    name = "ingres"
    capabilities = DialectCapabilities(
        supports_sequences=True, supports_offset=False, supports_schema_namespaces=True
    )

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        return ""

    def apply_limit(self, sql: str, limit: int | None, offset: int | None) -> str:
        self._check_offset(offset)
        if limit is None:
            return sql
        return insert_after_select(sql, f"first {limit}")

    def sequence_next_value_string(self, sequence_name: str) -> str | None:
        return f"select nextval for {sequence_name}"


class Ingres9Dialect(IngresDialect):
    """
    Ingres 9 and later: identity columns and ``OFFSET``/``FETCH FIRST``.
    """

    name = "ingres9"
    capabilities = DialectCapabilities(supports_sequences=True, supports_schema_namespaces=True)
    identity_column_support = INGRES_IDENTITY

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        parts: list[str] = []
        if offset:
            parts.append(f"offset {offset}")
        if limit is not None:
            parts.append(f"fetch first {limit} rows only")
        return " ".join(parts)

    def apply_limit(self, sql: str, limit: int | None, offset: int | None) -> str:
        return AbstractDialect.apply_limit(self, sql, limit, offset)


INGRES = IngresDialect()
INGRES9 = Ingres9Dialect()


def detect_ingres(info: DialectResolutionInfo) -> Dialect | None:
    if info.database_name.lower() != "ingres":
        return None
    major = info.database_major_version
    if major != NO_VERSION and major < 9:
        return INGRES
    return INGRES9
