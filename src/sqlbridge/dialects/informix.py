"""
Informix dialect implementation.
"""

from __future__ import annotations

from .base import AbstractDialect, Dialect, DialectCapabilities, insert_after_select
from .identity import INFORMIX_IDENTITY
from .resolution import DialectResolutionInfo


class InformixDialect(AbstractDialect):
    """
    Informix Dynamic Server: ``serial`` keys and ``SKIP``/``FIRST`` projections.
    """

    name = "informix"
    capabilities = DialectCapabilities(supports_sequences=True, supports_schema_namespaces=True)
    identity_column_support = INFORMIX_IDENTITY

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        return ""

    def apply_limit(self, sql: str, limit: int | None, offset: int | None) -> str:
        parts: list[str] = []
        if offset:
            parts.append(f"skip {offset}")
        if limit is not None:
            parts.append(f"first {limit}")
        if not parts:
            return sql
        return insert_after_select(sql, " ".join(parts))

    def sequence_next_value_string(self, sequence_name: str) -> str | None:
        return f"select {sequence_name}.nextval from informix.systables where tabid=1"


INFORMIX = InformixDialect()


def detect_informix(info: DialectResolutionInfo) -> Dialect | None:
    if info.database_name == "Informix Dynamic Server":
        return INFORMIX
    return None
