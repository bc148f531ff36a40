"""
H2 and HSQLDB dialect implementations.
"""

from __future__ import annotations

from .base import AbstractDialect, Dialect, DialectCapabilities
from .identity import H2_IDENTITY, HSQL_IDENTITY
from .resolution import DialectResolutionInfo


class H2Dialect(AbstractDialect):
    name = "h2"
    capabilities = DialectCapabilities(supports_sequences=True, supports_schema_namespaces=True)
    identity_column_support = H2_IDENTITY

    def sequence_next_value_string(self, sequence_name: str) -> str | None:
        return f"call next value for {sequence_name}"


class HSQLDialect(AbstractDialect):
    name = "hsql"
    capabilities = DialectCapabilities(supports_sequences=True, supports_schema_namespaces=True)
    identity_column_support = HSQL_IDENTITY

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        parts: list[str] = []
        if offset is not None:
            parts.append(f"OFFSET {offset}")
        if limit is not None:
            parts.append(f"LIMIT {limit}")
        return " ".join(parts)

    def sequence_next_value_string(self, sequence_name: str) -> str | None:
        return f"call next value for {sequence_name}"


H2 = H2Dialect()
HSQL = HSQLDialect()


def detect_h2(info: DialectResolutionInfo) -> Dialect | None:
    if info.database_name == "H2":
        return H2
    return None


def detect_hsql(info: DialectResolutionInfo) -> Dialect | None:
    if info.database_name == "HSQL Database Engine":
        return HSQL
    return None
