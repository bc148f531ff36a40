"""
CUBRID dialect implementation.
"""

from __future__ import annotations

from .base import AbstractDialect, Dialect, DialectCapabilities
from .identity import CUBRID_IDENTITY
from .resolution import DialectResolutionInfo


class CUBRIDDialect(AbstractDialect):
    name = "cubrid"
    capabilities = DialectCapabilities(supports_sequences=True, supports_schema_namespaces=False)
    identity_column_support = CUBRID_IDENTITY

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        if limit is None:
            if not offset:
                return ""
            limit = 9223372036854775807
        if offset:
            return f"LIMIT {offset}, {limit}"
        return f"LIMIT {limit}"

    def sequence_next_value_string(self, sequence_name: str) -> str | None:
        return f"select {sequence_name}.next_value from table({{1}}) as T(X)"


CUBRID = CUBRIDDialect()


def detect_cubrid(info: DialectResolutionInfo) -> Dialect | None:
    if info.database_name.lower() == "cubrid":
        return CUBRID
    return None
