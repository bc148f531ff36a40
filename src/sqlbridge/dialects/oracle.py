"""
Oracle dialect implementations for 8i, 9i-11g and 12c onwards.
"""

from __future__ import annotations

import re

from .base import AbstractDialect, Dialect, DialectCapabilities, offset_fetch_clause
from .identity import ORACLE_IDENTITY
from .resolution import NO_VERSION, DialectResolutionInfo

# greedy head so the split lands on the last "for update" clause
_FOR_UPDATE_RE = re.compile(r"^(.*\S)\s+(for\s+update\b.*)$", re.IGNORECASE | re.DOTALL)


class Oracle8iDialect(AbstractDialect):
    """
    Oracle 8i: sequences only, pagination through ``rownum`` wrapping.
    """

    name = "oracle8i"
    capabilities = DialectCapabilities(supports_sequences=True, supports_schema_namespaces=True)

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        return ""

    def apply_limit(self, sql: str, limit: int | None, offset: int | None) -> str:
        if limit is None and not offset:
            return sql
        sql = sql.strip()
        for_update = ""
        match = _FOR_UPDATE_RE.match(sql)
        if match is not None:
            sql, for_update = match.group(1), match.group(2)
        return self._wrap(sql, limit, offset) + (f" {for_update}" if for_update else "")

    def _wrap(self, sql: str, limit: int | None, offset: int | None) -> str:
        if not offset:
            return f"select * from ( {sql} ) where rownum <= {limit}"
        inner = f"select * from ( select row_.*, rownum rownum_ from ( {sql} ) row_ )"
        if limit is None:
            return f"{inner} where rownum_ > {offset}"
        return f"{inner} where rownum_ <= {offset + limit} and rownum_ > {offset}"

    def sequence_next_value_string(self, sequence_name: str) -> str | None:
        return f"select {sequence_name}.nextval from dual"


class Oracle9iDialect(Oracle8iDialect):
    """
    Oracle 9i through 11g; the row limit moves inside the numbered sub-select.
    """

    name = "oracle9i"

    def _wrap(self, sql: str, limit: int | None, offset: int | None) -> str:
        if not offset or limit is None:
            return super()._wrap(sql, limit, offset)
        return (
            f"select * from ( select row_.*, rownum rownum_ from ( {sql} ) row_ "
            f"where rownum <= {offset + limit}) where rownum_ > {offset}"
        )


class Oracle12cDialect(Oracle9iDialect):
    """
    Oracle 12c and later: identity columns and ``OFFSET``/``FETCH`` pagination.
    """

    name = "oracle12c"
    identity_column_support = ORACLE_IDENTITY

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        return offset_fetch_clause(limit, offset)

    def apply_limit(self, sql: str, limit: int | None, offset: int | None) -> str:
        return AbstractDialect.apply_limit(self, sql, limit, offset)


ORACLE8I = Oracle8iDialect()
ORACLE9I = Oracle9iDialect()
ORACLE12C = Oracle12cDialect()


def detect_oracle(info: DialectResolutionInfo) -> Dialect | None:
    if info.database_name != "Oracle":
        return None
    major = info.database_major_version
    if major == NO_VERSION or major >= 12:
        return ORACLE12C
    if major >= 9:
        return ORACLE9I
    return ORACLE8I
