"""
Microsoft SQL Server and Sybase (Transact-SQL family) dialects.
"""

from __future__ import annotations

from ..core.processing import IdentifierProcessing, LetterCasing, Quoting
from .base import AbstractDialect, Dialect, DialectCapabilities, insert_after_select
from .identity import SQLSERVER_IDENTITY, TRANSACT_SQL_IDENTITY
from .resolution import NO_VERSION, DialectResolutionInfo

TRANSACT_SQL_IDENTIFIER_PROCESSING = IdentifierProcessing(Quoting("[", "]"), LetterCasing.AS_IS)


class TransactSQLDialect(AbstractDialect):
    """
    Shared Transact-SQL behavior: bracket quoting and ``TOP`` row limits.
    """

    name = "transact-sql"
    capabilities = DialectCapabilities(supports_offset=False, supports_schema_namespaces=True)
    identifier_processing = TRANSACT_SQL_IDENTIFIER_PROCESSING
    identity_column_support = TRANSACT_SQL_IDENTITY

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        return ""

    def apply_limit(self, sql: str, limit: int | None, offset: int | None) -> str:
        self._check_offset(offset)
        if limit is None:
            return sql
        return insert_after_select(sql, f"top {limit}")


class SybaseASEDialect(TransactSQLDialect):
    name = "sybase"


class SQLServerDialect(TransactSQLDialect):
    """
    SQL Server 2000: ``scope_identity()`` keys, ``TOP`` without offsets.
    """

    name = "sqlserver"
    identity_column_support = SQLSERVER_IDENTITY


class SQLServer2005Dialect(SQLServerDialect):
    """
    SQL Server 2005 and 2008: offsets through ``ROW_NUMBER()`` numbering.
    """

    name = "sqlserver2005"
    capabilities = DialectCapabilities(supports_offset=True, supports_schema_namespaces=True)

    def apply_limit(self, sql: str, limit: int | None, offset: int | None) -> str:
        if not offset:
            return super().apply_limit(sql, limit, None)
        bounds = f"__row_nr__ > {offset}"
        if limit is not None:
            bounds += f" AND __row_nr__ <= {offset + limit}"
        return (
            "WITH query AS (SELECT inner_query.*, ROW_NUMBER() OVER (ORDER BY CURRENT_TIMESTAMP) "
            f"as __row_nr__ FROM ( {sql} ) inner_query ) SELECT * FROM query WHERE {bounds}"
        )


class SQLServer2012Dialect(SQLServer2005Dialect):
    """
    SQL Server 2012 and later: sequences and ``OFFSET``/``FETCH`` pagination.

    ``OFFSET``/``FETCH`` requires an ``ORDER BY`` in the statement.
    """

    name = "sqlserver2012"
    capabilities = DialectCapabilities(
        supports_sequences=True, supports_offset=True, supports_schema_namespaces=True
    )

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        if limit is None and offset is None:
            return ""
        clause = f"OFFSET {offset or 0} ROWS"
        if limit is not None:
            clause += f" FETCH NEXT {limit} ROWS ONLY"
        return clause

    def apply_limit(self, sql: str, limit: int | None, offset: int | None) -> str:
        return AbstractDialect.apply_limit(self, sql, limit, offset)

    def sequence_next_value_string(self, sequence_name: str) -> str | None:
        return f"select next value for {sequence_name}"


SYBASE_ASE = SybaseASEDialect()
SQLSERVER = SQLServerDialect()
SQLSERVER2005 = SQLServer2005Dialect()
SQLSERVER2012 = SQLServer2012Dialect()

_SYBASE_PRODUCT_NAMES = frozenset({"Sybase SQL Server", "Adaptive Server Enterprise", "ASE"})


def detect_sqlserver(info: DialectResolutionInfo) -> Dialect | None:
    if not info.database_name.startswith("Microsoft SQL Server"):
        return None
    major = info.database_major_version
    if major == NO_VERSION or major >= 11:
        return SQLSERVER2012
    if major >= 9:
        return SQLSERVER2005
    return SQLSERVER


def detect_sybase(info: DialectResolutionInfo) -> Dialect | None:
    if info.database_name in _SYBASE_PRODUCT_NAMES:
        return SYBASE_ASE
    return None
