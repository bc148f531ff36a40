"""
IBM DB2 dialect implementations for LUW, AS/400 (iSeries) and z/OS.
"""

from __future__ import annotations

from .base import AbstractDialect, Dialect, DialectCapabilities
from .identity import DB2_IDENTITY, DB2_SYSDUMMY_IDENTITY
from .resolution import DialectResolutionInfo


class DB2Dialect(AbstractDialect):
    """
    DB2 for Linux, Unix and Windows.
    """

    name = "db2"
    capabilities = DialectCapabilities(supports_sequences=True, supports_schema_namespaces=True)
    identity_column_support = DB2_IDENTITY

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        if limit is None:
            return ""
        return f"fetch first {limit} rows only"

    def apply_limit(self, sql: str, limit: int | None, offset: int | None) -> str:
        if not offset:
            return super().apply_limit(sql, limit, None)
        inner = sql if limit is None else f"{sql} fetch first {offset + limit} rows only"
        return (
            "select * from ( select inner2_.*, rownumber() over(order by order of inner2_) as rownumber_ "
            f"from ( {inner} ) as inner2_ ) as inner1_ where rownumber_ > {offset} order by rownumber_"
        )

    def sequence_next_value_string(self, sequence_name: str) -> str | None:
        return f"values nextval for {sequence_name}"


class DB2400Dialect(DB2Dialect):
    """
    DB2 UDB for AS/400 (iSeries).
    """

    name = "db2400"
    identity_column_support = DB2_SYSDUMMY_IDENTITY

    def sequence_next_value_string(self, sequence_name: str) -> str | None:
        return f"select nextval for {sequence_name} from sysibm.sysdummy1"


class DB2390Dialect(DB2400Dialect):
    """
    DB2 for z/OS.
    """

    name = "db2390"


DB2 = DB2Dialect()
DB2_400 = DB2400Dialect()
DB2_390 = DB2390Dialect()


def detect_db2_as400(info: DialectResolutionInfo) -> Dialect | None:
    if info.database_name == "DB2 UDB for AS/400":
        return DB2_400
    return None


def detect_db2_zos(info: DialectResolutionInfo) -> Dialect | None:
    if info.database_name == "DB2":
        return DB2_390
    return None


def detect_db2(info: DialectResolutionInfo) -> Dialect | None:
    if info.database_name.startswith("DB2/"):
        return DB2
    return None
