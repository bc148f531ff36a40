"""
MySQL and MariaDB dialect implementations.
"""

from __future__ import annotations

from ..core.processing import IdentifierProcessing, LetterCasing, Quoting
from .base import AbstractDialect, Dialect, DialectCapabilities
from .identity import MYSQL_IDENTITY
from .resolution import DialectResolutionInfo

MYSQL_IDENTIFIER_PROCESSING = IdentifierProcessing(Quoting("`"), LetterCasing.LOWER)


class MySQLDialect(AbstractDialect):
    """
    MySQL dialect with back-tick quoting and ``AUTO_INCREMENT`` keys.
    """

    name = "mysql"
    capabilities = DialectCapabilities(
        supports_returning=False,
        supports_sequences=False,
        supports_schema_namespaces=True,
    )
    identifier_processing = MYSQL_IDENTIFIER_PROCESSING
    identity_column_support = MYSQL_IDENTITY

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        parts: list[str] = []
        if limit is not None:
            parts.append(f"LIMIT {limit}")
        if offset is not None:
            if limit is None:
                parts.append("LIMIT 18446744073709551615")
            parts.append(f"OFFSET {offset}")
        return " ".join(parts)


class MariaDBDialect(MySQLDialect):
    """
    MariaDB dialect; MySQL compatible with native sequences.
    """

    name = "mariadb"
    capabilities = DialectCapabilities(
        supports_returning=False,
        supports_sequences=True,
        supports_schema_namespaces=True,
    )

    def sequence_next_value_string(self, sequence_name: str) -> str | None:
        return f"select nextval({sequence_name})"


MYSQL = MySQLDialect()
MARIADB = MariaDBDialect()


def detect_mariadb(info: DialectResolutionInfo) -> Dialect | None:
    if info.database_name == "MariaDB" or info.driver_name.startswith("MariaDB"):
        return MARIADB
    return None


def detect_mysql(info: DialectResolutionInfo) -> Dialect | None:
    if info.database_name == "MySQL":
        return MYSQL
    return None
