"""
Dialect strategy registry and resolution.
"""

from .base import AbstractDialect, Dialect, DialectCapabilities
from .cubrid import CUBRIDDialect
from .db2 import DB2390Dialect, DB2400Dialect, DB2Dialect
from .derby import DerbyDialect
from .errors import DialectError, NoDialectError
from .h2 import H2Dialect, HSQLDialect
from .identity import IdentityColumns, IdentityColumnSupport, SqlType
from .informix import InformixDialect
from .ingres import Ingres9Dialect, IngresDialect
from .mysql import MariaDBDialect, MySQLDialect
from .oracle import Oracle8iDialect, Oracle9iDialect, Oracle12cDialect
from .postgres import Postgres10Dialect, PostgresDialect
from .resolution import NO_VERSION, DialectResolutionInfo
from .resolver import (
    Detector,
    DialectResolver,
    dialect_for_name,
    resolve_connection,
    resolve_dialect,
)
from .sqlite import SQLiteDialect
from .sqlserver import SQLServer2005Dialect, SQLServer2012Dialect, SQLServerDialect, SybaseASEDialect

__all__ = [
    "AbstractDialect",
    "Dialect",
    "DialectCapabilities",
    "DialectError",
    "NoDialectError",
    "IdentityColumnSupport",
    "IdentityColumns",
    "SqlType",
    "NO_VERSION",
    "DialectResolutionInfo",
    "Detector",
    "DialectResolver",
    "dialect_for_name",
    "resolve_connection",
    "resolve_dialect",
    "CUBRIDDialect",
    "DB2Dialect",
    "DB2400Dialect",
    "DB2390Dialect",
    "DerbyDialect",
    "H2Dialect",
    "HSQLDialect",
    "InformixDialect",
    "IngresDialect",
    "Ingres9Dialect",
    "MySQLDialect",
    "MariaDBDialect",
    "Oracle8iDialect",
    "Oracle9iDialect",
    "Oracle12cDialect",
    "PostgresDialect",
    "Postgres10Dialect",
    "SQLiteDialect",
    "SQLServerDialect",
    "SQLServer2005Dialect",
    "SQLServer2012Dialect",
    "SybaseASEDialect",
]
