"""
Connection providers used to probe database metadata.
"""

from .base import (
    AdapterConfigurationError,
    AdapterConnectionError,
    AdapterError,
    ConnectionConfig,
    DatabaseAdapter,
    SSLConfig,
    metadata_reader_for,
    register_metadata_reader,
)
from .mysql import MySQLAdapter, read_mysql_metadata
from .postgres import PostgresAdapter, read_postgres_metadata
from .sqlite import SQLiteAdapter, read_sqlite_metadata

register_metadata_reader("sqlite3", read_sqlite_metadata)
register_metadata_reader("psycopg", read_postgres_metadata)
register_metadata_reader("pymysql", read_mysql_metadata)
register_metadata_reader("MySQLdb", read_mysql_metadata)

__all__ = [
    "ConnectionConfig",
    "DatabaseAdapter",
    "SSLConfig",
    "AdapterError",
    "AdapterConfigurationError",
    "AdapterConnectionError",
    "SQLiteAdapter",
    "PostgresAdapter",
    "MySQLAdapter",
    "metadata_reader_for",
    "register_metadata_reader",
]
