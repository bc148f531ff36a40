"""
MySQL and MariaDB connection provider built on PyMySQL or mysqlclient.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any

from ..dialects.resolution import DialectResolutionInfo
from ..utils import get_logger
from .base import (
    AdapterConfigurationError,
    AdapterConnectionError,
    ConnectionConfig,
    DatabaseAdapter,
)

# MariaDB servers speaking the MySQL protocol prefix their version with this
_MARIADB_REPLICATION_PREFIX = "5.5.5-"

_DRIVER_NAMES = {"pymysql": "PyMySQL", "MySQLdb": "mysqlclient"}


def _load_driver():
    try:
        import pymysql  # type: ignore[import-untyped]

        return pymysql
    except ImportError:
        try:
            import MySQLdb

            return MySQLdb
        except ImportError:
            return None


@dataclass
class MySQLConnectionState:
    connection: Any
    config: ConnectionConfig
    driver: Any


def read_mysql_metadata(connection: Any) -> DialectResolutionInfo:
    server_version = connection.get_server_info()
    if isinstance(server_version, bytes):
        server_version = server_version.decode("utf-8", errors="replace")
    database_name = "MariaDB" if "mariadb" in server_version.lower() else "MySQL"
    if database_name == "MariaDB" and server_version.startswith(_MARIADB_REPLICATION_PREFIX):
        server_version = server_version[len(_MARIADB_REPLICATION_PREFIX) :]

    module_root = type(connection).__module__.split(".", 1)[0]
    driver = sys.modules.get(module_root)
    return DialectResolutionInfo.from_version_strings(
        database_name,
        server_version,
        driver_name=_DRIVER_NAMES.get(module_root, module_root),
        driver_version=getattr(driver, "__version__", None),
    )


class MySQLAdapter(DatabaseAdapter):
    """
    Adapter wrapping a MySQL DB-API driver (PyMySQL or mysqlclient).
    """

    def __init__(self) -> None:
        self._state: MySQLConnectionState | None = None
        self.logger = get_logger("adapters.mysql")

    def connect(self, config: ConnectionConfig) -> Any:
        driver = _load_driver()
        if driver is None:
            raise AdapterConfigurationError(
                "PyMySQL or mysqlclient is required to use MySQLAdapter."
            )
        if not config.dsn:
            raise AdapterConfigurationError(
                "ConnectionConfig must be built from a DSN for MySQL connections."
            )

        options = dict(config.options or {})
        if config.ssl:
            for key, value in config.ssl.mysql_options().items():
                options.setdefault(key, value)
        if config.timeout and "connect_timeout" not in options:
            options["connect_timeout"] = int(config.timeout)

        self.logger.info("Connecting to MySQL %s", config.descriptive_label())

        dsn = config.dsn
        connect_kwargs = {
            "host": dsn.host or "localhost",
            "user": dsn.username,
            "password": dsn.password,
            "database": dsn.database,
            "autocommit": bool(config.autocommit),
            **options,
        }
        if dsn.port:
            connect_kwargs["port"] = dsn.port

        try:
            connection = driver.connect(**connect_kwargs)
        except Exception as exc:
            raise AdapterConnectionError("Failed to connect to MySQL.") from exc

        self._state = MySQLConnectionState(connection, config, driver)
        return connection

    def close(self) -> None:
        if self._state:
            try:
                self._state.connection.close()
            finally:
                self._state = None

    def read_metadata(self, connection: Any) -> DialectResolutionInfo:
        return read_mysql_metadata(connection)
