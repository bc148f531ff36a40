"""
PostgreSQL connection provider built on psycopg.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..dialects.resolution import NO_VERSION, DialectResolutionInfo, parse_version
from ..utils import get_logger
from .base import (
    AdapterConfigurationError,
    AdapterConnectionError,
    ConnectionConfig,
    DatabaseAdapter,
)


def _load_driver():
    try:
        import psycopg

        return psycopg
    except ImportError:
        return None


@dataclass
class PostgresConnectionState:
    connection: Any
    config: ConnectionConfig
    driver: Any


def split_server_version(server_version: int | None) -> tuple[int, int]:
    """
    Split libpq's integer server version (``90624``, ``150002``) into major/minor.
    """
    if server_version is None or server_version <= 0:
        return NO_VERSION, NO_VERSION
    major = server_version // 10000
    if server_version >= 100000:
        return major, server_version % 10000
    return major, (server_version // 100) % 100


def read_postgres_metadata(connection: Any) -> DialectResolutionInfo:
    major, minor = split_server_version(connection.info.server_version)
    driver = _load_driver()
    driver_major, driver_minor = parse_version(getattr(driver, "__version__", None))
    return DialectResolutionInfo(
        database_name="PostgreSQL",
        database_major_version=major,
        database_minor_version=minor,
        driver_name="psycopg",
        driver_major_version=driver_major,
        driver_minor_version=driver_minor,
    )


class PostgresAdapter(DatabaseAdapter):
    """
    Adapter wrapping the psycopg PostgreSQL driver.
    """

    def __init__(self) -> None:
        self._state: PostgresConnectionState | None = None
        self.logger = get_logger("adapters.postgres")

    def connect(self, config: ConnectionConfig) -> Any:
        driver = _load_driver()
        if driver is None:
            raise AdapterConfigurationError("psycopg is required to use PostgresAdapter.")

        options = dict(config.options or {})
        if config.ssl:
            for key, value in config.ssl.postgres_options().items():
                options.setdefault(key, value)
        if config.timeout and "connect_timeout" not in options:
            options["connect_timeout"] = int(config.timeout)

        self.logger.info("Connecting to PostgreSQL %s", config.descriptive_label())

        try:
            connection = driver.connect(config.url, **options)
        except Exception as exc:
            raise AdapterConnectionError("Failed to connect to PostgreSQL.") from exc

        self._state = PostgresConnectionState(connection, config, driver)
        try:
            connection.autocommit = bool(config.autocommit)
        except Exception as exc:
            self.close()
            raise AdapterConnectionError("Failed to configure the PostgreSQL connection.") from exc
        return connection

    def close(self) -> None:
        if self._state:
            try:
                self._state.connection.close()
            finally:
                self._state = None

    def read_metadata(self, connection: Any) -> DialectResolutionInfo:
        return read_postgres_metadata(connection)
