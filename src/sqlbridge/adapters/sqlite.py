"""
SQLite connection provider built on the stdlib sqlite3 module.
"""

from __future__ import annotations

import platform
import sqlite3
from dataclasses import dataclass
from typing import Any

from ..dialects.resolution import DialectResolutionInfo
from ..utils import get_logger
from .base import AdapterConnectionError, ConnectionConfig, DatabaseAdapter


@dataclass(slots=True)
class SQLiteConnectionState:
    connection: sqlite3.Connection


def read_sqlite_metadata(connection: Any) -> DialectResolutionInfo:
    row = connection.execute("select sqlite_version()").fetchone()
    return DialectResolutionInfo.from_version_strings(
        "SQLite",
        row[0],
        driver_name="sqlite3",
        driver_version=platform.python_version(),
    )


class SQLiteAdapter(DatabaseAdapter):
    """
    Adapter wrapping the Python stdlib sqlite3 module.
    """

    def __init__(self) -> None:
        self._state: SQLiteConnectionState | None = None
        self.logger = get_logger("adapters.sqlite")

    def connect(self, config: ConnectionConfig) -> sqlite3.Connection:
        path = self._normalize_path(config.url)
        timeout = config.timeout if config.timeout is not None else 5.0
        self.logger.debug("Opening SQLite database %s", path)
        try:
            connection = sqlite3.connect(
                path,
                isolation_level=None if config.autocommit else "",
                timeout=timeout,
                check_same_thread=False,
            )
        except sqlite3.Error as exc:
            raise AdapterConnectionError(f"Failed to open SQLite database {path!r}.") from exc
        self._state = SQLiteConnectionState(connection)
        return connection

    def close(self) -> None:
        if self._state:
            self._state.connection.close()
            self._state = None

    def read_metadata(self, connection: Any) -> DialectResolutionInfo:
        return read_sqlite_metadata(connection)

    @staticmethod
    def _normalize_path(url: str) -> str:
        if url == "sqlite:///:memory:":
            return ":memory:"
        prefix = "sqlite:///"
        if url.startswith(prefix):
            return url[len(prefix) :]
        return url
