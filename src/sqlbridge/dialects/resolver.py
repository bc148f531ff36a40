"""
Dialect resolution: walk an ordered chain of detectors over connection metadata
and return the first dialect that claims the database.

The built-in chain can be extended without touching this module, either by
calling :meth:`DialectResolver.register_detector` or by publishing a detector
under the ``sqlbridge.dialect_detectors`` entry-point group. Discovered
detectors run before the built-in ones.
"""

from __future__ import annotations

import os
from importlib.metadata import entry_points
from threading import RLock
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Optional

from ..utils import get_logger, resolve_threshold_ms, time_call
from .base import Dialect
from .cubrid import CUBRID, detect_cubrid
from .db2 import DB2, DB2_390, DB2_400, detect_db2, detect_db2_as400, detect_db2_zos
from .derby import DERBY, detect_derby
from .errors import DialectError, NoDialectError
from .h2 import H2, HSQL, detect_h2, detect_hsql
from .informix import INFORMIX, detect_informix
from .ingres import INGRES, INGRES9, detect_ingres
from .mysql import MARIADB, MYSQL, detect_mariadb, detect_mysql
from .oracle import ORACLE8I, ORACLE9I, ORACLE12C, detect_oracle
from .postgres import POSTGRES, POSTGRES10, detect_postgres
from .resolution import DialectResolutionInfo
from .sqlite import SQLITE, detect_sqlite
from .sqlserver import SQLSERVER, SQLSERVER2005, SQLSERVER2012, SYBASE_ASE, detect_sqlserver, detect_sybase

if TYPE_CHECKING:
    from ..adapters.base import ConnectionConfig, DatabaseAdapter


Detector = Callable[[DialectResolutionInfo], Optional[Dialect]]
MetadataReader = Callable[[Any], DialectResolutionInfo]

DETECTOR_ENTRY_POINT_GROUP = "sqlbridge.dialect_detectors"
DIALECT_ENV_VAR = "SQLBRIDGE_DIALECT"
PROBE_SLOW_MS_ENV_VAR = "SQLBRIDGE_PROBE_SLOW_MS"

# Order matters: vendor-specific variants come before generic prefix matches.
BUILTIN_DETECTORS: tuple[Detector, ...] = (
    detect_cubrid,
    detect_db2_as400,
    detect_db2_zos,
    detect_db2,
    detect_derby,
    detect_h2,
    detect_hsql,
    detect_informix,
    detect_ingres,
    detect_mariadb,
    detect_mysql,
    detect_oracle,
    detect_postgres,
    detect_sqlserver,
    detect_sqlite,
    detect_sybase,
)

DECLARED_DIALECTS: Dict[str, Dialect] = {
    dialect.name: dialect
    for dialect in (
        CUBRID,
        DB2,
        DB2_400,
        DB2_390,
        DERBY,
        H2,
        HSQL,
        INFORMIX,
        INGRES,
        INGRES9,
        MARIADB,
        MYSQL,
        ORACLE8I,
        ORACLE9I,
        ORACLE12C,
        POSTGRES,
        POSTGRES10,
        SQLSERVER,
        SQLSERVER2005,
        SQLSERVER2012,
        SQLITE,
        SYBASE_ASE,
    )
}


def dialect_for_name(name: str) -> Dialect:
    """
    Look up a declared dialect by its name, e.g. ``"mysql"`` or ``"oracle12c"``.
    """
    dialect = DECLARED_DIALECTS.get(name.strip().lower())
    if dialect is None:
        known = ", ".join(sorted(DECLARED_DIALECTS))
        raise NoDialectError(f"Unknown dialect '{name}'. Known dialects: {known}.", database_name=name)
    return dialect


def load_entry_point_detectors(group: str = DETECTOR_ENTRY_POINT_GROUP) -> List[Detector]:
    detectors: List[Detector] = []
    for entry_point in entry_points(group=group):
        try:
            detector = entry_point.load()
        except Exception as exc:
            raise DialectError(f"Failed to load dialect detector '{entry_point.name}'.") from exc
        if not callable(detector):
            raise DialectError(f"Dialect detector '{entry_point.name}' is not callable.")
        detectors.append(detector)
    return detectors


class DialectResolver:
    """
    Picks the :class:`Dialect` for a database from its connection metadata.

    Resolution never falls back to a generic dialect: when no detector claims
    the database a :class:`NoDialectError` is raised. A declared dialect, passed
    explicitly or through ``SQLBRIDGE_DIALECT``, short-circuits detection.
    """

    def __init__(
        self,
        detectors: Iterable[Detector] | None = None,
        *,
        declared: Dialect | str | None = None,
        discover: bool = True,
        probe_slow_ms: int | None = None,
    ) -> None:
        chain = list(BUILTIN_DETECTORS if detectors is None else detectors)
        if discover:
            chain[:0] = load_entry_point_detectors()
        self._detectors = chain
        self._declared = dialect_for_name(declared) if isinstance(declared, str) else declared
        self._cache: Dict[str, Dialect] = {}
        self._lock = RLock()
        self.logger = get_logger("dialects.resolver")
        try:
            self.probe_slow_ms = resolve_threshold_ms(
                PROBE_SLOW_MS_ENV_VAR, default=500, override=probe_slow_ms
            )
        except ValueError as exc:
            raise DialectError(str(exc)) from exc

    @classmethod
    def from_env(cls, **kwargs: Any) -> "DialectResolver":
        declared = os.getenv(DIALECT_ENV_VAR)
        if declared and declared.strip():
            kwargs.setdefault("declared", declared)
        return cls(**kwargs)

    @property
    def detectors(self) -> tuple[Detector, ...]:
        with self._lock:
            return tuple(self._detectors)

    @property
    def declared(self) -> Dialect | None:
        return self._declared

    def register_detector(self, detector: Detector, *, first: bool = False) -> None:
        if not callable(detector):
            raise TypeError("Dialect detector must be callable.")
        with self._lock:
            if first:
                self._detectors.insert(0, detector)
            else:
                self._detectors.append(detector)

    # ------------------------------------------------------------------ #
    # Resolution
    # ------------------------------------------------------------------ #
    def resolve_dialect(self, info: DialectResolutionInfo) -> Dialect:
        if self._declared is not None:
            self.logger.debug("Using declared dialect %s", self._declared.name)
            return self._declared
        for detector in self.detectors:
            dialect = detector(info)
            if dialect is not None:
                self.logger.info("Resolved dialect %s for %s", dialect.name, info.describe())
                return dialect
        self.logger.warning("No dialect detector matched %s", info.describe())
        raise NoDialectError(
            f"Cannot determine a dialect for {info.describe()}. "
            "Register a detector or declare a dialect explicitly.",
            database_name=info.database_name,
            driver_name=info.driver_name,
        )

    def resolve_connection(self, connection: Any, reader: MetadataReader | None = None) -> Dialect:
        """
        Read metadata from a live DB-API connection, close it, then resolve.

        The connection is closed on every path, including metadata failures.
        """
        if self._declared is not None:
            self._close(connection.close, failed=False)
            return self._declared
        info = self._probe(connection, reader, connection.close)
        return self.resolve_dialect(info)

    def resolve_for_adapter(self, adapter: "DatabaseAdapter", config: "ConnectionConfig") -> Dialect:
        """
        Resolve the dialect of the datasource described by ``config``.

        The result is cached per datasource URL, so only the first call opens a
        connection.
        """
        if self._declared is not None:
            return self._declared
        with self._lock:
            cached = self._cache.get(config.url)
        if cached is not None:
            return cached
        self.logger.info("Probing database metadata for %s", config.descriptive_label())
        connection = adapter.connect(config)
        info = self._probe(connection, adapter.read_metadata, adapter.close)
        dialect = self.resolve_dialect(info)
        with self._lock:
            return self._cache.setdefault(config.url, dialect)

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    # ------------------------------------------------------------------ #
    def _probe(
        self,
        connection: Any,
        reader: MetadataReader | None,
        close: Callable[[], Any],
    ) -> DialectResolutionInfo:
        failed = False
        try:
            with time_call("dialect.probe", self.logger, threshold_ms=self.probe_slow_ms):
                if reader is None:
                    from ..adapters import metadata_reader_for

                    reader = metadata_reader_for(connection)
                return reader(connection)
        except DialectError:
            failed = True
            raise
        except Exception as exc:
            failed = True
            raise DialectError(f"Failed to read connection metadata: {exc}") from exc
        finally:
            self._close(close, failed=failed)

    def _close(self, close: Callable[[], Any], *, failed: bool) -> None:
        try:
            close()
        except Exception as exc:
            if failed:
                self.logger.error("Failed to close connection after metadata probe failure", exc_info=True)
                return
            raise DialectError("Failed to close connection after reading metadata.") from exc


_default_resolver: DialectResolver | None = None
_default_lock = RLock()


def default_resolver() -> DialectResolver:
    global _default_resolver
    with _default_lock:
        if _default_resolver is None:
            _default_resolver = DialectResolver.from_env()
        return _default_resolver


def reset_default_resolver() -> None:
    global _default_resolver
    with _default_lock:
        _default_resolver = None


def resolve_dialect(info: DialectResolutionInfo) -> Dialect:
    return default_resolver().resolve_dialect(info)


def resolve_connection(connection: Any, reader: MetadataReader | None = None) -> Dialect:
    return default_resolver().resolve_connection(connection, reader)
