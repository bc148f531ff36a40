"""
Connection provider protocol and configuration for metadata probes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Protocol

from ..dialects.errors import DialectError
from ..dialects.resolution import DialectResolutionInfo
from ..security.dsns import DSNConfig, parse_dsn


class AdapterError(RuntimeError):
    """Base error for adapter-related failures."""


class AdapterConfigurationError(AdapterError):
    """Raised when configuration or required dependencies are invalid."""


class AdapterConnectionError(AdapterError):
    """Raised when establishing a connection fails."""


@dataclass
class SSLConfig:
    mode: str | None = None
    rootcert: str | None = None
    cert: str | None = None
    key: str | None = None
    ca: str | None = None
    check_hostname: bool | None = None

    def postgres_options(self) -> dict[str, Any]:
        options = {
            "sslmode": self.mode,
            "sslrootcert": self.rootcert,
            "sslcert": self.cert,
            "sslkey": self.key,
        }
        return {key: value for key, value in options.items() if value}

    def mysql_options(self) -> dict[str, Any]:
        ssl: dict[str, Any] = {
            key: value
            for key, value in (("ca", self.ca), ("cert", self.cert), ("key", self.key))
            if value
        }
        if self.check_hostname is not None:
            ssl["check_hostname"] = self.check_hostname
        return {"ssl": ssl} if ssl else {}

    def is_empty(self) -> bool:
        return not any(
            [self.mode, self.rootcert, self.cert, self.key, self.ca, self.check_hostname is not None]
        )


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

# DSN query keys mapped onto SSLConfig attributes
_SSL_QUERY_KEYS = {
    "sslmode": "mode",
    "sslrootcert": "rootcert",
    "sslcert": "cert",
    "sslkey": "key",
    "ssl_ca": "ca",
    "ssl_cert": "cert",
    "ssl_key": "key",
}


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise AdapterConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def _parse_number(value: str, *, key: str, kind: Callable[[str], Any]) -> Any:
    try:
        return kind(value)
    except ValueError as exc:
        raise AdapterConfigurationError(f"Invalid {kind.__name__} value for '{key}': {value!r}") from exc


def _parse_ssl(query: dict[str, str]) -> SSLConfig | None:
    ssl = SSLConfig()
    for query_key, attribute in _SSL_QUERY_KEYS.items():
        if query_key in query:
            setattr(ssl, attribute, query.pop(query_key))
    if "ssl_check_hostname" in query:
        ssl.check_hostname = _parse_bool(query.pop("ssl_check_hostname"), key="ssl_check_hostname")
    return None if ssl.is_empty() else ssl


@dataclass
class ConnectionConfig:
    """
    Normalized connection configuration for the short-lived probe connection.
    """

    url: str
    autocommit: bool = True
    timeout: float | None = None
    options: dict[str, Any] | None = None
    ssl: SSLConfig | None = None
    dsn: DSNConfig | None = None
    source: str | None = None

    @classmethod
    def from_dsn(cls, dsn: str, **kwargs: Any) -> "ConnectionConfig":
        """
        Build a connection config by parsing the DSN string.
        """

        try:
            parsed = parse_dsn(dsn)
        except ValueError as exc:
            raise AdapterConfigurationError(str(exc)) from exc
        query = dict(parsed.query)

        autocommit = None
        if "autocommit" in query:
            autocommit = _parse_bool(query.pop("autocommit"), key="autocommit")
        timeout = None
        if "timeout" in query:
            timeout = _parse_number(query.pop("timeout"), key="timeout", kind=float)
        ssl = _parse_ssl(query)
        if "connect_timeout" in query:
            query["connect_timeout"] = _parse_number(
                query["connect_timeout"], key="connect_timeout", kind=int
            )

        options: dict[str, Any] = dict(query)
        options.update(kwargs.pop("options", None) or {})

        autocommit = kwargs.pop("autocommit", autocommit)
        return cls(
            url=dsn,
            dsn=parsed,
            autocommit=True if autocommit is None else autocommit,
            timeout=kwargs.pop("timeout", timeout),
            options=options or None,
            ssl=kwargs.pop("ssl", ssl),
            **kwargs,
        )

    @classmethod
    def from_env(cls, env_var: str, **kwargs: Any) -> "ConnectionConfig":
        """
        Build a config from an environment variable containing a DSN.
        """

        value = os.getenv(env_var)
        if not value:
            raise AdapterConfigurationError(f"Environment variable {env_var} is not set")
        return cls.from_dsn(value, source=env_var, **kwargs)

    def redacted_dsn(self) -> str:
        if self.dsn:
            return self.dsn.redacted()
        return self.url

    def descriptive_label(self) -> str:
        redacted = self.redacted_dsn()
        if self.source:
            return f"{self.source} ({redacted})"
        return redacted


class DatabaseAdapter(Protocol):
    """
    Connection provider used to probe database metadata.
    """

    def connect(self, config: ConnectionConfig) -> Any:
        """
        Establish a connection handle using the supplied configuration.
        """

    def close(self) -> None:
        """
        Close underlying resources. Implementations should be idempotent.
        """

    def read_metadata(self, connection: Any) -> DialectResolutionInfo:
        """
        Snapshot the product name, driver name and versions of ``connection``.
        """


MetadataReader = Callable[[Any], DialectResolutionInfo]

_METADATA_READERS: Dict[str, MetadataReader] = {}


def register_metadata_reader(module_prefix: str, reader: MetadataReader) -> None:
    """
    Register ``reader`` for connections whose class lives in ``module_prefix``.
    """
    _METADATA_READERS[module_prefix] = reader


def metadata_reader_for(connection: Any) -> MetadataReader:
    module = type(connection).__module__ or ""
    root = module.split(".", 1)[0]
    reader = _METADATA_READERS.get(root)
    if reader is None:
        raise DialectError(
            f"No metadata reader registered for connections from module '{module}'."
        )
    return reader
