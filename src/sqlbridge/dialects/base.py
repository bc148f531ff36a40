"""
Dialect strategy interfaces describing vendor-specific SQL behaviors.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol

from ..core.identifiers import SqlIdentifier
from ..core.processing import IdentifierProcessing
from .errors import DialectError
from .identity import NO_IDENTITY_COLUMNS, IdentityColumnSupport

_SELECT_RE = re.compile(r"^\s*select(\s+distinct)?\b", re.IGNORECASE)


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Feature flags describing backend capabilities.
    """

    supports_returning: bool = False
    supports_sequences: bool = False
    supports_offset: bool = True
    supports_schema_namespaces: bool = True


class Dialect(Protocol):
    """
    Strategy interface consumed by the query compiler and statement layers.
    """

    @property
    def name(self) -> str: ...

    @property
    def capabilities(self) -> DialectCapabilities: ...

    @property
    def identifier_processing(self) -> IdentifierProcessing: ...

    @property
    def identity_column_support(self) -> IdentityColumnSupport: ...

    def quote_identifier(self, identifier: str) -> str: ...

    def render(self, identifier: SqlIdentifier) -> str: ...

    def format_table(self, table_name: str) -> str: ...

    def limit_clause(self, limit: int | None, offset: int | None) -> str: ...

    def apply_limit(self, sql: str, limit: int | None, offset: int | None) -> str: ...

    def sequence_next_value_string(self, sequence_name: str) -> str | None: ...


def offset_fetch_clause(limit: int | None, offset: int | None) -> str:
    """
    SQL:2008 ``OFFSET ... ROWS FETCH ... ROWS ONLY`` pagination.
    """
    parts: list[str] = []
    if offset is not None:
        parts.append(f"OFFSET {offset} ROWS")
    if limit is not None:
        keyword = "NEXT" if offset is not None else "FIRST"
        parts.append(f"FETCH {keyword} {limit} ROWS ONLY")
    return " ".join(parts)


def insert_after_select(sql: str, fragment: str) -> str:
    """
    Insert ``fragment`` right after the leading ``select`` (or ``select distinct``).
    """
    match = _SELECT_RE.match(sql)
    if match is None:
        raise DialectError("Pagination requires a statement starting with SELECT.")
    return f"{sql[: match.end()]} {fragment}{sql[match.end():]}"


class AbstractDialect:
    """
    Defaults shared by every dialect: ANSI identifier processing, no identity
    columns, no sequences, ``LIMIT``/``OFFSET`` pagination.

    Dialects carry no per-instance state, so one instance per vendor variant is
    shared by every statement compiled against a datasource.
    """

    name: str = "generic"
    capabilities: DialectCapabilities = DialectCapabilities()
    identifier_processing: IdentifierProcessing = IdentifierProcessing.ANSI
    identity_column_support: IdentityColumnSupport = NO_IDENTITY_COLUMNS

    def quote_identifier(self, identifier: str) -> str:
        return self.identifier_processing.quote(identifier)

    def render(self, identifier: SqlIdentifier) -> str:
        return identifier.to_sql(self.identifier_processing)

    def format_table(self, table_name: str) -> str:
        if self.capabilities.supports_schema_namespaces and "." in table_name:
            identifier = SqlIdentifier.from_parts(
                *(SqlIdentifier.quoted(part) for part in table_name.split("."))
            )
        else:
            identifier = SqlIdentifier.quoted(table_name)
        return self.render(identifier)

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        parts: list[str] = []
        if limit is not None:
            parts.append(f"LIMIT {limit}")
        if offset is not None:
            parts.append(f"OFFSET {offset}")
        return " ".join(parts)

    def apply_limit(self, sql: str, limit: int | None, offset: int | None) -> str:
        self._check_offset(offset)
        clause = self.limit_clause(limit, offset)
        if not clause:
            return sql
        return f"{sql} {clause}"

    def sequence_next_value_string(self, sequence_name: str) -> str | None:
        return None

    def _check_offset(self, offset: int | None) -> None:
        if offset and not self.capabilities.supports_offset:
            raise DialectError(f"Dialect '{self.name}' does not support offsets.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
