"""
PostgreSQL dialect implementations.
"""

from __future__ import annotations

from ..core.processing import IdentifierProcessing, LetterCasing, Quoting
from .base import AbstractDialect, Dialect, DialectCapabilities
from .identity import POSTGRES_IDENTITY, POSTGRES_SERIAL_IDENTITY
from .resolution import NO_VERSION, DialectResolutionInfo


class PostgresDialect(AbstractDialect):
    """
    PostgreSQL before 10: ``serial``/``bigserial`` keys backed by a sequence.
    """

    name = "postgresql"
    capabilities = DialectCapabilities(
        supports_returning=True,
        supports_sequences=True,
        supports_schema_namespaces=True,
    )
    identifier_processing = IdentifierProcessing(Quoting.ANSI, LetterCasing.LOWER)
    identity_column_support = POSTGRES_SERIAL_IDENTITY

    def sequence_next_value_string(self, sequence_name: str) -> str | None:
        return f"select nextval('{sequence_name}')"


class Postgres10Dialect(PostgresDialect):
    """
    PostgreSQL 10 and later with standard identity columns.
    """

    name = "postgresql10"
    identity_column_support = POSTGRES_IDENTITY


POSTGRES = PostgresDialect()
POSTGRES10 = Postgres10Dialect()


def detect_postgres(info: DialectResolutionInfo) -> Dialect | None:
    if info.database_name != "PostgreSQL":
        return None
    major = info.database_major_version
    if major != NO_VERSION and major < 10:
        return POSTGRES
    return POSTGRES10
