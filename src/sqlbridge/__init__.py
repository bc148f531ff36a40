"""
sqlbridge public package initialization.

Exposes dialect resolution, identifier rendering, composite identifiers and
alias generation for SQL-emitting components.
"""

from .core import (  # noqa: F401
    Identifier,
    IdentifierProcessing,
    LetterCasing,
    Quoting,
    SqlIdentifier,
    UnsupportedIdentifierOperation,
)
from .dialects import (  # noqa: F401
    NO_VERSION,
    Dialect,
    DialectError,
    DialectResolutionInfo,
    DialectResolver,
    IdentityColumnSupport,
    NoDialectError,
    SqlType,
    dialect_for_name,
    resolve_connection,
    resolve_dialect,
)
from .utils.naming import generate_alias  # noqa: F401

__all__ = [
    "Identifier",
    "IdentifierProcessing",
    "LetterCasing",
    "Quoting",
    "SqlIdentifier",
    "UnsupportedIdentifierOperation",
    "NO_VERSION",
    "Dialect",
    "DialectError",
    "DialectResolutionInfo",
    "DialectResolver",
    "IdentityColumnSupport",
    "NoDialectError",
    "SqlType",
    "dialect_for_name",
    "resolve_connection",
    "resolve_dialect",
    "generate_alias",
]
