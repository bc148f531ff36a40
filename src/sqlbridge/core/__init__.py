"""
Core value types: identifier processing, SQL identifiers and composite keys.
"""

from .composite import Identifier, IdentifierPart, StringKeyedDict
from .errors import UnsupportedIdentifierOperation
from .identifiers import CompositeSqlIdentifier, DefaultSqlIdentifier, SqlIdentifier
from .processing import IdentifierProcessing, LetterCasing, Quoting

__all__ = [
    "CompositeSqlIdentifier",
    "DefaultSqlIdentifier",
    "Identifier",
    "IdentifierPart",
    "IdentifierProcessing",
    "LetterCasing",
    "Quoting",
    "SqlIdentifier",
    "StringKeyedDict",
    "UnsupportedIdentifierOperation",
]
