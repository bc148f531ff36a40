"""
SQL identifier value objects.

A :class:`SqlIdentifier` names a column, a table or a dotted path such as
``schema.table.column``. Rendering is deferred to an
:class:`~sqlbridge.core.processing.IdentifierProcessing` so that the same
identifier can be emitted for every dialect. Identifiers compare equal when
their canonical ANSI rendering is equal, which makes them usable as mapping keys
regardless of how they were constructed.
"""

from __future__ import annotations

from typing import Callable, ClassVar, Iterator

from .errors import UnsupportedIdentifierOperation
from .processing import IdentifierProcessing


class SqlIdentifier:
    """
    Base type for leaf, composite and empty identifiers.
    """

    __slots__ = ()

    EMPTY: ClassVar["SqlIdentifier"]

    @staticmethod
    def quoted(name: str) -> "SqlIdentifier":
        return DefaultSqlIdentifier(name, quoted=True)

    @staticmethod
    def unquoted(name: str) -> "SqlIdentifier":
        return DefaultSqlIdentifier(name, quoted=False)

    @staticmethod
    def from_parts(*parts: "SqlIdentifier") -> "SqlIdentifier":
        return CompositeSqlIdentifier(*parts)

    from_ = from_parts

    def get_reference(self, processing: IdentifierProcessing = IdentifierProcessing.NONE) -> str:
        raise NotImplementedError

    def to_sql(self, processing: IdentifierProcessing) -> str:
        raise NotImplementedError

    def transform(self, function: Callable[[str], str]) -> "SqlIdentifier":
        raise NotImplementedError

    def __iter__(self) -> Iterator["SqlIdentifier"]:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if isinstance(other, SqlIdentifier):
            # the empty sentinel only equals itself, whatever a leaf is named
            if self is SqlIdentifier.EMPTY or other is SqlIdentifier.EMPTY:
                return False
            return str(self) == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))


class DefaultSqlIdentifier(SqlIdentifier):
    """
    Single identifier tagged as quoted or unquoted.
    """

    __slots__ = ("_name", "_quoted")

    def __init__(self, name: str, *, quoted: bool) -> None:
        if not name:
            raise ValueError("A database object must have at least one name part.")
        self._name = name
        self._quoted = quoted

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_quoted(self) -> bool:
        return self._quoted

    def get_reference(self, processing: IdentifierProcessing = IdentifierProcessing.NONE) -> str:
        return self._name

    def to_sql(self, processing: IdentifierProcessing) -> str:
        normalized = processing.standardize_letter_case(self._name)
        return processing.quote(normalized) if self._quoted else normalized

    def transform(self, function: Callable[[str], str]) -> SqlIdentifier:
        if function is None:
            raise ValueError("Transformation function must not be None.")
        return DefaultSqlIdentifier(function(self._name), quoted=self._quoted)

    def __iter__(self) -> Iterator[SqlIdentifier]:
        yield self

    def __str__(self) -> str:
        return self.to_sql(IdentifierProcessing.ANSI) if self._quoted else self._name

    def __repr__(self) -> str:
        factory = "quoted" if self._quoted else "unquoted"
        return f"SqlIdentifier.{factory}({self._name!r})"


class CompositeSqlIdentifier(SqlIdentifier):
    """
    Ordered, non-empty chain of identifiers rendered joined with ``.``.
    """

    __slots__ = ("_parts",)

    def __init__(self, *parts: SqlIdentifier) -> None:
        if not parts:
            raise ValueError("SqlIdentifier parts must not be empty.")
        for part in parts:
            if part is None:
                raise ValueError("SqlIdentifier parts must not contain None elements.")
            if not isinstance(part, SqlIdentifier):
                raise ValueError(f"SqlIdentifier parts must be SqlIdentifier instances, got {part!r}.")
            if part is SqlIdentifier.EMPTY:
                raise ValueError("SqlIdentifier parts must not contain empty identifiers.")
        self._parts = tuple(parts)

    @property
    def parts(self) -> tuple[SqlIdentifier, ...]:
        return self._parts

    def get_reference(self, processing: IdentifierProcessing = IdentifierProcessing.NONE) -> str:
        raise UnsupportedIdentifierOperation(
            "Composite SQL identifiers can't be used for reference name retrieval."
        )

    def to_sql(self, processing: IdentifierProcessing) -> str:
        return ".".join(part.to_sql(processing) for part in self._parts)

    def transform(self, function: Callable[[str], str]) -> SqlIdentifier:
        raise UnsupportedIdentifierOperation("Composite SQL identifiers cannot be transformed.")

    def __iter__(self) -> Iterator[SqlIdentifier]:
        return iter(self._parts)

    def __len__(self) -> int:
        return len(self._parts)

    def __str__(self) -> str:
        return self.to_sql(IdentifierProcessing.ANSI)

    def __repr__(self) -> str:
        inner = ", ".join(repr(part) for part in self._parts)
        return f"SqlIdentifier.from_parts({inner})"


class _EmptySqlIdentifier(SqlIdentifier):
    __slots__ = ()

    def get_reference(self, processing: IdentifierProcessing = IdentifierProcessing.NONE) -> str:
        raise UnsupportedIdentifierOperation(
            "An empty SqlIdentifier can not be used to create column names."
        )

    def to_sql(self, processing: IdentifierProcessing) -> str:
        raise UnsupportedIdentifierOperation(
            "An empty SqlIdentifier can not be used to create SQL snippets."
        )

    def transform(self, function: Callable[[str], str]) -> SqlIdentifier:
        return self

    def __iter__(self) -> Iterator[SqlIdentifier]:
        return iter(())

    def __str__(self) -> str:
        return "<NULL-IDENTIFIER>"

    def __repr__(self) -> str:
        return "SqlIdentifier.EMPTY"


SqlIdentifier.EMPTY = _EmptySqlIdentifier()
