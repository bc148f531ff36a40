"""
Composite identifier values.

An :class:`Identifier` represents the key of a row that may be composed of one
or many named parts. Some parts might not be backed by a property of the entity
at all, for example a foreign key that is only known through the owning side of
a relationship.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterator, Mapping

from .identifiers import DefaultSqlIdentifier, SqlIdentifier

IdentifierConsumer = Callable[[SqlIdentifier, Any, type], None]


@dataclass(frozen=True)
class IdentifierPart:
    name: SqlIdentifier
    value: Any
    target_type: type

    def __post_init__(self) -> None:
        if self.name is None:
            raise ValueError("Name must not be None.")
        if not isinstance(self.name, SqlIdentifier):
            raise ValueError(f"Name must be a SqlIdentifier, got {self.name!r}.")
        if self.target_type is None:
            raise ValueError("Target type must not be None.")


class StringKeyedDict(dict):
    """
    Dictionary keyed by :class:`SqlIdentifier` that also answers look-ups by the
    bare string reference of a key.
    """

    def _resolve(self, key: Any) -> Any:
        if isinstance(key, str):
            for identifier in self.keys():
                if isinstance(identifier, DefaultSqlIdentifier) and identifier.name == key:
                    return identifier
        return key

    def __getitem__(self, key: Any) -> Any:
        return super().__getitem__(self._resolve(key))

    def __contains__(self, key: object) -> bool:
        return super().__contains__(self._resolve(key))

    def get(self, key: Any, default: Any = None) -> Any:
        return super().get(self._resolve(key), default)


class Identifier:
    """
    Immutable, ordered collection of ``(name, value, target_type)`` parts.
    """

    __slots__ = ("_parts",)

    _EMPTY: ClassVar["Identifier"]

    def __init__(self, parts: tuple[IdentifierPart, ...]) -> None:
        self._parts = parts

    @classmethod
    def empty(cls) -> "Identifier":
        return cls._EMPTY

    @classmethod
    def of(cls, name: SqlIdentifier, value: Any, target_type: type) -> "Identifier":
        return cls((IdentifierPart(name, value, target_type),))

    @classmethod
    def from_map(cls, values: Mapping[SqlIdentifier, Any]) -> "Identifier":
        """
        Build an identifier from ``name -> value`` pairs, deriving each part's
        type from its value (``object`` for ``None``).
        """
        if values is None:
            raise ValueError("Map must not be None.")
        if not values:
            return cls._EMPTY
        return cls(
            tuple(
                IdentifierPart(name, value, type(value) if value is not None else object)
                for name, value in values.items()
            )
        )

    def with_part(self, name: SqlIdentifier, value: Any, target_type: type) -> "Identifier":
        """
        Return a copy with ``name`` replaced in place, or appended when absent.
        """
        replacement = IdentifierPart(name, value, target_type)
        parts: list[IdentifierPart] = []
        overwritten = False
        for part in self._parts:
            if part.name == name:
                parts.append(replacement)
                overwritten = True
            else:
                parts.append(part)
        if not overwritten:
            parts.append(replacement)
        return Identifier(tuple(parts))

    @property
    def parts(self) -> tuple[IdentifierPart, ...]:
        return self._parts

    def to_map(self) -> StringKeyedDict:
        result = StringKeyedDict()
        self.for_each(lambda name, value, target_type: result.__setitem__(name, value))
        return result

    def for_each(self, consumer: IdentifierConsumer) -> None:
        if consumer is None:
            raise ValueError("Consumer must not be None.")
        for part in self._parts:
            consumer(part.name, part.value, part.target_type)

    def size(self) -> int:
        return len(self._parts)

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self) -> Iterator[IdentifierPart]:
        return iter(self._parts)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Identifier):
            return NotImplemented
        return self._parts == other._parts

    def __hash__(self) -> int:
        return hash(self._parts)

    def __repr__(self) -> str:
        return f"Identifier(parts={list(self._parts)!r})"


Identifier._EMPTY = Identifier(())
