"""
Quoting and letter-casing rules applied when rendering identifiers to SQL.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


@dataclass(frozen=True)
class Quoting:
    """
    Prefix/suffix pair wrapped around an identifier.

    ``Quoting('"')`` uses the same character on both sides, ``Quoting("[", "]")``
    supports bracket-style quoting.
    """

    prefix: str
    suffix: str | None = None

    ANSI: ClassVar["Quoting"]
    NONE: ClassVar["Quoting"]

    def __post_init__(self) -> None:
        if self.suffix is None:
            object.__setattr__(self, "suffix", self.prefix)

    def apply(self, identifier: str) -> str:
        return f"{self.prefix}{identifier}{self.suffix}"


Quoting.ANSI = Quoting('"')
Quoting.NONE = Quoting("")


class LetterCasing(Enum):
    UPPER = "upper"
    LOWER = "lower"
    AS_IS = "as_is"

    def apply(self, identifier: str) -> str:
        if self is LetterCasing.UPPER:
            return identifier.upper()
        if self is LetterCasing.LOWER:
            return identifier.lower()
        return identifier


@dataclass(frozen=True)
class IdentifierProcessing:
    """
    Rendering rule for identifiers: letter casing first, then quoting.

    Casing runs before quoting so the quote characters themselves are never
    case-folded. Embedded quote characters are not escaped.
    """

    quoting: Quoting
    letter_casing: LetterCasing

    ANSI: ClassVar["IdentifierProcessing"]
    NONE: ClassVar["IdentifierProcessing"]

    @classmethod
    def create(cls, quoting: Quoting, letter_casing: LetterCasing) -> "IdentifierProcessing":
        return cls(quoting, letter_casing)

    def quote(self, identifier: str) -> str:
        return self.quoting.apply(identifier)

    def standardize_letter_case(self, identifier: str) -> str:
        return self.letter_casing.apply(identifier)

    def process(self, identifier: str) -> str:
        return self.quote(self.standardize_letter_case(identifier))


IdentifierProcessing.ANSI = IdentifierProcessing(Quoting.ANSI, LetterCasing.UPPER)
IdentifierProcessing.NONE = IdentifierProcessing(Quoting.NONE, LetterCasing.AS_IS)
