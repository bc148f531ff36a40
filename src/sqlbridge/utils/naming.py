"""
Naming utilities for sqlbridge: SQL alias generation for joined tables.
"""

from __future__ import annotations

import re
from typing import Final

ALIAS_TRUNCATE_LENGTH: Final[int] = 10
ALIAS_POOL_SIZE: Final[int] = 40

_ILLEGAL_ALIAS_CHARS_RE = re.compile(r"[^a-z0-9_]")


def _alias_suffix(unique: int) -> str:
    return f"{unique}_"


ALIAS_SUFFIXES: Final[tuple[str, ...]] = tuple(_alias_suffix(i) for i in range(ALIAS_POOL_SIZE))


def alias_suffix(unique: int) -> str:
    """
    Return the ``"<n>_"`` suffix for ``unique``, from the pool when possible.
    """
    if unique < 0:
        raise ValueError(f"Alias index must not be negative, got {unique}.")
    if unique < ALIAS_POOL_SIZE:
        return ALIAS_SUFFIXES[unique]
    return _alias_suffix(unique)


def unqualify(qualified_name: str) -> str:
    return qualified_name.rsplit(".", 1)[-1]


def unqualify_entity_name(entity_name: str) -> str:
    result = unqualify(entity_name)
    slash_pos = result.find("/")
    if slash_pos > 0:
        result = result[: slash_pos - 1]
    return result


def truncate(value: str, length: int) -> str:
    return value[:length]


def clean_alias(alias: str) -> str:
    """
    Drop leading characters until the alias starts with a letter.
    """
    for index, char in enumerate(alias):
        if char.isalpha():
            return alias[index:]
    # no letter at all
    return "x" + alias


def generate_alias_root(description: str) -> str:
    root = (
        truncate(unqualify_entity_name(description), ALIAS_TRUNCATE_LENGTH)
        .lower()
        .replace("/", "_")
        .replace("$", "_")
    )
    root = clean_alias(_ILLEGAL_ALIAS_CHARS_RE.sub("_", root))
    if root[-1].isdigit():
        # keeps "t1" + "2_" from reading like "t" + "12_"
        return root + "x"
    return root


def generate_alias(description: str, unique: int | None = None) -> str:
    """
    Derive a short SQL alias from ``description`` such as an entity or table name.

    ``unique`` distinguishes repeated joins of the same description within one
    statement; for a fixed description every index yields a different alias.
    Aliases always match ``^[a-z][a-z0-9_]*$``.
    """
    root = generate_alias_root(description)
    if unique is None:
        return root + "_"
    return root + alias_suffix(unique)
