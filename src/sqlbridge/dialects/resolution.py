"""
Connection metadata snapshot consumed by dialect detectors.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

NO_VERSION: Final[int] = -9999

_VERSION_RE = re.compile(r"(\d+)(?:\.(\d+))?")


def interpret_version(value: int | None) -> int:
    """
    Map missing or negative version numbers to :data:`NO_VERSION`.
    """
    if value is None or value < 0:
        return NO_VERSION
    return value


def parse_version(text: str | None) -> tuple[int, int]:
    """
    Extract ``(major, minor)`` from a version string such as ``"10.6.12-MariaDB"``.
    """
    if not text:
        return NO_VERSION, NO_VERSION
    match = _VERSION_RE.search(text)
    if match is None:
        return NO_VERSION, NO_VERSION
    major = int(match.group(1))
    minor = int(match.group(2)) if match.group(2) is not None else NO_VERSION
    return major, minor


@dataclass(frozen=True)
class DialectResolutionInfo:
    """
    Subset of connection metadata needed to pick a dialect.
    """

    database_name: str
    database_major_version: int = NO_VERSION
    database_minor_version: int = NO_VERSION
    driver_name: str = ""
    driver_major_version: int = NO_VERSION
    driver_minor_version: int = NO_VERSION

    def __post_init__(self) -> None:
        for field_name in (
            "database_major_version",
            "database_minor_version",
            "driver_major_version",
            "driver_minor_version",
        ):
            object.__setattr__(self, field_name, interpret_version(getattr(self, field_name)))
        if self.database_name is None:
            object.__setattr__(self, "database_name", "")
        if self.driver_name is None:
            object.__setattr__(self, "driver_name", "")

    @classmethod
    def from_version_strings(
        cls,
        database_name: str,
        database_version: str | None,
        *,
        driver_name: str = "",
        driver_version: str | None = None,
    ) -> "DialectResolutionInfo":
        db_major, db_minor = parse_version(database_version)
        driver_major, driver_minor = parse_version(driver_version)
        return cls(
            database_name=database_name,
            database_major_version=db_major,
            database_minor_version=db_minor,
            driver_name=driver_name,
            driver_major_version=driver_major,
            driver_minor_version=driver_minor,
        )

    def describe(self) -> str:
        version = self._format(self.database_major_version, self.database_minor_version)
        label = self.database_name or "<unknown database>"
        if version:
            label += f" {version}"
        if self.driver_name:
            label += f" via {self.driver_name}"
        return label

    @staticmethod
    def _format(major: int, minor: int) -> str:
        if major == NO_VERSION:
            return ""
        if minor == NO_VERSION:
            return str(major)
        return f"{major}.{minor}"
