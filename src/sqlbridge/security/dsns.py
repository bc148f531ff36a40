"""DSN parsing for probe connections, with credentials kept out of log output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import parse_qsl, unquote, urlencode, urlsplit

from .redaction import REDACTED_VALUE, redact_query_params


@dataclass
class DSNConfig:
    scheme: str
    username: Optional[str]
    password: Optional[str]
    host: Optional[str]
    port: Optional[int]
    database: Optional[str]
    path: str
    query: dict[str, str] = field(default_factory=dict)

    @property
    def backend(self) -> str:
        """
        Scheme without a driver suffix: ``postgresql+psycopg`` -> ``postgresql``.
        """
        return self.scheme.split("+", 1)[0].lower()

    def redacted(self) -> str:
        """
        Return the DSN with the password and sensitive query values masked.
        """

        netloc = ""
        if self.username:
            netloc += self.username
            if self.password:
                netloc += f":{REDACTED_VALUE}"
            netloc += "@"
        if self.host:
            netloc += self.host
        if self.port:
            netloc += f":{self.port}"

        # urlencode would percent-encode the mask
        query = redact_query_params(self.query)
        query_string = urlencode(query, safe="*") if query else ""

        result = f"{self.scheme}://{netloc}{self.path}"
        if query_string:
            result += f"?{query_string}"
        return result


def parse_dsn(dsn: str) -> DSNConfig:
    """
    Split ``dsn`` into its parts. Raises ``ValueError`` when no scheme is present.
    """
    parsed = urlsplit(dsn)
    if not parsed.scheme:
        raise ValueError(f"DSN is missing a scheme: {dsn!r}")
    return DSNConfig(
        scheme=parsed.scheme,
        username=unquote(parsed.username) if parsed.username else None,
        password=unquote(parsed.password) if parsed.password else None,
        host=parsed.hostname,
        port=parsed.port,
        database=parsed.path.lstrip("/") or None,
        path=parsed.path or "",
        query=dict(parse_qsl(parsed.query)),
    )
