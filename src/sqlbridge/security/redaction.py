"""Masking of credential-bearing DSN query parameters."""

from __future__ import annotations

REDACTED_VALUE = "***"

_SENSITIVE_KEY_TOKENS = (
    "password",
    "passwd",
    "pwd",
    "secret",
    "token",
    "apikey",
    "access_key",
    "private_key",
    "sslkey",
    "sslcert",
    "sslrootcert",
    "sslca",
)


def _compact(value: str) -> str:
    return "".join(ch for ch in value if ch.isalnum())


def is_sensitive_key(key: str) -> bool:
    """
    True when ``key`` names a credential, ignoring case and separators.
    """
    compact = _compact(key.lower())
    return any(_compact(token) in compact for token in _SENSITIVE_KEY_TOKENS)


def redact_query_params(query: dict[str, str]) -> dict[str, str]:
    return {key: REDACTED_VALUE if is_sensitive_key(key) else val for key, val in query.items()}
