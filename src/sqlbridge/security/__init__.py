"""Credential handling for probe connection strings."""

from .dsns import DSNConfig, parse_dsn
from .redaction import REDACTED_VALUE, is_sensitive_key, redact_query_params

__all__ = [
    "DSNConfig",
    "parse_dsn",
    "REDACTED_VALUE",
    "is_sensitive_key",
    "redact_query_params",
]
