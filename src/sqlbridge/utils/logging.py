"""Structured logging helpers for sqlbridge."""

from __future__ import annotations

import logging
import os
import time
import uuid
from contextvars import ContextVar
from typing import Any

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id()
        return True


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger("sqlbridge")
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(correlation_id)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter())
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"sqlbridge.{name}")


def get_correlation_id() -> str:
    cid = _correlation_id.get()
    if cid is None:
        cid = str(uuid.uuid4())
        _correlation_id.set(cid)
    return cid


def resolve_threshold_ms(env_var: str, *, default: int, override: int | None = None) -> int:
    """
    Pick a slow-operation threshold: explicit override, then environment, then default.
    """
    if override is not None:
        return override
    raw = os.getenv(env_var)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid integer value for '{env_var}': {raw!r}") from exc
    if value < 0:
        raise ValueError(f"'{env_var}' must not be negative, got {value}.")
    return value


def time_call(name: str, logger: logging.Logger, *, threshold_ms: int = 100, **context: Any):
    start = time.monotonic()

    class Timer:
        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            elapsed_ms = (time.monotonic() - start) * 1000
            level = logging.WARNING if elapsed_ms >= threshold_ms else logging.DEBUG
            extra = dict(context, elapsed_ms=elapsed_ms)
            logger.log(level, "%s took %.2fms", name, elapsed_ms, extra=extra)

    return Timer()
