"""
Utility helpers shared across sqlbridge packages.
"""

from .logging import configure_logging, get_logger, resolve_threshold_ms, time_call
from .naming import generate_alias

__all__ = ["configure_logging", "generate_alias", "get_logger", "resolve_threshold_ms", "time_call"]
