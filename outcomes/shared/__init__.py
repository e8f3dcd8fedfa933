"""
Shared utilities module.

Configuration, logging setup and the small helpers used by both the
outcome and presence types.
"""

from outcomes.shared.config import Settings, get_settings
from outcomes.shared.lazy import ValueOrFn, is_absent, resolve_default
from outcomes.shared.logging_config import configure_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "ValueOrFn",
    "is_absent",
    "resolve_default",
    "configure_logging",
    "get_logger",
]
