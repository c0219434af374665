"""
Shared helpers for simple_logger.
"""

from .datetime_helpers import to_iso_utc_millis, utc_now
from .logging_patterns import get_logger
from .time_provider import get_clock

__all__ = ["get_logger", "get_clock", "to_iso_utc_millis", "utc_now"]
