"""
Logging infrastructure for PktProbe
"""

from .logger import PktProbeLogger, get_logger, set_log_level

__all__ = [
    "PktProbeLogger",
    "get_logger",
    "set_log_level",
]
