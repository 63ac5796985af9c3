"""
Configuration module
"""

from .settings import (
    AppConfig,
    LoggingSettings,
    PayloadSettings,
    get_app_config,
    reload_app_config,
)

__all__ = [
    "AppConfig",
    "PayloadSettings",
    "LoggingSettings",
    "get_app_config",
    "reload_app_config",
]
