"""
Common module for PktProbe
Constants, enums and exception definitions shared by every component
"""

from .constants import (
    ERROR_MESSAGES,
    FileConstants,
    NetworkConstants,
    PayloadConstants,
    TemplateConstants,
)
from .enums import FrameKind, LogLevel, SourceKind
from .exceptions import (
    CaptureFileError,
    ConfigurationError,
    FileError,
    PktProbeError,
    PortSpecError,
    TemplateSyntaxError,
    ValidationError,
)

__all__ = [
    "PayloadConstants",
    "TemplateConstants",
    "FileConstants",
    "NetworkConstants",
    "ERROR_MESSAGES",
    "FrameKind",
    "SourceKind",
    "LogLevel",
    "PktProbeError",
    "ConfigurationError",
    "ValidationError",
    "PortSpecError",
    "FileError",
    "CaptureFileError",
    "TemplateSyntaxError",
]
