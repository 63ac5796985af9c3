#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
PktProbe exception definitions
All error types raised inside the package derive from PktProbeError
"""

from typing import Any, Dict, Optional


class PktProbeError(Exception):
    """Base exception for PktProbe"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert the exception into a plain dict"""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
        }


class ConfigurationError(PktProbeError):
    """Configuration related error"""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        super().__init__(message, error_code="CONFIG_ERROR", **kwargs)
        self.config_key = config_key


class ValidationError(PktProbeError):
    """Input validation error"""

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
        **kwargs,
    ):
        kwargs.setdefault("error_code", "VALIDATION_ERROR")
        super().__init__(message, **kwargs)
        self.field_name = field_name
        self.field_value = field_value


class PortSpecError(ValidationError):
    """Malformed port specification"""

    def __init__(self, message: str, spec: Optional[str] = None, **kwargs):
        super().__init__(message, field_name="ports", field_value=spec, error_code="PORT_SPEC_ERROR", **kwargs)
        self.spec = spec


class FileError(PktProbeError):
    """File access error"""

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        operation: Optional[str] = None,
        **kwargs,
    ):
        kwargs.setdefault("error_code", "FILE_ERROR")
        super().__init__(message, **kwargs)
        self.file_path = file_path
        self.operation = operation


class CaptureFileError(FileError):
    """Capture file cannot be opened or is not a pcap/pcapng file"""

    def __init__(self, message: str, file_path: Optional[str] = None, **kwargs):
        super().__init__(message, file_path=file_path, operation="read", error_code="CAPTURE_FILE_ERROR", **kwargs)


class TemplateSyntaxError(PktProbeError):
    """Syntax error in a text template file

    Rendered as ``<filename>:<line>: <message>``.
    """

    def __init__(self, message: str, filename: str = "<string>", line_number: int = 0, **kwargs):
        super().__init__(message, error_code="TEMPLATE_SYNTAX_ERROR", **kwargs)
        self.filename = filename
        self.line_number = line_number

    def __str__(self) -> str:
        return f"{self.filename}:{self.line_number}: {self.message}"
