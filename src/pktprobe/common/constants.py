#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
PktProbe constant definitions
Central place for limits, file names and literals used across the package
"""


class PayloadConstants:
    """Payload template limits"""

    # Largest template decoded from a text file (one Ethernet MTU)
    MAX_TEMPLATE_SIZE = 1500
    # Largest frame accepted from a capture file
    MAX_FRAME_SIZE = 65536

    PORT_MIN = 0
    PORT_MAX = 0xFFFF
    PORT_MASK = 0xFFFF

    CHECKSUM_MASK = 0xFFFF
    CHECKSUM_FOLDS = 3


class TemplateConstants:
    """Text template syntax"""

    PROTOCOL_MARKER = "udp"
    SOURCE_KEYWORD = "source"
    COMMENT_PREFIXES = ("#", "/", ";")
    QUOTE = '"'
    ESCAPE = "\\"

    # Single-letter escapes mapped to their control bytes
    SIMPLE_ESCAPES = {
        "a": 0x07,
        "b": 0x08,
        "f": 0x0C,
        "n": 0x0A,
        "r": 0x0D,
        "t": 0x09,
        "v": 0x0B,
    }

    SELFTEST_LITERAL = '"\\t\\n\\r\\x1f\\123"'
    SELFTEST_EXPECTED = b"\t\n\r\x1f\x53"


class FileConstants:
    """File and path constants"""

    CONFIG_DIR_NAME = ".pktprobe"
    DEFAULT_CONFIG_FILE = "config.yaml"
    LOG_FILE_NAME = "pktprobe.log"
    LOG_MAX_SIZE = 10 * 1024 * 1024  # 10MB
    LOG_BACKUP_COUNT = 5

    TEMPLATE_ENCODING = "utf-8"


class NetworkConstants:
    """Network protocol constants"""

    UDP_HEADER_LENGTH = 8
    DNS_PORT = 53


ERROR_MESSAGES = {
    "EXPECTED_UDP": 'syntax error, expected "udp".',
    "EXPECTED_PORTS": "syntax error, expected port list",
    "EXPECTED_SOURCE_PORT": "expected source port",
    "PAYLOAD_TOO_LARGE": "payload exceeds {limit} bytes",
    "FILE_NOT_OPENABLE": "payloads: can't read from file '{filename}'",
}
