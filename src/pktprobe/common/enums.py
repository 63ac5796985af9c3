#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
PktProbe Enumeration Definitions
"""

from enum import Enum, IntEnum


class FrameKind(Enum):
    """Classification of a captured frame by the preprocessor"""

    UDP = "udp"
    DNS = "dns"  # DNS over UDP
    TCP = "tcp"
    ICMP = "icmp"
    IP = "ip"  # IP with some other transport


class SourceKind(Enum):
    """Where a batch of payloads came from"""

    BUILTIN = "builtin"
    TEMPLATE = "template"
    CAPTURE = "capture"


class LogLevel(IntEnum):
    """Log level enumeration"""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
