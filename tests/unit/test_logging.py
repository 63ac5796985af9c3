"""
Logging manager tests
"""

import logging

from pktprobe.common.enums import LogLevel
from pktprobe.infrastructure.logging import PktProbeLogger, get_logger, set_log_level


class TestPktProbeLogger:
    def test_singleton(self):
        assert PktProbeLogger() is PktProbeLogger()

    def test_component_logger_name(self):
        logger = get_logger("payloads.template")
        assert logger.name == "pktprobe.payloads.template"
        assert get_logger("payloads.template") is logger

    def test_root_logger_has_console_handler(self):
        root = logging.getLogger("pktprobe")
        assert any(
            isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler)
            for handler in root.handlers
        )

    def test_set_log_level(self):
        logger = get_logger("tests.level")
        original = logger.level
        try:
            set_log_level(LogLevel.WARNING)
            assert logger.level == logging.WARNING
        finally:
            set_log_level(LogLevel.DEBUG)
            logger.setLevel(original)
