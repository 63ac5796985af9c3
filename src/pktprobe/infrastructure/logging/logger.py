#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
PktProbe logging system
Configures the ``pktprobe`` logger hierarchy once per process
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Optional

from ...common.constants import FileConstants
from ...common.enums import LogLevel
from ...common.exceptions import ConfigurationError


class PktProbeLogger:
    """Logging manager for PktProbe"""

    _instance: Optional["PktProbeLogger"] = None
    _initialized: bool = False

    def __new__(cls) -> "PktProbeLogger":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if PktProbeLogger._initialized:
            return

        self._loggers: Dict[str, logging.Logger] = {}
        self._setup_root_logger()
        PktProbeLogger._initialized = True

    def _setup_root_logger(self):
        """Set up the package root logger"""
        root_logger = logging.getLogger("pktprobe")
        root_logger.setLevel(logging.DEBUG)

        if root_logger.handlers:
            return

        console_level = logging.INFO
        log_to_file = True
        max_bytes = FileConstants.LOG_MAX_SIZE
        backup_count = FileConstants.LOG_BACKUP_COUNT
        try:
            from ...config import get_app_config

            config = get_app_config()
            console_level = getattr(logging, config.logging.log_level, logging.INFO)
            log_to_file = config.logging.log_to_file
            max_bytes = config.logging.log_file_max_size
            backup_count = config.logging.log_backup_count
        except ConfigurationError as e:
            sys.stderr.write(f"pktprobe: {e}; using default logging settings\n")

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(console_handler)

        if log_to_file:
            try:
                log_dir = Path.home() / FileConstants.CONFIG_DIR_NAME
                log_dir.mkdir(exist_ok=True)

                file_handler = RotatingFileHandler(
                    log_dir / FileConstants.LOG_FILE_NAME,
                    maxBytes=max_bytes,
                    backupCount=backup_count,
                    encoding="utf-8",
                )
                file_handler.setLevel(logging.DEBUG)
                file_handler.setFormatter(
                    logging.Formatter(
                        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                        datefmt="%Y-%m-%d %H:%M:%S",
                    )
                )
                root_logger.addHandler(file_handler)
            except OSError as e:
                # Console logging still works without the file
                root_logger.warning(f"Failed to setup file logging: {e}")

        self._loggers["root"] = root_logger

    def get_logger(self, name: str) -> logging.Logger:
        """Return the ``pktprobe.<name>`` logger"""
        if name not in self._loggers:
            self._loggers[name] = logging.getLogger(f"pktprobe.{name}")
        return self._loggers[name]

    def set_level(self, level: LogLevel):
        """Set the level of every managed logger and the console handler"""
        for logger in self._loggers.values():
            logger.setLevel(level.value)
        for handler in logging.getLogger("pktprobe").handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, RotatingFileHandler):
                handler.setLevel(level.value)


_logger_manager = PktProbeLogger()


def get_logger(name: str = "root") -> logging.Logger:
    """Convenience accessor for component loggers"""
    return _logger_manager.get_logger(name)


def set_log_level(level: LogLevel):
    _logger_manager.set_level(level)

