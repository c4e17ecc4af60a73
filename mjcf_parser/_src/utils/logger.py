# SPDX-FileCopyrightText: Copyright (c) 2025 The mjcf-parser Developers
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
MJCF Parser: Utilities: Message Logging
"""

from __future__ import annotations

import logging
import threading
from enum import IntEnum
from typing import ClassVar

###
# Module interface
###

__all__ = [
    "LOGGER_NAME",
    "LogLevel",
    "Logger",
    "debug",
    "error",
    "get_default_logger",
    "info",
    "parse_log_level",
    "reset_log_level",
    "set_log_header",
    "set_log_level",
    "warning",
]


LOGGER_NAME = "mjcf_parser"
"""Name of the package logger in the :mod:`logging` hierarchy."""


class LogLevel(IntEnum):
    """Enumeration for log levels."""

    TRACE = logging.DEBUG - 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


_LEVEL_NAMES: dict[str, LogLevel] = {
    "trace": LogLevel.TRACE,
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "warn": LogLevel.WARNING,
    "warning": LogLevel.WARNING,
    "error": LogLevel.ERROR,
    "critical": LogLevel.CRITICAL,
}


def parse_log_level(level: str) -> LogLevel:
    """
    Parse a case-insensitive log level name.

    Args:
        level: One of ``trace``, ``debug``, ``info``, ``warn``, ``error`` or ``critical``.

    Raises:
        ValueError: If the name is not a known level.
    """
    key = level.strip().lower()
    if key not in _LEVEL_NAMES:
        raise ValueError(
            f"Unknown log level {level}. Must be one of [trace, debug, info, warn, error, critical]"
        )
    return _LEVEL_NAMES[key]


class Logger(logging.Formatter):
    """Package logger with color highlighting for log levels."""

    HEADER = "[MJCF]"
    HEADERCOL = "\x1b[38;5;13m"

    WHITE = "\x1b[37m"
    GREY = "\x1b[38;20m"
    RED = "\x1b[31;20m"
    BOLD_RED = "\x1b[31;1m"
    BLUE = "\x1b[34;20m"
    YELLOW = "\x1b[33;20m"
    RESET = "\x1b[0m"

    LINE_FORMAT = "[%(asctime)s][%(filename)s:%(lineno)d][%(levelname)s]: %(message)s"
    """Line format for the log messages, including timestamp, filename, line number, log level, and message."""

    COLORS: ClassVar[dict[int, str]] = {
        LogLevel.TRACE: GREY,
        LogLevel.DEBUG: BLUE,
        LogLevel.INFO: WHITE,
        LogLevel.WARNING: YELLOW,
        LogLevel.ERROR: RED,
        LogLevel.CRITICAL: BOLD_RED,
    }
    """Dictionary mapping log levels to their respective line colors."""

    def __init__(self):
        """Attach a colored stream handler to the package logger."""
        super().__init__()

        logging.addLevelName(LogLevel.TRACE, "TRACE")

        self._streamhandler = logging.StreamHandler()
        self._streamhandler.setFormatter(self)

        # Only the package logger is configured; the root logger is left to the application.
        log = self.get()
        log.addHandler(self._streamhandler)
        log.setLevel(LogLevel.WARNING)
        log.propagate = True

    def format(self, record):
        """Format the log record with the appropriate color based on the log level."""
        color = self.COLORS.get(record.levelno, self.WHITE)
        log_fmt = self.HEADERCOL + Logger.HEADER + self.RESET + color + self.LINE_FORMAT + self.RESET
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)

    def get(self) -> logging.Logger:
        """Get the package logger instance."""
        return logging.getLogger(LOGGER_NAME)


###
# Globals
###


LOGGER: Logger | None = None
"""Global logger instance for the package."""

_LOGGER_LOCK = threading.Lock()
"""Serializes the lazy creation of :data:`LOGGER`, so the stream handler is attached once."""


###
# Configurations
###


def get_default_logger() -> logging.Logger:
    """Initialize the global logger instance."""
    global LOGGER  # noqa: PLW0603
    with _LOGGER_LOCK:
        if LOGGER is None:
            LOGGER = Logger()
    return LOGGER.get()


def set_log_level(level: LogLevel | int | str):
    """Set the logging level for the default logger."""
    if isinstance(level, str):
        level = parse_log_level(level)
    get_default_logger().setLevel(level)
    get_default_logger().debug(f"Log level set to: {logging.getLevelName(level)}")


def reset_log_level():
    """Reset the logging level for the default logger to WARNING."""
    get_default_logger().setLevel(LogLevel.WARNING)
    get_default_logger().debug(f"Log level reset to: {logging.getLevelName(LogLevel.WARNING)}")


def set_log_header(header: str):
    """Set the header for the logger."""
    Logger.HEADER = header


###
# Logging
###


def debug(msg: str, *args, **kwargs):
    """Log a debug message."""
    get_default_logger().debug(msg, *args, **kwargs, stacklevel=2)


def info(msg: str, *args, **kwargs):
    """Log an info message."""
    get_default_logger().info(msg, *args, **kwargs, stacklevel=2)


def warning(msg: str, *args, **kwargs):
    """Log a warning message."""
    get_default_logger().warning(msg, *args, **kwargs, stacklevel=2)


def error(msg: str, *args, **kwargs):
    """Log an error message."""
    get_default_logger().error(msg, *args, **kwargs, stacklevel=2)
