"""
logging_config.py — Centralized Logging Configuration for the Shop Domain

This module configures unified logging behavior for the whole package and
provides the logger capability consumed by the payment processor.

Features:
    • Console output, plus an optional log file
    • Process ID tagging for multi-process visibility
    • Standardized log format for all modules
    • ConsoleLogger adapter exposing log_info / log_error

Configuration (environment variables):
    SHOP_LOG_LEVEL: Log level name (default: INFO)
    SHOP_LOG_FILE:  Path of an additional log file (default: console only)
"""

import logging
import os
import sys
from typing import Optional, Protocol

LOG_LEVEL = os.environ.get("SHOP_LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get("SHOP_LOG_FILE")

LOG_FORMAT = '%(asctime)s - %(levelname)s - [PID:%(process)d] - %(message)s'


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None):
    """
    Configures the global logging system for the application.

    The configuration includes:
        - Log level: SHOP_LOG_LEVEL or INFO
        - Log format: timestamp, log level, process ID, and message
        - Output destinations:
            1. Console (stdout)
            2. File: SHOP_LOG_FILE, if configured

    Args:
        level (str, optional): Overrides the configured log level.
        log_file (str, optional): Overrides the configured log file.
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    log_file = log_file or LOG_FILE
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def get_logger(name):
    """
    Returns a logger instance for a given module or component name.

    Args:
        name (str): The logger name, typically the module's __name__.

    Returns:
        logging.Logger: A logger that follows the global format and handlers.
    """
    return logging.getLogger(name)


class Logger(Protocol):
    """Capability required by collaborators that report what they are doing."""

    def log_info(self, message: str) -> None: ...

    def log_error(self, message: str, error: Optional[BaseException] = None) -> None: ...


class ConsoleLogger:
    """
    Logger implementation writing through the configured logging handlers.

    Errors are followed by the exception message and, when the exception
    carries one, its stack trace.
    """

    def __init__(self, name: str = "shop_domain"):
        self._log = get_logger(name)

    def log_info(self, message: str) -> None:
        self._log.info(message)

    def log_error(self, message: str, error: Optional[BaseException] = None) -> None:
        self._log.error(message)

        if error is not None:
            self._log.error(f"Exception: {error}", exc_info=error)
