"""
bootstrap/logging_setup.py - Logging configuration

Library modules only create loggers; handlers are attached here, and only
the CLI entry point calls configure_logging().
"""

from __future__ import annotations
from typing import Optional
import logging
import sys

from .config import LoggingConfig

_HANDLER_ATTR = "_closurecost_handler"


def configure_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    fmt: Optional[str] = None,
) -> None:
    """
    Configure root logging for command-line use.

    Log records go to stderr so that stdout carries only command output.
    Calling this again replaces the handlers it installed earlier.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        fmt: Optional format string
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(fmt or LoggingConfig.format)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    setattr(console_handler, _HANDLER_ATTR, True)

    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        setattr(file_handler, _HANDLER_ATTR, True)
        root_logger.addHandler(file_handler)


def configure_from_config(config: LoggingConfig, level: Optional[str] = None) -> None:
    """Configure logging from a LoggingConfig, optionally overriding its level."""
    configure_logging(
        level=level or config.level,
        log_file=config.log_file,
        fmt=config.format,
    )
