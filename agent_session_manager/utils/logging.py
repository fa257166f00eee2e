"""
Logging configuration utilities for Agent Session Manager.

Provides configurable logging with file rotation support. Console output
goes to stderr so it never mixes with command output.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from ..config import DEFAULT_LOG_FORMAT, ManagerConfig


def _configure_root(
    level: int,
    log_format: str,
    log_file: Optional[str],
    max_bytes: int,
    backup_count: int,
) -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler with rotation (if configured)
    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def setup_logging(config: Optional[ManagerConfig] = None) -> None:
    """
    Configure logging based on ManagerConfig settings.

    Args:
        config: ManagerConfig instance. If None, uses sensible defaults.

    Example:
        config = ManagerConfig.load("config.yaml")
        setup_logging(config)
    """
    setup_logging_from_dict((config or ManagerConfig()).to_dict()["logging"])


def setup_logging_from_dict(config_dict: dict) -> None:
    """
    Configure logging from a dictionary (the ``logging:`` section of config.yaml).

    Args:
        config_dict: Dictionary with logging configuration.
            - level: Log level (DEBUG, INFO, WARNING, ERROR)
            - file: Optional log file path
            - format: Log format string
            - max_bytes: Max file size before rotation
            - backup_count: Number of backup files to keep
    """
    level_str = str(config_dict.get("level") or "WARNING").upper()
    _configure_root(
        getattr(logging, level_str, logging.WARNING),
        config_dict.get("format") or DEFAULT_LOG_FORMAT,
        config_dict.get("file") or None,
        config_dict.get("max_bytes", 10485760),
        config_dict.get("backup_count", 3),
    )
