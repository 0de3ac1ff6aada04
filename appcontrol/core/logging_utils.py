#!/usr/bin/env python3
"""Centralized logging utilities with consistent formatting."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_DEFAULT_LEVEL = logging.INFO
_CONFIGURED_LOGGERS: set[str] = set()


def setup_logger(
    name: str,
    level: int | None = None,
    stream: Any = None,
) -> logging.Logger:
    """Set up a logger with consistent formatting.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (default: module default, INFO unless changed)
        stream: Output stream (default: sys.stdout)

    Returns:
        Configured logger instance

    Example:
        >>> from appcontrol.core.logging_utils import setup_logger
        >>> logger = setup_logger(__name__)
        >>> logger.info("Trigger engine ready")
    """
    logger = logging.getLogger(name)

    # Only configure once per logger name
    if name in _CONFIGURED_LOGGERS:
        return logger

    logger.setLevel(level if level is not None else _DEFAULT_LEVEL)

    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT))
        logger.addHandler(handler)

    # Avoid duplicate lines through the root logger
    logger.propagate = False

    _CONFIGURED_LOGGERS.add(name)
    return logger


def set_global_log_level(level: int | str):
    """Set log level for all configured loggers and for loggers created later.

    Args:
        level: Logging level (e.g., logging.DEBUG or "DEBUG")
    """
    global _DEFAULT_LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    _DEFAULT_LEVEL = level

    for logger_name in _CONFIGURED_LOGGERS:
        logging.getLogger(logger_name).setLevel(level)


def configure_file_logging(
    log_file: str | Path,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 3,
):
    """Attach a rotating file handler to every configured logger.

    Args:
        log_file: Path of the log file (parent directories are created)
        max_bytes: Maximum file size before rotation
        backup_count: Number of backup files to keep
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=backup_count)
    file_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT))

    for logger_name in _CONFIGURED_LOGGERS:
        logger = logging.getLogger(logger_name)
        if not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
            logger.addHandler(file_handler)


def log_event(
    logger: logging.Logger,
    event_name: str,
    data: dict[str, Any] | None = None,
):
    """Log a structured event line.

    Args:
        logger: Logger instance
        event_name: Event name (e.g., 'trigger_detected')
        data: Optional event data

    Example:
        >>> log_event(logger, "trigger_detected", {"category": "like", "keyword": "heart"})
    """
    data_str = ""
    if data:
        data_str = " " + " ".join(f"{k}={v}" for k, v in data.items())
    logger.info(f"[EVENT] {event_name}{data_str}")
