"""
Centralized logging configuration for the SOLID demos.

This module provides structured logging with:
- JSON formatting for machine consumption
- Console formatting for development
- A single stderr handler, so demo output on stdout stays untouched

Usage:
    from solid_principles.core.logging_config import setup_logging, get_logger

    # In the CLI entry point
    setup_logging(log_level="INFO")

    # In any module
    logger = get_logger(__name__)
    logger.info("Operation completed", extra={"context": {"demo": "dip"}})
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Union


class JSONFormatter(logging.Formatter):
    """One JSON object per record; ``extra={"context": ...}`` lands under "context"."""

    RECORD_FIELDS = {
        "level": "levelname",
        "logger": "name",
        "module": "module",
        "function": "funcName",
        "line": "lineno",
    }

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "message": record.getMessage(),
        }
        for key, attr in self.RECORD_FIELDS.items():
            payload[key] = getattr(record, attr)

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        context = getattr(record, "context", None)
        if context is not None:
            payload["context"] = context

        return json.dumps(payload, ensure_ascii=False, default=str)


class ConsoleFormatter(logging.Formatter):
    """Plain text with an ANSI-colored, padded level name."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        colored = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        colored.levelname = f"{color}{record.levelname:8}{self.RESET}"
        return super().format(colored)


def _resolve_level(log_level: Union[int, str]) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(
    log_level: Union[int, str] = "WARNING",
    use_json_format: bool = False,
) -> None:
    """
    Configure logging for the demo entry points.

    Args:
        log_level: Logging level (can be int like logging.INFO or string "INFO")
        use_json_format: Use JSON format instead of console format
    """
    level = _resolve_level(log_level)

    # Root logger configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Close and remove existing handlers properly
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    # stdout belongs to the demos
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    if use_json_format:
        console_formatter: logging.Formatter = JSONFormatter()
    else:
        console_formatter = ConsoleFormatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    # Application logger
    app_logger = logging.getLogger("solid_principles")
    app_logger.setLevel(level)
    app_logger.debug(
        f"Logging configured: level={logging.getLevelName(level)}, "
        f"json_format={use_json_format}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Configured logger instance

    Example:
        logger = get_logger(__name__)
        logger.info("Switch operated", extra={"context": {"demo": "dip"}})
    """
    return logging.getLogger(name)
