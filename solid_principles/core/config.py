"""
Centralized configuration module for demo-wide settings.

Values are read from environment variables. The CLI entry point calls
``load_dotenv()`` first, so a local ``.env`` file can provide them too.
"""

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"

# ===========================
# Logging Configuration
# ===========================


def get_log_level() -> int:
    """
    Get the logging level from environment variable.

    Returns:
        int: Logging level (defaults to WARNING if not configured)

    Environment Variables:
        SOLID_LOG_LEVEL: Level name (e.g., 'DEBUG', 'INFO', 'WARNING')
            Default: 'WARNING' (keeps demo output free of log noise)

    Examples:
        >>> # In .env file:
        >>> # SOLID_LOG_LEVEL=DEBUG
        >>> level = get_log_level()
        >>> print(level)  # 10
    """
    level_name = os.getenv("SOLID_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()

    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        logger.warning(
            f"Invalid log level '{level_name}' specified in SOLID_LOG_LEVEL. "
            f"Falling back to {DEFAULT_LOG_LEVEL}."
        )
        return logging.WARNING

    return level


def get_json_logging_enabled() -> bool:
    """
    Get whether log records are rendered as JSON.

    Returns:
        bool: True for JSON output, False for the console format

    Environment Variables:
        SOLID_LOG_JSON: Whether to emit JSON log lines
            Default: 'false'

    Truthy values: "true", "1", "yes" (case-insensitive)
    Falsy values: anything else
    """
    flag_str = os.getenv("SOLID_LOG_JSON", "false")
    return flag_str.strip().lower() in ("true", "1", "yes")


def log_config(log_level: int, use_json_format: bool) -> None:
    """
    Log the active configuration.

    Should be called after logging is set up, with the values already
    resolved by get_log_level() and get_json_logging_enabled().
    """
    logger.info(
        "Demo configuration initialized",
        extra={
            "context": {
                "log_level": logging.getLevelName(log_level),
                "json_logging": use_json_format,
            }
        },
    )
