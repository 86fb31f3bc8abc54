"""Logging infrastructure for Pizza Service.

One stdout handler per logger, configured via environment variables:
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
- LOG_TYPE: text, json (default: text)

Records may carry a ``pizza_name`` extra; both formatters include it.
"""

import json
import logging
import os
import sys
from typing import Any, Optional


def _pizza_name(record: logging.LogRecord) -> Optional[str]:
    return getattr(record, "pizza_name", None)


class JSONFormatter(logging.Formatter):
    """Formatter that outputs one JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        pizza = _pizza_name(record)
        if pizza:
            log_data["pizza_name"] = pizza

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class RichTextFormatter(logging.Formatter):
    """Formatter that outputs a single colored line per record.

    Lines look like ``2026-10-19 12:00:00 INFO     pizza_service [Cheese Pizza] message``.
    """

    # ANSI color per level; unknown levels are printed uncolored
    COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as colored text.

        Args:
            record: Log record to format.

        Returns:
            Colored line, followed by the traceback when one is attached.
        """
        color = self.COLORS.get(record.levelno, "")
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        pizza = _pizza_name(record)
        tag = f" [{pizza}]" if pizza else ""

        line = f"{color}{timestamp} {record.levelname:<8} {record.name}{tag} {record.getMessage()}{self.RESET}"

        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"

        return line


def _resolve_level(level_name: str) -> int:
    """Map a LOG_LEVEL name to a logging level, falling back to INFO."""
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO


def _build_formatter(log_type: str) -> logging.Formatter:
    if log_type.lower() == "json":
        return JSONFormatter()
    return RichTextFormatter()


def get_logger(name: str) -> logging.Logger:
    """Create and configure logger instance.

    A logger that already has handlers is returned unchanged.

    Args:
        name: Logger name, typically module name.

    Returns:
        Configured logger instance.
    """
    logger_instance = logging.getLogger(name)
    if logger_instance.handlers:
        return logger_instance

    log_level = _resolve_level(os.getenv("LOG_LEVEL", "INFO"))
    logger_instance.setLevel(log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(_build_formatter(os.getenv("LOG_TYPE", "text")))
    logger_instance.addHandler(handler)

    return logger_instance


# Create module-level logger instance
logger = get_logger("pizza_service")
