"""
Logging configuration for gridkit.

Library modules only create loggers with get_logger(__name__). Applications
(or settings.validate_config_on_startup) call setup_logging() once to attach
handlers to the "gridkit" logger.

Diagnostics travel in `extra={"extra_fields": {...}}`. JSONFormatter merges
them into the JSON object; ContextFormatter appends them as key=value pairs.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

PACKAGE_LOGGER = "gridkit"


class JSONFormatter(logging.Formatter):
    """Format records as one JSON object per line for build tooling."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(getattr(record, "extra_fields", {}))
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


class ContextFormatter(logging.Formatter):
    """
    Human-readable formatter that keeps diagnostic context visible.

    A diagnostic's nested payload (`context`) is flattened so a warning reads
    `... [rule=unknown-breakpoint severity=warning name=tablet]`.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        fields = dict(getattr(record, "extra_fields", {}))
        payload = fields.pop("context", None)
        if isinstance(payload, dict):
            fields.update(payload)
        if not fields:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in fields.items())
        return f"{message} [{pairs}]"


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    json_output: bool = False,
) -> None:
    """
    Configure the gridkit logger.

    Args:
        level: Log level name; unknown names fall back to INFO
        log_file: Optional file that receives JSON records
        json_output: Use JSON on the console as well

    Example:
        setup_logging(level="WARNING", json_output=True)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    package_logger.handlers.clear()

    # Warnings go to the build output stream
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    if json_output:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(ContextFormatter(fmt="%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(JSONFormatter())
        package_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: str, message: str, **context: Any) -> None:
    """
    Log a message with keyword arguments as `extra_fields`.

    Example:
        log_with_context(logger, "debug", "Generated 3 breakpoint blocks", breakpoints=["small", "medium"])
    """
    getattr(logger, level.lower())(message, extra={"extra_fields": context})
