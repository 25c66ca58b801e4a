"""
Core Infrastructure - Logging

Usage:
    from gridkit.core import get_logger, setup_logging

    setup_logging(level="DEBUG")
    logger = get_logger(__name__)
"""

from .logging_config import ContextFormatter, JSONFormatter, get_logger, log_with_context, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "log_with_context",
    "JSONFormatter",
    "ContextFormatter",
]
