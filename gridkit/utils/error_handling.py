#!/usr/bin/env python3
"""
Error Handling Utility Module

Provides the reporting patterns used when breakpoint resolution degrades or
fails. Every report carries structured context so build tooling can tell
which rule fired and with which inputs.

This module provides two core utilities:
1. log_diagnostic() - Log a diagnostic and continue
2. log_and_raise() - Log a fatal error with context and re-raise it
"""

import logging
from typing import Any

from ..domain.diagnostics import Diagnostic, GridkitError


def _extra(diagnostic: Diagnostic, **fields: Any) -> dict[str, Any]:
    context = {
        "rule": diagnostic.rule.value,
        "severity": diagnostic.severity.value,
        "context": dict(diagnostic.payload),
    }
    context.update(fields)
    return {"extra_fields": context}


def log_diagnostic(logger: logging.Logger, diagnostic: Diagnostic) -> None:
    """
    Log a diagnostic with structured context and continue execution.

    Fatal diagnostics are logged at ERROR level, everything else at WARNING.

    Args:
        logger: Logger instance from get_logger(__name__)
        diagnostic: The diagnostic to report

    Example:
        diagnostic = Diagnostic.warning(Rule.UNKNOWN_BREAKPOINT, "tablet is not defined", name="tablet")
        log_diagnostic(logger, diagnostic)
    """
    log_func = logger.error if diagnostic.is_fatal else logger.warning
    log_func(diagnostic.message, extra=_extra(diagnostic))


def log_and_raise(logger: logging.Logger, error: GridkitError) -> None:
    """
    Log a fatal error with its diagnostic context and raise it.

    Args:
        logger: Logger instance
        error: The fatal error

    Raises:
        The given error after logging

    Example:
        log_and_raise(logger, MissingBreakpointValueError("No gutter for medium", breakpoint="medium"))
    """
    logger.error(
        f"{error.diagnostic.rule.value} failed: {error}",
        extra=_extra(error.diagnostic, exception_class=error.__class__.__name__),
    )
    raise error
