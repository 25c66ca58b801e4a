"""
Diagnostics and errors for breakpoint resolution

Two severities exist:
    - WARNING: non-fatal, the resolver degrades to a safe default
    - FATAL: aborts the build, raised as a GridkitError subclass

Usage:
    from gridkit.domain.diagnostics import Diagnostic, Rule, Severity

    diagnostic = Diagnostic.warning(Rule.UNKNOWN_BREAKPOINT, "tablet is not defined", name="tablet")
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """How a diagnostic should be treated by the build"""

    WARNING = "warning"
    FATAL = "fatal"


class Rule(str, Enum):
    """Which rule produced a diagnostic"""

    UNKNOWN_BREAKPOINT = "unknown-breakpoint"
    ONLY_REQUIRES_NAMED = "only-requires-named"
    INVALID_REGISTRY = "invalid-registry"
    MISSING_DENOMINATOR = "missing-denominator"
    MISSING_VALUE = "missing-value"
    NEGATIVE_LENGTH = "negative-length"
    INVALID_CONFIG = "invalid-config"


@dataclass(frozen=True)
class Diagnostic:
    """
    A single warning or error emitted while resolving breakpoints.

    Attributes:
        rule: The rule that fired
        severity: WARNING or FATAL
        message: Human-readable description
        payload: Structured inputs that triggered the rule
    """

    rule: Rule
    severity: Severity
    message: str
    payload: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def warning(cls, rule: Rule, message: str, **payload: Any) -> "Diagnostic":
        return cls(rule=rule, severity=Severity.WARNING, message=message, payload=payload)

    @classmethod
    def fatal(cls, rule: Rule, message: str, **payload: Any) -> "Diagnostic":
        return cls(rule=rule, severity=Severity.FATAL, message=message, payload=payload)

    @property
    def is_fatal(self) -> bool:
        return self.severity is Severity.FATAL

    def __str__(self) -> str:
        return f"[{self.severity.value}] {self.rule.value}: {self.message}"


class GridkitError(Exception):
    """
    Base class for fatal breakpoint errors.

    Carries the Diagnostic describing the failure so build tools can inspect
    the rule and payload instead of parsing the message.
    """

    rule = Rule.INVALID_REGISTRY

    def __init__(self, message: str, **payload: Any):
        super().__init__(message)
        self.diagnostic = Diagnostic.fatal(self.rule, message, **payload)


class BreakpointConfigurationError(GridkitError):
    """Raised when a breakpoint registry is empty, unordered or lacks a zero breakpoint."""

    rule = Rule.INVALID_REGISTRY


class MissingDenominatorError(GridkitError):
    """Raised when fraction math needs a denominator and none was supplied or inferable."""

    rule = Rule.MISSING_DENOMINATOR


class MissingBreakpointValueError(GridkitError):
    """Raised when a responsive lookup that must produce a value yields nothing."""

    rule = Rule.MISSING_VALUE


class BreakpointResolutionError(GridkitError):
    """Raised in strict mode when resolution produces a warning."""

    def __init__(self, diagnostic: Diagnostic):
        Exception.__init__(self, diagnostic.message)
        self.rule = diagnostic.rule
        self.diagnostic = Diagnostic.fatal(diagnostic.rule, diagnostic.message, **diagnostic.payload)
