"""
Domain Models - Type-safe data structures for breakpoints

This package contains the immutable types the resolver works on:
    - breakpoints: Length, Breakpoint, BreakpointRegistry, HiDPIRegistry, Direction, BreakpointReference
    - values: Scalar, PerBreakpoint, responsive
    - diagnostics: Severity, Rule, Diagnostic and the GridkitError hierarchy

Usage:
    from gridkit.domain import BreakpointRegistry, BreakpointReference

    registry = BreakpointRegistry.from_mapping({"small": 0, "medium": 640})
    reference = BreakpointReference.parse("medium down")
"""

from .breakpoints import Breakpoint, BreakpointReference, BreakpointRegistry, Direction, HiDPIRegistry, Length
from .diagnostics import (
    BreakpointConfigurationError,
    BreakpointResolutionError,
    Diagnostic,
    GridkitError,
    MissingBreakpointValueError,
    MissingDenominatorError,
    Rule,
    Severity,
)
from .values import PerBreakpoint, ResponsiveValue, Scalar, responsive

__all__ = [
    # Breakpoints
    "Length",
    "Breakpoint",
    "BreakpointRegistry",
    "HiDPIRegistry",
    "Direction",
    "BreakpointReference",
    # Responsive values
    "Scalar",
    "PerBreakpoint",
    "ResponsiveValue",
    "responsive",
    # Diagnostics
    "Severity",
    "Rule",
    "Diagnostic",
    "GridkitError",
    "BreakpointConfigurationError",
    "BreakpointResolutionError",
    "MissingBreakpointValueError",
    "MissingDenominatorError",
]
