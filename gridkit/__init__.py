"""
gridkit - Responsive Breakpoint Toolkit

Resolves named breakpoints into media queries, looks up per-breakpoint values
with a mobile-first cascade, and replicates CSS blocks once per breakpoint.

Package Structure:
    - domain/: Breakpoint registries, references, responsive values, diagnostics
    - framework/: Resolver, lookup, iteration, serialization, runtime script
    - settings.py: Environment configuration
    - template_engine.py: Jinja2 rendering for the runtime bridge
    - core/: Logging configuration

Usage::

    from gridkit import BreakpointResolver, each_breakpoint, get_value

    resolver = BreakpointResolver.from_mapping({"small": 0, "medium": 640, "large": 1024})
    resolver.media_query("medium down")   # '@media print, screen and (max-width: 63.99875em)'

    gutters = {"small": "20px", "medium": "30px"}
    css = each_breakpoint(
        resolver,
        lambda ctx: f".grid {{ padding: {get_value(gutters, ctx.current, resolver.registry)}; }}",
    )
"""

from .domain import (
    Breakpoint,
    BreakpointConfigurationError,
    BreakpointReference,
    BreakpointRegistry,
    BreakpointResolutionError,
    Diagnostic,
    Direction,
    GridkitError,
    HiDPIRegistry,
    Length,
    MissingBreakpointValueError,
    MissingDenominatorError,
    PerBreakpoint,
    Rule,
    Scalar,
    Severity,
    responsive,
)
from .framework import (
    BreakpointContext,
    BreakpointResolver,
    Resolution,
    each_breakpoint,
    fraction_to_percentage,
    get_breakpoint_stylesheet,
    get_media_query_script,
    get_value,
    parse_serialized,
    require_value,
    serialize_registry,
    snap_to_breakpoint,
)


def get_breakpoint_framework(resolver: BreakpointResolver | None = None, include_script: bool = True):
    """
    Returns the serialized-breakpoint CSS and its runtime JavaScript.

    This is the main entry point for shipping breakpoint definitions to the
    browser alongside the generated stylesheet.

    Args:
        resolver: Resolver whose registry is serialized (default: settings from the environment)
        include_script: Include the GridkitMQ runtime script (default: True)

    Returns:
        Tuple of (css_string, javascript_string) ready to inject into HTML

    Example::

        css, js = get_breakpoint_framework(BreakpointResolver())
    """
    if resolver is None:
        from .settings import build_resolver

        resolver = build_resolver()

    css = f"""
    <style>
    {get_breakpoint_stylesheet(resolver.registry)}
    </style>
    """

    javascript = ""
    if include_script:
        javascript = f"""
    <script>
    {get_media_query_script()}
    </script>
    """

    return css, javascript


__all__ = [
    "get_breakpoint_framework",
    # Domain
    "Length",
    "Breakpoint",
    "BreakpointRegistry",
    "HiDPIRegistry",
    "Direction",
    "BreakpointReference",
    "Scalar",
    "PerBreakpoint",
    "responsive",
    "Severity",
    "Rule",
    "Diagnostic",
    "GridkitError",
    "BreakpointConfigurationError",
    "BreakpointResolutionError",
    "MissingBreakpointValueError",
    "MissingDenominatorError",
    # Framework
    "BreakpointResolver",
    "Resolution",
    "get_value",
    "require_value",
    "snap_to_breakpoint",
    "BreakpointContext",
    "each_breakpoint",
    "serialize_registry",
    "parse_serialized",
    "get_breakpoint_stylesheet",
    "get_media_query_script",
    "fraction_to_percentage",
]
