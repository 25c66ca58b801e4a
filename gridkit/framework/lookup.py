"""
Responsive Value Lookup

Finds the effective value of a responsive value map at a breakpoint using a
mobile-first cascade: a breakpoint without an explicit entry inherits the
value of the nearest smaller breakpoint that has one, never a larger one.

    gutters = {"small": "20px", "large": "30px"}
    get_value(gutters, "medium", registry)   # '20px'
    get_value(gutters, "xlarge", registry)   # '30px'
    get_value("15px", "medium", registry)    # '15px' (same at every breakpoint)
"""

from typing import Any

from ..core.logging_config import get_logger
from ..domain.breakpoints import BreakpointRegistry, Length
from ..domain.constants import unit_constants
from ..domain.diagnostics import MissingBreakpointValueError
from ..domain.values import PerBreakpoint, Scalar, responsive
from ..utils.error_handling import log_and_raise

logger = get_logger(__name__)


def snap_to_breakpoint(
    value: Length | int | float | str,
    registry: BreakpointRegistry,
    base_font_size: float = unit_constants.BASE_FONT_SIZE_PX,
) -> str:
    """
    Find the largest named breakpoint whose threshold is <= a length.

    Falls back to the zero breakpoint when no breakpoint qualifies.

    Example:
        >>> snap_to_breakpoint("800px", registry)
        'medium'
    """
    width = Length.parse(value).to_em(base_font_size)
    snapped = registry.zero_breakpoint
    for bp in registry:
        if bp.threshold <= width:
            snapped = bp.name
        else:
            break
    return snapped


def get_value(
    responsive_map: Any,
    breakpoint: str | Length | int | float,
    registry: BreakpointRegistry,
    base_font_size: float = unit_constants.BASE_FONT_SIZE_PX,
) -> Any:
    """
    Get the effective value of a responsive map at a breakpoint.

    Args:
        responsive_map: Scalar, PerBreakpoint, or a bare value/mapping (wrapped with responsive())
        breakpoint: Breakpoint name, or a length snapped to the nearest smaller named breakpoint
        registry: Registry defining breakpoint order
        base_font_size: Pixels per em for px lengths

    Returns:
        The value, or None when the breakpoint cannot be resolved or no
        smaller breakpoint has an entry
    """
    value = responsive(responsive_map)

    if isinstance(value, Scalar):
        return value.value

    if not (isinstance(breakpoint, str) and breakpoint in registry):
        if not Length.is_length(breakpoint):
            logger.debug(f"Cannot resolve breakpoint {breakpoint!r} for value lookup")
            return None
        snapped = snap_to_breakpoint(breakpoint, registry, base_font_size)  # type: ignore[arg-type]
        return get_value(value, snapped, registry, base_font_size)

    return _cascade(value, breakpoint, registry)


def _cascade(value: PerBreakpoint, breakpoint: str, registry: BreakpointRegistry) -> Any:
    if breakpoint in value:
        return value[breakpoint]

    anchor = None
    for name in registry.names:
        if name in value:
            anchor = name
        if name == breakpoint:
            break
    return None if anchor is None else value[anchor]


def require_value(
    responsive_map: Any,
    breakpoint: str | Length | int | float,
    registry: BreakpointRegistry,
    what: str = "value",
    base_font_size: float = unit_constants.BASE_FONT_SIZE_PX,
) -> Any:
    """
    Like get_value, but a missing value is a fatal error.

    Use this for tables every breakpoint must resolve against, such as gutters.

    Raises:
        MissingBreakpointValueError: If the lookup yields None
    """
    found = get_value(responsive_map, breakpoint, registry, base_font_size)
    if found is None:
        log_and_raise(
            logger,
            MissingBreakpointValueError(
                f"No {what} found for breakpoint {breakpoint!r}",
                breakpoint=str(breakpoint),
                what=what,
            ),
        )
    return found
