"""
Unit Helpers

Number formatting and unit math shared by the resolver and the fraction
helpers. Output matches what a stylesheet compiler prints: at most ten
decimal places, trailing zeros stripped.
"""

from fractions import Fraction
from numbers import Real

from ..domain.constants import unit_constants
from ..domain.diagnostics import MissingDenominatorError


def format_number(value: float, precision: int = unit_constants.PRECISION) -> str:
    """
    Format a number the way compiled CSS prints it.

    Example:
        >>> format_number(63.99875)
        '63.99875'
        >>> format_number(40.0)
        '40'
    """
    text = f"{round(value, precision):.{precision}f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def em(value: float) -> str:
    return f"{format_number(value)}em"


def fraction_to_percentage(size: "Real | Fraction | str", denominator: "Real | None" = None) -> str:
    """
    Convert a grid size into a CSS percentage.

    Accepted forms:
        - a fraction between 0 and 1 ("1/2", Fraction(1, 2), 0.5)
        - a column count greater than 1 together with `denominator` (3 of 12)
        - a string already carrying a unit ("50%", "200px"), returned unchanged

    Raises:
        MissingDenominatorError: If a column count is given without a denominator
        ValueError: If the size is negative or the denominator is not positive

    Example:
        >>> fraction_to_percentage("1/4")
        '25%'
        >>> fraction_to_percentage(3, 12)
        '25%'
    """
    if isinstance(size, str):
        stripped = size.strip()
        if "/" in stripped:
            size = Fraction(stripped)
        elif stripped.endswith(("%", "px", "em", "rem", "vw")):
            return stripped
        else:
            size = Fraction(stripped)

    if size < 0:
        raise ValueError(f"Grid size cannot be negative: {size}")

    if size > 1:
        if denominator is None:
            raise MissingDenominatorError(
                f"No denominator provided for grid size {size}; pass the number of columns",
                size=str(size),
            )
        if denominator <= 0:
            raise ValueError(f"Denominator must be positive, got {denominator}")
        ratio = Fraction(size) / Fraction(denominator)
    else:
        ratio = Fraction(size)

    return f"{format_number(float(ratio * 100))}%"
