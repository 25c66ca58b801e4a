#!/usr/bin/env python3
"""
Breakpoint Constants

Centralized unit conversion constants and default breakpoint registries.
Provides type-safe, immutable values shared by the resolver, lookup and
serialization modules.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UnitConstants:
    """
    Unit conversion constants.

    Immutable values used when normalizing breakpoint thresholds into media
    query limits.

    Attributes:
        BASE_FONT_SIZE_PX: Pixels per em when converting px thresholds (16px)
        EM_EPSILON: Amount subtracted from the next breakpoint for `down` limits (0.00125em)
        DPPX_EPSILON: Amount subtracted from the next HiDPI ratio for `down` limits (1/96 dppx)
        STD_WEB_DPI: Dots per inch of a 1dppx display (96dpi)
        PRECISION: Decimal places kept when formatting numbers (10)

    Example:
        >>> units = unit_constants
        >>> print(units.EM_EPSILON)
        0.00125
        >>> print(units.STD_WEB_DPI)
        96
    """

    BASE_FONT_SIZE_PX: float = 16.0
    """Pixels per em when converting px thresholds"""

    EM_EPSILON: float = 0.00125
    """Amount subtracted from the next breakpoint for `down` limits"""

    DPPX_EPSILON: float = 1 / 96
    """Amount subtracted from the next HiDPI ratio for `down` limits"""

    STD_WEB_DPI: int = 96
    """Dots per inch of a 1dppx display"""

    PRECISION: int = 10
    """Decimal places kept when formatting numbers"""


@dataclass(frozen=True)
class RegistryDefaults:
    """
    Default breakpoint registries.

    Attributes:
        BREAKPOINTS: Standard viewport-width breakpoints (name, threshold)
        BREAKPOINTS_HIDPI: Pixel-density breakpoints (name, dppx ratio)
        PRINT_BREAKPOINT: Largest breakpoint whose styles also apply to print
        SERIALIZATION_DELIMITER: Separator between name=value pairs
        META_CLASS: Class of the element carrying the serialized registry

    Example:
        >>> defaults = registry_defaults
        >>> print(defaults.BREAKPOINTS[1])
        ('medium', '640px')
    """

    BREAKPOINTS: tuple[tuple[str, str], ...] = (
        ("small", "0"),
        ("medium", "640px"),
        ("large", "1024px"),
        ("xlarge", "1200px"),
        ("xxlarge", "1440px"),
    )
    """Standard viewport-width breakpoints"""

    BREAKPOINTS_HIDPI: tuple[tuple[str, str], ...] = (
        ("hidpi-1", "1"),
        ("hidpi-1-5", "1.5"),
        ("hidpi-2", "2"),
        ("hidpi-3", "3"),
    )
    """Pixel-density breakpoints"""

    PRINT_BREAKPOINT: str = "large"
    """Largest breakpoint whose styles also apply to print"""

    SERIALIZATION_DELIMITER: str = "&"
    """Separator between name=value pairs"""

    META_CLASS: str = "gridkit-mq"
    """Class of the element carrying the serialized registry"""

    ORIENTATIONS: frozenset[str] = field(default_factory=lambda: frozenset({"landscape", "portrait"}))
    """Keywords resolved to orientation media features"""


# Singleton instances for easy import
unit_constants = UnitConstants()
registry_defaults = RegistryDefaults()
