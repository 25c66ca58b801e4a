"""
Breakpoint Resolver

Translates breakpoint references into media conditions and @media blocks.

    resolver = BreakpointResolver.from_mapping({"small": 0, "medium": 640, "large": 1024})
    resolver.condition("medium")        # '(min-width: 40em)'
    resolver.condition("medium down")   # '(max-width: 63.99875em)'
    resolver.condition("medium only")   # '(min-width: 40em) and (max-width: 63.99875em)'
    resolver.wrap("medium", ".cell { width: 50%; }")

Standard breakpoints resolve to em limits. HiDPI breakpoints resolve to a
pair of equivalent clauses (vendor-prefixed device-pixel-ratio and standard
resolution in dpi) joined by a comma.
"""

import textwrap
from collections.abc import Mapping
from dataclasses import dataclass, field

from ..core.logging_config import get_logger
from ..domain.breakpoints import BreakpointReference, BreakpointRegistry, Direction, HiDPIRegistry, Length
from ..domain.constants import registry_defaults, unit_constants
from ..domain.diagnostics import BreakpointResolutionError, Diagnostic, Rule
from ..utils.error_handling import log_diagnostic
from .units import em, format_number

logger = get_logger(__name__)

ReferenceLike = BreakpointReference | Length | int | float | str


@dataclass(frozen=True)
class Resolution:
    """
    Result of resolving a breakpoint reference.

    Attributes:
        condition: Media condition, "" when no media wrapping applies
        diagnostics: Warnings produced while resolving
    """

    condition: str
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.condition

    @property
    def has_warnings(self) -> bool:
        return bool(self.diagnostics)


def _join(bp_min: str | None, bp_max: str | None, prop_min: str, prop_max: str) -> str:
    parts = []
    if bp_min is not None:
        parts.append(f"({prop_min}: {bp_min})")
    if bp_max is not None:
        parts.append(f"({prop_max}: {bp_max})")
    return " and ".join(parts)


class BreakpointResolver:
    """
    Resolves breakpoint references against a standard and a HiDPI registry.

    Args:
        registry: Viewport-width breakpoints (defaults to small/medium/large/xlarge/xxlarge)
        hidpi_registry: Pixel-density breakpoints (defaults to hidpi-1 ... hidpi-3)
        base_font_size: Pixels per em for literal px references
        print_breakpoint: Named breakpoints up to and including this one also target print
        auto_media_queries: Default for wrapping each iteration step in its media query
        strict: Raise BreakpointResolutionError instead of degrading on warnings
    """

    def __init__(
        self,
        registry: BreakpointRegistry | None = None,
        hidpi_registry: HiDPIRegistry | None = None,
        *,
        base_font_size: float = unit_constants.BASE_FONT_SIZE_PX,
        print_breakpoint: str | None = registry_defaults.PRINT_BREAKPOINT,
        auto_media_queries: bool = True,
        strict: bool = False,
    ):
        self.registry = registry if registry is not None else BreakpointRegistry.default(base_font_size)
        self.hidpi_registry = hidpi_registry if hidpi_registry is not None else HiDPIRegistry.default()
        self.base_font_size = base_font_size
        self.print_breakpoint = print_breakpoint
        self.auto_media_queries = auto_media_queries
        self.strict = strict

        if print_breakpoint is not None and print_breakpoint not in self.registry:
            logger.debug(f"Print breakpoint {print_breakpoint!r} is not registered; print media type disabled")
            self._print_index = None
        else:
            self._print_index = None if print_breakpoint is None else self.registry.index(print_breakpoint)

    @classmethod
    def from_mapping(
        cls,
        breakpoints: Mapping[str, Length | int | float | str],
        hidpi: Mapping[str, int | float | str] | None = None,
        **options,
    ) -> "BreakpointResolver":
        base_font_size = options.get("base_font_size", unit_constants.BASE_FONT_SIZE_PX)
        registry = BreakpointRegistry.from_mapping(breakpoints, base_font_size)
        hidpi_registry = HiDPIRegistry.from_mapping(hidpi) if hidpi is not None else None
        return cls(registry, hidpi_registry, **options)  # type: ignore[arg-type]

    def resolve(self, reference: ReferenceLike) -> Resolution:
        """
        Resolve a reference into a media condition.

        Warnings (unknown name, `only` on a literal, a negative literal)
        degrade to the empty condition, or raise BreakpointResolutionError in strict mode.
        """
        ref = BreakpointReference.coerce(reference)

        if ref.orientation is not None:
            return Resolution(f"(orientation: {ref.orientation})")

        if ref.direction is Direction.ONLY and not ref.is_named:
            diagnostic = Diagnostic.warning(
                Rule.ONLY_REQUIRES_NAMED,
                f'breakpoint(): "only" is not compatible with literal values ({ref.length})',
                reference=str(ref),
            )
            return self._degrade(diagnostic)

        if not ref.is_named and ref.length.value < 0:  # type: ignore[union-attr]
            diagnostic = Diagnostic.warning(
                Rule.NEGATIVE_LENGTH,
                f"breakpoint(): negative widths never match ({ref.length})",
                reference=str(ref),
            )
            return self._degrade(diagnostic)

        diagnostics: tuple[Diagnostic, ...] = ()
        hidpi = False
        if ref.is_named:
            name = ref.name
            if name in self.registry:
                bp, bp_next = self.registry.threshold(name), self.registry.next_threshold(name)
            elif name in self.hidpi_registry:
                hidpi = True
                bp, bp_next = self.hidpi_registry.threshold(name), self.hidpi_registry.next_threshold(name)
            else:
                diagnostic = Diagnostic.warning(
                    Rule.UNKNOWN_BREAKPOINT,
                    f'breakpoint(): "{name}" is not defined in your breakpoint registry',
                    name=name,
                    direction=ref.direction.value,
                )
                self._report(diagnostic)
                diagnostics = (diagnostic,)
                bp, bp_next = 0.0, None
        else:
            bp, bp_next = ref.length.to_em(self.base_font_size), None  # type: ignore[union-attr]

        bp_min = bp if ref.direction in (Direction.UP, Direction.ONLY) else None
        bp_max = None
        if ref.direction in (Direction.DOWN, Direction.ONLY):
            if not ref.is_named:
                bp_max = bp
            elif bp_next is not None:
                epsilon = unit_constants.DPPX_EPSILON if hidpi else unit_constants.EM_EPSILON
                bp_max = bp_next - epsilon

        # "0 and up" needs no media query
        if not bp_min:
            bp_min = None
        if not bp_max:
            bp_max = None

        if hidpi:
            condition = self._hidpi_condition(bp_min, bp_max)
        else:
            condition = _join(
                None if bp_min is None else em(bp_min),
                None if bp_max is None else em(bp_max),
                "min-width",
                "max-width",
            )
        return Resolution(condition, diagnostics)

    def _hidpi_condition(self, bp_min: float | None, bp_max: float | None) -> str:
        dpi = unit_constants.STD_WEB_DPI
        ratio = _join(
            None if bp_min is None else format_number(bp_min),
            None if bp_max is None else format_number(bp_max),
            "-webkit-min-device-pixel-ratio",
            "-webkit-max-device-pixel-ratio",
        )
        resolution = _join(
            None if bp_min is None else f"{format_number(bp_min * dpi)}dpi",
            None if bp_max is None else f"{format_number(bp_max * dpi)}dpi",
            "min-resolution",
            "max-resolution",
        )
        return ", ".join(clause for clause in (ratio, resolution) if clause)

    def _report(self, diagnostic: Diagnostic) -> None:
        if self.strict:
            raise BreakpointResolutionError(diagnostic)
        log_diagnostic(logger, diagnostic)

    def _degrade(self, diagnostic: Diagnostic) -> Resolution:
        self._report(diagnostic)
        return Resolution("", (diagnostic,))

    def condition(self, reference: ReferenceLike) -> str:
        """Media condition only, "" when no media wrapping applies."""
        return self.resolve(reference).condition

    def media_query(self, reference: ReferenceLike) -> str:
        """
        Build the @media prelude for a reference.

        Returns "" when the condition is empty. Named breakpoints at or below
        the print breakpoint also target print.

        Example:
            >>> resolver.media_query("medium")
            '@media print, screen and (min-width: 40em)'
        """
        ref = BreakpointReference.coerce(reference)
        condition = self.resolve(ref).condition
        if not condition:
            return ""
        if self._targets_print(ref):
            return f"@media print, screen and {condition}"
        return f"@media screen and {condition}"

    def _targets_print(self, ref: BreakpointReference) -> bool:
        if self._print_index is None or not ref.is_named or ref.name not in self.registry:
            return False
        return self.registry.index(ref.name) <= self._print_index  # type: ignore[arg-type]

    def wrap(self, reference: ReferenceLike, css: str) -> str:
        """
        Wrap CSS in the media block for a reference.

        CSS is returned unchanged when no media query applies.
        """
        prelude = self.media_query(reference)
        if not prelude:
            return css
        body = textwrap.indent(textwrap.dedent(css).strip("\n"), "    ")
        return f"{prelude} {{\n{body}\n}}"
