"""
Breakpoint domain models

Provides the immutable data structures the resolver works on:
    - Length: Number with a CSS unit (px, em, rem or unitless)
    - Breakpoint: Named threshold
    - BreakpointRegistry: Ordered viewport-width breakpoints with a zero breakpoint
    - HiDPIRegistry: Ordered pixel-density breakpoints
    - Direction: up / down / only qualifier
    - BreakpointReference: What a caller asks the resolver about
"""

import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum

from .constants import registry_defaults, unit_constants
from .diagnostics import BreakpointConfigurationError

_LENGTH_PATTERN = re.compile(r"^\s*(-?(?:\d+(?:\.\d*)?|\.\d+))\s*(px|em|rem)?\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class Length:
    """
    A number with a CSS length unit.

    Unitless lengths are treated as pixels when converted to em, matching how
    breakpoint maps are usually written (`medium: 640`).

    Attributes:
        value: Numeric magnitude
        unit: One of "", "px", "em", "rem"

    Example:
        >>> Length.parse("640px").to_em()
        40.0
        >>> Length.parse("40em").to_em()
        40.0
    """

    value: float
    unit: str = ""

    def __post_init__(self) -> None:
        if self.unit not in ("", "px", "em", "rem"):
            raise ValueError(f"Unsupported length unit: {self.unit!r}")

    @classmethod
    def parse(cls, raw: "Length | int | float | str") -> "Length":
        """
        Parse a number or string into a Length.

        Raises:
            ValueError: If the value is not a number with an optional px/em/rem unit
        """
        if isinstance(raw, Length):
            return raw
        if isinstance(raw, bool):
            raise ValueError(f"Not a length: {raw!r}")
        if isinstance(raw, (int, float)):
            return cls(float(raw))
        if isinstance(raw, str):
            match = _LENGTH_PATTERN.match(raw)
            if match:
                return cls(float(match.group(1)), (match.group(2) or "").lower())
        raise ValueError(f"Not a length: {raw!r}")

    @staticmethod
    def is_length(raw: object) -> bool:
        """Check whether a value can be parsed as a Length without raising."""
        if isinstance(raw, Length):
            return True
        if isinstance(raw, bool):
            return False
        if isinstance(raw, (int, float)):
            return True
        return isinstance(raw, str) and _LENGTH_PATTERN.match(raw) is not None

    def to_em(self, base_font_size: float = unit_constants.BASE_FONT_SIZE_PX) -> float:
        """Convert to em; px and unitless values are divided by the base font size."""
        if self.unit in ("", "px"):
            return self.value / base_font_size
        return self.value

    def __str__(self) -> str:
        return f"{self.value:g}{self.unit}"


@dataclass(frozen=True)
class Breakpoint:
    """
    A named threshold.

    Attributes:
        name: Breakpoint name (e.g., "medium")
        threshold: Lower bound in the registry's unit (em for width, dppx for HiDPI)
    """

    name: str
    threshold: float


class BreakpointRegistry:
    """
    Ordered, immutable registry of viewport-width breakpoints.

    Invariants (checked eagerly, BreakpointConfigurationError on failure):
        - at least one breakpoint
        - unique names
        - strictly increasing thresholds
        - the first threshold is exactly 0 (the zero breakpoint)

    Thresholds are stored in em.

    Example:
        registry = BreakpointRegistry.from_mapping({"small": 0, "medium": 640, "large": 1024})
        registry.threshold("medium")       # 40.0
        registry.next_threshold("medium")  # 64.0
    """

    unit = "em"
    requires_zero = True

    def __init__(self, breakpoints: Iterable[Breakpoint]):
        self._breakpoints = tuple(breakpoints)
        self._validate()
        self._index = {bp.name: i for i, bp in enumerate(self._breakpoints)}

    @classmethod
    def from_mapping(
        cls,
        entries: Mapping[str, "Length | int | float | str"] | Iterable[tuple[str, "Length | int | float | str"]],
        base_font_size: float = unit_constants.BASE_FONT_SIZE_PX,
    ) -> "BreakpointRegistry":
        """
        Build a registry from name -> length pairs, preserving their order.

        Raises:
            BreakpointConfigurationError: If a value is not a length or an invariant fails
        """
        pairs = list(entries.items()) if isinstance(entries, Mapping) else list(entries)
        breakpoints = []
        for name, raw in pairs:
            breakpoints.append(Breakpoint(name, cls._convert(name, raw, base_font_size)))
        return cls(breakpoints)

    @classmethod
    def default(cls, base_font_size: float = unit_constants.BASE_FONT_SIZE_PX) -> "BreakpointRegistry":
        return cls.from_mapping(registry_defaults.BREAKPOINTS, base_font_size)

    @staticmethod
    def _convert(name: str, raw: object, base_font_size: float) -> float:
        try:
            return Length.parse(raw).to_em(base_font_size)  # type: ignore[arg-type]
        except ValueError as e:
            raise BreakpointConfigurationError(
                f"Breakpoint {name!r} has an invalid threshold: {raw!r}", name=name, value=repr(raw)
            ) from e

    def _validate(self) -> None:
        kind = type(self).__name__
        if not self._breakpoints:
            raise BreakpointConfigurationError(f"{kind} must define at least one breakpoint")

        seen: set[str] = set()
        for bp in self._breakpoints:
            if bp.name in seen:
                raise BreakpointConfigurationError(f"Duplicate breakpoint name: {bp.name!r}", name=bp.name)
            seen.add(bp.name)

        first = self._breakpoints[0]
        if self.requires_zero and first.threshold != 0:
            raise BreakpointConfigurationError(
                f"Your smallest breakpoint ({first.name}) must have a threshold of 0, got {first.threshold}",
                name=first.name,
                threshold=first.threshold,
            )
        if first.threshold < 0:
            raise BreakpointConfigurationError(
                f"Breakpoint {first.name!r} has a negative threshold", name=first.name, threshold=first.threshold
            )
        # Density ratios start above zero
        if not self.requires_zero and first.threshold == 0:
            raise BreakpointConfigurationError(
                f"{kind} thresholds must be positive, got {first.name}=0", name=first.name, threshold=first.threshold
            )

        for previous, current in zip(self._breakpoints, self._breakpoints[1:]):
            if current.threshold <= previous.threshold:
                raise BreakpointConfigurationError(
                    f"Breakpoint thresholds must be strictly increasing: "
                    f"{previous.name}={previous.threshold} >= {current.name}={current.threshold}",
                    previous=previous.name,
                    current=current.name,
                )

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(bp.name for bp in self._breakpoints)

    @property
    def zero_breakpoint(self) -> str:
        """Name of the first (smallest) breakpoint."""
        return self._breakpoints[0].name

    def threshold(self, name: str) -> float:
        """
        Get the threshold of a named breakpoint.

        Raises:
            KeyError: If the name is not registered
        """
        return self._breakpoints[self._index[name]].threshold

    def next_threshold(self, name: str) -> float | None:
        """Threshold of the breakpoint after `name`, or None if `name` is the largest."""
        i = self._index[name] + 1
        return self._breakpoints[i].threshold if i < len(self._breakpoints) else None

    def index(self, name: str) -> int:
        return self._index[name]

    def get(self, name: str) -> Breakpoint | None:
        i = self._index.get(name)
        return None if i is None else self._breakpoints[i]

    def as_dict(self) -> dict[str, float]:
        return {bp.name: bp.threshold for bp in self._breakpoints}

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[Breakpoint]:
        return iter(self._breakpoints)

    def __len__(self) -> int:
        return len(self._breakpoints)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BreakpointRegistry):
            return NotImplemented
        return type(self) is type(other) and self._breakpoints == other._breakpoints

    def __repr__(self) -> str:
        pairs = ", ".join(f"{bp.name}={bp.threshold:g}{self.unit}" for bp in self._breakpoints)
        return f"{type(self).__name__}({pairs})"


class HiDPIRegistry(BreakpointRegistry):
    """
    Ordered, immutable registry of pixel-density breakpoints.

    Thresholds are unitless device-pixel ratios (dppx). Same ordering
    invariant as BreakpointRegistry but no zero breakpoint is required.
    """

    unit = "dppx"
    requires_zero = False

    @classmethod
    def default(cls, base_font_size: float = unit_constants.BASE_FONT_SIZE_PX) -> "HiDPIRegistry":
        return cls.from_mapping(registry_defaults.BREAKPOINTS_HIDPI)  # type: ignore[return-value]

    @staticmethod
    def _convert(name: str, raw: object, base_font_size: float) -> float:
        try:
            length = Length.parse(raw)  # type: ignore[arg-type]
        except ValueError as e:
            raise BreakpointConfigurationError(
                f"HiDPI breakpoint {name!r} has an invalid ratio: {raw!r}", name=name, value=repr(raw)
            ) from e
        if length.unit:
            raise BreakpointConfigurationError(
                f"HiDPI breakpoint {name!r} must be a unitless ratio, got {raw!r}", name=name, value=repr(raw)
            )
        return length.value


class Direction(str, Enum):
    """Direction qualifier of a breakpoint reference"""

    UP = "up"
    DOWN = "down"
    ONLY = "only"


@dataclass(frozen=True)
class BreakpointReference:
    """
    A breakpoint query: one target plus a direction.

    Exactly one of `name`, `length` or `orientation` is set.

    Example:
        >>> BreakpointReference.parse("medium down")
        BreakpointReference(name='medium', length=None, orientation=None, direction=<Direction.DOWN: 'down'>)
    """

    name: str | None = None
    length: Length | None = None
    orientation: str | None = None
    direction: Direction = Direction.UP

    def __post_init__(self) -> None:
        targets = [t for t in (self.name, self.length, self.orientation) if t is not None]
        if len(targets) != 1:
            raise ValueError("BreakpointReference needs exactly one of name, length or orientation")
        if self.orientation is not None and self.orientation not in registry_defaults.ORIENTATIONS:
            raise ValueError(f"Unknown orientation: {self.orientation!r}")
        if not isinstance(self.direction, Direction):
            object.__setattr__(self, "direction", Direction(self.direction))

    @classmethod
    def named(cls, name: str, direction: Direction | str = Direction.UP) -> "BreakpointReference":
        return cls(name=name, direction=Direction(direction))

    @classmethod
    def literal(cls, value: "Length | int | float | str", direction: Direction | str = Direction.UP) -> "BreakpointReference":
        return cls(length=Length.parse(value), direction=Direction(direction))

    @classmethod
    def parse(cls, text: str) -> "BreakpointReference":
        """
        Parse the textual form `<target> [up|down|only]`.

        Raises:
            ValueError: If the text is empty or has more than two parts
        """
        parts = text.split()
        if not parts or len(parts) > 2:
            raise ValueError(f"Cannot parse breakpoint reference: {text!r}")

        direction = Direction.UP
        if len(parts) == 2:
            direction = Direction(parts[1].lower())
        target = parts[0]

        if target.lower() in registry_defaults.ORIENTATIONS:
            return cls(orientation=target.lower(), direction=direction)
        if Length.is_length(target):
            return cls(length=Length.parse(target), direction=direction)
        return cls(name=target, direction=direction)

    @classmethod
    def coerce(cls, reference: "BreakpointReference | Length | int | float | str") -> "BreakpointReference":
        """Accept a reference, a string to parse, or a bare number/Length (literal, up)."""
        if isinstance(reference, BreakpointReference):
            return reference
        if isinstance(reference, str):
            return cls.parse(reference)
        return cls.literal(reference)

    @property
    def is_named(self) -> bool:
        return self.name is not None

    def __str__(self) -> str:
        target = self.name or self.orientation or str(self.length)
        return f"{target} {self.direction.value}"
