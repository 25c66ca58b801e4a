"""
Responsive value variants

A responsive value is either the same value at every breakpoint (Scalar) or a
partial per-breakpoint mapping (PerBreakpoint). Call sites match on the two
cases instead of inspecting raw types.

Usage:
    from gridkit.domain.values import PerBreakpoint, Scalar, responsive

    gutters = responsive({"small": "20px", "medium": "30px"})
    isinstance(gutters, PerBreakpoint)  # True
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Scalar(Generic[T]):
    """The same value at every breakpoint."""

    value: T


@dataclass(frozen=True)
class PerBreakpoint(Generic[T]):
    """
    Partial mapping of breakpoint name to value.

    Need not cover every registered breakpoint; gaps cascade from the nearest
    smaller defined breakpoint during lookup.
    """

    values: Mapping[str, T] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __contains__(self, name: object) -> bool:
        return name in self.values

    def __getitem__(self, name: str) -> T:
        return self.values[name]

    def keys(self):
        return self.values.keys()


ResponsiveValue = Union[Scalar[T], PerBreakpoint[T]]


def responsive(value: Any) -> "Scalar[Any] | PerBreakpoint[Any]":
    """
    Wrap a bare value in the matching variant.

    Variants pass through unchanged; mappings become PerBreakpoint; anything
    else becomes Scalar.
    """
    if isinstance(value, (Scalar, PerBreakpoint)):
        return value
    if isinstance(value, Mapping):
        return PerBreakpoint(value)
    return Scalar(value)
