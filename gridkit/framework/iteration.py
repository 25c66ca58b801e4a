"""
Breakpoint Iteration

Runs a CSS-producing block once per breakpoint, with the current breakpoint
available on an explicit context object and each output wrapped in that
breakpoint's media query.

Usage:
    context = BreakpointContext()

    def gutters(ctx):
        size = get_value({"small": "10px", "medium": "15px"}, ctx.current, resolver.registry)
        return f".grid {{ padding: {size}; }}"

    css = each_breakpoint(resolver, gutters, context=context)
"""

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager

from ..core.logging_config import get_logger, log_with_context
from .resolver import BreakpointResolver

logger = get_logger(__name__)


class BreakpointContext:
    """
    Holds the breakpoint currently being generated.

    `scope()` sets the current breakpoint and restores the previous one on
    exit, so nested iterations see the innermost breakpoint and the outer
    value comes back afterwards.
    """

    def __init__(self, current: str | None = None):
        self.current = current
        self._depth = 0

    @property
    def depth(self) -> int:
        """Number of scopes currently entered."""
        return self._depth

    @contextmanager
    def scope(self, name: str) -> Iterator["BreakpointContext"]:
        previous = self.current
        self.current = name
        self._depth += 1
        try:
            yield self
        finally:
            self._depth -= 1
            self.current = previous

    def __repr__(self) -> str:
        return f"BreakpointContext(current={self.current!r}, depth={self._depth})"


def each_breakpoint(
    resolver: BreakpointResolver,
    block: Callable[[BreakpointContext], str],
    breakpoints: Iterable[str] | None = None,
    *,
    context: BreakpointContext | None = None,
    zero_breakpoint: bool = True,
    media_queries: bool | None = None,
) -> str:
    """
    Run `block` once per breakpoint and collect its CSS.

    Args:
        resolver: Resolver providing the registry and media queries
        block: Called with the context scoped to each breakpoint; returns CSS
        breakpoints: Names to iterate (default: every registered breakpoint)
        context: Context to scope; a fresh one is used when omitted
        zero_breakpoint: Include the zero breakpoint
        media_queries: Wrap each output in its media query (default: resolver.auto_media_queries).
            Pass False to group several breakpoints' output in a custom query.

    Returns:
        CSS chunks joined by newlines, empty chunks dropped
    """
    names = list(resolver.registry.names if breakpoints is None else breakpoints)
    ctx = context if context is not None else BreakpointContext()
    wrap = resolver.auto_media_queries if media_queries is None else media_queries
    zero = resolver.registry.zero_breakpoint

    chunks = []
    for name in names:
        if name == zero and not zero_breakpoint:
            continue
        with ctx.scope(name):
            css = block(ctx)
        if not css or not css.strip():
            continue
        chunks.append(resolver.wrap(name, css) if wrap else css)

    log_with_context(logger, "debug", f"Generated {len(chunks)} breakpoint blocks", breakpoints=names)
    return "\n".join(chunks)
