"""
Breakpoint Framework

Package Structure:
    - units.py: Number formatting, em values, fraction percentages
    - resolver.py: Breakpoint references to media conditions and @media blocks
    - lookup.py: Responsive value lookup with mobile-first cascade
    - iteration.py: Per-breakpoint block replication
    - serialization.py: Registry to/from "name=value&..." strings
    - javascript.py: Serialized registry stylesheet and runtime script
"""

from .iteration import BreakpointContext, each_breakpoint
from .javascript import get_breakpoint_stylesheet, get_javascript_docs, get_media_query_script
from .lookup import get_value, require_value, snap_to_breakpoint
from .resolver import BreakpointResolver, Resolution
from .serialization import parse_serialized, serialize_registry
from .units import format_number, fraction_to_percentage

__all__ = [
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
    "get_javascript_docs",
    "format_number",
    "fraction_to_percentage",
]
