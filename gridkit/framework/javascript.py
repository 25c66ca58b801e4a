"""
Breakpoint Runtime Bridge

Provides the stylesheet that carries the serialized registry and the
companion JavaScript that reads it back at runtime, so scripts can ask which
breakpoint is active without duplicating the breakpoint definitions.
"""

from ..domain.breakpoints import BreakpointRegistry
from ..domain.constants import registry_defaults
from ..template_engine import render_template
from .serialization import serialize_registry


def get_breakpoint_stylesheet(registry: BreakpointRegistry, meta_class: str = registry_defaults.META_CLASS) -> str:
    """
    Returns CSS that stores the serialized registry in a meta element's font-family.

    Args:
        registry: Registry to serialize
        meta_class: Class of the meta element the script reads

    Returns:
        String of CSS
    """
    return render_template(
        "breakpoints.css",
        meta_class=meta_class,
        serialized=serialize_registry(registry),
    )


def get_media_query_script(meta_class: str = registry_defaults.META_CLASS) -> str:
    """
    Returns the JavaScript that parses the serialized registry.

    Features:
    - Reads the meta element's computed font-family on DOMContentLoaded
    - Builds one `min-width` query per breakpoint
    - GridkitMQ.get(name), GridkitMQ.atLeast(name), GridkitMQ.current()

    Returns:
        String of JavaScript code
    """
    return render_template(
        "media_query.js",
        meta_class=meta_class,
        delimiter=registry_defaults.SERIALIZATION_DELIMITER,
    )


def get_javascript_docs():
    """
    Returns documentation for the runtime API.
    Used for reference and auto-generated documentation.
    """
    return {
        "GridkitMQ.init()": "Re-read breakpoints from the meta element",
        "GridkitMQ.get(name)": "Media query string for a breakpoint, or null",
        "GridkitMQ.atLeast(name)": "True when the viewport is at least the named breakpoint",
        "GridkitMQ.current()": "Name of the largest matching breakpoint",
    }
