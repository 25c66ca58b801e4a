"""
Registry Serialization

Encodes a breakpoint registry as a delimited key=value string so a runtime
script can read the breakpoint definitions back out of the compiled CSS.

Format:
    small=0em&medium=40em&large=64em
"""

from ..domain.breakpoints import BreakpointRegistry, Length
from ..domain.constants import registry_defaults
from .units import format_number


def serialize_registry(registry: BreakpointRegistry, delimiter: str = registry_defaults.SERIALIZATION_DELIMITER) -> str:
    """
    Serialize a registry to `name1=value1em&name2=value2em`.

    HiDPI registries serialize their unitless ratios.

    Example:
        >>> serialize_registry(BreakpointRegistry.from_mapping({"small": 0, "medium": 640}))
        'small=0em&medium=40em'
    """
    unit = "em" if registry.unit == "em" else ""
    serialized = ""
    for bp in registry:
        serialized += f"{bp.name}={format_number(bp.threshold)}{unit}{delimiter}"
    return serialized[: -len(delimiter)] if serialized else serialized


def parse_serialized(text: str, delimiter: str = registry_defaults.SERIALIZATION_DELIMITER) -> dict[str, Length]:
    """
    Parse a serialized registry back into name -> Length pairs, preserving order.

    Raises:
        ValueError: If a pair has no `=` or its value is not a length

    Example:
        >>> parse_serialized("small=0em&medium=40em")
        {'small': Length(value=0.0, unit='em'), 'medium': Length(value=40.0, unit='em')}
    """
    parsed: dict[str, Length] = {}
    text = text.strip().strip("'\"")
    if not text:
        return parsed

    for pair in text.split(delimiter):
        name, sep, raw = pair.partition("=")
        if not sep or not name.strip():
            raise ValueError(f"Malformed breakpoint pair: {pair!r}")
        parsed[name.strip()] = Length.parse(raw.strip())
    return parsed
