"""
Tests for breakpoint domain models
"""

import pytest

from gridkit.domain.breakpoints import (
    Breakpoint,
    BreakpointReference,
    BreakpointRegistry,
    Direction,
    HiDPIRegistry,
    Length,
)
from gridkit.domain.diagnostics import BreakpointConfigurationError, Rule


class TestLength:
    """Test Length parsing and conversion"""

    def test_parse_number_is_unitless(self):
        """Test bare numbers parse as unitless lengths"""
        assert Length.parse(640) == Length(640.0, "")

    def test_parse_strings(self):
        """Test px, em and rem strings"""
        assert Length.parse("640px") == Length(640.0, "px")
        assert Length.parse("40em") == Length(40.0, "em")
        assert Length.parse(" 2.5rem ") == Length(2.5, "rem")
        assert Length.parse(".5em") == Length(0.5, "em")

    def test_parse_invalid(self):
        """Test invalid values raise ValueError"""
        for raw in ("medium", "10vw", "", True, None):
            with pytest.raises(ValueError, match="Not a length"):
                Length.parse(raw)  # type: ignore[arg-type]

    def test_unsupported_unit(self):
        """Test constructing with an unknown unit"""
        with pytest.raises(ValueError, match="Unsupported length unit"):
            Length(10, "vh")

    def test_is_length(self):
        """Test is_length does not raise"""
        assert Length.is_length("800px")
        assert Length.is_length(800)
        assert not Length.is_length("tablet")
        assert not Length.is_length(False)

    def test_to_em(self):
        """Test px and unitless values divide by the base font size"""
        assert Length.parse("640px").to_em() == 40.0
        assert Length.parse(1024).to_em() == 64.0
        assert Length.parse("40em").to_em() == 40.0
        assert Length.parse("640px").to_em(base_font_size=10) == 64.0


class TestBreakpointRegistry:
    """Test BreakpointRegistry construction and invariants"""

    def test_from_mapping_normalizes_to_em(self, small_registry):
        """Test thresholds are stored in em"""
        assert small_registry.as_dict() == {"small": 0.0, "medium": 40.0, "large": 64.0}

    def test_from_pairs_preserves_order(self):
        """Test building from a sequence of pairs"""
        registry = BreakpointRegistry.from_mapping([("xs", "0"), ("md", "48em")])
        assert registry.names == ("xs", "md")

    def test_default_registry(self, default_registry):
        """Test built-in registry values"""
        assert default_registry.names == ("small", "medium", "large", "xlarge", "xxlarge")
        assert default_registry.threshold("xxlarge") == 90.0

    def test_zero_breakpoint(self, small_registry):
        """Test the zero breakpoint is the first entry"""
        assert small_registry.zero_breakpoint == "small"

    def test_next_threshold(self, small_registry):
        """Test next_threshold and the largest breakpoint"""
        assert small_registry.next_threshold("small") == 40.0
        assert small_registry.next_threshold("medium") == 64.0
        assert small_registry.next_threshold("large") is None

    def test_lookup_helpers(self, small_registry):
        """Test index, get, contains, len and iteration"""
        assert small_registry.index("large") == 2
        assert small_registry.get("medium") == Breakpoint("medium", 40.0)
        assert small_registry.get("tablet") is None
        assert "medium" in small_registry
        assert "tablet" not in small_registry
        assert len(small_registry) == 3
        assert [bp.name for bp in small_registry] == ["small", "medium", "large"]

    def test_unknown_threshold_raises_key_error(self, small_registry):
        """Test threshold() on an unknown name"""
        with pytest.raises(KeyError):
            small_registry.threshold("tablet")

    def test_first_breakpoint_must_be_zero(self):
        """Test a non-zero first threshold is a fatal configuration error"""
        with pytest.raises(BreakpointConfigurationError, match="must have a threshold of 0") as exc_info:
            BreakpointRegistry.from_mapping({"small": 320, "medium": 640})
        assert exc_info.value.diagnostic.rule is Rule.INVALID_REGISTRY
        assert exc_info.value.diagnostic.is_fatal

    def test_empty_registry(self):
        """Test an empty registry is rejected"""
        with pytest.raises(BreakpointConfigurationError, match="at least one breakpoint"):
            BreakpointRegistry.from_mapping({})

    def test_duplicate_names(self):
        """Test duplicate names are rejected"""
        with pytest.raises(BreakpointConfigurationError, match="Duplicate breakpoint name"):
            BreakpointRegistry.from_mapping([("small", 0), ("small", 640)])

    def test_thresholds_must_increase(self):
        """Test non-increasing thresholds are rejected"""
        with pytest.raises(BreakpointConfigurationError, match="strictly increasing"):
            BreakpointRegistry.from_mapping({"small": 0, "large": 1024, "medium": 640})
        with pytest.raises(BreakpointConfigurationError, match="strictly increasing"):
            BreakpointRegistry.from_mapping({"small": 0, "medium": "40em", "also-medium": "640px"})

    def test_invalid_threshold_value(self):
        """Test unparseable thresholds are rejected"""
        with pytest.raises(BreakpointConfigurationError, match="invalid threshold"):
            BreakpointRegistry.from_mapping({"small": 0, "medium": "wide"})

    def test_equality(self):
        """Test registries with the same breakpoints compare equal"""
        first = BreakpointRegistry.from_mapping({"small": 0, "medium": 640})
        second = BreakpointRegistry.from_mapping({"small": "0em", "medium": "40em"})
        assert first == second


class TestHiDPIRegistry:
    """Test HiDPIRegistry"""

    def test_default_values(self, hidpi_registry):
        """Test built-in HiDPI ratios"""
        assert hidpi_registry.as_dict() == {"hidpi-1": 1.0, "hidpi-1-5": 1.5, "hidpi-2": 2.0, "hidpi-3": 3.0}

    def test_no_zero_breakpoint_required(self):
        """Test HiDPI registries may start above zero"""
        registry = HiDPIRegistry.from_mapping({"retina": 2})
        assert registry.threshold("retina") == 2.0

    def test_ratios_must_be_unitless(self):
        """Test units are rejected"""
        with pytest.raises(BreakpointConfigurationError, match="unitless ratio"):
            HiDPIRegistry.from_mapping({"retina": "2px"})

    def test_ratios_must_increase(self):
        """Test ordering invariant"""
        with pytest.raises(BreakpointConfigurationError, match="strictly increasing"):
            HiDPIRegistry.from_mapping({"hidpi-2": 2, "hidpi-1": 1})

    def test_ratios_must_be_positive(self):
        """Test zero and negative ratios are rejected"""
        with pytest.raises(BreakpointConfigurationError, match="must be positive"):
            HiDPIRegistry.from_mapping({"flat": 0, "hidpi-2": 2})
        with pytest.raises(BreakpointConfigurationError, match="negative threshold"):
            HiDPIRegistry.from_mapping({"inverted": -1, "hidpi-2": 2})


class TestBreakpointReference:
    """Test BreakpointReference construction and parsing"""

    def test_parse_named(self):
        """Test named references with and without direction"""
        assert BreakpointReference.parse("medium") == BreakpointReference(name="medium")
        assert BreakpointReference.parse("medium down").direction is Direction.DOWN
        assert BreakpointReference.parse("large only") == BreakpointReference.named("large", "only")

    def test_parse_literal(self):
        """Test literal lengths"""
        reference = BreakpointReference.parse("800px down")
        assert reference.length == Length(800.0, "px")
        assert reference.direction is Direction.DOWN
        assert not reference.is_named

    def test_parse_orientation(self):
        """Test orientation keywords"""
        assert BreakpointReference.parse("landscape").orientation == "landscape"
        assert BreakpointReference.parse("Portrait").orientation == "portrait"

    def test_parse_invalid(self):
        """Test malformed reference text"""
        with pytest.raises(ValueError):
            BreakpointReference.parse("")
        with pytest.raises(ValueError):
            BreakpointReference.parse("medium up extra")
        with pytest.raises(ValueError):
            BreakpointReference.parse("medium sideways")

    def test_exactly_one_target(self):
        """Test references need exactly one target"""
        with pytest.raises(ValueError, match="exactly one"):
            BreakpointReference()
        with pytest.raises(ValueError, match="exactly one"):
            BreakpointReference(name="medium", length=Length(10))

    def test_direction_string_is_coerced(self):
        """Test direction given as a string"""
        reference = BreakpointReference(name="medium", direction="down")  # type: ignore[arg-type]
        assert reference.direction is Direction.DOWN

    def test_coerce(self):
        """Test coerce accepts references, strings and numbers"""
        reference = BreakpointReference.named("medium")
        assert BreakpointReference.coerce(reference) is reference
        assert BreakpointReference.coerce("medium down") == BreakpointReference.named("medium", "down")
        assert BreakpointReference.coerce(800) == BreakpointReference.literal(800)

    def test_str(self):
        """Test textual form"""
        assert str(BreakpointReference.parse("medium down")) == "medium down"
        assert str(BreakpointReference.literal("800px")) == "800px up"
