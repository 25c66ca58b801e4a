"""
Breakpoint Configuration Management

Provides centralized, validated configuration for the breakpoint toolkit.
Values come from environment variables (a `.env` file is loaded when present)
and are validated eagerly so a bad registry fails before any resolution.

Usage:
    from gridkit.settings import build_resolver, get_config

    config = get_config().get_grid_config()
    print(config.base_font_size)

    resolver = build_resolver()

Environment variables:
    GRIDKIT_BREAKPOINTS        Standard registry, e.g. "small=0&medium=640px&large=1024px"
    GRIDKIT_BREAKPOINTS_HIDPI  HiDPI registry, e.g. "hidpi-1=1&hidpi-2=2"
    GRIDKIT_BASE_FONT_SIZE     Pixels per em (default 16)
    GRIDKIT_PRINT_BREAKPOINT   Largest breakpoint that also targets print (default "large")
    GRIDKIT_MEDIA_QUERIES      Wrap iteration output in media queries (default true)
    GRIDKIT_STRICT             Escalate warnings to errors (default false)
    GRIDKIT_LOG_LEVEL          Logging level (default INFO)
    GRIDKIT_LOG_JSON           JSON log output (default false)

Raises:
    ConfigurationError: If configuration is invalid
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .core.logging_config import setup_logging
from .domain.breakpoints import BreakpointRegistry, HiDPIRegistry
from .domain.constants import registry_defaults, unit_constants
from .domain.diagnostics import BreakpointConfigurationError, GridkitError, Rule
from .framework.resolver import BreakpointResolver
from .framework.serialization import parse_serialized

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(GridkitError):
    """Raised when configuration is missing or invalid."""

    rule = Rule.INVALID_CONFIG


def _default_pairs(pairs: tuple[tuple[str, str], ...]) -> str:
    return registry_defaults.SERIALIZATION_DELIMITER.join(f"{name}={value}" for name, value in pairs)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean (true/false), got {raw!r}")


@dataclass
class GridConfig:
    """
    Validated breakpoint configuration.
    """

    breakpoints: str = field(default_factory=lambda: _default_pairs(registry_defaults.BREAKPOINTS))
    breakpoints_hidpi: str = field(default_factory=lambda: _default_pairs(registry_defaults.BREAKPOINTS_HIDPI))
    base_font_size: float = unit_constants.BASE_FONT_SIZE_PX
    print_breakpoint: str | None = registry_defaults.PRINT_BREAKPOINT
    media_queries: bool = True
    strict: bool = False
    log_level: str = "INFO"
    log_json: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self):
        """
        Validate breakpoint configuration.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if self.base_font_size <= 0:
            raise ConfigurationError(f"GRIDKIT_BASE_FONT_SIZE must be positive: {self.base_font_size}")

        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigurationError(f"GRIDKIT_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}: {self.log_level}")

        # Building the registries runs their invariant checks
        registry = self.registry()
        self.hidpi_registry()

        if self.print_breakpoint and self.print_breakpoint not in registry:
            raise ConfigurationError(
                f"GRIDKIT_PRINT_BREAKPOINT {self.print_breakpoint!r} is not one of: {', '.join(registry.names)}"
            )

    def registry(self) -> BreakpointRegistry:
        """
        Build the standard registry.

        Raises:
            ConfigurationError: If the breakpoint string is malformed or violates registry invariants
        """
        try:
            return BreakpointRegistry.from_mapping(parse_serialized(self.breakpoints), self.base_font_size)
        except (ValueError, BreakpointConfigurationError) as e:
            raise ConfigurationError(f"GRIDKIT_BREAKPOINTS is invalid: {e}") from e

    def hidpi_registry(self) -> HiDPIRegistry:
        """
        Build the HiDPI registry.

        Raises:
            ConfigurationError: If the breakpoint string is malformed or violates registry invariants
        """
        try:
            return HiDPIRegistry.from_mapping(parse_serialized(self.breakpoints_hidpi))  # type: ignore[return-value]
        except (ValueError, BreakpointConfigurationError) as e:
            raise ConfigurationError(f"GRIDKIT_BREAKPOINTS_HIDPI is invalid: {e}") from e


class SettingsManager:
    """
    Centralized configuration manager.

    Loads and validates configuration from environment variables.
    """

    def __init__(self):
        """Initialize configuration (loads .env file)."""
        load_dotenv()

    def get_grid_config(self) -> GridConfig:
        """
        Get validated breakpoint configuration.

        Returns:
            GridConfig: Validated configuration

        Raises:
            ConfigurationError: If configuration is missing or invalid
        """
        defaults = GridConfig()

        raw_font_size = os.getenv("GRIDKIT_BASE_FONT_SIZE")
        try:
            base_font_size = float(raw_font_size) if raw_font_size else defaults.base_font_size
        except ValueError as e:
            raise ConfigurationError(f"GRIDKIT_BASE_FONT_SIZE must be a number: {raw_font_size!r}") from e

        print_breakpoint = os.getenv("GRIDKIT_PRINT_BREAKPOINT", defaults.print_breakpoint or "")

        return GridConfig(
            breakpoints=os.getenv("GRIDKIT_BREAKPOINTS", defaults.breakpoints),
            breakpoints_hidpi=os.getenv("GRIDKIT_BREAKPOINTS_HIDPI", defaults.breakpoints_hidpi),
            base_font_size=base_font_size,
            print_breakpoint=print_breakpoint or None,
            media_queries=_parse_bool("GRIDKIT_MEDIA_QUERIES", os.getenv("GRIDKIT_MEDIA_QUERIES", "true")),
            strict=_parse_bool("GRIDKIT_STRICT", os.getenv("GRIDKIT_STRICT", "false")),
            log_level=os.getenv("GRIDKIT_LOG_LEVEL", defaults.log_level),
            log_json=_parse_bool("GRIDKIT_LOG_JSON", os.getenv("GRIDKIT_LOG_JSON", "false")),
        )


# Convenience function for getting configuration
_config_instance = None


def get_config() -> SettingsManager:
    """
    Get the global configuration instance (singleton pattern).

    Returns:
        SettingsManager: The configuration manager
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = SettingsManager()
    return _config_instance


def build_resolver(config: GridConfig | None = None) -> BreakpointResolver:
    """
    Build a resolver from configuration.

    Args:
        config: Explicit configuration (default: read from the environment)

    Reading from the environment also applies GRIDKIT_LOG_LEVEL and
    GRIDKIT_LOG_JSON, see validate_config_on_startup().

    Raises:
        ConfigurationError: If configuration is missing or invalid
    """
    if config is None:
        config = validate_config_on_startup()
    return BreakpointResolver(
        config.registry(),
        config.hidpi_registry(),
        base_font_size=config.base_font_size,
        print_breakpoint=config.print_breakpoint,
        auto_media_queries=config.media_queries,
        strict=config.strict,
    )


def validate_config_on_startup() -> GridConfig:
    """
    Validate configuration at build startup.

    Call this before generating stylesheets to fail fast if the registry is
    invalid. The gridkit logger is configured from the validated settings.

    Raises:
        ConfigurationError: If any configuration is missing or invalid
    """
    config = get_config().get_grid_config()
    setup_logging(level=config.log_level, json_output=config.log_json)
    return config
