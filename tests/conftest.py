"""
Pytest configuration and shared fixtures

Provides common registries, resolvers and a clean configuration environment.
"""

import logging

import pytest

from gridkit import settings
from gridkit.domain.breakpoints import BreakpointRegistry, HiDPIRegistry
from gridkit.framework.resolver import BreakpointResolver

# ===== Registry Fixtures =====


@pytest.fixture
def small_registry():
    """Three-step registry: small=0, medium=640px, large=1024px"""
    return BreakpointRegistry.from_mapping({"small": 0, "medium": 640, "large": 1024})


@pytest.fixture
def four_step_registry():
    """Registry ordered small < medium < large < xlarge"""
    return BreakpointRegistry.from_mapping({"small": 0, "medium": "640px", "large": "1024px", "xlarge": "1200px"})


@pytest.fixture
def default_registry():
    """The built-in five-step registry"""
    return BreakpointRegistry.default()


@pytest.fixture
def hidpi_registry():
    """The built-in HiDPI registry"""
    return HiDPIRegistry.default()


# ===== Resolver Fixtures =====


@pytest.fixture
def resolver():
    """Resolver over the built-in registries"""
    return BreakpointResolver()


@pytest.fixture
def small_resolver(small_registry):
    """Resolver over the three-step registry"""
    return BreakpointResolver(small_registry)


# ===== Environment Fixtures =====


@pytest.fixture
def clean_env(monkeypatch, restore_gridkit_logger):
    """Remove GRIDKIT_* variables, reset the settings singleton and restore logging afterwards"""
    for name in (
        "GRIDKIT_BREAKPOINTS",
        "GRIDKIT_BREAKPOINTS_HIDPI",
        "GRIDKIT_BASE_FONT_SIZE",
        "GRIDKIT_PRINT_BREAKPOINT",
        "GRIDKIT_MEDIA_QUERIES",
        "GRIDKIT_STRICT",
        "GRIDKIT_LOG_LEVEL",
        "GRIDKIT_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings, "_config_instance", None)
    monkeypatch.setattr(settings, "load_dotenv", lambda *args, **kwargs: False)
    return monkeypatch


@pytest.fixture
def restore_gridkit_logger():
    """Restore the gridkit logger after tests that call setup_logging"""
    package_logger = logging.getLogger("gridkit")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield package_logger
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
