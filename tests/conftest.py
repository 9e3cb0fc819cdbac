"""Pytest configuration and shared fixtures for the safedown test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging

import pytest

from safedown import Safedown
from safedown.filters import accept_all

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=300, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=100)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, property tests will fail to import
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "security: Tests of the injection-safety guarantees")
    config.addinivalue_line("markers", "fuzzing: Property-based tests with generated input")


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo the handler changes configure_logging() makes to the safedown logger."""
    package_logger = logging.getLogger("safedown")
    handlers = package_logger.handlers[:]
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.fixture
def converter() -> Safedown:
    """Provide a converter with default options (links mangled)."""
    return Safedown()


@pytest.fixture
def linking_converter() -> Safedown:
    """Provide a converter that accepts every link."""
    return Safedown(filter_links=accept_all)
