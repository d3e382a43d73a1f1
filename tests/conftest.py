"""Pytest configuration and shared fixtures for the markup2md test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
from pathlib import Path
from typing import Generator

import pytest
from utils import cleanup_test_dir, create_test_temp_dir

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests with generated input")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def ticket_description() -> str:
    """Provide a ticket description that uses every supported construct.

    Returns
    -------
    str
        Wiki markup with headings, a code block, admonitions and plain lines.

    """
    return (
        "h1. Crash on startup\n"
        "The service exits right after boot.\n"
        "h3. Steps\n"
        "{code:language=bash|linenumbers=true}\n"
        "systemctl start svc\n"
        "{code}\n"
        "{warning:title=Impact}\n"
        "All tenants affected\n"
        "{warning}\n"
        "{note}\n"
        "Seen since 2.4\n"
        "{note}\n"
        "Thanks!"
    )


@pytest.fixture
def restore_package_logger() -> Generator[logging.Logger, None, None]:
    """Restore the markup2md logger's level and handlers after a test reconfigures it."""
    package_logger = logging.getLogger("markup2md")
    saved_level = package_logger.level
    saved_handlers = list(package_logger.handlers)
    try:
        yield package_logger
    finally:
        for handler in package_logger.handlers:
            if handler not in saved_handlers:
                handler.close()
        package_logger.handlers[:] = saved_handlers
        package_logger.setLevel(saved_level)
