"""Pytest configuration and shared fixtures."""

import pytest
import structlog

from yearcal.config import reset_calendar_config


@pytest.fixture(autouse=True)
def reset_calendar_config_for_all_tests():
    """Reset the calendar configuration before and after each test.

    The configuration is a module-level singleton that persists across
    tests. This fixture ensures each test starts from the defaults.
    """
    reset_calendar_config()
    yield
    reset_calendar_config()


@pytest.fixture(autouse=True)
def reset_structlog_for_all_tests():
    """Undo configure_logging calls made by a test (e.g. through the CLI)."""
    yield
    structlog.reset_defaults()
