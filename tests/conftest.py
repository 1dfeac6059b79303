"""
Central pytest configuration for the SOLID demo tests.

This file provides common fixtures and test markers for both unit and
integration tests.
"""

import logging

import pytest
from click.testing import CliRunner


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "logging: mark test as logging-related")
    config.addinivalue_line("markers", "config: mark test as configuration-related")
    config.addinivalue_line("markers", "cli: mark test as command line test")


@pytest.fixture
def clean_logging():
    """Clean up logging handlers before and after each test."""
    root_logger = logging.getLogger()
    app_logger = logging.getLogger("solid_principles")

    # Store original handlers
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level
    original_app_level = app_logger.level

    yield

    # Restore original state
    for handler in root_logger.handlers[:]:
        if handler not in original_handlers:
            handler.close()
        root_logger.removeHandler(handler)

    for handler in original_handlers:
        root_logger.addHandler(handler)

    root_logger.setLevel(original_level)
    app_logger.setLevel(original_app_level)


DEMO_ENV_VARS = ("SOLID_LOG_LEVEL", "SOLID_LOG_JSON")


@pytest.fixture
def demo_environ(monkeypatch):
    """Clear the demo settings; teardown also drops values loaded from a .env."""
    for name in DEMO_ENV_VARS:
        # setenv first so teardown restores the prior state, unset included
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def runner(clean_logging, demo_environ, monkeypatch):
    """CLI runner that ignores any .env file on the developer machine."""
    monkeypatch.setattr("solid_principles.cli.load_dotenv", lambda *a, **k: None)
    return CliRunner()


@pytest.fixture
def dotenv_runner(clean_logging, demo_environ, tmp_path, monkeypatch):
    """CLI runner whose working directory is an empty temporary project."""
    monkeypatch.chdir(tmp_path)
    return CliRunner()
