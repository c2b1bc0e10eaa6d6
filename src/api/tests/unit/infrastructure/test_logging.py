"""Unit tests for structlog configuration."""

import logging

import pytest
import structlog

from infrastructure.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


def _renderer():
    return structlog.get_config()["processors"][-1]


def test_json_output_without_tty(monkeypatch):
    """Non-interactive output should be JSON."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setattr("sys.stdout.isatty", lambda: False)

    configure_logging()

    assert isinstance(_renderer(), structlog.processors.JSONRenderer)


def test_force_color_uses_console_renderer(monkeypatch):
    """FORCE_COLOR=1 should select the console renderer."""
    monkeypatch.setenv("FORCE_COLOR", "1")

    configure_logging()

    assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)


@pytest.mark.parametrize(
    "debug,level,expected",
    [
        (False, logging.DEBUG, False),
        (False, logging.INFO, True),
        (True, logging.DEBUG, True),
    ],
)
def test_debug_flag_controls_minimum_level(monkeypatch, debug, level, expected):
    """Debug events should only pass through in debug mode."""
    monkeypatch.setattr("sys.stdout.isatty", lambda: False)

    configure_logging(debug=debug)

    wrapper_class = structlog.get_config()["wrapper_class"]
    logger = wrapper_class(structlog.PrintLogger(), processors=[], context={})
    assert logger.is_enabled_for(level) is expected
