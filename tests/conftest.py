"""
Minimal Conftest.
"""

import pytest

from simple_logger.console import get_default_console
from simple_logger.utilities.time_provider import reset_clock

LOGGER_ENV_VARS = (
    "APP_ENV",
    "ENVIRONMENT",
    "SIMPLE_LOGGER_SHOULD_SHOW_TIME",
    "NO_COLOR",
    "FORCE_COLOR",
    "COLORTERM",
    "TTY_COMPATIBLE",
    "TTY_INTERACTIVE",
)


@pytest.fixture(autouse=True)
def isolate_logger_environment(monkeypatch):
    """Clear the environment signals the logger reads so host settings do not leak in."""
    for name in LOGGER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    yield

    reset_clock()
    get_default_console().depth = 0
