from __future__ import annotations

import io
import logging

from simple_logger.console import StreamConsole, get_default_console
from simple_logger.defaults import (
    colorize_fallback,
    resolve_options,
    should_print_fallback,
    should_show_time_fallback,
    time_format_fallback,
)
from simple_logger.settings import load_environment
from simple_logger.types import PRINT_MODES, PrintMode, SimpleLoggerOptions


def test_should_print_fallback_outside_production() -> None:
    assert all(should_print_fallback(mode) for mode in PRINT_MODES)


def test_should_print_fallback_in_production(monkeypatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")

    assert not any(should_print_fallback(mode) for mode in PRINT_MODES)


def test_fallbacks_accept_a_preloaded_environment(monkeypatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    environment = load_environment()
    monkeypatch.delenv("APP_ENV")

    assert should_print_fallback(PrintMode.LOG, environment=environment) is False
    assert should_print_fallback(PrintMode.LOG) is True


def test_should_show_time_fallback(monkeypatch) -> None:
    assert should_show_time_fallback() is True

    monkeypatch.setenv("SIMPLE_LOGGER_SHOULD_SHOW_TIME", "off")

    assert should_show_time_fallback() is False


def test_time_format_fallback_uses_active_clock(frozen_clock) -> None:
    assert time_format_fallback() == "2024-01-15T10:30:45.123Z"

    frozen_clock.advance(1.5)

    assert time_format_fallback() == "2024-01-15T10:30:46.623Z"


def test_colorize_fallback_uses_terminal_colours(monkeypatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.setenv("TERM", "xterm-256color")

    assert colorize_fallback(PrintMode.INFO, ["x"]) == ["\x1b[34mx\x1b[0m"]

    monkeypatch.setenv("NO_COLOR", "true")

    assert colorize_fallback(PrintMode.INFO, ["x"]) == ["x"]


def test_colorize_fallback_keeps_redirected_output_plain() -> None:
    stream = io.StringIO()
    console = StreamConsole(stdout=stream, stderr=stream)

    for mode in PRINT_MODES:
        assert colorize_fallback(mode, ["[p]"], console=console) == ["[p]"]


def test_resolve_options_fills_every_default() -> None:
    resolved = resolve_options(SimpleLoggerOptions())

    assert resolved.prefix is None
    assert resolved.disable_auto_wrap_prefix is False
    assert resolved.show_time is True
    assert resolved.console is get_default_console()
    assert resolved.time_format is time_format_fallback
    assert resolved.should_print(PrintMode.LOG) is True
    assert resolved.colorize(PrintMode.ERROR, ["p"]) == colorize_fallback(
        PrintMode.ERROR, ["p"], console=get_default_console()
    )


def test_resolve_options_keeps_valid_values(recording_console) -> None:
    def fmt() -> str:
        return "now"

    def colorize(mode, prefixes):
        return prefixes

    def should_print(mode) -> bool:
        return False

    resolved = resolve_options(
        SimpleLoggerOptions(
            prefix="p",
            disable_auto_wrap_prefix=True,
            should_print=should_print,
            should_show_time=False,
            time_format=fmt,
            colorize=colorize,
            console=recording_console,
        )
    )

    assert resolved.prefix == "p"
    assert resolved.disable_auto_wrap_prefix is True
    assert resolved.should_print is should_print
    assert resolved.show_time is False
    assert resolved.time_format is fmt
    assert resolved.colorize is colorize
    assert resolved.console is recording_console


def test_resolve_options_reports_malformed_values(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="simple_logger.defaults"):
        resolved = resolve_options(SimpleLoggerOptions(prefix=7, time_format="iso"))

    assert resolved.prefix is None
    assert resolved.time_format is time_format_fallback
    assert "malformed prefix" in caplog.text
    assert "malformed time_format" in caplog.text


def test_truthy_but_not_true_wrap_flag_is_ignored() -> None:
    resolved = resolve_options(SimpleLoggerOptions(prefix="p", disable_auto_wrap_prefix="yes"))

    assert resolved.disable_auto_wrap_prefix is False
