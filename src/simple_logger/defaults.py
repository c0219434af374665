"""
Default behaviours and option resolution.

Each fallback reads the environment through :mod:`simple_logger.settings`
unless handed an already loaded :class:`LoggerEnvironment`, so standalone use
follows changes made after import while :func:`resolve_options` reads the
environment once per logger.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Any

from simple_logger.colorize import console_stream, detect_color_system, make_colorize
from simple_logger.console import ConsolePort, get_default_console, is_console
from simple_logger.settings import LoggerEnvironment, load_environment
from simple_logger.types import (
    Colorize,
    PrintMode,
    ShouldPrint,
    SimpleLoggerOptions,
    TimeFormat,
)
from simple_logger.utilities.datetime_helpers import to_iso_utc_millis
from simple_logger.utilities.logging_patterns import get_logger
from simple_logger.utilities.time_provider import get_clock

logger = get_logger(__name__, component="defaults")


def should_print_fallback(mode: PrintMode, environment: LoggerEnvironment | None = None) -> bool:
    """By default, printing is only enabled outside production."""
    environment = environment or load_environment()
    return not environment.is_production


def should_show_time_fallback(environment: LoggerEnvironment | None = None) -> bool:
    """By default, show time unless SIMPLE_LOGGER_SHOULD_SHOW_TIME is false-like."""
    environment = environment or load_environment()
    return environment.should_show_time


def time_format_fallback() -> str:
    """By default, display the time as an ISO 8601 UTC string."""
    return to_iso_utc_millis(get_clock().now())


def colorize_fallback(
    mode: PrintMode, prefixes: list[str], console: ConsolePort | None = None
) -> list[str]:
    """Colour prefixes per severity when the stream ``mode`` is written to supports it."""
    stream = console_stream(console or get_default_console(), mode)
    return make_colorize(detect_color_system(stream))(mode, prefixes)


@dataclass(frozen=True)
class ResolvedOptions:
    """Options with every default applied."""

    prefix: str | None
    disable_auto_wrap_prefix: bool
    should_print: ShouldPrint
    show_time: bool
    time_format: TimeFormat
    colorize: Colorize
    console: ConsolePort


def _fallback(field: str, value: Any, default: Any) -> Any:
    if value is not None:
        logger.debug("Ignoring malformed %s option %r", field, value)
    return default


def _resolve_show_time(value: Any, environment: LoggerEnvironment) -> bool:
    if isinstance(value, bool):
        return value
    if callable(value):
        return bool(value())
    return _fallback("should_show_time", value, should_show_time_fallback(environment))


def resolve_options(options: SimpleLoggerOptions) -> ResolvedOptions:
    """Fill absent or malformed fields of ``options`` with the defaults."""
    environment = load_environment()

    prefix = options.prefix
    if prefix is not None and not isinstance(prefix, str):
        prefix = _fallback("prefix", prefix, None)

    should_print = options.should_print
    if not callable(should_print):
        should_print = _fallback(
            "should_print", should_print, partial(should_print_fallback, environment=environment)
        )

    time_format = options.time_format
    if not callable(time_format):
        time_format = _fallback("time_format", time_format, time_format_fallback)

    console = options.console
    if not is_console(console):
        console = _fallback("console", console, get_default_console())

    colorize = options.colorize
    if not callable(colorize):
        colorize = _fallback("colorize", colorize, partial(colorize_fallback, console=console))

    return ResolvedOptions(
        prefix=prefix,
        disable_auto_wrap_prefix=options.disable_auto_wrap_prefix is True,
        should_print=should_print,
        show_time=_resolve_show_time(options.should_show_time, environment),
        time_format=time_format,
        colorize=colorize,
        console=console,
    )


__all__ = [
    "should_print_fallback",
    "should_show_time_fallback",
    "time_format_fallback",
    "colorize_fallback",
    "ResolvedOptions",
    "resolve_options",
]
