"""
simple_logger: console print API with prefixes, timestamps and colours.

Typical usage::

    from simple_logger import create_logger

    logger = create_logger(prefix="worker")
    logger.info("ready")
"""

from simple_logger.colorize import (
    ansi_colorize,
    detect_color_system,
    identity_colorize,
    make_colorize,
)
from simple_logger.console import ConsolePort, StreamConsole, get_default_console
from simple_logger.defaults import (
    colorize_fallback,
    should_print_fallback,
    should_show_time_fallback,
    time_format_fallback,
)
from simple_logger.logger import create, create_logger, create_simple_logger
from simple_logger.types import (
    PRINT_MODES,
    Colorize,
    PrintMode,
    ShouldPrint,
    ShouldShowTime,
    SimpleLogger,
    SimpleLoggerOptions,
    TimeFormat,
    noop,
)

__version__ = "1.0.0"

__all__ = [
    "create",
    "create_logger",
    "create_simple_logger",
    "SimpleLogger",
    "SimpleLoggerOptions",
    "PrintMode",
    "PRINT_MODES",
    "Colorize",
    "ShouldPrint",
    "ShouldShowTime",
    "TimeFormat",
    "noop",
    "ConsolePort",
    "StreamConsole",
    "get_default_console",
    "ansi_colorize",
    "identity_colorize",
    "make_colorize",
    "detect_color_system",
    "colorize_fallback",
    "should_print_fallback",
    "should_show_time_fallback",
    "time_format_fallback",
    "__version__",
]
