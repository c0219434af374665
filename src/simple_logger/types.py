"""Core types shared by the logger factory and its defaults."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from enum import Enum
from typing import TYPE_CHECKING, Any

from simple_logger.utilities.logging_patterns import get_logger

if TYPE_CHECKING:
    from simple_logger.console import ConsolePort

logger = get_logger(__name__, component="options")


class PrintMode(str, Enum):
    """Console severities a logger exposes."""

    DEBUG = "debug"
    ERROR = "error"
    GROUP = "group"
    GROUP_END = "group_end"
    INFO = "info"
    LOG = "log"
    WARN = "warn"


PRINT_MODES: tuple[PrintMode, ...] = tuple(PrintMode)

Colorize = Callable[[PrintMode, list[str]], list[str]]
ShouldPrint = Callable[[PrintMode], bool]
ShouldShowTime = Callable[[], bool]
TimeFormat = Callable[[], str]
PrintFn = Callable[..., None]


def noop(*args: Any, **kwargs: Any) -> None:
    """Accept anything and do nothing."""


@dataclass(frozen=True)
class SimpleLoggerOptions:
    """Configuration accepted by :func:`simple_logger.create_logger`.

    Every field is optional. ``None`` means "use the default", which is
    resolved from the environment at logger creation time.
    """

    prefix: str | None = None
    disable_auto_wrap_prefix: bool = False
    should_print: ShouldPrint | None = None
    should_show_time: bool | ShouldShowTime | None = None
    time_format: TimeFormat | None = None
    colorize: Colorize | None = None
    console: ConsolePort | None = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> SimpleLoggerOptions:
        """Build options from a plain mapping, ignoring keys that are not option names."""
        known = {field.name for field in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in mapping.items():
            if key == "show_time":
                key = "should_show_time"
            if key in known:
                values[key] = value
            else:
                logger.warning("Ignoring unknown logger option %r", key)
        return cls(**values)


@dataclass(frozen=True)
class SimpleLogger:
    """Handle exposing the console print API.

    Each attribute is either the console method of the same name with the
    logger's decorations bound as leading arguments, or :func:`noop`.
    """

    debug: PrintFn
    error: PrintFn
    group: PrintFn
    group_end: PrintFn
    info: PrintFn
    log: PrintFn
    warn: PrintFn

    def get(self, mode: PrintMode | str) -> PrintFn:
        """Return the operation bound for ``mode``."""
        return getattr(self, PrintMode(mode).value)


__all__ = [
    "PrintMode",
    "PRINT_MODES",
    "Colorize",
    "ShouldPrint",
    "ShouldShowTime",
    "TimeFormat",
    "PrintFn",
    "noop",
    "SimpleLoggerOptions",
    "SimpleLogger",
]
