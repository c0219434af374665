"""
Logger factory.

``create_logger`` returns a :class:`SimpleLogger` whose operations are the
console's own methods with the logger's prefixes (timestamp, ``[prefix]``)
bound as leading arguments, or no-ops for severities that are switched off.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import partial
from typing import Any

from simple_logger.defaults import ResolvedOptions, resolve_options
from simple_logger.types import (
    PRINT_MODES,
    PrintFn,
    PrintMode,
    SimpleLogger,
    SimpleLoggerOptions,
    noop,
)
from simple_logger.utilities.logging_patterns import get_logger

logger = get_logger(__name__, component="factory")


def build_prefixes(resolved: ResolvedOptions) -> list[str]:
    """Assemble the segments printed in front of every message."""
    prefixes: list[str] = []

    if resolved.show_time:
        prefixes.append(resolved.time_format())

    prefix = resolved.prefix
    if prefix:
        prefixes.append(prefix if resolved.disable_auto_wrap_prefix else f"[{prefix}]")

    return prefixes


def _bind(mode: PrintMode, resolved: ResolvedOptions, prefixes: list[str]) -> PrintFn:
    if not resolved.should_print(mode):
        return noop

    method = getattr(resolved.console, mode.value)
    if mode is PrintMode.GROUP_END:
        return method
    return partial(method, *resolved.colorize(mode, list(prefixes)))


def _coerce_options(options: SimpleLoggerOptions | Mapping[str, Any] | None) -> SimpleLoggerOptions:
    if isinstance(options, SimpleLoggerOptions):
        return options
    if isinstance(options, Mapping):
        return SimpleLoggerOptions.from_mapping(options)
    if options is not None:
        logger.debug("Ignoring malformed logger options %r", options)
    return SimpleLoggerOptions()


def create_logger(
    options: SimpleLoggerOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> SimpleLogger:
    """
    Create a logger exposing the same print API as the console.

    Args:
        options: Options record or mapping; anything else is treated as empty.
        **overrides: Individual option fields, applied on top of ``options``.

    Returns:
        SimpleLogger with one callable per severity.

    Example:
        >>> log = create_logger(prefix="Awesome logger", should_show_time=False)
        >>> log.error("y")  # writes "[Awesome logger] y" to stderr
    """
    base = _coerce_options(options)
    if overrides:
        base = SimpleLoggerOptions.from_mapping({**vars(base), **overrides})

    resolved = resolve_options(base)
    prefixes = build_prefixes(resolved)

    return SimpleLogger(**{mode.value: _bind(mode, resolved, prefixes) for mode in PRINT_MODES})


create = create_logger
create_simple_logger = create_logger

__all__ = ["create_logger", "create", "create_simple_logger", "build_prefixes"]
