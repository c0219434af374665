"""Per-severity colour decoration for prefix segments.

Colours are cosmetic defaults. The colour system comes from rich's terminal
detection on the stream a severity is written to, so redirected output stays
plain and colours are downgraded to what the terminal supports.
"""

from __future__ import annotations

import sys
from functools import partial
from typing import Any, TextIO

from rich.color import ColorSystem
from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style

from simple_logger.types import Colorize, PrintMode

SEVERITY_STYLES: dict[PrintMode, Style] = {
    PrintMode.DEBUG: Style.parse("yellow"),
    PrintMode.ERROR: Style.parse("red"),
    PrintMode.GROUP: Style.parse("on grey50"),
    PrintMode.INFO: Style.parse("blue"),
    PrintMode.LOG: Style.parse("bright_black"),
    PrintMode.WARN: Style.parse("#FFA500"),
}

STDERR_MODES = frozenset({PrintMode.ERROR, PrintMode.WARN})


def identity_colorize(mode: PrintMode, prefixes: list[str]) -> list[str]:
    """Return the segments untouched."""
    return list(prefixes)


def ansi_colorize(
    mode: PrintMode,
    prefixes: list[str],
    color_system: ColorSystem = ColorSystem.TRUECOLOR,
) -> list[str]:
    """Wrap each segment in the ANSI sequence for ``mode`` at ``color_system`` depth."""
    style = SEVERITY_STYLES.get(PrintMode(mode))
    if style is None:
        return list(prefixes)
    return [style.render(prefix, color_system=color_system) for prefix in prefixes]


def detect_color_system(stream: TextIO) -> ColorSystem | None:
    """Return the colour system rich would use for ``stream``, or None for plain text.

    Honours ``NO_COLOR``, ``FORCE_COLOR``, ``TERM``/``COLORTERM`` and whether
    the stream is a terminal.
    """
    console = Console(file=stream)
    if console.no_color or console.color_system is None:
        return None
    return COLOR_SYSTEMS[console.color_system]


def make_colorize(color_system: ColorSystem | None) -> Colorize:
    if color_system is None:
        return identity_colorize
    return partial(ansi_colorize, color_system=color_system)


def console_stream(console: Any, mode: PrintMode) -> TextIO:
    """Stream ``console`` writes ``mode`` to; process streams for consoles that do not say."""
    stream_for = getattr(console, "stream_for", None)
    if callable(stream_for):
        return stream_for(mode)
    return sys.stderr if PrintMode(mode) in STDERR_MODES else sys.stdout


__all__ = [
    "SEVERITY_STYLES",
    "identity_colorize",
    "ansi_colorize",
    "detect_color_system",
    "make_colorize",
    "console_stream",
]
