"""
Stream-backed console mirroring the browser/Node ``console`` print API.

``log``, ``info`` and ``debug`` go to stdout, ``warn`` and ``error`` go to
stderr, and ``group``/``group_end`` adjust a two-space indentation applied to
every subsequent line.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO, runtime_checkable

GROUP_INDENT = "  "


@runtime_checkable
class ConsolePort(Protocol):
    """Console methods a logger binds to."""

    def debug(self, *args: Any) -> None: ...

    def error(self, *args: Any) -> None: ...

    def group(self, *args: Any) -> None: ...

    def group_end(self, *args: Any) -> None: ...

    def info(self, *args: Any) -> None: ...

    def log(self, *args: Any) -> None: ...

    def warn(self, *args: Any) -> None: ...


class StreamConsole:
    """Console writing to text streams.

    Streams default to ``sys.stdout``/``sys.stderr`` resolved on each write,
    so redirection done after construction (pytest's ``capsys``,
    ``contextlib.redirect_stdout``) still applies.
    """

    def __init__(self, stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
        self._stdout = stdout
        self._stderr = stderr
        self.depth = 0

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def stream_for(self, mode: str) -> TextIO:
        """Stream the given severity is written to."""
        return self.stderr if mode in ("error", "warn") else self.stdout

    def _write(self, stream: TextIO, args: tuple[Any, ...]) -> None:
        message = " ".join(str(arg) for arg in args)
        indent = GROUP_INDENT * self.depth
        lines = message.split("\n")
        stream.write("\n".join(f"{indent}{line}" for line in lines) + "\n")
        stream.flush()

    def debug(self, *args: Any) -> None:
        self._write(self.stdout, args)

    def info(self, *args: Any) -> None:
        self._write(self.stdout, args)

    def log(self, *args: Any) -> None:
        self._write(self.stdout, args)

    def warn(self, *args: Any) -> None:
        self._write(self.stderr, args)

    def error(self, *args: Any) -> None:
        self._write(self.stderr, args)

    def group(self, *args: Any) -> None:
        if args:
            self._write(self.stdout, args)
        self.depth += 1

    def group_end(self, *args: Any) -> None:
        # Labels are accepted for API parity but never printed.
        if self.depth > 0:
            self.depth -= 1


def is_console(candidate: Any) -> bool:
    """Return True if ``candidate`` provides every console method."""
    return isinstance(candidate, ConsolePort)


_default_console: StreamConsole | None = None


def get_default_console() -> StreamConsole:
    """Return the process-wide console used when none is injected."""
    global _default_console
    if _default_console is None:
        _default_console = StreamConsole()
    return _default_console


__all__ = ["ConsolePort", "StreamConsole", "GROUP_INDENT", "is_console", "get_default_console"]
