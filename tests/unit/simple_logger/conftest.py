from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from simple_logger.utilities.time_provider import FakeClock, set_clock

FROZEN_NOW = datetime(2024, 1, 15, 10, 30, 45, 123456, tzinfo=UTC)


class RecordingConsole:
    """Console double that records every call instead of writing."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def _record(self, name: str, args: tuple[Any, ...]) -> None:
        self.calls.append((name, args))

    def debug(self, *args: Any) -> None:
        self._record("debug", args)

    def error(self, *args: Any) -> None:
        self._record("error", args)

    def group(self, *args: Any) -> None:
        self._record("group", args)

    def group_end(self, *args: Any) -> None:
        self._record("group_end", args)

    def info(self, *args: Any) -> None:
        self._record("info", args)

    def log(self, *args: Any) -> None:
        self._record("log", args)

    def warn(self, *args: Any) -> None:
        self._record("warn", args)


@pytest.fixture
def recording_console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def frozen_clock() -> FakeClock:
    clock = FakeClock(FROZEN_NOW)
    set_clock(clock)
    return clock
