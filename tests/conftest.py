from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO

import pytest
from rich.console import Console

from hello_sonar.domain.events import LogEvent

FIXED_NOW = datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc)


class RecordingConsole:
    """In-memory console port capturing emitted events."""

    def __init__(self) -> None:
        self.events: list[LogEvent] = []
        self.colorize: list[bool] = []

    def emit(self, event: LogEvent, *, colorize: bool) -> None:
        self.events.append(event)
        self.colorize.append(colorize)


class FixedClock:
    def now(self) -> datetime:
        return FIXED_NOW


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system=None)


@pytest.fixture
def recording_console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host settings from leaking into tests."""

    for key in (
        "HELLO_SONAR_LOG_LEVEL",
        "HELLO_SONAR_FORCE_COLOR",
        "HELLO_SONAR_NO_COLOR",
        "HELLO_SONAR_LOGGER_NAME",
        "HELLO_SONAR_USE_DOTENV",
        "NO_COLOR",
    ):
        monkeypatch.delenv(key, raising=False)
