"""Protocols describing the boundaries of the logging handle.

Purpose
-------
Let :mod:`hello_sonar.runtime` depend on narrow contracts so tests can swap
the Rich console and the system clock for in-memory doubles.

Contents
--------
* :class:`ConsolePort` - renders a :class:`LogEvent` to a human-facing sink.
* :class:`ClockPort` - supplies timezone-aware timestamps.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from hello_sonar.domain.events import LogEvent


@runtime_checkable
class ConsolePort(Protocol):
    """Render a log event to an interactive console."""

    def emit(self, event: LogEvent, *, colorize: bool) -> None:
        """Render ``event`` with optional colour control."""


@runtime_checkable
class ClockPort(Protocol):
    """Provide the current time for log events."""

    def now(self) -> datetime: ...


__all__ = ["ClockPort", "ConsolePort"]
