"""Composition of the logging handle used by the greeting entry point.

Purpose
-------
Translate a console port, a clock, and a severity threshold into a
:class:`LoggerProxy`. Every call to :func:`create_logger` returns an
independent handle; nothing is stored at module level, so callers own the
handle they log through.

Contents
--------
* :class:`LoggerProxy` - level-specific helpers returning diagnostic payloads.
* :func:`create_process_log_event` - factory for the per-event callable.
* :func:`create_logger` / :func:`logger_from_settings` - public constructors.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Callable, MutableMapping, Optional

from .adapters import RichConsoleAdapter
from .application.ports import ClockPort, ConsolePort
from .domain import LogEvent, LogLevel

if TYPE_CHECKING:
    from .config import Settings

ProcessCallable = Callable[..., dict[str, Any]]


class _SystemClock(ClockPort):
    """Concrete clock port returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


def create_process_log_event(
    *,
    logger_name: str,
    console: ConsolePort,
    console_level: LogLevel,
    clock: ClockPort,
    colorize_console: bool = True,
) -> ProcessCallable:
    """Build the callable that turns one logging call into a console line.

    Returns
    -------
    Callable[..., dict[str, Any]]
        Function accepting ``level``, ``message`` and ``extra``; it returns
        ``{"ok": True, "emitted": bool, "event": LogEvent}``. Exceptions raised
        by the console propagate to the caller.

    Examples
    --------
    >>> class DummyConsole(ConsolePort):
    ...     def __init__(self):
    ...         self.events = []
    ...     def emit(self, event, *, colorize):
    ...         self.events.append(event.message)
    >>> class DummyClock(ClockPort):
    ...     def now(self):
    ...         return datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)
    >>> sink = DummyConsole()
    >>> process = create_process_log_event(
    ...     logger_name='demo', console=sink, console_level=LogLevel.INFO, clock=DummyClock()
    ... )
    >>> process(level=LogLevel.DEBUG, message='hidden', extra={})['emitted']
    False
    >>> process(level=LogLevel.INFO, message='shown', extra={})['emitted']
    True
    >>> sink.events
    ['shown']
    """

    def process(*, level: LogLevel, message: str, extra: MutableMapping[str, Any]) -> dict[str, Any]:
        event = LogEvent(
            timestamp=clock.now(),
            logger_name=logger_name,
            level=level,
            message=message,
            extra=dict(extra),
        )
        emitted = level.value >= console_level.value
        if emitted:
            console.emit(event, colorize=colorize_console)
        return {"ok": True, "emitted": emitted, "event": event}

    return process


class LoggerProxy:
    """Lightweight facade for logging calls.

    Level helpers return the diagnostic dictionary produced by the process
    callable so callers and tests can inspect what happened.
    """

    def __init__(self, name: str, process: ProcessCallable, level: LogLevel = LogLevel.INFO) -> None:
        self._name = name
        self._process = process
        self._level = level

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> LogLevel:
        return self._level

    def debug(self, message: str, *, extra: Optional[MutableMapping[str, Any]] = None) -> dict[str, Any]:
        return self._log(LogLevel.DEBUG, message, extra)

    def info(self, message: str, *, extra: Optional[MutableMapping[str, Any]] = None) -> dict[str, Any]:
        return self._log(LogLevel.INFO, message, extra)

    def warning(self, message: str, *, extra: Optional[MutableMapping[str, Any]] = None) -> dict[str, Any]:
        return self._log(LogLevel.WARNING, message, extra)

    def error(self, message: str, *, extra: Optional[MutableMapping[str, Any]] = None) -> dict[str, Any]:
        return self._log(LogLevel.ERROR, message, extra)

    def critical(self, message: str, *, extra: Optional[MutableMapping[str, Any]] = None) -> dict[str, Any]:
        return self._log(LogLevel.CRITICAL, message, extra)

    def _log(self, level: LogLevel, message: str, extra: Optional[MutableMapping[str, Any]]) -> dict[str, Any]:
        """Delegate to the process callable; ``None`` extra becomes an empty mapping."""
        payload = extra if extra is not None else {}
        return self._process(level=level, message=message, extra=payload)


def create_logger(
    name: str,
    *,
    console_level: str | int | LogLevel = LogLevel.INFO,
    console: ConsolePort | None = None,
    clock: ClockPort | None = None,
    force_color: bool = False,
    no_color: bool = False,
) -> LoggerProxy:
    """Return a new :class:`LoggerProxy` writing to ``console``.

    Parameters
    ----------
    name:
        Logger name stamped on every event.
    console_level:
        Minimum severity that reaches the console.
    console:
        Console port; defaults to a :class:`RichConsoleAdapter` on stderr.
    clock:
        Timestamp source; defaults to the UTC system clock.
    force_color / no_color:
        Colour switches forwarded to the default Rich adapter.
    """
    if not name.strip():
        raise ValueError("logger name must not be empty")
    level = LogLevel.parse(console_level)
    sink = console if console is not None else RichConsoleAdapter(force_color=force_color, no_color=no_color)
    process = create_process_log_event(
        logger_name=name,
        console=sink,
        console_level=level,
        clock=clock if clock is not None else _SystemClock(),
        colorize_console=not no_color,
    )
    return LoggerProxy(name, process, level)


def logger_from_settings(settings: "Settings", *, console: ConsolePort | None = None) -> LoggerProxy:
    """Build a handle from :class:`hello_sonar.config.Settings`."""
    return create_logger(
        settings.logger_name,
        console_level=settings.console_level,
        console=console,
        force_color=settings.force_color,
        no_color=settings.no_color,
    )


__all__ = ["LoggerProxy", "create_logger", "create_process_log_event", "logger_from_settings"]
