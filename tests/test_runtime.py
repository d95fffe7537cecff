from __future__ import annotations

import pytest

from hello_sonar.config import Settings
from hello_sonar.domain.levels import LogLevel
from hello_sonar.runtime import LoggerProxy, create_logger, logger_from_settings


def test_info_emits_event_with_clock_timestamp(recording_console, fixed_clock) -> None:
    logger = create_logger("app", console=recording_console, clock=fixed_clock)

    result = logger.info("started", extra={"pid": 1})

    assert result["ok"] is True
    assert result["emitted"] is True
    [event] = recording_console.events
    assert event is result["event"]
    assert event.timestamp == fixed_clock.now()
    assert event.logger_name == "app"
    assert event.level is LogLevel.INFO
    assert event.extra == {"pid": 1}


def test_events_below_threshold_are_suppressed(recording_console, fixed_clock) -> None:
    logger = create_logger("app", console_level="warning", console=recording_console, clock=fixed_clock)

    assert logger.debug("d")["emitted"] is False
    assert logger.info("i")["emitted"] is False
    assert logger.warning("w")["emitted"] is True
    assert logger.error("e")["emitted"] is True
    assert logger.critical("c")["emitted"] is True
    assert [event.message for event in recording_console.events] == ["w", "e", "c"]


def test_each_handle_is_independent(recording_console, fixed_clock) -> None:
    first, second = recording_console, type(recording_console)()
    create_logger("one", console=first, clock=fixed_clock).info("a")
    create_logger("two", console=second, clock=fixed_clock).info("b")

    assert [e.message for e in first.events] == ["a"]
    assert [e.message for e in second.events] == ["b"]


def test_sink_failure_propagates(fixed_clock) -> None:
    class BrokenConsole:
        def emit(self, event, *, colorize):
            raise OSError("sink unavailable")

    logger = create_logger("app", console=BrokenConsole(), clock=fixed_clock)
    with pytest.raises(OSError, match="sink unavailable"):
        logger.info("boom")


def test_create_logger_rejects_blank_name(recording_console) -> None:
    with pytest.raises(ValueError, match="logger name"):
        create_logger("  ", console=recording_console)


def test_no_color_disables_colorize(recording_console, fixed_clock) -> None:
    logger = create_logger("app", console=recording_console, clock=fixed_clock, no_color=True)
    logger.info("plain")
    assert recording_console.colorize == [False]


def test_logger_from_settings_applies_level_and_name(recording_console) -> None:
    settings = Settings(console_level=LogLevel.ERROR, logger_name="svc")
    logger = logger_from_settings(settings, console=recording_console)

    assert isinstance(logger, LoggerProxy)
    assert logger.name == "svc"
    assert logger.level is LogLevel.ERROR
    logger.warning("ignored")
    assert recording_console.events == []
