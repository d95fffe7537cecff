"""Behavioural tests for the startup greeting and the public package surface."""

from __future__ import annotations

import pytest

import hello_sonar
from hello_sonar import GREETING, add, create_logger, greet, run, summary_info
from hello_sonar.domain.levels import LogLevel


def test_greeting_text_is_fixed() -> None:
    assert GREETING == "Hello, SonarQube!"


def test_run_logs_exactly_one_greeting_line(recording_console, fixed_clock) -> None:
    logger = create_logger("hello_sonar", console=recording_console, clock=fixed_clock)

    assert run(logger=logger) == 0

    assert len(recording_console.events) == 1
    event = recording_console.events[0]
    assert event.message == "Hello, SonarQube!"
    assert event.level is LogLevel.INFO


def test_run_ignores_arguments(recording_console) -> None:
    logger = create_logger("hello_sonar", console=recording_console)
    assert run(["--anything", "goes"], logger=logger) == 0
    assert [event.message for event in recording_console.events] == [GREETING]


def test_run_without_handle_writes_one_line_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    assert run() == 0

    captured = capsys.readouterr()
    assert captured.out == ""
    lines = captured.err.splitlines()
    assert len(lines) == 1
    assert "Hello, SonarQube!" in lines[0]
    assert "INFO" in lines[0]


@pytest.mark.parametrize("level", ["WARNING", "ERROR", "CRITICAL", "50"])
def test_run_greets_even_above_info_threshold(
    level: str, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("HELLO_SONAR_LOG_LEVEL", level)

    assert run() == 0

    lines = capsys.readouterr().err.splitlines()
    assert len(lines) == 1
    assert "Hello, SonarQube!" in lines[0]


def test_greet_returns_diagnostic_payload(recording_console) -> None:
    result = greet(create_logger("svc", console=recording_console))
    assert result["ok"] is True
    assert result["event"].logger_name == "svc"


def test_package_exports_add() -> None:
    assert add(2, 3) == 5
    assert hello_sonar.wrapping_add(2**31 - 1, 1) == -(2**31)


def test_summary_info_contains_metadata() -> None:
    summary = summary_info()
    assert "Info for hello_sonar" in summary
    assert "version" in summary
    assert summary.endswith("\n")
    assert summary_info() == summary
