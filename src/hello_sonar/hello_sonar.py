"""Greeting entry point and public helpers.

Purpose
-------
Expose the startup greeting (:func:`run`, :func:`greet`) and the addition
helpers behind one module so ``import hello_sonar`` and the CLI share the same
code paths.

Contents
--------
* :data:`GREETING` - the fixed startup message.
* :func:`greet` - log the greeting through a caller-owned handle.
* :func:`run` - program entry point; builds its own handle when none is given.
* :func:`summary_info` - metadata banner used by the CLI ``info`` command.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Sequence

from .config import load_settings
from .domain.levels import LogLevel
from .runtime import LoggerProxy, logger_from_settings

GREETING = "Hello, SonarQube!"


def greet(logger: LoggerProxy) -> dict[str, Any]:
    """Log :data:`GREETING` at ``INFO`` level through ``logger``.

    Returns
    -------
    dict[str, Any]
        The diagnostic payload of :meth:`LoggerProxy.info`.
    """
    return logger.info(GREETING)


def run(argv: Sequence[str] | None = None, *, logger: LoggerProxy | None = None) -> int:
    """Emit the startup greeting and return the process exit status.

    ``argv`` is accepted for entry-point compatibility and ignored. Without an
    injected ``logger`` a handle is built from the environment settings and
    lives only for this call; its threshold is capped at ``INFO`` so the
    greeting line is always written. Errors raised by the logging sink
    propagate.

    Examples
    --------
    >>> from hello_sonar.runtime import create_logger
    >>> class Sink:
    ...     lines = []
    ...     def emit(self, event, *, colorize):
    ...         self.lines.append(event.message)
    >>> run(["ignored"], logger=create_logger("demo", console=Sink()))
    0
    >>> Sink.lines
    ['Hello, SonarQube!']
    """
    del argv
    if logger is None:
        settings = load_settings()
        if settings.console_level.value > LogLevel.INFO.value:
            settings = replace(settings, console_level=LogLevel.INFO)
        logger = logger_from_settings(settings)
    greet(logger)
    return 0


def summary_info() -> str:
    """Return the metadata banner used by the CLI ``info`` command.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = ["GREETING", "greet", "run", "summary_info"]
