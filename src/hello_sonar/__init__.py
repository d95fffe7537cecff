"""Public package surface: the startup greeting and integer addition.

``run`` emits the single ``Hello, SonarQube!`` log line; ``add`` and
``wrapping_add`` are pure helpers with documented overflow behaviour.
"""

from __future__ import annotations

from .domain import LogLevel, add, wrapping_add
from .hello_sonar import GREETING, greet, run, summary_info
from .runtime import LoggerProxy, create_logger

__all__ = [
    "GREETING",
    "LogLevel",
    "LoggerProxy",
    "add",
    "create_logger",
    "greet",
    "run",
    "summary_info",
    "wrapping_add",
]
