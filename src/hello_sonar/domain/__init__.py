"""Domain layer: severities, log events and integer arithmetic."""

from __future__ import annotations

from .arithmetic import DEFAULT_BITS, add, wrapping_add
from .events import LogEvent
from .levels import LogLevel

__all__ = ["DEFAULT_BITS", "LogEvent", "LogLevel", "add", "wrapping_add"]
