"""Application layer ports."""

from __future__ import annotations

from .ports import ClockPort, ConsolePort

__all__ = ["ClockPort", "ConsolePort"]
