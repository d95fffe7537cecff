"""Log level abstraction with console glyphs and name/number parsing.

Purpose
-------
Give the logging handle a small, explicit severity vocabulary that maps
one-to-one onto the :mod:`logging` constants.

Contents
--------
* :class:`LogLevel` enum with conversion helpers and presentation metadata.
* ``_ICON_TABLE`` constant mapping levels to console glyphs.
"""

from __future__ import annotations

from enum import Enum


class LogLevel(Enum):
    """Enumerated logging levels used throughout the package."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @property
    def severity(self) -> str:
        """Return the lowercase severity name."""

        return self.name.lower()

    @property
    def icon(self) -> str:
        """Return the unicode icon shown in front of console lines."""

        return _ICON_TABLE[self]

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` corresponding to ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc

    @classmethod
    def parse(cls, value: "str | int | LogLevel") -> "LogLevel":
        """Accept an enum member, a stdlib number, or a (numeric) level name.

        Examples
        --------
        >>> LogLevel.parse("warning")
        <LogLevel.WARNING: 30>
        >>> LogLevel.parse("10")
        <LogLevel.DEBUG: 10>
        """
        if isinstance(value, LogLevel):
            return value
        if isinstance(value, int):
            return cls.from_numeric(value)
        text = value.strip()
        if text.isdigit():
            return cls.from_numeric(int(text))
        return cls.from_name(text)


_ICON_TABLE = {
    LogLevel.DEBUG: "🐞",
    LogLevel.INFO: "ℹ",
    LogLevel.WARNING: "⚠",
    LogLevel.ERROR: "✖",
    LogLevel.CRITICAL: "☠",
}
# Console glyphs displayed by the Rich adapter per log level.


__all__ = ["LogLevel"]
