"""Environment-driven settings with optional ``.env`` support.

Purpose
-------
Collect the handful of knobs the greeting entry point honours (log level,
colour switches, logger name) from ``os.environ``. A nearby ``.env`` file can
seed the environment first; real environment variables always win.

Contents
--------
* :class:`Settings` - immutable snapshot of the configuration.
* :func:`load_settings` - parse a mapping (defaults to ``os.environ``).
* :func:`should_use_dotenv` / :func:`enable_dotenv` - ``.env`` toggling.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from .domain.levels import LogLevel

ENV_PREFIX = "HELLO_SONAR_"
DOTENV_ENV_VAR = f"{ENV_PREFIX}USE_DOTENV"
LOG_LEVEL_ENV_VAR = f"{ENV_PREFIX}LOG_LEVEL"
FORCE_COLOR_ENV_VAR = f"{ENV_PREFIX}FORCE_COLOR"
NO_COLOR_ENV_VAR = f"{ENV_PREFIX}NO_COLOR"
LOGGER_NAME_ENV_VAR = f"{ENV_PREFIX}LOGGER_NAME"

DEFAULT_LOGGER_NAME = "hello_sonar"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_DOTENV_PATH: Path | None = None


@dataclass(slots=True, frozen=True)
class Settings:
    """Resolved configuration for the logging handle."""

    console_level: LogLevel = LogLevel.INFO
    force_color: bool = False
    no_color: bool = False
    logger_name: str = DEFAULT_LOGGER_NAME


def parse_bool(name: str, value: str | None, default: bool) -> bool:
    """Interpret ``value`` as a boolean flag; blank or missing means ``default``.

    Examples
    --------
    >>> parse_bool("X", "Yes", False)
    True
    >>> parse_bool("X", None, True)
    True
    >>> parse_bool("X", "maybe", False)
    Traceback (most recent call last):
    ...
    ValueError: X must be a boolean flag (got 'maybe')
    """
    if value is None or not value.strip():
        return default
    candidate = value.strip().lower()
    if candidate in _TRUTHY:
        return True
    if candidate in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag (got {value!r})")


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from ``environ`` (``os.environ`` when omitted).

    ``NO_COLOR`` is honoured as an alias of ``HELLO_SONAR_NO_COLOR``.
    """
    env = os.environ if environ is None else environ
    raw_level = env.get(LOG_LEVEL_ENV_VAR, "").strip()
    try:
        level = LogLevel.parse(raw_level) if raw_level else LogLevel.INFO
    except ValueError as exc:
        raise ValueError(f"{LOG_LEVEL_ENV_VAR}: {exc}") from exc
    no_color = parse_bool(NO_COLOR_ENV_VAR, env.get(NO_COLOR_ENV_VAR), default=bool(env.get("NO_COLOR")))
    logger_name = env.get(LOGGER_NAME_ENV_VAR, "").strip() or DEFAULT_LOGGER_NAME
    return Settings(
        console_level=level,
        force_color=parse_bool(FORCE_COLOR_ENV_VAR, env.get(FORCE_COLOR_ENV_VAR), default=False),
        no_color=no_color,
        logger_name=logger_name,
    )


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is enabled; an explicit flag beats the environment.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="on")
    True
    >>> should_use_dotenv()
    False
    """
    if explicit is not None:
        return explicit
    return parse_bool(DOTENV_ENV_VAR, env_value, default=False)


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` into ``os.environ`` without overriding existing keys.

    The lookup walks upwards from the current working directory. The first
    successful load is remembered and later calls return the same path
    without reading the file again.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """
    global _DOTENV_PATH
    if _DOTENV_PATH is not None:
        return _DOTENV_PATH
    found = find_dotenv(usecwd=True)
    if not found:
        return None
    candidate = Path(found).resolve()
    load_dotenv(candidate, override=False)
    _DOTENV_PATH = candidate
    return candidate


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_PATH
    _DOTENV_PATH = None


__all__ = [
    "DOTENV_ENV_VAR",
    "FORCE_COLOR_ENV_VAR",
    "LOGGER_NAME_ENV_VAR",
    "LOG_LEVEL_ENV_VAR",
    "NO_COLOR_ENV_VAR",
    "Settings",
    "enable_dotenv",
    "load_settings",
    "parse_bool",
    "should_use_dotenv",
]
