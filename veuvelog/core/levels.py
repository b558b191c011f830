"""Severity levels, most urgent first.

CRITICAL has the lowest value; a handler accepts a record when
``handler.level >= record.level``.
"""
from __future__ import annotations
from enum import IntEnum
from typing import Union

from .errors import ConfigError


class Level(IntEnum):
    CRITICAL = 0
    ERROR = 1
    WARNING = 2
    NOTICE = 3
    INFO = 4
    DEBUG = 5

    def __str__(self) -> str:
        return self.name


CRITICAL = Level.CRITICAL
ERROR = Level.ERROR
WARNING = Level.WARNING
NOTICE = Level.NOTICE
INFO = Level.INFO
DEBUG = Level.DEBUG

UNKNOWN = "UNKNOWN"

_ALIASES = {"WARN": Level.WARNING, "FATAL": Level.CRITICAL}


def level_name(value: int) -> str:
    """Canonical name for ``value``; ``"UNKNOWN"`` outside the six ranks."""
    try:
        return Level(value).name
    except (ValueError, TypeError):
        return UNKNOWN


def parse_level(text: Union[str, int, Level]) -> Level:
    """Turn a configuration value (``"info"``, ``"WARN"``, ``"4"``) into a Level."""
    if isinstance(text, Level):
        return text
    if isinstance(text, int):
        try:
            return Level(text)
        except ValueError:
            raise ConfigError(f"Unknown log level: {text!r}") from None
    key = str(text).strip().upper()
    if key.isdigit():
        return parse_level(int(key))
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return Level[key]
    except KeyError:
        raise ConfigError(f"Unknown log level: {text!r}") from None
