"""Handler capability interfaces.

Any sink (file, socket, syslog, test recorder) plugs into a Logger by
providing ``level``, ``handle`` and ``close``. A handler that also exposes a
``formatter`` gets the record text rendered by that formatter before
``handle`` is called.
"""
from __future__ import annotations
from typing import Optional, Protocol, runtime_checkable

from .formatter import Formatter
from .levels import Level
from .record import Record


@runtime_checkable
class Handler(Protocol):
    level: Level

    def handle(self, record: Record) -> None: ...

    def close(self) -> None: ...


@runtime_checkable
class FormattableHandler(Handler, Protocol):
    formatter: Optional[Formatter]


def as_formatter(handler: object) -> Optional[Formatter]:
    """Return the handler's formatter, or None for plain handlers."""
    fmt = getattr(handler, "formatter", None)
    if fmt is None or not callable(getattr(fmt, "format", None)):
        return None
    return fmt


def accepts(handler: Handler, level: Level) -> bool:
    return handler.level >= level
