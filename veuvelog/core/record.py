"""A single log event.

Built by the logger once per log call and handed to every accepting handler
in turn. Handlers must copy anything they keep past ``handle``.
"""
from __future__ import annotations
from datetime import datetime
from typing import Any, Optional, Tuple

from .levels import Level, level_name


class Record:
    __slots__ = ("id", "time", "module", "level", "level_name", "args", "fmt", "_rendered", "_message")

    def __init__(self, id: int, module: str, level: Level, args: Tuple[Any, ...] = (),
                 fmt: Optional[str] = None, time: Optional[datetime] = None):
        self.id = id
        self.time = time if time is not None else datetime.now()
        self.module = module
        self.level = level
        self.level_name = level_name(level)
        self.args = tuple(args)
        self.fmt = fmt
        self._rendered: Optional[str] = None
        self._message: Optional[str] = None

    def render(self) -> str:
        """Plain text of the call arguments, computed once."""
        if self._rendered is None:
            self._rendered = self._render()
        return self._rendered

    def _render(self) -> str:
        if self.fmt is None:
            return " ".join(_safe(str, a) for a in self.args)
        try:
            return self.fmt % self.args
        except Exception as e:
            # keep the event readable when template and arguments disagree
            args = ", ".join(_safe(repr, a) for a in self.args)
            return f"{self.fmt} !(BADFORMAT {type(e).__name__}: {e}; args=[{args}])"

    @property
    def message(self) -> str:
        """Text a handler should emit: a formatter's output if one was installed, else ``render()``."""
        if self._message is not None:
            return self._message
        return self.render()

    @message.setter
    def message(self, text: Optional[str]):
        self._message = text

    def __repr__(self) -> str:
        return f"Record(id={self.id}, module={self.module!r}, level={self.level_name}, message={self.message!r})"


def _safe(convert, value: Any) -> str:
    """``convert(value)``, or a BADFORMAT marker when the object's own method raises."""
    try:
        return convert(value)
    except Exception as e:
        return f"!(BADFORMAT {type(e).__name__} in {convert.__name__}(): {e})"
