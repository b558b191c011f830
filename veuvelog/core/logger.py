"""Named logger dispatching records to an ordered stack of handlers.

Dispatch is synchronous: a log call returns once every accepting handler has
handled the record. Each handler filters on its own level; the logger's own
``level`` is informational only.

Stack order is dispatch order. ``push_handler`` appends and ``pop_handler``
removes the most recently pushed handler, so the stack behaves as a true
stack while earlier handlers keep running first.
"""
from __future__ import annotations
import os
import sys
import threading
from typing import Any, Iterable, List, Optional, Tuple

from .errors import EmptyHandlerStackError, HandlerCloseError, LoggerClosedError, PanicError
from .handler import Handler, accepts, as_formatter
from .levels import Level
from .record import Record
from .sequence import DEFAULT_COUNTER, SequenceCounter

FATAL_EXIT_CODE = 1


def _terminate(code: int):
    """End the process immediately; no cleanup handlers run."""
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (AttributeError, OSError, ValueError):
            pass
    os._exit(code)


class Logger:
    def __init__(self, name: str, level: Level = Level.DEBUG, counter: Optional[SequenceCounter] = None):
        self.name = name
        self.level = level
        self._counter = counter if counter is not None else DEFAULT_COUNTER
        self._handlers: List[Handler] = []
        self._lock = threading.Lock()
        self._closed = False

    # --- handler stack --------------------------------------------------
    def push_handler(self, handler: Handler):
        with self._lock:
            self._ensure_open()
            self._append_back(handler)

    def pop_handler(self) -> Handler:
        with self._lock:
            self._ensure_open()
            if not self._handlers:
                raise EmptyHandlerStackError(self.name)
            return self._remove_back()

    def set_handlers(self, handlers: Iterable[Handler]):
        with self._lock:
            self._ensure_open()
            self._handlers = list(handlers)

    def get_handlers(self) -> List[Handler]:
        return list(self._handlers)

    @property
    def handlers(self) -> List[Handler]:
        return self.get_handlers()

    def _append_back(self, handler: Handler):
        self._handlers = self._handlers + [handler]

    def _remove_back(self) -> Handler:
        handler = self._handlers[-1]
        self._handlers = self._handlers[:-1]
        return handler

    # --- lifecycle ------------------------------------------------------
    @property
    def closed(self) -> bool:
        return self._closed

    def close(self):
        """Close every handler once. Failures are raised together after all were tried."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            handlers = list(self._handlers)
        errors: List[Exception] = []
        for h in handlers:
            try:
                h.close()
            except Exception as e:
                errors.append(e)
        if errors:
            raise HandlerCloseError(self.name, errors)

    def _ensure_open(self):
        if self._closed:
            raise LoggerClosedError(self.name)

    # --- dispatch -------------------------------------------------------
    def log(self, level: Level, args: Tuple[Any, ...], fmt: Optional[str] = None) -> Record:
        self._ensure_open()
        record = Record(
            id=self._counter.allocate_next_id(),
            module=self.name,
            level=level,
            args=args,
            fmt=fmt,
        )
        # the list is replaced, never mutated, on stack changes
        for h in self._handlers:
            if not accepts(h, level):
                continue
            formatter = as_formatter(h)
            record.message = formatter.format(record) if formatter is not None else None
            h.handle(record)
        return record

    def fatal(self, *args: Any):
        self.log(Level.CRITICAL, args)
        _terminate(FATAL_EXIT_CODE)

    def fatalf(self, fmt: str, *args: Any):
        self.log(Level.CRITICAL, args, fmt)
        _terminate(FATAL_EXIT_CODE)

    def panic(self, *args: Any):
        record = self.log(Level.CRITICAL, args)
        raise PanicError(record.render())

    def panicf(self, fmt: str, *args: Any):
        record = self.log(Level.CRITICAL, args, fmt)
        raise PanicError(record.render())

    def critical(self, *args: Any): self.log(Level.CRITICAL, args)
    def criticalf(self, fmt: str, *args: Any): self.log(Level.CRITICAL, args, fmt)
    def error(self, *args: Any): self.log(Level.ERROR, args)
    def errorf(self, fmt: str, *args: Any): self.log(Level.ERROR, args, fmt)
    def warning(self, *args: Any): self.log(Level.WARNING, args)
    def warningf(self, fmt: str, *args: Any): self.log(Level.WARNING, args, fmt)
    warn = warning
    warnf = warningf
    def notice(self, *args: Any): self.log(Level.NOTICE, args)
    def noticef(self, fmt: str, *args: Any): self.log(Level.NOTICE, args, fmt)
    def info(self, *args: Any): self.log(Level.INFO, args)
    def infof(self, fmt: str, *args: Any): self.log(Level.INFO, args, fmt)
    def debug(self, *args: Any): self.log(Level.DEBUG, args)
    def debugf(self, fmt: str, *args: Any): self.log(Level.DEBUG, args, fmt)

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"Logger({self.name!r}, handlers={len(self._handlers)}, {state})"
