from __future__ import annotations
import threading
from typing import Dict, List, Optional

from .errors import HandlerCloseError
from .levels import Level
from .logger import Logger
from .sequence import DEFAULT_COUNTER, SequenceCounter


class LoggingContext:
    """Owns a sequence counter and the loggers drawing ids from it.

    Tests create their own context to get an isolated counter and registry.
    """

    def __init__(self, counter: Optional[SequenceCounter] = None):
        self.counter = counter if counter is not None else SequenceCounter()
        self._loggers: Dict[str, Logger] = {}
        self._lock = threading.Lock()

    def allocate_next_id(self) -> int:
        return self.counter.allocate_next_id()

    def new_logger(self, name: str, level: Level = Level.DEBUG) -> Logger:
        """Create an unregistered logger sharing this context's counter."""
        return Logger(name, level=level, counter=self.counter)

    def get_logger(self, name: str) -> Logger:
        with self._lock:
            logger = self._loggers.get(name)
            if logger is None or logger.closed:
                logger = self.new_logger(name)
                self._loggers[name] = logger
            return logger

    def loggers(self) -> List[Logger]:
        with self._lock:
            return list(self._loggers.values())

    def close(self):
        with self._lock:
            loggers = list(self._loggers.values())
            self._loggers.clear()
        errors: List[Exception] = []
        for logger in loggers:
            try:
                logger.close()
            except HandlerCloseError as e:
                errors.extend(e.errors)
        if errors:
            raise HandlerCloseError("*", errors)


default_context = LoggingContext(DEFAULT_COUNTER)


def get_logger(name: str) -> Logger:
    return default_context.get_logger(name)
