"""
Error classes for clearer exception sources.
"""
from __future__ import annotations
from typing import List

class VeuvelogError(Exception):
    pass

class EmptyHandlerStackError(VeuvelogError, IndexError):
    def __init__(self, logger_name: str):
        super().__init__(f"Logger '{logger_name}': tried to pop from an empty handler stack")
        self.logger_name = logger_name

class LoggerClosedError(VeuvelogError):
    def __init__(self, logger_name: str):
        super().__init__(f"Logger '{logger_name}' is closed")
        self.logger_name = logger_name

class PanicError(VeuvelogError, RuntimeError):
    """Raised by ``Logger.panic``/``Logger.panicf`` after the record was dispatched."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class HandlerCloseError(VeuvelogError):
    def __init__(self, logger_name: str, errors: List[Exception]):
        detail = "; ".join(f"{type(e).__name__}: {e}" for e in errors)
        super().__init__(f"Logger '{logger_name}': {len(errors)} handler(s) failed to close: {detail}")
        self.logger_name = logger_name
        self.errors = errors

class ConfigError(VeuvelogError, ValueError):
    pass
