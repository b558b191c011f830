"""
veuvelog: leveled logging with an ordered stack of handlers.

    from veuvelog import get_logger, ConsoleHandler, INFO

    log = get_logger("svc")
    log.push_handler(ConsoleHandler(INFO))
    log.errorf("boom %s", "now")      # [ERROR] boom now
"""
from .core.context import LoggingContext, default_context, get_logger
from .core.errors import (
    ConfigError,
    EmptyHandlerStackError,
    HandlerCloseError,
    LoggerClosedError,
    PanicError,
    VeuvelogError,
)
from .core.formatter import Formatter
from .core.handler import FormattableHandler, Handler, as_formatter
from .core.levels import CRITICAL, DEBUG, ERROR, INFO, NOTICE, WARNING, Level, level_name, parse_level
from .core.logger import Logger
from .core.record import Record
from .core.sequence import SequenceCounter
from .handlers.console import ConsoleHandler
from .handlers.rich_console import RichConsoleHandler
from .system.settings import Settings, SettingsData, configure

__version__ = "0.1.0"

__all__ = [
    "CRITICAL", "ERROR", "WARNING", "NOTICE", "INFO", "DEBUG",
    "Level", "level_name", "parse_level",
    "Record", "SequenceCounter", "Formatter",
    "Handler", "FormattableHandler", "as_formatter",
    "Logger", "LoggingContext", "default_context", "get_logger",
    "ConsoleHandler", "RichConsoleHandler",
    "Settings", "SettingsData", "configure",
    "VeuvelogError", "EmptyHandlerStackError", "LoggerClosedError",
    "PanicError", "HandlerCloseError", "ConfigError",
]
