"""The library's own logger, used to report configuration problems."""
from __future__ import annotations

from ..core.context import get_logger
from ..core.levels import Level
from ..core.logger import Logger
from ..handlers.console import ConsoleHandler

DIAGNOSTIC_LOGGER = "veuvelog"


def diagnostics() -> Logger:
    logger = get_logger(DIAGNOSTIC_LOGGER)
    if not logger.handlers:
        logger.push_handler(ConsoleHandler(Level.WARNING, stderr=True))
    return logger
