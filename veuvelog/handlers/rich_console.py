"""Formatting console handler rendered through rich.

Unlike ConsoleHandler it carries a Formatter, so the logger renders the
record with it (timestamp and logger name by default) before ``handle``.
"""
from __future__ import annotations
from typing import Dict, Optional

from rich.console import Console
from rich.text import Text

from ..core.formatter import Formatter
from ..core.levels import Level, level_name
from ..core.record import Record

LEVEL_STYLES: Dict[Level, str] = {
    Level.CRITICAL: "bold bright_white on red",
    Level.ERROR: "bright_white on red",
    Level.WARNING: "black on yellow",
    Level.NOTICE: "bright_white on blue",
    Level.INFO: "bright_white on blue",
    Level.DEBUG: "white on blue",
}


class RichConsoleHandler:
    def __init__(self, level: Level = Level.DEBUG, formatter: Optional[Formatter] = None,
                 console: Optional[Console] = None):
        self.level = level
        self.formatter = formatter if formatter is not None else Formatter()
        self.console = console if console is not None else Console(highlight=False)

    def handle(self, record: Record):
        line = Text.assemble(
            "[",
            (level_name(record.level), LEVEL_STYLES.get(record.level, "")),
            "] ",
            record.message,
        )
        self.console.print(line, soft_wrap=True)

    def close(self):
        pass
