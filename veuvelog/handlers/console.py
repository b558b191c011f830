"""
Console handler: one ``[LEVEL] message`` line per record on standard output
(or standard error with ``stderr=True``).
Level names are color coded with colorama escape sequences unless color is
disabled (Windows consoles, ``color=False`` or VEUVELOG_COLOR_DISABLED=1).
"""
from __future__ import annotations
import os
import sys
from typing import Dict, Optional, TextIO

from colorama import Back, Fore, Style

from ..core.levels import Level, level_name
from ..core.record import Record

COLOR_DISABLED_ENV = "VEUVELOG_COLOR_DISABLED"

INFO_COLOR = Fore.LIGHTWHITE_EX + Back.BLUE
WARNING_COLOR = Fore.LIGHTBLACK_EX + Back.YELLOW
ERROR_COLOR = Fore.LIGHTWHITE_EX + Back.RED
RESET = Style.RESET_ALL

LEVEL_COLORS: Dict[Level, str] = {
    Level.DEBUG: INFO_COLOR,
    Level.INFO: INFO_COLOR,
    Level.NOTICE: INFO_COLOR,
    Level.WARNING: WARNING_COLOR,
    Level.ERROR: ERROR_COLOR,
    Level.CRITICAL: ERROR_COLOR,
}


def color_supported() -> bool:
    if os.name == "nt":
        return False
    return os.environ.get(COLOR_DISABLED_ENV) != "1"


class ConsoleHandler:
    def __init__(self, level: Level = Level.DEBUG, color: Optional[bool] = None,
                 stream: Optional[TextIO] = None, stderr: bool = False):
        self.level = level
        self.disable_color = not color_supported() or color is False
        self._stream = stream
        self.stderr = stderr

    @property
    def stream(self) -> TextIO:
        if self._stream is not None:
            return self._stream
        # resolved per write so redirected std streams are honoured
        return sys.stderr if self.stderr else sys.stdout

    def level_tag(self, lvl: Level) -> str:
        name = level_name(lvl)
        color = LEVEL_COLORS.get(lvl, "")
        if self.disable_color or not color:
            return f"[{name}]"
        return f"[{color}{name}{RESET}]"

    def handle(self, record: Record):
        self.stream.write(f"{self.level_tag(record.level)} {record.message}\n")

    def close(self):
        pass

    def __repr__(self) -> str:
        return f"ConsoleHandler(level={level_name(self.level)}, color={not self.disable_color})"
