from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional, Union

from ..core.context import LoggingContext, default_context
from ..core.errors import ConfigError
from ..core.formatter import Formatter
from ..core.handler import Handler
from ..core.levels import parse_level
from ..core.logger import Logger
from ..handlers.console import ConsoleHandler, COLOR_DISABLED_ENV
from ..handlers.rich_console import RichConsoleHandler
from .diagnostics import diagnostics

SETTINGS_FILENAME = ".veuvelog.json"
LEVEL_ENV = "VEUVELOG_LEVEL"
RICH_ENV = "VEUVELOG_RICH"

@dataclass
class SettingsData:
    level: str = "INFO"      # handler threshold
    color: bool = True
    rich: bool = False       # RichConsoleHandler instead of ConsoleHandler
    template: Optional[str] = None

    def normalize(self):
        try:
            self.level = parse_level(self.level).name
        except ConfigError:
            self.level = "INFO"
        self.color = bool(self.color)
        self.rich = bool(self.rich)
        if self.template is not None and not isinstance(self.template, str):
            self.template = None

class Settings:
    def __init__(self, data: SettingsData, path: Optional[Path] = None):
        self.data = data
        self.path = path

    @classmethod
    def _resolve_path(cls) -> Optional[Path]:
        for base in (Path.cwd(), Path(os.path.expanduser("~"))):
            candidate = base / SETTINGS_FILENAME
            if candidate.is_file():
                return candidate
        return None

    @classmethod
    def load(cls, path: Union[str, Path, None] = None) -> "Settings":
        path = Path(path) if path is not None else cls._resolve_path()
        data = SettingsData()
        if path is not None and path.exists():
            try:
                raw = json.loads(path.read_text())
                known = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in known})
            except (OSError, ValueError, TypeError, AttributeError) as e:
                diagnostics().warningf("Failed to parse settings %s, using defaults: %s", path, e)
                data = SettingsData()
        data = cls._apply_env(data)
        data.normalize()
        return cls(data, path)

    @staticmethod
    def _apply_env(data: SettingsData) -> SettingsData:
        if os.environ.get(LEVEL_ENV):
            data.level = os.environ[LEVEL_ENV]
        if os.environ.get(COLOR_DISABLED_ENV) == "1":
            data.color = False
        if os.environ.get(RICH_ENV) == "1":
            data.rich = True
        return data

    def save(self, path: Union[str, Path, None] = None):
        target = Path(path) if path is not None else (self.path or Path.cwd() / SETTINGS_FILENAME)
        target.write_text(json.dumps(asdict(self.data), indent=2))
        self.path = target

    def build_handler(self) -> Handler:
        level = parse_level(self.data.level)
        if self.data.rich:
            formatter = Formatter(self.data.template) if self.data.template else None
            return RichConsoleHandler(level, formatter=formatter)
        return ConsoleHandler(level, color=self.data.color)

def configure(name: str, settings: Optional[Settings] = None,
              context: Optional[LoggingContext] = None) -> Logger:
    """Return the named logger with one console handler built from ``settings``."""
    settings = settings if settings is not None else Settings.load()
    ctx = context if context is not None else default_context
    logger = ctx.get_logger(name)
    logger.push_handler(settings.build_handler())
    return logger
