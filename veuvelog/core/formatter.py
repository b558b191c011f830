"""Template driven record rendering.

Templates use ``%``-mapping fields:
  %(id)d       record sequence id
  %(time)s     capture time, rendered with ``datefmt``
  %(module)s   name of the originating logger
  %(level)s    level name
  %(levelno)d  numeric level
  %(message)s  rendered call arguments
"""
from __future__ import annotations
from typing import Any, Dict

from .record import Record

DEFAULT_TEMPLATE = "%(time)s %(module)s %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


class Formatter:
    def __init__(self, template: str = DEFAULT_TEMPLATE, datefmt: str = DEFAULT_DATEFMT):
        self.template = template
        self.datefmt = datefmt

    def fields(self, record: Record) -> Dict[str, Any]:
        return {
            "id": record.id,
            "time": record.time.strftime(self.datefmt),
            "module": record.module,
            "level": record.level_name,
            "levelno": int(record.level),
            "message": record.render(),
        }

    def format(self, record: Record) -> str:
        try:
            return self.template % self.fields(record)
        except (KeyError, TypeError, ValueError):
            return record.render()

    def __repr__(self) -> str:
        return f"Formatter({self.template!r})"
