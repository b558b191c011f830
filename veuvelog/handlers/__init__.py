from .console import ConsoleHandler
from .rich_console import RichConsoleHandler

__all__ = ["ConsoleHandler", "RichConsoleHandler"]
