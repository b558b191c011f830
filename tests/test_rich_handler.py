import io
from datetime import datetime
from rich.console import Console
from veuvelog.core.formatter import Formatter
from veuvelog.core.handler import FormattableHandler, as_formatter
from veuvelog.core.levels import Level
from veuvelog.handlers.console import ConsoleHandler
from veuvelog.handlers.rich_console import RichConsoleHandler


def make_console():
    buf = io.StringIO()
    return Console(file=buf, force_terminal=False, no_color=True, width=200), buf


def test_rich_handler_uses_its_formatter(context):
    console, buf = make_console()
    h = RichConsoleHandler(Level.INFO, formatter=Formatter("%(module)s: %(message)s"), console=console)
    log = context.get_logger("svc")
    log.push_handler(h)
    log.debug("hidden")
    log.errorf("boom %s", "now")
    assert buf.getvalue() == "[ERROR] svc: boom now\n"


def test_default_formatter_has_timestamp_and_name(context):
    console, buf = make_console()
    log = context.get_logger("api")
    log.push_handler(RichConsoleHandler(Level.DEBUG, console=console))
    before = datetime.now().strftime("%Y-%m-%d")
    log.info("ready")
    line = buf.getvalue()
    assert line.startswith("[INFO] " + before)
    assert line.rstrip("\n").endswith(" api ready")


def test_capability_probe():
    console, _ = make_console()
    rich_handler = RichConsoleHandler(console=console)
    assert isinstance(rich_handler, FormattableHandler)
    assert as_formatter(rich_handler) is rich_handler.formatter
    assert as_formatter(ConsoleHandler()) is None
