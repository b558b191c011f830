import io
import os
import pytest
from veuvelog.core.levels import Level
from veuvelog.core.record import Record
from veuvelog.handlers.console import ConsoleHandler, COLOR_DISABLED_ENV, ERROR_COLOR, INFO_COLOR, RESET, WARNING_COLOR

posix_only = pytest.mark.skipif(os.name == "nt", reason="colors are disabled on Windows")


def test_end_to_end_plain(context, capsys):
    log = context.get_logger("svc")
    log.push_handler(ConsoleHandler(Level.INFO, color=False))
    log.debugf("x=%d", 1)
    assert capsys.readouterr().out == ""
    log.errorf("boom %s", "now")
    assert capsys.readouterr().out == "[ERROR] boom now\n"


@posix_only
def test_color_palette():
    h = ConsoleHandler(Level.DEBUG)
    assert h.level_tag(Level.ERROR) == f"[{ERROR_COLOR}ERROR{RESET}]"
    assert h.level_tag(Level.CRITICAL) == f"[{ERROR_COLOR}CRITICAL{RESET}]"
    assert h.level_tag(Level.WARNING) == f"[{WARNING_COLOR}WARNING{RESET}]"
    for lvl in (Level.DEBUG, Level.INFO, Level.NOTICE):
        assert h.level_tag(lvl) == f"[{INFO_COLOR}{lvl.name}{RESET}]"
    assert len({ERROR_COLOR, WARNING_COLOR, INFO_COLOR}) == 3


@posix_only
def test_colored_line(capsys):
    ConsoleHandler(Level.DEBUG).handle(Record(1, "svc", Level.WARNING, ("careful",)))
    assert capsys.readouterr().out == f"[{WARNING_COLOR}WARNING{RESET}] careful\n"


def test_env_disables_color(monkeypatch):
    monkeypatch.setenv(COLOR_DISABLED_ENV, "1")
    assert ConsoleHandler(Level.DEBUG).level_tag(Level.INFO) == "[INFO]"


def test_unknown_level_plain():
    assert ConsoleHandler(Level.DEBUG).level_tag(9) == "[UNKNOWN]"


def test_explicit_stream_and_close():
    buf = io.StringIO()
    h = ConsoleHandler(Level.DEBUG, color=False, stream=buf)
    h.handle(Record(1, "svc", Level.NOTICE, ("a", "b")))
    h.close()
    assert buf.getvalue() == "[NOTICE] a b\n"


def test_stderr_handler_writes_to_redirected_stderr(capsys):
    h = ConsoleHandler(Level.WARNING, color=False, stderr=True)
    h.handle(Record(1, "veuvelog", Level.WARNING, ("bad file",)))
    out = capsys.readouterr()
    assert out.out == "" and out.err == "[WARNING] bad file\n"


def test_explicit_stream_wins_over_stderr_flag():
    buf = io.StringIO()
    ConsoleHandler(Level.DEBUG, color=False, stream=buf, stderr=True).handle(Record(1, "svc", Level.INFO, ("x",)))
    assert buf.getvalue() == "[INFO] x\n"
