# Ensure project root is on sys.path for tests
from __future__ import annotations
import sys, pathlib
import pytest

root = pathlib.Path(__file__).resolve().parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from veuvelog.core.context import LoggingContext
from veuvelog.core.levels import Level


class Recorder:
    """Test handler remembering what it was given, in call order."""
    def __init__(self, name: str, level: Level = Level.DEBUG, journal: list | None = None):
        self.name = name
        self.level = level
        self.journal = journal if journal is not None else []
        self.messages: list[str] = []
        self.closed = 0

    def handle(self, record):
        self.messages.append(record.message)
        self.journal.append((self.name, record.id, record.message))

    def close(self):
        self.closed += 1


@pytest.fixture
def context():
    return LoggingContext()


@pytest.fixture
def recorder_factory():
    journal: list = []
    def make(name: str, level: Level = Level.DEBUG) -> Recorder:
        return Recorder(name, level, journal)
    make.journal = journal
    return make


@pytest.fixture(autouse=True)
def _plain_environment(monkeypatch, tmp_path):
    for var in ("VEUVELOG_LEVEL", "VEUVELOG_COLOR_DISABLED", "VEUVELOG_RICH", "FORCE_COLOR", "TTY_COMPATIBLE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
