import pytest
from veuvelog.cli import main


def test_cli_emits_line(capsys):
    assert main(["--no-color", "--level", "error", "disk", "full"]) == 0
    assert capsys.readouterr().out == "[ERROR] disk full\n"


def test_cli_threshold_filters(capsys):
    assert main(["--no-color", "--threshold", "warning", "--level", "info", "quiet"]) == 0
    assert capsys.readouterr().out == ""


def test_cli_rich_format(capsys):
    assert main(["--rich", "--name", "deploy", "--format", "%(module)s|%(message)s", "done"]) == 0
    assert capsys.readouterr().out.endswith("deploy|done\n")


def test_cli_rejects_unknown_level():
    with pytest.raises(SystemExit) as exc:
        main(["--level", "shouty", "x"])
    assert exc.value.code == 2
