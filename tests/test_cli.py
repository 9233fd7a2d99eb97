import importlib
import os
from pathlib import Path

import pytest
from conftest import FakeClipboard, FakeRunner, completed
from typer.testing import CliRunner

cli_module = importlib.import_module("ch.cli")


@pytest.fixture
def clipboard(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> FakeClipboard:
    fake = FakeClipboard("from clipboard")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli_module, "SystemClipboard", lambda: fake)
    monkeypatch.setattr(cli_module, "SubprocessRunner", lambda: FakeRunner(lambda argv: completed(argv, stdout="ran\n")))
    return fake


def test_stdout_output(clipboard: FakeClipboard) -> None:
    result = CliRunner().invoke(cli_module.app, ["-o", "-", "say", "hello,", "paste"])
    assert result.exit_code == 0
    assert result.stdout == "hello\n\nfrom clipboard\n"


def test_copy_to_clipboard(clipboard: FakeClipboard) -> None:
    result = CliRunner().invoke(cli_module.app, ["-c", "say", "Please", "review"])
    assert result.exit_code == 0
    assert clipboard.written == ["Please review\n"]
    assert "Markdown copied to the clipboard." in result.output


def test_write_to_file(clipboard: FakeClipboard, tmp_path: Path) -> None:
    source = tmp_path / "notes.txt"
    source.write_text("note body\n", encoding="utf-8")
    target = tmp_path / "out.md"

    result = CliRunner().invoke(cli_module.app, ["-o", str(target), "insert", str(source), ",", "exec", "make"])

    assert result.exit_code == 0
    assert target.read_text(encoding="utf-8") == "note body\n\nran\n"
    assert f"Markdown written to file: {target}" in result.output


def test_flags_after_subcommand_belong_to_subcommand(clipboard: FakeClipboard) -> None:
    result = CliRunner().invoke(cli_module.app, ["-o", "-", "say", "-c", "flag"])
    assert result.exit_code == 0
    assert result.stdout == "-c flag\n"


def test_destination_is_required(clipboard: FakeClipboard) -> None:
    result = CliRunner().invoke(cli_module.app, ["say", "hi"])
    assert result.exit_code == 1
    assert "either -c or -o must be specified" in result.output


def test_copy_and_output_are_exclusive(clipboard: FakeClipboard) -> None:
    result = CliRunner().invoke(cli_module.app, ["-c", "-o", "-", "say", "hi"])
    assert result.exit_code == 1
    assert "only one of -c or -o" in result.output


def test_error_writes_nothing(clipboard: FakeClipboard, tmp_path: Path) -> None:
    target = tmp_path / "out.md"
    result = CliRunner().invoke(cli_module.app, ["-o", str(target), "say", "hi,", "attach", str(tmp_path / "missing")])
    assert result.exit_code == 1
    assert "file does not exist" in result.output
    assert not target.exists()


def test_unknown_subcommand_reported(clipboard: FakeClipboard) -> None:
    result = CliRunner().invoke(cli_module.app, ["-c", "shout", "hi"])
    assert result.exit_code == 1
    assert "unknown subcommand: shout" in result.output
    assert clipboard.written == []


def test_help_lists_subcommands(clipboard: FakeClipboard) -> None:
    result = CliRunner().invoke(cli_module.app, ["-help"])
    assert result.exit_code == 0
    assert "Usage: ch [flags] subcommand [, subcommand ...]" in result.output
    for name in ("say", "attach", "insert", "exec", "paste"):
        assert f"  {name} " in result.output


def test_unreadable_input_reports_error(clipboard: FakeClipboard, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    locked = str(tmp_path / "locked.txt")
    real_stat = os.stat

    def _stat(path, *args, **kwargs):
        if os.fspath(path) == locked:
            raise PermissionError(13, "Permission denied", locked)
        return real_stat(path, *args, **kwargs)

    monkeypatch.setattr(os, "stat", _stat)
    result = CliRunner().invoke(cli_module.app, ["-o", "-", "attach", locked])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert f"error: failed to read {locked}" in result.output
    assert "Traceback" not in result.output
