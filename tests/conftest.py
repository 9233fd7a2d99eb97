from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from ch.config import Settings
from ch.context import RunContext
from ch.process import CompletedCommand


class FakeRunner:
    """ProcessRunner that records argv and answers from a handler."""

    def __init__(self, handler: Callable[[list[str]], CompletedCommand] | None = None) -> None:
        self.calls: list[list[str]] = []
        self._handler = handler

    def run(self, argv: Sequence[str]) -> CompletedCommand:
        argv = list(argv)
        self.calls.append(argv)
        if self._handler is None:
            return CompletedCommand(argv=tuple(argv), returncode=0, stdout="", stderr="")
        return self._handler(argv)


class FakeClipboard:
    def __init__(self, content: str = "") -> None:
        self.content = content
        self.written: list[str] = []

    def read(self) -> str:
        return self.content

    def write(self, text: str) -> None:
        self.written.append(text)
        self.content = text


def completed(argv: Sequence[str], *, returncode: int = 0, stdout: str = "", stderr: str = "") -> CompletedCommand:
    return CompletedCommand(argv=tuple(argv), returncode=returncode, stdout=stdout, stderr=stderr)


def scp_writing(contents: dict[str, str]) -> Callable[[list[str]], CompletedCommand]:
    """Handler that fakes `scp host:path target` by writing known contents."""

    def _handler(argv: list[str]) -> CompletedCommand:
        _, source, target = argv
        if source not in contents:
            return completed(argv, returncode=1, stderr=f"scp: {source}: No such file or directory")
        Path(target).write_text(contents[source], encoding="utf-8")
        return completed(argv)

    return _handler


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, shell="/bin/sh")


@pytest.fixture
def staging_dir(tmp_path: Path) -> Path:
    path = tmp_path / "staging"
    path.mkdir()
    return path


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def context(staging_dir: Path, settings: Settings, runner: FakeRunner, clipboard: FakeClipboard) -> RunContext:
    return RunContext(staging_dir=staging_dir, settings=settings, runner=runner, clipboard=clipboard)
