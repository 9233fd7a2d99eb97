"""Synchronous process execution behind a narrow interface."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from loguru import logger


@dataclass(frozen=True)
class CompletedCommand:
    """Result of one finished process."""

    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ProcessRunner(Protocol):
    """Run a command to completion and capture its output.

    Implementations raise ``OSError`` when the program cannot be launched.
    """

    def run(self, argv: Sequence[str]) -> CompletedCommand: ...


class SubprocessRunner:
    """ProcessRunner backed by :func:`subprocess.run`. No timeout is applied."""

    def run(self, argv: Sequence[str]) -> CompletedCommand:
        logger.debug("process.run argv={}", list(argv))
        result = subprocess.run(  # noqa: S603
            list(argv),
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
        logger.debug("process.done argv={} returncode={}", list(argv), result.returncode)
        return CompletedCommand(
            argv=tuple(argv),
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )
