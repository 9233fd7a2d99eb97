"""Run-scoped context handed to every subcommand."""

from __future__ import annotations

import os
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from ch.clipboard import Clipboard, SystemClipboard
from ch.config import Settings
from ch.process import ProcessRunner, SubprocessRunner


@dataclass(frozen=True)
class RunContext:
    """Collaborators and the staging directory owned by one run."""

    staging_dir: Path
    settings: Settings = field(default_factory=Settings)
    runner: ProcessRunner = field(default_factory=SubprocessRunner)
    clipboard: Clipboard = field(default_factory=SystemClipboard)

    def new_staging_file(self) -> Path:
        """Reserve an empty file inside the staging directory."""
        fd, name = tempfile.mkstemp(prefix="file-", dir=self.staging_dir)
        os.close(fd)
        return Path(name)


@contextmanager
def open_run_context(
    settings: Settings,
    *,
    runner: ProcessRunner | None = None,
    clipboard: Clipboard | None = None,
) -> Iterator[RunContext]:
    """Create the staging directory and remove it when the run ends, on every exit path."""

    staging_dir = Path(tempfile.mkdtemp(prefix=settings.staging_prefix))
    logger.debug("staging.create path={}", staging_dir)
    try:
        yield RunContext(
            staging_dir=staging_dir,
            settings=settings,
            runner=runner or SubprocessRunner(),
            clipboard=clipboard or SystemClipboard(),
        )
    finally:
        shutil.rmtree(staging_dir, ignore_errors=True)
        logger.debug("staging.remove path={}", staging_dir)
