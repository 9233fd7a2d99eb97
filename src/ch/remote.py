"""Remote ``host:path`` arguments and their staging."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from ch.context import RunContext
from ch.errors import InvalidRemotePathError, RemoteCopyFailedError

REMOTE_MARKER = ":"


@dataclass(frozen=True)
class RemotePath:
    host: str
    path: str

    def __str__(self) -> str:
        return f"{self.host}{REMOTE_MARKER}{self.path}"


def is_remote(raw: str) -> bool:
    return REMOTE_MARKER in raw


def parse_remote_path(raw: str) -> RemotePath:
    """Split ``host:path`` at the first colon."""

    host, _, path = raw.partition(REMOTE_MARKER)
    if not host or not path:
        raise InvalidRemotePathError(raw)
    return RemotePath(host=host, path=path)


def stage_remote_file(context: RunContext, remote: RemotePath) -> Path:
    """Copy a remote file into the staging directory and return the staged path."""

    try:
        target = context.new_staging_file()
        argv = [context.settings.scp_command, str(remote), str(target)]
        logger.debug("remote.copy host={} path={} target={}", remote.host, remote.path, target)
        result = context.runner.run(argv)
    except OSError as exc:
        raise RemoteCopyFailedError(str(remote), str(exc)) from exc
    if not result.ok:
        output = (result.stdout + result.stderr).strip() or "(empty)"
        raise RemoteCopyFailedError(str(remote), f"exit={result.returncode}\n{output}")
    return target
