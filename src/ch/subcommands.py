"""Built-in subcommands and the registry that holds them."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator, Sequence
from pathlib import Path

from loguru import logger

from ch.context import RunContext
from ch.entries import Entry, File, Message, Output
from ch.errors import CommandFailedError, FileNotFoundInputError, InputReadError
from ch.registry import SubcommandDescriptor, SubcommandRegistry
from ch.remote import is_remote, parse_remote_path, stage_remote_file

HIDDEN_PREFIX = "."


def say(context: RunContext, args: Sequence[str]) -> list[Entry]:
    """Emit the arguments joined by single spaces."""
    return [Message(" ".join(args))]


def attach(context: RunContext, args: Sequence[str]) -> list[Entry]:
    """Attach files, directories of files, or remote files."""

    entries: list[Entry] = []
    for raw in args:
        if is_remote(raw):
            remote = parse_remote_path(raw)
            staged = stage_remote_file(context, remote)
            logger.debug("attach.remote host={} path={}", remote.host, remote.path)
            entries.append(File(storage_path=staged, original_path=str(remote)))
            continue

        path = Path(raw)
        if stat.S_ISDIR(_stat_local(raw).st_mode):
            files = list(_walk_files(path, skip_hidden=context.settings.skip_hidden))
            logger.debug("attach.directory path={} files={}", raw, len(files))
            entries.extend(File.local(file_path) for file_path in files)
        else:
            entries.append(File.local(raw))
    return entries


def _stat_local(raw: str) -> os.stat_result:
    try:
        return os.stat(raw)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise FileNotFoundInputError(raw) from exc
    except OSError as exc:
        raise InputReadError(raw, str(exc)) from exc


def _walk_files(directory: Path, *, skip_hidden: bool) -> Iterator[Path]:
    # Symlinked directories are not descended into.
    try:
        with os.scandir(directory) as scanned:
            children = sorted(scanned, key=lambda child: child.name)
        for child in children:
            if child.is_dir(follow_symlinks=False):
                yield from _walk_files(Path(child.path), skip_hidden=skip_hidden)
            elif child.is_file():
                if skip_hidden and child.name.startswith(HIDDEN_PREFIX):
                    continue
                yield Path(child.path)
    except OSError as exc:
        raise InputReadError(str(directory), str(exc)) from exc


def insert(context: RunContext, args: Sequence[str]) -> list[Entry]:
    """Insert the contents of local or remote files verbatim."""

    entries: list[Entry] = []
    for raw in args:
        if is_remote(raw):
            path = stage_remote_file(context, parse_remote_path(raw))
        else:
            path = Path(raw)
            _stat_local(raw)
        entries.append(Message(_read_text(path, label=raw)))
    return entries


def _read_text(path: Path, *, label: str) -> str:
    try:
        if path.is_dir():
            raise InputReadError(label, "is a directory")
        return path.read_bytes().decode("utf-8", errors="replace")
    except OSError as exc:
        raise InputReadError(label, str(exc)) from exc


def exec_(context: RunContext, args: Sequence[str]) -> list[Entry]:
    """Run the arguments as one shell command line and capture stdout."""

    command = " ".join(args)
    if not command.strip():
        raise CommandFailedError(command, "no command given")

    argv = [context.settings.resolve_shell(), "-c", command]
    logger.debug("exec.run command={}", command)
    try:
        result = context.runner.run(argv)
    except OSError as exc:
        raise CommandFailedError(command, str(exc)) from exc
    if not result.ok:
        detail = result.stderr.strip() or "(empty)"
        raise CommandFailedError(command, f"exit={result.returncode}\n{detail}", returncode=result.returncode)
    return [Output(result.stdout)]


def paste(context: RunContext, args: Sequence[str]) -> list[Entry]:
    """Emit the current clipboard text."""

    if args:
        logger.warning("paste.ignored_args args={}", list(args))
    return [Message(context.clipboard.read())]


def build_registry() -> SubcommandRegistry:
    return SubcommandRegistry(
        [
            SubcommandDescriptor("say", say, "say message       Emit a message"),
            SubcommandDescriptor("attach", attach, "attach path       Attach a file or directory of files"),
            SubcommandDescriptor("insert", insert, "insert file       Insert the contents of a file"),
            SubcommandDescriptor("exec", exec_, "exec command      Execute a command line through the shell"),
            SubcommandDescriptor("paste", paste, "paste             Insert the contents of the clipboard"),
        ]
    )
