"""Application-level exception types for ch."""

from __future__ import annotations


class ChError(Exception):
    """Base exception for ch."""


class ConfigurationError(ChError):
    """Raised when command-line flags are missing or contradictory."""


class MissingSubcommandError(ChError):
    """Raised when comma rules produce an invocation without a subcommand name."""

    def __init__(self, tokens: list[str] | None = None) -> None:
        self.tokens = list(tokens or [])
        super().__init__("no subcommand provided")


class NoSubcommandProvidedError(MissingSubcommandError):
    """Raised when an empty segment reaches the dispatcher."""


class UnknownSubcommandError(ChError):
    """Raised when no registered subcommand starts with the given name."""

    def __init__(self, candidate: str) -> None:
        self.candidate = candidate
        super().__init__(f"unknown subcommand: {candidate}")


class AmbiguousSubcommandError(ChError):
    """Raised when more than one registered subcommand starts with the given name."""

    def __init__(self, candidate: str, matches: list[str]) -> None:
        self.candidate = candidate
        self.matches = list(matches)
        super().__init__(f"ambiguous subcommand: {candidate} (matches {', '.join(self.matches)})")


class FileNotFoundInputError(ChError):
    """Raised when a local path given to attach or insert does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"file does not exist: {path}")


class InvalidRemotePathError(ChError):
    """Raised when a host:path argument has an empty host or path."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"invalid remote file path: {raw}")


class RemoteCopyFailedError(ChError):
    """Raised when staging a remote file fails."""

    def __init__(self, raw: str, detail: str) -> None:
        self.raw = raw
        self.detail = detail
        super().__init__(f"failed to copy remote file {raw}: {detail}")


class CommandFailedError(ChError):
    """Raised when an exec command cannot be launched or exits non-zero."""

    def __init__(self, command: str, detail: str, returncode: int | None = None) -> None:
        self.command = command
        self.detail = detail
        self.returncode = returncode
        super().__init__(f"command execution failed: {command}: {detail}")


class ClipboardError(ChError):
    """Raised when the clipboard cannot be read or written."""


class InputReadError(ChError):
    """Raised when a local input file cannot be read."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"failed to read {path}: {detail}")


class OutputWriteError(ChError):
    """Raised when the rendered markdown cannot be written to its destination."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"failed to write output to {path}: {detail}")
