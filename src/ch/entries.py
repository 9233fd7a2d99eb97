"""Entry model: one unit of renderable output."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class Message:
    """Literal text rendered as a paragraph."""

    text: str


@dataclass(frozen=True)
class File:
    """Reference to a file whose content is read at render time.

    ``storage_path`` is where the bytes live; ``original_path`` is the label
    shown in the document. They differ only for files staged from a remote host.
    """

    storage_path: Path
    original_path: str

    @classmethod
    def local(cls, path: Path | str) -> File:
        return cls(storage_path=Path(path), original_path=str(path))


@dataclass(frozen=True)
class Output:
    """Captured standard output of an external command."""

    text: str


Entry = Union[Message, File, Output]
