"""Clipboard access over pyperclip."""

from __future__ import annotations

from typing import Protocol

import pyperclip

from ch.errors import ClipboardError


class Clipboard(Protocol):
    def read(self) -> str: ...

    def write(self, text: str) -> None: ...


class SystemClipboard:
    """Clipboard backed by the platform mechanism pyperclip detects."""

    def read(self) -> str:
        try:
            content = pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"unable to read from clipboard: {exc}") from exc
        return content or ""

    def write(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"unable to copy to clipboard: {exc}") from exc
