"""Markdown rendering of entries."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from ch.entries import Entry, File, Message, Output

FENCE = "```"
FRAGMENT_SEPARATOR = "\n"


def render_entry(entry: Entry) -> str | None:
    """Render one entry to a fragment ending in a newline.

    Returns ``None`` for a file that can no longer be read; the caller drops it.
    """

    if isinstance(entry, Message):
        return entry.text.strip() + "\n"
    if isinstance(entry, Output):
        return entry.text.strip() + "\n"
    if isinstance(entry, File):
        try:
            content = entry.storage_path.read_bytes().decode("utf-8", errors="replace")
        except OSError as exc:
            logger.warning("render.skip path={} error={}", entry.original_path, exc)
            return None
        return f"`{entry.original_path}`\n{FENCE}\n{content}{FENCE}\n"
    raise TypeError(f"Unsupported entry type: {type(entry).__name__}")


def render(entries: Iterable[Entry]) -> str:
    """Join entry fragments with one blank line and end with a single newline."""

    fragments = [fragment for fragment in (render_entry(entry) for entry in entries) if fragment is not None]
    return FRAGMENT_SEPARATOR.join(fragments).strip() + "\n"
