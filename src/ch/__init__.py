"""ch - construct markdown chat messages from subcommands."""

from .entries import Entry, File, Message, Output
from .pipeline import build_markdown, collect_entries
from .render import render
from .segmenter import segment

__version__ = "0.1.0"

__all__ = ["Entry", "File", "Message", "Output", "build_markdown", "collect_entries", "render", "segment"]
