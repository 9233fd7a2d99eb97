"""Split a flat argument list into subcommand invocations."""

from __future__ import annotations

from collections.abc import Iterable

from ch.errors import MissingSubcommandError

SEPARATOR = ","

Segment = tuple[str, ...]


def segment(tokens: Iterable[str]) -> list[Segment]:
    """Group tokens into segments using comma rules.

    A token that is exactly ``,`` closes the current segment and is dropped.
    A token ending in ``,`` contributes its text without the comma and then
    closes the segment. A comma anywhere else in a token is literal.
    """

    segments: list[Segment] = []
    pending: list[str] = []

    def flush() -> None:
        if not pending:
            return
        if not pending[0]:
            raise MissingSubcommandError(pending)
        segments.append(tuple(pending))
        pending.clear()

    for raw in tokens:
        token = raw.strip()
        if token == SEPARATOR:
            flush()
            continue
        if token.endswith(SEPARATOR):
            word = token[: -len(SEPARATOR)]
            if word:
                pending.append(word)
            flush()
            continue
        pending.append(token)

    flush()
    return segments
