"""Tokens to markdown: segment, dispatch, render."""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from ch.context import RunContext
from ch.entries import Entry
from ch.registry import SubcommandRegistry
from ch.render import render
from ch.segmenter import segment
from ch.subcommands import build_registry


def collect_entries(
    tokens: Sequence[str],
    context: RunContext,
    registry: SubcommandRegistry | None = None,
) -> list[Entry]:
    """Run every subcommand in input order and concatenate their entries."""

    registry = registry or build_registry()
    entries: list[Entry] = []
    for invocation in segment(tokens):
        produced = registry.dispatch(invocation, context)
        logger.debug("pipeline.segment name={} entries={}", invocation[0], len(produced))
        entries.extend(produced)
    return entries


def build_markdown(
    tokens: Sequence[str],
    context: RunContext,
    registry: SubcommandRegistry | None = None,
) -> str:
    return render(collect_entries(tokens, context, registry))
