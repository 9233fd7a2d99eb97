"""Subcommand registry and prefix dispatch."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from loguru import logger

from ch.context import RunContext
from ch.entries import Entry
from ch.errors import AmbiguousSubcommandError, NoSubcommandProvidedError, UnknownSubcommandError

Producer = Callable[[RunContext, Sequence[str]], list[Entry]]


@dataclass(frozen=True)
class SubcommandDescriptor:
    """Subcommand name, usage line and producer."""

    name: str
    producer: Producer
    usage: str = ""


class SubcommandRegistry:
    """Fixed, ordered table of subcommands."""

    def __init__(self, descriptors: Iterable[SubcommandDescriptor]) -> None:
        self._descriptors = tuple(descriptors)
        names = [descriptor.name for descriptor in self._descriptors]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate subcommand names: {names}")

    def descriptors(self) -> tuple[SubcommandDescriptor, ...]:
        return self._descriptors

    def names(self) -> list[str]:
        return [descriptor.name for descriptor in self._descriptors]

    def resolve(self, candidate: str) -> SubcommandDescriptor:
        """Find the single subcommand whose name starts with ``candidate``."""

        if not candidate:
            raise NoSubcommandProvidedError()
        matches = [descriptor for descriptor in self._descriptors if descriptor.name.startswith(candidate)]
        if not matches:
            raise UnknownSubcommandError(candidate)
        if len(matches) > 1:
            raise AmbiguousSubcommandError(candidate, [descriptor.name for descriptor in matches])
        return matches[0]

    def dispatch(self, segment: Sequence[str], context: RunContext) -> list[Entry]:
        if not segment:
            raise NoSubcommandProvidedError()
        descriptor = self.resolve(segment[0])
        args = list(segment[1:])
        logger.debug("dispatch name={} args={}", descriptor.name, args)
        return descriptor.producer(context, args)
