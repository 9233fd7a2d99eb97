"""Command-line surface for ch."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from ch.clipboard import SystemClipboard
from ch.config import load_settings
from ch.context import open_run_context
from ch.errors import ChError, ConfigurationError, OutputWriteError
from ch.logging_utils import configure_logging
from ch.pipeline import build_markdown
from ch.process import SubprocessRunner
from ch.subcommands import build_registry

STDOUT_TARGET = "-"

USAGE_HEADER = """\
ch - A tool for constructing chat messages for easy pasting into AI chat UIs.

ch allows you to combine messages, file contents, and command outputs into a
formatted markdown suitable for AI chat interactions.

Usage: ch [flags] subcommand [, subcommand ...]

Flags (one of -c or -o is required):
  -c           Copy the generated markdown to the clipboard
  -o file      Write the output to the specified file (overwriting).
  -o -         Write the output to stdout.
  -help        Show this message.

Subcommands (any unambiguous prefix works):"""

USAGE_FOOTER = """\
  attach and insert accept remote paths prefixed with a hostname (host:path/to/file).

Comma separation rules:
  - A comma at the end of a word ends that command and is not included in the word.
  - A comma alone in a word ends that command and is not included as a word.
  - A comma within a word is just part of that word.

Examples:
  ch -c say "Please review", attach file1.py, say "Thank you!"
  ch -o output.md say "Here are the changes:", insert changes.txt, attach src/
  ch -c attach remote-host:/path/to/file.txt, say "Remote file attached."
  ch -c insert remote-host:/path/to/file.txt, say "Contents of remote file:"
  ch -c exec ls -l, say "Directory listing:", attach ."""


def usage_text() -> str:
    rows = [f"  {descriptor.usage}" for descriptor in build_registry().descriptors()]
    return "\n".join([USAGE_HEADER, *rows, USAGE_FOOTER])


def _show_usage(value: bool) -> None:
    if value:
        typer.echo(usage_text())
        raise typer.Exit()


app = typer.Typer(name="ch", add_completion=False, rich_markup_mode="rich")


@app.command(
    context_settings={
        "allow_interspersed_args": False,
        "ignore_unknown_options": True,
        "help_option_names": [],
    }
)
def run(
    tokens: Optional[list[str]] = typer.Argument(None, help="Subcommands separated by commas"),  # noqa: B008
    copy: bool = typer.Option(False, "-c", help="Copy the generated markdown to the clipboard"),
    output: Optional[str] = typer.Option(None, "-o", metavar="FILE", help="Write the output to FILE ('-' for stdout)"),
    show_help: bool = typer.Option(
        False, "-help", "--help", is_eager=True, expose_value=False, callback=_show_usage, help="Show usage"
    ),
) -> None:
    """Construct a markdown chat message from subcommands."""

    settings = load_settings()
    configure_logging(settings.log_level)
    try:
        _check_destination(copy, output)
        clipboard = SystemClipboard()
        with open_run_context(settings, runner=SubprocessRunner(), clipboard=clipboard) as context:
            markdown = build_markdown(tokens or [], context)

        if copy:
            clipboard.write(markdown)
            typer.echo("Markdown copied to the clipboard.")
        elif output == STDOUT_TARGET:
            typer.echo(markdown, nl=False)
        else:
            _write_output(Path(str(output)), markdown)
            typer.echo(f"Markdown written to file: {output}")
    except ChError as exc:
        logger.debug("run.failed error={}", exc)
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(1) from exc


def _check_destination(copy: bool, output: str | None) -> None:
    if not copy and not output:
        raise ConfigurationError("either -c or -o must be specified")
    if copy and output:
        raise ConfigurationError("only one of -c or -o may be specified")


def _write_output(path: Path, markdown: str) -> None:
    try:
        path.write_text(markdown, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(str(path), str(exc)) from exc
