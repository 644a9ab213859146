"""``sinkjoin strings`` and ``sinkjoin lines``: join to stdout.

Both commands stream through ``join_strings`` into stdout, so nothing is
concatenated in memory before being written.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console

from sinkjoin.config import settings
from sinkjoin.core.joiner import join_strings
from sinkjoin.sinks.stream import BinaryStreamSink, TextStreamSink

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)


def _stdout_sink(encoding: str | None) -> BinaryStreamSink | TextStreamSink:
    """Binary stdout, so the join itself encodes with *encoding*."""
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        return TextStreamSink(sys.stdout, encoding=encoding)
    sys.stdout.flush()
    return BinaryStreamSink(buffer)


def _fail(written: int, error: BaseException) -> NoReturn:
    err_console.print(f"[red]Write failed after {written} bytes:[/red] {error}")
    raise typer.Exit(code=1)


def _emit(elements: list[str], sep: str, encoding: str | None, newline: bool) -> None:
    sink = _stdout_sink(encoding)
    result = join_strings(sink, elements, sep, encoding=encoding)
    if not result.ok:
        _fail(result.written, result.error)

    written = result.written
    try:
        if newline:
            written += sink.write("\n".encode(encoding or settings.encoding))
        if isinstance(sink, BinaryStreamSink):
            sink.stream.flush()
    except OSError as exc:
        _fail(written, exc)
    logger.info("wrote %d bytes from %d elements", written, len(elements))


def strings_cmd(
    elements: list[str] = typer.Argument(None, help="Strings to join."),
    sep: str = typer.Option("", "--sep", "-s", help="Separator placed between elements."),
    encoding: str = typer.Option(
        None, "--encoding", "-e", help="Output encoding (default: configured)."
    ),
    newline: bool = typer.Option(
        True, "--newline/--no-newline", help="Terminate the output with a newline."
    ),
) -> None:
    """Join the given strings with SEP and write them to stdout."""
    _emit(elements or [], sep, encoding, newline)


def lines_cmd(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="File to read."),
    sep: str = typer.Option(",", "--sep", "-s", help="Separator placed between lines."),
    encoding: str = typer.Option(
        None, "--encoding", "-e", help="File and output encoding (default: configured)."
    ),
    newline: bool = typer.Option(
        True, "--newline/--no-newline", help="Terminate the output with a newline."
    ),
) -> None:
    """Join the lines of PATH with SEP and write them to stdout."""
    text = path.read_text(encoding=encoding or settings.encoding)
    _emit(text.splitlines(), sep, encoding, newline)
