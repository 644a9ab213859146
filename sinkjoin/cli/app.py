"""Main Typer application: imports and registers all CLI commands.

Entry point: ``sinkjoin`` (configured via pyproject.toml console_scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from sinkjoin.cli.commands.join_cmd import lines_cmd, strings_cmd
from sinkjoin.config import settings
from sinkjoin.core.sizing import joined_size

app = typer.Typer(
    name="sinkjoin",
    help="sinkjoin: join strings straight into a writer.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    """Configure logging for every subcommand."""
    logging.basicConfig(
        level="DEBUG" if verbose else settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# Register subcommands
app.command(name="strings", help="Join arguments to stdout.")(strings_cmd)
app.command(name="lines", help="Join the lines of a file to stdout.")(lines_cmd)


@app.command(name="size", help="Print the byte size of the joined arguments.")
def size_cmd(
    elements: list[str] = typer.Argument(None, help="Strings to measure."),
    sep: str = typer.Option("", "--sep", "-s", help="Separator placed between elements."),
    encoding: str = typer.Option(
        None, "--encoding", "-e", help="Encoding to measure in (default: configured)."
    ),
) -> None:
    """Print the number of bytes the joined arguments occupy."""
    typer.echo(joined_size(elements or [], sep, encoding=encoding))


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
