"""sinkjoin CLI: Typer-based command-line interface.

Provides the ``sinkjoin`` command with subcommands for joining
arguments or file lines to stdout and for computing joined sizes.

Diagnostics go to stderr through Rich; stdout carries only joined output.
"""
